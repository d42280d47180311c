"""Property classes nested inside asset property bags.

These are the composite values that asset shapes rebuild from the wire:
paths, container children, page regions and page configurations. Each one
knows how to read itself from a wire dict and write itself back.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from ..client.errors import (
    InvalidArgumentError,
    NoSuchPageRegionError,
)
from . import wire
from .types import BLOCK_TYPES, FORMAT_TYPES, Category

if TYPE_CHECKING:
    from ..client.service import AssetOperationService
    from .base import Asset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    """The ``path`` of a child entry."""
    path: Optional[str] = None
    site_id: Optional[str] = None
    site_name: Optional[str] = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Path":
        return cls(
            path=data.get("path"),
            site_id=data.get("siteId"),
            site_name=data.get("siteName"),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {"path": self.path, "siteId": self.site_id, "siteName": self.site_name}


@dataclass(frozen=True)
class Child:
    """A lightweight reference found in container listings.

    Attributes:
        type: Wire type tag of the child
        id: Child asset ID, if known
        path: Child Path, if known
        recycled: Whether the child sits in the recycle bin
    """
    type: str
    id: Optional[str] = None
    path: Optional[Path] = None
    recycled: bool = False

    def __post_init__(self):
        if self.id is None and self.path is None:
            raise InvalidArgumentError("A child needs an id or a path")

    @classmethod
    def from_wire(cls, data: Optional[Dict[str, Any]]) -> "Child":
        """Build a Child from a wire ``child`` element.

        Raises:
            InvalidArgumentError: If data is None or carries neither id nor path
        """
        if data is None:
            raise InvalidArgumentError("Cannot build a child from a null value")
        path_data = data.get("path")
        return cls(
            type=str(data.get("type")),
            id=data.get("id"),
            path=Path.from_wire(path_data) if path_data else None,
            recycled=bool(data.get("recycled") or False),
        )

    @property
    def path_path(self) -> Optional[str]:
        return self.path.path if self.path else None

    @property
    def site_name(self) -> Optional[str]:
        return self.path.site_name if self.path else None

    def to_wire(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        if self.path is not None:
            data["path"] = self.path.to_wire()
        data["type"] = self.type
        data["recycled"] = self.recycled
        return data

    def get_asset(self, service: "AssetOperationService") -> "Asset":
        """Load the asset this child refers to, by id when available."""
        if self.id is not None:
            return service.get_asset(self.type, self.id)
        return service.get_asset(self.type, self.path.path, self.path.site_name)


@dataclass
class PageRegion:
    """A named slot binding an optional block and format to a layout.

    ``no_block``/``no_format`` explicitly disassociate the slot; they are not
    the same thing as an absent block or format.
    """
    name: str
    id: Optional[str] = None
    block_id: Optional[str] = None
    block_path: Optional[str] = None
    block_recycled: bool = False
    no_block: bool = False
    format_id: Optional[str] = None
    format_path: Optional[str] = None
    format_recycled: bool = False
    no_format: bool = False
    service: Optional["AssetOperationService"] = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def from_wire(
        cls, data: Dict[str, Any], service: Optional["AssetOperationService"] = None
    ) -> "PageRegion":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            block_id=data.get("blockId"),
            block_path=data.get("blockPath"),
            block_recycled=bool(data.get("blockRecycled") or False),
            no_block=bool(data.get("noBlock") or False),
            format_id=data.get("formatId"),
            format_path=data.get("formatPath"),
            format_recycled=bool(data.get("formatRecycled") or False),
            no_format=bool(data.get("noFormat") or False),
            service=service,
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "blockId": self.block_id,
            "blockPath": self.block_path,
            "blockRecycled": self.block_recycled,
            "noBlock": self.no_block,
            "formatId": self.format_id,
            "formatPath": self.format_path,
            "formatRecycled": self.format_recycled,
            "noFormat": self.no_format,
        }

    def set_block(
        self,
        block: Optional["Asset"] = None,
        block_recycled: bool = False,
        no_block: bool = False,
    ) -> "PageRegion":
        """Attach a block, or detach it when block is None.

        Detaching only clears id and path; use ``no_block`` to disassociate
        a block inherited from the configuration level.

        Raises:
            InvalidArgumentError: If the asset is not a block or flags are not bool
        """
        if not isinstance(block_recycled, bool) or not isinstance(no_block, bool):
            raise InvalidArgumentError("block_recycled and no_block must be booleans")
        if block is not None:
            if block.CATEGORY is not Category.BLOCK:
                raise InvalidArgumentError(f"The asset {block.name} is not a block")
            self.block_id = block.id
            self.block_path = block.path
            self.block_recycled = block_recycled
            self.no_block = no_block
        else:
            self.block_id = None
            self.block_path = None
        return self

    def set_format(
        self,
        fmt: Optional["Asset"] = None,
        format_recycled: bool = False,
        no_format: bool = False,
    ) -> "PageRegion":
        """Attach a format, or detach it when fmt is None.

        Raises:
            InvalidArgumentError: If the asset is not a format or flags are not bool
        """
        if not isinstance(format_recycled, bool) or not isinstance(no_format, bool):
            raise InvalidArgumentError("format_recycled and no_format must be booleans")
        if fmt is not None:
            if fmt.CATEGORY is not Category.FORMAT:
                raise InvalidArgumentError(f"The asset {fmt.name} is not a format")
            self.format_id = fmt.id
            self.format_path = fmt.path
            self.format_recycled = format_recycled
            self.no_format = no_format
        else:
            self.format_id = None
            self.format_path = None
        return self

    def set_no_block(self, value: bool) -> "PageRegion":
        if not isinstance(value, bool):
            raise InvalidArgumentError(f"The value {value} must be a boolean")
        self.no_block = value
        return self

    def set_no_format(self, value: bool) -> "PageRegion":
        if not isinstance(value, bool):
            raise InvalidArgumentError(f"The value {value} must be a boolean")
        self.no_format = value
        return self

    def get_block(self) -> Optional["Asset"]:
        """Load the attached block, or None if there is none."""
        if not self.block_id or self.service is None:
            return None
        asset_type = self.service.discover_type(self.block_id, candidates=BLOCK_TYPES)
        if asset_type is None:
            logger.warning(f"Region {self.name}: block {self.block_id} not found")
            return None
        return self.service.get_asset(asset_type, self.block_id)

    def get_format(self) -> Optional["Asset"]:
        """Load the attached format, or None if there is none."""
        if not self.format_id or self.service is None:
            return None
        asset_type = self.service.discover_type(self.format_id, candidates=FORMAT_TYPES)
        if asset_type is None:
            logger.warning(f"Region {self.name}: format {self.format_id} not found")
            return None
        return self.service.get_asset(asset_type, self.format_id)


class PageRegions:
    """Ordered page regions plus a name-keyed view of the same objects.

    The list keeps wire order for serialization; the dict is for lookup.
    Replacing a region updates both views.
    """

    def __init__(self, regions: Optional[List[PageRegion]] = None):
        self._ordered: List[PageRegion] = []
        self._by_name: Dict[str, PageRegion] = {}
        for region in regions or []:
            self._ordered.append(region)
            self._by_name[region.name] = region

    @classmethod
    def from_wire(
        cls, container: Optional[Dict[str, Any]],
        service: Optional["AssetOperationService"] = None,
    ) -> "PageRegions":
        """Rebuild from a dict holding ``pageRegions.pageRegion``."""
        return cls([
            PageRegion.from_wire(data, service)
            for data in wire.nested(container, "pageRegions", "pageRegion")
        ])

    def __iter__(self) -> Iterator[PageRegion]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        return list(self._by_name.keys())

    def get(self, name: str) -> PageRegion:
        """Return the region called name.

        Raises:
            NoSuchPageRegionError: If there is no such region
        """
        if name not in self._by_name:
            raise NoSuchPageRegionError(name)
        return self._by_name[name]

    def replace(self, name: str, region: PageRegion) -> None:
        """Put region in the slot called name, in both views.

        Raises:
            NoSuchPageRegionError: If there is no such region
        """
        if name not in self._by_name:
            raise NoSuchPageRegionError(name)
        old = self._by_name[name]
        self._by_name[name] = region
        for index, existing in enumerate(self._ordered):
            if existing is old:
                self._ordered[index] = region
                break

    def to_wire(self, always_list: bool = True) -> Dict[str, Any]:
        """Return ``{"pageRegion": ...}`` for an outbound property bag."""
        return {
            "pageRegion": wire.flatten(
                [region.to_wire() for region in self._ordered], always_list
            )
        }


class PageConfiguration:
    """One output configuration of a page configuration set or a page.

    Wire keys this class does not model are carried through unchanged.
    """

    def __init__(
        self, data: Dict[str, Any], service: Optional["AssetOperationService"] = None
    ):
        if data is None:
            raise InvalidArgumentError("Cannot build a page configuration from a null value")
        self._data = dict(data)
        self.page_regions = PageRegions.from_wire(data, service)

    @property
    def id(self) -> Optional[str]:
        return self._data.get("id")

    @property
    def name(self) -> str:
        return self._data.get("name")

    @property
    def default_configuration(self) -> bool:
        return bool(self._data.get("defaultConfiguration") or False)

    @property
    def template_id(self) -> Optional[str]:
        return self._data.get("templateId")

    @property
    def template_path(self) -> Optional[str]:
        return self._data.get("templatePath")

    @property
    def format_id(self) -> Optional[str]:
        return self._data.get("formatId")

    @property
    def format_path(self) -> Optional[str]:
        return self._data.get("formatPath")

    @property
    def output_extension(self) -> Optional[str]:
        return self._data.get("outputExtension")

    @property
    def serialization_type(self) -> Optional[str]:
        return self._data.get("serializationType")

    @property
    def publishable(self) -> bool:
        return bool(self._data.get("publishable") or False)

    def set_output_extension(self, extension: str) -> "PageConfiguration":
        if not extension or not extension.strip():
            raise InvalidArgumentError("The output extension cannot be empty")
        self._data["outputExtension"] = extension
        return self

    def set_publishable(self, value: bool) -> "PageConfiguration":
        if not isinstance(value, bool):
            raise InvalidArgumentError(f"The value {value} must be a boolean")
        self._data["publishable"] = value
        return self

    def get_page_region(self, name: str) -> PageRegion:
        return self.page_regions.get(name)

    def has_page_region(self, name: str) -> bool:
        return name in self.page_regions

    def page_region_names(self) -> List[str]:
        return self.page_regions.names()

    def to_wire(self) -> Dict[str, Any]:
        data = dict(self._data)
        data["pageRegions"] = self.page_regions.to_wire()
        return data
