"""Template, page configuration set and page shapes.

These are the assets that carry page regions. A template owns its regions
directly; configuration sets and pages own them through page configurations.
Regions are rebuilt into an ordered list plus a name map on load and written
back as an array on edit.
"""

import logging
from typing import Any, Dict, List, Optional

from ..client.errors import (
    EmptyValueError,
    InvalidArgumentError,
    NoSuchPageConfigurationError,
)
from . import wire
from .base import Asset, ContainedAsset
from .properties import PageConfiguration, PageRegion, PageRegions
from .types import AssetType, Category

logger = logging.getLogger(__name__)


class Template(ContainedAsset):
    """A template: XML layout plus its page regions."""
    TYPE = AssetType.TEMPLATE
    CATEGORY = Category.LAYOUT

    def _load(self, property_bag: Dict[str, Any]) -> None:
        super()._load(property_bag)
        self._page_regions = PageRegions.from_wire(property_bag, self._service)

    @property
    def xml(self) -> str:
        return self._property.get("xml") or ""

    @property
    def format_id(self) -> Optional[str]:
        return self._property.get("formatId")

    @property
    def format_path(self) -> Optional[str]:
        return self._property.get("formatPath")

    @property
    def format_recycled(self) -> bool:
        return bool(self._property.get("formatRecycled") or False)

    @property
    def target_id(self) -> Optional[str]:
        return self._property.get("targetId")

    @property
    def target_path(self) -> Optional[str]:
        return self._property.get("targetPath")

    @property
    def page_regions(self) -> List[PageRegion]:
        return list(self._page_regions)

    def page_region_names(self) -> List[str]:
        return self._page_regions.names()

    def has_page_region(self, name: str) -> bool:
        return name in self._page_regions

    def get_page_region(self, name: str) -> PageRegion:
        """Return the region called name.

        Raises:
            NoSuchPageRegionError: If the template has no such region
        """
        return self._page_regions.get(name)

    def get_page_region_block(self, name: str) -> Optional[Asset]:
        return self.get_page_region(name).get_block()

    def get_page_region_format(self, name: str) -> Optional[Asset]:
        return self.get_page_region(name).get_format()

    def get_format(self) -> Optional[Asset]:
        if not self.format_id:
            return None
        return self._service.get_asset(AssetType.XSLT_FORMAT, self.format_id)

    def set_page_region(self, name: str, page_region: PageRegion) -> "Template":
        """Replace the region called name in both the list and the map.

        Raises:
            NoSuchPageRegionError: If the template has no such region
        """
        self._page_regions.replace(name, page_region)
        return self

    def set_page_region_block(
        self,
        name: str,
        block: Optional[Asset] = None,
        block_recycled: bool = False,
        no_block: bool = False,
    ) -> "Template":
        region = self.get_page_region(name)
        region.set_block(block, block_recycled, no_block)
        return self.set_page_region(name, region)

    def set_page_region_format(
        self,
        name: str,
        fmt: Optional[Asset] = None,
        format_recycled: bool = False,
        no_format: bool = False,
    ) -> "Template":
        region = self.get_page_region(name)
        region.set_format(fmt, format_recycled, no_format)
        return self.set_page_region(name, region)

    def set_format(self, fmt: Optional[Asset] = None) -> "Template":
        """Attach an XSLT format to the template, or detach it with None.

        Raises:
            InvalidArgumentError: If fmt is not an XSLT format
        """
        if fmt is not None:
            if fmt.CATEGORY is not Category.FORMAT or fmt.TYPE is not AssetType.XSLT_FORMAT:
                raise InvalidArgumentError("Only XSLT formats can be attached to a template")
            self._property["formatId"] = fmt.id
            self._property["formatPath"] = fmt.path
        else:
            self._property["formatId"] = None
            self._property["formatPath"] = None
        return self

    def set_xml(self, xml: str) -> "Template":
        if xml is None or xml.strip() == "":
            raise EmptyValueError("The XML cannot be empty")
        self._property["xml"] = xml
        return self

    def page_region_std_for_page_configuration(self) -> Dict[str, Any]:
        """Regions carrying a block or format, shaped for a page configuration.

        The region list goes out by count: omitted when empty, a bare object
        for one region, an array otherwise.
        """
        assigned = [
            region.to_wire() for region in self._page_regions
            if region.block_id is not None or region.format_id is not None
        ]
        if not assigned:
            return {}
        return {"pageRegions": {"pageRegion": wire.flatten(assigned, always_list=False)}}

    def to_wire(self) -> Dict[str, Any]:
        data = super().to_wire()
        data["pageRegions"] = self._page_regions.to_wire()
        return data


class PageConfigurationsMixin:
    """Page configuration handling shared by configuration sets and pages."""

    _property: Dict[str, Any]

    def _load_configurations(self, property_bag: Dict[str, Any], service) -> None:
        self._configurations: List[PageConfiguration] = []
        self._configuration_map: Dict[str, PageConfiguration] = {}
        for data in wire.nested(property_bag, "pageConfigurations", "pageConfiguration"):
            configuration = PageConfiguration(data, service)
            self._configurations.append(configuration)
            self._configuration_map[configuration.name] = configuration

    @property
    def page_configurations(self) -> List[PageConfiguration]:
        return list(self._configurations)

    def page_configuration_names(self) -> List[str]:
        return list(self._configuration_map.keys())

    def has_page_configuration(self, name: str) -> bool:
        return name in self._configuration_map

    def get_page_configuration(self, name: str) -> PageConfiguration:
        """Return the configuration called name.

        Raises:
            NoSuchPageConfigurationError: If there is no such configuration
        """
        if name not in self._configuration_map:
            raise NoSuchPageConfigurationError(name)
        return self._configuration_map[name]

    def get_default_configuration(self) -> Optional[PageConfiguration]:
        for configuration in self._configurations:
            if configuration.default_configuration:
                return configuration
        return None

    def get_page_region(self, configuration_name: str, region_name: str) -> PageRegion:
        return self.get_page_configuration(configuration_name).get_page_region(region_name)

    def get_page_region_names(self, configuration_name: str) -> List[str]:
        return self.get_page_configuration(configuration_name).page_region_names()

    def set_page_region_block(
        self,
        configuration_name: str,
        region_name: str,
        block: Optional[Asset] = None,
        block_recycled: bool = False,
        no_block: bool = False,
    ):
        region = self.get_page_region(configuration_name, region_name)
        region.set_block(block, block_recycled, no_block)
        return self

    def set_page_region_format(
        self,
        configuration_name: str,
        region_name: str,
        fmt: Optional[Asset] = None,
        format_recycled: bool = False,
        no_format: bool = False,
    ):
        region = self.get_page_region(configuration_name, region_name)
        region.set_format(fmt, format_recycled, no_format)
        return self

    def _configurations_to_wire(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["pageConfigurations"] = {
            "pageConfiguration": wire.flatten(
                [configuration.to_wire() for configuration in self._configurations]
            )
        }
        return data


class PageConfigurationSet(PageConfigurationsMixin, ContainedAsset):
    TYPE = AssetType.PAGE_CONFIGURATION_SET
    CATEGORY = Category.LAYOUT

    def _load(self, property_bag: Dict[str, Any]) -> None:
        super()._load(property_bag)
        self._load_configurations(property_bag, self._service)

    def to_wire(self) -> Dict[str, Any]:
        return self._configurations_to_wire(super().to_wire())


class Page(PageConfigurationsMixin, ContainedAsset):
    TYPE = AssetType.PAGE
    CATEGORY = Category.LINKABLE

    def _load(self, property_bag: Dict[str, Any]) -> None:
        super()._load(property_bag)
        self._load_configurations(property_bag, self._service)

    @property
    def content_type_id(self) -> Optional[str]:
        return self._property.get("contentTypeId")

    @property
    def content_type_path(self) -> Optional[str]:
        return self._property.get("contentTypePath")

    @property
    def configuration_set_id(self) -> Optional[str]:
        return self._property.get("configurationSetId")

    @property
    def xhtml(self) -> Optional[str]:
        return self._property.get("xhtml")

    @property
    def structured_data(self) -> Optional[dict]:
        return self._property.get("structuredData")

    @property
    def should_be_published(self) -> bool:
        return bool(self._property.get("shouldBePublished") or False)

    def set_xhtml(self, xhtml: str) -> "Page":
        self._property["xhtml"] = xhtml
        return self

    def to_wire(self) -> Dict[str, Any]:
        data = super().to_wire()
        # a page inherits its configurations unless it overrides them
        if self._property.get("pageConfigurations") is None:
            return data
        return self._configurations_to_wire(data)
