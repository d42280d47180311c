"""Base class for typed assets.

An Asset wraps the property bag read from one envelope field together with
the identifier it was read by and the service used to read it. Subclasses add
typed accessors and rebuild composite properties in ``_load``.
"""

import copy
import json
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from ..client.errors import MaterializationError, OperationFailedError
from ..client.identifiers import Identifier
from .types import AssetType, Category, property_field_for

if TYPE_CHECKING:
    from ..client.service import AssetOperationService

logger = logging.getLogger(__name__)


class Asset:
    """A typed asset.

    Class attributes:
        TYPE: Wire type tag handled by the class
        CATEGORY: Capability category, checked by value instead of class names

    Example:
        >>> block = service.get_asset(AssetType.TEXT_BLOCK, "_cascade/blocks/code/text-block", "cascade-admin")
        >>> block.set_text("Hello").edit()
    """

    TYPE: ClassVar[AssetType]
    CATEGORY: ClassVar[Category]

    def __init__(
        self,
        service: "AssetOperationService",
        identifier: Identifier,
        property_bag: Dict[str, Any],
    ):
        """Build the asset from an already-read property bag.

        Args:
            service: Service used for reloads, edits and lookups of related assets
            identifier: Identifier the asset was read by
            property_bag: The envelope field content for this type
        """
        self._service = service
        self._identifier = identifier
        self._property: Dict[str, Any] = {}
        self._load(property_bag)

    def _load(self, property_bag: Dict[str, Any]) -> None:
        """(Re)build state from a property bag. Subclasses extend this."""
        if property_bag is None:
            raise MaterializationError(self.TYPE.value, "empty property bag")
        self._property = property_bag

    @property
    def property_name(self) -> str:
        return property_field_for(self.TYPE)

    @property
    def service(self) -> "AssetOperationService":
        return self._service

    @property
    def identifier(self) -> Identifier:
        return self._identifier

    @property
    def type(self) -> AssetType:
        return self.TYPE

    @property
    def id(self) -> Optional[str]:
        return self._property.get("id")

    @property
    def name(self) -> Optional[str]:
        return self._property.get("name")

    @property
    def path(self) -> Optional[str]:
        return self._property.get("path")

    @property
    def site_id(self) -> Optional[str]:
        return self._property.get("siteId")

    @property
    def site_name(self) -> Optional[str]:
        return self._property.get("siteName")

    def get_property(self) -> Dict[str, Any]:
        """Return the live property bag."""
        return self._property

    def to_wire(self) -> Dict[str, Any]:
        """Return the property bag to send back in an edit.

        Subclasses that rebuilt composite properties write them back here.
        """
        return copy.deepcopy(self._property)

    def reload(self) -> "Asset":
        """Read the asset again and rebuild state from the fresh property bag.

        Raises:
            OperationFailedError: If the read fails
        """
        bag = self._service.retrieve(self._current_identifier(), self.property_name)
        if not self._service.is_successful() or bag is None:
            raise OperationFailedError("read", self._service.message)
        self._load(bag)
        return self

    def edit(self, exception: bool = True) -> "Asset":
        """Send the current state back to the server.

        Args:
            exception: Strict mode. If True, a success="false" reply raises;
                if False the outcome is only recorded on the service.

        Returns:
            The asset, reloaded when the edit succeeded

        Raises:
            OperationFailedError: In strict mode when the edit fails
        """
        self._service.edit({self.property_name: self.to_wire()})
        if not self._service.is_successful():
            logger.warning(
                f"Editing {self.TYPE.value} {self.id} failed: {self._service.message}"
            )
            if exception:
                raise OperationFailedError("edit", self._service.message)
            return self
        return self.reload()

    def _current_identifier(self) -> Identifier:
        # prefer the id: paths change on rename or move
        if self.id:
            return Identifier(type=self.TYPE.value, id=self.id)
        return self._identifier

    def dump(self) -> str:
        """Return the outbound property bag as indented JSON."""
        return json.dumps(self.to_wire(), indent=2, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, path={self.path!r})"


class ContainedAsset(Asset):
    """An asset that lives in a folder or container."""

    @property
    def parent_container_id(self) -> Optional[str]:
        return (
            self._property.get("parentFolderId")
            or self._property.get("parentContainerId")
        )

    @property
    def parent_container_path(self) -> Optional[str]:
        return (
            self._property.get("parentFolderPath")
            or self._property.get("parentContainerPath")
        )

    @property
    def created_by(self) -> Optional[str]:
        return self._property.get("createdBy")

    @property
    def created_date(self) -> Optional[str]:
        return self._property.get("createdDate")

    @property
    def last_modified_by(self) -> Optional[str]:
        return self._property.get("lastModifiedBy")

    @property
    def last_modified_date(self) -> Optional[str]:
        return self._property.get("lastModifiedDate")
