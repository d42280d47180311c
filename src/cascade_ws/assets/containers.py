"""Folder and container asset shapes.

Every container lists its children as ``children.child``, which arrives as
null, a bare child or an array of children.
"""

from typing import Any, Dict, List, Optional

from ..client.errors import NoSuchChildError
from . import wire
from .base import ContainedAsset
from .properties import Child
from .types import AssetType, Category


class Container(ContainedAsset):
    """An asset holding other assets."""
    CATEGORY = Category.CONTAINER

    def _load(self, property_bag: Dict[str, Any]) -> None:
        super()._load(property_bag)
        self._children: List[Child] = [
            Child.from_wire(data)
            for data in wire.nested(property_bag, "children", "child")
        ]

    @property
    def children(self) -> List[Child]:
        return list(self._children)

    def child_count(self) -> int:
        return len(self._children)

    def has_child(self, key: str) -> bool:
        return self._find_child(key) is not None

    def get_child(self, key: str) -> Child:
        """Return the child whose id or path is key.

        Raises:
            NoSuchChildError: If no child matches
        """
        child = self._find_child(key)
        if child is None:
            raise NoSuchChildError(key)
        return child

    def children_of_type(self, asset_type: AssetType) -> List[Child]:
        return [c for c in self._children if c.type == str(asset_type)]

    def _find_child(self, key: str) -> Optional[Child]:
        key = key.strip('/')
        for child in self._children:
            if child.id == key or (child.path_path or "").strip('/') == key:
                return child
        return None

    def to_wire(self) -> Dict[str, Any]:
        data = super().to_wire()
        # children are read-only on the server side
        data.pop("children", None)
        return data


class AssetFactoryContainer(Container):
    TYPE = AssetType.ASSET_FACTORY_CONTAINER


class ConnectorContainer(Container):
    TYPE = AssetType.CONNECTOR_CONTAINER


class ContentTypeContainer(Container):
    TYPE = AssetType.CONTENT_TYPE_CONTAINER


class DataDefinitionContainer(Container):
    TYPE = AssetType.DATA_DEFINITION_CONTAINER


class MetadataSetContainer(Container):
    TYPE = AssetType.METADATA_SET_CONTAINER


class PageConfigurationSetContainer(Container):
    TYPE = AssetType.PAGE_CONFIGURATION_SET_CONTAINER


class PublishSetContainer(Container):
    TYPE = AssetType.PUBLISH_SET_CONTAINER


class SiteDestinationContainer(Container):
    TYPE = AssetType.SITE_DESTINATION_CONTAINER


class TransportContainer(Container):
    TYPE = AssetType.TRANSPORT_CONTAINER


class WorkflowDefinitionContainer(Container):
    TYPE = AssetType.WORKFLOW_DEFINITION_CONTAINER


class Folder(Container):
    TYPE = AssetType.FOLDER

    @property
    def should_be_indexed(self) -> bool:
        return bool(self._property.get("shouldBeIndexed") or False)

    @property
    def should_be_published(self) -> bool:
        return bool(self._property.get("shouldBePublished") or False)

    @property
    def metadata(self) -> Optional[dict]:
        return self._property.get("metadata")
