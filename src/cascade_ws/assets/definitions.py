"""Definition and publishing asset shapes.

Asset factories, content types, data definitions, metadata sets and workflow
definitions describe how other assets are built; destinations, targets and
publish sets describe where they go.
"""

from typing import Any, Dict, List, Optional

from ..client.errors import EmptyValueError
from . import wire
from .base import ContainedAsset
from .properties import Child
from .types import AssetType, Category


class AssetFactory(ContainedAsset):
    TYPE = AssetType.ASSET_FACTORY
    CATEGORY = Category.DEFINITION

    @property
    def asset_type(self) -> Optional[str]:
        return self._property.get("assetType")

    @property
    def base_asset_id(self) -> Optional[str]:
        return self._property.get("baseAssetId")

    @property
    def workflow_mode(self) -> Optional[str]:
        return self._property.get("workflowMode")


class ContentType(ContainedAsset):
    TYPE = AssetType.CONTENT_TYPE
    CATEGORY = Category.DEFINITION

    @property
    def page_configuration_set_id(self) -> Optional[str]:
        return self._property.get("pageConfigurationSetId")

    @property
    def metadata_set_id(self) -> Optional[str]:
        return self._property.get("metadataSetId")

    @property
    def data_definition_id(self) -> Optional[str]:
        return self._property.get("dataDefinitionId")


class DataDefinition(ContainedAsset):
    TYPE = AssetType.DATA_DEFINITION
    CATEGORY = Category.DEFINITION

    @property
    def xml(self) -> str:
        return self._property.get("xml") or ""

    def set_xml(self, xml: str) -> "DataDefinition":
        if xml is None or xml.strip() == "":
            raise EmptyValueError("The XML cannot be empty")
        self._property["xml"] = xml
        return self


class MetadataSet(ContainedAsset):
    TYPE = AssetType.METADATA_SET
    CATEGORY = Category.DEFINITION

    def dynamic_field_names(self) -> List[str]:
        definitions = wire.nested(
            self._property, "dynamicMetadataFieldDefinitions", "dynamicMetadataFieldDefinition"
        )
        return [definition.get("name") for definition in definitions]


class WorkflowDefinition(ContainedAsset):
    TYPE = AssetType.WORKFLOW_DEFINITION
    CATEGORY = Category.DEFINITION

    @property
    def xml(self) -> str:
        return self._property.get("xml") or ""

    @property
    def naming_behavior(self) -> Optional[str]:
        return self._property.get("namingBehavior")

    def set_xml(self, xml: str) -> "WorkflowDefinition":
        if xml is None or xml.strip() == "":
            raise EmptyValueError("The XML cannot be empty")
        self._property["xml"] = xml
        return self


class Destination(ContainedAsset):
    TYPE = AssetType.DESTINATION
    CATEGORY = Category.PUBLISHING

    @property
    def transport_id(self) -> Optional[str]:
        return self._property.get("transportId")

    @property
    def enabled(self) -> bool:
        return bool(self._property.get("enabled") or False)

    def set_enabled(self, value: bool) -> "Destination":
        self._property["enabled"] = bool(value)
        return self


class Target(ContainedAsset):
    TYPE = AssetType.TARGET
    CATEGORY = Category.PUBLISHING

    @property
    def output_extension(self) -> Optional[str]:
        return self._property.get("outputExtension")

    @property
    def base_folder_id(self) -> Optional[str]:
        return self._property.get("baseFolderId")


class PublishSet(ContainedAsset):
    """A publish set: files, folders and pages published together."""
    TYPE = AssetType.PUBLISH_SET
    CATEGORY = Category.PUBLISHING

    def _load(self, property_bag: Dict[str, Any]) -> None:
        super()._load(property_bag)
        self._members: Dict[str, List[Child]] = {
            kind: [
                Child.from_wire(data)
                for data in wire.nested(property_bag, f"{kind}s", "publishableAssetIdentifier")
            ]
            for kind in ("file", "folder", "page")
        }

    @property
    def files(self) -> List[Child]:
        return list(self._members["file"])

    @property
    def folders(self) -> List[Child]:
        return list(self._members["folder"])

    @property
    def pages(self) -> List[Child]:
        return list(self._members["page"])

    def to_wire(self) -> Dict[str, Any]:
        data = super().to_wire()
        for kind, members in self._members.items():
            data[f"{kind}s"] = {
                "publishableAssetIdentifier": wire.flatten(
                    [member.to_wire() for member in members]
                )
            }
        return data
