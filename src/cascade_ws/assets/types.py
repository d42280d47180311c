"""Asset type tags and their wire property names.

The tables here are the fixed, process-wide description of every asset type
the Cascade web services know about. They are built once at import time and
exposed as read-only mappings.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Union

from ..client.errors import NoSuchTypeError


class AssetType(str, Enum):
    """Wire type tags, in the order the service declares them.

    The order matters: type discovery probes candidates in this order and the
    earliest match wins.
    """
    ASSET_FACTORY = "assetfactory"
    ASSET_FACTORY_CONTAINER = "assetfactorycontainer"
    CONNECTOR_CONTAINER = "connectorcontainer"
    CONTENT_TYPE = "contenttype"
    CONTENT_TYPE_CONTAINER = "contenttypecontainer"
    DATA_DEFINITION = "datadefinition"
    DATA_DEFINITION_CONTAINER = "datadefinitioncontainer"
    DESTINATION = "destination"
    FACEBOOK_CONNECTOR = "facebookconnector"
    FEED_BLOCK = "block_FEED"
    FILE = "file"
    FOLDER = "folder"
    GOOGLE_ANALYTICS_CONNECTOR = "googleanalyticsconnector"
    GROUP = "group"
    INDEX_BLOCK = "block_INDEX"
    MESSAGE = "message"
    METADATA_SET = "metadataset"
    METADATA_SET_CONTAINER = "metadatasetcontainer"
    PAGE = "page"
    PAGE_CONFIGURATION = "pageconfiguration"
    PAGE_CONFIGURATION_SET = "pageconfigurationset"
    PAGE_CONFIGURATION_SET_CONTAINER = "pageconfigurationsetcontainer"
    PAGE_REGION = "pageregion"
    PUBLISH_SET = "publishset"
    PUBLISH_SET_CONTAINER = "publishsetcontainer"
    REFERENCE = "reference"
    ROLE = "role"
    SCRIPT_FORMAT = "format_SCRIPT"
    SITE = "site"
    SITE_DESTINATION_CONTAINER = "sitedestinationcontainer"
    SYMLINK = "symlink"
    TARGET = "target"
    TEMPLATE = "template"
    TEXT_BLOCK = "block_TEXT"
    DATABASE_TRANSPORT = "transport_db"
    FILE_SYSTEM_TRANSPORT = "transport_fs"
    FTP_TRANSPORT = "transport_ftp"
    TRANSPORT_CONTAINER = "transportcontainer"
    USER = "user"
    WORDPRESS_CONNECTOR = "wordpressconnector"
    WORKFLOW = "workflow"
    WORKFLOW_DEFINITION = "workflowdefinition"
    WORKFLOW_DEFINITION_CONTAINER = "workflowdefinitioncontainer"
    XHTML_DATA_DEFINITION_BLOCK = "block_XHTML_DATADEFINITION"
    XML_BLOCK = "block_XML"
    XSLT_FORMAT = "format_XSLT"

    def __str__(self) -> str:
        return self.value


class Category(str, Enum):
    """Capability tag carried by every concrete asset shape."""
    BLOCK = "block"
    FORMAT = "format"
    CONTAINER = "container"
    LINKABLE = "linkable"
    LAYOUT = "layout"
    DEFINITION = "definition"
    PUBLISHING = "publishing"
    TRANSPORT = "transport"
    CONNECTOR = "connector"
    PRINCIPAL = "principal"


class TypeInfo(NamedTuple):
    """Static description of one envelope asset type."""
    asset_type: AssetType
    property_name: str
    category: Category


T = AssetType
C = Category

# Envelope types only. message, pageconfiguration, pageregion and workflow
# are addressable but never appear as an envelope field.
_TYPE_INFOS: List[TypeInfo] = [
    TypeInfo(T.ASSET_FACTORY, "assetFactory", C.DEFINITION),
    TypeInfo(T.ASSET_FACTORY_CONTAINER, "assetFactoryContainer", C.CONTAINER),
    TypeInfo(T.CONNECTOR_CONTAINER, "connectorContainer", C.CONTAINER),
    TypeInfo(T.CONTENT_TYPE, "contentType", C.DEFINITION),
    TypeInfo(T.CONTENT_TYPE_CONTAINER, "contentTypeContainer", C.CONTAINER),
    TypeInfo(T.DATA_DEFINITION, "dataDefinition", C.DEFINITION),
    TypeInfo(T.DATA_DEFINITION_CONTAINER, "dataDefinitionContainer", C.CONTAINER),
    TypeInfo(T.DESTINATION, "destination", C.PUBLISHING),
    TypeInfo(T.FACEBOOK_CONNECTOR, "facebookConnector", C.CONNECTOR),
    TypeInfo(T.FEED_BLOCK, "feedBlock", C.BLOCK),
    TypeInfo(T.FILE, "file", C.LINKABLE),
    TypeInfo(T.FOLDER, "folder", C.CONTAINER),
    TypeInfo(T.GOOGLE_ANALYTICS_CONNECTOR, "googleAnalyticsConnector", C.CONNECTOR),
    TypeInfo(T.GROUP, "group", C.PRINCIPAL),
    TypeInfo(T.INDEX_BLOCK, "indexBlock", C.BLOCK),
    TypeInfo(T.METADATA_SET, "metadataSet", C.DEFINITION),
    TypeInfo(T.METADATA_SET_CONTAINER, "metadataSetContainer", C.CONTAINER),
    TypeInfo(T.PAGE, "page", C.LINKABLE),
    TypeInfo(T.PAGE_CONFIGURATION_SET, "pageConfigurationSet", C.LAYOUT),
    TypeInfo(T.PAGE_CONFIGURATION_SET_CONTAINER, "pageConfigurationSetContainer", C.CONTAINER),
    TypeInfo(T.PUBLISH_SET, "publishSet", C.PUBLISHING),
    TypeInfo(T.PUBLISH_SET_CONTAINER, "publishSetContainer", C.CONTAINER),
    TypeInfo(T.REFERENCE, "reference", C.LINKABLE),
    TypeInfo(T.ROLE, "role", C.PRINCIPAL),
    TypeInfo(T.SCRIPT_FORMAT, "scriptFormat", C.FORMAT),
    TypeInfo(T.SITE, "site", C.PRINCIPAL),
    TypeInfo(T.SITE_DESTINATION_CONTAINER, "siteDestinationContainer", C.CONTAINER),
    TypeInfo(T.SYMLINK, "symlink", C.LINKABLE),
    TypeInfo(T.TARGET, "target", C.PUBLISHING),
    TypeInfo(T.TEMPLATE, "template", C.LAYOUT),
    TypeInfo(T.TEXT_BLOCK, "textBlock", C.BLOCK),
    TypeInfo(T.DATABASE_TRANSPORT, "databaseTransport", C.TRANSPORT),
    TypeInfo(T.FILE_SYSTEM_TRANSPORT, "fileSystemTransport", C.TRANSPORT),
    TypeInfo(T.FTP_TRANSPORT, "ftpTransport", C.TRANSPORT),
    TypeInfo(T.TRANSPORT_CONTAINER, "transportContainer", C.CONTAINER),
    TypeInfo(T.USER, "user", C.PRINCIPAL),
    TypeInfo(T.WORDPRESS_CONNECTOR, "wordPressConnector", C.CONNECTOR),
    TypeInfo(T.WORKFLOW_DEFINITION, "workflowDefinition", C.DEFINITION),
    TypeInfo(T.WORKFLOW_DEFINITION_CONTAINER, "workflowDefinitionContainer", C.CONTAINER),
    TypeInfo(T.XHTML_DATA_DEFINITION_BLOCK, "xhtmlDataDefinitionBlock", C.BLOCK),
    TypeInfo(T.XML_BLOCK, "xmlBlock", C.BLOCK),
    TypeInfo(T.XSLT_FORMAT, "xsltFormat", C.FORMAT),
]

TYPE_INFO: Mapping[AssetType, TypeInfo] = MappingProxyType(
    {info.asset_type: info for info in _TYPE_INFOS}
)
PROPERTY_TYPES: Mapping[str, AssetType] = MappingProxyType(
    {info.property_name: info.asset_type for info in _TYPE_INFOS}
)

# Plain strings, so free-form tags passed by callers compare by value
NON_PATH_ADDRESSABLE = frozenset(t.value for t in (T.GROUP, T.ROLE, T.SITE, T.USER))

BLOCK_TYPES = tuple(i.asset_type for i in _TYPE_INFOS if i.category is C.BLOCK)
FORMAT_TYPES = tuple(i.asset_type for i in _TYPE_INFOS if i.category is C.FORMAT)


def to_asset_type(value: Union[AssetType, str]) -> AssetType:
    """Coerce a wire tag to AssetType.

    Raises:
        NoSuchTypeError: If the tag is not one of the known types
    """
    if isinstance(value, AssetType):
        return value
    try:
        return AssetType(value)
    except ValueError:
        raise NoSuchTypeError(str(value))


def _info(asset_type: Union[AssetType, str]) -> TypeInfo:
    resolved = to_asset_type(asset_type)
    info = TYPE_INFO.get(resolved)
    if info is None:
        raise NoSuchTypeError(resolved.value)
    return info


def property_field_for(asset_type: Union[AssetType, str]) -> str:
    """Return the envelope field holding the property bag of a type.

    Example:
        >>> property_field_for(AssetType.TEXT_BLOCK)
        'textBlock'

    Raises:
        NoSuchTypeError: For unknown tags and for types without an envelope field
    """
    return _info(asset_type).property_name


def category_for(asset_type: Union[AssetType, str]) -> Category:
    """Return the capability category of an envelope type."""
    return _info(asset_type).category


def type_for_property(property_name: str) -> Optional[AssetType]:
    """Reverse lookup: envelope field name -> asset type, or None."""
    return PROPERTY_TYPES.get(property_name)


def is_non_path_addressable(asset_type: Union[AssetType, str]) -> bool:
    """True for types whose natural key is a name or id, not a site path."""
    return str(asset_type) in NON_PATH_ADDRESSABLE


def envelope_types() -> List[AssetType]:
    """All envelope types in declaration order."""
    return [info.asset_type for info in _TYPE_INFOS]


def property_names() -> List[str]:
    """All envelope field names in declaration order."""
    return [info.property_name for info in _TYPE_INFOS]


def envelope_property_of(envelope: Optional[Dict]) -> Optional[str]:
    """Return the first populated registered field of an envelope, if any."""
    if not envelope:
        return None
    for name in property_names():
        if envelope.get(name) is not None:
            return name
    return None
