"""Asset type -> concrete shape table."""

from types import MappingProxyType
from typing import Mapping, Type, Union

from ..client.errors import NoSuchTypeError
from .base import Asset
from .blocks import FeedBlock, IndexBlock, TextBlock, XhtmlDataDefinitionBlock, XmlBlock
from .connectors import (
    DatabaseTransport,
    FacebookConnector,
    FileSystemTransport,
    FtpTransport,
    GoogleAnalyticsConnector,
    WordPressConnector,
)
from .containers import (
    AssetFactoryContainer,
    ConnectorContainer,
    ContentTypeContainer,
    DataDefinitionContainer,
    Folder,
    MetadataSetContainer,
    PageConfigurationSetContainer,
    PublishSetContainer,
    SiteDestinationContainer,
    TransportContainer,
    WorkflowDefinitionContainer,
)
from .definitions import (
    AssetFactory,
    ContentType,
    DataDefinition,
    Destination,
    MetadataSet,
    PublishSet,
    Target,
    WorkflowDefinition,
)
from .formats import ScriptFormat, XsltFormat
from .layouts import Page, PageConfigurationSet, Template
from .linkables import File, Reference, Symlink
from .principals import Group, Role, Site, User
from .types import TYPE_INFO, AssetType, to_asset_type

_SHAPE_CLASSES = [
    AssetFactory, AssetFactoryContainer, ConnectorContainer, ContentType,
    ContentTypeContainer, DataDefinition, DataDefinitionContainer, Destination,
    FacebookConnector, FeedBlock, File, Folder, GoogleAnalyticsConnector, Group,
    IndexBlock, MetadataSet, MetadataSetContainer, Page, PageConfigurationSet,
    PageConfigurationSetContainer, PublishSet, PublishSetContainer, Reference,
    Role, ScriptFormat, Site, SiteDestinationContainer, Symlink, Target, Template,
    TextBlock, DatabaseTransport, FileSystemTransport, FtpTransport,
    TransportContainer, User, WordPressConnector, WorkflowDefinition,
    WorkflowDefinitionContainer, XhtmlDataDefinitionBlock, XmlBlock, XsltFormat,
]

SHAPES: Mapping[AssetType, Type[Asset]] = MappingProxyType(
    {shape.TYPE: shape for shape in _SHAPE_CLASSES}
)

# every envelope type has exactly one shape, and its category agrees
assert set(SHAPES) == set(TYPE_INFO)
assert all(SHAPES[t].CATEGORY is TYPE_INFO[t].category for t in SHAPES)


def concrete_shape_for(asset_type: Union[AssetType, str]) -> Type[Asset]:
    """Return the Asset subclass for a type tag.

    Raises:
        NoSuchTypeError: For unknown tags and for types without a shape
    """
    resolved = to_asset_type(asset_type)
    shape = SHAPES.get(resolved)
    if shape is None:
        raise NoSuchTypeError(resolved.value)
    return shape
