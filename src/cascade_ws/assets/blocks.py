"""Block asset shapes."""

from typing import Optional

from ..client.errors import EmptyValueError
from .base import ContainedAsset
from .types import AssetType, Category


class Block(ContainedAsset):
    """Common base of all block types."""
    CATEGORY = Category.BLOCK

    @property
    def metadata_set_id(self) -> Optional[str]:
        return self._property.get("metadataSetId")

    @property
    def metadata_set_path(self) -> Optional[str]:
        return self._property.get("metadataSetPath")


class FeedBlock(Block):
    TYPE = AssetType.FEED_BLOCK

    @property
    def feed_url(self) -> Optional[str]:
        return self._property.get("feedURL")


class IndexBlock(Block):
    TYPE = AssetType.INDEX_BLOCK

    @property
    def index_block_type(self) -> Optional[str]:
        return self._property.get("indexBlockType")

    @property
    def index_folder_id(self) -> Optional[str]:
        return self._property.get("indexedFolderId")

    @property
    def max_rendered_assets(self) -> Optional[int]:
        value = self._property.get("maxRenderedAssets")
        return int(value) if value is not None else None


class TextBlock(Block):
    TYPE = AssetType.TEXT_BLOCK

    @property
    def text(self) -> str:
        return self._property.get("text") or ""

    def set_text(self, text: str) -> "TextBlock":
        if text is None or text.strip() == "":
            raise EmptyValueError("The text cannot be empty")
        self._property["text"] = text
        return self


class XhtmlDataDefinitionBlock(Block):
    TYPE = AssetType.XHTML_DATA_DEFINITION_BLOCK

    @property
    def structured_data(self) -> Optional[dict]:
        return self._property.get("structuredData")

    @property
    def xhtml(self) -> Optional[str]:
        return self._property.get("xhtml")

    def has_structured_data(self) -> bool:
        return self._property.get("structuredData") is not None

    def set_xhtml(self, xhtml: str) -> "XhtmlDataDefinitionBlock":
        self._property["xhtml"] = xhtml
        return self


class XmlBlock(Block):
    TYPE = AssetType.XML_BLOCK

    @property
    def xml(self) -> str:
        return self._property.get("xml") or ""

    def set_xml(self, xml: str) -> "XmlBlock":
        if xml is None or xml.strip() == "":
            raise EmptyValueError("The XML cannot be empty")
        self._property["xml"] = xml
        return self
