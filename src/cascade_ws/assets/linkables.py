"""File, symlink and reference shapes."""

import base64
from typing import Optional

from ..client.errors import InvalidArgumentError
from .base import ContainedAsset
from .types import AssetType, Category


class File(ContainedAsset):
    TYPE = AssetType.FILE
    CATEGORY = Category.LINKABLE

    @property
    def text(self) -> Optional[str]:
        return self._property.get("text")

    @property
    def data(self) -> Optional[bytes]:
        """Binary content. zeep hands base64Binary back as bytes already."""
        value = self._property.get("data")
        if isinstance(value, str):
            return base64.b64decode(value)
        return value

    def set_text(self, text: str) -> "File":
        self._property["text"] = text
        self._property["data"] = None
        return self

    def set_data(self, data: bytes) -> "File":
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidArgumentError("File data must be bytes")
        self._property["data"] = bytes(data)
        self._property["text"] = None
        return self


class Symlink(ContainedAsset):
    TYPE = AssetType.SYMLINK
    CATEGORY = Category.LINKABLE

    @property
    def link_url(self) -> Optional[str]:
        return self._property.get("linkURL")

    def set_link_url(self, url: str) -> "Symlink":
        if not url or not url.strip():
            raise InvalidArgumentError("The link URL cannot be empty")
        self._property["linkURL"] = url
        return self


class Reference(ContainedAsset):
    TYPE = AssetType.REFERENCE
    CATEGORY = Category.LINKABLE

    @property
    def referenced_asset_id(self) -> Optional[str]:
        return self._property.get("referencedAssetId")

    @property
    def referenced_asset_path(self) -> Optional[str]:
        return self._property.get("referencedAssetPath")

    @property
    def referenced_asset_type(self) -> Optional[str]:
        return self._property.get("referencedAssetType")

    def get_referenced_asset(self):
        if not self.referenced_asset_id or not self.referenced_asset_type:
            return None
        return self._service.get_asset(self.referenced_asset_type, self.referenced_asset_id)
