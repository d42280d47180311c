"""Format asset shapes."""

from ..client.errors import EmptyValueError
from .base import ContainedAsset
from .types import AssetType, Category


class Format(ContainedAsset):
    """Common base of script and XSLT formats."""
    CATEGORY = Category.FORMAT


class ScriptFormat(Format):
    TYPE = AssetType.SCRIPT_FORMAT

    @property
    def script(self) -> str:
        return self._property.get("script") or ""

    def set_script(self, script: str) -> "ScriptFormat":
        if script is None or script.strip() == "":
            raise EmptyValueError("The script cannot be empty")
        self._property["script"] = script
        return self


class XsltFormat(Format):
    TYPE = AssetType.XSLT_FORMAT

    @property
    def xml(self) -> str:
        return self._property.get("xml") or ""

    def set_xml(self, xml: str) -> "XsltFormat":
        if xml is None or xml.strip() == "":
            raise EmptyValueError("The XML cannot be empty")
        self._property["xml"] = xml
        return self
