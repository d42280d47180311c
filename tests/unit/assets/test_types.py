"""Unit tests for the asset type registry and shape table."""

import pytest

from cascade_ws.assets.blocks import TextBlock
from cascade_ws.assets.registry import SHAPES, concrete_shape_for
from cascade_ws.assets.types import (
    BLOCK_TYPES,
    FORMAT_TYPES,
    TYPE_INFO,
    AssetType,
    Category,
    category_for,
    envelope_property_of,
    envelope_types,
    is_non_path_addressable,
    property_field_for,
    property_names,
    to_asset_type,
    type_for_property,
)
from cascade_ws.client.errors import NoSuchTypeError

NON_ENVELOPE = [AssetType.MESSAGE, AssetType.PAGE_CONFIGURATION, AssetType.PAGE_REGION, AssetType.WORKFLOW]


class TestAssetType:
    """Wire tags and enum behaviour."""

    def test_forty_six_tags(self):
        assert len(AssetType) == 46

    def test_str_is_wire_tag(self):
        assert str(AssetType.TEXT_BLOCK) == "block_TEXT"
        assert f"{AssetType.DATABASE_TRANSPORT}" == "transport_db"

    def test_compares_with_plain_strings(self):
        assert AssetType.FOLDER == "folder"

    def test_to_asset_type(self):
        assert to_asset_type("format_XSLT") is AssetType.XSLT_FORMAT
        assert to_asset_type(AssetType.PAGE) is AssetType.PAGE

    def test_to_asset_type_unknown(self):
        with pytest.raises(NoSuchTypeError) as exc_info:
            to_asset_type("textblock")
        assert str(exc_info.value) == "The type textblock does not exist"


class TestTypeInfo:
    """Property names and categories."""

    @pytest.mark.parametrize("asset_type,property_name", [
        (AssetType.TEXT_BLOCK, "textBlock"),
        (AssetType.XHTML_DATA_DEFINITION_BLOCK, "xhtmlDataDefinitionBlock"),
        (AssetType.WORDPRESS_CONNECTOR, "wordPressConnector"),
        (AssetType.FILE_SYSTEM_TRANSPORT, "fileSystemTransport"),
        (AssetType.SITE, "site"),
        ("folder", "folder"),
    ])
    def test_property_field_for(self, asset_type, property_name):
        assert property_field_for(asset_type) == property_name

    @pytest.mark.parametrize("asset_type", NON_ENVELOPE)
    def test_types_without_envelope_field(self, asset_type):
        with pytest.raises(NoSuchTypeError):
            property_field_for(asset_type)

    def test_envelope_types(self):
        assert len(envelope_types()) == 42
        assert not set(NON_ENVELOPE) & set(envelope_types())

    def test_property_lookup_is_a_bijection(self):
        names = property_names()
        assert len(set(names)) == len(names)
        for asset_type in envelope_types():
            assert type_for_property(property_field_for(asset_type)) is asset_type

    def test_type_for_unknown_property(self):
        assert type_for_property("widget") is None

    def test_categories(self):
        assert category_for(AssetType.SCRIPT_FORMAT) is Category.FORMAT
        assert category_for(AssetType.TEMPLATE) is Category.LAYOUT
        assert category_for(AssetType.FOLDER) is Category.CONTAINER
        assert BLOCK_TYPES == (
            AssetType.FEED_BLOCK,
            AssetType.INDEX_BLOCK,
            AssetType.TEXT_BLOCK,
            AssetType.XHTML_DATA_DEFINITION_BLOCK,
            AssetType.XML_BLOCK,
        )
        assert FORMAT_TYPES == (AssetType.SCRIPT_FORMAT, AssetType.XSLT_FORMAT)

    @pytest.mark.parametrize("asset_type", ["group", "role", "site", "user", AssetType.USER])
    def test_non_path_addressable(self, asset_type):
        assert is_non_path_addressable(asset_type)

    def test_path_addressable(self):
        assert not is_non_path_addressable(AssetType.FOLDER)

    def test_envelope_property_of(self):
        assert envelope_property_of({"folder": None, "page": {"id": "x"}}) == "page"
        assert envelope_property_of({}) is None
        assert envelope_property_of(None) is None


class TestShapes:
    """Every envelope type has one concrete shape."""

    def test_shape_table_matches_registry(self):
        assert set(SHAPES) == set(TYPE_INFO)

    def test_shape_categories_agree(self):
        for asset_type, shape in SHAPES.items():
            assert shape.TYPE is asset_type
            assert shape.CATEGORY is TYPE_INFO[asset_type].category

    def test_concrete_shape_for(self):
        assert concrete_shape_for("block_TEXT") is TextBlock

    @pytest.mark.parametrize("asset_type", ["widget", AssetType.WORKFLOW])
    def test_concrete_shape_for_missing(self, asset_type):
        with pytest.raises(NoSuchTypeError):
            concrete_shape_for(asset_type)
