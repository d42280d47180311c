"""Unit tests for cascade_ws.assets.properties module."""

import pytest
from unittest.mock import Mock

from cascade_ws.assets.blocks import TextBlock
from cascade_ws.assets.formats import XsltFormat
from cascade_ws.assets.properties import Child, PageConfiguration, PageRegion, PageRegions, Path
from cascade_ws.assets.types import BLOCK_TYPES, FORMAT_TYPES, AssetType
from cascade_ws.client.errors import InvalidArgumentError, NoSuchPageRegionError
from cascade_ws.client.identifiers import create_identifier
from tests.fixtures.sample_assets import (
    CHILD_PAGE,
    DEFAULT_REGION,
    FOOTER_REGION,
    SITE_NAME,
    TEXT_BLOCK_ID,
    XSLT_FORMAT_ID,
    page_configuration,
    text_block_bag,
    xslt_format_bag,
)


def _text_block(service=None):
    return TextBlock(
        service or Mock(),
        create_identifier(AssetType.TEXT_BLOCK, TEXT_BLOCK_ID),
        text_block_bag(),
    )


def _xslt_format(service=None):
    return XsltFormat(
        service or Mock(),
        create_identifier(AssetType.XSLT_FORMAT, XSLT_FORMAT_ID),
        xslt_format_bag(),
    )


class TestChild:
    """Test cases for container child references."""

    def test_from_wire(self):
        child = Child.from_wire(CHILD_PAGE)

        assert child.type == "page"
        assert child.id == CHILD_PAGE["id"]
        assert child.path == Path(path="index", site_name=SITE_NAME)
        assert child.path_path == "index"
        assert child.site_name == SITE_NAME
        assert child.recycled is False

    def test_from_null_raises(self):
        with pytest.raises(InvalidArgumentError):
            Child.from_wire(None)

    def test_needs_id_or_path(self):
        with pytest.raises(InvalidArgumentError):
            Child.from_wire({"type": "page"})

    def test_to_wire(self):
        child = Child(type="folder", path=Path("about", None, SITE_NAME))
        assert child.to_wire() == {
            "path": {"path": "about", "siteId": None, "siteName": SITE_NAME},
            "type": "folder",
            "recycled": False,
        }

    def test_get_asset_by_id(self):
        service = Mock()
        Child.from_wire(CHILD_PAGE).get_asset(service)
        service.get_asset.assert_called_once_with("page", CHILD_PAGE["id"])

    def test_get_asset_by_path(self):
        service = Mock()
        Child(type="page", path=Path("about", None, SITE_NAME)).get_asset(service)
        service.get_asset.assert_called_once_with("page", "about", SITE_NAME)


class TestPageRegion:
    """Test cases for PageRegion."""

    def test_round_trip_keeps_flags(self):
        data = dict(FOOTER_REGION, noFormat=True)
        region = PageRegion.from_wire(data)

        assert region.no_format is True
        assert region.to_wire() == data

    def test_null_flags_become_false(self):
        region = PageRegion.from_wire({"name": "DEFAULT", "noBlock": None})
        assert region.no_block is False

    def test_set_block(self):
        region = PageRegion(name="DEFAULT")

        region.set_block(_text_block(), no_block=False)

        assert region.block_id == TEXT_BLOCK_ID
        assert region.block_path == "_cascade/blocks/code/text-block"

    def test_set_block_rejects_format(self):
        """Capability is checked by category, not by class name."""
        with pytest.raises(InvalidArgumentError):
            PageRegion(name="DEFAULT").set_block(_xslt_format())

    def test_set_block_rejects_non_bool_flags(self):
        with pytest.raises(InvalidArgumentError):
            PageRegion(name="DEFAULT").set_block(_text_block(), no_block="yes")

    def test_detach_block(self):
        region = PageRegion.from_wire(FOOTER_REGION)

        region.set_block(None)

        assert region.block_id is None
        assert region.block_path is None

    def test_set_format(self):
        region = PageRegion(name="DEFAULT").set_format(_xslt_format())
        assert region.format_id == XSLT_FORMAT_ID

    def test_set_format_rejects_block(self):
        with pytest.raises(InvalidArgumentError):
            PageRegion(name="DEFAULT").set_format(_text_block())

    def test_set_no_block_requires_bool(self):
        region = PageRegion(name="DEFAULT")
        assert region.set_no_block(True).no_block is True
        with pytest.raises(InvalidArgumentError):
            region.set_no_block(1)

    def test_set_no_format_requires_bool(self):
        with pytest.raises(InvalidArgumentError):
            PageRegion(name="DEFAULT").set_no_format("true")

    def test_get_block_discovers_among_block_types(self):
        service = Mock()
        service.discover_type.return_value = AssetType.TEXT_BLOCK
        region = PageRegion.from_wire(FOOTER_REGION, service)

        region.get_block()

        service.discover_type.assert_called_once_with(TEXT_BLOCK_ID, candidates=BLOCK_TYPES)
        service.get_asset.assert_called_once_with(AssetType.TEXT_BLOCK, TEXT_BLOCK_ID)

    def test_get_block_not_found(self):
        service = Mock()
        service.discover_type.return_value = None
        region = PageRegion.from_wire(FOOTER_REGION, service)

        assert region.get_block() is None
        service.get_asset.assert_not_called()

    def test_get_block_without_block(self):
        service = Mock()
        assert PageRegion.from_wire(DEFAULT_REGION, service).get_block() is None
        service.discover_type.assert_not_called()

    def test_get_format_discovers_among_format_types(self):
        service = Mock()
        service.discover_type.return_value = AssetType.XSLT_FORMAT
        region = PageRegion(name="DEFAULT", format_id=XSLT_FORMAT_ID, service=service)

        region.get_format()

        service.discover_type.assert_called_once_with(XSLT_FORMAT_ID, candidates=FORMAT_TYPES)

    def test_service_not_part_of_equality(self):
        assert PageRegion.from_wire(DEFAULT_REGION, Mock()) == PageRegion.from_wire(DEFAULT_REGION)


class TestPageRegions:
    """Ordered list and name map stay in step."""

    def test_from_bare_region(self):
        regions = PageRegions.from_wire({"pageRegions": {"pageRegion": DEFAULT_REGION}})
        assert regions.names() == ["DEFAULT"]
        assert len(regions) == 1

    def test_from_null(self):
        regions = PageRegions.from_wire({"pageRegions": None})
        assert len(regions) == 0
        assert regions.to_wire() == {"pageRegion": []}

    def test_get_unknown(self):
        with pytest.raises(NoSuchPageRegionError):
            PageRegions().get("DEFAULT")

    def test_replace_updates_both_views(self):
        regions = PageRegions.from_wire(
            {"pageRegions": {"pageRegion": [DEFAULT_REGION, FOOTER_REGION]}}
        )
        replacement = PageRegion(name="FOOTER", no_block=True)

        regions.replace("FOOTER", replacement)

        assert regions.get("FOOTER") is replacement
        assert list(regions)[1] is replacement
        assert regions.to_wire()["pageRegion"][1]["noBlock"] is True

    def test_replace_unknown(self):
        with pytest.raises(NoSuchPageRegionError):
            PageRegions().replace("FOOTER", PageRegion(name="FOOTER"))

    def test_single_region_goes_out_as_list(self):
        regions = PageRegions.from_wire({"pageRegions": {"pageRegion": DEFAULT_REGION}})
        assert regions.to_wire() == {"pageRegion": [DEFAULT_REGION]}

    def test_count_based_output(self):
        regions = PageRegions.from_wire({"pageRegions": {"pageRegion": DEFAULT_REGION}})
        assert regions.to_wire(always_list=False) == {"pageRegion": DEFAULT_REGION}


class TestPageConfiguration:
    """Test cases for PageConfiguration."""

    def test_fields(self):
        configuration = PageConfiguration(page_configuration("Desktop", True, DEFAULT_REGION))

        assert configuration.name == "Desktop"
        assert configuration.default_configuration is True
        assert configuration.output_extension == ".html"
        assert configuration.page_region_names() == ["DEFAULT"]

    def test_null_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PageConfiguration(None)

    def test_setters(self):
        configuration = PageConfiguration(page_configuration("XML", False, DEFAULT_REGION))

        configuration.set_output_extension(".xml").set_publishable(False)

        assert configuration.to_wire()["outputExtension"] == ".xml"
        assert configuration.to_wire()["publishable"] is False

    def test_setter_validation(self):
        configuration = PageConfiguration(page_configuration("XML", False, DEFAULT_REGION))
        with pytest.raises(InvalidArgumentError):
            configuration.set_output_extension("  ")
        with pytest.raises(InvalidArgumentError):
            configuration.set_publishable("no")

    def test_to_wire_writes_regions_as_list(self):
        configuration = PageConfiguration(page_configuration("XML", False, DEFAULT_REGION))
        assert configuration.to_wire()["pageRegions"] == {"pageRegion": [DEFAULT_REGION]}
