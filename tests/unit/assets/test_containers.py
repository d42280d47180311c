"""Unit tests for folder and container shapes."""

import pytest
from unittest.mock import Mock

from cascade_ws.assets.containers import Folder, TransportContainer
from cascade_ws.assets.types import AssetType
from cascade_ws.client.errors import NoSuchChildError
from cascade_ws.client.identifiers import create_identifier
from tests.fixtures.sample_assets import (
    CHILD_FOLDER,
    CHILD_PAGE,
    FOLDER_ID,
    PAGE_ID,
    folder_bag,
)


def _folder(children):
    return Folder(Mock(), create_identifier(AssetType.FOLDER, FOLDER_ID), folder_bag(children))


class TestContainerChildren:
    """Children arrive as null, a bare child or an array."""

    def test_null_children(self):
        folder = _folder(None)
        assert folder.children == []
        assert folder.child_count() == 0

    def test_bare_child(self):
        folder = _folder(CHILD_PAGE)
        assert [c.id for c in folder.children] == [PAGE_ID]

    def test_array_of_children(self):
        folder = _folder([CHILD_FOLDER, CHILD_PAGE])
        assert folder.child_count() == 2

    def test_get_child_by_path_or_id(self):
        folder = _folder([CHILD_FOLDER, CHILD_PAGE])

        assert folder.get_child("/index").id == PAGE_ID
        assert folder.get_child(PAGE_ID).path_path == "index"
        assert folder.has_child("_cascade")

    def test_missing_child(self):
        with pytest.raises(NoSuchChildError):
            _folder([CHILD_FOLDER]).get_child("index")

    def test_children_of_type(self):
        folder = _folder([CHILD_FOLDER, CHILD_PAGE])
        assert [c.type for c in folder.children_of_type(AssetType.PAGE)] == ["page"]

    def test_children_not_written_back(self):
        assert "children" not in _folder([CHILD_PAGE]).to_wire()

    def test_folder_fields(self):
        folder = _folder(None)
        assert folder.should_be_published is True
        assert folder.parent_container_id is None

    def test_other_containers_share_behaviour(self):
        bag = folder_bag(CHILD_PAGE)
        bag["parentContainerId"] = FOLDER_ID
        container = TransportContainer(Mock(), create_identifier(AssetType.TRANSPORT_CONTAINER, FOLDER_ID), bag)

        assert container.child_count() == 1
        assert container.parent_container_id == FOLDER_ID
