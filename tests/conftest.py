"""Root pytest configuration for all tests.

Provides a scripted transport and an operation service wired to it.
"""

import pytest

from cascade_ws.client.service import AssetOperationService
from tests.helpers.fake_transport import FakeTransport


@pytest.fixture
def transport():
    """An empty scripted transport; tests add replies as needed."""
    return FakeTransport()


@pytest.fixture
def service(transport):
    """AssetOperationService over the scripted transport."""
    return AssetOperationService(transport, "wsuser", "s3cret")
