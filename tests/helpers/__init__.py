"""Test helper modules for the Cascade client tests.

- fake_transport: scripted in-memory RPC client
"""

from .fake_transport import FakeTransport

__all__ = [
    'FakeTransport',
]
