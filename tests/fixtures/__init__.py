"""Test fixtures for the Cascade client tests.

This module provides sample wire replies (property bags, read, batch and
failure replies) for unit tests.
"""

from .sample_assets import (
    SITE_NAME,
    FOLDER_ID,
    TEMPLATE_ID,
    TEXT_BLOCK_ID,
    XSLT_FORMAT_ID,
    read_reply,
    failure_reply,
    success_reply,
    batch_reply,
)

__all__ = [
    'SITE_NAME',
    'FOLDER_ID',
    'TEMPLATE_ID',
    'TEXT_BLOCK_ID',
    'XSLT_FORMAT_ID',
    'read_reply',
    'failure_reply',
    'success_reply',
    'batch_reply',
]
