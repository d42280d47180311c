"""Typed Python client for the Cascade Server web services.

This package wraps the Cascade AssetOperationService SOAP API: identifier
resolution, one method per remote operation, and typed assets built from
read replies.
"""

from .assets.types import AssetType, Category
from .client.errors import (
    CascadeError,
    EmptyValueError,
    InvalidArgumentError,
    InvalidCredentialsError,
    MaterializationError,
    NoSuchTypeError,
    OperationFailedError,
    TransportError,
)
from .client.identifiers import Identifier, IdentifierPath, create_identifier
from .client.service import AssetOperationService

__version__ = "0.1.0"

__all__ = [
    "AssetOperationService",
    "AssetType",
    "Category",
    "Identifier",
    "IdentifierPath",
    "create_identifier",
    "CascadeError",
    "EmptyValueError",
    "InvalidArgumentError",
    "InvalidCredentialsError",
    "MaterializationError",
    "NoSuchTypeError",
    "OperationFailedError",
    "TransportError",
]
