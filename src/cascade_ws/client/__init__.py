"""Cascade web services client.

This package provides the transport, credentials, identifier and outcome
handling around the Cascade AssetOperationService SOAP API.
"""

from .errors import (
    CascadeError,
    InvalidArgumentError,
    EmptyValueError,
    NoSuchTypeError,
    InvalidCredentialsError,
    TransportError,
    OperationFailedError,
    MaterializationError,
    NoSuchPageRegionError,
    NoSuchPageConfigurationError,
    NoSuchChildError,
)

__all__ = [
    "CascadeError",
    "InvalidArgumentError",
    "EmptyValueError",
    "NoSuchTypeError",
    "InvalidCredentialsError",
    "TransportError",
    "OperationFailedError",
    "MaterializationError",
    "NoSuchPageRegionError",
    "NoSuchPageConfigurationError",
    "NoSuchChildError",
]
