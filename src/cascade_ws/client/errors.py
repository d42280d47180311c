"""Typed exception hierarchy for Cascade web-services errors.

This module defines all custom exceptions used by the Cascade client library.
All exceptions inherit from CascadeError so callers can catch everything the
library raises in one place. Messages carry enough context (operation, asset
type, the server's own message) to debug a failure without a debugger.
"""

from typing import Optional


class CascadeError(Exception):
    """Base exception for all cascade-ws errors."""
    pass


class InvalidArgumentError(CascadeError):
    """Raised when identifier input or a property value is malformed."""

    def __init__(self, message: str):
        super().__init__(message)


class EmptyValueError(CascadeError):
    """Raised when a required value (site name, XML, ...) is blank."""

    def __init__(self, message: str):
        super().__init__(message)


class NoSuchTypeError(CascadeError):
    """Raised when an asset type tag is not registered."""

    def __init__(self, asset_type: str):
        super().__init__(f"The type {asset_type} does not exist")
        self.asset_type = asset_type


class InvalidCredentialsError(CascadeError):
    """Raised when Cascade credentials are missing or rejected."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(
            f"Credentials are invalid (user: {user}, endpoint: {endpoint})"
        )
        self.user = user
        self.endpoint = endpoint


class TransportError(CascadeError):
    """Raised when the SOAP round trip itself fails.

    Covers connection failures, timeouts and SOAP faults. A reply that
    arrives with success="false" is not a transport error; see
    OperationFailedError.
    """

    def __init__(self, operation: str, endpoint: str, reason: Optional[str] = None):
        message = f"Operation '{operation}' failed at {endpoint}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.operation = operation
        self.endpoint = endpoint
        self.reason = reason


class OperationFailedError(CascadeError):
    """Raised in strict mode when the server answers with success="false".

    The server message is kept verbatim in ``server_message``.
    """

    def __init__(self, operation: str, server_message: Optional[str]):
        super().__init__(
            f"Operation '{operation}' was not successful: {server_message or ''}".rstrip()
        )
        self.operation = operation
        self.server_message = server_message


class MaterializationError(CascadeError):
    """Raised when a typed asset cannot be built from a read reply."""

    def __init__(self, asset_type: str, reason: str):
        super().__init__(f"Cannot materialize {asset_type} asset: {reason}")
        self.asset_type = asset_type
        self.reason = reason


class NoSuchPageRegionError(CascadeError):
    """Raised when a page region name is not defined on the owner."""

    def __init__(self, name: str):
        super().__init__(f"The region {name} does not exist")
        self.name = name


class NoSuchPageConfigurationError(CascadeError):
    """Raised when a page configuration name is not defined on the owner."""

    def __init__(self, name: str):
        super().__init__(f"The page configuration {name} does not exist")
        self.name = name


class NoSuchChildError(CascadeError):
    """Raised when a container has no child with the requested path or id."""

    def __init__(self, key: str):
        super().__init__(f"The child {key} does not exist")
        self.key = key
