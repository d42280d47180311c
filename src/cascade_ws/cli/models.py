"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the cascade-ws command.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Invalid arguments or unexpected failures
    - NOT_FOUND (2): The asset could not be read or its type is unknown
    - AUTH_ERROR (3): Missing or invalid credentials
    - NETWORK_ERROR (4): Endpoint unreachable, timeouts and SOAP faults

    Example:
        >>> raise typer.Exit(ExitCode.NOT_FOUND)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
