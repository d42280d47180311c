"""Authentication module for loading Cascade credentials.

This module handles loading Cascade Server credentials from environment
variables using python-dotenv. It validates that all required values are
present and raises InvalidCredentialsError if any are missing.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

DEFAULT_TIMEOUT = 30


class Credentials(NamedTuple):
    """Cascade web-services connection settings."""
    url: str
    username: str
    password: str
    timeout: int = DEFAULT_TIMEOUT


class Authenticator:
    """Loads and validates Cascade credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    logged.

    Required environment variables:
        CASCADE_WSDL_URL: URL of the WSDL (e.g., https://cms.example.edu/ws/services/AssetOperationService?wsdl)
        CASCADE_USERNAME: Cascade user name
        CASCADE_PASSWORD: Cascade password

    Optional:
        CASCADE_TIMEOUT: Request timeout in seconds (default 30)

    Raises:
        InvalidCredentialsError: If any required credential is missing

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Cascade credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, username, password and timeout

        Raises:
            InvalidCredentialsError: If any required credential is missing or
                the timeout is not a positive integer
        """
        url = os.getenv('CASCADE_WSDL_URL')
        username = os.getenv('CASCADE_USERNAME')
        password = os.getenv('CASCADE_PASSWORD')

        if not url or not username or not password:
            raise InvalidCredentialsError(
                user=username if username else "unknown",
                endpoint=url if url else "unknown",
            )

        raw_timeout = os.getenv('CASCADE_TIMEOUT')
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                raise InvalidCredentialsError(user=username, endpoint=url)
            if timeout <= 0:
                raise InvalidCredentialsError(user=username, endpoint=url)

        return Credentials(url=url, username=username, password=password, timeout=timeout)
