"""SOAP transport for the Cascade web services.

This module wraps a zeep client built from the Cascade WSDL and provides
error translation from zeep/requests exceptions to our typed exception
hierarchy. Everything above this module sees a plain RPC client: an operation
name and a dict payload go in, a dict reply keyed ``<operation>Return`` comes
out.
"""

import logging
import re
from typing import Any, Dict, Optional, Protocol

import requests
from lxml import etree
from requests.exceptions import ConnectionError, Timeout
from zeep import Client
from zeep.exceptions import Error as ZeepError
from zeep.exceptions import Fault
from zeep.helpers import serialize_object
from zeep.plugins import HistoryPlugin
from zeep.transports import Transport

from .auth import Authenticator
from .errors import TransportError

logger = logging.getLogger(__name__)


class RpcClient(Protocol):
    """What the operation service needs from a transport."""

    def invoke(self, operation: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def last_request(self) -> str:
        ...

    def last_response(self) -> str:
        ...


def sanitize_credentials(text: str) -> str:
    """Mask passwords and user:pass URL segments in a message.

    Args:
        text: The error message or log text to sanitize

    Returns:
        str: Sanitized text with credentials masked

    Example:
        >>> sanitize_credentials("<password>s3cret</password>")
        '<password>***REDACTED***</password>'
    """
    if not text:
        return text

    sanitized = re.sub(r'://([\w.-]+):([\w.-]+)@', r'://***:***@', text)
    # SOAP envelopes carry the password as an element
    sanitized = re.sub(
        r'(<(?:\w+:)?password>)[^<]*(</(?:\w+:)?password>)',
        r'\1***REDACTED***\2',
        sanitized,
        flags=re.IGNORECASE,
    )
    sanitized = re.sub(
        r'password["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)',
        r'password=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE,
    )
    return sanitized


class ZeepTransport:
    """RPC client over the Cascade WSDL using zeep.

    The zeep client is created lazily on the first call, so constructing a
    transport never touches the network.

    Example:
        >>> transport = ZeepTransport(Authenticator())
        >>> reply = transport.invoke("listSites", {"authentication": auth})
        >>> reply["listSitesReturn"]["success"]
        'true'
    """

    def __init__(self, authenticator: Authenticator):
        """Initialize the transport.

        Args:
            authenticator: Authenticator used to find the WSDL URL and timeout
        """
        self._authenticator = authenticator
        self._client: Optional[Client] = None
        self._history = HistoryPlugin()
        self._endpoint = "unknown"

    def _get_client(self) -> Client:
        """Get or create the zeep client.

        Raises:
            InvalidCredentialsError: If credentials are missing
            TransportError: If the WSDL cannot be loaded
        """
        if self._client is None:
            creds = self._authenticator.get_credentials()
            self._endpoint = creds.url
            session = requests.Session()
            transport = Transport(
                session=session,
                timeout=creds.timeout,
                operation_timeout=creds.timeout,
            )
            try:
                self._client = Client(
                    creds.url, transport=transport, plugins=[self._history]
                )
            except (ZeepError, requests.RequestException, OSError) as e:
                raise self._translate_error(e, "loadWsdl") from e
            logger.debug(f"Loaded WSDL from {sanitize_credentials(creds.url)}")
        return self._client

    def _translate_error(self, exception: Exception, operation: str) -> TransportError:
        """Translate zeep and requests exceptions to TransportError."""
        if isinstance(exception, (Timeout, ConnectionError)):
            reason = "endpoint unreachable"
        elif isinstance(exception, Fault):
            reason = f"SOAP fault: {exception.message}"
        else:
            reason = str(exception)

        safe_reason = sanitize_credentials(reason)
        logger.error(f"SOAP operation failed: {operation} - {safe_reason}")
        return TransportError(
            operation=operation,
            endpoint=sanitize_credentials(self._endpoint),
            reason=safe_reason,
        )

    def invoke(self, operation: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Execute one remote operation.

        Args:
            operation: WSDL operation name (e.g. "read", "batch")
            payload: Request parameters, authentication included

        Returns:
            Dict with a single ``<operation>Return`` key holding the plain
            (dict/list) result

        Raises:
            TransportError: On connection failures, timeouts and SOAP faults
        """
        client = self._get_client()
        logger.debug(f"Invoking {operation}")
        try:
            result = getattr(client.service, operation)(**payload)
        except (ZeepError, requests.RequestException) as e:
            raise self._translate_error(e, operation) from e

        plain = serialize_object(result, dict)
        key = f"{operation}Return"
        if isinstance(plain, dict) and key in plain:
            return plain
        return {key: plain}

    def _render(self, direction: str) -> str:
        try:
            message = getattr(self._history, direction)
        except IndexError:
            # nothing has been sent yet
            return ""
        if not message or message.get("envelope") is None:
            return ""
        return etree.tostring(message["envelope"], encoding="unicode", pretty_print=True)

    def last_request(self) -> str:
        """Return the XML of the last request with the password masked."""
        return sanitize_credentials(self._render("last_sent"))

    def last_response(self) -> str:
        """Return the XML of the last response."""
        return self._render("last_received")
