"""Identifier construction for Cascade assets.

Callers routinely pass either a raw 32-character hex ID or a human path.
``create_identifier`` accepts both without a separate mode flag and
special-cases the types whose natural key is a name rather than a site path.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..assets.types import AssetType, is_non_path_addressable
from .errors import EmptyValueError, InvalidArgumentError

logger = logging.getLogger(__name__)

HEX_ID_PATTERN = re.compile(r'^[0-9a-f]{32}$')
ROOT_PREFIX = "ROOT_"


def is_hex_string(value: str) -> bool:
    """Return True if value is exactly a 32-digit lowercase hex string.

    Example:
        >>> is_hex_string("0bc94b1f8b7ffe83006a5cefe3ab1dac")
        True
        >>> is_hex_string("0BC94B1F8B7FFE83006A5CEFE3AB1DAC")
        False
    """
    return isinstance(value, str) and HEX_ID_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class IdentifierPath:
    """Path part of a path-form identifier.

    Attributes:
        path: Path within the site, without leading or trailing slash
        site_name: Site name, or None for Global assets and for sites
    """
    path: str
    site_name: Optional[str] = None

    def to_wire(self) -> Dict[str, Any]:
        wire: Dict[str, Any] = {"path": self.path}
        if self.site_name is not None:
            wire["siteName"] = self.site_name
        return wire


@dataclass(frozen=True)
class Identifier:
    """Canonical reference to an asset: by ID or by path, never both.

    Attributes:
        type: Wire type tag (e.g. "folder", "block_TEXT")
        id: Asset ID, for id-form identifiers
        path: IdentifierPath, for path-form identifiers

    Raises:
        InvalidArgumentError: If both or neither of id/path are set
    """
    type: str
    id: Optional[str] = None
    path: Optional[IdentifierPath] = None

    def __post_init__(self):
        if (self.id is None) == (self.path is None):
            raise InvalidArgumentError(
                "An identifier needs exactly one of id or path"
            )

    @property
    def is_id(self) -> bool:
        return self.id is not None

    def to_wire(self) -> Dict[str, Any]:
        """Convert to the wire shape sent in every request."""
        wire: Dict[str, Any] = {}
        if self.id is not None:
            wire["id"] = self.id
        else:
            wire["path"] = self.path.to_wire()
        wire["type"] = self.type
        return wire

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Identifier":
        """Parse a wire identifier (as found in replies and child listings)."""
        if not data:
            raise InvalidArgumentError("Cannot build an identifier from an empty value")
        path_data = data.get("path")
        path = None
        if data.get("id") is None and path_data:
            path = IdentifierPath(
                path=path_data.get("path"),
                site_name=path_data.get("siteName"),
            )
        return cls(type=str(data.get("type")), id=data.get("id"), path=path)


def create_identifier(
    asset_type: Union[AssetType, str],
    path_or_id: str,
    site_name: Optional[str] = None,
) -> Identifier:
    """Build an identifier from an ID or a path.

    Rules, first match wins:
        1. Strip whitespace; if longer than one character also strip slashes.
        2. A 32-digit hex string is an ID; the site name is ignored.
        3. group/role/user values are IDs; site values are site paths.
        4. Values starting with ROOT_ are IDs.
        5. No site name means a path in Global.
        6. Otherwise a path in the given site.

    Args:
        asset_type: Type tag of the asset
        path_or_id: ID string or path of the asset
        site_name: Site name for path-form identifiers

    Returns:
        Identifier

    Raises:
        InvalidArgumentError: If inputs are not strings or the value is empty
        EmptyValueError: If a site name is given but blank

    Example:
        >>> create_identifier("block_TEXT", "/_cascade/blocks/code/text-block", "cascade-admin").to_wire()
        {'path': {'path': '_cascade/blocks/code/text-block', 'siteName': 'cascade-admin'}, 'type': 'block_TEXT'}
    """
    if not isinstance(asset_type, str) or not isinstance(path_or_id, str):
        raise InvalidArgumentError("Only strings are accepted in create_identifier")
    if site_name is not None and not isinstance(site_name, str):
        raise InvalidArgumentError("The site name must be a string")

    type_tag = str(asset_type)
    value = path_or_id.strip()
    if len(value) > 1:
        value = value.strip('/')

    if is_hex_string(value):
        identifier = Identifier(type=type_tag, id=value)
    elif is_non_path_addressable(type_tag):
        if not value:
            raise InvalidArgumentError(f"The {type_tag} name cannot be empty")
        if type_tag != AssetType.SITE.value:
            identifier = Identifier(type=type_tag, id=value)
        else:
            identifier = Identifier(type=type_tag, path=IdentifierPath(path=value))
    elif value.startswith(ROOT_PREFIX):
        identifier = Identifier(type=type_tag, id=value)
    elif site_name is None:
        if not value:
            raise InvalidArgumentError("The path cannot be empty")
        identifier = Identifier(type=type_tag, path=IdentifierPath(path=value))
    else:
        if site_name.strip() == "":
            raise EmptyValueError("The site name cannot be empty")
        if not value:
            raise InvalidArgumentError("The path cannot be empty")
        identifier = Identifier(
            type=type_tag, path=IdentifierPath(path=value, site_name=site_name)
        )

    logger.debug(f"Created identifier {identifier.to_wire()}")
    return identifier
