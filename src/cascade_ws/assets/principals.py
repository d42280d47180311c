"""Group, role, user and site shapes.

These are the non-path-addressable types: groups, roles and users are read by
name or id, sites by name as a path without a site.
"""

from typing import List, Optional

from .base import Asset
from .types import AssetType, Category


class Principal(Asset):
    CATEGORY = Category.PRINCIPAL


class Group(Principal):
    TYPE = AssetType.GROUP

    @property
    def name(self) -> Optional[str]:
        return self._property.get("groupName")

    @property
    def id(self) -> Optional[str]:
        return self._property.get("groupName")

    @property
    def users(self) -> List[str]:
        raw = self._property.get("users") or ""
        return [u for u in raw.split(";") if u]


class Role(Principal):
    TYPE = AssetType.ROLE

    @property
    def role_type(self) -> Optional[str]:
        return self._property.get("roleType")


class User(Principal):
    TYPE = AssetType.USER

    @property
    def name(self) -> Optional[str]:
        return self._property.get("username")

    @property
    def id(self) -> Optional[str]:
        return self._property.get("username")

    @property
    def full_name(self) -> Optional[str]:
        return self._property.get("fullName")

    @property
    def email(self) -> Optional[str]:
        return self._property.get("email")

    @property
    def enabled(self) -> bool:
        return bool(self._property.get("enabled") or False)

    @property
    def groups(self) -> List[str]:
        raw = self._property.get("groups") or ""
        return [g for g in raw.split(";") if g]


class Site(Principal):
    TYPE = AssetType.SITE

    @property
    def url(self) -> Optional[str]:
        return self._property.get("url")

    @property
    def root_folder_id(self) -> Optional[str]:
        return self._property.get("rootFolderId")
