"""Connector and transport shapes."""

from typing import Any, Dict, Optional

from . import wire
from .base import ContainedAsset
from .types import AssetType, Category


class Connector(ContainedAsset):
    CATEGORY = Category.CONNECTOR

    @property
    def destination_id(self) -> Optional[str]:
        return self._property.get("destinationId")

    @property
    def verified(self) -> bool:
        return bool(self._property.get("verified") or False)

    def parameters(self) -> Dict[str, Any]:
        items = wire.nested(self._property, "connectorParameters", "connectorParameter")
        return {item.get("name"): item.get("value") for item in items}


class FacebookConnector(Connector):
    TYPE = AssetType.FACEBOOK_CONNECTOR


class GoogleAnalyticsConnector(Connector):
    TYPE = AssetType.GOOGLE_ANALYTICS_CONNECTOR


class WordPressConnector(Connector):
    TYPE = AssetType.WORDPRESS_CONNECTOR

    @property
    def url(self) -> Optional[str]:
        return self._property.get("url")


class Transport(ContainedAsset):
    CATEGORY = Category.TRANSPORT


class DatabaseTransport(Transport):
    TYPE = AssetType.DATABASE_TRANSPORT

    @property
    def server_name(self) -> Optional[str]:
        return self._property.get("serverName")

    @property
    def database_name(self) -> Optional[str]:
        return self._property.get("databaseName")


class FileSystemTransport(Transport):
    TYPE = AssetType.FILE_SYSTEM_TRANSPORT

    @property
    def directory(self) -> Optional[str]:
        return self._property.get("directory")


class FtpTransport(Transport):
    TYPE = AssetType.FTP_TRANSPORT

    @property
    def host_name(self) -> Optional[str]:
        return self._property.get("hostName")

    @property
    def port(self) -> Optional[int]:
        value = self._property.get("port")
        return int(value) if value is not None else None

    @property
    def directory(self) -> Optional[str]:
        return self._property.get("directory")

    @property
    def do_sftp(self) -> bool:
        return bool(self._property.get("doSFTP") or False)
