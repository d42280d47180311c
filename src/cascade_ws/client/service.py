"""Operation service for the Cascade web services.

AssetOperationService exposes one method per remote operation. Each method
builds the request (authentication plus operation parameters), runs it
through the RPC client and records the outcome. Remote failures
(success="false") are recorded, not raised: callers poll ``is_successful()``
and ``message`` after each call. Transport failures raise TransportError.

Example:
    >>> service = AssetOperationService.from_environment()
    >>> folder_id = service.create_identifier(AssetType.FOLDER, "/", "cascade-admin")
    >>> service.read(folder_id)
    >>> if service.is_successful():
    ...     print(service.get_read_asset()["folder"]["name"])
"""

import logging
import threading
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Union

from ..assets import wire
from ..assets.base import Asset
from ..assets.materializer import materialize
from ..assets.registry import concrete_shape_for
from ..assets.types import (
    AssetType,
    envelope_property_of,
    property_field_for,
    property_names,
    to_asset_type,
    type_for_property,
)
from .auth import Authenticator
from .errors import InvalidArgumentError, NoSuchTypeError, OperationFailedError
from .identifiers import Identifier, create_identifier, is_hex_string
from .results import OperationOutcome, ResultTracker
from .transport import RpcClient, ZeepTransport

logger = logging.getLogger(__name__)

IdentifierLike = Union[Identifier, Dict[str, Any]]

MARK_TYPES = ("read", "unread")


class PropertyAccessor(NamedTuple):
    """Read/get pair for one envelope property.

    ``read(identifier)`` reads the asset and caches the property on success;
    ``get()`` returns the cached value (None if never read).
    """
    read: Callable[[IdentifierLike], None]
    get: Callable[[], Optional[Dict[str, Any]]]


def _wire_identifier(identifier: IdentifierLike) -> Dict[str, Any]:
    if isinstance(identifier, Identifier):
        return identifier.to_wire()
    if isinstance(identifier, dict):
        return identifier
    raise InvalidArgumentError(f"Not an identifier: {identifier!r}")


class AssetOperationService:
    """Client for every operation of the Cascade AssetOperationService.

    The instance keeps the outcome of the last operation. A lock guards each
    call-and-record pair, but the outcome is still per instance: read it
    before starting the next call.
    """

    def __init__(self, transport: RpcClient, username: str, password: str):
        """Initialize the service.

        Args:
            transport: RPC client executing the SOAP operations
            username: Cascade user name
            password: Cascade password
        """
        self._transport = transport
        self._auth = {"username": username, "password": password}
        self._tracker = ResultTracker()
        self._lock = threading.RLock()

        self._created_asset_id = ""
        self._read_assets: Dict[str, Any] = {}
        self._audits: Optional[Dict[str, Any]] = None
        self._search_matches: Optional[Dict[str, Any]] = None
        self._listed_messages: Optional[Dict[str, Any]] = None
        self._preferences: Optional[Dict[str, Any]] = None

        self.accessors: Mapping[str, PropertyAccessor] = MappingProxyType({
            name: PropertyAccessor(
                read=partial(self.read_property, name),
                get=partial(self.get_cached_property, name),
            )
            for name in property_names()
        })

    @classmethod
    def from_environment(
        cls, authenticator: Optional[Authenticator] = None
    ) -> "AssetOperationService":
        """Build a service over zeep using credentials from the environment.

        Raises:
            InvalidCredentialsError: If credentials are missing
        """
        authenticator = authenticator or Authenticator()
        creds = authenticator.get_credentials()
        return cls(ZeepTransport(authenticator), creds.username, creds.password)

    # ------------------------------------------------------------------
    # call plumbing

    def _call(
        self,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        success: Any = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"authentication": dict(self._auth)}
        payload.update(params or {})
        with self._lock:
            reply = self._transport.invoke(operation, payload)
            outcome = self._tracker.record(
                operation, reply, self._transport, success=success
            )
        if not outcome.is_successful():
            logger.debug(f"{operation} was not successful: {outcome.message}")
        return reply

    def _return(self, operation: str) -> Dict[str, Any]:
        reply = self._tracker.outcome.reply or {}
        return reply.get(f"{operation}Return") or {}

    # ------------------------------------------------------------------
    # outcome

    @property
    def outcome(self) -> OperationOutcome:
        return self._tracker.outcome

    def is_successful(self) -> bool:
        """True iff the last recorded success value is exactly "true"."""
        return self._tracker.is_successful()

    @property
    def success(self) -> Any:
        return self._tracker.outcome.success

    @property
    def message(self) -> Optional[str]:
        return self._tracker.outcome.message

    @property
    def last_request(self) -> str:
        return self._tracker.outcome.last_request

    @property
    def last_response(self) -> str:
        return self._tracker.outcome.last_response

    @property
    def reply(self) -> Optional[Dict[str, Any]]:
        return self._tracker.outcome.reply

    @property
    def created_asset_id(self) -> str:
        return self._created_asset_id

    @property
    def audits(self) -> Optional[Dict[str, Any]]:
        return self._audits

    @property
    def search_matches(self) -> Optional[Dict[str, Any]]:
        return self._search_matches

    @property
    def listed_messages(self) -> Optional[Dict[str, Any]]:
        return self._listed_messages

    @property
    def preferences(self) -> Optional[Dict[str, Any]]:
        return self._preferences

    # ------------------------------------------------------------------
    # identifiers

    @staticmethod
    def create_identifier(
        asset_type: Union[AssetType, str], path_or_id: str, site_name: Optional[str] = None
    ) -> Identifier:
        return create_identifier(asset_type, path_or_id, site_name)

    @staticmethod
    def create_identifier_with_id_type(id_string: str, asset_type: Union[AssetType, str]) -> Identifier:
        return create_identifier(asset_type, id_string)

    @staticmethod
    def create_identifier_with_path_site_type(
        path: str, site_name: str, asset_type: Union[AssetType, str]
    ) -> Identifier:
        return create_identifier(asset_type, path, site_name)

    @staticmethod
    def is_hex_string(value: str) -> bool:
        return is_hex_string(value)

    @staticmethod
    def file_payload(parent_folder_id: str, site_name: str, name: str, data: bytes) -> Dict[str, Any]:
        """Property bag for creating a file, to be sent as ``{"file": ...}``."""
        return {
            "parentFolderId": parent_folder_id,
            "siteName": site_name,
            "name": name,
            "data": data,
        }

    # ------------------------------------------------------------------
    # assets

    def get_asset(
        self,
        asset_type: Union[AssetType, str],
        path_or_id: str,
        site_name: Optional[str] = None,
    ) -> Asset:
        """Read an asset and return it as its concrete shape.

        Raises:
            NoSuchTypeError: If the type has no concrete shape
            OperationFailedError: If the read is not successful
            MaterializationError: If the reply cannot be turned into the shape
        """
        resolved = to_asset_type(asset_type)
        concrete_shape_for(resolved)
        identifier = create_identifier(resolved, path_or_id, site_name)

        self.read(identifier)
        if not self.is_successful():
            raise OperationFailedError("read", self.message)
        return materialize(resolved, identifier, self._return("read").get("asset"), self)

    def discover_type(
        self, hex_id: str, candidates: Optional[Iterable[Union[AssetType, str]]] = None
    ) -> Optional[AssetType]:
        """Find the type of an asset from its ID with one batch call.

        One speculative read per candidate type goes out in a single batch.
        The first slot (in candidate order) that succeeded and whose asset
        carries a registered property decides the type.

        Args:
            hex_id: Asset ID; usually 32-digit hex, also ROOT_ IDs and principal names
            candidates: Types to probe; defaults to every type in declaration order

        Returns:
            The asset type, or None if no candidate matched

        Raises:
            InvalidArgumentError: If hex_id is blank
        """
        types = list(candidates) if candidates is not None else list(AssetType)
        operations = [
            {"read": {"identifier": create_identifier(t, hex_id).to_wire()}}
            for t in types
        ]
        results = self.batch(operations)

        for slot in results:
            read_result = (slot or {}).get("readResult") or {}
            if read_result.get("success") != "true":
                continue
            property_name = envelope_property_of(read_result.get("asset"))
            if property_name is not None:
                found = type_for_property(property_name)
                logger.debug(f"Discovered type {found} for {hex_id}")
                return found

        logger.info(f"The id {hex_id} does not match any asset type")
        return None

    def retrieve(
        self, identifier: IdentifierLike, property_name: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """Read an asset and return one property bag from the envelope.

        Args:
            identifier: Identifier of the asset
            property_name: Envelope field; defaults to the identifier type's field

        Raises:
            NoSuchTypeError: If no property name is given and the type has none
        """
        wire_id = _wire_identifier(identifier)
        if not property_name:
            property_name = property_field_for(wire_id.get("type"))
        self.read(identifier)
        asset = self._return("read").get("asset")
        if not asset:
            return None
        return asset.get(property_name)

    def read_property(self, property_name: str, identifier: IdentifierLike) -> None:
        """Read an asset and cache the named property when present."""
        if type_for_property(property_name) is None:
            raise NoSuchTypeError(property_name)
        self.read(identifier)
        asset = self._return("read").get("asset") or {}
        if self.is_successful() and asset.get(property_name) is not None:
            self._read_assets[property_name] = asset[property_name]

    def get_cached_property(self, property_name: str) -> Optional[Dict[str, Any]]:
        """Return the property last cached by read_property, or None."""
        if type_for_property(property_name) is None:
            raise NoSuchTypeError(property_name)
        return self._read_assets.get(property_name)

    def get_read_asset(self) -> Optional[Dict[str, Any]]:
        return self._return("read").get("asset")

    def get_read_file(self) -> Optional[Dict[str, Any]]:
        return (self.get_read_asset() or {}).get("file")

    def get_read_access_rights_information(self) -> Optional[Dict[str, Any]]:
        return self._return("readAccessRights").get("accessRightsInformation")

    def get_read_workflow(self) -> Optional[Dict[str, Any]]:
        return self._return("readWorkflowInformation").get("workflow")

    def get_read_workflow_settings(self) -> Optional[Dict[str, Any]]:
        return self._return("readWorkflowSettings").get("workflowSettings")

    # ------------------------------------------------------------------
    # operations

    def batch(self, operations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Run several operations in one round trip.

        Returns:
            Per-operation results in request order. Failure is per slot; the
            batch itself is recorded as successful once the reply arrives.
        """
        reply = self._call("batch", {"operation": operations}, success="true")
        return wire.normalize(reply.get("batchReturn"))

    def check_in(self, identifier: IdentifierLike, comments: str = "") -> None:
        self._call("checkIn", {
            "identifier": _wire_identifier(identifier),
            "comments": comments,
        })

    def check_out(self, identifier: IdentifierLike) -> str:
        """Check out an asset.

        Returns:
            The ID of the working copy, or "" on failure
        """
        self._call("checkOut", {"identifier": _wire_identifier(identifier)})
        result = self._return("checkOut")
        working_copy = result.get("workingCopyIdentifier") or {}
        if self.is_successful() and working_copy.get("id") is not None:
            return working_copy["id"]
        return ""

    def copy(
        self,
        identifier: IdentifierLike,
        destination: IdentifierLike,
        new_name: str,
        do_workflow: bool = False,
    ) -> None:
        self._call("copy", {
            "identifier": _wire_identifier(identifier),
            "copyParameters": {
                "destinationContainerIdentifier": _wire_identifier(destination),
                "newName": new_name,
                "doWorkflow": do_workflow,
            },
        })

    def create(self, asset: Dict[str, Any]) -> str:
        """Create an asset from an envelope such as ``{"file": {...}}``.

        Returns:
            The ID of the new asset ("" on failure)
        """
        self._call("create", {"asset": asset})
        self._created_asset_id = self._return("create").get("createdAssetId") or ""
        return self._created_asset_id

    def delete(self, identifier: IdentifierLike) -> None:
        self._call("delete", {"identifier": _wire_identifier(identifier)})

    def delete_message(self, identifier: IdentifierLike) -> None:
        self._call("deleteMessage", {"identifier": _wire_identifier(identifier)})

    def edit(self, asset: Dict[str, Any]) -> None:
        """Edit an asset from an envelope such as ``{"textBlock": {...}}``."""
        self._call("edit", {"asset": asset})

    def edit_access_rights(
        self, access_rights_information: Dict[str, Any], apply_to_children: bool = False
    ) -> None:
        self._call("editAccessRights", {
            "accessRightsInformation": access_rights_information,
            "applyToChildren": apply_to_children,
        })

    def edit_preference(self, name: str, value: str) -> None:
        self._call("editPreference", {"preference": {"name": name, "value": value}})

    def edit_workflow_settings(
        self,
        workflow_settings: Dict[str, Any],
        apply_inherit_workflows_to_children: bool = False,
        apply_require_workflow_to_children: bool = False,
    ) -> None:
        self._call("editWorkflowSettings", {
            "workflowSettings": workflow_settings,
            "applyInheritWorkflowsToChildren": apply_inherit_workflows_to_children,
            "applyRequireWorkflowToChildren": apply_require_workflow_to_children,
        })

    def list_messages(self) -> None:
        self._call("listMessages")
        if self.is_successful():
            self._listed_messages = self._return("listMessages").get("messages")

    def list_sites(self) -> List[Dict[str, Any]]:
        """List sites; returns the site identifiers as a list."""
        self._call("listSites")
        sites = self._return("listSites").get("sites")
        return wire.nested({"sites": sites}, "sites", "assetIdentifier")

    def list_subscribers(self, identifier: IdentifierLike) -> None:
        self._call("listSubscribers", {"identifier": _wire_identifier(identifier)})

    def mark_message(self, identifier: IdentifierLike, mark_type: str) -> None:
        if mark_type not in MARK_TYPES:
            raise InvalidArgumentError(f"The mark type {mark_type} is not one of {MARK_TYPES}")
        self._call("markMessage", {
            "identifier": _wire_identifier(identifier),
            "markType": mark_type,
        })

    def move(
        self,
        identifier: IdentifierLike,
        destination: Optional[IdentifierLike] = None,
        new_name: str = "",
        do_workflow: bool = False,
    ) -> None:
        self._call("move", {
            "identifier": _wire_identifier(identifier),
            "moveParameters": {
                "destinationContainerIdentifier": (
                    _wire_identifier(destination) if destination is not None else None
                ),
                "newName": new_name,
                "doWorkflow": do_workflow,
            },
        })

    def perform_workflow_transition(
        self, workflow_id: str, action_identifier: str, transition_comment: str = ""
    ) -> None:
        self._call("performWorkflowTransition", {
            "workflowTransitionInformation": {
                "workflowId": workflow_id,
                "actionIdentifier": action_identifier,
                "transitionComment": transition_comment,
            },
        })

    def _publish(
        self,
        identifier: IdentifierLike,
        destinations: Union[None, IdentifierLike, List[IdentifierLike]],
        unpublish: bool,
    ) -> None:
        information: Dict[str, Any] = {"identifier": _wire_identifier(identifier)}
        if destinations is not None:
            information["destinations"] = [
                _wire_identifier(d) for d in wire.normalize(destinations)
            ]
        information["unpublish"] = unpublish
        self._call("publish", {"publishInformation": information})

    def publish(
        self,
        identifier: IdentifierLike,
        destinations: Union[None, IdentifierLike, List[IdentifierLike]] = None,
    ) -> None:
        self._publish(identifier, destinations, unpublish=False)

    def unpublish(
        self,
        identifier: IdentifierLike,
        destinations: Union[None, IdentifierLike, List[IdentifierLike]] = None,
    ) -> None:
        self._publish(identifier, destinations, unpublish=True)

    def read(self, identifier: IdentifierLike) -> None:
        self._call("read", {"identifier": _wire_identifier(identifier)})

    def read_access_rights(self, identifier: IdentifierLike) -> None:
        self._call("readAccessRights", {"identifier": _wire_identifier(identifier)})

    def read_audits(self, audit_parameters: Dict[str, Any]) -> None:
        params = dict(audit_parameters)
        if isinstance(params.get("identifier"), Identifier):
            params["identifier"] = params["identifier"].to_wire()
        self._call("readAudits", {"auditParameters": params})
        self._audits = self._return("readAudits").get("audits")

    def read_preferences(self) -> None:
        self._call("readPreferences")
        self._preferences = self._return("readPreferences").get("preferences")

    def read_workflow_information(self, identifier: IdentifierLike) -> None:
        self._call("readWorkflowInformation", {"identifier": _wire_identifier(identifier)})

    def read_workflow_settings(self, identifier: IdentifierLike) -> None:
        self._call("readWorkflowSettings", {"identifier": _wire_identifier(identifier)})

    def search(self, search_information: Dict[str, Any]) -> None:
        self._call("search", {"searchInformation": search_information})
        self._search_matches = self._return("search").get("matches")

    def send_message(self, message: Dict[str, Any]) -> None:
        self._call("sendMessage", {"message": message})

    def site_copy(self, original_site_id: str, original_site_name: str, new_site_name: str) -> None:
        self._call("siteCopy", {
            "originalSiteId": original_site_id,
            "originalSiteName": original_site_name,
            "newSiteName": new_site_name,
        })
