"""Outcome of the most recent operation.

Every operation overwrites the outcome; nothing is merged or kept as history.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .transport import RpcClient


@dataclass(frozen=True)
class OperationOutcome:
    """Snapshot of one operation.

    Attributes:
        operation: Operation name
        success: The wire value, normally the string "true" or "false"
        message: Server message, verbatim
        last_request: Raw XML of the request
        last_response: Raw XML of the response
        reply: The whole reply
    """
    operation: str = ""
    success: Any = ""
    message: Optional[str] = None
    last_request: str = ""
    last_response: str = ""
    reply: Optional[Dict[str, Any]] = None

    def is_successful(self) -> bool:
        # the wire sends strings; True, 1 and "TRUE" do not count
        return isinstance(self.success, str) and self.success == "true"


class ResultTracker:
    """Records the outcome of each operation on a service instance."""

    def __init__(self):
        self._outcome = OperationOutcome()

    @property
    def outcome(self) -> OperationOutcome:
        return self._outcome

    def record(
        self,
        operation: str,
        reply: Optional[Dict[str, Any]],
        transport: RpcClient,
        success: Any = None,
        message: Optional[str] = None,
    ) -> OperationOutcome:
        """Record an operation reply.

        success/message come from ``reply[<operation>Return]`` unless given
        explicitly (batch replies have no single status).
        """
        wrapper = (reply or {}).get(f"{operation}Return")
        if success is None and isinstance(wrapper, dict):
            success = wrapper.get("success")
            message = wrapper.get("message")

        self._outcome = OperationOutcome(
            operation=operation,
            success=success if success is not None else "",
            message=message,
            last_request=transport.last_request(),
            last_response=transport.last_response(),
            reply=reply,
        )
        return self._outcome

    def is_successful(self) -> bool:
        return self._outcome.is_successful()
