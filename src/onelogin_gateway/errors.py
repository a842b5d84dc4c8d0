"""Exception types raised by the 1Login gateway clients.

Only one **data-carrying** domain error lives here so that web/CLI layers
can transform it into HTTP responses or user-friendly messages.  Transport
failures (connection refused, timeouts, undecodable bodies) are *not*
wrapped; they surface as whatever the HTTP library raises.
"""

from __future__ import annotations

from typing import Literal

ErrorField = Literal["error", "code", "response"]


class GatewayError(RuntimeError):
    """Raised when the gateway reports a failure for a call.

    The message is the remote ``error`` string or ``code`` string verbatim.
    ``field`` records which of the two carried it (``"response"`` is used
    when a success body lacks the expected payload).
    """

    def __init__(
        self,
        message: str,
        *,
        field: ErrorField = "error",
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field: ErrorField = field
        self.operation: str | None = operation

    @property
    def message(self) -> str:
        return str(self)

    def to_payload(self) -> dict[str, str]:
        """Return a JSON-serialisable payload **without secrets**."""
        payload = {
            "error": "gateway_error",
            "field": self.field,
            "message": str(self),
        }
        if self.operation:
            payload["operation"] = self.operation
        return payload
