"""Response classification shared by every gateway operation.

The gateway answers each call with a JSON object shaped as one of::

    {"error": "<message>"}
    {"code": "<code>"}
    {"data": <payload>}

:func:`classify_response` turns that body into a tagged result right after
transport, before any operation-specific logic runs.  ``error`` is checked
before ``code``; empty values count as absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from onelogin_gateway.errors import ErrorField, GatewayError


@dataclass(frozen=True, slots=True)
class GatewaySuccess:
    """Body carried neither ``error`` nor ``code``."""

    payload: Any = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self, *, operation: str | None = None) -> Any:
        return self.payload


@dataclass(frozen=True, slots=True)
class GatewayFailure:
    """Body carried an ``error`` message or a ``code``."""

    message: str
    field: ErrorField = "error"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self, *, operation: str | None = None) -> Any:
        raise GatewayError(self.message, field=self.field, operation=operation)


GatewayResult = Union[GatewaySuccess, GatewayFailure]


def classify_response(body: Any) -> GatewayResult:
    """Classify a decoded gateway response body.

    Raises
    ------
    ValueError
        If *body* is not a JSON object.
    """
    if not isinstance(body, Mapping):
        raise ValueError(
            f"gateway response must be a JSON object, got {type(body).__name__}"
        )

    error = body.get("error")
    if error:
        return GatewayFailure(message=str(error), field="error")

    code = body.get("code")
    if code:
        return GatewayFailure(message=str(code), field="code")

    return GatewaySuccess(payload=body.get("data"))
