"""Structured logging helpers for the gateway clients.

This module purposefully restricts **which** contextual attributes are attached
to log records in order to avoid accidentally leaking secrets.  All helpers
ONLY inject the following *non-sensitive* fields:

- ``operation``      – Gateway operation being performed (``get-user``…)
- ``client_id``      – The configured client identifier (first 6 chars kept)
- ``correlation_id`` – Optional identifier supplied by outer layers

Client secrets, access tokens and ephemeral tokens are never attached; use
:func:`mask_sensitive` when a token has to appear in a message.

Usage
-----
>>> from onelogin_gateway.log_utils import get_gateway_logger
>>> log = get_gateway_logger(operation="get-user", client_id="client-abcdef")
>>> log.debug("Calling gateway")
DEBUG onelogin-gateway.client operation=get-user client_id=client ...

The adapter is a thin wrapper around :class:`logging.LoggerAdapter`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

_MASK = "****"


def mask_sensitive(value: str | None, keep: int = 4) -> str:
    """Return *value* truncated to its first *keep* characters plus a mask."""
    if not value:
        return _MASK
    if len(value) <= keep:
        return _MASK
    return f"{value[:keep]}{_MASK}"


class _GatewayLoggerAdapter(logging.LoggerAdapter):
    """Inject whitelisted gateway context into log records."""

    extra_keys = ("operation", "client_id", "correlation_id")

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        extra_clean: MutableMapping[str, Any] = {}
        for k in self.extra_keys:
            if k == "client_id" and extra and extra.get("client_id"):
                # keep only first 6 characters of the client identifier
                extra_clean[k] = str(extra["client_id"])[:6]
            elif extra and k in extra and extra[k] is not None:
                extra_clean[k] = extra[k]
        super().__init__(logger, extra_clean)

    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        if "extra" not in kwargs or kwargs["extra"] is None:
            kwargs["extra"] = {}
        # merge but do not overwrite call-site provided extras
        for k, v in self.extra.items():
            kwargs["extra"].setdefault(k, v)
        return msg, kwargs


def get_gateway_logger(
    *,
    base_logger_name: str = "onelogin-gateway.client",
    operation: str | None = None,
    client_id: str | None = None,
    correlation_id: str | None = None,
) -> logging.LoggerAdapter:
    """Return a LoggerAdapter pre-filled with gateway context."""
    logger = logging.getLogger(base_logger_name)
    return _GatewayLoggerAdapter(
        logger,
        {
            "operation": operation,
            "client_id": client_id,
            "correlation_id": correlation_id,
        },
    )
