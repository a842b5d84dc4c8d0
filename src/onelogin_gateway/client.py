"""Blocking 1Login gateway client.

Four operations map one-to-one onto gateway sub-paths.  Every call is a single
``POST`` carrying the configured ``clientId`` / ``clientSecret``; the JSON
answer is classified by :func:`~onelogin_gateway.result.classify_response`
and either unwrapped into a typed value or raised as
:class:`~onelogin_gateway.errors.GatewayError`.

Nothing is retried, cached or refreshed.  Transport errors raised by
``requests`` propagate unchanged.

Example
-------
>>> client = OneLoginClient(client_id="<client_id>", client_secret="<secret>")
>>> token = client.exchange_token("ephemeral_token")  # doctest: +SKIP
>>> profile = client.get_user(token)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, Protocol

import requests

from onelogin_gateway.errors import GatewayError
from onelogin_gateway.log_utils import get_gateway_logger, mask_sensitive
from onelogin_gateway.models import GatewayConfig, Notification, UserProfile
from onelogin_gateway.result import classify_response

_LOG = logging.getLogger("onelogin-gateway.client")

# --------------------------------------------------------------------------- #
# Gateway routes                                                              #
# --------------------------------------------------------------------------- #
ACCESS_TOKEN_PATH: Final[str] = "/access-token"
GET_USER_PATH: Final[str] = "/get-user"
REVOKE_TOKEN_PATH: Final[str] = "/revoke-token"
NOTIFY_PATH: Final[str] = "/notify"

JSON_HEADERS: Final[dict[str, str]] = {"Content-Type": "application/json"}


class _HTTPResponse(Protocol):
    """Subset shared by ``requests.Response`` and ``httpx.Response``."""

    def json(self) -> Any: ...

    def raise_for_status(self) -> Any: ...


def _require(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} is required")


# --------------------------------------------------------------------------- #
# Shared request/response plumbing                                            #
# --------------------------------------------------------------------------- #
class BaseGatewayClient:
    """Configuration and request/response handling common to both clients."""

    def __init__(
        self,
        config: GatewayConfig | None = None,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        timeout: Any = None,
    ) -> None:
        if config is None:
            config = GatewayConfig(
                client_id=client_id or "",
                client_secret=client_secret or "",
                base_url=base_url or "",
            )
        elif client_id or client_secret or base_url:
            raise ValueError("pass either config or client_id/client_secret/base_url")
        self._config: GatewayConfig = config
        # Forwarded verbatim to the HTTP library; None keeps its default.
        self._timeout = timeout

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client_id={self._config.client_id!r}, base_url={self._config.base_url!r})"

    # ---------------- internal helpers --------------------------------- #
    def _prepare(self, path: str, fields: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """Return ``(url, json_body)`` for a call; a fresh dict per call."""
        body: dict[str, Any] = dict(fields)
        body.update(self._config.credentials())
        url = self._config.url_for(path)
        get_gateway_logger(
            operation=path.lstrip("/"), client_id=self._config.client_id
        ).debug("POST %s", url)
        return url, body

    def _settle(self, path: str, response: _HTTPResponse, *, ok: bool) -> Any:
        """Classify *response* and return its payload or raise GatewayError.

        A body carrying ``error``/``code`` wins over the HTTP status.  Any other
        non-2xx response raises the HTTP library's own status error.
        """
        operation = path.lstrip("/")
        try:
            result = classify_response(response.json())
        except ValueError:
            if not ok:
                response.raise_for_status()
            raise

        if result.ok and not ok:
            response.raise_for_status()

        if not result.ok:
            get_gateway_logger(
                operation=operation, client_id=self._config.client_id
            ).warning("Gateway rejected %s: %s=%s", operation, result.field, result.message)
        return result.unwrap(operation=operation)

    @staticmethod
    def _token_from(payload: Any) -> str:
        token = payload.get("token") if isinstance(payload, Mapping) else None
        if not isinstance(token, str) or not token:
            raise GatewayError(
                "gateway response is missing data.token",
                field="response",
                operation=ACCESS_TOKEN_PATH.lstrip("/"),
            )
        _LOG.debug("Exchanged ephemeral token for access token %s", mask_sensitive(token))
        return token

    @staticmethod
    def _profile_from(payload: Any) -> UserProfile:
        if not isinstance(payload, Mapping):
            raise GatewayError(
                "gateway response is missing data",
                field="response",
                operation=GET_USER_PATH.lstrip("/"),
            )
        return payload  # type: ignore[return-value]

    @staticmethod
    def _notify_fields(
        access_token: str, notification: Notification | Mapping[str, str]
    ) -> dict[str, Any]:
        _require("access_token", access_token)
        return {
            "accessToken": access_token,
            "notification": Notification.coerce(notification).to_dict(),
        }


# --------------------------------------------------------------------------- #
# Public client                                                               #
# --------------------------------------------------------------------------- #
class OneLoginClient(BaseGatewayClient):
    """Blocking gateway client backed by ``requests``.

    Safe to share between threads: the configuration is frozen and every call
    builds its own request body.  Pass *session* to reuse connections or to
    configure proxies/TLS; the client never closes it.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | tuple[float, float] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(
            config,
            client_id=client_id,
            client_secret=client_secret,
            base_url=base_url,
            timeout=timeout,
        )
        self._session = session

    def _post(self, path: str, fields: Mapping[str, Any]) -> Any:
        url, body = self._prepare(path, fields)
        post = self._session.post if self._session is not None else requests.post
        resp = post(url, json=body, headers=JSON_HEADERS, timeout=self._timeout)
        return self._settle(path, resp, ok=resp.ok)

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def exchange_token(self, ephemeral_token: str) -> str:
        """Exchange a single-use *ephemeral_token* for an access token.

        Raises
        ------
        GatewayError
            If the gateway reports an ``error`` or ``code``.
        """
        _require("ephemeral_token", ephemeral_token)
        payload = self._post(ACCESS_TOKEN_PATH, {"ephemeralToken": ephemeral_token})
        return self._token_from(payload)

    def get_user(self, access_token: str) -> UserProfile:
        """Return the user's profile exactly as reported by the gateway."""
        _require("access_token", access_token)
        payload = self._post(GET_USER_PATH, {"accessToken": access_token})
        return self._profile_from(payload)

    def revoke_access_token(self, access_token: str) -> bool:
        """Revoke *access_token*; returns ``True`` or raises GatewayError."""
        _require("access_token", access_token)
        self._post(REVOKE_TOKEN_PATH, {"accessToken": access_token})
        _LOG.info("Revoked access token %s", mask_sensitive(access_token))
        return True

    def notify(
        self, access_token: str, notification: Notification | Mapping[str, str]
    ) -> bool:
        """Send a push *notification* (``title`` / ``body``) to the token's user."""
        self._post(NOTIFY_PATH, self._notify_fields(access_token, notification))
        _LOG.info("Sent notification to %s", mask_sensitive(access_token))
        return True
