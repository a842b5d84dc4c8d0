"""Asyncio flavour of the gateway client, backed by ``httpx``.

Semantics are identical to :class:`~onelogin_gateway.client.OneLoginClient`;
only the transport differs.  Without an injected ``httpx.AsyncClient`` each
call opens and closes its own short-lived client, so one instance can be
awaited from any number of concurrent tasks.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from onelogin_gateway.client import (
    ACCESS_TOKEN_PATH,
    GET_USER_PATH,
    JSON_HEADERS,
    NOTIFY_PATH,
    REVOKE_TOKEN_PATH,
    BaseGatewayClient,
    _require,
)
from onelogin_gateway.log_utils import mask_sensitive
from onelogin_gateway.models import GatewayConfig, Notification, UserProfile

_LOG = logging.getLogger("onelogin-gateway.async_client")


class AsyncOneLoginClient(BaseGatewayClient):
    """Non-blocking gateway client."""

    def __init__(
        self,
        config: GatewayConfig | None = None,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | httpx.Timeout | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            config,
            client_id=client_id,
            client_secret=client_secret,
            base_url=base_url,
            timeout=timeout,
        )
        self._http_client = http_client

    async def _post(self, path: str, fields: Mapping[str, Any]) -> Any:
        url, body = self._prepare(path, fields)
        kwargs: dict[str, Any] = {"json": body, "headers": JSON_HEADERS}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        if self._http_client is not None:
            resp = await self._http_client.post(url, **kwargs)
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.post(url, **kwargs)
        return self._settle(path, resp, ok=resp.is_success)

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    async def exchange_token(self, ephemeral_token: str) -> str:
        """Exchange a single-use *ephemeral_token* for an access token."""
        _require("ephemeral_token", ephemeral_token)
        payload = await self._post(ACCESS_TOKEN_PATH, {"ephemeralToken": ephemeral_token})
        return self._token_from(payload)

    async def get_user(self, access_token: str) -> UserProfile:
        _require("access_token", access_token)
        payload = await self._post(GET_USER_PATH, {"accessToken": access_token})
        return self._profile_from(payload)

    async def revoke_access_token(self, access_token: str) -> bool:
        _require("access_token", access_token)
        await self._post(REVOKE_TOKEN_PATH, {"accessToken": access_token})
        _LOG.info("Revoked access token %s", mask_sensitive(access_token))
        return True

    async def notify(
        self, access_token: str, notification: Notification | Mapping[str, str]
    ) -> bool:
        await self._post(NOTIFY_PATH, self._notify_fields(access_token, notification))
        _LOG.info("Sent notification to %s", mask_sensitive(access_token))
        return True
