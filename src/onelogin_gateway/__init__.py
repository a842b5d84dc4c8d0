"""Client library for the 1Login identity gateway.

Exchange an ephemeral token for an access token, fetch the verified user
profile, revoke the token and push notifications, each through one stateless
``POST`` against the gateway.

Sub-modules
-----------
models
    Immutable configuration / notification records and the profile shape.
result
    Classification of gateway responses into success or failure.
errors
    The :class:`GatewayError` domain exception.
client
    Blocking client built on :mod:`requests`.
async_client
    Asyncio client built on :mod:`httpx`.
log_utils
    Structured logging helpers (thin wrapper around :pymod:`logging`).

All public objects are re-exported here for convenience.
"""

from __future__ import annotations

from .models import (  # noqa: F401
    DEFAULT_BASE_URL,
    BillingDetails,
    CompanyDetails,
    EmailDetails,
    Gender,
    GatewayConfig,
    Notification,
    PersonalDetails,
    PhoneDetails,
    UserProfile,
)
from .result import (  # noqa: F401
    GatewayFailure,
    GatewayResult,
    GatewaySuccess,
    classify_response,
)
from .errors import GatewayError  # noqa: F401
from .client import OneLoginClient  # noqa: F401
from .async_client import AsyncOneLoginClient  # noqa: F401
from .log_utils import get_gateway_logger, mask_sensitive  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # models
    "DEFAULT_BASE_URL",
    "GatewayConfig",
    "Notification",
    "UserProfile",
    "EmailDetails",
    "PhoneDetails",
    "PersonalDetails",
    "CompanyDetails",
    "BillingDetails",
    "Gender",
    # result
    "GatewayResult",
    "GatewaySuccess",
    "GatewayFailure",
    "classify_response",
    # errors
    "GatewayError",
    # clients
    "OneLoginClient",
    "AsyncOneLoginClient",
    # logging helpers
    "get_gateway_logger",
    "mask_sensitive",
]
