"""Typed, immutable records used by the gateway clients."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Literal, Mapping, TypedDict

DEFAULT_BASE_URL: Final[str] = "https://1login.xyz/api/gateway"


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """Credentials and endpoint shared by every call of one client."""

    client_id: str
    client_secret: str
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not isinstance(self.client_id, str) or not self.client_id:
            raise ValueError("client_id is required")
        if not isinstance(self.client_secret, str) or not self.client_secret:
            raise ValueError("client_secret is required")
        base_url = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        object.__setattr__(self, "base_url", base_url)

    def url_for(self, path: str) -> str:
        """Join *path* (``/get-user``…) onto the configured base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def credentials(self) -> dict[str, str]:
        """Return the ``clientId`` / ``clientSecret`` pair sent with every call."""
        return {"clientId": self.client_id, "clientSecret": self.client_secret}

    def __repr__(self) -> str:
        # client_secret intentionally omitted
        return (
            f"GatewayConfig(client_id={self.client_id!r}, base_url={self.base_url!r})"
        )

    @classmethod
    def from_env(cls, prefix: str = "ONELOGIN_") -> GatewayConfig:
        """Build a config from ``{prefix}CLIENT_ID``, ``{prefix}CLIENT_SECRET``
        and the optional ``{prefix}BASE_URL``.

        Raises
        ------
        ValueError
            If either credential variable is unset or empty.
        """
        client_id = os.getenv(f"{prefix}CLIENT_ID", "")
        client_secret = os.getenv(f"{prefix}CLIENT_SECRET", "")
        if not client_id or not client_secret:
            raise ValueError(
                f"{prefix}CLIENT_ID and {prefix}CLIENT_SECRET must both be set"
            )
        base_url = os.getenv(f"{prefix}BASE_URL") or DEFAULT_BASE_URL
        return cls(client_id=client_id, client_secret=client_secret, base_url=base_url)


@dataclass(frozen=True, slots=True)
class Notification:
    """Push notification delivered to a user through ``/notify``."""

    title: str
    body: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "body": self.body}

    @classmethod
    def coerce(cls, value: Notification | Mapping[str, str]) -> Notification:
        """Accept either a :class:`Notification` or a ``{title, body}`` mapping."""
        if isinstance(value, cls):
            return value
        try:
            return cls(title=value["title"], body=value["body"])
        except (KeyError, TypeError):
            raise ValueError("notification requires 'title' and 'body'") from None


# --------------------------------------------------------------------------- #
# User profile (wire shape, every key optional)                               #
# --------------------------------------------------------------------------- #
Gender = Literal["MALE", "FEMALE", "OTHER", "RATHER_NOT_SAY"]


class EmailDetails(TypedDict, total=False):
    address: str
    verified: bool


class PhoneDetails(TypedDict, total=False):
    number: str
    verified: bool


class PersonalDetails(TypedDict, total=False):
    name: str
    dateOfBirth: str
    gender: Gender


class CompanyDetails(TypedDict, total=False):
    name: str
    website: str


class BillingDetails(TypedDict, total=False):
    firstName: str
    lastName: str
    line1: str
    line2: str
    city: str
    state: str
    postalCode: str
    country: str


class UserProfile(TypedDict, total=False):
    """Profile returned by ``/get-user``.

    Absent keys mean the identity provider holds no such data for the user;
    the record is handed back exactly as decoded, without defaults.
    """

    id: str
    joinedAt: str
    email: EmailDetails
    phone: PhoneDetails
    kyc_verified: bool
    personalDetails: PersonalDetails
    companyDetails: CompanyDetails
    billingDetails: BillingDetails
