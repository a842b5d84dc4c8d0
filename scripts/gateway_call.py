"""gateway_call.py

Developer helper that walks the 1Login gateway flow from the command line:
exchange an ephemeral token, print the user's profile as JSON and optionally
revoke the access token afterwards.

Credentials come from ``ONELOGIN_CLIENT_ID`` / ``ONELOGIN_CLIENT_SECRET``
(optionally ``ONELOGIN_BASE_URL``), which may be kept in a ``.env`` style
file.  Secrets and tokens are **never** printed.

Example
-------
    uv run python scripts/gateway_call.py --ephemeral-token <token> --revoke
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import requests

from onelogin_gateway import GatewayConfig, GatewayError, OneLoginClient

DEFAULT_ENV_FILE = Path("scripts/.env.gateway")


def _load_env_file(env_path: Path | None) -> None:
    """Load KEY=VALUE pairs from a .env style file into *os.environ*."""
    if env_path is None or not env_path.exists():
        return

    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, val = line.split("=", 1)
        key, val = key.strip(), val.strip()
        if key and key not in os.environ:
            os.environ[key] = val


def main() -> None:
    parser = argparse.ArgumentParser(description="Call the 1Login gateway.")
    parser.add_argument("--ephemeral-token", required=True, help="Single-use token from the login flow")
    parser.add_argument("--env-file", type=Path, default=DEFAULT_ENV_FILE, help="Optional .env file")
    parser.add_argument("--revoke", action="store_true", help="Revoke the access token when done")
    parser.add_argument("--timeout", type=float, default=20.0, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    _load_env_file(args.env_file)

    try:
        config = GatewayConfig.from_env()
    except ValueError as exc:
        sys.exit(str(exc))

    client = OneLoginClient(config, timeout=args.timeout)
    try:
        access_token = client.exchange_token(args.ephemeral_token)
        profile = client.get_user(access_token)
        if args.revoke:
            client.revoke_access_token(access_token)
    except GatewayError as exc:
        sys.exit(f"Gateway rejected the request: {exc}")
    except requests.RequestException as exc:
        sys.exit(f"HTTP error communicating with the gateway: {exc}")

    print(json.dumps(profile, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
