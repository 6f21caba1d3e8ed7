"""Requesting test coins from a network faucet."""

from __future__ import annotations

import json
from collections.abc import Mapping

import httpx

FAUCET_URI_GAS_V0 = "/gas"
FAUCET_URI_GAS_V1 = "/v1/gas"


class FaucetError(Exception):
    """Raised when a faucet request cannot be made or is refused."""


def request_sui_from_faucet(
    faucet_host: str,
    recipient_address: str,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Ask the faucet at ``faucet_host`` to send a fixed amount to ``recipient_address``."""
    body = {"FixedAmountRequest": {"recipient": recipient_address}}
    _faucet_request(faucet_host + FAUCET_URI_GAS_V1, body, headers or {})


def _faucet_request(url: str, body: object, headers: Mapping[str, str]) -> None:
    request_headers = httpx.Headers({"Content-Type": "application/json"})
    request_headers.update(headers)
    try:
        response = httpx.post(
            url, content=json.dumps(body, separators=(",", ":")), headers=request_headers
        )
    except httpx.HTTPError as exc:
        raise FaucetError(f"Request faucet error: {exc}") from exc
    if response.status_code not in (200, 202):
        raise FaucetError(
            f"Request faucet failed, statusCode: {response.status_code}, err: {response.text}"
        )