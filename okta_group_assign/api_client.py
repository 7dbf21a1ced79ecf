"""Async API client for the Okta group membership endpoint."""
from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Optional

import aiohttp
from yarl import URL

from .auth import OktaAuthenticator
from .errors import TransportError


@dataclass
class OktaResponse:
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        # UnicodeDecodeError is a ValueError, same as a JSON syntax error.
        return json.loads(self.body.decode("utf-8"))


class ApiClient:
    def __init__(self, base_url: str, api_token: str):
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.session: Optional[aiohttp.ClientSession] = None
        self.authenticator: Optional[OktaAuthenticator] = None

    async def __aenter__(self):
        # No timeout override: the aiohttp default applies.
        self.session = aiohttp.ClientSession()
        self.authenticator = OktaAuthenticator(self.api_token)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def put(self, endpoint: str) -> OktaResponse:
        if not self.session or not self.authenticator:
            raise RuntimeError("ApiClient not initialized; use async context manager")

        headers = self.authenticator.get_headers()
        # Path segments are already percent-encoded; stop yarl from re-quoting them.
        url = URL(f"{self.base_url}{endpoint}", encoded=True)
        try:
            async with self.session.put(url, headers=headers) as response:
                body = await response.read()
                return OktaResponse(status=response.status, body=body)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Request timeout for PUT {endpoint}") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"Request error for PUT {endpoint}: {exc}") from exc
