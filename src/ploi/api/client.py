"""Async HTTP client for the Ploi API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ploi.api.exceptions import (
    PloiAPIError,
    PloiAuthenticationError,
    PloiConfigError,
    PloiMaintenanceError,
    PloiNotFoundError,
    PloiRateLimitError,
    PloiServerError,
    PloiValidationError,
)
from ploi.config import PloiConfig, load_config

BASE_URL = "https://ploi.io/api"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class APIResponse:
    """Status code and decoded JSON body of a successful call."""

    status_code: int
    data: dict[str, Any] = field(default_factory=dict)

    def json(self) -> dict[str, Any]:
        return self.data


class PloiClient:
    """Async API client for Ploi.

    Uses a single long-lived httpx.AsyncClient to reuse TCP/TLS connections.
    The client is lazily initialized on first request.
    """

    def __init__(self, api_token: str, base_url: str = BASE_URL) -> None:
        self._api_token = api_token
        self._base_url = base_url
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: PloiConfig | None = None) -> PloiClient:
        config = config or load_config()
        if not config.api.api_token:
            raise PloiConfigError("No Ploi API token configured")
        return cls(config.api.api_token, base_url=config.api.base_url or BASE_URL)

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._api_token}",
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(30.0, connect=10.0),
            )
        return self._client

    async def make_api_call(
        self,
        endpoint: str,
        method: str = "get",
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> APIResponse:
        """Perform one request and return its status and decoded body.

        Error statuses are raised as the matching PloiAPIError subclass.
        """
        method = method.upper()
        client = self._get_client()
        response = await client.request(method, endpoint, json=json, params=params)
        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        self._handle_errors(response)
        if response.status_code == 204 or not response.content:
            return APIResponse(response.status_code)
        return APIResponse(response.status_code, response.json())

    def _handle_errors(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        logger.warning("Ploi API returned %s for %s", response.status_code, response.url)
        if response.status_code == 401:
            raise PloiAuthenticationError("Invalid API token")
        if response.status_code == 404:
            raise PloiNotFoundError(f"Resource not found: {response.url}")
        if response.status_code == 422:
            try:
                details = response.json()
            except Exception:
                details = {"error": response.text}
            raise PloiValidationError(details)
        if response.status_code == 429:
            raise PloiRateLimitError("Too many attempts")
        if response.status_code == 503:
            raise PloiMaintenanceError("Ploi is performing maintenance")
        try:
            error_body = response.json()
            msg = error_body.get("message", response.text)
        except Exception:
            msg = response.text
        if response.status_code >= 500:
            raise PloiServerError(f"Internal server error {response.status_code}: {msg}")
        raise PloiAPIError(f"API error {response.status_code}: {msg}")

    async def get(self, path: str, **kwargs: Any) -> APIResponse:
        return await self.make_api_call(path, "get", **kwargs)

    async def post(self, path: str, **kwargs: Any) -> APIResponse:
        return await self.make_api_call(path, "post", **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> APIResponse:
        return await self.make_api_call(path, "patch", **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> APIResponse:
        return await self.make_api_call(path, "delete", **kwargs)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
