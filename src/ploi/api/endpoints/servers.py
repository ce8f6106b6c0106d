"""Server API endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ploi.api.client import PloiClient
from ploi.api.endpoints.sites import SitesAPI
from ploi.api.models import Server


@dataclass(frozen=True)
class ServerRef:
    """Parent resource that sites are nested under."""

    id: int
    endpoint: str = "/servers"


class ServersAPI:
    def __init__(self, client: PloiClient) -> None:
        self._client = client

    async def list(self) -> list[Server]:
        response = await self._client.get("/servers")
        return [Server(**s) for s in response.data.get("data", [])]

    async def get(self, server_id: int) -> Server:
        response = await self._client.get(f"/servers/{server_id}")
        return Server(**response.data["data"])

    def ref(self, server_id: int) -> ServerRef:
        return ServerRef(server_id)

    def sites(self, server_id: int) -> SitesAPI:
        return SitesAPI(self._client, self.ref(server_id))
