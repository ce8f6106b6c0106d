"""Site API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ploi.api.client import PloiClient
from ploi.api.exceptions import DomainAlreadyExistsError, PloiValidationError
from ploi.api.models import Site

if TYPE_CHECKING:
    from ploi.api.endpoints.servers import ServerRef

DOMAIN_TAKEN_MESSAGE = "The root domain has already been taken."

logger = logging.getLogger(__name__)


class SitesAPI:
    """Sites nested under a single server.

    Instances are immutable: the bound site id is fixed at construction and
    ``with_id`` returns a new instance. Every operation accepts an explicit
    ``site_id`` that takes precedence over the bound one for that call.
    """

    def __init__(
        self, client: PloiClient, server: ServerRef, site_id: int | None = None
    ) -> None:
        self._client = client
        self._server = server
        self._site_id = site_id

    @property
    def server(self) -> ServerRef:
        return self._server

    @property
    def site_id(self) -> int | None:
        return self._site_id

    def with_id(self, site_id: int | None) -> SitesAPI:
        return SitesAPI(self._client, self._server, site_id)

    def endpoint(self, site_id: int | None = None, action: str | None = None) -> str:
        """Build the path for the collection, a record, or a record action."""
        if site_id is None:
            site_id = self._site_id
        path = f"{self._server.endpoint}/{self._server.id}/sites"
        if site_id is not None:
            path = f"{path}/{site_id}"
        if action:
            path = f"{path}/{action.strip('/')}"
        return path

    def _record_endpoint(self, site_id: int | None, action: str | None = None) -> str:
        if site_id is None and self._site_id is None:
            raise ValueError("A site id is required for this operation")
        return self.endpoint(site_id, action)

    async def get(self, site_id: int | None = None) -> dict[str, Any]:
        response = await self._client.get(self.endpoint(site_id))
        return response.data

    async def list(self) -> list[Site]:
        response = await self._client.get(self.with_id(None).endpoint())
        return [Site(**s) for s in response.data.get("data", [])]

    async def find(self, site_id: int | None = None) -> Site:
        response = await self._client.get(self._record_endpoint(site_id))
        return Site(**response.data["data"])

    async def create(
        self, domain: str, web_directory: str = "/public", project_root: str = "/"
    ) -> dict[str, Any]:
        collection = self.with_id(None).endpoint()
        try:
            response = await self._client.post(
                collection,
                json={
                    "root_domain": domain,
                    "web_directory": web_directory,
                    "project_root": project_root,
                },
            )
        except PloiValidationError as exc:
            root_domain = exc.errors.get("root_domain") or []
            if root_domain and root_domain[0] == DOMAIN_TAKEN_MESSAGE:
                logger.info("Site %s already exists on server %s", domain, self._server.id)
                raise DomainAlreadyExistsError(domain, exc.details) from exc
            raise
        return response.data.get("data", {})

    async def delete(self, site_id: int | None = None) -> bool:
        response = await self._client.delete(self._record_endpoint(site_id))
        return response.status_code == 200

    async def deploy(self, site_id: int | None = None) -> bool:
        response = await self._client.post(self._record_endpoint(site_id, "deploy"))
        return response.status_code == 200

    async def get_deploy_script(self, site_id: int | None = None) -> str | None:
        response = await self._client.get(self._record_endpoint(site_id, "deploy/script"))
        return response.data.get("deploy_script") or None

    async def update_deploy_script(self, script: str, site_id: int | None = None) -> bool:
        response = await self._client.patch(
            self._record_endpoint(site_id, "deploy/script"),
            json={"deploy_script": script},
        )
        return response.status_code == 200
