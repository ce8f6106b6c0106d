"""Shared test fixtures for the Ploi client."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ploi.api.client import APIResponse, PloiClient
from ploi.api.endpoints.servers import ServerRef
from ploi.api.models import Server, Site


@pytest.fixture
def mock_client():
    """A PloiClient with mocked HTTP methods."""
    client = PloiClient("test-api-token")
    client.get = AsyncMock(return_value=APIResponse(200))
    client.post = AsyncMock(return_value=APIResponse(200))
    client.patch = AsyncMock(return_value=APIResponse(200))
    client.delete = AsyncMock(return_value=APIResponse(200))
    return client


@pytest.fixture
def server_ref():
    return ServerRef(id=5, endpoint="/servers")


@pytest.fixture
def sample_server_data():
    """Raw server API response data."""
    return {
        "id": 5,
        "type": "server",
        "name": "production",
        "ip_address": "1.2.3.4",
        "php_version": "8.2",
        "mysql_version": 8,
        "sites_count": 2,
        "status": "Server active",
        "created_at": "2024-01-01 10:00:00",
    }


@pytest.fixture
def sample_site_data():
    """Raw site API response data."""
    return {
        "id": 42,
        "server_id": 5,
        "domain": "example.com",
        "status": "active",
        "deploy_script": True,
        "web_directory": "/public",
        "project_type": "laravel",
        "project_root": "/",
        "last_deploy_at": "2024-01-02 10:00:00",
        "system_user": "ploi",
        "php_version": "8.2",
        "has_repository": True,
        "notification_urls": [],
        "created_at": "2024-01-01 10:00:00",
    }


@pytest.fixture
def sample_server(sample_server_data):
    return Server(**sample_server_data)


@pytest.fixture
def sample_site(sample_site_data):
    return Site(**sample_site_data)
