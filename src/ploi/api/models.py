"""Pydantic models for Ploi API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _PloiModel(BaseModel):
    """Base model that ignores extra fields from the API."""
    model_config = ConfigDict(extra="ignore")


def _none_to_list(v: list | None) -> list:
    """Coerce None to empty list for API fields that may return null."""
    return v if v is not None else []


def _none_to_false(v: bool | None) -> bool:
    """Coerce None to False for API fields that may return null."""
    return v if v is not None else False


class Server(_PloiModel):
    id: int
    name: str
    ip_address: str | None = None
    type: str | None = None
    php_version: str | float | None = None
    mysql_version: str | int | None = None
    sites_count: int = 0
    status: str | None = None
    created_at: str | None = None

    @field_validator("sites_count", mode="before")
    @classmethod
    def _coerce_count(cls, v):
        return v if v is not None else 0


class Site(_PloiModel):
    id: int
    server_id: int | None = None
    domain: str
    status: str | None = None
    web_directory: str | None = None
    project_root: str | None = None
    project_type: str | None = None
    system_user: str | None = None
    php_version: str | float | None = None
    deploy_script: bool = False
    has_repository: bool = False
    last_deploy_at: str | None = None
    created_at: str | None = None
    notification_urls: list = Field(default_factory=list)

    @field_validator("notification_urls", mode="before")
    @classmethod
    def _coerce_lists(cls, v):
        return _none_to_list(v)

    @field_validator("deploy_script", "has_repository", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return _none_to_false(v)
