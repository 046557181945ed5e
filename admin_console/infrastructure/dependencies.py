"""Dependency wiring — builds infrastructure adapters and controllers from settings."""

from collections.abc import Callable

import httpx

from admin_console.application.resources import get_resource
from admin_console.application.interfaces import SessionProvider
from admin_console.application.services import (
    EntityListController,
    GateDecision,
    check_access,
)
from admin_console.config import Settings, get_settings
from admin_console.infrastructure.http import RestCollectionClient, UploadClient


def _client_options(
    settings: Settings, http_client: httpx.AsyncClient | None
) -> dict:
    return {
        "api_token": settings.api_token,
        "session_cookie": settings.session_cookie,
        "session_cookie_name": settings.session_cookie_name,
        "timeout": settings.request_timeout,
        "http_client": http_client,
        "default_error_message": settings.default_error_message,
        "transport_error_message": settings.transport_error_message,
        "malformed_response_message": settings.malformed_response_message,
    }


def get_collection_client(
    resource_name: str,
    *,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> RestCollectionClient:
    """Provides a RestCollectionClient for a registered resource."""
    settings = settings or get_settings()
    resource = get_resource(resource_name)
    return RestCollectionClient(
        settings.api_base_url,
        resource.resource_path,
        **_client_options(settings, http_client),
    )


def get_upload_client(
    *,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> UploadClient:
    """Provides the materials UploadClient."""
    settings = settings or get_settings()
    return UploadClient(
        settings.api_base_url,
        max_upload_size_mb=settings.max_upload_size_mb,
        **_client_options(settings, http_client),
    )


def build_controller(
    resource_name: str,
    *,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
    on_unauthenticated: Callable[[], None] | None = None,
) -> EntityListController:
    """Provides an EntityListController wired to its REST collection."""
    resource = get_resource(resource_name)
    client = get_collection_client(
        resource_name, http_client=http_client, settings=settings
    )
    return EntityListController(
        resource, client, on_unauthenticated=on_unauthenticated
    )


def build_gated_controller(
    resource_name: str,
    pathname: str,
    session_provider: SessionProvider,
    *,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
    on_unauthenticated: Callable[[], None] | None = None,
) -> tuple[GateDecision, EntityListController | None]:
    """Check the session for ``pathname`` and build the page's controller if allowed."""
    decision = check_access(session_provider.current(), pathname)
    if not decision.allowed:
        return decision, None
    return decision, build_controller(
        resource_name,
        http_client=http_client,
        settings=settings,
        on_unauthenticated=on_unauthenticated,
    )
