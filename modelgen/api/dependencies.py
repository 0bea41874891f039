"""
Shared FastAPI dependencies — injected into route handlers.
"""

from fastapi import Depends, Request

from modelgen.config import Settings, get_settings
from modelgen.services.source_client import SourceClient
from modelgen.services.transform_service import TransformService


def get_source_client(
    request: Request, settings: Settings = Depends(get_settings)
) -> SourceClient:
    """Provide a SourceClient backed by the shared httpx client."""
    return SourceClient(
        http_client=request.app.state.http_client,
        timeout=settings.source_api_timeout,
    )


def get_transform_service(
    source_client: SourceClient = Depends(get_source_client),
    settings: Settings = Depends(get_settings),
) -> TransformService:
    """Provide a TransformService with its dependencies wired up."""
    return TransformService(source_client=source_client, settings=settings)
