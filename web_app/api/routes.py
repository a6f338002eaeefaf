"""API routes implementation."""

import json
from typing import Optional

from fastapi import APIRouter, Query, Request, status
from pydantic import ValidationError
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    ShortLinkItem,
    ShortLinkListResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from shortlink.errors import InvalidInputError
from ..responses import redirect_to

router = APIRouter()


def public_base_url(request: Request) -> str:
    """Scheme and host clients used to reach us.

    Proxy headers win, then the request's own Host, then BASE_URL.
    """
    proto = request.headers.get("x-forwarded-proto")
    host = request.headers.get("x-forwarded-host")
    if proto and host:
        return f"{proto}://{host}"

    host = request.headers.get("host")
    if host:
        return f"{request.url.scheme}://{host}"

    return request.app.state.config.base_url.rstrip("/")


def short_url_for(request: Request, short_code: str) -> str:
    """Public short URL for a code: base, route prefix, code."""
    prefix = request.app.state.config.path_prefix.strip("/")
    parts = [public_base_url(request)]
    if prefix:
        parts.append(prefix)
    parts.append(short_code)
    return "/".join(parts)


async def _parse_shorten_request(request: Request) -> ShortenRequest:
    """Parse the JSON body by hand so malformed input maps to a 400."""
    raw = await request.body()

    # An empty body is treated as an empty object, so it fails as missing fields
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except ValueError:
        raise InvalidInputError("Invalid JSON in request body")

    if not isinstance(payload, dict):
        raise InvalidInputError("Request body must be a JSON object")

    try:
        return ShortenRequest.model_validate(payload)
    except ValidationError:
        raise InvalidInputError("URL and userId must be strings")


@router.post(
    "/urls",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON, missing fields or invalid URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL owned by the given user.",
)
async def create_short_link(request: Request):
    """Create a shortened URL."""
    service = request.app.state.service
    body = await _parse_shorten_request(request)

    result = await service.create_short_link(
        original_url=body.url,
        owner_id=body.user_id,
    )

    return ShortenResponse(
        short_code=result["short_code"],
        short_url=short_url_for(request, result["short_code"]),
    )


@router.get(
    "/urls",
    response_model=ShortLinkListResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing userId"},
    },
    summary="List a user's short URLs",
    description="List every short URL created by the given user, oldest first.",
)
async def list_short_links(
    request: Request,
    user_id: Optional[str] = Query(None, alias="userId"),
):
    """List short URLs for a user."""
    service = request.app.state.service

    records = await service.list_short_links(user_id)

    return ShortLinkListResponse(
        urls=[
            ShortLinkItem(
                short_code=record["short_code"],
                original_url=record["original_url"],
                short_url=short_url_for(request, record["short_code"]),
            )
            for record in records
        ]
    )


@router.get(
    "/urls/{short_code}",
    status_code=status.HTTP_302_FOUND,
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Follow a short URL",
    description="Redirect to the original URL behind a short code.",
)
async def resolve_short_link(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    original_url = await service.resolve_short_link(short_code)

    return redirect_to(original_url)


@router.get(
    "/api/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    stats = await service.get_statistics()

    return StatisticsResponse(**stats)


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
