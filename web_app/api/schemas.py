"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Fields are optional here so that missing values are reported by the
    service as invalid input rather than by FastAPI as a 422.
    """

    url: Optional[str] = Field(None, description="The URL to shorten")
    user_id: Optional[str] = Field(None, alias="userId", description="Identity provider subject of the creator")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "userId": "109876543210987654321",
                }
            ]
        },
    )


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., alias="shortCode", description="The generated short code")
    short_url: str = Field(..., alias="shortUrl", description="The complete short URL")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "shortCode": "1a2b3c4d",
                    "shortUrl": "https://short.link/urls/1a2b3c4d",
                }
            ]
        },
    )


class ShortLinkItem(BaseModel):
    """One entry of a user's short links."""

    short_code: str = Field(..., alias="shortCode")
    original_url: str = Field(..., alias="originalUrl")
    short_url: str = Field(..., alias="shortUrl")

    model_config = ConfigDict(populate_by_name=True)


class ShortLinkListResponse(BaseModel):
    """Short links created by one user, oldest first."""

    urls: List[ShortLinkItem]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    message: Optional[str] = Field(None, description="Detail for internal errors")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    total_owners: int
    store: str
