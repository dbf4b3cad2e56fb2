"""
Album Service Backend: Pydantic Request/Response Schemas
========================================================

What:  Pydantic models defining the wire contract of the album API.
How:   FastAPI uses these models to decode request bodies, serialize
       responses, and generate the OpenAPI description.
When:  Validated on every POST /albums (input) and on every response (output).

Decoding is strict: every field is required, strings must arrive as JSON
strings and price as a finite JSON number (NaN, Infinity and literals that
overflow a float are rejected). Unknown keys are ignored.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Album(BaseModel):
    """
    A single album record.

    JSON shape: {"id": string, "title": string, "artist": string, "price": number}

    No uniqueness, emptiness or range checks are applied; two albums may
    share an id.
    """

    model_config = ConfigDict(
        strict=True,
        allow_inf_nan=False,
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "4",
                    "title": "The Modern Sound of Betty Carter",
                    "artist": "Betty Carter",
                    "price": 49.99,
                }
            ]
        },
    )

    id: str = Field(description="Client-supplied album identifier")
    title: str = Field(description="Album title")
    artist: str = Field(description="Recording artist")
    price: float = Field(description="Price in dollars")


# ══════════════════════════════════════════════════════════════════════════
# Error and Status Models
# ══════════════════════════════════════════════════════════════════════════


class NotFoundResponse(BaseModel):
    """Returned by GET /albums/{id} when no album matches."""
    message: str = Field(description="Fixed message: 'album not found'")


class DecodeErrorResponse(BaseModel):
    """
    Returned by POST /albums when the body cannot be decoded into an Album.

    Example:
        {
            "error": "body.price: Input should be a valid number",
            "details": [{"type": "float_type", "loc": ["body", "price"], ...}]
        }
    """
    error: str = Field(description="One-line summary of the first decode failure")
    details: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Structured field errors as reported by the decoder",
    )


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    album_count: int = Field(description="Number of albums currently held")
    uptime_seconds: float = Field(description="Seconds since service started")
