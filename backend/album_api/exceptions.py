"""
Album Service Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by the store.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the right HTTP status code.
Who:   Raised by the album store; caught by the handlers in main.py.

Exception Hierarchy:
    AlbumServiceError (base)
    └── AlbumNotFoundError       → 404 Not Found

Payload decoding failures are not part of this hierarchy: FastAPI raises
`RequestValidationError` before a handler runs, and main.py maps it to a
500 response carrying the structured field errors.
"""

from typing import Any, Dict, Optional


class AlbumServiceError(Exception):
    """
    Base exception for all album service errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AlbumNotFoundError(AlbumServiceError):
    """
    Raised when no album matches the requested identifier.

    HTTP:    404 Not Found
    Body:    {"message": "album not found"}

    The message is fixed; the requested id is kept in `context` for logging
    only.
    """

    def __init__(
        self,
        album_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if album_id is not None:
            ctx["album_id"] = album_id
        super().__init__(message="album not found", context=ctx)
        self.album_id = album_id
