"""
Album Service Backend: Application Package Initializer
======================================================

What: Marks the `album_api` directory as a Python package.
Who:  Used by uvicorn (`uvicorn album_api.main:app`), pytest, and the
      `album-service` console script.

Architecture Note:
    The backend keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (In-memory store)     │  ← Ordered album list + lock
    ├─────────────────────────────────────┤
    │          Schemas (Pydantic)         │  ← Wire shape and decoding
    └─────────────────────────────────────┘

    Routes translate HTTP into store calls; the store never sees a request
    object and can be tested on its own.
"""

__version__ = "1.0.0"
