# Middleware package init
"""
Album Service Backend: Middleware Package
=========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request ID is assigned first so the access log line and any error
    response for the request carry it.
"""
