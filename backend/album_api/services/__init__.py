# Services package init
"""
Album Service Backend: Services Layer
=====================================

What:  The state-holding layer sitting behind the routes.

Service Inventory:
    - AlbumStore: ordered in-memory album collection guarded by a lock

Routes never touch the album list directly; they receive the app's store
through FastAPI dependency injection (`get_album_store`).
"""
