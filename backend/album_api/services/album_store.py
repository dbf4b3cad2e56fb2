"""
Album Service Backend: In-Memory Album Store
============================================

What:  Holds the ordered album collection and answers list / get / add.
How:   A plain list in insertion order, guarded by a single asyncio.Lock.
Who:   Created by the app factory (one store per app instance) and handed to
       route handlers through the `get_album_store` dependency.
When:  Lives for the lifetime of the process; nothing is persisted.

Ordering and lookup:
    Albums are kept in insertion order, which is also the scan order for
    lookups. Identifiers are not unique, so get_album() returns the first
    match.

Locking:
    Every operation takes the lock, including reads. list_albums() hands back
    a copy, so a caller iterating the result never sees a concurrent append.
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from fastapi import Request

from album_api.exceptions import AlbumNotFoundError
from album_api.schemas.album import Album

logger = logging.getLogger(__name__)


SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


class AlbumStore:
    """
    Ordered, lock-guarded collection of albums.

    Responsibilities:
        - list_albums(): snapshot of every album in insertion order
        - get_album(): first album whose id matches, else AlbumNotFoundError
        - add_album(): append to the end of the collection
    """

    def __init__(self, albums: Optional[Iterable[Album]] = None):
        self._albums: List[Album] = list(albums or ())
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls) -> "AlbumStore":
        """Create a store holding the three seed albums."""
        return cls(SEED_ALBUMS)

    async def list_albums(self) -> List[Album]:
        async with self._lock:
            albums = list(self._albums)
        logger.debug("Listing %d albums", len(albums))
        return albums

    async def get_album(self, album_id: str) -> Album:
        """
        Return the first album whose id equals `album_id`.

        Raises:
            AlbumNotFoundError: No album has that id (→ 404)
        """
        async with self._lock:
            album = next((a for a in self._albums if a.id == album_id), None)

        if album is None:
            raise AlbumNotFoundError(album_id=album_id)
        return album

    async def add_album(self, album: Album) -> Album:
        """Append `album` to the end of the collection and return it."""
        async with self._lock:
            self._albums.append(album)
            total = len(self._albums)
        logger.info("Added album %s (%s); store now holds %d", album.id, album.title, total)
        return album

    async def count(self) -> int:
        async with self._lock:
            return len(self._albums)


def get_album_store(request: Request) -> AlbumStore:
    """FastAPI dependency: the store owned by the running application."""
    return request.app.state.album_store
