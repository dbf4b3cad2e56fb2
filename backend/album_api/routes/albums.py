"""
Album Service Backend: Album Route Handlers
==========================================

What:  GET /albums (list), GET /albums/{album_id} (detail), POST /albums (add).
How:   Extracts parameters, delegates to the app's AlbumStore, returns JSON.

Error responses (handled by global exception handlers in main.py):
    HTTP 404: No album with the requested id (AlbumNotFoundError)
    HTTP 500: POST body could not be decoded into an Album (RequestValidationError)
"""

from typing import List

from fastapi import APIRouter, Depends

from album_api.schemas.album import Album, DecodeErrorResponse, NotFoundResponse
from album_api.services.album_store import AlbumStore, get_album_store

router = APIRouter(prefix="/albums", tags=["Albums"])


@router.get(
    "",
    response_model=List[Album],
    summary="List all albums",
    description="Returns every album in the order it was added.",
)
async def list_albums(store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    return await store.list_albums()


@router.get(
    "/{album_id}",
    response_model=Album,
    responses={
        200: {"description": "The first album with this id", "model": Album},
        404: {"description": "No album has this id", "model": NotFoundResponse},
    },
    summary="Get an album by id",
)
async def get_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> Album:
    """
    Look up a single album.

    Ids are not unique; when several albums share `album_id` the one added
    first is returned.
    """
    return await store.get_album(album_id)


@router.post(
    "",
    status_code=201,
    response_model=Album,
    responses={
        201: {"description": "Album appended to the collection", "model": Album},
        500: {"description": "Body could not be decoded into an album", "model": DecodeErrorResponse},
    },
    summary="Add an album",
    description=(
        "Appends the album in the request body to the end of the collection "
        "and returns it. The body must carry id, title, artist (strings) and "
        "price (number); nothing is appended if decoding fails."
    ),
)
async def add_album(album: Album, store: AlbumStore = Depends(get_album_store)) -> Album:
    return await store.add_album(album)
