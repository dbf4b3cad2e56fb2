"""
Album Service Backend: Album Store Unit Tests
=============================================

What:  Tests for AlbumStore list / get / add without HTTP.

What we test:
    ✅ Seeded store holds the three seed albums in order
    ✅ Lookup returns the first match, raises AlbumNotFoundError otherwise
    ✅ Appends land at the end and grow the store by one
    ✅ list_albums() returns a snapshot, not the live list
    ✅ Concurrent appends are all recorded
"""

import asyncio

import pytest

from album_api.exceptions import AlbumNotFoundError
from album_api.schemas.album import Album
from album_api.services.album_store import SEED_ALBUMS, AlbumStore


class TestAlbumStoreList:
    """Tests for list_albums."""

    @pytest.mark.asyncio
    async def test_seeded_store_lists_seed_albums_in_order(self, album_store):
        albums = await album_store.list_albums()

        assert [a.id for a in albums] == ["1", "2", "3"]
        assert albums[0].title == "Blue Train"
        assert albums[2].artist == "Sarah Vaughan"

    @pytest.mark.asyncio
    async def test_empty_store(self):
        store = AlbumStore()
        assert await store.list_albums() == []
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_list_returns_snapshot(self, album_store, new_album_payload):
        """Appending after a list call must not change the earlier result."""
        before = await album_store.list_albums()
        await album_store.add_album(Album(**new_album_payload))

        assert len(before) == 3
        assert len(await album_store.list_albums()) == 4

    @pytest.mark.asyncio
    async def test_repeated_reads_are_identical(self, album_store):
        first = await album_store.list_albums()
        second = await album_store.list_albums()
        assert first == second


class TestAlbumStoreGet:
    """Tests for get_album lookups."""

    @pytest.mark.asyncio
    async def test_every_seeded_id_is_found(self, album_store):
        for seed in SEED_ALBUMS:
            assert await album_store.get_album(seed.id) == seed

    @pytest.mark.asyncio
    async def test_get_jeru(self, album_store):
        album = await album_store.get_album("2")
        assert album == Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99)

    @pytest.mark.asyncio
    async def test_missing_id_raises_not_found(self, album_store):
        with pytest.raises(AlbumNotFoundError) as exc_info:
            await album_store.get_album("999")

        assert exc_info.value.message == "album not found"
        assert exc_info.value.context == {"album_id": "999"}

    @pytest.mark.asyncio
    async def test_duplicate_id_returns_first_match(self, album_store):
        await album_store.add_album(
            Album(id="2", title="Impostor", artist="Nobody", price=1.0)
        )

        album = await album_store.get_album("2")

        assert album.title == "Jeru"

    @pytest.mark.asyncio
    async def test_lookup_is_exact_match(self, album_store):
        with pytest.raises(AlbumNotFoundError):
            await album_store.get_album("02")


class TestAlbumStoreAdd:
    """Tests for add_album."""

    @pytest.mark.asyncio
    async def test_add_appends_to_end(self, album_store, new_album_payload):
        created = await album_store.add_album(Album(**new_album_payload))

        albums = await album_store.list_albums()
        assert created == Album(**new_album_payload)
        assert len(albums) == 4
        assert albums[-1] == created

    @pytest.mark.asyncio
    async def test_add_accepts_empty_fields(self, album_store):
        """No semantic validation: empty strings and zero price are stored."""
        await album_store.add_album(Album(id="", title="", artist="", price=0.0))
        assert await album_store.count() == 4

    @pytest.mark.asyncio
    async def test_concurrent_adds_are_all_recorded(self, album_store):
        await asyncio.gather(
            *(
                album_store.add_album(
                    Album(id=str(100 + i), title=f"Album {i}", artist="Various", price=9.99)
                )
                for i in range(50)
            )
        )

        albums = await album_store.list_albums()
        assert len(albums) == 53
        assert {a.id for a in albums[3:]} == {str(100 + i) for i in range(50)}

    @pytest.mark.asyncio
    async def test_stores_are_independent(self, new_album_payload):
        first = AlbumStore.seeded()
        second = AlbumStore.seeded()

        await first.add_album(Album(**new_album_payload))

        assert await first.count() == 4
        assert await second.count() == 3
