import pytest

from etagcache import AsyncCacheStore, CachedValue, CacheEntry, Person, Shape


def make_entry(etag: str = '"v1"', name: str = "Jason Fried") -> CacheEntry:
    return CacheEntry(
        etag=etag,
        value=CachedValue(shape=Shape.SINGLE, model=Person, value=Person(id=1, name=name)),
        last_requested=1704067200.0,
    )


@pytest.mark.anyio
async def test_lookup_missing_key():
    store = AsyncCacheStore()

    assert await store.lookup("https://example.com/people.json") is None


@pytest.mark.anyio
async def test_insert_and_lookup():
    store = AsyncCacheStore()
    entry = make_entry()

    await store.insert("https://example.com/people/1.json", entry)

    stored = await store.lookup("https://example.com/people/1.json")
    assert stored == entry


@pytest.mark.anyio
async def test_insert_replaces_existing_entry():
    store = AsyncCacheStore()

    await store.insert("https://example.com/people/1.json", make_entry(etag='"v1"', name="Old"))
    await store.insert("https://example.com/people/1.json", make_entry(etag='"v2"', name="New"))

    stored = await store.lookup("https://example.com/people/1.json")
    assert stored is not None
    assert stored.etag == '"v2"'
    assert stored.value.value.name == "New"
    assert len(await store.dump()) == 1


@pytest.mark.anyio
async def test_remove():
    store = AsyncCacheStore()
    await store.insert("https://example.com/people/1.json", make_entry())

    await store.remove("https://example.com/people/1.json")

    assert await store.lookup("https://example.com/people/1.json") is None


@pytest.mark.anyio
async def test_remove_missing_key_is_noop():
    store = AsyncCacheStore()
    await store.insert("https://example.com/people/1.json", make_entry())

    await store.remove("https://example.com/people/2.json")

    assert list(await store.dump()) == ["https://example.com/people/1.json"]


@pytest.mark.anyio
async def test_lookup_returns_copy():
    store = AsyncCacheStore()
    await store.insert("https://example.com/people/1.json", make_entry())

    stored = await store.lookup("https://example.com/people/1.json")
    assert stored is not None
    stored.value.value.name = "Changed outside"

    again = await store.lookup("https://example.com/people/1.json")
    assert again is not None
    assert again.value.value.name == "Jason Fried"


@pytest.mark.anyio
async def test_insert_stores_copy():
    store = AsyncCacheStore()
    entry = make_entry()

    await store.insert("https://example.com/people/1.json", entry)
    entry.value.value.name = "Changed after insert"

    stored = await store.lookup("https://example.com/people/1.json")
    assert stored is not None
    assert stored.value.value.name == "Jason Fried"


@pytest.mark.anyio
async def test_dump_is_a_snapshot():
    store = AsyncCacheStore()
    await store.insert("https://example.com/people/1.json", make_entry(etag='"a"'))
    await store.insert("https://example.com/people/2.json", make_entry(etag='"b"'))

    snapshot = await store.dump()
    await store.remove("https://example.com/people/1.json")
    snapshot["https://example.com/people/2.json"].value.value.name = "Changed in snapshot"

    assert {key: entry.etag for key, entry in snapshot.items()} == {
        "https://example.com/people/1.json": '"a"',
        "https://example.com/people/2.json": '"b"',
    }
    stored = await store.lookup("https://example.com/people/2.json")
    assert stored is not None
    assert stored.value.value.name == "Jason Fried"


@pytest.mark.anyio
async def test_clear():
    store = AsyncCacheStore()
    await store.insert("https://example.com/people/1.json", make_entry())
    await store.insert("https://example.com/people/2.json", make_entry())

    await store.clear()

    assert await store.dump() == {}


@pytest.mark.anyio
async def test_key_lock_is_released():
    store = AsyncCacheStore()

    async with store.key_lock("https://example.com/people.json"):
        pass
    async with store.key_lock("https://example.com/people.json"):
        pass

    assert len(store._key_locks) == 0
