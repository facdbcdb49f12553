#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "etagcache",
# ]
#
# [tool.uv.sources]
# etagcache = { path = "../", editable = true }
# ///

import asyncio
import typing as tp

from etagcache import AsyncCacheStore, AsyncHTTPTransport, AsyncValidatingFetcher, Person


async def main() -> None:
    url = "https://basecamp.com/1/api/v1/people.json"
    store = AsyncCacheStore()

    async with AsyncValidatingFetcher(transport=AsyncHTTPTransport(), store=store) as fetcher:
        people = await fetcher.get(url, tp.List[Person])
        print(f"Fetched {len(people)} people")

        people = await fetcher.get(url, tp.List[Person])
        entry = await store.lookup(url)
        print(f"Revalidated {len(people)} people, etag {entry.etag if entry else None}")


if __name__ == "__main__":
    asyncio.run(main())
