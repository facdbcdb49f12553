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

import logging

from etagcache import HTTPTransport, PeopleEndpoint, ValidatingFetcher

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

# Reads ETAGCACHE_API_URL, ETAGCACHE_ACCOUNT_ID and ETAGCACHE_USER_AGENT from the environment.
with ValidatingFetcher(transport=HTTPTransport()) as fetcher:
    people = PeopleEndpoint(fetcher)

    print([person.name for person in people.get_all()])
    # Revalidated with If-None-Match, decoded only if the list changed.
    print([person.name for person in people.get_all()])

    for key, entry in fetcher.dump().items():
        print(f"{key}: etag={entry.etag} last_requested={entry.last_requested}")
