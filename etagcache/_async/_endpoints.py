from __future__ import annotations

import typing as tp

from .._config import Config, get_default_config
from .._resources import Person, PersonTodoList
from ._fetcher import AsyncValidatingFetcher

__all__ = ("AsyncEndpointBase", "AsyncPeopleEndpoint")


class AsyncEndpointBase:
    def __init__(self, fetcher: AsyncValidatingFetcher, config: tp.Optional[Config] = None) -> None:
        self._fetcher = fetcher
        self._config = get_default_config()
        self._config.update(config or {})

    def url_for(self, path: str) -> str:
        return self._config["api_url"].format(account_id=self._config["account_id"], path=path)


class AsyncPeopleEndpoint(AsyncEndpointBase):
    async def get_all(self) -> tp.List[Person]:
        return await self._fetcher.get(self.url_for("people.json"), tp.List[Person])

    async def get(self, person_id: int) -> Person:
        return await self._fetcher.get(self.url_for(f"people/{person_id}.json"), Person)

    async def get_assigned_todo_list(self, person_id: int) -> tp.List[PersonTodoList]:
        """Todo lists holding todos assigned to the person, with those todos inlined."""
        return await self._fetcher.get(
            self.url_for(f"people/{person_id}/assigned_todos.json"),
            tp.List[PersonTodoList],
        )
