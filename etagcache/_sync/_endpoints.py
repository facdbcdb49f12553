from __future__ import annotations

import typing as tp

from .._config import Config, get_default_config
from .._resources import Person, PersonTodoList
from ._fetcher import ValidatingFetcher

__all__ = ("EndpointBase", "PeopleEndpoint")


class EndpointBase:
    def __init__(self, fetcher: ValidatingFetcher, config: tp.Optional[Config] = None) -> None:
        self._fetcher = fetcher
        self._config = get_default_config()
        self._config.update(config or {})

    def url_for(self, path: str) -> str:
        return self._config["api_url"].format(account_id=self._config["account_id"], path=path)


class PeopleEndpoint(EndpointBase):
    def get_all(self) -> tp.List[Person]:
        return self._fetcher.get(self.url_for("people.json"), tp.List[Person])

    def get(self, person_id: int) -> Person:
        return self._fetcher.get(self.url_for(f"people/{person_id}.json"), Person)

    def get_assigned_todo_list(self, person_id: int) -> tp.List[PersonTodoList]:
        """Todo lists holding todos assigned to the person, with those todos inlined."""
        return self._fetcher.get(
            self.url_for(f"people/{person_id}/assigned_todos.json"),
            tp.List[PersonTodoList],
        )
