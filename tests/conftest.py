import typing as tp

import httpx
import pytest


class FakeOrigin:
    """
    Stands in for the origin server behind an `httpx.MockTransport`.

    Answers with queued responses in order and remembers every request it saw.
    """

    def __init__(self) -> None:
        self.requests: tp.List[httpx.Request] = []
        self.mocked_responses: tp.List[httpx.Response] = []

    def add_responses(self, responses: tp.List[httpx.Response]) -> None:
        self.mocked_responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.mocked_responses.pop(0)


@pytest.fixture()
def origin() -> FakeOrigin:
    return FakeOrigin()


@pytest.fixture()
def people_payload() -> tp.List[tp.Dict[str, tp.Any]]:
    return [
        {
            "id": 1,
            "identity_id": 10,
            "name": "Jason Fried",
            "email_address": "jason@example.com",
            "admin": True,
            "url": "https://basecamp.com/1/api/v1/people/1.json",
        },
        {
            "id": 2,
            "identity_id": 20,
            "name": "David Heinemeier Hansson",
            "email_address": "david@example.com",
            "admin": False,
            "url": "https://basecamp.com/1/api/v1/people/2.json",
        },
    ]


@pytest.fixture()
def etagcache_messages(caplog: pytest.LogCaptureFixture) -> tp.Callable[[], tp.List[str]]:
    def collect() -> tp.List[str]:
        return [record.getMessage() for record in caplog.records if record.name.startswith("etagcache")]

    return collect
