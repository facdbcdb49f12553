import httpx
import pytest

from etagcache import AsyncHTTPTransport, AsyncPeopleEndpoint, AsyncValidatingFetcher, Person, PersonTodoList


def make_endpoint(origin) -> AsyncPeopleEndpoint:
    client = httpx.AsyncClient(transport=httpx.MockTransport(origin))
    fetcher = AsyncValidatingFetcher(transport=AsyncHTTPTransport(client=client))
    config = {"api_url": "https://basecamp.com/{account_id}/api/v1/{path}", "account_id": "999"}
    return AsyncPeopleEndpoint(fetcher, config=config)


@pytest.mark.anyio
async def test_get_all(origin, people_payload):
    origin.add_responses([httpx.Response(200, headers={"ETag": '"people"'}, json=people_payload)])
    endpoint = make_endpoint(origin)

    people = await endpoint.get_all()

    assert str(origin.requests[0].url) == "https://basecamp.com/999/api/v1/people.json"
    assert [person.name for person in people] == ["Jason Fried", "David Heinemeier Hansson"]


@pytest.mark.anyio
async def test_get(origin, people_payload):
    origin.add_responses(
        [
            httpx.Response(200, headers={"ETag": '"p2"'}, json=people_payload[1]),
            httpx.Response(304),
        ]
    )
    endpoint = make_endpoint(origin)

    person = await endpoint.get(2)
    cached_person = await endpoint.get(2)

    assert str(origin.requests[0].url) == "https://basecamp.com/999/api/v1/people/2.json"
    assert origin.requests[1].headers["If-None-Match"] == '"p2"'
    assert isinstance(person, Person)
    assert cached_person == person


@pytest.mark.anyio
async def test_get_assigned_todo_list(origin):
    payload = [
        {
            "id": 968316918,
            "name": "Launch list",
            "description": "What we need for launch!",
            "bucket": {"id": 605816632, "name": "BCX", "type": "Project"},
            "assigned_todos": [
                {"id": 223304243, "content": "Design it", "due_at": "2012-03-27"},
            ],
        }
    ]
    origin.add_responses([httpx.Response(200, headers={"ETag": '"todos"'}, json=payload)])
    endpoint = make_endpoint(origin)

    todo_lists = await endpoint.get_assigned_todo_list(1)

    assert str(origin.requests[0].url) == "https://basecamp.com/999/api/v1/people/1/assigned_todos.json"
    assert len(todo_lists) == 1
    assert isinstance(todo_lists[0], PersonTodoList)
    assert todo_lists[0].bucket is not None
    assert todo_lists[0].bucket.name == "BCX"
    assert [todo.content for todo in todo_lists[0].assigned_todos] == ["Design it"]
