"""
Models for the resources the bundled endpoints return.

Field names follow the JSON payloads. Unknown fields are ignored so that new
fields on the server side don't break decoding.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("Bucket", "Person", "Todo", "PersonTodoList")


class Resource(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Bucket(Resource):
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    app_url: Optional[str] = None


class Person(Resource):
    id: int
    identity_id: Optional[int] = None
    name: str
    email_address: Optional[str] = None
    admin: bool = False
    avatar_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None
    app_url: Optional[str] = None


class Todo(Resource):
    id: int
    content: str
    completed: bool = False
    due_at: Optional[str] = None
    url: Optional[str] = None
    app_url: Optional[str] = None


class PersonTodoList(Resource):
    id: int
    name: str
    description: Optional[str] = None
    completed: bool = False
    url: Optional[str] = None
    app_url: Optional[str] = None
    bucket: Optional[Bucket] = None
    assigned_todos: List[Todo] = Field(default_factory=list)
