import asyncio

import pytest

from todo_ui.memory import InMemoryTodoApi
from todo_ui.models import Status


SAMPLE_TODOS = [
    {"id": 1, "body": "A", "status": "pending"},
    {"id": 2, "body": "B", "status": "completed"},
    {"id": 5, "body": "Water plants", "status": "pending"},
    {"id": 7, "body": "Call mom", "status": "completed"},
]


class GatedTodoApi(InMemoryTodoApi):
    """In-memory API whose mutations wait until `gate` is set."""

    def __init__(self, todos=()):
        super().__init__(todos)
        self.gate = asyncio.Event()

    async def update(self, todo_id: int, status: Status):
        await self.gate.wait()
        return await super().update(todo_id, status)

    async def delete(self, id: int):
        await self.gate.wait()
        return await super().delete(id)


@pytest.fixture
def api():
    return InMemoryTodoApi(SAMPLE_TODOS)


@pytest.fixture
def gated_api():
    return GatedTodoApi(SAMPLE_TODOS)


def calls_named(api, name):
    return [params for call, params in api.calls if call == name]
