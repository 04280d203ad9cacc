"""In-memory TodoApi, used for demos and tests."""

from typing import Iterable

from todo_ui.errors import RemoteCallError
from todo_ui.models import Status, Todo, normalize_statuses


class InMemoryTodoApi:
    """Stores todos in insertion order and records every call made to it.

    Example:
        >>> api = InMemoryTodoApi()
        >>> todo = await api.create("Buy milk")
        >>> api.calls
        [('create', {'body': 'Buy milk'})]
    """

    def __init__(self, todos: Iterable[Todo | dict] = ()):
        self.todos: dict[int, Todo] = {}
        self.calls: list[tuple[str, dict]] = []
        for todo in todos:
            todo = Todo.model_validate(todo)
            self.todos[todo.id] = todo
        self.next_id = max(self.todos, default=0) + 1

    def _get(self, procedure: str, todo_id: int) -> Todo:
        try:
            return self.todos[todo_id]
        except KeyError:
            raise RemoteCallError(
                f"Todo {todo_id} not found", procedure=procedure, code="NOT_FOUND", http_status=404
            ) from None

    async def get_all(self, statuses: Iterable[Status]) -> list[Todo]:
        statuses = normalize_statuses(statuses)
        self.calls.append(("get_all", {"statuses": statuses}))
        return [t for t in self.todos.values() if t.status in statuses]

    async def update(self, todo_id: int, status: Status) -> Todo:
        self.calls.append(("update", {"todo_id": todo_id, "status": Status(status)}))
        todo = self._get("todoStatus.update", todo_id)
        todo = todo.model_copy(update={"status": Status(status)})
        self.todos[todo_id] = todo
        return todo

    async def delete(self, id: int) -> None:
        self.calls.append(("delete", {"id": id}))
        self._get("todo.delete", id)
        del self.todos[id]

    async def create(self, body: str) -> Todo:
        self.calls.append(("create", {"body": body}))
        todo = Todo(id=self.next_id, body=body, status=Status.PENDING)
        self.todos[todo.id] = todo
        self.next_id += 1
        return todo
