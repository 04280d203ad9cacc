"""View models for the todo list, the create form and the filter page.

Each model owns its own state: the list owns its filter, rows and
mutations, the page owns the selected tab. Nothing here caches todos;
every successful mutation is reconciled by fetching again.
"""

import logging
from typing import Awaitable, Callable, Iterable

from todo_ui.client import TodoApi
from todo_ui.errors import RemoteCallError, UnknownViewError
from todo_ui.models import Status, Todo, normalize_statuses
from todo_ui.mutation import Mutation

__all__ = [
    "ALL_VIEW",
    "DEFAULT_STATUSES",
    "CreateTodoModel",
    "TodoListModel",
    "TodoPage",
]

logger = logging.getLogger(__name__)

ALL_VIEW = "all"
DEFAULT_STATUSES = (Status.PENDING,)


class TodoListModel:
    """Todos matching a status filter, plus toggle and delete mutations."""

    def __init__(self, api: TodoApi, statuses: Iterable[Status | str] | None = None):
        self.api = api
        self.statuses = normalize_statuses(DEFAULT_STATUSES if statuses is None else statuses)
        self.todos: list[Todo] = []
        self.error: RemoteCallError | None = None

        self.update_status = Mutation(api.update, on_success=self._refetch, name="todoStatus.update")
        self.delete_todo = Mutation(api.delete, on_success=self._refetch, name="todo.delete")

    async def fetch(self) -> list[Todo]:
        """Replace the rows with what the API returns for the current filter."""
        try:
            todos = await self.api.get_all(self.statuses)
        except RemoteCallError as e:
            logger.warning("Fetching %s todos failed: %s", "/".join(self.statuses), e.message)
            self.error = e
            self.todos = []
        else:
            self.error = None
            self.todos = list(todos)
        return self.todos

    async def _refetch(self, _result):
        await self.fetch()

    async def set_statuses(self, statuses: Iterable[Status | str]) -> list[Todo]:
        statuses = normalize_statuses(statuses)
        if statuses != self.statuses:
            self.statuses = statuses
            await self.fetch()
        return self.todos

    async def toggle_status(self, todo: Todo) -> bool:
        """Flip a todo between pending and completed.

        Returns:
            Whether an update was issued (False while another toggle is in flight).
        """
        return await self.update_status.mutate(todo_id=todo.id, status=todo.status.opposite)

    async def delete(self, todo_id: int) -> bool:
        return await self.delete_todo.mutate(id=todo_id)

    @property
    def is_busy(self) -> bool:
        return self.update_status.is_loading or self.delete_todo.is_loading


class CreateTodoModel:
    def __init__(
        self,
        api: TodoApi,
        on_created: Callable[[Todo], Awaitable[object]] | None = None,
    ):
        self.value = ""
        self.on_created = on_created
        self.create_todo = Mutation(api.create, on_success=self._created, name="todo.create")

    async def submit(self, body: str | None = None) -> bool:
        """Create a todo from `body` (or the current value); blank bodies are ignored."""
        body = (self.value if body is None else body).strip()
        if not body or self.create_todo.is_loading:
            return False
        self.value = body
        return await self.create_todo.mutate(body=body)

    async def _created(self, todo: Todo):
        self.value = ""
        if self.on_created is not None:
            await self.on_created(todo)


class TodoPage:
    """Tabbed page: an "all" view plus one view per status.

    Switching tabs is local and synchronous. The active view fetches its
    own data when the page mounts it.
    """

    def __init__(self, api: TodoApi):
        self.statuses = tuple(Status)
        self.views: dict[str, TodoListModel] = {ALL_VIEW: TodoListModel(api, self.statuses)}
        for status in self.statuses:
            self.views[status.value] = TodoListModel(api, [status])
        self.selected = ALL_VIEW
        self.create_form = CreateTodoModel(api, on_created=self._refresh_active)

    @property
    def keys(self) -> list[str]:
        return list(self.views)

    @property
    def active(self) -> TodoListModel:
        return self.views[self.selected]

    def select_view(self, key: str | Status):
        if isinstance(key, Status):
            key = key.value
        if key not in self.views:
            raise UnknownViewError(key, self.keys)
        self.selected = key

    async def mount(self) -> list[Todo]:
        return await self.active.fetch()

    async def _refresh_active(self, _todo):
        await self.active.fetch()
