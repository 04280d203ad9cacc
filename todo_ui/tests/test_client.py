"""Test the tRPC HTTP client against httpx.MockTransport."""

import json

import httpx
import pytest
from pydantic import ValidationError

from todo_ui.client import TrpcClient, TrpcTodoApi
from todo_ui.components import IndexPage
from todo_ui.config import Settings
from todo_ui.errors import RemoteCallError
from todo_ui.models import Status, Todo
from todo_ui.views import TodoListModel, TodoPage

BASE_URL = "http://testserver/api/trpc"


def make_api(handler, **kwargs):
    client = TrpcClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)
    return TrpcTodoApi(client)


def ok(data, superjson=True):
    return httpx.Response(200, json={"result": {"data": {"json": data} if superjson else data}})


class TestQueries:
    """Test todo.getAll."""

    @pytest.mark.asyncio
    async def test_get_all_sends_statuses_as_input(self):
        seen = []

        def handler(request):
            seen.append(request)
            return ok([{"id": 1, "body": "A", "status": "pending"}])

        api = make_api(handler)
        todos = await api.get_all([Status.COMPLETED, Status.PENDING])

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/api/trpc/todo.getAll"
        assert json.loads(request.url.params["input"]) == {
            "json": {"statuses": ["pending", "completed"]}
        }
        assert [t.body for t in todos] == ["A"]

    @pytest.mark.asyncio
    async def test_get_all_without_superjson(self):
        seen = []

        def handler(request):
            seen.append(request)
            return ok([{"id": 2, "body": "B", "status": "completed"}], superjson=False)

        api = make_api(handler, superjson=False)
        todos = await api.get_all([Status.COMPLETED])

        assert json.loads(seen[0].url.params["input"]) == {"statuses": ["completed"]}
        assert todos[0].status is Status.COMPLETED

    @pytest.mark.asyncio
    async def test_unknown_status_is_degraded(self):
        api = make_api(lambda request: ok([{"id": 3, "body": "C", "status": "archived"}]))

        todos = await api.get_all([Status.PENDING])

        assert todos[0].status is Status.PENDING


class TestMutations:
    """Test todoStatus.update, todo.delete and todo.create."""

    @pytest.mark.asyncio
    async def test_update_posts_todo_id_and_status(self):
        seen = []

        def handler(request):
            seen.append(request)
            return ok({"id": 5, "body": "Water plants", "status": "completed"})

        api = make_api(handler)
        todo = await api.update(5, Status.COMPLETED)

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/trpc/todoStatus.update"
        assert json.loads(seen[0].content) == {"json": {"todoId": 5, "status": "completed"}}
        assert todo.id == 5 and todo.is_completed

    @pytest.mark.asyncio
    async def test_delete_posts_id(self):
        seen = []

        def handler(request):
            seen.append(request)
            return ok(None)

        api = make_api(handler)
        assert await api.delete(7) is None
        assert seen[0].url.path == "/api/trpc/todo.delete"
        assert json.loads(seen[0].content) == {"json": {"id": 7}}

    @pytest.mark.asyncio
    async def test_create_posts_body(self):
        seen = []

        def handler(request):
            seen.append(request)
            return ok({"id": 8, "body": "Buy milk", "status": "pending"})

        api = make_api(handler)
        todo = await api.create("Buy milk")

        assert json.loads(seen[0].content) == {"json": {"body": "Buy milk"}}
        assert todo.id == 8


class TestErrors:
    """Test translation of transport and server failures."""

    @pytest.mark.asyncio
    async def test_trpc_error_envelope(self):
        def handler(request):
            return httpx.Response(404, json={"error": {"json": {
                "message": "Todo not found",
                "code": -32004,
                "data": {"code": "NOT_FOUND", "httpStatus": 404, "path": "todo.delete"},
            }}})

        api = make_api(handler)
        with pytest.raises(RemoteCallError, match="Todo not found") as exc_info:
            await api.delete(99)

        error = exc_info.value
        assert error.procedure == "todo.delete"
        assert error.code == "NOT_FOUND"
        assert error.http_status == 404

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        api = make_api(handler)
        with pytest.raises(RemoteCallError, match="ConnectError") as exc_info:
            await api.get_all([Status.PENDING])

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_json_response(self):
        api = make_api(lambda request: httpx.Response(502, text="Bad gateway"))

        with pytest.raises(RemoteCallError, match="not valid JSON") as exc_info:
            await api.get_all([Status.PENDING])

        assert exc_info.value.http_status == 502

    @pytest.mark.asyncio
    async def test_http_error_without_envelope(self):
        api = make_api(lambda request: httpx.Response(500, json={"detail": "oops"}))

        with pytest.raises(RemoteCallError, match="HTTP status 500"):
            await api.get_all([Status.PENDING])

    @pytest.mark.asyncio
    async def test_missing_result_envelope(self):
        api = make_api(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(RemoteCallError, match="result envelope"):
            await api.get_all([Status.PENDING])


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_from_settings_and_context_manager(self):
        settings = Settings(api_url="http://example.test/trpc", superjson=False, timeout=5.0)

        async with TrpcClient.from_settings(settings) as client:
            assert client.superjson is False
            assert str(client._http.base_url) == "http://example.test/trpc/"

        assert client._http.is_closed


class TestPayloadValidation:
    """Test that todo payloads not matching the model become RemoteCallError."""

    @pytest.mark.asyncio
    async def test_row_missing_body(self):
        api = make_api(lambda request: ok([{"id": 1, "status": "pending"}]))

        with pytest.raises(RemoteCallError, match="Unexpected response shape") as exc_info:
            await api.get_all([Status.PENDING])

        assert exc_info.value.procedure == "todo.getAll"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.asyncio
    async def test_get_all_payload_not_a_list(self):
        api = make_api(lambda request: ok({"oops": 1}))

        with pytest.raises(RemoteCallError, match="Unexpected response shape"):
            await api.get_all([Status.PENDING])

    @pytest.mark.asyncio
    async def test_malformed_update_and_create(self):
        api = make_api(lambda request: ok({"id": "not-a-number", "body": "A", "status": "pending"}))

        with pytest.raises(RemoteCallError) as exc_info:
            await api.update(1, Status.COMPLETED)
        assert exc_info.value.procedure == "todoStatus.update"

        with pytest.raises(RemoteCallError) as exc_info:
            await api.create("A")
        assert exc_info.value.procedure == "todo.create"

    @pytest.mark.asyncio
    async def test_malformed_list_renders_empty_page(self):
        """A bad payload is a query failure: the page renders with no rows."""
        api = make_api(lambda request: ok({"oops": 1}))
        page = TodoPage(api)

        html = await IndexPage(page=page).render()

        assert "<li" not in html
        assert page.active.todos == []
        assert page.active.error.procedure == "todo.getAll"

    @pytest.mark.asyncio
    async def test_malformed_update_releases_guard(self):
        api = make_api(lambda request: ok({"id": 1}))
        model = TodoListModel(api)

        assert await model.toggle_status(Todo(id=1, body="A", status="pending")) is True

        assert not model.update_status.is_loading
        assert model.update_status.error.procedure == "todoStatus.update"
