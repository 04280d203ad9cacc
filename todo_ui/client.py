"""Remote todo API: the collaborator protocol and its tRPC HTTP client.

The server exposes a non-batched tRPC router:

    GET  {base_url}/todo.getAll?input={"statuses": [...]}
    POST {base_url}/todoStatus.update   {"todoId": 5, "status": "completed"}
    POST {base_url}/todo.delete         {"id": 7}
    POST {base_url}/todo.create         {"body": "..."}

Successful responses are wrapped as {"result": {"data": ...}}, failures as
{"error": {"message": ..., "data": {"code": ..., "httpStatus": ...}}}. With
the superjson transformer enabled, inputs travel as {"json": input} and
outputs come back under a "json" key.
"""

import json
import logging
from typing import Any, Iterable, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from todo_ui.config import Settings
from todo_ui.errors import RemoteCallError
from todo_ui.models import Status, Todo, normalize_statuses

__all__ = ["TodoApi", "TrpcClient", "TrpcTodoApi"]

logger = logging.getLogger(__name__)


class TodoApi(Protocol):
    """Query/mutation surface the view models depend on."""

    async def get_all(self, statuses: Iterable[Status]) -> list[Todo]: ...

    async def update(self, todo_id: int, status: Status) -> Todo: ...

    async def delete(self, id: int) -> None: ...

    async def create(self, body: str) -> Todo: ...


class TrpcClient:
    """Minimal async tRPC-over-HTTP client."""

    def __init__(
        self,
        base_url: str,
        *,
        superjson: bool = True,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.superjson = superjson
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TrpcClient":
        return cls(
            settings.api_url,
            superjson=settings.superjson,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        await self._http.aclose()

    async def query(self, procedure: str, input: Any = None) -> Any:
        return await self._call("GET", procedure, input)

    async def mutation(self, procedure: str, input: Any = None) -> Any:
        return await self._call("POST", procedure, input)

    async def _call(self, method: str, procedure: str, input: Any) -> Any:
        payload = {"json": input} if self.superjson else input
        logger.debug("%s %s %r", method, procedure, input)

        try:
            if method == "GET":
                params = {"input": json.dumps(payload)} if payload is not None else None
                response = await self._http.get(f"/{procedure}", params=params)
            else:
                response = await self._http.post(f"/{procedure}", json=payload)
        except httpx.HTTPError as e:
            raise RemoteCallError(
                f"Request failed: {type(e).__name__}: {e}", procedure=procedure
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteCallError(
                "Response body is not valid JSON",
                procedure=procedure,
                http_status=response.status_code,
            ) from e

        if isinstance(body, dict) and "error" in body:
            raise self._error_from_envelope(procedure, body["error"], response.status_code)

        if response.is_error:
            raise RemoteCallError(
                f"Unexpected HTTP status {response.status_code}",
                procedure=procedure,
                http_status=response.status_code,
            )

        try:
            data = body["result"].get("data")
        except (KeyError, TypeError, AttributeError) as e:
            raise RemoteCallError(
                "Response is missing the result envelope",
                procedure=procedure,
                http_status=response.status_code,
            ) from e

        if self.superjson and isinstance(data, dict):
            data = data.get("json")
        return data

    def _error_from_envelope(self, procedure: str, error: Any, status_code: int) -> RemoteCallError:
        if self.superjson and isinstance(error, dict) and "json" in error:
            error = error["json"]
        if not isinstance(error, dict):
            return RemoteCallError(str(error), procedure=procedure, http_status=status_code)

        data = error.get("data") or {}
        return RemoteCallError(
            error.get("message") or "Remote procedure failed",
            procedure=procedure,
            code=data.get("code") or error.get("code"),
            http_status=data.get("httpStatus", status_code),
        )


class TrpcTodoApi:
    """TodoApi backed by the todo/todoStatus tRPC routers.

    Payloads that do not match the Todo model raise RemoteCallError, like
    any other malformed response.
    """

    def __init__(self, client: TrpcClient):
        self.client = client

    async def get_all(self, statuses: Iterable[Status]) -> list[Todo]:
        data = await self.client.query(
            "todo.getAll",
            {"statuses": [s.value for s in normalize_statuses(statuses)]},
        )
        return _validate("todo.getAll", _TODO_LIST, data or [])

    async def update(self, todo_id: int, status: Status) -> Todo:
        data = await self.client.mutation(
            "todoStatus.update", {"todoId": todo_id, "status": Status(status).value}
        )
        return _validate("todoStatus.update", _TODO, data)

    async def delete(self, id: int) -> None:
        await self.client.mutation("todo.delete", {"id": id})

    async def create(self, body: str) -> Todo:
        data = await self.client.mutation("todo.create", {"body": body})
        return _validate("todo.create", _TODO, data)


_TODO = TypeAdapter(Todo)
_TODO_LIST = TypeAdapter(list[Todo])


def _validate(procedure: str, adapter: TypeAdapter, data: Any):
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise RemoteCallError(
            f"Unexpected response shape: {e.error_count()} validation error(s)",
            procedure=procedure,
        ) from e
