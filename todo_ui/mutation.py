"""Remote mutations with an in-flight guard and a success continuation."""

import logging
from typing import Any, Awaitable, Callable

from todo_ui.errors import RemoteCallError

__all__ = ["Mutation"]

logger = logging.getLogger(__name__)


class Mutation:
    """One kind of remote mutation (update, delete, create...).

    A single `is_loading` flag guards the whole kind: while one request is
    in flight, every further request of the same kind is dropped, whatever
    its input. The flag is cleared when the request resolves, on success or
    failure, and only then does `on_success` run.

    Example:
        update = Mutation(api.update, on_success=refetch, name="todoStatus.update")
        issued = await update.mutate(todo_id=5, status=Status.COMPLETED)
    """

    def __init__(
        self,
        fn: Callable[..., Awaitable[Any]],
        *,
        on_success: Callable[[Any], Awaitable[Any]] | None = None,
        name: str | None = None,
    ):
        self.fn = fn
        self.on_success = on_success
        self.name = name or getattr(fn, "__name__", "mutation")
        self.is_loading = False
        self.data = None
        self.error: RemoteCallError | None = None

    async def mutate(self, **input) -> bool:
        """Issue the mutation unless one is already in flight.

        Failures are recorded on `error` and logged, not raised.

        Returns:
            True if a request was issued, False if it was suppressed.
        """
        try:
            return await self.mutate_async(**input)
        except RemoteCallError as e:
            logger.warning("%s failed: %s", self.name, e.message)
            return True

    async def mutate_async(self, **input) -> bool:
        """Like `mutate`, but re-raises RemoteCallError after releasing the guard."""
        if self.is_loading:
            logger.debug("%s already in flight, dropping %r", self.name, input)
            return False

        self.is_loading = True
        self.error = None
        try:
            self.data = await self.fn(**input)
        except RemoteCallError as e:
            self.error = e
            raise
        finally:
            self.is_loading = False

        if self.on_success is not None:
            await self.on_success(self.data)
        return True
