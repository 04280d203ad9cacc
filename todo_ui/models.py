"""Todo data model."""

import logging
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class Status(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def opposite(self) -> "Status":
        return Status.PENDING if self is Status.COMPLETED else Status.COMPLETED


class Todo(BaseModel):
    """Read-only copy of a todo as returned by the remote API."""

    model_config = ConfigDict(frozen=True)

    id: int
    body: str
    status: Status

    @field_validator("status", mode="before")
    @classmethod
    def degrade_unknown_status(cls, v):
        # Unknown statuses render as pending instead of failing the whole list
        try:
            return Status(v)
        except ValueError:
            logger.warning("Unrecognized todo status %r, treating as pending", v)
            return Status.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is Status.COMPLETED


def normalize_statuses(statuses: Iterable[Status | str]) -> tuple[Status, ...]:
    """De-duplicate a status filter and put it in declaration order.

    Raises:
        ValueError: If a value is not a known status.
    """
    wanted = {Status(s) for s in statuses}
    return tuple(s for s in Status if s in wanted)
