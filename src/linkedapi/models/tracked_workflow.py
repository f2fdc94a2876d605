# ABOUTME: SQLModel for workflows started through the CLI.
# ABOUTME: Remembers the workflow id and operation name so results can be fetched later.

from datetime import UTC, datetime
from enum import Enum
from typing import Annotated
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class TrackedStatus(str, Enum):
    """Local view of a tracked workflow's lifecycle."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class TrackedWorkflow(SQLModel, table=True):
    """A workflow submitted to the API and not yet forgotten locally."""

    __tablename__ = "tracked_workflows"
    model_config = {"validate_assignment": True}

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workflow_id: Annotated[str, Field(index=True, unique=True, description="Server workflow id")]
    operation_name: Annotated[
        str, Field(index=True, description="Operation that started the workflow")
    ]
    status: TrackedStatus = TrackedStatus.PENDING
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        """Return True while no terminal outcome has been recorded."""
        return self.status == TrackedStatus.PENDING
