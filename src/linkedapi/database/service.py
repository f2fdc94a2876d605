# ABOUTME: Database service for the local tracker of started workflows.
# ABOUTME: Provides session management and CRUD operations for TrackedWorkflow rows.

from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine, select

from linkedapi.models import TrackedStatus, TrackedWorkflow


class DatabaseService:
    """Service for persisting workflows so their results can be fetched later."""

    DEFAULT_DB_PATH = Path.home() / ".linkedapi" / "workflows.db"

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize the database service.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.linkedapi/workflows.db
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        self._engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def save_workflow(self, workflow_id: str, operation_name: str) -> TrackedWorkflow:
        """Record a newly started workflow.

        Saving an id that is already tracked returns the existing row.

        Args:
            workflow_id: Server id of the workflow.
            operation_name: Operation that started it.

        Returns:
            The tracked workflow.
        """
        with self.get_session() as session:
            existing = session.exec(
                select(TrackedWorkflow).where(TrackedWorkflow.workflow_id == workflow_id)
            ).first()
            if existing is not None:
                return existing
            tracked = TrackedWorkflow(workflow_id=workflow_id, operation_name=operation_name)
            session.add(tracked)
            session.commit()
            session.refresh(tracked)
            return tracked

    def get_workflow(self, workflow_id: str) -> TrackedWorkflow | None:
        """Retrieve a tracked workflow by its server id."""
        with self.get_session() as session:
            statement = select(TrackedWorkflow).where(TrackedWorkflow.workflow_id == workflow_id)
            return session.exec(statement).first()

    def list_workflows(
        self, pending_only: bool = False, limit: int = 50
    ) -> list[TrackedWorkflow]:
        """List tracked workflows, most recent first.

        Args:
            pending_only: Only return workflows without a recorded outcome.
            limit: Maximum number of rows to return.

        Returns:
            List of TrackedWorkflow objects.
        """
        with self.get_session() as session:
            statement = select(TrackedWorkflow)
            if pending_only:
                statement = statement.where(TrackedWorkflow.status == TrackedStatus.PENDING)
            statement = statement.order_by(
                TrackedWorkflow.started_at.desc()  # type: ignore[attr-defined]
            ).limit(limit)
            return list(session.exec(statement).all())

    def mark_finished(self, workflow_id: str, status: TrackedStatus) -> TrackedWorkflow | None:
        """Record the outcome of a tracked workflow.

        Args:
            workflow_id: Server id of the workflow.
            status: Terminal local status.

        Returns:
            The updated row, or None if the workflow is not tracked.
        """
        with self.get_session() as session:
            tracked = session.exec(
                select(TrackedWorkflow).where(TrackedWorkflow.workflow_id == workflow_id)
            ).first()
            if tracked is None:
                return None
            tracked.status = status
            tracked.finished_at = datetime.now(UTC)
            session.add(tracked)
            session.commit()
            session.refresh(tracked)
            return tracked
