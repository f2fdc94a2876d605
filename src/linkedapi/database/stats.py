# ABOUTME: Tracker statistics for the workflows command summary.
# ABOUTME: Aggregates tracked workflow counts by status and by operation.

from typing import Any

from sqlmodel import func, select

from linkedapi.database.service import DatabaseService
from linkedapi.models import TrackedWorkflow


def get_workflow_stats(db_service: DatabaseService) -> dict[str, Any]:
    """Get statistics about tracked workflows.

    Args:
        db_service: The DatabaseService instance to query.

    Returns:
        Dictionary containing:
            - total_workflows: Number of tracked workflows
            - status_distribution: Dict mapping status value to count
            - operation_distribution: Dict mapping operation name to count
    """
    with db_service.get_session() as session:
        total_workflows = session.exec(select(func.count()).select_from(TrackedWorkflow)).one()

        status_stmt = select(TrackedWorkflow.status, func.count()).group_by(
            TrackedWorkflow.status  # type: ignore[arg-type]
        )
        status_distribution = {
            getattr(status, "value", status): count
            for status, count in session.exec(status_stmt).all()
        }

        operation_stmt = select(TrackedWorkflow.operation_name, func.count()).group_by(
            TrackedWorkflow.operation_name  # type: ignore[arg-type]
        )
        operation_distribution = dict(session.exec(operation_stmt).all())

    return {
        "total_workflows": total_workflows,
        "status_distribution": status_distribution,
        "operation_distribution": operation_distribution,
    }
