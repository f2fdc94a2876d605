# ABOUTME: Database package for the local workflow tracker.
# ABOUTME: Provides DatabaseService for SQLite operations using SQLModel.

from linkedapi.database.service import DatabaseService
from linkedapi.database.stats import get_workflow_stats

__all__ = ["DatabaseService", "get_workflow_stats"]
