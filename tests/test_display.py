# ABOUTME: Tests for the display module panels and tables.
# ABOUTME: Covers result summaries, error panels, and Rich table rendering.

from datetime import UTC, datetime

import pytest
from rich.panel import Panel
from rich.table import Table

from linkedapi.display import (
    ActionErrorTable,
    ConversationTable,
    UsageTable,
    WorkflowTable,
    display_error,
    display_network_error,
    display_result_summary,
    display_token_help,
    display_workflow_started,
    display_workflow_timeout,
)
from linkedapi.display.tables import _truncate
from linkedapi.errors import LinkedApiError, LinkedApiWorkflowTimeoutError
from linkedapi.models import (
    ActionError,
    ApiUsageAction,
    ConversationPollResult,
    MappedResponse,
    TrackedStatus,
    TrackedWorkflow,
)


@pytest.fixture
def sample_workflows() -> list[TrackedWorkflow]:
    """Create tracked workflows in every status."""
    return [
        TrackedWorkflow(
            workflow_id=f"wf-{status.value}",
            operation_name="fetchPerson",
            status=status,
            started_at=datetime(2024, 5, 1, 10, 0, tzinfo=UTC),
        )
        for status in TrackedStatus
    ]


class TestTruncate:
    """Tests for the _truncate helper."""

    def test_short_text_unchanged(self) -> None:
        """Test that text within the limit is returned as-is."""
        assert _truncate("hello", 10) == "hello"

    def test_long_text_gets_ellipsis(self) -> None:
        """Test that long text is cut to the limit with an ellipsis."""
        result = _truncate("a" * 20, 10)
        assert result == "a" * 7 + "..."
        assert len(result) == 10

    def test_none_becomes_empty(self) -> None:
        """Test that None renders as an empty string."""
        assert _truncate(None, 10) == ""


class TestWorkflowTable:
    """Tests for WorkflowTable rendering."""

    def test_render_rows(self, sample_workflows: list[TrackedWorkflow]) -> None:
        """Test one row per tracked workflow."""
        result = WorkflowTable().render(sample_workflows, title="Workflows")

        assert isinstance(result, Table)
        assert result.title == "Workflows"
        assert result.row_count == len(sample_workflows)

    def test_columns(self) -> None:
        """Test the column headers."""
        result = WorkflowTable().render([])

        headers = [column.header for column in result.columns]
        assert headers == ["#", "Workflow", "Operation", "Status", "Started"]
        assert result.row_count == 0


class TestUsageTable:
    """Tests for UsageTable rendering."""

    def test_render_rows(self) -> None:
        """Test one row per usage action."""
        actions = [
            ApiUsageAction(action_type="st.openPersonPage", success=True, time="2024-05-01"),
            ApiUsageAction(action_type="st.sendMessage", success=False, time="2024-05-02"),
        ]

        result = UsageTable().render(actions)

        assert result.row_count == 2
        assert [column.header for column in result.columns] == ["#", "Action", "Result", "Time"]


class TestActionErrorTable:
    """Tests for ActionErrorTable rendering."""

    def test_default_title(self) -> None:
        """Test that the table carries a default title."""
        errors = [ActionError(type="personNotFound", message="Person not found")]

        result = ActionErrorTable().render(errors)

        assert result.title == "Action Errors"
        assert result.row_count == 1


class TestConversationTable:
    """Tests for ConversationTable rendering."""

    def test_one_row_per_message(self) -> None:
        """Test that messages across conversations are flattened into rows."""
        conversations = [
            ConversationPollResult.model_validate(
                {
                    "personUrl": "https://www.linkedin.com/in/a",
                    "type": "st",
                    "messages": [
                        {"id": "1", "sender": "us", "text": "Hi"},
                        {"id": "2", "sender": "them", "text": "Hello", "time": "t"},
                    ],
                }
            ),
            ConversationPollResult(person_url="https://www.linkedin.com/in/b", type="nv"),
        ]

        result = ConversationTable().render(conversations)

        assert result.row_count == 2


class TestStatusPanels:
    """Tests for workflow status panels."""

    def test_workflow_started(self) -> None:
        """Test the submission panel mentions the workflow id."""
        result = display_workflow_started("wf-1", "fetchPerson")

        assert isinstance(result, Panel)
        assert "wf-1" in result.renderable.plain
        assert "fetchPerson" in result.renderable.plain

    def test_result_summary_success(self) -> None:
        """Test a clean result is green."""
        result = display_result_summary(MappedResponse(data=[1, 2, 3]), "searchPeople", 1.5)

        assert result.title == "Workflow Result"
        assert result.border_style == "green"
        assert "3 items" in result.renderable.plain
        assert "1.50s" in result.renderable.plain

    def test_result_summary_partial(self) -> None:
        """Test data with errors is yellow."""
        response = MappedResponse(
            data={"name": "Jane"},
            errors=[ActionError(type="postsNotLoaded", message="Posts not loaded")],
        )

        result = display_result_summary(response, "fetchPerson")

        assert result.border_style == "yellow"
        assert "Duration" not in result.renderable.plain

    def test_result_summary_errors_only(self) -> None:
        """Test errors without data is red."""
        response = MappedResponse(
            errors=[ActionError(type="personNotFound", message="Person not found")]
        )

        result = display_result_summary(response, "fetchPerson")

        assert result.border_style == "red"
        assert "none" in result.renderable.plain


class TestErrorPanels:
    """Tests for error panels."""

    def test_display_error_includes_type(self) -> None:
        """Test that API errors show their type and details."""
        error = LinkedApiError("httpError", "HTTP 502", {"status": 502})

        result = display_error(error)

        assert result.title == "Error"
        assert "httpError" in result.renderable.plain
        assert "502" in result.renderable.plain

    def test_display_error_verbose(self) -> None:
        """Test that verbose mode appends a traceback."""
        result = display_error(ValueError("boom"), verbose=True)

        assert "Traceback" in result.renderable.plain

    def test_token_help(self) -> None:
        """Test that the help panel explains how to log in."""
        result = display_token_help()

        assert "linkedapi login" in result.renderable.plain

    def test_workflow_timeout(self) -> None:
        """Test that the timeout panel shows how to resume."""
        error = LinkedApiWorkflowTimeoutError("wf-9", "retrieveSSI")

        result = display_workflow_timeout(error)

        assert result.border_style == "yellow"
        assert "linkedapi result wf-9" in result.renderable.plain

    def test_network_error(self) -> None:
        """Test the network panel carries the error message."""
        result = display_network_error(LinkedApiError("networkError", "connection refused"))

        assert "connection refused" in result.renderable.plain
