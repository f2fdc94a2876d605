# ABOUTME: Rich table rendering for tracked workflows, API usage, action errors, and messages.
# ABOUTME: Each renderer turns a list of models into a formatted Table.

from rich.table import Table

from linkedapi.models import (
    ActionError,
    ApiUsageAction,
    ConversationPollResult,
    TrackedStatus,
    TrackedWorkflow,
)


def _truncate(text: str | None, max_length: int) -> str:
    """Truncate text to max length with ellipsis, or empty string if None."""
    if text is None:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class WorkflowTable:
    """Renders tracked workflows with color-coded status."""

    STATUS_COLORS: dict[TrackedStatus, str] = {
        TrackedStatus.PENDING: "yellow",
        TrackedStatus.COMPLETED: "green",
        TrackedStatus.FAILED: "red",
        TrackedStatus.CANCELLED: "dim",
    }

    def render(self, workflows: list[TrackedWorkflow], title: str | None = None) -> Table:
        """Render tracked workflows as a Rich Table.

        Args:
            workflows: Rows from the tracker.
            title: Optional title for the table.

        Returns:
            Rich Table with one row per workflow.
        """
        table = Table(title=title, show_lines=False)

        table.add_column("#", style="dim", width=4)
        table.add_column("Workflow", style="cyan", no_wrap=True)
        table.add_column("Operation", style="magenta")
        table.add_column("Status", width=10)
        table.add_column("Started", style="dim")

        for idx, workflow in enumerate(workflows, 1):
            color = self.STATUS_COLORS.get(workflow.status, "white")
            table.add_row(
                str(idx),
                workflow.workflow_id,
                workflow.operation_name,
                f"[{color}]{workflow.status.value}[/{color}]",
                workflow.started_at.strftime("%Y-%m-%d %H:%M"),
            )

        return table


class UsageTable:
    """Renders the actions returned by the usage statistics endpoint."""

    def render(self, actions: list[ApiUsageAction], title: str | None = None) -> Table:
        table = Table(title=title, show_lines=False)

        table.add_column("#", style="dim", width=4)
        table.add_column("Action", style="cyan")
        table.add_column("Result", width=8)
        table.add_column("Time", style="dim")

        for idx, action in enumerate(actions, 1):
            result = "[green]ok[/green]" if action.success else "[red]failed[/red]"
            table.add_row(str(idx), action.action_type, result, action.time)

        return table


class ActionErrorTable:
    """Renders the action-level errors of a mapped result."""

    MAX_MESSAGE_LENGTH = 60

    def render(self, errors: list[ActionError], title: str | None = "Action Errors") -> Table:
        table = Table(title=title, show_lines=False)

        table.add_column("Type", style="yellow", no_wrap=True)
        table.add_column("Message", style="red", max_width=self.MAX_MESSAGE_LENGTH)

        for error in errors:
            table.add_row(error.type, _truncate(error.message, self.MAX_MESSAGE_LENGTH))

        return table


class ConversationTable:
    """Renders polled conversation messages, one row per message."""

    MAX_TEXT_LENGTH = 50

    def render(
        self, conversations: list[ConversationPollResult], title: str | None = None
    ) -> Table:
        table = Table(title=title, show_lines=False)

        table.add_column("Person", style="cyan", no_wrap=True)
        table.add_column("From", width=5)
        table.add_column("Text", style="white", max_width=self.MAX_TEXT_LENGTH)
        table.add_column("Time", style="dim")

        for conversation in conversations:
            for message in conversation.messages:
                sender = "[green]us[/green]" if message.sender == "us" else "[blue]them[/blue]"
                table.add_row(
                    conversation.person_url,
                    sender,
                    _truncate(message.text, self.MAX_TEXT_LENGTH),
                    message.time or "",
                )

        return table
