# ABOUTME: Status panels summarizing a workflow submission or its mapped result.
# ABOUTME: Used by the CLI after run, status, and result commands.

from rich.panel import Panel
from rich.text import Text

from linkedapi.models.workflow import MappedResponse


def display_workflow_started(workflow_id: str, operation_name: str) -> Panel:
    """Display the id of a freshly submitted workflow.

    Args:
        workflow_id: Server id of the workflow.
        operation_name: Operation that started it.

    Returns:
        Rich Panel containing the submission summary.
    """
    content = Text()
    content.append("Operation: ", style="dim")
    content.append(f"{operation_name}\n", style="cyan")
    content.append("Workflow: ", style="dim")
    content.append(workflow_id, style="bold")

    return Panel(
        content,
        title="Workflow Started",
        border_style="blue",
        padding=(1, 2),
    )


def display_result_summary(
    response: MappedResponse,
    operation_name: str,
    duration_seconds: float | None = None,
) -> Panel:
    """Summarize a mapped result: whether data came back and how many errors.

    Args:
        response: The mapped workflow result.
        operation_name: Operation the result belongs to.
        duration_seconds: Time spent waiting, if measured.

    Returns:
        Rich Panel; green when there are no errors, yellow for partial
        results, red when only errors came back.
    """
    error_count = len(response.errors)
    if isinstance(response.data, list):
        count = len(response.data)
        data_text = f"{count} item" if count == 1 else f"{count} items"
    elif response.data is None:
        data_text = "none"
    else:
        data_text = "received"

    if error_count == 0:
        border_style = "green"
    elif response.data is not None:
        border_style = "yellow"
    else:
        border_style = "red"

    content = Text()
    content.append("Operation: ", style="dim")
    content.append(f"{operation_name}\n", style="cyan")
    content.append("Data: ", style="dim")
    content.append(f"{data_text}\n", style="green" if response.data is not None else "yellow")
    content.append("Errors: ", style="dim")
    content.append(str(error_count), style="red" if error_count else "green")
    if duration_seconds is not None:
        content.append("\nDuration: ", style="dim")
        content.append(f"{duration_seconds:.2f}s", style="blue")

    return Panel(
        content,
        title="Workflow Result",
        border_style=border_style,
        padding=(1, 2),
    )
