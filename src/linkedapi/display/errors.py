# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Provides panels for API errors, missing tokens, workflow timeouts, and network failures.

import traceback

from rich.panel import Panel
from rich.text import Text

from linkedapi.errors import LinkedApiError, LinkedApiWorkflowTimeoutError


def display_error(error: Exception, verbose: bool = False) -> Panel:
    """Format an error as a Rich Panel.

    Args:
        error: The exception to display.
        verbose: If True, include full traceback information.

    Returns:
        A Rich Panel containing formatted error information.
    """
    content = Text()
    content.append(f"{type(error).__name__}: ", style="bold red")
    content.append(str(error), style="red")

    if isinstance(error, LinkedApiError):
        content.append("\nType: ", style="dim")
        content.append(error.type, style="yellow")
        if error.details:
            content.append("\nDetails: ", style="dim")
            content.append(str(error.details), style="dim")

    if verbose:
        content.append("\n\n")
        content.append("Traceback:", style="dim")
        content.append("\n")
        tb_text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        content.append(tb_text, style="dim")

    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(1, 2),
    )


def display_token_help() -> Panel:
    """Explain where to find the two tokens the client needs.

    Returns:
        A Rich Panel with step-by-step instructions.
    """
    help_text = """[bold cyan]How to get your Linked API tokens:[/bold cyan]

1. Sign in to the [link=https://app.linkedapi.io]Linked API platform[/link]
2. Copy the [bold yellow]Linked API token[/bold yellow] from the API settings page
3. Connect a LinkedIn account and copy its [bold yellow]identification token[/bold yellow]

[dim]Tokens can also be provided via LINKEDAPI_LINKED_API_TOKEN and
LINKEDAPI_IDENTIFICATION_TOKEN environment variables.[/dim]

[bold]Then run:[/bold]
  linkedapi login"""

    return Panel(
        Text.from_markup(help_text),
        title="Token Help",
        border_style="cyan",
        padding=(1, 2),
    )


def display_workflow_timeout(error: LinkedApiWorkflowTimeoutError) -> Panel:
    """Tell the user the workflow is still running and how to resume.

    Args:
        error: The timeout raised while waiting.

    Returns:
        A Rich Panel with the workflow id and the resume command.
    """
    message = Text()
    message.append("Workflow is still running\n\n", style="bold yellow")
    message.append("Workflow: ", style="dim")
    message.append(f"{error.workflow_id}\n", style="cyan")
    message.append("Operation: ", style="dim")
    message.append(f"{error.operation_name}\n\n", style="cyan")
    message.append("Check again later with:\n", style="dim")
    message.append(f"  linkedapi result {error.workflow_id}", style="bold")

    return Panel(
        message,
        title="Workflow Timeout",
        border_style="yellow",
        padding=(1, 2),
    )


def display_network_error(error: Exception) -> Panel:
    """Display a user-friendly message for network errors.

    Args:
        error: The network-related exception.

    Returns:
        A Rich Panel with retry suggestions.
    """
    message = Text()
    message.append("Network Error\n\n", style="bold red")
    message.append(f"{error}\n\n", style="red")
    message.append("Suggestions:\n", style="bold")
    message.append("• Check your internet connection\n", style="dim")
    message.append("• Try again in a few moments\n", style="dim")
    message.append("• The Linked API may be temporarily unavailable", style="dim")

    return Panel(
        message,
        title="Connection Error",
        border_style="red",
        padding=(1, 2),
    )
