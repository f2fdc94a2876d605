# ABOUTME: Command line interface for running and tracking Linked API workflows using Typer.
# ABOUTME: Provides login, run, status, result, cancel, workflows, usage, and poll commands.

import asyncio
import json
import time
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from linkedapi.auth import TokenManager
from linkedapi.client import LinkedApi
from linkedapi.config import PollOptions, get_settings
from linkedapi.database import DatabaseService, get_workflow_stats
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
from linkedapi.errors import (
    LinkedApiError,
    LinkedApiErrorType,
    LinkedApiWorkflowError,
    LinkedApiWorkflowTimeoutError,
)
from linkedapi.models import ConversationPollRequest, MappedResponse, TrackedStatus
from linkedapi.workflows import OperationName

app = typer.Typer(
    name="linkedapi",
    help="Run and track LinkedIn automation workflows through the Linked API.",
    add_completion=False,
)

console = Console()

TOKEN_ERROR_TYPES = {
    LinkedApiErrorType.LINKED_API_TOKEN_REQUIRED.value,
    LinkedApiErrorType.INVALID_LINKED_API_TOKEN.value,
    LinkedApiErrorType.IDENTIFICATION_TOKEN_REQUIRED.value,
    LinkedApiErrorType.INVALID_IDENTIFICATION_TOKEN.value,
}

_jsonable = TypeAdapter(Any)


def _build_client(account: str) -> LinkedApi:
    """Create a client from environment settings, falling back to stored tokens.

    Args:
        account: Keyring account to read tokens from when the environment has none.

    Returns:
        A configured LinkedApi client.
    """
    settings = get_settings()
    if not (settings.linked_api_token and settings.identification_token):
        tokens = TokenManager(accounts_file=settings.accounts_file).get_tokens(account)
        if tokens is None:
            console.print(f"[red]Error: No tokens found for account '{account}'.[/red]")
            console.print()
            console.print(display_token_help())
            raise typer.Exit(code=1)
        settings = settings.model_copy(
            update={
                "linked_api_token": tokens.linked_api_token,
                "identification_token": tokens.identification_token,
            }
        )
    return LinkedApi.from_settings(settings)


def _get_db_service() -> DatabaseService:
    settings = get_settings()
    db_service = DatabaseService(db_path=settings.db_path)
    db_service.init_db()
    return db_service


def _poll_options(timeout: float | None) -> PollOptions:
    options = get_settings().poll_options()
    if timeout is None:
        return options
    try:
        return PollOptions(**{**options.model_dump(), "timeout": timeout})
    except ValidationError:
        console.print("[red]Error: --timeout must be greater than 0.[/red]")
        raise typer.Exit(code=1) from None


def _parse_operation(name: str) -> OperationName:
    try:
        return OperationName(name)
    except ValueError:
        valid = ", ".join(op.value for op in OperationName)
        console.print(f"[red]Error: Unknown operation '{name}'.[/red]")
        console.print(f"[dim]Valid operations: {valid}[/dim]")
        raise typer.Exit(code=1) from None


def _load_params(params: str | None, params_file: Path | None) -> dict[str, Any] | None:
    """Read operation parameters given inline or in a file as a JSON object."""
    if params is not None and params_file is not None:
        console.print("[red]Error: Use either --params or --params-file, not both.[/red]")
        raise typer.Exit(code=1)
    raw = params_file.read_text() if params_file is not None else params
    if raw is None:
        return None
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Parameters are not valid JSON: {e}[/red]")
        raise typer.Exit(code=1) from None
    if not isinstance(loaded, dict):
        console.print("[red]Error: Parameters must be a JSON object.[/red]")
        raise typer.Exit(code=1)
    return loaded


def _handle_error(error: LinkedApiError, verbose: bool = False) -> NoReturn:
    """Print an API error with the most helpful panel and exit."""
    if isinstance(error, LinkedApiWorkflowTimeoutError):
        console.print(display_workflow_timeout(error))
        raise typer.Exit(code=2) from None
    if error.is_transport_error:
        console.print(display_network_error(error))
    else:
        console.print(display_error(error, verbose=verbose))
        if error.type in TOKEN_ERROR_TYPES:
            console.print(display_token_help())
    raise typer.Exit(code=1) from None


def _print_response(
    response: MappedResponse, operation_name: str, duration_seconds: float | None = None
) -> None:
    console.print(display_result_summary(response, operation_name, duration_seconds))
    if response.data is not None:
        console.print_json(
            data=_jsonable.dump_python(
                response.data, mode="json", by_alias=True, exclude_none=True
            )
        )
    if response.errors:
        console.print(ActionErrorTable().render(response.errors))


def _resolve_operation(
    workflow_id: str, operation: str | None, db_service: DatabaseService
) -> OperationName:
    """Use the given operation name or the one recorded when the workflow started."""
    if operation is not None:
        return _parse_operation(operation)
    tracked = db_service.get_workflow(workflow_id)
    if tracked is None:
        return OperationName.CUSTOM_WORKFLOW
    return _parse_operation(tracked.operation_name)


AccountOption = Annotated[
    str,
    typer.Option(
        "--account",
        "-a",
        help="Account name to use for authentication.",
    ),
]

OperationOption = Annotated[
    str | None,
    typer.Option(
        "--operation",
        "-o",
        help="Operation that started the workflow. Defaults to the tracked one.",
    ),
]

TimeoutOption = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        "-t",
        help="Seconds to wait for the workflow before giving up.",
    ),
]


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Linked API workflow CLI.

    Start LinkedIn actions as workflows, wait for their results, and
    resume waiting on workflows started earlier.
    """
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def login(account: AccountOption = "default") -> None:
    """Store Linked API tokens for authentication.

    Securely stores the Linked API token and identification token in the
    OS keyring.
    """
    token_manager = TokenManager(accounts_file=get_settings().accounts_file)

    console.print()
    console.print(display_token_help())
    console.print()

    linked_api_token = Prompt.ask("[bold]Paste your Linked API token[/bold]", password=True)
    identification_token = Prompt.ask(
        "[bold]Paste your identification token[/bold]", password=True
    )

    for token in (linked_api_token, identification_token):
        if not token_manager.validate_token_format(token):
            console.print("[red]Error: Invalid token format.[/red]")
            min_length = TokenManager.MIN_TOKEN_LENGTH
            console.print(f"[dim]Tokens should be at least {min_length} characters long.[/dim]")
            raise typer.Exit(code=1)

    token_manager.store_tokens(linked_api_token, identification_token, account)
    console.print(f"[green]Success! Tokens stored for account '[bold]{account}[/bold]'.[/green]")


@app.command()
def run(
    operation: Annotated[
        str, typer.Argument(help="Operation name, e.g. fetchPerson or searchPeople.")
    ],
    params: Annotated[
        str | None,
        typer.Option("--params", "-p", help="Operation parameters as a JSON object."),
    ] = None,
    params_file: Annotated[
        Path | None,
        typer.Option("--params-file", "-f", help="File containing the parameters JSON."),
    ] = None,
    wait: Annotated[
        bool,
        typer.Option("--wait/--no-wait", help="Wait for the workflow to finish."),
    ] = True,
    timeout: TimeoutOption = None,
    account: AccountOption = "default",
) -> None:
    """Start a workflow for an operation and optionally wait for its result.

    The workflow is tracked locally so its result can be fetched later
    with the result command.
    """
    operation_name = _parse_operation(operation)
    payload = _load_params(params, params_file)
    poll_options = _poll_options(timeout)
    db_service = _get_db_service()
    client = _build_client(account)

    async def _run() -> None:
        try:
            op = client.operations[operation_name]
            workflow_id = await op.execute(payload)
            db_service.save_workflow(workflow_id, operation_name.value)
            console.print(display_workflow_started(workflow_id, operation_name.value))
            if not wait:
                return

            started = time.monotonic()
            try:
                response = await op.result(workflow_id, poll_options)
            except LinkedApiWorkflowError:
                db_service.mark_finished(workflow_id, TrackedStatus.FAILED)
                raise
            db_service.mark_finished(workflow_id, TrackedStatus.COMPLETED)
            _print_response(response, operation_name.value, time.monotonic() - started)
        finally:
            await client.aclose()

    try:
        asyncio.run(_run())
    except LinkedApiError as e:
        _handle_error(e)


@app.command()
def status(
    workflow_id: Annotated[str, typer.Argument(help="Workflow id.")],
    operation: OperationOption = None,
    account: AccountOption = "default",
) -> None:
    """Check a workflow once without waiting."""
    db_service = _get_db_service()
    operation_name = _resolve_operation(workflow_id, operation, db_service)
    client = _build_client(account)

    async def _status() -> Any:
        try:
            return await client.restore_workflow(workflow_id, operation_name).status()
        finally:
            await client.aclose()

    try:
        outcome = asyncio.run(_status())
    except LinkedApiWorkflowError as e:
        db_service.mark_finished(workflow_id, TrackedStatus.FAILED)
        _handle_error(e)
    except LinkedApiError as e:
        _handle_error(e)

    if isinstance(outcome, MappedResponse):
        db_service.mark_finished(workflow_id, TrackedStatus.COMPLETED)
        _print_response(outcome, operation_name.value)
    else:
        console.print(f"[yellow]Workflow {workflow_id} is still running.[/yellow]")


@app.command()
def result(
    workflow_id: Annotated[str, typer.Argument(help="Workflow id.")],
    operation: OperationOption = None,
    timeout: TimeoutOption = None,
    account: AccountOption = "default",
) -> None:
    """Wait for a workflow started earlier and show its result."""
    db_service = _get_db_service()
    operation_name = _resolve_operation(workflow_id, operation, db_service)
    poll_options = _poll_options(timeout)
    client = _build_client(account)

    async def _result() -> MappedResponse:
        try:
            handle = client.restore_workflow(workflow_id, operation_name)
            return await handle.result(poll_options)
        finally:
            await client.aclose()

    started = time.monotonic()
    try:
        response = asyncio.run(_result())
    except LinkedApiWorkflowError as e:
        db_service.mark_finished(workflow_id, TrackedStatus.FAILED)
        _handle_error(e)
    except LinkedApiError as e:
        _handle_error(e)

    db_service.mark_finished(workflow_id, TrackedStatus.COMPLETED)
    _print_response(response, operation_name.value, time.monotonic() - started)


@app.command()
def cancel(
    workflow_id: Annotated[str, typer.Argument(help="Workflow id.")],
    account: AccountOption = "default",
) -> None:
    """Cancel a running workflow."""
    db_service = _get_db_service()
    client = _build_client(account)

    async def _cancel() -> bool:
        try:
            return await client.restore_workflow(workflow_id).cancel()
        finally:
            await client.aclose()

    try:
        cancelled = asyncio.run(_cancel())
    except LinkedApiError as e:
        _handle_error(e)

    if cancelled:
        db_service.mark_finished(workflow_id, TrackedStatus.CANCELLED)
        console.print(f"[green]Workflow {workflow_id} cancelled.[/green]")
    else:
        console.print(f"[yellow]Workflow {workflow_id} had already finished.[/yellow]")


def _render_stats_panel(stats: dict[str, Any]) -> Panel:
    """Render tracker statistics as a Rich Panel.

    Args:
        stats: Dictionary of statistics from get_workflow_stats.

    Returns:
        Rich Panel containing formatted statistics.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Total Workflows:", f"[cyan]{stats.get('total_workflows', 0)}[/cyan]")

    status_dist = stats.get("status_distribution", {})
    if status_dist:
        parts = [f"{name}: {count}" for name, count in sorted(status_dist.items())]
        table.add_row("By Status:", ", ".join(parts))

    operation_dist = stats.get("operation_distribution", {})
    if operation_dist:
        parts = [f"{name}: {count}" for name, count in sorted(operation_dist.items())]
        table.add_row("By Operation:", ", ".join(parts))

    return Panel(
        table,
        title="Tracked Workflows",
        border_style="blue",
        padding=(1, 2),
    )


@app.command()
def workflows(
    pending: Annotated[
        bool,
        typer.Option("--pending", help="Only show workflows without a recorded result."),
    ] = False,
    limit: Annotated[int, typer.Option("--limit", help="Maximum rows to show.")] = 50,
) -> None:
    """List workflows started from this machine."""
    db_service = _get_db_service()
    tracked = db_service.list_workflows(pending_only=pending, limit=limit)

    if tracked:
        console.print(WorkflowTable().render(tracked, title="Workflows"))
    else:
        console.print("[yellow]No tracked workflows.[/yellow]")
    console.print()
    console.print(_render_stats_panel(get_workflow_stats(db_service)))


@app.command()
def usage(
    days: Annotated[
        int,
        typer.Option("--days", "-d", help="Number of days back from now (at most 30)."),
    ] = 7,
    account: AccountOption = "default",
) -> None:
    """Show actions executed on the account recently."""
    client = _build_client(account)
    end = datetime.now(UTC)
    start = end - timedelta(days=days)

    async def _usage() -> Any:
        try:
            return await client.get_api_usage(start, end)
        finally:
            await client.aclose()

    try:
        actions = asyncio.run(_usage())
    except LinkedApiError as e:
        _handle_error(e)

    if actions:
        console.print(UsageTable().render(actions, title=f"API Usage (last {days} days)"))
    console.print(f"[green]{len(actions)} action(s) executed.[/green]")


@app.command()
def poll(
    person_urls: Annotated[list[str], typer.Argument(help="Profile URLs of synced conversations.")],
    conversation_type: Annotated[
        str,
        typer.Option("--type", help="Conversation type: st (standard) or nv (Sales Navigator)."),
    ] = "st",
    since: Annotated[
        str | None,
        typer.Option("--since", help="Only messages after this ISO 8601 time."),
    ] = None,
    account: AccountOption = "default",
) -> None:
    """Fetch new messages of conversations synced earlier."""
    if conversation_type not in ("st", "nv"):
        console.print("[red]Error: --type must be 'st' or 'nv'.[/red]")
        raise typer.Exit(code=1)

    requests = [
        ConversationPollRequest(person_url=url, type=conversation_type, since=since)
        for url in person_urls
    ]
    client = _build_client(account)

    async def _poll() -> Any:
        try:
            return await client.poll_conversations(requests)
        finally:
            await client.aclose()

    try:
        conversations = asyncio.run(_poll())
    except LinkedApiError as e:
        _handle_error(e)

    message_count = sum(len(c.messages) for c in conversations)
    if message_count:
        console.print(ConversationTable().render(conversations, title="Messages"))
    console.print(
        f"[green]{message_count} message(s) in {len(conversations)} conversation(s).[/green]"
    )
