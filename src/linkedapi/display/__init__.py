# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports panels and table renderers used by the CLI.

from linkedapi.display.errors import (
    display_error,
    display_network_error,
    display_token_help,
    display_workflow_timeout,
)
from linkedapi.display.status import display_result_summary, display_workflow_started
from linkedapi.display.tables import (
    ActionErrorTable,
    ConversationTable,
    UsageTable,
    WorkflowTable,
)

__all__ = [
    "ActionErrorTable",
    "ConversationTable",
    "UsageTable",
    "WorkflowTable",
    "display_error",
    "display_network_error",
    "display_result_summary",
    "display_token_help",
    "display_workflow_started",
    "display_workflow_timeout",
]
