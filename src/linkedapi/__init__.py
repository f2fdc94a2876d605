# ABOUTME: Main package initialization for the Linked API client SDK.
# ABOUTME: Exports the client facade, operation names, errors, and version information.

from importlib.metadata import version

from linkedapi.client import LinkedApi
from linkedapi.config import PollOptions, Settings, get_settings
from linkedapi.errors import (
    ActionErrorType,
    LinkedApiConversationsNotSyncedError,
    LinkedApiError,
    LinkedApiErrorType,
    LinkedApiWorkflowError,
    LinkedApiWorkflowTimeoutError,
)
from linkedapi.models.workflow import ActionError, MappedResponse, WorkflowStatus
from linkedapi.workflows import Operation, OperationName, WorkflowHandle

__version__ = version("linkedapi")

__all__ = [
    "ActionError",
    "ActionErrorType",
    "LinkedApi",
    "LinkedApiConversationsNotSyncedError",
    "LinkedApiError",
    "LinkedApiErrorType",
    "LinkedApiWorkflowError",
    "LinkedApiWorkflowTimeoutError",
    "MappedResponse",
    "Operation",
    "OperationName",
    "PollOptions",
    "Settings",
    "WorkflowHandle",
    "WorkflowStatus",
    "get_settings",
    "__version__",
]
