# ABOUTME: Models for workflow submissions, status responses, and normalized results.
# ABOUTME: Covers the response envelope, completion and failure payloads, and MappedResponse.

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from linkedapi.models.base import ApiModel

TResult = TypeVar("TResult")

WorkflowDefinition = dict[str, Any]


class WorkflowStatus(str, Enum):
    """Lifecycle state of a workflow on the server."""

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RequestError(ApiModel):
    """Error slot of the response envelope: the request itself failed."""

    type: str
    message: str
    details: Any = None


class ApiResponse(ApiModel):
    """Envelope returned by every transport call."""

    success: bool
    result: Any = None
    error: RequestError | None = None


class ActionError(ApiModel):
    """A single action inside a workflow failed with a domain reason."""

    type: str
    message: str


class ThenAction(ApiModel):
    """Result of one chained child action."""

    action_type: str
    data: Any = None
    error: ActionError | None = None
    success: bool | None = None


class WorkflowCompletion(ApiModel):
    """Terminal payload of a workflow whose actions ran."""

    action_type: str | None = None
    data: Any = None
    error: ActionError | None = None
    success: bool | None = None


class WorkflowFailure(ApiModel):
    """Present instead of a completion when the whole workflow aborted."""

    reason: str
    message: str


class WorkflowResponse(ApiModel):
    """Result of GET /workflows/{id}."""

    workflow_id: str
    workflow_status: WorkflowStatus
    completion: WorkflowCompletion | list[WorkflowCompletion] | None = None
    failure: WorkflowFailure | None = None


class WorkflowStarted(ApiModel):
    """Result of POST /workflows."""

    workflow_id: str


class WorkflowCancelled(ApiModel):
    """Result of DELETE /workflows/{id}."""

    cancelled: bool


class MappedResponse(BaseModel, Generic[TResult]):
    """Normalized outcome of a workflow.

    errors is always present. data is set when the primary action succeeded.
    """

    data: TResult | None = None
    errors: list[ActionError] = Field(default_factory=list)
