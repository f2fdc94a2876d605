# ABOUTME: Handle binding a workflow id to the operation that started it.
# ABOUTME: Lets callers resume waiting, check, or cancel a workflow after restoration.

from typing import Any

from linkedapi.config import PollOptions
from linkedapi.models.workflow import MappedResponse, WorkflowStatus
from linkedapi.workflows.names import OperationName
from linkedapi.workflows.operation import Operation


class WorkflowHandle:
    """A started workflow and the operation able to decode its result."""

    def __init__(self, workflow_id: str, operation: Operation[Any, Any]) -> None:
        self.workflow_id = workflow_id
        self.operation = operation

    @property
    def operation_name(self) -> OperationName:
        return self.operation.operation_name

    async def result(self, options: PollOptions | None = None) -> MappedResponse[Any]:
        return await self.operation.result(self.workflow_id, options)

    async def status(self) -> WorkflowStatus | MappedResponse[Any]:
        return await self.operation.status(self.workflow_id)

    async def cancel(self) -> bool:
        return await self.operation.cancel(self.workflow_id)

    def __repr__(self) -> str:
        return f"WorkflowHandle({self.workflow_id!r}, {self.operation_name.value})"
