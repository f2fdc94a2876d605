# ABOUTME: Workflows package: operations, polling, restoration, and handles.
# ABOUTME: Exports the pieces needed to run and resume server-side workflows.

from linkedapi.workflows.handle import WorkflowHandle
from linkedapi.workflows.names import OperationName
from linkedapi.workflows.operation import Operation
from linkedapi.workflows.polling import poll_workflow_result
from linkedapi.workflows.restoration import create_mapper_from_operation_name

__all__ = [
    "Operation",
    "OperationName",
    "WorkflowHandle",
    "create_mapper_from_operation_name",
    "poll_workflow_result",
]
