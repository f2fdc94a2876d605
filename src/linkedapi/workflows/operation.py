# ABOUTME: Operation binds an operation name and mapper to a transport.
# ABOUTME: Submits workflows, checks status, polls for results, and cancels.

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from linkedapi.config import PollOptions
from linkedapi.errors import (
    LinkedApiError,
    LinkedApiErrorType,
    LinkedApiWorkflowError,
    LinkedApiWorkflowTimeoutError,
)
from linkedapi.mappers.base import BaseMapper, params_to_dict
from linkedapi.models.workflow import (
    ApiResponse,
    MappedResponse,
    WorkflowCancelled,
    WorkflowResponse,
    WorkflowStarted,
    WorkflowStatus,
)
from linkedapi.transport.client import HttpClient
from linkedapi.workflows.names import OperationName
from linkedapi.workflows.polling import poll_workflow_result

logger = logging.getLogger(__name__)

TParams = TypeVar("TParams")
TResult = TypeVar("TResult")


def unwrap(response: ApiResponse) -> Any:
    """Return the result of an envelope or raise its error.

    Raises:
        LinkedApiError: If the envelope carries an error or no result.
    """
    if response.error is not None:
        raise LinkedApiError(response.error.type, response.error.message, response.error.details)
    if response.result is None:
        raise LinkedApiError.unknown_error()
    return response.result


class Operation(Generic[TParams, TResult]):
    """One typed capability of the API, executed as a server-side workflow.

    The operation holds only configuration, so several result() calls for
    different workflows may run concurrently.

    Attributes:
        operation_name: Name used for restoration and in timeout errors.
        mapper: Translates parameters and completions; None passes the raw
            definition and completion through.
    """

    def __init__(
        self,
        operation_name: OperationName,
        mapper: BaseMapper[TParams, TResult] | None,
        http_client: HttpClient,
        default_options: PollOptions | None = None,
    ) -> None:
        self.operation_name = operation_name
        self.mapper = mapper
        self.http_client = http_client
        self.default_options = default_options or PollOptions()

    async def execute(self, params: TParams | None = None) -> str:
        """Submit the workflow for these parameters.

        Args:
            params: Operation parameters, or a raw definition for custom workflows.

        Returns:
            The id of the started workflow.

        Raises:
            LinkedApiError: If the API rejects the submission.
        """
        if self.mapper is not None:
            definition = self.mapper.map_request(params)
        elif isinstance(params, (BaseModel, Mapping)):
            definition = params_to_dict(params)
        else:
            definition = params

        result = unwrap(await self.http_client.post("/workflows", definition))
        try:
            started = WorkflowStarted.model_validate(result)
        except ValidationError as e:
            raise LinkedApiError.unknown_error() from e

        logger.info(f"Started {self.operation_name.value} workflow {started.workflow_id}")
        return started.workflow_id

    async def status(self, workflow_id: str) -> WorkflowStatus | MappedResponse[TResult]:
        """Check a workflow once without waiting.

        Returns:
            WorkflowStatus.RUNNING while the workflow runs, otherwise its mapped result.
        """
        return await self._fetch(workflow_id)

    async def result(
        self, workflow_id: str, options: PollOptions | None = None
    ) -> MappedResponse[TResult]:
        """Wait for a workflow to finish and return its mapped result.

        Calling again after a timeout resumes waiting on the same workflow.

        Args:
            workflow_id: Id returned by execute().
            options: Poll interval, timeout and retry budget for this call.

        Raises:
            LinkedApiWorkflowTimeoutError: If the workflow is still running when
                the timeout expires.
            LinkedApiWorkflowError: If the workflow was aborted on the server.
            LinkedApiError: For request failures and unexpected responses.
        """
        try:
            return await poll_workflow_result(
                lambda: self._fetch(workflow_id), options or self.default_options
            )
        except LinkedApiWorkflowTimeoutError:
            raise
        except LinkedApiError as e:
            if e.type == LinkedApiErrorType.WORKFLOW_TIMEOUT.value:
                logger.info(f"Timed out waiting for workflow {workflow_id}")
                raise LinkedApiWorkflowTimeoutError(workflow_id, self.operation_name) from e
            raise

    async def run(
        self, params: TParams | None = None, options: PollOptions | None = None
    ) -> MappedResponse[TResult]:
        """Submit a workflow and wait for its result."""
        workflow_id = await self.execute(params)
        return await self.result(workflow_id, options)

    async def cancel(self, workflow_id: str) -> bool:
        """Ask the server to cancel a workflow.

        Returns:
            True if the server cancelled it, False if it had already finished.
        """
        result = unwrap(await self.http_client.delete(f"/workflows/{workflow_id}"))
        try:
            cancelled = WorkflowCancelled.model_validate(result).cancelled
        except ValidationError as e:
            raise LinkedApiError.unknown_error() from e
        logger.info(f"Cancel workflow {workflow_id}: {cancelled}")
        return cancelled

    async def _fetch(self, workflow_id: str) -> WorkflowStatus | MappedResponse[TResult]:
        result = unwrap(await self.http_client.get(f"/workflows/{workflow_id}"))
        try:
            workflow = WorkflowResponse.model_validate(result)
        except ValidationError as e:
            raise LinkedApiError.unknown_error() from e

        if workflow.workflow_status is WorkflowStatus.RUNNING:
            return WorkflowStatus.RUNNING
        return self._decode(workflow, result)

    def _decode(self, workflow: WorkflowResponse, raw: Any) -> MappedResponse[TResult]:
        if workflow.failure is not None:
            raise LinkedApiWorkflowError(workflow.failure.reason, workflow.failure.message)
        if workflow.completion is None:
            raise LinkedApiError.unknown_error()
        if self.mapper is None:
            return MappedResponse(data=raw["completion"])
        return self.mapper.map_response(workflow.completion)
