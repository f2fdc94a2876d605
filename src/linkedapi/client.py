# ABOUTME: LinkedApi facade exposing one Operation per supported action.
# ABOUTME: Also polls conversations, reports API usage, and restores workflows by id.

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Any, Self
from urllib.parse import urlencode

from pydantic import TypeAdapter, ValidationError

from linkedapi.config import DEFAULT_BASE_URL, PollOptions, Settings
from linkedapi.errors import (
    ActionErrorType,
    LinkedApiConversationsNotSyncedError,
    LinkedApiError,
    LinkedApiErrorType,
)
from linkedapi.models.actions import (
    CheckConnectionStatusParams,
    CheckConnectionStatusResult,
    CommentOnPostParams,
    CreatePostParams,
    CreatePostResult,
    FetchCompanyParams,
    FetchCompanyResult,
    FetchPersonParams,
    FetchPersonResult,
    FetchPostParams,
    NvFetchCompanyParams,
    NvFetchCompanyResult,
    NvFetchPersonParams,
    NvFetchPersonResult,
    NvSearchCompanyResult,
    NvSearchPeopleResult,
    NvSendMessageParams,
    NvSyncConversationParams,
    Post,
    ReactToPostParams,
    RemoveConnectionParams,
    RetrieveConnectionsParams,
    RetrieveConnectionsResult,
    RetrievePendingRequestsResult,
    RetrievePerformanceResult,
    RetrieveSSIResult,
    SearchCompaniesParams,
    SearchCompanyResult,
    SearchPeopleParams,
    SearchPeopleResult,
    SendConnectionRequestParams,
    SendMessageParams,
    SyncConversationParams,
    WithdrawConnectionRequestParams,
)
from linkedapi.models.messaging import (
    ApiUsageAction,
    ConversationPollRequest,
    ConversationPollResult,
)
from linkedapi.models.workflow import WorkflowDefinition
from linkedapi.transport.client import HttpClient, LinkedApiHttpClient
from linkedapi.workflows.handle import WorkflowHandle
from linkedapi.workflows.names import OperationName
from linkedapi.workflows.operation import Operation, unwrap
from linkedapi.workflows.restoration import create_mapper_from_operation_name

logger = logging.getLogger(__name__)

MAX_USAGE_WINDOW = timedelta(days=30)

_conversation_results = TypeAdapter(list[ConversationPollResult])
_usage_actions = TypeAdapter(list[ApiUsageAction])


class LinkedApi:
    """Client for the Linked API.

    Every LinkedIn action is an Operation attribute with execute(), result(),
    status() and cancel(). Use as an async context manager to close the
    underlying HTTP connections.

    Example:
        async with LinkedApi(token, identification_token) as api:
            workflow_id = await api.fetch_person.execute(
                FetchPersonParams(person_url=url, retrieve_skills=True)
            )
            response = await api.fetch_person.result(workflow_id)
    """

    def __init__(
        self,
        linked_api_token: str | None,
        identification_token: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        workflow_timeout: float | None = None,
        poll_interval: float | None = None,
        max_transport_errors: int | None = None,
        request_timeout: float = 30.0,
        http_client: HttpClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            linked_api_token: Linked API customer token.
            identification_token: Token of the LinkedIn account to act as.
            base_url: Root URL of the API.
            workflow_timeout: Default seconds result() waits before giving up.
            poll_interval: Default seconds between status checks.
            max_transport_errors: Default consecutive transport failures tolerated.
            request_timeout: Per-request HTTP timeout in seconds.
            http_client: Transport to use instead of the built-in httpx client.

        Raises:
            LinkedApiError: If a token is missing.
        """
        if not linked_api_token:
            raise LinkedApiError(
                LinkedApiErrorType.LINKED_API_TOKEN_REQUIRED, "Linked API token is required"
            )
        if not identification_token:
            raise LinkedApiError(
                LinkedApiErrorType.IDENTIFICATION_TOKEN_REQUIRED,
                "Identification token is required",
            )

        option_overrides: dict[str, Any] = {
            "timeout": workflow_timeout,
            "poll_interval": poll_interval,
            "max_transport_errors": max_transport_errors,
        }
        self.default_options = PollOptions(
            **{key: value for key, value in option_overrides.items() if value is not None}
        )
        self._owns_http_client = http_client is None
        self.http_client: HttpClient = http_client or LinkedApiHttpClient(
            linked_api_token, identification_token, base_url=base_url, timeout=request_timeout
        )

        self.custom_workflow: Operation[WorkflowDefinition, Any] = self._operation(
            OperationName.CUSTOM_WORKFLOW
        )

        self.send_message: Operation[SendMessageParams, None] = self._operation(
            OperationName.SEND_MESSAGE
        )
        self.sync_conversation: Operation[SyncConversationParams, None] = self._operation(
            OperationName.SYNC_CONVERSATION
        )

        self.check_connection_status: Operation[
            CheckConnectionStatusParams, CheckConnectionStatusResult
        ] = self._operation(OperationName.CHECK_CONNECTION_STATUS)
        self.send_connection_request: Operation[SendConnectionRequestParams, None] = (
            self._operation(OperationName.SEND_CONNECTION_REQUEST)
        )
        self.withdraw_connection_request: Operation[WithdrawConnectionRequestParams, None] = (
            self._operation(OperationName.WITHDRAW_CONNECTION_REQUEST)
        )
        self.retrieve_pending_requests: Operation[None, list[RetrievePendingRequestsResult]] = (
            self._operation(OperationName.RETRIEVE_PENDING_REQUESTS)
        )
        self.retrieve_connections: Operation[
            RetrieveConnectionsParams, list[RetrieveConnectionsResult]
        ] = self._operation(OperationName.RETRIEVE_CONNECTIONS)
        self.remove_connection: Operation[RemoveConnectionParams, None] = self._operation(
            OperationName.REMOVE_CONNECTION
        )

        self.search_companies: Operation[SearchCompaniesParams, list[SearchCompanyResult]] = (
            self._operation(OperationName.SEARCH_COMPANIES)
        )
        self.search_people: Operation[SearchPeopleParams, list[SearchPeopleResult]] = (
            self._operation(OperationName.SEARCH_PEOPLE)
        )
        self.fetch_person: Operation[FetchPersonParams, FetchPersonResult] = self._operation(
            OperationName.FETCH_PERSON
        )
        self.fetch_company: Operation[FetchCompanyParams, FetchCompanyResult] = self._operation(
            OperationName.FETCH_COMPANY
        )

        self.fetch_post: Operation[FetchPostParams, Post] = self._operation(
            OperationName.FETCH_POST
        )
        self.react_to_post: Operation[ReactToPostParams, None] = self._operation(
            OperationName.REACT_TO_POST
        )
        self.comment_on_post: Operation[CommentOnPostParams, None] = self._operation(
            OperationName.COMMENT_ON_POST
        )
        self.create_post: Operation[CreatePostParams, CreatePostResult] = self._operation(
            OperationName.CREATE_POST
        )

        self.retrieve_ssi: Operation[None, RetrieveSSIResult] = self._operation(
            OperationName.RETRIEVE_SSI
        )
        self.retrieve_performance: Operation[None, RetrievePerformanceResult] = (
            self._operation(OperationName.RETRIEVE_PERFORMANCE)
        )

        self.nv_send_message: Operation[NvSendMessageParams, None] = self._operation(
            OperationName.NV_SEND_MESSAGE
        )
        self.nv_sync_conversation: Operation[NvSyncConversationParams, None] = self._operation(
            OperationName.NV_SYNC_CONVERSATION
        )
        self.nv_search_companies: Operation[
            SearchCompaniesParams, list[NvSearchCompanyResult]
        ] = self._operation(OperationName.NV_SEARCH_COMPANIES)
        self.nv_search_people: Operation[SearchPeopleParams, list[NvSearchPeopleResult]] = (
            self._operation(OperationName.NV_SEARCH_PEOPLE)
        )
        self.nv_fetch_company: Operation[NvFetchCompanyParams, NvFetchCompanyResult] = (
            self._operation(OperationName.NV_FETCH_COMPANY)
        )
        self.nv_fetch_person: Operation[NvFetchPersonParams, NvFetchPersonResult] = (
            self._operation(OperationName.NV_FETCH_PERSON)
        )

    @classmethod
    def from_settings(cls, settings: Settings, http_client: HttpClient | None = None) -> Self:
        """Build a client from Settings, typically loaded from LINKEDAPI_* variables."""
        return cls(
            settings.linked_api_token,
            settings.identification_token,
            base_url=settings.base_url,
            workflow_timeout=settings.workflow_timeout,
            poll_interval=settings.poll_interval,
            max_transport_errors=settings.max_transport_errors,
            request_timeout=settings.request_timeout,
            http_client=http_client,
        )

    @property
    def operations(self) -> dict[OperationName, Operation[Any, Any]]:
        """The operation catalog keyed by name."""
        return {
            value.operation_name: value
            for value in vars(self).values()
            if isinstance(value, Operation)
        }

    def restore_workflow(
        self,
        workflow_id: str,
        operation_name: OperationName | str = OperationName.CUSTOM_WORKFLOW,
    ) -> WorkflowHandle:
        """Rebuild a handle for a workflow started earlier, possibly by another process.

        Args:
            workflow_id: Id of the running or finished workflow.
            operation_name: Operation that started it; decides how the result is decoded.

        Raises:
            ValueError: If operation_name is unknown.
        """
        return WorkflowHandle(workflow_id, self._operation(OperationName(operation_name)))

    async def poll_conversations(
        self,
        conversations: Iterable[ConversationPollRequest | Mapping[str, Any]],
    ) -> list[ConversationPollResult]:
        """Fetch new messages of previously synced conversations.

        Args:
            conversations: Conversations to poll, each with a person URL, a
                type (st or nv) and an optional since timestamp.

        Raises:
            LinkedApiConversationsNotSyncedError: If a conversation was never synced.
            LinkedApiError: For any other request failure.
        """
        body = [
            ConversationPollRequest.model_validate(item).to_wire()
            if isinstance(item, Mapping)
            else item.to_wire()
            for item in conversations
        ]
        response = await self.http_client.post("/conversations/poll", body)
        if (
            response.error is not None
            and response.error.type == ActionErrorType.CONVERSATIONS_NOT_SYNCED.value
        ):
            raise LinkedApiConversationsNotSyncedError(
                response.error.message, response.error.details
            )
        result = unwrap(response)
        try:
            return _conversation_results.validate_python(result)
        except ValidationError as e:
            raise LinkedApiError.unknown_error() from e

    async def get_api_usage(
        self, start: datetime | str, end: datetime | str
    ) -> list[ApiUsageAction]:
        """List actions executed on the account within a time window.

        Args:
            start: Window start, a datetime or ISO 8601 string.
            end: Window end; must be after start and at most 30 days later.

        Raises:
            LinkedApiError: invalidRequestPayload when the window is invalid,
                checked before any request is sent.
        """
        start_time = _parse_time(start)
        end_time = _parse_time(end)
        if start_time >= end_time:
            raise LinkedApiError(
                LinkedApiErrorType.INVALID_REQUEST_PAYLOAD, "start must be before end"
            )
        if end_time - start_time > MAX_USAGE_WINDOW:
            raise LinkedApiError(
                LinkedApiErrorType.INVALID_REQUEST_PAYLOAD,
                "The usage window cannot exceed 30 days",
            )

        query = urlencode({"start": start_time.isoformat(), "end": end_time.isoformat()})
        result = unwrap(await self.http_client.get(f"/stats/actions?{query}"))
        try:
            return _usage_actions.validate_python(result)
        except ValidationError as e:
            raise LinkedApiError.unknown_error() from e

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client and isinstance(self.http_client, LinkedApiHttpClient):
            await self.http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _operation(self, operation_name: OperationName) -> Operation[Any, Any]:
        return Operation(
            operation_name,
            create_mapper_from_operation_name(operation_name),
            self.http_client,
            self.default_options,
        )


def _parse_time(value: datetime | str) -> datetime:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise LinkedApiError(
                LinkedApiErrorType.INVALID_REQUEST_PAYLOAD, f"Invalid timestamp: {value}"
            ) from e
    # Naive times are taken as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value
