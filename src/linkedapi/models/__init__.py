# ABOUTME: Models package for Linked API payloads and local persistence.
# ABOUTME: Exports wire envelopes, workflow payloads, action shapes, and the tracker table.

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
    PeopleFilter,
    Person,
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
from linkedapi.models.base import ApiModel
from linkedapi.models.messaging import (
    ApiUsageAction,
    ConversationPollRequest,
    ConversationPollResult,
    Message,
)
from linkedapi.models.tracked_workflow import TrackedStatus, TrackedWorkflow
from linkedapi.models.workflow import (
    ActionError,
    ApiResponse,
    MappedResponse,
    RequestError,
    ThenAction,
    WorkflowCancelled,
    WorkflowCompletion,
    WorkflowDefinition,
    WorkflowFailure,
    WorkflowResponse,
    WorkflowStarted,
    WorkflowStatus,
)

__all__ = [
    "ActionError",
    "ApiModel",
    "ApiResponse",
    "ApiUsageAction",
    "CheckConnectionStatusParams",
    "CheckConnectionStatusResult",
    "CommentOnPostParams",
    "ConversationPollRequest",
    "ConversationPollResult",
    "CreatePostParams",
    "CreatePostResult",
    "FetchCompanyParams",
    "FetchCompanyResult",
    "FetchPersonParams",
    "FetchPersonResult",
    "FetchPostParams",
    "MappedResponse",
    "Message",
    "NvFetchCompanyParams",
    "NvFetchCompanyResult",
    "NvFetchPersonParams",
    "NvFetchPersonResult",
    "NvSearchCompanyResult",
    "NvSearchPeopleResult",
    "NvSendMessageParams",
    "NvSyncConversationParams",
    "PeopleFilter",
    "Person",
    "Post",
    "ReactToPostParams",
    "RemoveConnectionParams",
    "RequestError",
    "RetrieveConnectionsParams",
    "RetrieveConnectionsResult",
    "RetrievePendingRequestsResult",
    "RetrievePerformanceResult",
    "RetrieveSSIResult",
    "SearchCompaniesParams",
    "SearchCompanyResult",
    "SearchPeopleParams",
    "SearchPeopleResult",
    "SendConnectionRequestParams",
    "SendMessageParams",
    "SyncConversationParams",
    "ThenAction",
    "TrackedStatus",
    "TrackedWorkflow",
    "WithdrawConnectionRequestParams",
    "WorkflowCancelled",
    "WorkflowCompletion",
    "WorkflowDefinition",
    "WorkflowFailure",
    "WorkflowResponse",
    "WorkflowStarted",
    "WorkflowStatus",
]
