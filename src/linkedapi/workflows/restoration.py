# ABOUTME: Registry mapping each operation name to the mapper that decodes its workflows.
# ABOUTME: Used by the client catalog and to restore workflows from a persisted id and name.

from typing import Any

from linkedapi.mappers import (
    ArrayWorkflowMapper,
    BaseMapper,
    FetchCompanyMapper,
    FetchPersonMapper,
    NvFetchCompanyMapper,
    NvFetchPersonMapper,
    SimpleWorkflowMapper,
    VoidWorkflowMapper,
)
from linkedapi.models.actions import (
    CheckConnectionStatusResult,
    CreatePostResult,
    NvSearchCompanyResult,
    NvSearchPeopleResult,
    Post,
    RetrieveConnectionsResult,
    RetrievePendingRequestsResult,
    RetrievePerformanceResult,
    RetrieveSSIResult,
    SearchCompanyResult,
    SearchPeopleResult,
)
from linkedapi.workflows.names import OperationName


def create_mapper_from_operation_name(
    operation_name: OperationName | str,
) -> BaseMapper[Any, Any] | None:
    """Build the mapper for an operation.

    Args:
        operation_name: An OperationName or its string value.

    Returns:
        A fresh mapper, or None for custom workflows whose completion is
        returned unchanged.

    Raises:
        ValueError: If the name is not a known operation.
    """
    name = OperationName(operation_name)

    match name:
        case OperationName.CUSTOM_WORKFLOW:
            return None
        case OperationName.SEND_MESSAGE:
            return VoidWorkflowMapper("st.sendMessage")
        case OperationName.SYNC_CONVERSATION:
            return VoidWorkflowMapper("st.syncConversation")
        case OperationName.CHECK_CONNECTION_STATUS:
            return SimpleWorkflowMapper(
                "st.checkConnectionStatus", result_type=CheckConnectionStatusResult
            )
        case OperationName.SEND_CONNECTION_REQUEST:
            return VoidWorkflowMapper("st.sendConnectionRequest")
        case OperationName.WITHDRAW_CONNECTION_REQUEST:
            return VoidWorkflowMapper("st.withdrawConnectionRequest")
        case OperationName.RETRIEVE_PENDING_REQUESTS:
            return ArrayWorkflowMapper(
                "st.retrievePendingRequests", item_type=RetrievePendingRequestsResult
            )
        case OperationName.RETRIEVE_CONNECTIONS:
            return ArrayWorkflowMapper(
                "st.retrieveConnections", item_type=RetrieveConnectionsResult
            )
        case OperationName.REMOVE_CONNECTION:
            return VoidWorkflowMapper("st.removeConnection")
        case OperationName.SEARCH_COMPANIES:
            return ArrayWorkflowMapper("st.searchCompanies", item_type=SearchCompanyResult)
        case OperationName.SEARCH_PEOPLE:
            return ArrayWorkflowMapper("st.searchPeople", item_type=SearchPeopleResult)
        case OperationName.FETCH_PERSON:
            return FetchPersonMapper()
        case OperationName.FETCH_COMPANY:
            return FetchCompanyMapper()
        case OperationName.FETCH_POST:
            return SimpleWorkflowMapper(
                "st.openPost", default_params={"basicInfo": True}, result_type=Post
            )
        case OperationName.REACT_TO_POST:
            return VoidWorkflowMapper("st.reactToPost")
        case OperationName.COMMENT_ON_POST:
            return VoidWorkflowMapper("st.commentOnPost")
        case OperationName.CREATE_POST:
            return SimpleWorkflowMapper("st.createPost", result_type=CreatePostResult)
        case OperationName.RETRIEVE_SSI:
            return SimpleWorkflowMapper("st.retrieveSSI", result_type=RetrieveSSIResult)
        case OperationName.RETRIEVE_PERFORMANCE:
            return SimpleWorkflowMapper(
                "st.retrievePerformance", result_type=RetrievePerformanceResult
            )
        case OperationName.NV_SEND_MESSAGE:
            return VoidWorkflowMapper("nv.sendMessage")
        case OperationName.NV_SYNC_CONVERSATION:
            return VoidWorkflowMapper("nv.syncConversation")
        case OperationName.NV_SEARCH_COMPANIES:
            return ArrayWorkflowMapper("nv.searchCompanies", item_type=NvSearchCompanyResult)
        case OperationName.NV_SEARCH_PEOPLE:
            return ArrayWorkflowMapper("nv.searchPeople", item_type=NvSearchPeopleResult)
        case OperationName.NV_FETCH_COMPANY:
            return NvFetchCompanyMapper()
        case OperationName.NV_FETCH_PERSON:
            return NvFetchPersonMapper()
