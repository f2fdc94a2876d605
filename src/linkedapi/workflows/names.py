# ABOUTME: Enumeration of every operation the client can start or restore.
# ABOUTME: Names are the camelCase identifiers embedded in timeout errors and tracker rows.

from enum import Enum


class OperationName(str, Enum):
    """Name of a supported operation."""

    CUSTOM_WORKFLOW = "customWorkflow"
    SEND_MESSAGE = "sendMessage"
    SYNC_CONVERSATION = "syncConversation"
    CHECK_CONNECTION_STATUS = "checkConnectionStatus"
    SEND_CONNECTION_REQUEST = "sendConnectionRequest"
    WITHDRAW_CONNECTION_REQUEST = "withdrawConnectionRequest"
    RETRIEVE_PENDING_REQUESTS = "retrievePendingRequests"
    RETRIEVE_CONNECTIONS = "retrieveConnections"
    REMOVE_CONNECTION = "removeConnection"
    SEARCH_COMPANIES = "searchCompanies"
    SEARCH_PEOPLE = "searchPeople"
    FETCH_PERSON = "fetchPerson"
    FETCH_COMPANY = "fetchCompany"
    FETCH_POST = "fetchPost"
    REACT_TO_POST = "reactToPost"
    COMMENT_ON_POST = "commentOnPost"
    CREATE_POST = "createPost"
    RETRIEVE_SSI = "retrieveSSI"
    RETRIEVE_PERFORMANCE = "retrievePerformance"
    NV_SEND_MESSAGE = "nvSendMessage"
    NV_SYNC_CONVERSATION = "nvSyncConversation"
    NV_SEARCH_COMPANIES = "nvSearchCompanies"
    NV_SEARCH_PEOPLE = "nvSearchPeople"
    NV_FETCH_COMPANY = "nvFetchCompany"
    NV_FETCH_PERSON = "nvFetchPerson"
