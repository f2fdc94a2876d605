# ABOUTME: Exception hierarchy for Linked API request, workflow, and timeout failures.
# ABOUTME: Also enumerates the known request-level and action-level error type strings.

from enum import Enum
from typing import Any


class LinkedApiErrorType(str, Enum):
    """Known request-level error types returned by the API or raised by the client."""

    LINKED_API_TOKEN_REQUIRED = "linkedApiTokenRequired"
    INVALID_LINKED_API_TOKEN = "invalidLinkedApiToken"
    IDENTIFICATION_TOKEN_REQUIRED = "identificationTokenRequired"
    INVALID_IDENTIFICATION_TOKEN = "invalidIdentificationToken"
    SUBSCRIPTION_REQUIRED = "subscriptionRequired"
    INVALID_REQUEST_PAYLOAD = "invalidRequestPayload"
    INVALID_WORKFLOW = "invalidWorkflow"
    PLUS_PLAN_REQUIRED = "plusPlanRequired"
    LINKEDIN_ACCOUNT_SIGNED_OUT = "linkedinAccountSignedOut"
    LANGUAGE_NOT_SUPPORTED = "languageNotSupported"
    WORKFLOW_TIMEOUT = "workflowTimeout"
    HTTP_ERROR = "httpError"
    NETWORK_ERROR = "networkError"
    UNKNOWN_ERROR = "unknownError"


class ActionErrorType(str, Enum):
    """Known reasons a single action inside a completed workflow can fail."""

    PERSON_NOT_FOUND = "personNotFound"
    SELF_PROFILE_NOT_ALLOWED = "selfProfileNotAllowed"
    MESSAGING_NOT_ALLOWED = "messagingNotAllowed"
    ALREADY_PENDING = "alreadyPending"
    ALREADY_CONNECTED = "alreadyConnected"
    EMAIL_REQUIRED = "emailRequired"
    REQUEST_NOT_ALLOWED = "requestNotAllowed"
    NOT_PENDING = "notPending"
    RETRIEVING_NOT_ALLOWED = "retrievingNotAllowed"
    CONNECTION_NOT_FOUND = "connectionNotFound"
    SEARCHING_NOT_ALLOWED = "searchingNotAllowed"
    COMPANY_NOT_FOUND = "companyNotFound"
    POST_NOT_FOUND = "postNotFound"
    COMMENTING_NOT_ALLOWED = "commentingNotAllowed"
    NO_SALES_NAVIGATOR = "noSalesNavigator"
    CONVERSATIONS_NOT_SYNCED = "conversationsNotSynced"


TRANSPORT_ERROR_TYPES = frozenset(
    {LinkedApiErrorType.HTTP_ERROR.value, LinkedApiErrorType.NETWORK_ERROR.value}
)


class LinkedApiError(Exception):
    """Raised when a request to the API fails or is rejected.

    This covers authentication problems, payload validation, HTTP and network
    failures, and protocol violations. It is the root of every exception the
    SDK raises, so callers can catch it to handle all SDK failures at once.

    Attributes:
        type: Error type string, usually one of LinkedApiErrorType.
        message: Human-readable description of the error.
        details: Optional extra information (raw response body, status code).
    """

    def __init__(self, type: str, message: str, details: Any = None) -> None:
        """Initialize the exception.

        Args:
            type: Error type string.
            message: Human-readable description of the error.
            details: Optional extra information about the failure.
        """
        super().__init__(message)
        self.type = type.value if isinstance(type, Enum) else type
        self.message = message
        self.details = details

    @classmethod
    def unknown_error(
        cls, message: str = "Unknown error. Please contact support."
    ) -> "LinkedApiError":
        """Build the error used when a response violates the expected protocol."""
        return cls(LinkedApiErrorType.UNKNOWN_ERROR, message)

    @property
    def is_transport_error(self) -> bool:
        """Whether the HTTP call itself failed, as opposed to being rejected by the API."""
        return self.type in TRANSPORT_ERROR_TYPES


class LinkedApiWorkflowError(LinkedApiError):
    """Raised when a workflow as a whole was aborted on the server.

    Distinct from an action-level error: no completion exists to report.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(reason, message, details={"reason": reason})
        self.reason = reason


class LinkedApiWorkflowTimeoutError(LinkedApiError):
    """Raised when polling gives up before the workflow reached a terminal state.

    The workflow may still be running remotely. The workflow id and operation
    name are kept so the caller can resume polling later.

    Attributes:
        workflow_id: Id of the workflow that was being polled.
        operation_name: Name of the operation that started the workflow.
    """

    def __init__(self, workflow_id: str, operation_name: str) -> None:
        if isinstance(operation_name, Enum):
            operation_name = operation_name.value
        super().__init__(
            LinkedApiErrorType.WORKFLOW_TIMEOUT,
            f"Workflow {workflow_id} timed out. "
            f"Call {operation_name}.result() again to continue checking the workflow.",
            details={"workflowId": workflow_id, "operationName": operation_name},
        )
        self.workflow_id = workflow_id
        self.operation_name = operation_name


class LinkedApiConversationsNotSyncedError(LinkedApiError):
    """Raised when polling a conversation that was never synced."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ActionErrorType.CONVERSATIONS_NOT_SYNCED, message, details)
