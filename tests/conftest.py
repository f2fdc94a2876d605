# ABOUTME: Shared pytest fixtures for linkedapi tests.
# ABOUTME: Provides a mocked transport, envelope builders, and fast poll options.

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from linkedapi.config import PollOptions
from linkedapi.models import ApiResponse, RequestError


@pytest.fixture
def http_client() -> MagicMock:
    """Create a transport double whose get/post/delete are AsyncMocks."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.delete = AsyncMock()
    return client


@pytest.fixture
def ok() -> Callable[[Any], ApiResponse]:
    """Build a successful envelope around a result."""

    def _ok(result: Any) -> ApiResponse:
        return ApiResponse(success=True, result=result)

    return _ok


@pytest.fixture
def fail() -> Callable[..., ApiResponse]:
    """Build a failed envelope with the given error type."""

    def _fail(error_type: str, message: str = "failed", details: Any = None) -> ApiResponse:
        return ApiResponse(
            success=False,
            error=RequestError(type=error_type, message=message, details=details),
        )

    return _fail


@pytest.fixture
def workflow() -> Callable[..., dict[str, Any]]:
    """Build the result payload of GET /workflows/{id}."""

    def _workflow(
        status: str = "completed",
        completion: Any = None,
        failure: dict[str, str] | None = None,
        workflow_id: str = "wf-1",
    ) -> dict[str, Any]:
        result: dict[str, Any] = {"workflowId": workflow_id, "workflowStatus": status}
        if completion is not None:
            result["completion"] = completion
        if failure is not None:
            result["failure"] = failure
        return result

    return _workflow


@pytest.fixture
def fast_options() -> PollOptions:
    """Poll options that never sleep, for tests using the real event loop."""
    return PollOptions(poll_interval=0, timeout=5, max_transport_errors=3)
