# ABOUTME: Tests for Operation: submission, status checks, result polling, and cancellation.
# ABOUTME: Runs against a mocked transport returning canned envelopes.

import asyncio
from unittest.mock import MagicMock

import pytest

from linkedapi.config import PollOptions
from linkedapi.errors import (
    LinkedApiError,
    LinkedApiWorkflowError,
    LinkedApiWorkflowTimeoutError,
)
from linkedapi.mappers import (
    ArrayWorkflowMapper,
    FetchPersonMapper,
    SimpleWorkflowMapper,
    VoidWorkflowMapper,
)
from linkedapi.models import (
    CheckConnectionStatusResult,
    SearchPeopleResult,
    WorkflowStatus,
)
from linkedapi.workflows import Operation, OperationName


@pytest.fixture
def check_status(http_client: MagicMock, fast_options: PollOptions) -> Operation:
    return Operation(
        OperationName.CHECK_CONNECTION_STATUS,
        SimpleWorkflowMapper("st.checkConnectionStatus", result_type=CheckConnectionStatusResult),
        http_client,
        fast_options,
    )


class TestExecute:
    """Tests for Operation.execute."""

    @pytest.mark.asyncio
    async def test_posts_mapped_definition(self, check_status, http_client, ok) -> None:
        """Test that the mapped definition is posted and the id returned."""
        http_client.post.return_value = ok({"workflowId": "wf-1"})

        workflow_id = await check_status.execute({"personUrl": "u"})

        assert workflow_id == "wf-1"
        http_client.post.assert_awaited_once_with(
            "/workflows", {"actionType": "st.checkConnectionStatus", "personUrl": "u"}
        )

    @pytest.mark.asyncio
    async def test_error_envelope_raises(self, check_status, http_client, fail) -> None:
        """Test that a rejected submission raises with the server's type."""
        http_client.post.return_value = fail("invalidWorkflow", "Bad workflow")

        with pytest.raises(LinkedApiError) as exc_info:
            await check_status.execute({"personUrl": "u"})

        assert exc_info.value.type == "invalidWorkflow"
        assert exc_info.value.message == "Bad workflow"

    @pytest.mark.asyncio
    async def test_missing_result_raises_unknown(self, check_status, http_client, ok) -> None:
        """Test that an envelope without result is a protocol error."""
        http_client.post.return_value = ok(None)

        with pytest.raises(LinkedApiError) as exc_info:
            await check_status.execute({"personUrl": "u"})

        assert exc_info.value.type == "unknownError"

    @pytest.mark.asyncio
    async def test_custom_workflow_posts_raw_definition(self, http_client, ok) -> None:
        """Test that an operation without mapper sends the definition unchanged."""
        http_client.post.return_value = ok({"workflowId": "wf-9"})
        custom = Operation(OperationName.CUSTOM_WORKFLOW, None, http_client)
        definition = {"actionType": "st.searchPeople", "term": "cto", "then": []}

        await custom.execute(definition)

        http_client.post.assert_awaited_once_with("/workflows", definition)


class TestResult:
    """Tests for Operation.result."""

    @pytest.mark.asyncio
    async def test_polls_until_completed(self, check_status, http_client, ok, workflow) -> None:
        """Test that running responses are polled through to the mapped result."""
        http_client.get.side_effect = [
            ok(workflow("running")),
            ok(workflow("running")),
            ok(workflow(completion={"data": {"connectionStatus": "pending"}})),
        ]

        response = await check_status.result("wf-1")

        assert http_client.get.await_count == 3
        http_client.get.assert_awaited_with("/workflows/wf-1")
        assert response.data.connection_status == "pending"
        assert response.errors == []

    @pytest.mark.asyncio
    async def test_failure_raises_workflow_error(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that an aborted workflow raises with its reason."""
        http_client.get.return_value = ok(
            workflow(
                "failed",
                failure={"reason": "linkedinAccountSignedOut", "message": "Signed out"},
            )
        )

        with pytest.raises(LinkedApiWorkflowError) as exc_info:
            await check_status.result("wf-1")

        assert exc_info.value.reason == "linkedinAccountSignedOut"

    @pytest.mark.asyncio
    async def test_terminal_without_payload_raises_unknown(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that a completed workflow with neither completion nor failure is rejected."""
        http_client.get.return_value = ok(workflow("completed"))

        with pytest.raises(LinkedApiError) as exc_info:
            await check_status.result("wf-1")

        assert exc_info.value.type == "unknownError"

    @pytest.mark.asyncio
    async def test_malformed_then_entry_raises_unknown(
        self, http_client, ok, workflow, fast_options
    ) -> None:
        """Test that an invalid chained child surfaces as an API error."""
        fetch_person = Operation(
            OperationName.FETCH_PERSON, FetchPersonMapper(), http_client, fast_options
        )
        http_client.get.return_value = ok(
            workflow(completion={"data": {"name": "A", "then": ["oops"]}})
        )

        with pytest.raises(LinkedApiError) as exc_info:
            await fetch_person.result("wf-1")

        assert exc_info.value.type == "unknownError"

    @pytest.mark.asyncio
    async def test_timeout_names_workflow_and_operation(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that giving up raises the resumable timeout error."""
        http_client.get.return_value = ok(workflow("running", workflow_id="wf-7"))

        with pytest.raises(LinkedApiWorkflowTimeoutError) as exc_info:
            await check_status.result("wf-7", PollOptions(poll_interval=0.01, timeout=0.05))

        assert exc_info.value.workflow_id == "wf-7"
        assert exc_info.value.operation_name == "checkConnectionStatus"

    @pytest.mark.asyncio
    async def test_result_can_resume_after_timeout(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that calling result again continues on the same workflow."""
        http_client.get.return_value = ok(workflow("running"))
        with pytest.raises(LinkedApiWorkflowTimeoutError):
            await check_status.result("wf-1", PollOptions(poll_interval=0.01, timeout=0.03))

        http_client.get.return_value = ok(
            workflow(completion={"data": {"connectionStatus": "connected"}})
        )
        response = await check_status.result("wf-1")

        assert response.data.connection_status == "connected"

    @pytest.mark.asyncio
    async def test_transport_errors_within_budget_are_retried(
        self, check_status, http_client, ok, fail, workflow
    ) -> None:
        """Test that a flaky network does not abort the wait."""
        http_client.get.side_effect = [
            fail("httpError", "HTTP 502"),
            fail("networkError", "reset"),
            ok(workflow(completion={"data": {"connectionStatus": "notConnected"}})),
        ]

        response = await check_status.result("wf-1")

        assert response.data.connection_status == "notConnected"

    @pytest.mark.asyncio
    async def test_application_error_is_not_retried(
        self, check_status, http_client, fail
    ) -> None:
        """Test that an auth failure propagates after a single request."""
        http_client.get.return_value = fail("invalidIdentificationToken", "bad")

        with pytest.raises(LinkedApiError) as exc_info:
            await check_status.result("wf-1")

        assert exc_info.value.type == "invalidIdentificationToken"
        assert http_client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_void_action_without_data(self, http_client, ok, workflow) -> None:
        """Test that a completed reaction yields no data and no errors."""
        react = Operation(
            OperationName.REACT_TO_POST, VoidWorkflowMapper("st.reactToPost"), http_client
        )
        http_client.get.return_value = ok(
            workflow(completion={"actionType": "st.reactToPost", "success": True})
        )

        response = await react.result("wf-1")

        assert response.data is None
        assert response.errors == []

    @pytest.mark.asyncio
    async def test_search_list_and_scalar(self, http_client, ok, workflow) -> None:
        """Test that list data gives every item and scalar data gives one."""
        search = Operation(
            OperationName.SEARCH_PEOPLE,
            ArrayWorkflowMapper("st.searchPeople", item_type=SearchPeopleResult),
            http_client,
        )
        http_client.get.return_value = ok(
            workflow(completion={"data": [{"name": "A"}, {"name": "B"}]})
        )
        assert len((await search.result("wf-1")).data) == 2

        http_client.get.return_value = ok(workflow(completion={"data": {"name": "A"}}))
        assert len((await search.result("wf-1")).data) == 1

    @pytest.mark.asyncio
    async def test_custom_workflow_returns_raw_completion(
        self, http_client, ok, workflow
    ) -> None:
        """Test that a mapper-less operation returns the completion unchanged."""
        custom = Operation(OperationName.CUSTOM_WORKFLOW, None, http_client)
        raw = [{"actionType": "st.openPersonPage", "data": {"name": "X"}}]
        http_client.get.return_value = ok(workflow(completion=raw))

        response = await custom.result("wf-1")

        assert response.data == raw

    @pytest.mark.asyncio
    async def test_waiting_can_be_cancelled(self, check_status, http_client, ok, workflow) -> None:
        """Test that cancelling the awaiting task stops polling."""
        http_client.get.return_value = ok(workflow("running"))
        task = asyncio.create_task(
            check_status.result("wf-1", PollOptions(poll_interval=60, timeout=600))
        )
        await asyncio.sleep(0.01)

        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert http_client.get.await_count == 1


class TestStatus:
    """Tests for Operation.status."""

    @pytest.mark.asyncio
    async def test_running_returns_sentinel(self, check_status, http_client, ok, workflow) -> None:
        """Test that a running workflow yields the RUNNING status."""
        http_client.get.return_value = ok(workflow("running"))
        assert await check_status.status("wf-1") is WorkflowStatus.RUNNING

    @pytest.mark.asyncio
    async def test_completed_returns_mapped_response(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that a finished workflow is decoded immediately."""
        http_client.get.return_value = ok(
            workflow(completion={"data": {"connectionStatus": "pending"}})
        )
        response = await check_status.status("wf-1")
        assert response.data.connection_status == "pending"
        assert http_client.get.await_count == 1


class TestCancel:
    """Tests for Operation.cancel."""

    @pytest.mark.asyncio
    async def test_cancel_running_workflow(self, check_status, http_client, ok) -> None:
        """Test that cancelling sends DELETE and returns the server's answer."""
        http_client.delete.return_value = ok({"cancelled": True})

        assert await check_status.cancel("wf-1") is True
        http_client.delete.assert_awaited_once_with("/workflows/wf-1")

    @pytest.mark.asyncio
    async def test_cancel_finished_workflow_returns_false(
        self, check_status, http_client, ok
    ) -> None:
        """Test that a terminal workflow yields False without raising."""
        http_client.delete.return_value = ok({"cancelled": False})

        assert await check_status.cancel("wf-1") is False


class TestRun:
    """Tests for the execute-then-wait convenience."""

    @pytest.mark.asyncio
    async def test_run_executes_and_waits(
        self, check_status, http_client, ok, workflow
    ) -> None:
        """Test that run submits and polls the returned workflow id."""
        http_client.post.return_value = ok({"workflowId": "wf-3"})
        http_client.get.return_value = ok(
            workflow(completion={"data": {"connectionStatus": "connected"}}, workflow_id="wf-3")
        )

        response = await check_status.run({"personUrl": "u"})

        http_client.get.assert_awaited_once_with("/workflows/wf-3")
        assert response.data.connection_status == "connected"
