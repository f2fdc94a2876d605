# ABOUTME: Tests for the bounded workflow poll loop.
# ABOUTME: Uses a fake clock to check poll counts, timeouts, and the transport retry budget.

from unittest.mock import AsyncMock

import pytest

from linkedapi.config import PollOptions
from linkedapi.errors import LinkedApiError
from linkedapi.models import MappedResponse, WorkflowStatus
from linkedapi.workflows import poll_workflow_result

RUNNING = WorkflowStatus.RUNNING


class FakeClock:
    """Monotonic clock advanced only by the fake sleep."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def transport_error() -> LinkedApiError:
    return LinkedApiError("networkError", "connection reset")


class TestPollWorkflowResult:
    """Tests for poll_workflow_result."""

    @pytest.mark.asyncio
    async def test_returns_first_terminal_result(self, clock: FakeClock) -> None:
        """Test that N running responses then a result take exactly N+1 checks."""
        done = MappedResponse(data={"ok": True})
        fetch = AsyncMock(side_effect=[RUNNING, RUNNING, RUNNING, done])

        result = await poll_workflow_result(
            fetch, PollOptions(poll_interval=5), clock=clock, sleep=clock.sleep
        )

        assert result is done
        assert fetch.await_count == 4
        assert clock.sleeps == [5, 5, 5]

    @pytest.mark.asyncio
    async def test_immediate_result_does_not_sleep(self, clock: FakeClock) -> None:
        """Test that a workflow already finished is returned after one check."""
        done = MappedResponse()
        fetch = AsyncMock(return_value=done)

        result = await poll_workflow_result(fetch, PollOptions(), clock=clock, sleep=clock.sleep)

        assert result is done
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_times_out_on_schedule(self, clock: FakeClock) -> None:
        """Test that the last sleep is capped so the timeout fires at the deadline."""
        fetch = AsyncMock(return_value=RUNNING)

        with pytest.raises(LinkedApiError) as exc_info:
            await poll_workflow_result(
                fetch, PollOptions(poll_interval=3, timeout=10), clock=clock, sleep=clock.sleep
            )

        assert exc_info.value.type == "workflowTimeout"
        assert clock.sleeps == [3, 3, 3, 1]
        assert clock.now == 10
        assert fetch.await_count == 4

    @pytest.mark.asyncio
    async def test_interval_longer_than_timeout(self, clock: FakeClock) -> None:
        """Test that a huge interval does not delay the timeout."""
        fetch = AsyncMock(return_value=RUNNING)

        with pytest.raises(LinkedApiError):
            await poll_workflow_result(
                fetch, PollOptions(poll_interval=3600, timeout=2), clock=clock, sleep=clock.sleep
            )

        assert clock.now == 2

    @pytest.mark.asyncio
    async def test_transport_errors_are_retried(self, clock: FakeClock) -> None:
        """Test that transient failures within the budget are retried."""
        done = MappedResponse()
        fetch = AsyncMock(side_effect=[transport_error(), transport_error(), done])

        result = await poll_workflow_result(
            fetch, PollOptions(poll_interval=1), clock=clock, sleep=clock.sleep
        )

        assert result is done
        assert fetch.await_count == 3

    @pytest.mark.asyncio
    async def test_transport_errors_beyond_budget_propagate(self, clock: FakeClock) -> None:
        """Test that more consecutive failures than the budget raise the last one."""
        fetch = AsyncMock(side_effect=transport_error())

        with pytest.raises(LinkedApiError) as exc_info:
            await poll_workflow_result(
                fetch,
                PollOptions(poll_interval=1, max_transport_errors=2),
                clock=clock,
                sleep=clock.sleep,
            )

        assert exc_info.value.type == "networkError"
        assert fetch.await_count == 3

    @pytest.mark.asyncio
    async def test_success_resets_failure_count(self, clock: FakeClock) -> None:
        """Test that the budget counts consecutive failures only."""
        done = MappedResponse()
        fetch = AsyncMock(
            side_effect=[
                transport_error(),
                transport_error(),
                RUNNING,
                transport_error(),
                transport_error(),
                done,
            ]
        )

        result = await poll_workflow_result(
            fetch,
            PollOptions(poll_interval=1, max_transport_errors=2),
            clock=clock,
            sleep=clock.sleep,
        )

        assert result is done
        assert fetch.await_count == 6

    @pytest.mark.asyncio
    async def test_application_errors_are_not_retried(self, clock: FakeClock) -> None:
        """Test that API rejections propagate on the first occurrence."""
        fetch = AsyncMock(side_effect=LinkedApiError("invalidLinkedApiToken", "bad token"))

        with pytest.raises(LinkedApiError) as exc_info:
            await poll_workflow_result(fetch, PollOptions(), clock=clock, sleep=clock.sleep)

        assert exc_info.value.type == "invalidLinkedApiToken"
        assert fetch.await_count == 1
        assert clock.sleeps == []
