# ABOUTME: Bounded poll loop used to wait for a workflow to reach a terminal state.
# ABOUTME: Retries transient transport failures within a budget and enforces a wall-clock timeout.

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from linkedapi.config import PollOptions
from linkedapi.errors import LinkedApiError, LinkedApiErrorType
from linkedapi.models.workflow import WorkflowStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def poll_workflow_result(
    fetch: Callable[[], Awaitable[WorkflowStatus | T]],
    options: PollOptions,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Call fetch until it returns something other than RUNNING.

    Transport errors (httpError, networkError) are retried until more than
    options.max_transport_errors happen in a row; a successful fetch resets
    the count. Any other LinkedApiError propagates immediately. Sleeps are
    capped to the time left so the timeout fires on schedule.

    Args:
        fetch: Coroutine function performing one status check.
        options: Interval, timeout and retry budget.
        clock: Monotonic clock in seconds.
        sleep: Awaitable sleep used between checks.

    Returns:
        The first non-running value returned by fetch.

    Raises:
        LinkedApiError: workflowTimeout when the budget runs out, or the
            error raised by fetch when it is not retryable.
    """
    deadline = clock() + options.timeout
    consecutive_failures = 0
    attempt = 0

    while clock() < deadline:
        attempt += 1
        try:
            outcome = await fetch()
        except LinkedApiError as e:
            if not e.is_transport_error:
                raise
            consecutive_failures += 1
            if consecutive_failures > options.max_transport_errors:
                logger.warning(
                    f"Giving up after {consecutive_failures} consecutive transport errors"
                )
                raise
            logger.warning(
                f"Transport error while polling ({consecutive_failures}/"
                f"{options.max_transport_errors}): {e.message}"
            )
        else:
            consecutive_failures = 0
            if outcome is not WorkflowStatus.RUNNING:
                return outcome
            logger.debug(f"Workflow still running after poll {attempt}")

        remaining = deadline - clock()
        if remaining <= 0:
            break
        await sleep(min(options.poll_interval, remaining))

    raise LinkedApiError(
        LinkedApiErrorType.WORKFLOW_TIMEOUT,
        f"Workflow did not complete within {options.timeout} seconds",
    )
