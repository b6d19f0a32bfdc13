import asyncio
import logging
import math
import numbers

from .const import *
from .errors import CommandError, WaitUntilTimeoutError

_LOGGER = logging.getLogger(__name__)


def is_number(value):
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


async def _evaluate(condition):
    result = condition()
    if asyncio.iscoroutine(result) or asyncio.isfuture(result):
        result = await result
    return result


async def wait_until(condition, timeout=None, timeout_msg=None, interval=None, *, options=None):
    """Poll condition until it returns a truthy value and return that value.

    timeout and interval are in milliseconds; non-numeric values fall back to
    the waitfor_timeout / waitfor_interval options. The condition is evaluated
    at least once, and an attempt that is in flight when the deadline passes is
    awaited rather than cancelled; past the deadline only the first attempt
    can still succeed. An error raised by the condition stops polling and
    propagates as is, even when it arrives after the deadline.
    WaitUntilTimeoutError is raised when the deadline passes without a
    truthy result.
    """
    if not callable(condition):
        raise CommandError("wait_until condition is not callable: %r" % (condition,))

    options = options or {}
    if not is_number(timeout):
        timeout = options.get(CONF_WAITFOR_TIMEOUT, DEFAULT_WAITFOR_TIMEOUT)
    if not is_number(interval):
        interval = options.get(CONF_WAITFOR_INTERVAL, DEFAULT_WAITFOR_INTERVAL)

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout / 1000
    attempts = 0

    while True:
        attempts += 1
        result = await _evaluate(condition)
        if attempts > 1 and loop.time() > deadline:
            # only the first attempt may settle past the deadline
            break
        if result:
            _LOGGER.debug("Condition met after %d attempt(s)", attempts)
            return result

        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        # no new attempt once the deadline has passed
        await asyncio.sleep(min(remaining, interval / 1000))
        if loop.time() >= deadline:
            break

    _LOGGER.debug("Condition not met after %d attempt(s) within %sms", attempts, timeout)
    if timeout_msg is None:
        timeout_msg = f"wait_until condition timed out after {timeout}ms"
    raise WaitUntilTimeoutError(timeout_msg, timeout)
