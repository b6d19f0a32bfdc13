"""Wait for option, radio or checkbox elements to become (un)selected."""
import logging

from .const import *
from .errors import WaitUntilTimeoutError, is_timeout_error
from .waituntil import is_number, wait_until

_LOGGER = logging.getLogger(__name__)


def normalize_reverse(reverse) -> bool:
    return reverse if isinstance(reverse, bool) else False


def normalize_timeout(ms, default):
    return ms if is_number(ms) else default


def aggregate_selected(result, reverse: bool) -> bool:
    """Decide whether a selected state query result satisfies the wait.

    A list of states is folded starting from reverse, with OR when waiting for
    a selected element and AND in reverse mode, and the fold must differ from
    reverse. So one selected element satisfies the plain wait, one unselected
    element satisfies the reverse wait, and an empty list satisfies neither.
    """
    if not isinstance(result, (list, tuple)):
        return result != reverse

    folded = reverse
    for value in result:
        if not reverse:
            folded = folded or value
        else:
            folded = folded and value
    return folded != reverse


class SelectedCondition:
    """Zero-argument async condition over the selected state of a selector."""

    def __init__(self, query, selector, reverse, context=None):
        self.query = query
        self.selector = selector
        self.reverse = reverse
        self.context = context

    async def __call__(self):
        result = await self.query(self.selector, context=self.context)
        return aggregate_selected(result, self.reverse)

    def __repr__(self):
        return f"SelectedCondition(selector={self.selector!r}, reverse={self.reverse!r})"


async def wait_for_selected(
    query, selector=None, ms=None, reverse=False, *, options=None, context=None, interval=None
):
    """Wait until an element matched by selector is selected, or unselected when
    reverse is set.

    query is the selected state query, called as query(selector, context=...).
    ms falls back to the waitfor_timeout option when it is not a number.
    """
    options = options or {}
    reverse = normalize_reverse(reverse)
    ms = normalize_timeout(ms, options.get(CONF_WAITFOR_TIMEOUT, DEFAULT_WAITFOR_TIMEOUT))

    condition = SelectedCondition(query, selector, reverse, context)
    _LOGGER.debug("Waiting up to %sms for %r", ms, condition)

    try:
        await wait_until(condition, ms, interval=interval, options=options)
    except Exception as ex:
        if not is_timeout_error(ex):
            raise
        if not selector and context is not None:
            selector = context.selector
        state = "selected" if reverse else "not selected"
        raise WaitUntilTimeoutError(
            f"element ({selector}) still {state} after {ms}ms", ms
        ) from ex
