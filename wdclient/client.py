import logging

from .config import validate_options
from .const import *
from .errors import ProtocolError
from .protocol import ElementAPI
from .state import ElementContext, is_selected
from .waitfor import wait_for_selected
from .waituntil import wait_until

_LOGGER = logging.getLogger(__name__)


class Client:
    """Browser-level commands on top of a session.

    Options (see config.OPTIONS_SCHEMA):
    - waitfor_timeout: default wait timeout in ms
    - waitfor_interval: default poll interval in ms
    - selector_strategy: locator strategy used to find elements
    """

    def __init__(self, session, options=None):
        self.options = validate_options(options)
        self._api = ElementAPI(session)

    @property
    def api(self) -> ElementAPI:
        return self._api

    async def query_selected(self, selector, context=None):
        """Selected state query used by the wait commands."""
        return await is_selected(
            self._api,
            selector,
            context=context,
            using=self.options[CONF_SELECTOR_STRATEGY],
        )

    async def elements(self, selector) -> ElementContext:
        element_ids = await self._api.find_elements(
            selector, using=self.options[CONF_SELECTOR_STRATEGY]
        )
        return ElementContext(selector, tuple(element_ids))

    async def element(self, selector) -> "Element":
        context = await self.elements(selector)
        if not context.element_ids:
            raise ProtocolError(
                {
                    "error": ERROR_NO_SUCH_ELEMENT,
                    "message": f"element ({selector}) not found",
                }
            )
        _LOGGER.debug(
            "Bound %r to element %s of %d match(es)",
            selector,
            context.element_ids[0],
            len(context.element_ids),
        )
        return Element(self, ElementContext(selector, context.element_ids[:1]))

    async def is_selected(self, selector):
        return await self.query_selected(selector)

    async def wait_until(self, condition, timeout=None, timeout_msg=None, interval=None):
        return await wait_until(
            condition, timeout, timeout_msg, interval, options=self.options
        )

    async def wait_for_selected(self, selector, ms=None, reverse=False):
        """Wait for an option, radio or checkbox matched by selector to be selected.

        With reverse set, wait for a matched element to be unselected instead.
        Raises errors.WaitUntilTimeoutError naming the selector when ms
        (default: the waitfor_timeout option) elapses first.
        """
        await wait_for_selected(
            self.query_selected, selector, ms, reverse, options=self.options
        )


class Element:
    """Commands bound to an element resolved by Client.element."""

    def __init__(self, client: Client, context: ElementContext):
        self._client = client
        self.context = context

    @property
    def selector(self):
        return self.context.selector

    async def is_selected(self):
        return await self._client.query_selected(None, context=self.context)

    async def wait_for_selected(self, ms=None, reverse=False):
        await wait_for_selected(
            self._client.query_selected,
            None,
            ms,
            reverse,
            options=self._client.options,
            context=self.context,
        )

    def __repr__(self):
        return f"Element(selector={self.selector!r})"
