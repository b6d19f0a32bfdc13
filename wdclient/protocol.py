import logging

from .const import *

_LOGGER = logging.getLogger(__name__)


def element_id_from_reference(reference):
    if ELEMENT_KEY in reference:
        return reference[ELEMENT_KEY]
    return reference[LEGACY_ELEMENT_KEY]


class ElementAPI:
    """Element commands issued through a session.

    The session is any object with an ``async call(method, params)`` returning
    the response dict, whose ``"value"`` holds the command result. Protocol
    failures are raised by the session as errors.ProtocolError.
    """

    def __init__(self, session):
        self._session = session

    async def find_elements(self, selector, using=DEFAULT_SELECTOR_STRATEGY):
        response = await self._session.call(
            CMD_FIND_ELEMENTS, params={"using": using, "value": selector}
        )
        references = response.get("value") or []
        _LOGGER.debug("%s %r matched %d element(s)", using, selector, len(references))
        return [element_id_from_reference(ref) for ref in references]

    async def is_element_selected(self, element_id):
        response = await self._session.call(
            CMD_IS_ELEMENT_SELECTED, params={"id": element_id}
        )
        return response["value"]
