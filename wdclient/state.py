from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .const import *
from .errors import CommandError
from .protocol import ElementAPI

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementContext:
    """Elements resolved by an earlier command, and the selector that found them."""

    selector: str | None
    element_ids: tuple = field(default_factory=tuple)


async def is_selected(
    api: ElementAPI,
    selector=None,
    *,
    context: ElementContext | None = None,
    using=DEFAULT_SELECTOR_STRATEGY,
):
    """Report whether the matched option, radio or checkbox elements are selected.

    Elements are looked up by selector, or taken from context when no selector
    is given. Returns a single bool when exactly one element matches, otherwise
    a list with one bool per element in match order.
    """
    if selector:
        element_ids = await api.find_elements(selector, using=using)
    elif context is not None:
        element_ids = list(context.element_ids)
    else:
        raise CommandError("is_selected needs a selector or an element context")

    states = [await api.is_element_selected(element_id) for element_id in element_ids]
    _LOGGER.debug("Selected state for %r: %s", selector or context.selector, states)

    if len(states) == 1:
        return states[0]
    return states
