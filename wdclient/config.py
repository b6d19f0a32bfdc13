"""Option handling for the wdclient command library."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from .const import *

_LOGGER = logging.getLogger(__name__)

OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_WAITFOR_TIMEOUT, default=DEFAULT_WAITFOR_TIMEOUT): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(CONF_WAITFOR_INTERVAL, default=DEFAULT_WAITFOR_INTERVAL): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
        vol.Optional(
            CONF_SELECTOR_STRATEGY, default=DEFAULT_SELECTOR_STRATEGY
        ): vol.All(str, vol.Length(min=1)),
    }
)


def validate_options(options: dict[str, Any] | None = None) -> dict[str, Any]:
    """Apply defaults to the client options and validate them.

    Raises vol.Invalid when an option is unknown or out of range.
    """
    validated = OPTIONS_SCHEMA({} if options is None else dict(options))
    _LOGGER.debug("Client options: %s", validated)
    return validated
