"""Selection-state waits for an async browser-automation client."""
from .client import Client, Element
from .errors import CommandError, ProtocolError, WaitUntilTimeoutError, is_timeout_error
from .state import ElementContext, is_selected
from .waitfor import SelectedCondition, wait_for_selected
from .waituntil import wait_until

__all__ = [
    "Client",
    "CommandError",
    "Element",
    "ElementContext",
    "ProtocolError",
    "SelectedCondition",
    "WaitUntilTimeoutError",
    "is_selected",
    "is_timeout_error",
    "wait_for_selected",
    "wait_until",
]
