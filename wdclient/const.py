"""Constants for the wdclient command library."""

CONF_WAITFOR_TIMEOUT = "waitfor_timeout"
CONF_WAITFOR_INTERVAL = "waitfor_interval"
CONF_SELECTOR_STRATEGY = "selector_strategy"

DEFAULT_WAITFOR_TIMEOUT = 500
DEFAULT_WAITFOR_INTERVAL = 500
DEFAULT_SELECTOR_STRATEGY = "css selector"

# W3C element reference key, with the JSONWire key as fallback
ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
LEGACY_ELEMENT_KEY = "ELEMENT"

CMD_FIND_ELEMENTS = "findElements"
CMD_IS_ELEMENT_SELECTED = "isElementSelected"

ERROR_NO_SUCH_ELEMENT = "no such element"

ERROR_CODES = {
    "element click intercepted": "The element click could not be completed because another element would receive it.",
    "element not interactable": "The element is not pointer or keyboard interactable.",
    "invalid argument": "The arguments passed to the command are invalid.",
    "invalid selector": "The selector is not a valid selector.",
    "invalid session id": "The session does not exist.",
    ERROR_NO_SUCH_ELEMENT: "No element could be located using the given search parameters.",
    "no such window": "The current browsing context is no longer open.",
    "script timeout": "A script did not complete before its timeout expired.",
    "stale element reference": "The element is no longer attached to the document.",
    "timeout": "An operation did not complete before its timeout expired.",
    "unknown command": "The command is not known to the remote end.",
    "unknown error": "An unknown error occurred in the remote end.",
}
