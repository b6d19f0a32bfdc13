from .const import ERROR_CODES


class CommandError(Exception):
    """Base class for failures raised by wdclient commands."""


class ProtocolError(CommandError):
    """Error reported by the remote end, as raised by the session."""

    def __init__(self, err):
        super().__init__(err)
        self.error = err

    @property
    def code(self):
        return self.error.get("error")

    @property
    def message(self):
        return self.error.get("message") or ERROR_CODES.get(self.code, "")


class WaitUntilTimeoutError(CommandError):
    def __init__(self, message, timeout=None):
        super().__init__(message)
        self.timeout = timeout


def is_timeout_error(err) -> bool:
    return isinstance(err, WaitUntilTimeoutError)
