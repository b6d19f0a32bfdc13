import pytest

from wdclient.const import ELEMENT_KEY, LEGACY_ELEMENT_KEY
from wdclient.errors import ProtocolError


class FakeSession:
    """Answers findElements / isElementSelected from an in-memory page.

    ``page`` maps a selector to a list of element ids, ``selected`` maps an
    element id to its state. ``states`` may hold per-element lists of states
    that are consumed one call at a time (last one sticks).
    """

    def __init__(self, page=None, selected=None):
        self.page = page or {}
        self.selected = selected or {}
        self.states = {}
        self.calls = []
        self.errors = {}
        self.legacy_references = False

    async def call(self, method, params=None):
        self.calls.append((method, params))
        if method in self.errors:
            raise self.errors[method]
        if method == "findElements":
            key = LEGACY_ELEMENT_KEY if self.legacy_references else ELEMENT_KEY
            return {"value": [{key: id_} for id_ in self.page.get(params["value"], [])]}
        if method == "isElementSelected":
            id_ = params["id"]
            pending = self.states.get(id_)
            if pending:
                self.selected[id_] = pending.pop(0) if len(pending) > 1 else pending[0]
            return {"value": self.selected[id_]}
        raise ProtocolError({"error": "unknown command", "message": method})

    def count(self, method):
        return len([c for c in self.calls if c[0] == method])


@pytest.fixture
def session():
    return FakeSession(
        page={
            "#option1": ["e1"],
            "#option2": ["e2"],
            "option": ["e1", "e2", "e3"],
            "#missing": [],
        },
        selected={"e1": False, "e2": True, "e3": False},
    )
