"""Base runner profile."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nofocus.models import CallNode

FAILURE_FOCUSED = "Do not commit focused tests."
FAILURE_FDESCRIBE = "Favor '.only' over 'fdescribe'."
FAILURE_FIT = "Favor '.only' over 'fit'."

# Bare-name markers get their own message so users know what to write instead
BARE_MARKER_MESSAGES = {
    "fdescribe": FAILURE_FDESCRIBE,
    "fit": FAILURE_FIT,
}


class BaseRunner(ABC):
    """Marker vocabulary and shape validator for one test runner."""

    name: str = "base"
    description: str = ""
    bare_markers: tuple[str, ...] = ()
    described_markers: tuple[str, ...] = ()
    tabular_markers: tuple[str, ...] = ()

    @property
    def markers(self) -> tuple[str, ...]:
        """Every callee text that can start a focused call for this runner, in order."""
        # A callee text can belong to more than one shape
        ordered = self.bare_markers + self.described_markers + self.tabular_markers
        return tuple(dict.fromkeys(ordered))

    @abstractmethod
    def matches(self, call: CallNode) -> bool:
        """Return True if ``call`` is a focused test declaration for this runner."""
        ...

    def message_for(self, call: CallNode) -> str:
        if call.callee_text in self.bare_markers:
            return BARE_MARKER_MESSAGES.get(call.callee_text, FAILURE_FOCUSED)
        return FAILURE_FOCUSED
