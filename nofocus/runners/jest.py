"""Jest runner profile."""

from __future__ import annotations

from nofocus.models import CallNode
from nofocus.runners.base import BaseRunner
from nofocus.shapes import (
    is_bare_focused_call,
    is_described_focused_call,
    is_tabular_focused_call,
)


class JestRunner(BaseRunner):
    name = "jest"
    description = "Jest: fdescribe, fit, describe.only, it.only and describe.only.each"
    bare_markers = ("fdescribe", "fit")
    described_markers = ("describe.only", "describe.only.each", "it.only")
    # Only jest has a data-driven focused form
    tabular_markers = ("describe.only.each",)

    def matches(self, call: CallNode) -> bool:
        return (
            is_bare_focused_call(call, self.bare_markers)
            or is_tabular_focused_call(call, self.tabular_markers)
            or is_described_focused_call(call, self.described_markers)
        )
