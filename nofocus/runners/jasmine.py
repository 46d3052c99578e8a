"""Jasmine runner profile."""

from __future__ import annotations

from nofocus.models import CallNode
from nofocus.runners.base import BaseRunner
from nofocus.shapes import is_bare_focused_call


class JasmineRunner(BaseRunner):
    name = "jasmine"
    description = "Jasmine: fdescribe and fit"
    bare_markers = ("fdescribe", "fit")

    def matches(self, call: CallNode) -> bool:
        return is_bare_focused_call(call, self.bare_markers)
