"""Mocha runner profile."""

from __future__ import annotations

from nofocus.models import CallNode
from nofocus.runners.base import BaseRunner
from nofocus.shapes import is_described_focused_call


class MochaRunner(BaseRunner):
    name = "mocha"
    description = "Mocha: .only on describe, it, specify and context"
    described_markers = ("describe.only", "it.only", "specify.only", "context.only")

    def matches(self, call: CallNode) -> bool:
        return is_described_focused_call(call, self.described_markers)
