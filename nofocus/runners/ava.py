"""AVA runner profile."""

from __future__ import annotations

from nofocus.models import CallNode
from nofocus.runners.base import BaseRunner
from nofocus.shapes import is_described_focused_call


class AvaRunner(BaseRunner):
    name = "ava"
    description = "AVA: test.only and test.serial.only"
    described_markers = ("test.only", "test.serial.only")

    def matches(self, call: CallNode) -> bool:
        return is_described_focused_call(call, self.described_markers)
