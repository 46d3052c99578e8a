"""Canonical focused-call shapes.

Every runner recognises some combination of three shapes. Each predicate
checks callee kind, callee text, argument count and argument kinds; the
marker text alone is not enough because ``describe.only`` or ``fit`` can
also show up as ordinary identifiers and object members.
"""

from __future__ import annotations

from collections.abc import Collection

from nofocus.models import ArgumentKind, CallNode

DESCRIPTION_KINDS = (ArgumentKind.STRING_LITERAL, ArgumentKind.TEMPLATE_LITERAL)


def is_bare_focused_call(call: CallNode, markers: Collection[str]) -> bool:
    """``fdescribe(() => { ... })``: a focused block with no description."""
    return (
        call.callee_kind == ArgumentKind.IDENTIFIER
        and call.callee_text in markers
        and call.argument_count == 1
        and call.argument_kinds[0] == ArgumentKind.FUNCTION_LITERAL
    )


def is_described_focused_call(call: CallNode, markers: Collection[str]) -> bool:
    """``describe.only("name", () => { ... })``."""
    return (
        call.callee_kind == ArgumentKind.PROPERTY_PATH
        and call.callee_text in markers
        and call.argument_count == 2
        and call.argument_kinds[0] in DESCRIPTION_KINDS
        and call.argument_kinds[1] == ArgumentKind.FUNCTION_LITERAL
    )


def is_tabular_focused_call(call: CallNode, markers: Collection[str]) -> bool:
    """``describe.only.each([[1, 2]])``: the table half of a data-driven test."""
    return (
        call.callee_kind == ArgumentKind.PROPERTY_PATH
        and call.callee_text in markers
        and call.argument_count == 1
        and call.argument_kinds[0] == ArgumentKind.ARRAY_LITERAL
    )
