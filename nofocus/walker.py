"""Tree walker and failure collection over tree-sitter syntax trees."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from nofocus.models import (
    ArgumentKind,
    CallNode,
    Failure,
    ParsedFile,
    SourcePosition,
    SourceRange,
)
from nofocus.runners.base import BaseRunner

log = logging.getLogger(__name__)

# tree-sitter-typescript node types, grouped by the kind the validators care about
NODE_KINDS: dict[str, ArgumentKind] = {
    "identifier": ArgumentKind.IDENTIFIER,
    "member_expression": ArgumentKind.PROPERTY_PATH,
    "string": ArgumentKind.STRING_LITERAL,
    "template_string": ArgumentKind.TEMPLATE_LITERAL,
    "function": ArgumentKind.FUNCTION_LITERAL,  # older grammars
    "function_expression": ArgumentKind.FUNCTION_LITERAL,
    "generator_function": ArgumentKind.FUNCTION_LITERAL,
    "arrow_function": ArgumentKind.FUNCTION_LITERAL,
    "array": ArgumentKind.ARRAY_LITERAL,
}


def node_kind(node: Any) -> ArgumentKind:
    return NODE_KINDS.get(node.type, ArgumentKind.OTHER)


def _position(source: bytes, byte_offset: int, point: Any) -> SourcePosition:
    row, byte_column = point[0], point[1]
    line_start = byte_offset - byte_column
    column = len(source[line_start:byte_offset].decode("utf-8", errors="replace"))
    return SourcePosition(line=row + 1, column=column + 1)


def node_range(node: Any, source: bytes) -> SourceRange:
    return SourceRange(
        start=_position(source, node.start_byte, node.start_point),
        end=_position(source, node.end_byte, node.end_point),
    )


def node_text(node: Any, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def project_call(node: Any, source: bytes) -> CallNode | None:
    """Build a ``CallNode`` view of a ``call_expression`` node.

    Returns None for tagged templates, which tree-sitter also parses as
    call expressions but which are not calls with an argument list.
    """
    callee = node.child_by_field_name("function")
    arguments = node.child_by_field_name("arguments")
    if callee is None or arguments is None or arguments.type != "arguments":
        return None

    argument_kinds = tuple(
        node_kind(arg) for arg in arguments.named_children if arg.type != "comment"
    )
    return CallNode(
        callee_kind=node_kind(callee),
        callee_text=node_text(callee, source),
        argument_kinds=argument_kinds,
        range=node_range(node, source),
    )


def iter_preorder(root: Any) -> Iterator[Any]:
    """Yield every named node under ``root`` (inclusive) in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


class FailureCollector:
    """Accumulates failures in the order they are found."""

    def __init__(self) -> None:
        self.failures: list[Failure] = []

    def add(self, call: CallNode, message: str) -> None:
        self.failures.append(Failure(range=call.range, message=message, callee=call.callee_text))


def walk(parsed: ParsedFile, profile: BaseRunner) -> list[Failure]:
    """Check every call expression in ``parsed`` against ``profile``.

    Matched calls are not pruned: a focused call nested inside another one is
    reported too, after its parent.
    """
    collector = FailureCollector()
    for node in iter_preorder(parsed.tree.root_node):
        if node.type != "call_expression":
            continue
        call = project_call(node, parsed.source)
        if call is None:
            continue
        if profile.matches(call):
            log.debug(
                "%s:%d:%d focused call %s",
                parsed.path,
                call.range.start.line,
                call.range.start.column,
                call.callee_text,
            )
            collector.add(call, profile.message_for(call))
    return collector.failures
