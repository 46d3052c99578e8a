"""Core data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Runner(str, Enum):
    AVA = "ava"
    JASMINE = "jasmine"
    JEST = "jest"
    MOCHA = "mocha"


class ArgumentKind(str, Enum):
    """Syntactic kind of a callee or call argument."""

    IDENTIFIER = "identifier"
    PROPERTY_PATH = "property_path"  # a.b.c
    STRING_LITERAL = "string_literal"
    TEMPLATE_LITERAL = "template_literal"
    FUNCTION_LITERAL = "function_literal"  # function expression or arrow function
    ARRAY_LITERAL = "array_literal"
    OTHER = "other"


@dataclass(frozen=True)
class Options:
    runner: Runner
    suffix: str | None = None


@dataclass(frozen=True)
class SourcePosition:
    line: int  # 1-based
    column: int  # 1-based, in characters


@dataclass(frozen=True)
class SourceRange:
    start: SourcePosition
    end: SourcePosition

    def to_dict(self) -> dict[str, int]:
        return {
            "start_line": self.start.line,
            "start_column": self.start.column,
            "end_line": self.end.line,
            "end_column": self.end.column,
        }


@dataclass(frozen=True)
class CallNode:
    """Read-only view over one call expression of the syntax tree."""

    callee_kind: ArgumentKind
    callee_text: str
    argument_kinds: tuple[ArgumentKind, ...]
    range: SourceRange

    @property
    def argument_count(self) -> int:
        return len(self.argument_kinds)


@dataclass
class Failure:
    range: SourceRange
    message: str
    callee: str = ""

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"message": self.message, **self.range.to_dict()}
        if self.callee:
            d["callee"] = self.callee
        return d


@dataclass
class FileContent:
    path: str  # Relative to the scan root
    content: str


@dataclass
class ParsedFile:
    path: str
    source: bytes
    tree: Any  # tree_sitter.Tree

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")


@dataclass
class FileReport:
    path: str
    failures: list[Failure] = field(default_factory=list)
