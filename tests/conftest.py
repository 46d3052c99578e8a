"""Shared fixtures for nofocus tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from nofocus.models import (
    ArgumentKind,
    CallNode,
    Failure,
    FileReport,
    SourcePosition,
    SourceRange,
)
from nofocus.parsing import parse_source

ANYWHERE = SourceRange(SourcePosition(1, 1), SourcePosition(1, 2))


def _make_call(callee: str, *args: ArgumentKind, callee_kind: ArgumentKind | None = None) -> CallNode:
    """Build a CallNode without parsing; dotted callees are property paths."""
    if callee_kind is None:
        callee_kind = ArgumentKind.PROPERTY_PATH if "." in callee else ArgumentKind.IDENTIFIER
    return CallNode(
        callee_kind=callee_kind,
        callee_text=callee,
        argument_kinds=tuple(args),
        range=ANYWHERE,
    )


@pytest.fixture
def make_call():
    """Build a CallNode directly, without parsing."""
    return _make_call


@pytest.fixture
def parse():
    """Parse dedented source text as a TypeScript file."""

    def _parse(source: str, path: str = "example.spec.ts"):
        return parse_source(path, textwrap.dedent(source))

    return _parse


@pytest.fixture
def sample_reports():
    """Two file reports, one clean and one with two failures."""
    return [
        FileReport(path="src/clean.spec.ts"),
        FileReport(
            path="src/focused.spec.ts",
            failures=[
                Failure(
                    range=SourceRange(SourcePosition(3, 1), SourcePosition(5, 3)),
                    message="Do not commit focused tests.",
                    callee="describe.only",
                ),
                Failure(
                    range=SourceRange(SourcePosition(4, 3), SourcePosition(4, 22)),
                    message="Favor '.only' over 'fit'.",
                    callee="fit",
                ),
            ],
        ),
    ]


@pytest.fixture
def tmp_project(tmp_path):
    """A small project with focused and clean test files."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "math.spec.ts").write_text(
        'describe.only("math", () => {\n  it("adds", () => {});\n});\n'
    )
    (tmp_path / "src" / "clean.spec.ts").write_text('describe("clean", () => {});\n')
    (tmp_path / "src" / "math.ts").write_text("export const add = (a: number, b: number) => a + b;\n")
    (tmp_path / "src" / "README.md").write_text('describe.only("not code", () => {})\n')
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "lib.spec.ts").write_text('describe.only("vendored", () => {});\n')
    return tmp_path


@pytest.fixture
def tmp_config(tmp_path):
    """Write a nofocus.yml and return its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "nofocus.yml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write
