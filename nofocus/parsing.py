"""tree-sitter parsing for TypeScript and JavaScript sources."""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePath

import tree_sitter
import tree_sitter_typescript as tstypescript

from nofocus.models import ParsedFile

# TSX is a superset of JavaScript with JSX, so plain JS files go through it too
EXTENSION_DIALECTS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "tsx",
    ".jsx": "tsx",
    ".mjs": "tsx",
    ".cjs": "tsx",
}

SUPPORTED_EXTENSIONS = tuple(EXTENSION_DIALECTS)


def get_dialect(path: str) -> str | None:
    """Determine the grammar from the file extension."""
    return EXTENSION_DIALECTS.get(PurePath(path).suffix.lower())


@lru_cache(maxsize=None)
def get_language(dialect: str) -> tree_sitter.Language:
    if dialect == "typescript":
        return tree_sitter.Language(tstypescript.language_typescript())
    if dialect == "tsx":
        return tree_sitter.Language(tstypescript.language_tsx())
    raise ValueError(f"Unknown dialect: {dialect}")


def parse_source(path: str, text: str | bytes) -> ParsedFile:
    """Parse ``text`` with the grammar matching ``path``'s extension.

    A new ``Parser`` is built per call; only the immutable languages are cached.
    """
    dialect = get_dialect(path)
    if dialect is None:
        raise ValueError(
            f"Unsupported file type: {path}. Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    source = text.encode("utf-8") if isinstance(text, str) else text
    parser = tree_sitter.Parser(get_language(dialect))
    return ParsedFile(path=path, source=source, tree=parser.parse(source))
