"""Cheap textual check that lets a file skip parsing and tree walking."""

from __future__ import annotations

from collections.abc import Iterable


def possible_matches(text: str, markers: Iterable[str]) -> bool:
    """True if any marker occurs anywhere in ``text``.

    A hit only means the file is worth walking; the shape validators decide.
    A miss is always safe: a focused call's callee text is a verbatim slice
    of the file.
    """
    return any(marker in text for marker in markers)
