"""Run the rule over files on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from nofocus.models import FileContent, FileReport, Options
from nofocus.parsing import SUPPORTED_EXTENSIONS, parse_source
from nofocus.rule import is_candidate
from nofocus.runners import resolve_runner
from nofocus.walker import walk

log = logging.getLogger(__name__)

# Max file size to check (skip large generated/vendored bundles)
MAX_FILE_SIZE = 1_000_000  # ~1MB

ALWAYS_EXCLUDE = ["node_modules", ".git", "dist", "build", "coverage"]


def _read(path: Path, rel: str) -> FileContent | None:
    if path.stat().st_size > MAX_FILE_SIZE:
        log.debug("%s: skipped, larger than %d bytes", rel, MAX_FILE_SIZE)
        return None
    try:
        return FileContent(path=rel, content=path.read_text(errors="replace"))
    except (PermissionError, OSError):
        return None


def gather_files(
    root: str | Path,
    include: list[str],
    exclude_patterns: list[str] | None = None,
) -> list[FileContent]:
    """Gather supported source files under ``root`` matching ``include`` globs, deduped by path."""
    base = Path(root)
    if base.is_file():
        fc = _read(base, str(base))
        return [fc] if fc and base.suffix.lower() in SUPPORTED_EXTENSIONS else []

    exclude = set(exclude_patterns or [])
    exclude.update(ALWAYS_EXCLUDE)

    seen_paths: set[str] = set()
    files: list[FileContent] = []
    for pattern in include:
        for path in sorted(base.glob(pattern)):
            if not path.is_file() or path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                continue
            rel = str(path.relative_to(base))
            if rel in seen_paths:
                continue
            if any(ex in rel for ex in exclude):
                continue
            fc = _read(path, rel)
            if fc is not None:
                files.append(fc)
                seen_paths.add(rel)

    return files


def check_file(file: FileContent, options: Options) -> FileReport:
    """Check one file, skipping the parse when the rule cannot report anything."""
    profile = resolve_runner(options.runner)
    if not is_candidate(file.path, file.content, options, profile):
        return FileReport(path=file.path)
    parsed = parse_source(file.path, file.content)
    return FileReport(path=file.path, failures=walk(parsed, profile))


def check_paths(
    paths: list[str | Path],
    options: Options,
    include: list[str],
    exclude_patterns: list[str] | None = None,
) -> list[FileReport]:
    """Check every file under ``paths``. Returns one report per checked file."""
    reports: list[FileReport] = []
    for root in paths:
        files = gather_files(root, include, exclude_patterns)
        log.debug("%s: %d files to check", root, len(files))
        for file in files:
            if Path(root).is_dir():
                file = FileContent(path=str(Path(root) / file.path), content=file.content)
            reports.append(check_file(file, options))
    return reports
