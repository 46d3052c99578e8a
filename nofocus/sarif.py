"""SARIF 2.1.0 output format for GitHub Code Scanning integration."""

from __future__ import annotations

import json
from pathlib import Path

from nofocus.models import Failure, FileReport
from nofocus.rule import RULE_METADATA, RULE_NAME


def reports_to_sarif(reports: list[FileReport], runner: str) -> dict:
    """Convert file reports to a SARIF 2.1.0 document.

    Args:
        reports: Per-file results from the checker
        runner: Runner name the files were checked against

    Returns:
        A SARIF 2.1.0 document as a dict
    """
    results = []
    for report in reports:
        for failure in report.failures:
            results.append(_failure_to_sarif_result(report.path, failure))

    return {
        "version": "2.1.0",
        "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "nofocus",
                        "version": _get_nofocus_version(),
                        "rules": [
                            {
                                "id": RULE_NAME,
                                "name": "NoFocusedTests",
                                "shortDescription": {"text": RULE_METADATA["description"]},
                                "defaultConfiguration": {"level": "error"},
                            }
                        ],
                    }
                },
                "results": results,
                "properties": {
                    "runner": runner,
                },
            }
        ],
    }


def _failure_to_sarif_result(path: str, failure: Failure) -> dict:
    """Convert a single Failure to a SARIF result object."""
    r = failure.range
    return {
        "ruleId": RULE_NAME,
        "level": "error",
        "message": {"text": failure.message},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {
                        "uri": Path(path).as_posix(),
                        "uriBaseId": "%SRCROOT%",
                    },
                    "region": {
                        "startLine": r.start.line,
                        "startColumn": r.start.column,
                        "endLine": r.end.line,
                        "endColumn": r.end.column,
                    },
                }
            }
        ],
    }


def save_sarif(sarif: dict, output: str | Path) -> str:
    """Save SARIF JSON to ``output``, return the path."""
    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(sarif, indent=2))
    return str(out)


def _get_nofocus_version() -> str:
    from nofocus import __version__

    return __version__
