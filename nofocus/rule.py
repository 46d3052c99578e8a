"""The no-focused-tests rule."""

from __future__ import annotations

import logging

from nofocus.models import Failure, Options, ParsedFile, Runner
from nofocus.prefilter import possible_matches
from nofocus.runners import BaseRunner, resolve_runner
from nofocus.runners.base import FAILURE_FDESCRIBE, FAILURE_FIT, FAILURE_FOCUSED
from nofocus.walker import walk

log = logging.getLogger(__name__)

RULE_NAME = "no-focused-tests"

RULE_METADATA = {
    "rule_name": RULE_NAME,
    "description": "Ensures that no tests are missed.",
    "options": {
        "type": "string",
        "enum": [r.value for r in Runner],
    },
    "options_description": "\n".join(
        [
            "Options:",
            '* "ava" checks for AVA focused tests.',
            '* "jasmine" checks for Jasmine focused tests.',
            '* "jest" checks for Jest focused tests.',
            '* "mocha" checks for Mocha focused tests.',
            "An optional suffix restricts the check to file names ending with it.",
        ]
    ),
    "option_examples": [[True, r.value] for r in Runner]
    + [[True, {"runner": "jest", "suffix": ".spec.ts"}]],
    "type": "maintainability",
    "has_fix": False,
}

__all__ = [
    "FAILURE_FDESCRIBE",
    "FAILURE_FIT",
    "FAILURE_FOCUSED",
    "RULE_METADATA",
    "RULE_NAME",
    "apply",
    "is_candidate",
]


def is_candidate(path: str, text: str, options: Options, profile: BaseRunner) -> bool:
    """Suffix filter plus textual prefilter; False means nothing can be reported."""
    if options.suffix and not path.endswith(options.suffix):
        log.debug("%s: excluded by suffix %r", path, options.suffix)
        return False
    if not possible_matches(text, profile.markers):
        log.debug("%s: no %s markers in text", path, profile.name)
        return False
    return True


def apply(parsed: ParsedFile, options: Options) -> list[Failure]:
    """Return every focused test call in ``parsed``, in source order."""
    profile = resolve_runner(options.runner)
    if not is_candidate(parsed.path, parsed.text, options, profile):
        return []
    return walk(parsed, profile)
