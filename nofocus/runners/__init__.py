"""Runner profiles: marker vocabulary and focused-call shapes per test runner."""

from __future__ import annotations

from nofocus.models import Runner
from nofocus.runners.ava import AvaRunner
from nofocus.runners.base import BaseRunner
from nofocus.runners.jasmine import JasmineRunner
from nofocus.runners.jest import JestRunner
from nofocus.runners.mocha import MochaRunner

RUNNERS: dict[Runner, type[BaseRunner]] = {
    Runner.AVA: AvaRunner,
    Runner.JASMINE: JasmineRunner,
    Runner.JEST: JestRunner,
    Runner.MOCHA: MochaRunner,
}


class UnknownRunnerError(ValueError):
    """Raised when a configuration names a runner that does not exist."""

    def __init__(self, name: object):
        self.name = name
        available = ", ".join(r.value for r in Runner)
        super().__init__(f"Unknown runner: {name}. Available: {available}")


def parse_runner(name: str | Runner) -> Runner:
    """Turn a configured runner name into a ``Runner``."""
    if isinstance(name, Runner):
        return name
    try:
        return Runner(str(name).strip().lower())
    except ValueError:
        raise UnknownRunnerError(name) from None


def resolve_runner(runner: Runner) -> BaseRunner:
    """Return a fresh profile for ``runner``."""
    return RUNNERS[runner]()


__all__ = [
    "RUNNERS",
    "BaseRunner",
    "AvaRunner",
    "JasmineRunner",
    "JestRunner",
    "MochaRunner",
    "UnknownRunnerError",
    "parse_runner",
    "resolve_runner",
]
