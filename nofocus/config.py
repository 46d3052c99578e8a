"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from nofocus.models import Options
from nofocus.runners import parse_runner

DEFAULT_CONFIG_FILE = "nofocus.yml"

DEFAULT_INCLUDE = ["**/*.ts", "**/*.tsx"]


@dataclass
class RuleConfig:
    runner: str | None = None
    suffix: str | None = None


@dataclass
class NofocusConfig:
    rule: RuleConfig = field(default_factory=RuleConfig)
    include: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = field(default_factory=list)

    def get_options(self, runner: str | None = None, suffix: str | None = None) -> Options:
        """Resolve rule options, letting explicit arguments win over the file."""
        return parse_options(
            {
                "runner": runner or self.rule.runner,
                "suffix": suffix if suffix is not None else self.rule.suffix,
            }
        )


def parse_rule_config(raw: Any) -> RuleConfig:
    """Read the ``rule`` entry of a config file.

    Accepts ``jest``, ``{runner: jest, suffix: .spec.ts}`` and the tslint-style
    ``[true, jest]`` / ``[true, {runner: jest}]`` forms. ``[false, ...]`` disables the rule.
    """
    if isinstance(raw, list):
        # tslint puts the enabled flag first
        if not raw or raw[0] is False:
            return RuleConfig()
        raw = raw[1] if len(raw) > 1 else None
    if raw is None or isinstance(raw, bool):
        return RuleConfig()
    if isinstance(raw, dict):
        suffix = raw.get("suffix")
        return RuleConfig(
            runner=raw.get("runner"),
            suffix=str(suffix) if suffix else None,
        )
    return RuleConfig(runner=str(raw))


def parse_options(raw: Any) -> Options:
    """Build validated ``Options`` from a runner name or a rule mapping.

    Raises UnknownRunnerError if the runner is missing or not one of the known runners.
    """
    rule = raw if isinstance(raw, RuleConfig) else parse_rule_config(raw)
    return Options(runner=parse_runner(rule.runner), suffix=rule.suffix or None)


def load_config(config_path: str | Path | None = None) -> NofocusConfig:
    """Load config from nofocus.yml, falling back to defaults."""
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        return NofocusConfig()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")

    rule = parse_rule_config(raw.get("rule"))
    if rule.runner is not None:
        # Fail on a bad runner name at load time, not on the first file
        parse_runner(rule.runner)

    return NofocusConfig(
        rule=rule,
        include=[str(p) for p in raw.get("include", DEFAULT_INCLUDE)],
        exclude=[str(p) for p in raw.get("exclude", [])],
    )
