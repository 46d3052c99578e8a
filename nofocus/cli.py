"""CLI entrypoint for nofocus."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from nofocus import __version__
from nofocus.checker import check_paths
from nofocus.config import load_config
from nofocus.reporter import count_failures, format_summary, format_text, generate_report
from nofocus.runners import RUNNERS, UnknownRunnerError
from nofocus.sarif import reports_to_sarif, save_sarif


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", "config_path", default=None, help="Path to nofocus.yml")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx, config_path, verbose):
    """Nofocus: keep focused tests out of committed code."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@main.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--runner", "-r", default=None, help="Test runner (default: from config)")
@click.option("--suffix", "-s", default=None, help="Only check files whose name ends with this")
@click.option(
    "--format",
    "-F",
    "output_format",
    type=click.Choice(["text", "markdown", "sarif"]),
    default="text",
    help="Output format: text (default), markdown, or sarif (for GitHub Code Scanning)",
)
@click.option("--output", "-o", default=None, help="Write the report to a file")
@click.pass_context
def check(ctx, paths, runner, suffix, output_format, output):
    """Check files for focused tests."""
    try:
        config = load_config(ctx.obj["config_path"])
    except ValueError as e:
        raise click.ClickException(str(e))

    if not (runner or config.rule.runner):
        raise click.UsageError("No runner configured. Pass --runner or set rule.runner.")

    try:
        options = config.get_options(runner=runner, suffix=suffix)
    except UnknownRunnerError as e:
        raise click.ClickException(str(e))

    reports = check_paths(list(paths) or ["."], options, config.include, config.exclude)

    if output_format == "sarif":
        sarif = reports_to_sarif(reports, options.runner.value)
        if output:
            click.echo(f"SARIF report: {save_sarif(sarif, output)}")
        else:
            click.echo(json.dumps(sarif, indent=2))
    else:
        if output_format == "markdown":
            text = generate_report(reports, options.runner.value)
        else:
            text = format_text(reports)
        if output:
            Path(output).write_text(text + "\n")
        elif text:
            click.echo(text)
        click.echo(format_summary(reports), err=True)

    if count_failures(reports):
        ctx.exit(1)


@main.command()
def runners():
    """List supported test runners and the markers each one checks."""
    for name, cls in RUNNERS.items():
        profile = cls()
        click.echo(f"{name.value}: {profile.description}")
        click.echo(f"  markers: {', '.join(profile.markers)}")


if __name__ == "__main__":
    main()
