# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import sys

import click

from .compare import compare_versions
from .errors import ParseError
from .parser import parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_parse_error(ctx: Context, error: ParseError) -> None:
    """Report a parse failure, with a caret pointer in verbose mode."""
    echo_error(str(error))
    if ctx.verbose:
        click.echo(error.pointer(), err=True)


@click.group()
@click.version_option(package_name="semver-grammar")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show where in the input parsing failed.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version parsing tool.

    Validate SemVer 2.0.0 strings and compare their precedence.

    \b
    Examples:
        semver parse 1.0.0-alpha.1+001
        semver validate 1.0.0 1.00.0
        semver compare 1.0.0-rc.1 1.0.0
    """
    ctx.verbose = verbose


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the fields as a JSON object.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its fields."""
    try:
        parsed = parse_version(version)
    except ParseError as e:
        echo_parse_error(ctx, e)
        sys.exit(1)

    if as_json:
        fields = {
            "major": parsed.major,
            "minor": parsed.minor,
            "patch": parsed.patch,
            "prerelease": parsed.prerelease,
            "build": parsed.build,
        }
        echo_info(json.dumps(fields))
        return

    echo_info(f"major: {parsed.major}")
    echo_info(f"minor: {parsed.minor}")
    echo_info(f"patch: {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease or ''}")
    echo_info(f"build: {parsed.build or ''}")
    echo_info(f"string: {parsed}")


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSIONS argument is a valid semantic version."""
    failed = 0
    for version in versions:
        try:
            parse_version(version)
        except ParseError as e:
            failed += 1
            echo_parse_error(ctx, e)
        else:
            echo_success(f"{version}: valid")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print <, = or > for the precedence of VERSION1 against VERSION2."""
    try:
        result = compare_versions(version1, version2)
    except ParseError as e:
        echo_parse_error(ctx, e)
        sys.exit(1)

    echo_info({-1: "<", 0: "=", 1: ">"}[result])


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
