"""Shared helpers for harscope commands."""

from __future__ import annotations

import sys
from datetime import datetime

import click
from click.core import ParameterSource
from rich.console import Console

from ..config import HarscopeConfig, load_config
from ..har import HarLoadError, filter_by_time, load_har, parse_timestamp

err_console = Console(stderr=True)


class IsoDateTime(click.ParamType):
    """ISO 8601 date-time option (2024-01-01T10:00:00, optional offset or Z)."""

    name = "datetime"

    def convert(self, value, param, ctx):
        if isinstance(value, datetime):
            return value
        try:
            return parse_timestamp(value)
        except ValueError:
            self.fail(f"'{value}' is not an ISO 8601 date-time", param, ctx)


def har_file_argument(func):
    """Optional HAR_FILE argument; stdin is read when it is omitted."""
    return click.argument(
        "har_file", required=False, default=None,
        type=click.Path(exists=True, dir_okay=False),
    )(func)


def get_config(ctx: click.Context) -> HarscopeConfig:
    """Load the configuration named by the group's --config (or found in cwd)."""
    opts = ctx.obj or {}
    return load_config(opts.get("config_path"))


def from_cli_or_config(ctx: click.Context, name: str, value, configured):
    """Return the command line value of option name, or configured when it was not given."""
    if ctx.get_parameter_source(name) in (None, ParameterSource.DEFAULT):
        return configured
    return value


def open_capture(ctx: click.Context, har_file: str | None) -> dict:
    """Load the HAR from har_file or stdin and apply the --before/--after window."""
    opts = ctx.obj or {}

    if har_file is None:
        if sys.stdin.isatty():
            click.echo("Please provide a file.")
            sys.exit(2)
        source = sys.stdin
    else:
        source = har_file

    try:
        document = load_har(source)
        if opts.get("before") is not None:
            filter_by_time(document, opts["before"], keep_after=False)
        if opts.get("after") is not None:
            filter_by_time(document, opts["after"], keep_after=True)
    except HarLoadError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    return document
