"""search-for command - find a string (plain or base64) in requests."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from ..ops import encode_needle, search_all
from ..visualization import format_search_match
from .common import err_console, from_cli_or_config, get_config, har_file_argument, open_capture

console = Console()


@click.command("search-for")
@click.argument("string")
@har_file_argument
@click.option("--base64/--no-base64", "include_base64", default=True,
              help="Also search for the base64 encoded string")
@click.pass_context
def search_for(ctx, string, har_file, include_base64):
    """Search for a specific string.

    Looks at URLs, headers, query strings, cookies and bodies of every
    request and response, first for STRING itself and then for its
    base64 encoding (without padding).
    """
    cfg = get_config(ctx)
    document = open_capture(ctx, har_file)
    include_base64 = from_cli_or_config(ctx, "include_base64", include_base64, cfg.search_base64)

    try:
        matches = search_all(document, string, include_base64=include_base64)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if not matches:
        console.print(f"[yellow]No matches for[/yellow] {escape(repr(string))}")
        if include_base64:
            console.print(f"[dim]Also searched base64: {encode_needle(string)}[/dim]")
        return

    for match in matches:
        console.print(format_search_match(match))
        console.print()

    plain = sum(1 for m in matches if m.encoding == "plain")
    console.print(f"[dim]Total: {plain} plain, {len(matches) - plain} base64 matches[/dim]")
