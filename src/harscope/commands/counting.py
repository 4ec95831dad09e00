"""count-schemes and count-requests commands."""

import click
from rich.console import Console

from ..ops import count_requests as get_request_count
from ..ops import count_schemes as get_scheme_counts
from ..ops import sorted_scheme_counts
from .common import har_file_argument, open_capture

console = Console()


@click.command("count-schemes")
@har_file_argument
@click.pass_context
def count_schemes(ctx, har_file):
    """Count number of each scheme in the HAR."""
    document = open_capture(ctx, har_file)
    counts = get_scheme_counts(document)

    if not counts:
        console.print("[yellow]No requests found.[/yellow]")
        return

    for scheme, count in sorted_scheme_counts(counts):
        click.echo(f"{scheme or '(none)'}: {count}")


@click.command("count-requests")
@har_file_argument
@click.pass_context
def count_requests(ctx, har_file):
    """Count the number of requests made."""
    document = open_capture(ctx, har_file)
    click.echo(f"Found {get_request_count(document)} requests.")
