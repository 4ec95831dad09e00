"""output command - print the (filtered) HAR."""

import json

import click

from .common import har_file_argument, open_capture


@click.command("output")
@har_file_argument
@click.pass_context
def output(ctx, har_file):
    """Return the contents of the HAR.

    Combined with --before/--after this writes a trimmed capture.
    """
    document = open_capture(ctx, har_file)
    click.echo(json.dumps(document, indent=4, ensure_ascii=False))
