"""harscope CLI entry point."""

import click

from .commands import (
    config,
    count_requests,
    count_schemes,
    count_urls,
    dnssec_audit,
    output,
    search_for,
    version,
)
from .commands.common import IsoDateTime


@click.group()
@click.option("--before", "-b", type=IsoDateTime(), default=None,
              help="Filters out requests after the time.")
@click.option("--after", "-a", type=IsoDateTime(), default=None,
              help="Filters out requests before the time.")
@click.option("--config", "-c", "config_path", default=None, help="Config file path (harscope.yaml)")
@click.pass_context
def main(ctx, before, after, config_path):
    """harscope - Command line HAR analyser.

    Reads a HAR file (or stdin) and reports contacted domains, schemes,
    request counts, string occurrences and DNSSEC status.
    """
    ctx.ensure_object(dict)
    ctx.obj["before"] = before
    ctx.obj["after"] = after
    ctx.obj["config_path"] = config_path


main.add_command(count_urls)
main.add_command(count_schemes)
main.add_command(count_requests)
main.add_command(search_for)
main.add_command(output)
main.add_command(dnssec_audit)
main.add_command(config)
main.add_command(version)


if __name__ == "__main__":
    main()
