"""count-urls command - domain tree of contacted hosts."""

import click
from rich.console import Console

from ..config import MALFORMED_CHOICES, SORT_CHOICES
from ..domains import DomainNode, SortBy, build_domain_tree, get_extractor, hosts_from_har, render_tree
from ..visualization import build_rich_tree
from .common import err_console, from_cli_or_config, get_config, har_file_argument, open_capture

console = Console()


@click.command("count-urls")
@har_file_argument
@click.option("--sort", "-s", "sort_by", type=click.Choice(SORT_CHOICES), default=None,
              help="Method used for sorting, sorting is done at each level of the domain tree.")
@click.option("--merge-tld/--no-merge-tld", "-m", default=False,
              help="Merge the tld and the sld, i.e. merge example and .com")
@click.option("--malformed", type=click.Choice(MALFORMED_CHOICES), default=None,
              help="What to do with IP literals and hosts without a public suffix")
@click.option("--style", type=click.Choice(["text", "tree"]), default="text",
              help="Plain indented text or a rich tree")
@click.pass_context
def count_urls(ctx, har_file, sort_by, merge_tld, malformed, style):
    """Count number of times a request is sent to a URL."""
    cfg = get_config(ctx)
    document = open_capture(ctx, har_file)

    sort_by = SortBy.parse(sort_by if sort_by is not None else cfg.sort)
    merge_tld = from_cli_or_config(ctx, "merge_tld", merge_tld, cfg.merge_tld)
    malformed = malformed if malformed is not None else cfg.malformed_hosts

    tree = DomainNode()
    stats = build_domain_tree(
        tree,
        hosts_from_har(document),
        merge_tld=merge_tld,
        extractor=get_extractor(cfg.tld_cache_dir),
        malformed_hosts=malformed,
    )

    if not tree.children:
        console.print("[yellow]No requests found.[/yellow]")
    elif style == "tree":
        console.print(build_rich_tree(tree, sort_by))
    else:
        for line in render_tree(tree, sort_by, indent=" " * cfg.indent):
            click.echo(line)

    err_console.print(
        f"[dim]{stats.total} hosts ({stats.processed} processed, {stats.skipped} skipped)[/dim]"
    )
    if stats.opaque:
        err_console.print(f"[dim]{stats.opaque} hosts shown as-is (IP literal or no public suffix)[/dim]")
