"""dnssec-audit command - check which contacted domains are signed."""

import sys

import click
import dns.resolver
from rich.console import Console

from ..ops import audit_domain, list_domains, make_resolver
from .common import err_console, get_config, har_file_argument, open_capture

console = Console()

STATUS_STYLES = {
    "signed": "green",
    "unsigned": "yellow",
    "lookup_failed": "red",
}


@click.command("dnssec-audit")
@har_file_argument
@click.option("--lifetime", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Seconds allowed per DNS lookup")
@click.pass_context
def dnssec_audit(ctx, har_file, lifetime):
    """Check if urls are using DNSSEC."""
    cfg = get_config(ctx)
    document = open_capture(ctx, har_file)

    domains = list_domains(document)
    if not domains:
        console.print("[yellow]No domains found.[/yellow]")
        return

    try:
        resolver = make_resolver(lifetime if lifetime is not None else cfg.dns_lifetime)
    except dns.resolver.NoResolverConfiguration as e:
        err_console.print(f"[red]Error:[/red] No DNS resolver configured: {e}")
        sys.exit(1)

    signed = 0
    for domain in domains:
        result = audit_domain(domain, resolver)
        signed += result.signed
        style = STATUS_STYLES[result.status]
        console.print(f"[{style}]{result.describe()}[/{style}]", highlight=False)

    console.print(f"[dim]{signed}/{len(domains)} domains signed[/dim]")
