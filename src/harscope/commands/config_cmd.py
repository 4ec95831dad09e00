"""config command group - inspect and edit harscope.yaml."""

from __future__ import annotations

import sys
from dataclasses import asdict, fields
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..config import (
    CONFIG_SEARCH_PATHS,
    HarscopeConfig,
    find_config_path,
    get_default_config_yaml,
    load_config,
    save_config_value,
    validate_config,
)
from .common import err_console

console = Console()

config_path_option = click.option("--config", "-c", "config_path", default=None, help="Config file path")


def _format_value(value) -> str:
    """Spell a setting the way it is written in YAML."""
    if isinstance(value, bool):
        return str(value).lower()
    if value is None:
        return "null"
    return str(value)


def _existing_config(config_path: str | None) -> Path:
    """Return the explicit or discovered config file, exiting 1 when there is none."""
    path = Path(config_path) if config_path else find_config_path()
    if path is None:
        err_console.print("[red]No config file found.[/red] Run 'harscope config init' first.")
        sys.exit(1)
    if not path.exists():
        err_console.print(f"[red]Config file not found:[/red] {path}")
        sys.exit(1)
    return path


@click.group("config")
def config():
    """Inspect and edit the harscope.yaml settings.

    Settings provide the defaults of count-urls, search-for and
    dnssec-audit; command line options always win.
    """


@config.command()
@click.option("--force", "-f", is_flag=True, help="Replace an existing file")
@click.option("--filename", default=CONFIG_SEARCH_PATHS[0], show_default=True,
              help="Name of the file to write in the current directory")
def init(force, filename):
    """Write a commented config file with every setting at its default."""
    target = Path.cwd() / filename
    if target.exists() and not force:
        err_console.print(f"[yellow]{target} already exists[/yellow] (use --force to replace it)", soft_wrap=True)
        sys.exit(1)

    target.write_text(get_default_config_yaml(), encoding="utf-8")
    console.print(f"[green]Wrote[/green] {target}")


@config.command()
@config_path_option
def show(config_path):
    """List every setting with its effective value."""
    cfg = load_config(config_path)
    defaults = HarscopeConfig()

    table = Table(show_edge=False, header_style="bold")
    table.add_column("setting")
    table.add_column("value")
    table.add_column("default", style="dim")
    for f in fields(HarscopeConfig):
        value = getattr(cfg, f.name)
        default = getattr(defaults, f.name)
        style = "bold cyan" if value != default else None
        table.add_row(f.name, _format_value(value), _format_value(default), style=style)
    console.print(table)

    source = Path(config_path).resolve() if config_path else find_config_path()
    console.print(f"[dim]Source: {source or 'built-in defaults (no config file)'}[/dim]", soft_wrap=True)


@config.command()
@click.argument("key")
@config_path_option
def get(key, config_path):
    """Print the effective value of one setting."""
    data = asdict(load_config(config_path))

    if key not in data:
        console.print(f"[red]Unknown key:[/red] {key}")
        sys.exit(1)

    click.echo(_format_value(data[key]))


@config.command("set")
@click.argument("key")
@click.argument("value")
@config_path_option
def set_value(key, value, config_path):
    """Set a config value in the YAML file.

    Example: harscope config set sort alpha
    """
    path = _existing_config(config_path)

    try:
        save_config_value(path, key, value)
    except KeyError:
        console.print(f"[red]Unknown key:[/red] {key}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error writing config:[/red] {e}")
        sys.exit(1)

    errors = validate_config(path)
    if errors:
        console.print(f"[yellow]Set {key} = {value}, but the config is now invalid:[/yellow]")
        for err in errors:
            console.print(f"  [red]-[/red] {err}")
        sys.exit(1)

    console.print(f"[green]Set[/green] {key} = {value}")
    console.print(f"[dim]Updated: {path}[/dim]")


@config.command()
@config_path_option
def validate(config_path):
    """Check a config file for syntax errors, unknown keys and bad values."""
    path = _existing_config(config_path)

    errors = validate_config(path)
    if errors:
        console.print(f"[red]{len(errors)} error(s) in[/red] {path}", soft_wrap=True)
        for err in errors:
            console.print(f"  [red]-[/red] {err}")
        sys.exit(1)

    console.print(f"[green]Config is valid:[/green] {path}", soft_wrap=True)


@config.command()
def path():
    """Print the config file harscope would read from here."""
    found = find_config_path()
    if found is None:
        err_console.print(f"[dim]None of {', '.join(CONFIG_SEARCH_PATHS)} in {Path.cwd()}[/dim]")
        sys.exit(1)
    click.echo(str(found))
