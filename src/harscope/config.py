"""Configuration loader for harscope."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML, YAMLError

SORT_CHOICES = ("alpha", "frequency")
MALFORMED_CHOICES = ("opaque", "skip")


@dataclass
class HarscopeConfig:
    """harscope configuration."""

    # count-urls defaults
    sort: str = "frequency"
    merge_tld: bool = False
    malformed_hosts: str = "opaque"
    indent: int = 4

    # Public suffix list cache directory (None = tldextract picks its own)
    tld_cache_dir: Optional[str] = None

    # dnssec-audit: seconds allowed per lookup
    dns_lifetime: float = 5.0

    # search-for: also search for the base64 form of the string
    search_base64: bool = True


CONFIG_SEARCH_PATHS = [
    "harscope.yaml",
    "harscope.yml",
    ".harscope.yaml",
    ".harscope.yml",
]

KNOWN_KEYS = {
    "sort", "merge_tld", "malformed_hosts", "indent",
    "tld_cache_dir", "dns_lifetime", "search_base64",
}

BOOL_KEYS = {"merge_tld", "search_base64"}


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _coerce(value: str):
    """Turn a command line string into the YAML scalar it spells."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none", "~"):
        return None
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def save_config_value(config_path: Path, key: str, value: str) -> None:
    """Set a single key in the YAML config file (round-trip, preserving comments).

    Raises:
        KeyError: key is not a known setting
    """
    if key not in KNOWN_KEYS:
        raise KeyError(key)

    yaml = YAML()
    yaml.preserve_quotes = True

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)

    if data is None:
        data = {}

    target = data
    if "harscope" in data:
        target = data["harscope"]

    target[key] = _coerce(value)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)


def _read_section(config_path: Path):
    """Load the YAML file and return the harscope section (or the whole mapping)."""
    yaml = YAML(typ="safe")
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)
    if isinstance(data, dict) and "harscope" in data:
        data = data["harscope"]
    return data


def _check_values(data: dict) -> list[str]:
    errors: list[str] = []

    if "sort" in data and data["sort"] not in SORT_CHOICES:
        errors.append(f"'sort' must be one of {', '.join(SORT_CHOICES)}, got: {data['sort']}")

    if "malformed_hosts" in data and data["malformed_hosts"] not in MALFORMED_CHOICES:
        errors.append(
            f"'malformed_hosts' must be one of {', '.join(MALFORMED_CHOICES)}, got: {data['malformed_hosts']}"
        )

    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            errors.append(f"'{key}' must be true or false, got: {data[key]}")

    if "indent" in data:
        if isinstance(data["indent"], bool) or not isinstance(data["indent"], int) or data["indent"] < 1:
            errors.append(f"'indent' must be a positive integer, got: {data['indent']}")

    if "dns_lifetime" in data:
        try:
            if float(data["dns_lifetime"]) <= 0:
                errors.append(f"'dns_lifetime' must be positive, got: {data['dns_lifetime']}")
        except (ValueError, TypeError):
            errors.append(f"'dns_lifetime' must be a number, got: {data['dns_lifetime']}")

    if "tld_cache_dir" in data and data["tld_cache_dir"] is not None and not isinstance(data["tld_cache_dir"], str):
        errors.append("'tld_cache_dir' must be a path string")

    return errors


def validate_config(config_path: Path) -> list[str]:
    """Validate a config file and return a list of error messages (empty = valid)."""
    try:
        data = _read_section(config_path)
    except YAMLError as e:
        return [f"Invalid YAML syntax: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    if data is None:
        return []

    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors = [f"Unknown key: '{key}'" for key in data if key not in KNOWN_KEYS]
    errors.extend(_check_values(data))
    return errors


def load_config(config_path: str | Path | None = None) -> HarscopeConfig:
    """Load configuration file.

    An explicitly given path must exist; otherwise the first file from
    CONFIG_SEARCH_PATHS in the current directory is used, if any.
    """
    config = HarscopeConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        return config

    try:
        data = _read_section(config_path)
    except YAMLError as e:
        print(f"Error: Invalid YAML in {config_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read config file {config_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if data is None:
        return config

    if not isinstance(data, dict):
        print(f"Error: Config must be a YAML mapping, got {type(data).__name__}", file=sys.stderr)
        sys.exit(1)

    errors = _check_values(data)
    if errors:
        for err in errors:
            print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)

    # Apply settings
    if "sort" in data:
        config.sort = data["sort"]
    if "merge_tld" in data:
        config.merge_tld = data["merge_tld"]
    if "malformed_hosts" in data:
        config.malformed_hosts = data["malformed_hosts"]
    if "indent" in data:
        config.indent = data["indent"]
    if "tld_cache_dir" in data:
        config.tld_cache_dir = data["tld_cache_dir"]
    if "dns_lifetime" in data:
        config.dns_lifetime = float(data["dns_lifetime"])
    if "search_base64" in data:
        config.search_base64 = data["search_base64"]

    return config


def get_default_config_yaml() -> str:
    """Return default YAML config template."""
    return r'''# harscope configuration
# Place this file as harscope.yaml in your working directory

harscope:
  # count-urls: ordering applied at every level of the domain tree
  # (alpha | frequency)
  sort: frequency

  # count-urls: show example.com as one node instead of com -> example
  merge_tld: false

  # count-urls: hosts that are IP literals or have no public suffix
  #   opaque - show the raw host as a single top-level node
  #   skip   - leave them out of the tree (they are still counted as skipped)
  malformed_hosts: opaque

  # count-urls: spaces per tree level
  indent: 4

  # Cache directory for the public suffix list
  # (null = tldextract's own cache location, TLDEXTRACT_CACHE if set)
  tld_cache_dir: null

  # dnssec-audit: seconds allowed per DNS lookup
  dns_lifetime: 5.0

  # search-for: also search for the base64 encoded string
  search_base64: true
'''
