"""Domain label tree for harscope."""

from .canonical import MalformedHostError, canonicalize, get_extractor
from .tree import (
    BuildStats,
    DomainNode,
    SortBy,
    build_domain_tree,
    hosts_from_har,
    iter_tree,
    render_tree,
    sorted_children,
)

__all__ = [
    "MalformedHostError",
    "canonicalize",
    "get_extractor",
    "BuildStats",
    "DomainNode",
    "SortBy",
    "build_domain_tree",
    "hosts_from_har",
    "iter_tree",
    "render_tree",
    "sorted_children",
]
