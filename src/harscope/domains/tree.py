"""Domain tree construction and rendering.

Each request host is inserted as a path of labels (top-level domain first)
and every node on the path, root included, has its count incremented.
A node's count is therefore the number of requests under that subtree,
which is what the frequency ordering reads at every level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional

import tldextract

from .canonical import MalformedHostError, canonicalize
from ..har.loader import entries, request_url
from ..utils.url import extract_host


class SortBy(str, Enum):
    """Ordering applied to the children of every tree node."""

    ALPHA = "alpha"
    FREQUENCY = "frequency"

    @classmethod
    def parse(cls, value: "str | SortBy") -> "SortBy":
        """Return the strategy named by value.

        Raises:
            ValueError: value is not "alpha" or "frequency"
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown sort strategy '{value}' (expected one of: {choices})") from None


MALFORMED_POLICIES = ("opaque", "skip")


@dataclass
class DomainNode:
    """Node of the domain tree. The root has no label of its own."""

    count: int = 0
    children: dict[str, "DomainNode"] = field(default_factory=dict)

    def child(self, label: str) -> "DomainNode":
        """Return the child for label, creating it if needed."""
        node = self.children.get(label)
        if node is None:
            node = DomainNode()
            self.children[label] = node
        return node

    def insert(self, labels: Iterable[str]) -> None:
        """Count one visit along the path of labels."""
        node = self
        node.count += 1
        for label in labels:
            node = node.child(label)
            node.count += 1

    def find(self, labels: Iterable[str]) -> Optional["DomainNode"]:
        """Return the node at the given label path, or None."""
        node: Optional[DomainNode] = self
        for label in labels:
            node = node.children.get(label)
            if node is None:
                return None
        return node


@dataclass
class BuildStats:
    """Outcome of a tree build; processed + skipped == total."""

    total: int = 0
    processed: int = 0
    skipped: int = 0
    opaque: int = 0
    skipped_hosts: list[str] = field(default_factory=list)


def hosts_from_har(document: dict) -> Iterator[str]:
    """Yield the request host of every HAR entry, in entry order.

    URLs without a host (data:, about:blank) and entries with no request
    yield an empty string so that they are still accounted for by the
    builder.
    """
    for entry in entries(document):
        yield extract_host(request_url(entry))


def build_domain_tree(
    tree: DomainNode,
    hosts: Iterable[str],
    merge_tld: bool = False,
    extractor: Optional[tldextract.TLDExtract] = None,
    malformed_hosts: str = "opaque",
) -> BuildStats:
    """Insert every host into tree.

    Hosts that cannot be canonicalized are handled by malformed_hosts:
    "opaque" inserts the raw host as a single top-level label, "skip"
    leaves them out. Empty hosts are always skipped.

    Args:
        tree: Root node to insert into (may already hold counts)
        hosts: Hostnames, one per request
        merge_tld: Fuse TLD and registrable label into one node
        extractor: Public suffix extractor passed to canonicalize()
        malformed_hosts: "opaque" or "skip"

    Returns:
        BuildStats with processed/skipped counts
    """
    if malformed_hosts not in MALFORMED_POLICIES:
        raise ValueError(f"Unknown malformed host policy '{malformed_hosts}'")

    stats = BuildStats()
    for host in hosts:
        stats.total += 1
        try:
            labels = canonicalize(host, merge_tld, extractor)
        except MalformedHostError:
            raw = host.strip().lower().rstrip(".")
            if malformed_hosts == "skip" or not raw:
                stats.skipped += 1
                stats.skipped_hosts.append(host)
                continue
            labels = [raw]
            stats.opaque += 1

        tree.insert(labels)
        stats.processed += 1

    return stats


def _sort_key(sort_by: SortBy) -> Callable[[tuple[str, DomainNode]], tuple]:
    if sort_by is SortBy.ALPHA:
        return lambda item: (item[0].casefold(), item[0])
    if sort_by is SortBy.FREQUENCY:
        return lambda item: (-item[1].count, item[0].casefold(), item[0])
    raise ValueError(f"Unknown sort strategy: {sort_by!r}")


def sorted_children(node: DomainNode, sort_by: SortBy) -> list[tuple[str, DomainNode]]:
    """Return (label, child) pairs of node in display order."""
    return sorted(node.children.items(), key=_sort_key(sort_by))


def iter_tree(
    tree: DomainNode,
    sort_by: "SortBy | str",
) -> Iterator[tuple[int, str, DomainNode]]:
    """Walk the tree depth-first in display order.

    Yields:
        (depth, label, node) with depth 0 for the root's direct children
    """
    sort_by = SortBy.parse(sort_by)

    def walk(node: DomainNode, depth: int) -> Iterator[tuple[int, str, DomainNode]]:
        for label, child in sorted_children(node, sort_by):
            yield depth, label, child
            yield from walk(child, depth + 1)

    yield from walk(tree, 0)


def render_tree(tree: DomainNode, sort_by: "SortBy | str", indent: str = "    ") -> list[str]:
    """Render the tree as indented "label (count)" lines.

    The root itself is not printed; an empty tree renders to no lines.
    """
    return [f"{indent * depth}{label} ({node.count})" for depth, label, node in iter_tree(tree, sort_by)]
