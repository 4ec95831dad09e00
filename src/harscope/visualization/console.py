"""Rich console formatting utilities for harscope."""

from rich.text import Text
from rich.tree import Tree

from ..domains.tree import DomainNode, SortBy, sorted_children
from ..ops.search import SearchMatch
from ..utils.formatting import format_fields, truncate_text


def format_domain_label(label: str, count: int, total: int) -> Text:
    """Format a domain node for Rich tree display.

    Args:
        label: Domain label (or fused registrable domain)
        count: Requests under this node
        total: Requests in the whole tree, for the share column

    Returns:
        Rich Text like "example (3) 75.0%"
    """
    text = Text()
    text.append(label, style="bold cyan")
    text.append(f" ({count})", style="green")
    if total:
        text.append(f" {count * 100 / total:.1f}%", style="dim")
    return text


def build_rich_tree(tree: DomainNode, sort_by: SortBy, title: str = "Requests") -> Tree:
    """Draw the domain tree with the same ordering as render_tree().

    Args:
        tree: Root node
        sort_by: Ordering applied at every level
        title: Label of the root

    Returns:
        rich.tree.Tree ready for console.print()
    """
    sort_by = SortBy.parse(sort_by)
    root = Tree(Text.assemble((title, "bold blue"), (f" ({tree.count})", "green")))

    def add(branch: Tree, node: DomainNode) -> None:
        for label, child in sorted_children(node, sort_by):
            add(branch.add(format_domain_label(label, child.count, tree.count)), child)

    add(root, tree)
    return root


def format_search_match(match: SearchMatch, max_url_length: int = 100) -> Text:
    """Format a search result block.

    Args:
        match: Search result
        max_url_length: URLs longer than this are truncated

    Returns:
        Rich Text spanning several lines
    """
    heading = "Found base64 encoded in request" if match.encoding == "base64" else "Found in request"
    text = Text()
    text.append(f"{heading} {match.request_num}:\n", style="bold yellow")
    text.append("Time: ", style="dim")
    text.append(f"{match.time}\n")
    text.append("URL: ", style="dim")
    text.append(f"{truncate_text(match.url, max_url_length)}\n")
    text.append("Method: ", style="dim")
    text.append(f"{match.method}\n", style="bold magenta")
    text.append("In fields: ", style="dim")
    text.append(format_fields(match.in_fields), style="cyan")
    return text
