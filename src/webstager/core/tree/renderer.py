from __future__ import annotations

"""
Tree Renderer.

Converts a staged forest into a visual ASCII representation. Entries keep
their insertion order; folders are suffixed with a slash.
"""

from typing import AbstractSet, List, Optional

from webstager.domain.tree_models import FolderNode, Forest

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_forest(
        forest: Forest,
        lines: List[str],
        prefix: str = "",
        expanded: Optional[AbstractSet[str]] = None,
) -> None:
    """
    Recursively transform the forest into a list of strings.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested folders.

    Args:
        forest: Current level of the forest to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        expanded: Folder ids whose children are shown. None shows all.
    """
    total = len(forest)

    for i, node in enumerate(forest):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, FolderNode):
            lines.append(f"{prefix}{connector}{node.name}/")
            if expanded is not None and node.id not in expanded:
                continue
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_forest(node.children, lines, prefix=new_prefix, expanded=expanded)
            continue

        lines.append(f"{prefix}{connector}{node.name}")


def forest_to_lines(forest: Forest, expanded: Optional[AbstractSet[str]] = None) -> List[str]:
    """Render the whole forest and return the produced lines."""
    lines: List[str] = []
    render_forest(forest, lines, expanded=expanded)
    return lines
