from __future__ import annotations

"""
Navigation Tree Data Models.

Structural nodes of the sidebar consumed by the rendering engine.
Nodes carry no identity; the whole tree is rebuilt on every build.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavLeaf:
    """
    A single link entry.

    Attributes:
        text: Display label.
        link: Site-absolute link path.
    """
    text: str
    link: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "link": self.link}


@dataclass(frozen=True)
class NavGroup:
    """
    A labeled group of leaves (one per folder).

    Attributes:
        text: Group label.
        items: Ordered leaves of the group.
    """
    text: str
    items: List[NavLeaf] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "items": [leaf.to_dict() for leaf in self.items]}


NavNode = Union[NavLeaf, NavGroup]
NavTree = List[NavNode]


def nav_tree_to_dicts(tree: NavTree) -> List[Dict[str, Any]]:
    """Serialize a navigation tree into plain JSON-compatible dictionaries."""
    return [node.to_dict() for node in tree]
