"""A simple parent/children hierarchy of elements."""

from typing import Any, Optional


class Node:
    """A tree node holding ``element``, with unordered children."""

    def __init__(self, element: Any = None, parent: Optional["Node"] = None):
        self.element = element
        self.parent: Optional[Node] = None
        self.children: set[Node] = set()
        if parent is not None:
            parent.add_child(self)

    def remove_child(self, child: "Node") -> None:
        """Detach ``child``; its parent is cleared even if it was not ours."""
        child.parent = None
        self.children.discard(child)

    def add_child(self, child: "Node") -> None:
        """Make ``child`` ours, detaching it from any previous parent."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.add(child)

    def delete_children(self) -> None:
        """Drop every child of this node."""
        for child in self.children:
            child.parent = None
        self.children.clear()

    def __repr__(self) -> str:
        return f"Node({self.element!r}, children={len(self.children)})"