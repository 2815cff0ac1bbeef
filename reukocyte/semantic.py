"""Parent tracking for syntax tree nodes visited during traversal."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any, Protocol


class _Located(Protocol):
    start_offset: int
    end_offset: int


def _nth(iterator: Iterator[Any], n: int) -> Any:
    return next(islice(iterator, n, None), None)


class Nodes:
    """All visited nodes, indexed by id, each with its parent's id."""

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int | None]] = []
        self._offset_to_id: dict[tuple[int, int], int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def insert(self, node: _Located, parent: int | None) -> int:
        """Store ``node`` under ``parent`` and return its id."""
        node_id = len(self._entries)
        self._entries.append((node, parent))
        self._offset_to_id[(node.start_offset, node.end_offset)] = node_id
        return node_id

    def _entry(self, node_id: int) -> tuple[Any, int | None] | None:
        if 0 <= node_id < len(self._entries):
            return self._entries[node_id]
        return None

    def get(self, node_id: int) -> Any:
        """The node with this id, or None."""
        entry = self._entry(node_id)
        return entry[0] if entry else None

    def node_id_for_location(self, start: int, end: int) -> int | None:
        """Id of the node last stored with these offsets."""
        return self._offset_to_id.get((start, end))

    def parent_id(self, node_id: int) -> int | None:
        """Id of the node's parent, or None."""
        entry = self._entry(node_id)
        return entry[1] if entry else None

    def parent(self, node_id: int) -> Any:
        """The node's parent, or None."""
        parent_id = self.parent_id(node_id)
        return None if parent_id is None else self.get(parent_id)

    def ancestor_id(self, node_id: int, n: int) -> int | None:
        """Id of the nth ancestor (0 is the parent)."""
        return _nth(self.ancestor_ids(node_id), n + 1)

    def ancestor(self, node_id: int, n: int) -> Any:
        """The nth ancestor (0 is the parent), or None."""
        ancestor_id = self.ancestor_id(node_id, n)
        return None if ancestor_id is None else self.get(ancestor_id)

    def ancestor_ids(self, node_id: int) -> Iterator[int]:
        """Ids from the given node up to the root, the node itself first."""
        current: int | None = node_id
        while current is not None:
            yield current
            current = self.parent_id(current)

    def ancestors(self, node_id: int) -> Iterator[Any]:
        """Nodes from the given node up to the root, the node itself first."""
        for ancestor_id in self.ancestor_ids(node_id):
            node = self.get(ancestor_id)
            if node is not None:
                yield node


class SemanticModel:
    """Tracks the node being visited and its ancestry."""

    def __init__(self) -> None:
        self.nodes = Nodes()
        self.current_node_id: int | None = None

    def push_node(self, node: _Located) -> int:
        """Register ``node`` as a child of the current node and make it current."""
        new_id = self.nodes.insert(node, self.current_node_id)
        self.current_node_id = new_id
        return new_id

    def pop_node(self) -> None:
        """Make the current node's parent current again."""
        if self.current_node_id is not None:
            self.current_node_id = self.nodes.parent_id(self.current_node_id)

    def current_node(self) -> Any:
        """The node being visited, or None."""
        return None if self.current_node_id is None else self.nodes.get(self.current_node_id)

    def parent_id(self) -> int | None:
        """Id of the current node's parent."""
        return None if self.current_node_id is None else self.nodes.parent_id(self.current_node_id)

    def parent(self) -> Any:
        """The current node's parent, or None."""
        parent_id = self.parent_id()
        return None if parent_id is None else self.nodes.get(parent_id)

    def parent_with_id(self) -> tuple[int, Any] | None:
        """The current node's parent with its id."""
        parent_id = self.parent_id()
        if parent_id is None:
            return None
        node = self.nodes.get(parent_id)
        return None if node is None else (parent_id, node)

    def ancestor_id(self, n: int) -> int | None:
        """Id of the current node's nth ancestor (0 is the parent)."""
        if self.current_node_id is None:
            return None
        return self.nodes.ancestor_id(self.current_node_id, n)

    def ancestor(self, n: int) -> Any:
        """The current node's nth ancestor (0 is the parent), or None."""
        ancestor_id = self.ancestor_id(n)
        return None if ancestor_id is None else self.nodes.get(ancestor_id)

    def ancestor_with_id(self, n: int) -> tuple[int, Any] | None:
        """The current node's nth ancestor with its id."""
        ancestor_id = self.ancestor_id(n)
        if ancestor_id is None:
            return None
        node = self.nodes.get(ancestor_id)
        return None if node is None else (ancestor_id, node)

    def ancestors(self) -> Iterator[Any]:
        """Ancestors of the current node, parent first, not the node itself."""
        return (node for _, node in self.ancestors_with_ids())

    def ancestors_with_ids(self) -> Iterator[tuple[int, Any]]:
        """(id, node) of each ancestor of the current node, parent first."""
        if self.current_node_id is None:
            return
        for ancestor_id in islice(self.nodes.ancestor_ids(self.current_node_id), 1, None):
            node = self.nodes.get(ancestor_id)
            if node is not None:
                yield ancestor_id, node

    def node_id_for(self, node: _Located) -> int | None:
        """Id of a node, found by its offsets."""
        return self.nodes.node_id_for_location(node.start_offset, node.end_offset)