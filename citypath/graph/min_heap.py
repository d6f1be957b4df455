"""Indexed binary min-heap of graph nodes.

The heap is array backed and 0-indexed: the parent of slot ``i`` is
``(i - 1) // 2`` and its children are ``2i + 1`` and ``2i + 2``. Every
enqueued node records its current slot in ``Node.heap_position`` so that
``decrease_key`` starts from a known slot instead of searching the array.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .network import NOT_IN_HEAP, Node


@dataclass
class HeapEntry:
    """One slot of the heap.

    ``value`` mirrors the node's distance at the time it was enqueued or
    last decreased. None stands for an unreached node and orders after
    every distance. The child flags belong to the slot, not to the node,
    and let sift-down navigate without comparing against the heap size.
    """

    value: Optional[int]
    node: Node = field(repr=False)
    has_left_child: bool = False
    has_right_child: bool = False


def _less(a: Optional[int], b: Optional[int]) -> bool:
    """Return True if ``a`` orders strictly before ``b``."""
    if a is None:
        return False
    if b is None:
        return True
    return a < b


def _parent(position: int) -> int:
    return (position - 1) // 2


def _left(position: int) -> int:
    return 2 * position + 1


def _right(position: int) -> int:
    return 2 * position + 2


class MinHeap:
    """Priority queue of nodes keyed by their distance from the source.

    Equal values are never reordered by sift-up. During sift-down the
    right child wins a tie between two children.
    """

    def __init__(self) -> None:
        self._entries: List[HeapEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def values(self) -> List[Optional[int]]:
        """Snapshot of slot values in array order."""
        return [entry.value for entry in self._entries]

    def push(self, node: Node) -> None:
        """Enqueue ``node`` with its current distance as the key."""
        position = len(self._entries)
        self._entries.append(HeapEntry(value=node.distance, node=node))
        node.heap_position = position

        if position > 0:
            parent = self._entries[_parent(position)]
            if position % 2 == 0:
                parent.has_right_child = True
            else:
                parent.has_left_child = True

        self._sift_up(position)

    def pop(self) -> Node:
        """Remove and return the node with the smallest value.

        Callers must check ``is_empty`` first.
        """
        assert self._entries, "pop from an empty heap"

        top = self._entries[0]
        size = len(self._entries)

        if size > 1:
            last = self._entries.pop()
            last.has_left_child = top.has_left_child
            last.has_right_child = top.has_right_child
            self._entries[0] = last
            last.node.heap_position = 0

            # The former last slot's parent just lost that child.
            parent = self._entries[_parent(size - 1)]
            if size % 2 == 0:
                parent.has_left_child = False
            else:
                parent.has_right_child = False

            self._sift_down(0)
        else:
            self._entries.pop()

        top.node.heap_position = NOT_IN_HEAP
        return top.node

    def decrease_key(self, node: Node) -> None:
        """Lower the key of an enqueued node to its current distance."""
        position = node.heap_position
        assert 0 <= position < len(self._entries), (
            f"{node.name} is not in the heap"
        )
        entry = self._entries[position]
        assert entry.node is node, f"stale heap position for {node.name}"
        assert not _less(entry.value, node.distance), (
            f"decrease_key would raise {node.name} "
            f"from {entry.value} to {node.distance}"
        )

        entry.value = node.distance
        self._sift_up(position)

    def clear(self) -> None:
        """Empty the heap so it can be reused for another run."""
        for entry in self._entries:
            entry.node.heap_position = NOT_IN_HEAP
        self._entries.clear()

    def check_invariant(self) -> bool:
        """Return True if heap order, child flags and positions agree."""
        size = len(self._entries)
        for position, entry in enumerate(self._entries):
            if entry.node.heap_position != position:
                return False
            left, right = _left(position), _right(position)
            if entry.has_left_child != (left < size):
                return False
            if entry.has_right_child != (right < size):
                return False
            for child in (left, right):
                if child < size and _less(self._entries[child].value, entry.value):
                    return False
        return True

    def _swap(self, i: int, j: int) -> None:
        a, b = self._entries[i], self._entries[j]

        # Child flags describe the slot, so they stay where they are.
        a.has_left_child, b.has_left_child = b.has_left_child, a.has_left_child
        a.has_right_child, b.has_right_child = b.has_right_child, a.has_right_child

        self._entries[i], self._entries[j] = b, a
        b.node.heap_position = i
        a.node.heap_position = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = _parent(position)
            if not _less(self._entries[position].value, self._entries[parent].value):
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        while True:
            entry = self._entries[position]
            left, right = _left(position), _right(position)

            if entry.has_left_child and entry.has_right_child:
                left_value = self._entries[left].value
                right_value = self._entries[right].value
                if _less(entry.value, left_value) and _less(entry.value, right_value):
                    break
                child = left if _less(left_value, right_value) else right
            elif entry.has_left_child:
                if _less(entry.value, self._entries[left].value):
                    break
                child = left
            elif entry.has_right_child:
                if _less(entry.value, self._entries[right].value):
                    break
                child = right
            else:
                break

            self._swap(position, child)
            position = child
