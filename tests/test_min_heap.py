import random
import sys

import pytest

from citypath.graph.min_heap import MinHeap
from citypath.graph.network import NOT_IN_HEAP, Graph


def make_nodes(distances):
    graph = Graph()
    nodes = []
    for i, distance in enumerate(distances):
        node = graph.node_at(graph.create_node(f"N{i}"))
        node.distance = distance
        nodes.append(node)
    return nodes


def drain(heap):
    popped = []
    while not heap.is_empty():
        popped.append(heap.pop())
        assert heap.check_invariant()
    return popped


def test_empty_heap():
    heap = MinHeap()

    assert heap.is_empty()
    assert heap.size() == 0
    assert len(heap) == 0


def test_pop_on_empty_heap_is_a_contract_violation():
    with pytest.raises(AssertionError):
        MinHeap().pop()


def test_push_records_heap_positions():
    heap = MinHeap()
    nodes = make_nodes([5, 3, 8, 1])

    for node in nodes:
        heap.push(node)
        assert heap.check_invariant()

    assert heap.size() == 4
    assert heap.values()[0] == 1
    for node in nodes:
        assert heap.values()[node.heap_position] == node.distance


def test_pop_returns_minimum_and_clears_position():
    heap = MinHeap()
    nodes = make_nodes([5, 3, 8, 1])
    for node in nodes:
        heap.push(node)

    smallest = heap.pop()

    assert smallest is nodes[3]
    assert smallest.heap_position == NOT_IN_HEAP
    assert heap.size() == 3
    assert heap.check_invariant()


def test_pop_sequence_is_non_decreasing():
    rng = random.Random(7)
    distances = [rng.randint(0, 50) for _ in range(40)]
    heap = MinHeap()
    for node in make_nodes(distances):
        heap.push(node)

    popped = [node.distance for node in drain(heap)]

    assert popped == sorted(distances)


def test_equal_values_do_not_sift_up():
    heap = MinHeap()
    first, second = make_nodes([4, 4])

    heap.push(first)
    heap.push(second)

    assert first.heap_position == 0
    assert second.heap_position == 1


def test_sift_down_prefers_right_child_on_tie():
    heap = MinHeap()
    root, left, right, last = make_nodes([0, 5, 5, 9])
    for node in (root, left, right, last):
        heap.push(node)

    heap.pop()

    # 9 moved to the root and swapped with the right child of the tied pair.
    assert heap.values() == [5, 5, 9]
    assert right.heap_position == 0
    assert left.heap_position == 1
    assert last.heap_position == 2


def test_decrease_key_moves_node_to_root():
    heap = MinHeap()
    nodes = make_nodes([2, 6, 7, 9, 11])
    for node in nodes:
        heap.push(node)

    target = nodes[4]
    target.distance = 1
    heap.decrease_key(target)

    assert target.heap_position == 0
    assert heap.check_invariant()
    assert heap.pop() is target


def test_decrease_key_to_equal_parent_value_keeps_position():
    heap = MinHeap()
    parent, child = make_nodes([3, 10])
    heap.push(parent)
    heap.push(child)

    child.distance = 3
    heap.decrease_key(child)

    assert child.heap_position == 1
    assert heap.values() == [3, 3]


def test_decrease_key_rejects_increase():
    heap = MinHeap()
    (node,) = make_nodes([3])
    heap.push(node)

    node.distance = 10
    with pytest.raises(AssertionError):
        heap.decrease_key(node)


def test_decrease_key_on_absent_node():
    heap = MinHeap()
    (node,) = make_nodes([3])

    with pytest.raises(AssertionError):
        heap.decrease_key(node)


def test_random_decrease_keys_keep_invariant():
    rng = random.Random(42)
    heap = MinHeap()
    nodes = make_nodes([rng.randint(50, 100) for _ in range(30)])
    for node in nodes:
        heap.push(node)

    for _ in range(60):
        node = rng.choice(nodes)
        node.distance = max(0, node.distance - rng.randint(0, 20))
        heap.decrease_key(node)
        assert heap.check_invariant()

    popped = [node.distance for node in drain(heap)]
    assert popped == sorted(node.distance for node in nodes)


def test_clear_allows_reuse():
    heap = MinHeap()
    nodes = make_nodes([1, 2, 3])
    for node in nodes:
        heap.push(node)

    heap.clear()

    assert heap.is_empty()
    assert all(node.heap_position == NOT_IN_HEAP for node in nodes)
    heap.push(nodes[2])
    assert heap.pop() is nodes[2]


def test_unreached_nodes_order_after_every_distance():
    heap = MinHeap()
    nodes = make_nodes([None, sys.maxsize * 4, None, 0])
    for node in nodes:
        heap.push(node)
        assert heap.check_invariant()

    popped = drain(heap)

    assert [node.distance for node in popped][:2] == [0, sys.maxsize * 4]
    assert all(node.distance is None for node in popped[2:])


def test_decrease_key_from_unreached():
    heap = MinHeap()
    nodes = make_nodes([5, None, None])
    for node in nodes:
        heap.push(node)

    nodes[2].distance = 1
    heap.decrease_key(nodes[2])

    assert nodes[2].heap_position == 0
    assert heap.check_invariant()


def test_decrease_key_rejects_reset_to_unreached():
    heap = MinHeap()
    (node,) = make_nodes([3])
    heap.push(node)

    node.distance = None
    with pytest.raises(AssertionError):
        heap.decrease_key(node)
