import random

import pytest

from safe_routing.algorithms.selectors import (
    BinaryHeapSelector,
    LinearScanSelector,
    SelectorFactory,
    SelectorStrategy
)


def drain(selector):
    out = []
    while True:
        item = selector.extract_minimum()
        if item is None:
            return out
        out.append(item)


@pytest.mark.parametrize("make", [
    lambda ids: BinaryHeapSelector(),
    lambda ids: LinearScanSelector(ids),
])
def test_extracts_in_cost_order(make):
    rng = random.Random(7)
    ids = [f"v{i}" for i in range(200)]
    costs = {vertex_id: rng.uniform(0, 1000) for vertex_id in ids}

    selector = make(ids)
    for vertex_id in ids:
        selector.insert_or_update(vertex_id, costs[vertex_id])
    assert len(selector) == 200

    extracted = drain(selector)
    assert [cost for _, cost in extracted] == sorted(costs.values())
    assert selector.is_empty()
    assert selector.extract_minimum() is None


@pytest.mark.parametrize("make", [
    lambda ids: BinaryHeapSelector(),
    lambda ids: LinearScanSelector(ids),
])
def test_update_only_lowers(make):
    selector = make(['a', 'b', 'c'])
    selector.insert_or_update('a', 10)
    selector.insert_or_update('b', 5)
    selector.insert_or_update('c', 7)

    selector.insert_or_update('a', 1)
    selector.insert_or_update('b', 50)  # not an improvement

    assert drain(selector) == [('a', 1), ('b', 5), ('c', 7)]


def test_linear_scan_ties_follow_vertex_order():
    selector = LinearScanSelector(['x', 'y', 'z'])
    selector.insert_or_update('z', 1.0)
    selector.insert_or_update('y', 1.0)
    selector.insert_or_update('x', 1.0)
    assert [vertex_id for vertex_id, _ in drain(selector)] == ['x', 'y', 'z']


def test_heap_insert_or_update_inserts_absent_vertex():
    heap = BinaryHeapSelector()
    heap.insert_or_update('a', 3)
    assert 'a' in heap
    assert heap.peek() == ('a', 3)


def test_heap_decrease_key():
    heap = BinaryHeapSelector()
    for vertex_id, cost in [('a', 5), ('b', 6), ('c', 7), ('d', 8)]:
        heap.insert(vertex_id, cost)

    assert heap.decrease_key('d', 1) is True
    assert heap.decrease_key('c', 9) is False
    assert heap.peek() == ('d', 1)
    assert [vertex_id for vertex_id, _ in drain(heap)] == ['d', 'a', 'b', 'c']


def test_heap_decrease_key_on_absent_vertex_raises():
    heap = BinaryHeapSelector()
    with pytest.raises(KeyError):
        heap.decrease_key('ghost', 1)


def test_heap_rejects_duplicate_insert():
    heap = BinaryHeapSelector()
    heap.insert('a', 1)
    with pytest.raises(ValueError):
        heap.insert('a', 2)


def test_heap_extracted_vertex_can_be_reinserted():
    heap = BinaryHeapSelector()
    heap.insert('a', 1)
    assert heap.extract_minimum() == ('a', 1)
    assert 'a' not in heap
    heap.insert_or_update('a', 4)
    assert heap.extract_minimum() == ('a', 4)


def test_factory_creates_fresh_instances():
    first = SelectorFactory.create_selector('heap', [])
    second = SelectorFactory.create_selector(SelectorStrategy.HEAP, [])
    assert isinstance(first, BinaryHeapSelector)
    assert first is not second
    assert isinstance(SelectorFactory.create_selector('PLAIN', ['a']), LinearScanSelector)


def test_strategy_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Unsupported selector strategy"):
        SelectorStrategy.parse('bfs')


def test_available_strategies_describe_complexity():
    strategies = SelectorFactory.get_available_strategies()
    assert strategies['plain']['complexity'] == "O(V^2)"
    assert strategies['heap']['complexity'] == "O((V+E) log V)"
