import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pirateocean.avltree import AVLTree


def _max_avl_height(n):
    return 1.4405 * math.log2(n + 2) - 0.3277


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.first() is None
    assert tree.height() == -1
    assert tree.find(3) is None
    assert 3 not in tree


def test_insert_and_find():
    tree = _build([5, 2, 8])
    assert tree.find(5) == "v5"
    assert tree.find(2) == "v2"
    assert tree.find(8) == "v8"
    assert tree.find(7) is None
    assert 8 in tree
    assert 7 not in tree
    assert len(tree) == 3


def test_duplicate_insert_keeps_first_value():
    tree = AVLTree()
    assert tree.insert(1, "a") is True
    assert tree.insert(1, "b") is False
    assert tree.find(1) == "a"
    assert len(tree) == 1


def test_remove_missing_is_noop():
    tree = _build([1, 2, 3])
    assert tree.remove(10) is False
    assert list(tree) == [1, 2, 3]
    assert len(tree) == 3


def test_remove_from_empty():
    tree = AVLTree()
    assert tree.remove(1) is False
    assert len(tree) == 0


@pytest.mark.parametrize("victim", [1, 2, 3, 4, 5, 6, 7])
def test_remove_each_position(victim):
    keys = [4, 2, 6, 1, 3, 5, 7]
    tree = _build(keys)
    assert tree.remove(victim) is True
    expected = sorted(k for k in keys if k != victim)
    assert list(tree) == expected
    assert tree.find(victim) is None
    assert len(tree) == 6


def test_sequential_inserts_stay_balanced():
    tree = _build(range(1, 8))
    assert tree.height() == 2
    assert list(tree) == list(range(1, 8))


def test_single_node_height():
    tree = _build([42])
    assert tree.height() == 0


def test_items_and_values_sorted():
    keys = [9, 3, 7, 1, 5]
    tree = _build(keys)
    assert list(tree.items()) == [(k, f"v{k}") for k in sorted(keys)]
    assert list(tree.values()) == [f"v{k}" for k in sorted(keys)]


def test_first_is_minimum():
    tree = _build([9, 3, 7, 1, 5])
    assert tree.first() == (1, "v1")
    tree.remove(1)
    assert tree.first() == (3, "v3")


def test_tuple_keys_order():
    tree = AVLTree()
    tree.insert((-10, -2), 2)
    tree.insert((-10, -5), 5)
    tree.insert((-3, -1), 1)
    assert list(tree.values()) == [5, 2, 1]
    assert tree.first() == ((-10, -5), 5)


def test_large_descending_balance():
    n = 1000
    tree = _build(range(n, 0, -1))
    assert len(tree) == n
    assert tree.height() <= _max_avl_height(n)
    for key in range(1, n, 2):
        tree.remove(key)
    assert list(tree) == list(range(2, n + 1, 2))
    assert tree.height() <= _max_avl_height(len(tree))


def test_remove_all_empties_tree():
    keys = list(range(50))
    tree = _build(keys)
    for key in keys:
        assert tree.remove(key) is True
    assert len(tree) == 0
    assert tree.first() is None
    assert tree.height() == -1


@given(
    st.lists(
        st.tuples(st.booleans(), st.integers(min_value=-50, max_value=50)),
        max_size=200,
    )
)
def test_matches_dict_model(operations):
    tree = AVLTree()
    model = {}
    for is_insert, key in operations:
        present = key in model
        if is_insert:
            result = tree.insert(key, key * 2)
            model.setdefault(key, key * 2)
        else:
            result = tree.remove(key)
            model.pop(key, None)
        assert result == (present != is_insert)
        assert len(tree) == len(model)
    assert list(tree) == sorted(model)
    assert list(tree.items()) == sorted(model.items())
    for key, value in model.items():
        assert tree.find(key) == value
    assert tree.first() == min(model.items(), default=None)
    assert tree.height() <= _max_avl_height(len(model))