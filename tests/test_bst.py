import io
import random

import pytest

from memadt.bst import BSTree


def make(values):
    tree = BSTree()
    for v in values:
        tree.insert(v)
    return tree


def test_iteration_is_sorted():
    rng = random.Random(3)
    values = [rng.randrange(50) for _ in range(80)]
    tree = make(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


def test_reversed_is_descending():
    values = ["m", "c", "x", "a", "d"]
    tree = make(values)
    assert list(reversed(tree)) == sorted(values, reverse=True)


def test_duplicates_kept():
    tree = make([2, 2, 1, 2])
    assert list(tree) == [1, 2, 2, 2]


def test_pop_front_removes_min():
    tree = make([5, 2, 8, 1])
    tree.pop_front()
    assert list(tree) == [2, 5, 8]


def test_pop_back_removes_max():
    tree = make([5, 2, 8, 7])
    tree.pop_back()
    assert list(tree) == [2, 5, 7]


def test_pop_on_empty_is_noop():
    tree = BSTree()
    tree.pop_front()
    tree.pop_back()
    assert len(tree) == 0


def test_erase_item():
    tree = make([5, 3, 8, 4, 7, 9])
    assert tree.erase(5) is True
    assert list(tree) == [3, 4, 7, 8, 9]
    assert tree.erase(6) is False
    assert len(tree) == 5


def test_erase_all_random_order():
    rng = random.Random(11)
    values = list(range(40))
    rng.shuffle(values)
    tree = make(values)
    remaining = sorted(values)
    order = values[:]
    rng.shuffle(order)
    for v in order:
        assert tree.erase(v) is True
        remaining.remove(v)
        assert list(tree) == remaining
    assert len(tree) == 0


def test_erase_on_empty():
    assert BSTree().erase(1) is False
    assert BSTree().erase_at(0) is False


def test_find():
    tree = make(["b", "a", "c"])
    assert tree.find("c") == 2
    assert tree.find("z") is None


def test_clear_and_reuse():
    tree = make([1, 2, 3])
    tree.clear()
    assert list(tree) == []
    tree.insert(4)
    assert list(tree) == [4]


def test_sort_keeps_order():
    tree = make([3, 1, 2])
    tree.sort()
    assert list(tree) == [1, 2, 3]


def test_print_empty_tree():
    out = io.StringIO()
    BSTree().print_tree(out)
    assert out.getvalue() == "print:\n[0]\n"


def test_print_small_tree():
    out = io.StringIO()
    make([2, 1, 3]).print_tree(out)
    assert out.getvalue() == (
        "print:\n"
        "[0]  2\n"
        "      [1]  3\n"
        "            [2]\n"
        "            [2]\n"
        "      [1]  1\n"
        "            [2]\n"
        "            [2]\n"
    )