import math
import random

import pytest

from dsakit.avl import AVLTree, main, run_queries


def build(values):
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def test_inorder_is_sorted_and_unique():
    values = [5, 3, 9, 3, 1, 7, 9, 2]
    tree = build(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))


def test_rotation_on_ascending_insert():
    tree = build([1, 2, 3])
    assert tree.preorder() == [2, 1, 3]
    assert tree.height() == 2


def test_height_stays_logarithmic():
    tree = build(range(1000))
    assert len(tree) == 1000
    assert tree.height() <= 1.45 * math.log2(len(tree) + 2)


def test_traversals_share_elements_and_root():
    tree = build([8, 4, 12, 2, 6, 10, 14, 1])
    pre, post = tree.preorder(), tree.postorder()
    assert sorted(pre) == sorted(post) == tree.inorder()
    assert pre[0] == post[-1]


def test_contains_and_erase():
    tree = build([10, 20, 30, 40, 50])
    assert 30 in tree
    assert 35 not in tree
    tree.erase(30)
    assert 30 not in tree
    assert tree.inorder() == [10, 20, 40, 50]
    tree.erase(99)
    assert len(tree) == 4


def test_erase_keeps_balance_and_order():
    rng = random.Random(7)
    values = rng.sample(range(5000), 400)
    tree = build(values)
    removed = set(values[::2])
    for value in removed:
        tree.erase(value)
    remaining = sorted(set(values) - removed)
    assert tree.inorder() == remaining
    assert tree.height() <= 1.45 * math.log2(len(tree) + 2)


def test_kth_and_rank_round_trip():
    tree = build([15, 3, 42, 8, 23, 16])
    for index, value in enumerate(tree.inorder()):
        assert tree.kth(index) == value
        assert tree.rank(value) == index


def test_rank_of_absent_value():
    tree = build([10, 20, 30])
    assert tree.rank(25) == tree.rank(30)
    assert tree.rank(0) == 0
    assert tree.rank(100) == len(tree)


def test_kth_out_of_range():
    tree = build([1, 2])
    with pytest.raises(IndexError):
        tree.kth(2)
    with pytest.raises(IndexError):
        tree.kth(-1)


def test_minimum_and_maximum():
    tree = build([4, 9, 1, 6])
    assert tree.minimum() == 1
    assert tree.maximum() == 9


def test_minimum_of_empty_tree():
    with pytest.raises(ValueError):
        AVLTree().minimum()
    with pytest.raises(ValueError):
        AVLTree().maximum()


def test_run_queries():
    script = ["5", "I 1", "I 3", "K 2", "C 3", "K 5"]
    assert run_queries(script) == ["3", "1", "invalid"]


def test_run_queries_after_delete():
    script = ["4", "I 7", "D 7", "K 1", "C 10"]
    assert run_queries(script) == ["invalid", "0"]


def test_run_queries_truncated():
    with pytest.raises(ValueError):
        run_queries(["3", "I 1"])


def test_main_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("3\nI 4\nI 2\nK 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n"