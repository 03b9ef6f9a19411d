import pytest

from dsbasics.bst import BST, main

SAMPLE = (15, 8, 13, 16, 9, 7)


def _sample_tree():
    tree = BST(10)
    for value in SAMPLE:
        tree.insert(value)
    return tree


def test_render_sample_tree():
    expected = "\n".join(
        [
            "        16",
            "    15",
            "        13",
            "10",
            "        9",
            "    8",
            "        7",
        ]
    )
    assert _sample_tree().render() == expected


def test_contains_inserted_values():
    tree = _sample_tree()
    assert all(tree.contains(v) for v in (10, *SAMPLE))


def test_does_not_contain_missing_value():
    tree = _sample_tree()
    assert tree.contains(-9) is False
    assert -9 not in tree


def test_iteration_is_sorted():
    tree = _sample_tree()
    assert list(tree) == sorted([10, *SAMPLE])


def test_duplicate_goes_left():
    tree = BST(5)
    tree.insert(5)
    assert tree.root.left.value == 5
    assert tree.root.right is None


def test_structure_of_sample_tree():
    tree = _sample_tree()
    assert tree.root.value == 10
    assert tree.root.right.value == 15
    assert tree.root.left.value == 8
    assert tree.root.right.left.value == 13
    assert tree.root.left.right.value == 9


def test_empty_tree():
    tree = BST()
    assert tree.contains(1) is False
    assert tree.render() == ""
    tree.insert(3)
    assert tree.root.value == 3
    assert list(tree) == [3]


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [4, 3, 2, 1], [2, 2, 1, 3]])
def test_iteration_sorted_for_any_order(values):
    tree = BST()
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)


def test_main_prints_tree_and_lookup(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Tree does not contain value: -9" in out
    assert out.splitlines()[3] == "10"