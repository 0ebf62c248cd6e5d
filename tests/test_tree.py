from algolab.tree import TreeNode, build_tree, format_levels, level_order

EXAMPLE = [4, 1, 6, 0, 2, 5, 7, -1, -1, -1, 3, -1, -1, -1, 8]


def _present(levels):
    return [v for level in levels for v in level if v != -1]


def test_build_tree_root_and_children():
    root = build_tree(EXAMPLE)
    assert root.val == EXAMPLE[0]
    assert root.left.val == EXAMPLE[1]
    assert root.right.val == EXAMPLE[2]


def test_level_order_keeps_all_values():
    levels = level_order(build_tree(EXAMPLE))
    assert levels[0] == [EXAMPLE[0]]
    assert _present(levels) == [v for v in EXAMPLE if v != -1]


def test_level_order_last_level_is_all_missing():
    levels = level_order(build_tree(EXAMPLE))
    assert all(v == -1 for v in levels[-1])
    assert all(len(b) == 2 * sum(1 for v in a if v != -1) for a, b in zip(levels, levels[1:]))


def test_none_marks_missing_too():
    with_none = [v if v != -1 else None for v in EXAMPLE]
    assert level_order(build_tree(with_none)) == level_order(build_tree(EXAMPLE))


def test_children_of_missing_parent_are_dropped():
    root = build_tree([1, -1, 2, 3, 4])
    assert root.left is None
    assert _present(level_order(root)) == [1, 2]


def test_empty_tree():
    assert build_tree([]) is None
    assert level_order(None) == []
    assert format_levels(None) == ""


def test_single_missing_root():
    assert build_tree([-1]) is None


def test_format_levels_matches_level_order():
    root = build_tree(EXAMPLE)
    lines = format_levels(root).split("\n")
    levels = level_order(root)
    assert lines[0] == "4"
    assert [list(map(int, line.split())) for line in lines] == levels


def test_manual_tree():
    root = TreeNode(1, TreeNode(2), None)
    assert _present(level_order(root)) == [1, 2]