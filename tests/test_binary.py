import pytest

from chaincoll.binary import BinaryNode
from chaincoll.common import TraverseDirection


def build_tree():
    root = BinaryNode()
    for value in (1, 2, 3, 4):
        root.insert_left(value)
    for value in (5, 6, 7):
        root.insert_right(value)
    return root


def test_insertions_chain_nodes():
    root = build_tree()
    assert root.left.data == 4
    assert root.left.left.data == 3
    assert root.left.left.left.data == 2
    assert root.left.left.left.left.data == 1
    assert root.right.data == 7
    assert root.right.right.data == 6
    assert root.right.right.right.data == 5
    assert root.left.left.parent is root.left


def test_traverse_depth_left_before_rotation():
    root = build_tree()
    assert list(root.traverse(TraverseDirection.DEPTH_LEFT)) == [
        None, 4, 3, 2, 1, 7, 6, 5,
    ]


def test_rotations():
    root = build_tree()
    root.right.rotate_left()
    root.right.rotate_left()
    with pytest.raises(ValueError):
        root.right.rotate_left()

    root.left.rotate_right()
    root.left.rotate_right()
    root.left.rotate_right()
    with pytest.raises(ValueError):
        root.left.rotate_right()

    assert root.left.data == 1
    assert root.left.right.data == 2
    assert root.left.right.right.data == 3
    assert root.left.right.right.right.data == 4
    assert root.right.data == 5
    assert root.right.left.data == 6
    assert root.right.left.left.data == 7

    assert list(root.traverse()) == [None, 1, 2, 3, 4, 5, 6, 7]


def test_rotation_fixes_parent_links():
    root = build_tree()
    new_top = root.right.rotate_left()
    assert new_top is root.right
    assert new_top.data == 6
    assert new_top.parent is root
    assert new_top.left.data == 7
    assert new_top.left.parent is new_top
    assert new_top.left.right is None


def test_rotate_moves_inner_child():
    top = BinaryNode("a")
    top.insert_right("b")
    top.right.insert_left("c")
    new_top = top.rotate_left()
    assert new_top.data == "b"
    assert new_top.parent is None
    assert top.right.data == "c"
    assert top.right.parent is top


def parse(expression):
    root = BinaryNode()
    for char in expression:
        root.insert_left(int(char) if char.isdigit() else char)
    return root


def test_expression_parse_and_rotate():
    result = parse("1+2")
    assert list(result.left.traverse()) == [2, "+", 1]
    result.left.rotate_right()
    assert result.left.data == "+"
    assert result.left.left.data == 1
    assert result.left.right.data == 2


def test_breadth_and_depth_orders():
    root = BinaryNode(0)
    left = root.insert_left(1)
    right = root.insert_right(2)
    left.insert_left(3)
    left.insert_right(4)
    right.insert_left(5)
    right.insert_right(6)
    assert list(root.traverse(TraverseDirection.DEPTH_LEFT)) == [0, 1, 3, 4, 2, 5, 6]
    assert list(root.traverse(TraverseDirection.DEPTH_RIGHT)) == [0, 2, 6, 5, 1, 4, 3]
    assert list(root.traverse(TraverseDirection.BREADTH_LEFT)) == [0, 1, 2, 3, 4, 5, 6]
    assert list(root.traverse(TraverseDirection.BREADTH_RIGHT)) == [0, 2, 1, 6, 5, 4, 3]


def test_invalid_direction():
    with pytest.raises(ValueError):
        BinaryNode(1).traverse(7)


def test_dump(capsys):
    root = BinaryNode(0)
    root.insert_left(1)
    root.insert_right(2)
    text = root.dump(str, 0)
    expected = (
        "0\n"
        "\t2\n\t\t<NULL>\n\t\t<NULL>\n"
        "\t1\n\t\t<NULL>\n\t\t<NULL>\n"
    )
    assert text == expected
    assert capsys.readouterr().out == expected


def test_dump_with_depth_and_format(capsys):
    node = BinaryNode(5)
    text = node.dump(lambda value: f"<{value}>", 1)
    assert text == "\t<5>\n\t\t<NULL>\n\t\t<NULL>\n"
    assert capsys.readouterr().out == text