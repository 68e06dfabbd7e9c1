import pytest

from src.custom_data_structures.Trie.Trie import StringTrie
from src.visualizer.layout import (
    HORIZONTAL_SPACING,
    MIN_CANVAS_HEIGHT,
    MIN_CANVAS_WIDTH,
    TOP_MARGIN,
    VERTICAL_SPACING,
    calculate_positions,
    canvas_size,
    node_id_for,
    traverse_trie,
)


def build_trie(*words):
    trie = StringTrie()
    for word in words:
        trie.insert(word)
    return trie


@pytest.fixture
def nodes():
    trie = build_trie("ab", "ac", "d")
    return traverse_trie(trie.get_root())


def test_node_id_for():
    assert node_id_for("") == "root"
    assert node_id_for("gas") == "root-g-a-s"


def test_traverse_pre_order(nodes):
    assert [node.id for node in nodes] == [
        "root",
        "root-a",
        "root-a-b",
        "root-a-c",
        "root-d",
    ]
    assert [node.char for node in nodes] == ["root", "a", "b", "c", "d"]


def test_traverse_children_and_flags(nodes):
    by_id = {node.id: node for node in nodes}
    assert by_id["root"].children == ["root-a", "root-d"]
    assert by_id["root-a"].children == ["root-a-b", "root-a-c"]
    assert by_id["root-a"].is_end_of_word is False
    assert by_id["root-a-b"].is_end_of_word is True
    assert by_id["root-d"].is_end_of_word is True


def test_traverse_depth(nodes):
    by_id = {node.id: node for node in nodes}
    assert by_id["root"].y == 0
    assert by_id["root-a-c"].y == 2 * VERTICAL_SPACING


def test_traverse_empty_trie():
    nodes = traverse_trie(StringTrie().get_root())
    assert len(nodes) == 1
    assert nodes[0].id == "root"
    assert nodes[0].children == []


def test_calculate_positions(nodes):
    positioned = calculate_positions(nodes)
    by_id = {node.id: node for node in positioned}

    # Leaves at 0, 60, 120 before centering on a 120 wide tree
    assert by_id["root-a-b"].x == -HORIZONTAL_SPACING
    assert by_id["root-a-c"].x == 0
    assert by_id["root-d"].x == HORIZONTAL_SPACING
    # Parents sit between their first and last child
    assert by_id["root-a"].x == -HORIZONTAL_SPACING / 2
    assert by_id["root"].x == HORIZONTAL_SPACING / 4

    assert by_id["root"].y == TOP_MARGIN
    assert by_id["root-a-b"].y == 2 * VERTICAL_SPACING + TOP_MARGIN


def test_calculate_positions_single_node():
    positioned = calculate_positions(traverse_trie(StringTrie().get_root()))
    assert positioned[0].x == 0
    assert positioned[0].y == TOP_MARGIN


def test_calculate_positions_empty():
    assert calculate_positions([]) == []


def test_canvas_minimum_size(nodes):
    canvas = canvas_size(calculate_positions(nodes))
    assert canvas.width == MIN_CANVAS_WIDTH
    assert canvas.height == MIN_CANVAS_HEIGHT
    # Tree spans -60..60, centered in 800
    assert canvas.offset_x == (800 - 120) / 2 + 60
    assert canvas.offset_y == -TOP_MARGIN + TOP_MARGIN


def test_canvas_grows_with_tree():
    words = [chr(ord("a") + i) * 12 for i in range(20)]
    nodes = calculate_positions(traverse_trie(build_trie(*words).get_root()))
    canvas = canvas_size(nodes)

    span_x = 19 * HORIZONTAL_SPACING
    span_y = 12 * VERTICAL_SPACING
    assert canvas.width == span_x + 100
    assert canvas.height == span_y + 100


def test_to_dict(nodes):
    record = calculate_positions(nodes)[0].to_dict()
    assert set(record) == {
        "id",
        "char",
        "x",
        "y",
        "is_end_of_word",
        "children",
    }
    canvas = canvas_size(nodes).to_dict()
    assert set(canvas) == {"width", "height", "offset_x", "offset_y"}
