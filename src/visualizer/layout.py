"""Flatten a trie into positioned display records for the SVG view."""

from typing import Any

from src.custom_data_structures.Trie.Trie import TrieNodeView

VERTICAL_SPACING = 80
HORIZONTAL_SPACING = 60
TOP_MARGIN = 50
PADDING = 100
MIN_CANVAS_WIDTH = 800
MIN_CANVAS_HEIGHT = 600
ROOT_ID = "root"


class NodeData:
    """A trie node as the view sees it."""

    def __init__(
        self,
        node_id: str,
        char: str,
        x: float,
        y: float,
        is_end_of_word: bool,
    ) -> None:
        """Initialize a display record.

        Args:
            node_id (str): Path identifier such as "root-g-a-s".
            char (str): The edge character, or "root".
            x (float): Horizontal position.
            y (float): Vertical position.
            is_end_of_word (bool): Whether a stored word ends here.

        """
        self.id = node_id
        self.char = char
        self.x = x
        self.y = y
        self.is_end_of_word = is_end_of_word
        self.children: list[str] = []

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "char": self.char,
            "x": self.x,
            "y": self.y,
            "is_end_of_word": self.is_end_of_word,
            "children": list(self.children),
        }


class Canvas:
    """Size of the SVG drawing and the translation applied to its nodes."""

    def __init__(
        self,
        width: float,
        height: float,
        offset_x: float,
        offset_y: float,
    ) -> None:
        self.width = width
        self.height = height
        self.offset_x = offset_x
        self.offset_y = offset_y

    def to_dict(self) -> dict[str, float]:
        """Return the canvas as a JSON-serializable dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "offset_x": self.offset_x,
            "offset_y": self.offset_y,
        }


def node_id_for(word: str) -> str:
    """Return the display id of the node reached by `word`.

    Args:
        word (str): The characters on the path from the root.

    Returns:
        str: "root" followed by one "-<char>" per character.

    """
    return "-".join([ROOT_ID, *word])


def traverse_trie(root: TrieNodeView) -> list[NodeData]:
    """List every node in pre-order with its child ids.

    Args:
        root (TrieNodeView): Read-only view over the trie's root.

    Returns:
        list[NodeData]: One record per node, root first, with y set
        to depth * VERTICAL_SPACING and x left at 0.

    """
    nodes: list[NodeData] = []

    def traverse(
        node: TrieNodeView,
        char: str,
        path: str,
        depth: int,
    ) -> None:
        record = NodeData(
            path,
            char,
            0,
            depth * VERTICAL_SPACING,
            node.is_end_of_word,
        )
        nodes.append(record)

        for child_char, child in node.children.items():
            child_path = f"{path}-{child_char}"
            traverse(child, child_char, child_path, depth + 1)
            record.children.append(child_path)

    traverse(root, ROOT_ID, ROOT_ID, 0)
    return nodes


def calculate_positions(nodes: list[NodeData]) -> list[NodeData]:
    """Lay the tree out with leaves spread left to right.

    Each leaf takes the next HORIZONTAL_SPACING slot, each parent sits
    midway between its first and last child, and the whole tree is then
    shifted left by half its width.

    Args:
        nodes (list[NodeData]): Records from `traverse_trie`.

    Returns:
        list[NodeData]: The same records, positioned in place.

    """
    if not nodes:
        return nodes

    node_map = {node.id: node for node in nodes}

    def position_node(node_id: str, x: float, depth: int) -> float:
        node = node_map.get(node_id)
        if node is None:
            return x

        node.y = depth * VERTICAL_SPACING + TOP_MARGIN

        if not node.children:
            node.x = x
            return x + HORIZONTAL_SPACING

        child_x = x
        child_positions: list[float] = []
        for child_id in node.children:
            child = node_map.get(child_id)
            if child is not None:
                child_x = position_node(child_id, child_x, depth + 1)
                child_positions.append(child.x)

        if child_positions:
            node.x = (child_positions[0] + child_positions[-1]) / 2

        return child_x

    position_node(nodes[0].id, 0, 0)

    min_x = min(node.x for node in nodes)
    max_x = max(node.x for node in nodes)
    center_offset = -(max_x - min_x) / 2
    for node in nodes:
        node.x += center_offset

    return nodes


def canvas_size(nodes: list[NodeData]) -> Canvas:
    """Compute the SVG size and the offset that centers the tree.

    Args:
        nodes (list[NodeData]): Positioned records.

    Returns:
        Canvas: Width and height (at least 800x600) and the translation.

    """
    if not nodes:
        return Canvas(MIN_CANVAS_WIDTH, MIN_CANVAS_HEIGHT, 0, 0)

    min_x = min(node.x for node in nodes)
    max_x = max(node.x for node in nodes)
    min_y = min(node.y for node in nodes)
    max_y = max(node.y for node in nodes)

    width = max(max_x - min_x + PADDING, MIN_CANVAS_WIDTH)
    height = max(max_y - min_y + PADDING, MIN_CANVAS_HEIGHT)

    return Canvas(
        width,
        height,
        (width - (max_x - min_x)) / 2 - min_x,
        -min_y + TOP_MARGIN,
    )
