"""This module represents the implementation of a Trie structure used by
the visualizer for inserting, searching and deleting words.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Union


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children", "is_end_of_word")

    def __init__(self) -> None:
        """Initialize a new Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances.
            is_end_of_word (bool): Indicates whether this
            node marks the end of a valid word in the Trie.

        """
        # A dictionary to store child nodes (character: TrieNode)
        self.children: dict[str, TrieNode] = {}
        # Boolean flag to indicate if this node marks the end of a word
        self.is_end_of_word = False


class TrieNodeView:
    """Read-only handle over a TrieNode, used for rendering."""

    __slots__ = ("_node",)

    def __init__(self, node: TrieNode) -> None:
        object.__setattr__(self, "_node", node)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("TrieNodeView is read-only")

    @property
    def is_end_of_word(self) -> bool:
        """bool: Whether a stored word ends at this node."""
        return self._node.is_end_of_word

    @property
    def children(self) -> Mapping[str, "TrieNodeView"]:
        """Mapping[str, TrieNodeView]: Read-only child views by character."""
        return MappingProxyType(
            {
                char: TrieNodeView(child)
                for char, child in self._node.children.items()
            },
        )

    def __repr__(self) -> str:
        return (
            f"TrieNodeView(children={list(self._node.children)}, "
            f"is_end_of_word={self._node.is_end_of_word})"
        )


class StringTrie:
    """Represents the string trie data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the Trie."""
        self.root = TrieNode()

    def _find_node(self, word: str) -> Union[TrieNode, None]:
        """Walk the path spelled by `word`.

        Args:
            word (str): The characters to follow from the root.

        Returns:
            Union[TrieNode, None]: The node reached, or None if the path
            breaks off before the last character.

        """
        node = self.root
        for char in word:
            # If the character is not found, the path does not exist
            if char not in node.children:
                return None
            node = node.children[char]
        return node

    def insert(self, word: str) -> None:
        """Insert a new word into the String Trie structure.

        Args:
            word (str): The word to be inserted into the Trie structure.

        """
        node = self.root
        for char in word:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode()
            # Move to the child node
            node = node.children[char]
        # Mark the end of the word
        node.is_end_of_word = True

    def search_word(self, word: str) -> bool:
        """Check for the existence of a given word in the String
        Trie structure.

        Args:
            word (str): The word to search for in the Trie structure.

        Returns:
            bool: True if the exact `word` is present
            in the trie as a complete word, False otherwise.

        """
        node = self._find_node(word)
        # Return True only if the current node marks the end of a word
        return node is not None and node.is_end_of_word

    def starts_with(self, prefix: str) -> bool:
        """Check whether any path in the trie spells `prefix`.

        Args:
            prefix (str): The prefix to look for.

        Returns:
            bool: True if the full prefix path exists, whether or not
            a word ends there.

        """
        return self._find_node(prefix) is not None

    def delete(self, word: str) -> bool:
        """Remove a word and prune the nodes it alone was keeping alive.

        The descent records every (parent, char) edge on a stack; the
        unwind pops them from the deepest one up and unlinks childless,
        non-terminal nodes until an ancestor is still needed.

        Args:
            word (str): The word to remove.

        Returns:
            bool: True if `word` was stored and has been removed,
            False if it was missing or only a prefix of other words.

        """
        stack: list[tuple[TrieNode, str]] = []
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            stack.append((node, char))
            node = child

        # The path exists but only as a prefix of longer words
        if not node.is_end_of_word:
            return False

        node.is_end_of_word = False
        should_delete = not node.children

        while stack and should_delete:
            parent, char = stack.pop()
            del parent.children[char]
            should_delete = not parent.children and not parent.is_end_of_word

        return True

    def prunable_path(self, word: str) -> list[str]:
        """List the prefixes whose nodes `delete(word)` would remove.

        Args:
            word (str): The word that would be deleted.

        Returns:
            list[str]: Prefixes of `word`, longest first. Empty when the
            word is not stored or no node would be removed.

        """
        path: list[TrieNode] = [self.root]
        for char in word:
            child = path[-1].children.get(char)
            if child is None:
                return []
            path.append(child)

        if not path[-1].is_end_of_word:
            return []

        prefixes: list[str] = []
        # The root (index 0) is never removed
        for depth in range(len(word), 0, -1):
            node = path[depth]
            if depth == len(word):
                removable = not node.children
            else:
                # Its only child is the one being removed just below it
                removable = len(node.children) == 1 and not node.is_end_of_word
            if not removable:
                break
            prefixes.append(word[:depth])
        return prefixes

    def get_root(self) -> TrieNodeView:
        """Return a read-only view of the root for traversal.

        Returns:
            TrieNodeView: The view over the root node.

        """
        return TrieNodeView(self.root)

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Collect every stored word that starts with `prefix`.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: Matching words in depth-first order.

        """
        node = self._find_node(prefix)
        if node is None:
            return []
        return list(self._walk(node, list(prefix)))

    def _walk(self, node: TrieNode, path: list[str]) -> Iterator[str]:
        if node.is_end_of_word:
            yield "".join(path)
        for char, child in node.children.items():
            path.append(char)
            yield from self._walk(child, path)
            path.pop()

    def count_nodes(self) -> int:
        """Return the number of nodes in the trie, root included."""
        count = 0
        pending = [self.root]
        while pending:
            node = pending.pop()
            count += 1
            pending.extend(node.children.values())
        return count

    def clear(self) -> None:
        """Drop every stored word."""
        self.root = TrieNode()

    def __iter__(self) -> Iterator[str]:
        return self._walk(self.root, [])

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search_word(word)
