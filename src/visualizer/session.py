"""Handle visualizer requests against a shared trie."""

import logging
import threading
import time
from collections.abc import Iterable
from typing import Any, Callable, Union

from src.custom_data_structures.Trie.Trie import StringTrie

from .layout import (
    calculate_positions,
    canvas_size,
    node_id_for,
    traverse_trie,
)
from .logger import log_operation

STARTER_WORDS = (
    "gas",
    "garlic",
    "globe",
    "glow",
    "jane",
    "jazz",
    "joke",
    "passive",
    "pale",
    "poke",
    "port",
)

SEARCH_TYPES = ("word", "prefix")


class OperationResult:
    """Outcome of one visualizer operation."""

    def __init__(
        self,
        operation: str,
        word: str,
        success: bool,
        message: str,
        path: Union[list[str], None] = None,
        pruned: Union[list[str], None] = None,
    ) -> None:
        """Initialize the result.

        Args:
            operation (str): "insert", "search", "delete" or "reset".
            word (str): The normalized input.
            success (bool): The boolean the trie reported.
            message (str): Feedback shown to the user.
            path (list[str], optional): Node ids to highlight.
            pruned (list[str], optional): Node ids removed by a delete,
            deepest first.

        """
        self.operation = operation
        self.word = word
        self.success = success
        self.message = message
        self.path = path or []
        self.pruned = pruned or []

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-serializable dictionary."""
        return {
            "operation": self.operation,
            "word": self.word,
            "success": self.success,
            "message": self.message,
            "path": list(self.path),
            "pruned": list(self.pruned),
        }

    def __repr__(self) -> str:
        return (
            f"OperationResult(operation={self.operation!r}, "
            f"word={self.word!r}, success={self.success})"
        )


def normalize(word: str) -> str:
    """Trim and lower-case user input before it reaches the trie."""
    return word.strip().lower()


def build_path_forward(word: str) -> list[str]:
    """Return the node ids from the root down to the end of `word`.

    Args:
        word (str): The normalized word.

    Returns:
        list[str]: ["root", "root-<c1>", "root-<c1>-<c2>", ...].

    """
    return [node_id_for(word[:index]) for index in range(len(word) + 1)]


class TrieSession:
    """The trie shown in the browser, plus the rules for changing it.

    Every call into the trie happens under one lock, so concurrent
    requests never see a half-applied insert or delete.
    """

    def __init__(
        self,
        starter_words: Union[Iterable[str], None] = STARTER_WORDS,
    ) -> None:
        self.trie = StringTrie()
        self._lock = threading.Lock()
        for word in starter_words or ():
            word = normalize(word)
            if word:
                self.trie.insert(word)
        logging.info(
            "Trie session initialized with %d starter words.",
            len(self.trie),
        )

    def _timed(
        self,
        operation: str,
        word: str,
        call: Callable[[str], Any],
    ) -> Any:
        """Run one trie call under the lock and log how long it took."""
        start_time = time.perf_counter()
        with self._lock:
            result = call(word)
        duration = (time.perf_counter() - start_time) * 1000
        log_operation(operation, word, bool(result), duration)
        return result

    def insert(self, word: str) -> OperationResult:
        """Insert a word unless it is blank or already stored.

        Args:
            word (str): Raw user input.

        Returns:
            OperationResult: The outcome and the path of the new word.

        """
        if not word.strip():
            return OperationResult(
                "insert",
                "",
                False,
                "Please enter a word to insert",
            )

        word = normalize(word)

        with self._lock:
            if self.trie.search_word(word):
                return OperationResult(
                    "insert",
                    word,
                    False,
                    f'"{word}" already exists in the Trie!',
                )

            start_time = time.perf_counter()
            self.trie.insert(word)
            duration = (time.perf_counter() - start_time) * 1000
        log_operation("insert", word, True, duration)

        return OperationResult(
            "insert",
            word,
            True,
            f"{word} has been inserted into the Trie!",
            path=build_path_forward(word),
        )

    def search(self, word: str, kind: str = "word") -> OperationResult:
        """Look a word or a prefix up.

        Args:
            word (str): Raw user input.
            kind (str): "word" for an exact match, "prefix" for a
            prefix match.

        Raises:
            ValueError: If `kind` is not one of SEARCH_TYPES.

        Returns:
            OperationResult: The outcome; the path is set only when found.

        """
        if kind not in SEARCH_TYPES:
            raise ValueError(
                f"Invalid search type '{kind}'. "
                f"Expected one of: {', '.join(SEARCH_TYPES)}.",
            )

        if not word.strip():
            return OperationResult(
                "search",
                "",
                False,
                "Please enter a word to search",
            )

        word = normalize(word)

        if kind == "word":
            found = self._timed("search_word", word, self.trie.search_word)
            message = (
                f'"{word}" found in the Trie'
                if found
                else f'"{word}" not found in the Trie'
            )
        else:
            found = self._timed("starts_with", word, self.trie.starts_with)
            message = (
                f'"{word}" is a prefix in the Trie'
                if found
                else f'"{word}" not a prefix in the Trie'
            )

        return OperationResult(
            "search",
            word,
            found,
            message,
            path=build_path_forward(word) if found else None,
        )

    def delete(self, word: str) -> OperationResult:
        """Delete a stored word and report which nodes were pruned.

        Args:
            word (str): Raw user input.

        Returns:
            OperationResult: The outcome, the path that was walked and
            the ids of the removed nodes, deepest first.

        """
        if not word.strip():
            return OperationResult(
                "delete",
                "",
                False,
                "Please enter a word to delete from Trie",
            )

        word = normalize(word)

        start_time = time.perf_counter()
        with self._lock:
            pruned = [
                node_id_for(prefix)
                for prefix in self.trie.prunable_path(word)
            ]
            deleted = self.trie.delete(word)
        duration = (time.perf_counter() - start_time) * 1000
        log_operation("delete", word, deleted, duration)

        if not deleted:
            return OperationResult(
                "delete",
                word,
                False,
                f'"{word}" is not a complete word in the Trie!',
            )

        return OperationResult(
            "delete",
            word,
            True,
            f'"{word}" successfully deleted from the Trie!',
            path=build_path_forward(word),
            pruned=pruned,
        )

    def reset(self) -> OperationResult:
        """Remove every word from the trie."""
        with self._lock:
            self.trie.clear()
        logging.info("Trie session reset.")
        return OperationResult("reset", "", True, "Trie has been reset!")

    def prefix_matches(self, prefix: str) -> list[str]:
        """Return the sorted stored words starting with `prefix`.

        Args:
            prefix (str): Raw user input.

        Returns:
            list[str]: Matching words; empty for blank input.

        """
        if not prefix.strip():
            return []
        with self._lock:
            matches = self.trie.words_with_prefix(normalize(prefix))
        return sorted(matches)

    def words(self) -> list[str]:
        """Return every stored word, sorted."""
        with self._lock:
            return sorted(self.trie)

    def snapshot(self) -> dict[str, Any]:
        """Return everything the page needs to draw the current trie.

        Returns:
            dict: The sorted words, the word and node counts, the
            positioned nodes and the canvas size.

        """
        with self._lock:
            words = sorted(self.trie)
            nodes = calculate_positions(traverse_trie(self.trie.get_root()))
        canvas = canvas_size(nodes)
        return {
            "words": words,
            "word_count": len(words),
            "node_count": len(nodes),
            "nodes": [node.to_dict() for node in nodes],
            "canvas": canvas.to_dict(),
        }
