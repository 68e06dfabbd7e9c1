"""Flask web application for visualizing a trie in the browser.

The page draws the current trie as an SVG and offers forms to insert,
search for and delete words. The JSON routes under /api/ perform the
operations and return the new state so the page can animate it.
"""

from typing import Any, Union

from flask import Flask, current_app, jsonify, render_template, request

from src.visualizer.config import VisualizerConfig
from src.visualizer.logger import setup_logging
from src.visualizer.session import STARTER_WORDS, TrieSession, normalize

SESSION_KEY = "trie_session"
DEFAULT_PORT = 5000


def get_session() -> TrieSession:
    """Return the trie session bound to the running app."""
    return current_app.extensions[SESSION_KEY]


def _read_word(payload: dict[str, Any]) -> Union[str, None]:
    """Extract the "word" field from a JSON body, if it is a string."""
    word = payload.get("word")
    return word if isinstance(word, str) else None


def _bad_request(message: str) -> Any:
    return jsonify({"error": message}), 400


def create_app(config: Union[VisualizerConfig, None] = None) -> Flask:
    """Build the Flask application around a fresh trie session.

    Args:
        config (VisualizerConfig, optional): Settings to apply. When
        omitted, the built-in starter words and default settings are used.

    Returns:
        Flask: The configured application.

    """
    app = Flask(__name__)

    starter_words = None
    if config is not None:
        app.config["VISUALIZER"] = config
        starter_words = config.load_starter_words()

    app.extensions[SESSION_KEY] = TrieSession(
        starter_words if starter_words is not None else STARTER_WORDS,
    )

    @app.route("/")
    def index() -> str:
        """Render the visualizer page.

        Returns:
            str: Rendered HTML for the index page.

        """
        return render_template("index.html", trie=get_session().snapshot())

    @app.route("/api/trie")
    def show_trie() -> Any:
        """Return the words and positioned nodes of the current trie."""
        return jsonify(get_session().snapshot())

    @app.route("/api/insert", methods=["POST"])
    def insert_word() -> Any:
        """Insert the posted word."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object body.")
        word = _read_word(payload)
        if word is None:
            return _bad_request("Missing required field: 'word'.")

        session = get_session()
        result = session.insert(word).to_dict()
        result["trie"] = session.snapshot()
        return jsonify(result)

    @app.route("/api/search", methods=["POST"])
    def search_word() -> Any:
        """Search for the posted word, either as a word or as a prefix."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object body.")
        word = _read_word(payload)
        if word is None:
            return _bad_request("Missing required field: 'word'.")

        try:
            result = get_session().search(word, payload.get("type", "word"))
        except ValueError as e:
            return _bad_request(str(e))
        return jsonify(result.to_dict())

    @app.route("/api/delete", methods=["POST"])
    def delete_word() -> Any:
        """Delete the posted word and prune the nodes it leaves behind."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _bad_request("Expected a JSON object body.")
        word = _read_word(payload)
        if word is None:
            return _bad_request("Missing required field: 'word'.")

        session = get_session()
        result = session.delete(word).to_dict()
        result["trie"] = session.snapshot()
        return jsonify(result)

    @app.route("/api/reset", methods=["POST"])
    def reset_trie() -> Any:
        """Remove every word from the trie."""
        session = get_session()
        result = session.reset().to_dict()
        result["trie"] = session.snapshot()
        return jsonify(result)

    @app.route("/api/prefix")
    def prefix_matches() -> Any:
        """List the stored words starting with the `prefix` argument."""
        prefix = request.args.get("prefix", "")
        matches = get_session().prefix_matches(prefix)
        return jsonify(
            {
                "prefix": normalize(prefix),
                "matches": matches,
                "count": len(matches),
            },
        )

    @app.errorhandler(500)
    def internal_error(error: Exception) -> Any:
        current_app.logger.error("Request failed", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    return app


if __name__ == "__main__":
    setup_logging()
    create_app().run(port=DEFAULT_PORT, debug=True)
