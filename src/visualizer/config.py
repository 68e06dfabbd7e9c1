"""Configuration parser for the trie visualizer."""

import logging
from pathlib import Path
from typing import Union, cast

DEFAULT_HOST = "127.0.0.1"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings
    is not provided.
    """


class VisualizerConfig:
    """A class to save the visualizer's configuration settings."""

    def __init__(
        self,
        port: int,
        host: str = DEFAULT_HOST,
        debug: bool = False,
        log_level: str = DEFAULT_LOG_LEVEL,
        starter_words_path: Union[Path, None] = None,
    ) -> None:
        """Initialize the visualizer configuration.

        Args:
            port (int): The port number the web app will listen to.
            host (str): The interface the web app binds to.
            debug (bool): Whether Flask runs in debug mode.
            log_level (str): Name of the logging level, e.g. "INFO".
            starter_words_path (Path, optional): A newline-separated
            word file used to seed the trie instead of the built-in list.

        """
        self.port = port
        self.host = host
        self.debug = debug
        self.log_level = log_level
        self.starter_words_path = starter_words_path

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Visualizer configuration settings:
                Host: {self.host}
                Used port number: {self.port}
                Debug mode: {"YES" if self.debug else "NO"}
                Log level: {self.log_level}
                Starter words: {self.starter_words_path or "built-in"}
            """

    def load_starter_words(self) -> Union[list[str], None]:
        """Read the starter words file, if one is configured.

        Returns:
            list[str] | None: The non-blank lines of the file, or None
            when the built-in starter words should be used.

        """
        if self.starter_words_path is None:
            return None

        with self.starter_words_path.open("r", encoding="utf-8") as file:
            return [line.strip() for line in file if line.strip()]


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_log_level(val: str) -> str:
    """Validate a logging level name.

    Args:
        val (str): The level name from the configuration file.

    Raises:
        ValueError: If `val` is not a standard logging level.

    Returns:
        str: The upper-cased level name.

    """
    level = val.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"Invalid log level '{val}' in the configuration file.",
        )
    return level


def load_config_file(config_file_path: Path) -> VisualizerConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        FileNotFoundError: If a file does not exist.
        ValueError: If the port or log level is invalid.

    Returns:
        VisualizerConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    port = None
    host = DEFAULT_HOST
    debug = False
    log_level = DEFAULT_LOG_LEVEL
    starter_words_path: Union[Path, None] = None

    # Open and read the configuration file line by line
    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            # Split the line into key and value
            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "port":
                port = int(value)
            elif key == "host":
                host = value
            elif key == "debug":
                debug = parse_bool("debug", value)
            elif key == "log_level":
                log_level = parse_log_level(value)
            elif key == "starter_words":
                starter_words_path = Path(value)
                # Relative paths are taken from the config file location
                if not starter_words_path.is_absolute():
                    starter_words_path = (
                        config_file_path.parent / starter_words_path
                    )

    if port is None:
        raise ConfigNotFoundError(
            "Missing required configuration: 'port'. "
            "Please ensure the config file includes a valid line for 'PORT'.",
        )

    if starter_words_path is not None and not starter_words_path.exists():
        raise FileNotFoundError(
            f"The required file {starter_words_path} doesn't exist.",
        )

    return VisualizerConfig(
        port=cast("int", port),
        host=host,
        debug=debug,
        log_level=log_level,
        starter_words_path=starter_words_path,
    )
