from pathlib import Path

import pytest

from src.visualizer.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    VisualizerConfig,
    load_config_file,
    parse_bool,
    parse_log_level,
)

# Test data for valid configurations
VALID_CONFIG = """
# Visualizer configuration
host = 0.0.0.0
port = 8888
debug = yes
log_level = debug
starter_words = {starter_words}
"""

MISSING_PORT_CONFIG = """
host = 127.0.0.1
debug = false
"""

INVALID_BOOL_CONFIG = """
port = 8888
debug = maybe
"""

INVALID_PORT_CONFIG = """
port = abc
"""

INVALID_LOG_LEVEL_CONFIG = """
port = 8888
log_level = loud
"""


@pytest.fixture
def starter_words_file(tmp_path):
    words_file = tmp_path / "words.txt"
    words_file.write_text("apple\n\n  banana  \ncherry\n")
    return words_file


# Test parse_bool function
@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("True", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("FALSE", False),
        ("0", False),
        ("no", False),
    ],
)
def test_parse_bool_valid(value, expected):
    """Test valid boolean values."""
    assert parse_bool("test_key", value) == expected


@pytest.mark.parametrize("value", ["maybe", "2", "yess", "tru", "invalid"])
def test_parse_bool_invalid(value):
    """Test invalid boolean values."""
    with pytest.raises(ConfigBoolParsingError) as excinfo:
        parse_bool("test_key", value)
    assert "Invalid boolean value for key 'test_key'" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [("info", "INFO"), (" Debug ", "DEBUG"), ("WARNING", "WARNING")],
)
def test_parse_log_level_valid(value, expected):
    assert parse_log_level(value) == expected


def test_parse_log_level_invalid():
    with pytest.raises(ValueError):
        parse_log_level("loud")


# Test VisualizerConfig class
def test_visualizer_config_defaults():
    """Test VisualizerConfig initialization and defaults."""
    config = VisualizerConfig(port=5000)

    assert config.port == 5000
    assert config.host == "127.0.0.1"
    assert config.debug is False
    assert config.log_level == "INFO"
    assert config.starter_words_path is None
    assert config.load_starter_words() is None


def test_visualizer_config_repr(starter_words_file):
    """Test the string representation of VisualizerConfig."""
    config = VisualizerConfig(
        port=8888,
        debug=True,
        starter_words_path=starter_words_file,
    )

    repr_str = repr(config)
    assert "Visualizer configuration settings" in repr_str
    assert "Used port number: 8888" in repr_str
    assert "Debug mode: YES" in repr_str
    assert str(starter_words_file) in repr_str


def test_load_starter_words(starter_words_file):
    config = VisualizerConfig(port=5000, starter_words_path=starter_words_file)
    assert config.load_starter_words() == ["apple", "banana", "cherry"]


# Test load_config_file function
def test_load_valid_config(tmp_path, starter_words_file):
    """Test loading a valid configuration file."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        VALID_CONFIG.format(starter_words=starter_words_file),
    )

    config = load_config_file(config_path)

    assert config.host == "0.0.0.0"
    assert config.port == 8888
    assert config.debug is True
    assert config.log_level == "DEBUG"
    assert config.starter_words_path == starter_words_file


def test_load_config_relative_starter_words(tmp_path, starter_words_file):
    """Test that relative paths are resolved against the config file."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(VALID_CONFIG.format(starter_words="words.txt"))

    config = load_config_file(config_path)

    assert config.starter_words_path == tmp_path / "words.txt"


def test_load_config_defaults(tmp_path):
    """Test that only the port is required."""
    config_path = tmp_path / "config.txt"
    config_path.write_text("port = 5050\n")

    config = load_config_file(config_path)

    assert config.port == 5050
    assert config.host == "127.0.0.1"
    assert config.debug is False
    assert config.log_level == "INFO"
    assert config.starter_words_path is None


def test_load_config_missing_file():
    """Test loading a configuration from a non-existent file."""
    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(Path("/non/existent/path"))
    assert "Missing required configuration file" in str(excinfo.value)


def test_load_config_missing_port(tmp_path):
    """Test configuration with a missing required key."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(MISSING_PORT_CONFIG)

    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_config_file(config_path)
    assert "Missing required configuration: 'port'" in str(excinfo.value)


def test_load_config_invalid_bool(tmp_path):
    """Test configuration with an invalid boolean value."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_BOOL_CONFIG)

    with pytest.raises(ConfigBoolParsingError) as excinfo:
        load_config_file(config_path)
    assert "Invalid boolean value for key 'debug'" in str(excinfo.value)


def test_load_config_invalid_port(tmp_path):
    """Test configuration with an invalid port value."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_PORT_CONFIG)

    with pytest.raises(ValueError):
        load_config_file(config_path)


def test_load_config_invalid_log_level(tmp_path):
    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_LOG_LEVEL_CONFIG)

    with pytest.raises(ValueError) as excinfo:
        load_config_file(config_path)
    assert "Invalid log level 'loud'" in str(excinfo.value)


def test_load_config_missing_starter_words_file(tmp_path):
    """Test that FileNotFoundError is raised if the word file is missing."""
    non_existent = tmp_path / "non_existent.txt"
    config_path = tmp_path / "config.txt"
    config_path.write_text(f"port = 8888\nstarter_words = {non_existent}\n")

    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(config_path)
    assert (
        f"The required file {non_existent} "
        "doesn't exist" in str(excinfo.value)
    )


def test_load_config_comments_case_and_malformed_lines(tmp_path):
    """Test that comments and malformed lines are ignored and keys are
    case-insensitive.
    """
    config_content = """
    # This is a comment
    PORT = 9999
    invalid_line_without_equals
    DEBUG = 1
    # Another comment
    Host = localhost
    """

    config_path = tmp_path / "config.txt"
    config_path.write_text(config_content)

    config = load_config_file(config_path)

    assert config.port == 9999
    assert config.debug is True
    assert config.host == "localhost"
