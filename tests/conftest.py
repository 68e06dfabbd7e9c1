import pytest

from app import create_app
from src.visualizer.logger import teardown_logging


@pytest.fixture
def app():
    """A fresh application seeded with the built-in starter words."""
    flask_app = create_app()
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def detach_file_logging():
    """Remove any file handler a test installed on the root logger."""
    yield
    teardown_logging()
