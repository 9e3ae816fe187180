from __future__ import annotations

import pytest

from stylesweep.config import StylesweepConfig
from stylesweep.web.app import create_app


@pytest.fixture
def config():
    return StylesweepConfig(max_input_bytes=10_000)


@pytest.fixture
def app(config):
    """Create a Flask app for testing."""
    application = create_app(config=config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
