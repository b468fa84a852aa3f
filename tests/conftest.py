import pytest
from unittest.mock import MagicMock

from flashgen.app_factory import create_app
from flashgen.infrastructure.config import Settings


VALID_REPLY = '```json\n[{"front": "Q1", "back": "A1"}, {"front": "Q2", "back": "A2"}]\n```'


@pytest.fixture
def test_settings():
    """Settings with a fake Gemini credential, ignoring any local .env file."""
    return Settings(_env_file=None, GEMINI_API_KEY="test-gemini-key", FG_PROVIDER="gemini")


@pytest.fixture
def fake_generator():
    """A text generator double that returns a fenced JSON array."""
    generator = MagicMock()
    generator.generate.return_value = VALID_REPLY
    return generator


@pytest.fixture
def app(test_settings, fake_generator):
    """Create and configure a new app instance for each test."""
    app = create_app(settings=test_settings, text_generator=fake_generator)
    app.config.update({"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def keyless_client(fake_generator):
    """A test client for an app deployed without any AI credential."""
    settings = Settings(_env_file=None, GEMINI_API_KEY="", OPENAI_API_KEY="")
    app = create_app(settings=settings, text_generator=fake_generator)
    app.config.update({"TESTING": True})
    return app.test_client()
