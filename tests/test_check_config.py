"""
Test the operator configuration check script's exit codes.
"""
import pytest

import check_config

CONFIG_VARS = [
    "GEMINI_API_KEY", "OPENAI_API_KEY", "FG_PROVIDER", "FG_GEMINI_MODEL",
    "FG_OPENAI_MODEL", "FG_BASE_URL", "FG_MAX_CONTEXT_CHARS", "FG_EXTRACTOR",
    "FG_CORS_ALLOW_AUTHORIZATION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each check without the developer's environment or .env file."""
    monkeypatch.chdir(tmp_path)
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


def test_gemini_key_set(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-real-key-value")
    assert check_config.main() == 0


def test_gemini_key_missing():
    assert check_config.main() == 1


def test_gemini_key_placeholder(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "your_gemini_key_here")
    assert check_config.main() == 1


def test_openai_provider_needs_openai_key(monkeypatch):
    monkeypatch.setenv("FG_PROVIDER", "openai")
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-real-key-value")
    assert check_config.main() == 1

    monkeypatch.setenv("OPENAI_API_KEY", "sk-real-key-value")
    assert check_config.main() == 0


def test_unknown_provider(monkeypatch):
    monkeypatch.setenv("FG_PROVIDER", "anthropic")
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-real-key-value")
    assert check_config.main() == 1


def test_unknown_extractor(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-real-key-value")
    monkeypatch.setenv("FG_EXTRACTOR", "greedy")
    assert check_config.main() == 1


def test_secret_is_masked(monkeypatch, capsys):
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-real-key-value")
    check_config.main()
    assert "AIza-real-key-value" not in capsys.readouterr().out
