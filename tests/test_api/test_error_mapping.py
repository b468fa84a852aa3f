import json

import pytest

from flashgen.api.error_mapping import map_exception
from flashgen.domain.errors import (
    AIClientError,
    ConfigurationError,
    MissingCredentialError,
    ParsingError,
    RequestValidationError,
)


def test_missing_credential_is_generic():
    status, message = map_exception(MissingCredentialError("GEMINI_API_KEY=secret-value"))
    assert status == 500
    assert message == "Server API Key is missing"
    assert "secret-value" not in message


def test_other_configuration_error():
    assert map_exception(ConfigurationError("Unsupported AI provider: x")) == (500, "Server configuration error")


def test_request_validation_error():
    assert map_exception(RequestValidationError("Invalid request format: context")) == (
        400, "Invalid request format: context"
    )


def test_parsing_error_keeps_format_message():
    status, message = map_exception(ParsingError("AI output format error: no JSON array found in the response."))
    assert status == 500
    assert message.startswith("AI output format error")


@pytest.mark.parametrize("text", [
    "429 Too Many Requests",
    "Quota exceeded for metric",
    "RATE LIMIT hit",
])
def test_rate_limit_detection(text):
    status, message = map_exception(AIClientError(text))
    assert status == 429
    assert "try again later" in message


def test_invalid_key_detection():
    status, message = map_exception(AIClientError("400 API key not valid. Please pass a valid API key."))
    assert status == 500
    assert "invalid" in message


def test_rate_limit_wins_over_invalid_key():
    status, _ = map_exception(AIClientError("API key not valid or quota exceeded"))
    assert status == 429


def test_json_decode_error_is_generic():
    try:
        json.loads("[oops]")
    except json.JSONDecodeError as e:
        status, message = map_exception(e)
    assert status == 500
    assert message.startswith("Server Error: Expecting value")


@pytest.mark.parametrize("exc", [
    ValueError("Expecting ',' delimiter: line 1 column 430 (char 429)"),
    RuntimeError("local quota file unreadable"),
    KeyError("API key not valid"),
])
def test_pattern_checks_only_apply_to_upstream_errors(exc):
    status, message = map_exception(exc)
    assert status == 500
    assert message.startswith("Server Error: ")
