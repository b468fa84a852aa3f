import re
from typing import Tuple

from flashgen.domain.errors import (
    AIClientError,
    ConfigurationError,
    MissingCredentialError,
    ParsingError,
    RequestValidationError,
)

# user-facing messages
ERRORS = {
    "method_not_allowed": "Method Not Allowed",
    "missing_key": "Server API Key is missing",
    "bad_config": "Server configuration error",
    "invalid_key": "Server API Key is invalid or expired. Please contact the administrator.",
    "rate_limited": "The AI service is busy right now (quota or rate limit reached). Please try again later.",
    "invalid_request": "Invalid request format",
}

RATE_LIMIT_PATTERN = re.compile(r"quota|429|rate limit", re.IGNORECASE)
INVALID_KEY_MARKER = "API key not valid"


def map_exception(exc: Exception) -> Tuple[int, str]:
    """
    Translate any exception raised while handling a request into
    (status_code, user-facing message).

    Configuration problems never echo the exception text, so a credential
    cannot end up in a response body.
    """
    if isinstance(exc, MissingCredentialError):
        return 500, ERRORS["missing_key"]
    if isinstance(exc, ConfigurationError):
        return 500, ERRORS["bad_config"]
    if isinstance(exc, RequestValidationError):
        return 400, str(exc) or ERRORS["invalid_request"]
    if isinstance(exc, ParsingError):
        return 500, str(exc)

    message = str(exc)
    if isinstance(exc, AIClientError):
        if RATE_LIMIT_PATTERN.search(message):
            return 429, ERRORS["rate_limited"]
        if INVALID_KEY_MARKER in message:
            return 500, ERRORS["invalid_key"]
    return 500, f"Server Error: {message}"
