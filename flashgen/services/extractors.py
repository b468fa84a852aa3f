"""
Best-effort extraction of a JSON array from free-text model output.

Models wrap their answer in prose, code fences or trailing commentary even when
told not to. An extractor finds the array-shaped substring and hands it back
unparsed; decoding is the caller's job.
"""
import re
from typing import Protocol

from flashgen.domain.errors import ConfigurationError, ParsingError
from fg_utils.logger_utils import logger

FORMAT_ERROR_MESSAGE = "AI output format error"


class StructuredExtractor(Protocol):
    def extract(self, text: str) -> str:
        """Return the first JSON array substring of `text` or raise ParsingError."""
        ...


class NonGreedyArrayExtractor:
    """First '[' up to the first ']' after it."""

    pattern = re.compile(r"\[[\s\S]*?\]")

    def extract(self, text: str) -> str:
        match = self.pattern.search(text or "")
        if match is None:
            logger.warning(f"No JSON array found in AI output ({len(text or '')} chars)")
            raise ParsingError(f"{FORMAT_ERROR_MESSAGE}: no JSON array found in the response.")
        return match.group(0)


class BalancedArrayExtractor:
    """
    First '[' up to its matching ']'.

    Brackets inside JSON string literals are ignored, so nested arrays and
    values such as "a[1]" survive.
    """

    def extract(self, text: str) -> str:
        text = text or ""
        start = text.find("[")
        if start == -1:
            logger.warning(f"No JSON array found in AI output ({len(text)} chars)")
            raise ParsingError(f"{FORMAT_ERROR_MESSAGE}: no JSON array found in the response.")

        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue

            if char == '"':
                in_string = True
            elif char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
                if depth == 0:
                    return text[start:index + 1]

        logger.warning(f"Unterminated JSON array in AI output ({len(text)} chars)")
        raise ParsingError(f"{FORMAT_ERROR_MESSAGE}: the JSON array in the response is incomplete.")


EXTRACTORS = {
    "non_greedy": NonGreedyArrayExtractor,
    "balanced": BalancedArrayExtractor,
}


def make_extractor(name: str) -> StructuredExtractor:
    try:
        return EXTRACTORS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown extractor '{name}'. Expected one of: {', '.join(sorted(EXTRACTORS))}."
        ) from None
