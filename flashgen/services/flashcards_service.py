import json
from typing import List, Optional

from pydantic import ValidationError

from flashgen.domain.errors import ParsingError
from flashgen.domain.models import FlashcardSet, GenerationRequest
from flashgen.services.ai_client import TextGenerator
from flashgen.services.extractors import FORMAT_ERROR_MESSAGE, NonGreedyArrayExtractor, StructuredExtractor
from flashgen.services.prompts import DEFAULT_MAX_CONTEXT_CHARS, build_flashcards_prompt, truncate_context
from fg_utils.logger_utils import logger


class FlashcardService:
    """Turns a GenerationRequest into flashcards with a single model call."""

    def __init__(
        self,
        text_generator: TextGenerator,
        extractor: Optional[StructuredExtractor] = None,
        max_context_chars: int = DEFAULT_MAX_CONTEXT_CHARS,
    ):
        self.text_generator = text_generator
        self.extractor = extractor or NonGreedyArrayExtractor()
        self.max_context_chars = max_context_chars

    def generate_flashcards(self, req: GenerationRequest) -> List[dict]:
        """
        1. Truncate the context and build the prompt.
        2. Call the text generator once.
        3. Extract the JSON array from the reply and decode it.

        A reply without an array, or with an array of the wrong shape, raises
        ParsingError. A substring that is not valid JSON raises
        json.JSONDecodeError unchanged.
        """
        context = truncate_context(req.context, self.max_context_chars)
        if len(context) < len(req.context):
            logger.info(f"Context truncated from {len(req.context)} to {len(context)} chars")

        prompt = build_flashcards_prompt(
            context, is_file=req.isFile, lang=req.lang, card_count=req.cardCount
        )
        logger.info(
            f"Generating {req.cardCount} flashcards (isFile={req.isFile}, lang={req.lang})"
        )

        raw_text = self.text_generator.generate(prompt)
        logger.debug(f"Raw AI response: {raw_text[:400]}")

        json_string = self.extractor.extract(raw_text)
        cards_data = json.loads(json_string)

        try:
            card_set = FlashcardSet.model_validate(cards_data)
        except ValidationError as e:
            logger.error(f"AI returned an array of the wrong shape: {e}")
            raise ParsingError(
                f"{FORMAT_ERROR_MESSAGE}: expected an array of {{front, back}} objects."
            ) from e

        cards = card_set.to_list()
        logger.info(f"Successfully generated {len(cards)} flashcards")
        return cards
