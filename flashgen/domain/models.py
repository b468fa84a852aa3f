from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

MIN_CARDS = 4
MAX_CARDS = 10
DEFAULT_CARD_COUNT = 5
DEFAULT_LANG = "vi"


class GenerationRequest(BaseModel):
    """Request body for the flashcard generation endpoint."""
    context: str = Field(..., min_length=1, description="Topic, or text extracted from an uploaded document.")
    isFile: bool = Field(False, description="True when `context` is document text rather than a topic.")
    lang: Optional[str] = Field(DEFAULT_LANG, description="'en' for English output, anything else for Vietnamese.")
    cardCount: Optional[int] = Field(DEFAULT_CARD_COUNT, description="Requested number of cards, clamped to [4, 10].")

    @field_validator("lang", mode="before")
    @classmethod
    def normalize_lang(cls, value) -> str:
        # Only "en" is meaningful; anything else selects the default language
        if value is None:
            return DEFAULT_LANG
        return value if isinstance(value, str) else str(value)

    @field_validator("cardCount")
    @classmethod
    def clamp_card_count(cls, value: Optional[int]) -> int:
        if value is None:
            return DEFAULT_CARD_COUNT
        return max(MIN_CARDS, min(MAX_CARDS, value))


class Flashcard(BaseModel):
    """A single front/back pair as returned by the model."""
    model_config = ConfigDict(extra="ignore")

    front: str
    back: str


class FlashcardSet(RootModel[List[Flashcard]]):
    """Ordered cards, in the order the model produced them."""

    def to_list(self) -> List[dict]:
        return self.model_dump()
