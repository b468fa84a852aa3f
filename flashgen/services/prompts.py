"""
Prompt construction for flashcard generation.

This module is the single place where we:
- Bound the size of the user's material before it reaches the model.
- Pick the task wording (extract from a document vs. create from a topic).
- Pin the output language and the exact JSON shape we can parse back.
"""

from flashgen.domain.models import DEFAULT_CARD_COUNT

DEFAULT_MAX_CONTEXT_CHARS = 25000

LANGUAGE_NAMES = {
    "en": "English",
}
FALLBACK_LANGUAGE = "Vietnamese"

OUTPUT_FORMAT_RULES = """
    IMPORTANT: Output language must be {language}.
    Output STRICTLY a JSON array of exactly {count} objects, like this:
    [{{"front": "{front_hint}", "back": "{back_hint}"}}]
    Do not wrap the array in markdown or code fences.
    Do not include any other text or explanation in your response.
    """


def truncate_context(context: str, max_chars: int = DEFAULT_MAX_CONTEXT_CHARS) -> str:
    """Cut `context` down to at most `max_chars` characters."""
    if len(context) <= max_chars:
        return context
    return context[:max_chars]


def target_language(lang: str) -> str:
    return LANGUAGE_NAMES.get(lang, FALLBACK_LANGUAGE)


def build_flashcards_prompt(
    context: str,
    is_file: bool,
    lang: str,
    card_count: int = DEFAULT_CARD_COUNT,
) -> str:
    """
    Build the instruction sent to the text-generation service.

    Args:
        context: Topic or (already truncated) document text.
        is_file: True when `context` is document text to summarize.
        lang: "en" selects English output; any other value selects Vietnamese.
        card_count: Already-clamped number of cards to ask for.

    Returns:
        A single prompt string.
    """
    language = target_language(lang)

    if is_file:
        task = f"""
    Analyze the text below, summarize it, and extract the {card_count} most important key concepts as flashcards.
    Base every card only on the text; do NOT invent facts.

    --- TEXT ---
    {context}
    --- END OF TEXT ---
    """
        rules = OUTPUT_FORMAT_RULES.format(
            language=language, count=card_count,
            front_hint="Question/Term", back_hint="Answer/Definition",
        )
    else:
        task = f"""
    Create {card_count} flashcards about: "{context}".
    """
        rules = OUTPUT_FORMAT_RULES.format(
            language=language, count=card_count,
            front_hint="Question", back_hint="Answer",
        )

    return (task + rules).strip()
