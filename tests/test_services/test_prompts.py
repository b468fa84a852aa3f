from flashgen.services.prompts import build_flashcards_prompt, target_language, truncate_context


def test_truncate_context_keeps_short_text():
    assert truncate_context("short", 10) == "short"


def test_truncate_context_cuts_long_text():
    assert truncate_context("abcdefghij", 4) == "abcd"


def test_target_language():
    assert target_language("en") == "English"
    assert target_language("vi") == "Vietnamese"
    assert target_language("EN") == "Vietnamese"


def test_topic_prompt():
    prompt = build_flashcards_prompt("The French Revolution", is_file=False, lang="en", card_count=6)

    assert 'Create 6 flashcards about: "The French Revolution"' in prompt
    assert "Output language must be English" in prompt
    assert '[{"front": "Question", "back": "Answer"}]' in prompt
    assert "markdown" in prompt
    assert "--- TEXT ---" not in prompt


def test_file_prompt():
    prompt = build_flashcards_prompt("Chapter 1. Cells are...", is_file=True, lang="vi", card_count=8)

    assert "summarize it" in prompt
    assert "8 most important key concepts" in prompt
    assert "Chapter 1. Cells are..." in prompt
    assert "Output language must be Vietnamese" in prompt
    assert '[{"front": "Question/Term", "back": "Answer/Definition"}]' in prompt


def test_braces_in_context_are_kept_verbatim():
    prompt = build_flashcards_prompt("set {a, b} and {x}", is_file=True, lang="en", card_count=4)
    assert "set {a, b} and {x}" in prompt
