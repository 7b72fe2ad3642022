import pytest

from launchbar.application.tokenizer import extract_token, last_space_boundary


def test_token_at_end_of_text() -> None:
    assert extract_token("BUY EUR", 7) == "EUR"


def test_cursor_defaults_to_end() -> None:
    assert extract_token("BUY EU") == "EU"


def test_token_after_trailing_space_is_empty() -> None:
    assert extract_token("BUY ", 4) == ""


def test_empty_text() -> None:
    assert extract_token("", 0) == ""


def test_cursor_inside_first_word_returns_that_word() -> None:
    assert extract_token("BUY EUR/USD", 2) == "BUY"


def test_cursor_past_end_is_clamped() -> None:
    assert extract_token("SELL", 99) == "SELL"


@pytest.mark.parametrize(
    "text",
    ["", "a", "BUY EUR/USD 100", "  spaced   out  ", "one two  three "],
)
def test_token_never_contains_spaces_and_is_a_word_suffix(text: str) -> None:
    words = text.split()
    for cursor in range(len(text) + 1):
        token = extract_token(text, cursor)
        assert " " not in token
        if token:
            assert any(word.endswith(token) for word in words)


def test_last_space_boundary() -> None:
    assert last_space_boundary("BUY EU") == 4
    assert last_space_boundary("BUY") == 0
