"""
Extraction of the word currently being typed.
"""

from __future__ import annotations


def extract_token(text: str, cursor_position: int | None = None) -> str:
    """Return the word surrounding ``cursor_position``.

    The scan walks backward from the cursor to the previous space and then
    forward to the end of that word, so the result never contains a space.
    A cursor sitting right after a space yields an empty token.
    """
    if cursor_position is None or cursor_position > len(text):
        cursor_position = len(text)
    cursor_position = max(cursor_position, 0)

    start = cursor_position
    while start > 0 and text[start - 1] != " ":
        start -= 1

    end = text.find(" ", start)
    if end == -1:
        end = len(text)
    return text[start:end].strip()


def last_space_boundary(text: str) -> int:
    """Index just after the last space of ``text`` (0 when there is none)."""
    return text.rfind(" ") + 1
