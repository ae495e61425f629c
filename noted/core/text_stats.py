from __future__ import annotations


def word_count(text: str) -> int:
    # str.split() with no separator already ignores leading/trailing whitespace
    return len((text or "").split())


def char_count(text: str) -> int:
    return len(text or "")


def format_counts(words: int, chars: int) -> str:
    return f"{words} words, {chars} characters"
