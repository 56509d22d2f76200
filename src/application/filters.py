"""Input filters.

Requests normalise their own text fields before validation: names are
trimmed, whitespace-collapsed and capitalised word by word, emails trimmed
and lower-cased, seat names trimmed and upper-cased, descriptions trimmed.
Passwords are never altered. Values that are not text (None, or a wrong
type the validators will report) pass through untouched.

Usage:
    from src.application.filters import capitalize_words

    capitalize_words("  aNA   maría ")  # 'Ana María'
"""

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class InputFilter(Protocol):
    """Request that can return a normalised copy of itself."""

    def filtered(self) -> Self:
        ...


def capitalize(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def capitalize_words(text: str | None) -> str | None:
    """Trim, collapse inner whitespace and capitalise every word.

    Blank input is returned unchanged so validation reports it as empty.
    """
    if not isinstance(text, str) or not text.strip():
        return text
    return " ".join(capitalize(word) for word in text.split())


def normalize_email(text: str | None) -> str | None:
    if not isinstance(text, str):
        return text
    return text.strip().lower()


def normalize_seat_name(text: str | None) -> str | None:
    if not isinstance(text, str):
        return text
    return text.strip().upper()


def trim(text: str | None) -> str | None:
    if not isinstance(text, str):
        return text
    return text.strip()
