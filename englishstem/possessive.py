"""Removal of English possessive suffixes."""

from __future__ import annotations

_APOSTROPHE_S = "'s"
_QUOTE_S = "\u2019s"


def strip_possessive(term: str) -> str:
    """Return *term* without a trailing ``'s`` or ``\u2019s``.

    Terms shorter than three bytes in UTF-8 are returned unchanged.
    """
    if len(term.encode("utf-8")) < 3:
        return term
    if term.endswith(_APOSTROPHE_S) or term.endswith(_QUOTE_S):
        return term[:-2]
    return term


class EnglishPossessiveFilter:
    """Token filter that removes English possessive suffixes.

    Example: ``"John's"`` becomes ``"John"``.
    """

    def filter(self, term: str) -> str:
        """Return the filtered form of *term*."""
        return strip_possessive(term)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EnglishPossessiveFilter)

    def __hash__(self) -> int:
        return hash(type(self))