"""Resolved declaration values: literal text and dictionary-sourced segments."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Literal:
    """Text taken verbatim from the CSS, or from a ``var()`` fallback."""

    text: str


@dataclass(frozen=True)
class FromDictionary:
    """A Tailwind value substituted from the variable dictionary."""

    text: str


Segment = Literal | FromDictionary

_WS_RE = re.compile(r"(\s+)")


@dataclass(frozen=True)
class ResolvedValue:
    """A declaration value after ``var()`` resolution.

    Kept as a sequence of segments so the mapper can tell dictionary-sourced
    parts apart from literal text without string markers.
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def literal(cls, text: str) -> ResolvedValue:
        return cls((Literal(text),))

    @classmethod
    def from_dictionary(cls, text: str) -> ResolvedValue:
        return cls((FromDictionary(text),))

    @property
    def text(self) -> str:
        """The value rendered as plain text, dictionary values inline."""
        return "".join(seg.text for seg in self.segments)

    @property
    def dictionary_value(self) -> str | None:
        """The dictionary value if this whole value came from the dictionary."""
        meaningful = [
            seg for seg in self.segments
            if not (isinstance(seg, Literal) and not seg.text.strip())
        ]
        if len(meaningful) == 1 and isinstance(meaningful[0], FromDictionary):
            return meaningful[0].text
        return None

    @property
    def is_from_dictionary(self) -> bool:
        return self.dictionary_value is not None

    def tokens(self) -> list[ResolvedValue]:
        """Split on whitespace in literal text.

        A dictionary segment is never split. It forms a dictionary-sourced
        token on its own unless literal text is glued to it without
        whitespace, in which case the token is mixed.
        """
        result: list[ResolvedValue] = []
        current: list[Segment] = []

        def flush() -> None:
            if current:
                result.append(ResolvedValue(tuple(current)))
                current.clear()

        for seg in self.segments:
            if isinstance(seg, FromDictionary):
                current.append(seg)
                continue
            for piece in _WS_RE.split(seg.text):
                if not piece:
                    continue
                if piece.isspace():
                    flush()
                else:
                    current.append(Literal(piece))
        flush()
        return result

    def __str__(self) -> str:
        return self.text
