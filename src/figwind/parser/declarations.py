"""Parser for CSS declarations pasted from a design tool.

Input example:
    color: var(--Heading-Font, #272727);
    font-size: 16px;
    border-bottom: 1px solid var(--Border-Medium, #ABABAB);
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from figwind.model.value import FromDictionary, Literal, ResolvedValue, Segment

__all__ = ["VariableLookup", "parse_declarations", "resolve_value"]

logger = logging.getLogger(__name__)

# Matches one whole line: property: value;
_DECL_RE = re.compile(
    r"""
    ^(?P<prop>[a-zA-Z-]+)   # property name, letters and hyphens only
    \s*:\s*                  # colon separator
    (?P<value>.*?)           # value (non-greedy up to the final semicolon)
    ;$                       # terminating semicolon
    """,
    re.VERBOSE,
)

# Matches var(<name>, <fallback>)
_VAR_RE = re.compile(
    r"""
    var\(
    (?P<name>[^,]+)          # name, up to the first comma
    ,\s*
    (?P<fallback>[^)]+)      # fallback, up to the closing parenthesis
    \)
    """,
    re.VERBOSE,
)

_QUOTES_RE = re.compile(r"""^["']|["']$""")


class VariableLookup(Protocol):
    def get(self, name: str) -> str | None: ...


def _strip_quotes(text: str) -> str:
    return _QUOTES_RE.sub("", text.strip())


def resolve_value(raw: str, variables: VariableLookup | None = None) -> ResolvedValue:
    """Resolve every ``var()`` reference in *raw* into tagged segments."""
    segments: list[Segment] = []
    pos = 0
    for match in _VAR_RE.finditer(raw):
        if match.start() > pos:
            segments.append(Literal(raw[pos:match.start()]))
        name = match.group("name").strip()
        mapped = variables.get(name) if variables is not None else None
        if mapped:
            segments.append(FromDictionary(mapped))
        else:
            segments.append(Literal(_strip_quotes(match.group("fallback"))))
        pos = match.end()
    if pos < len(raw) or not segments:
        segments.append(Literal(raw[pos:]))
    return ResolvedValue(tuple(segments))


def parse_declarations(
    css: str, variables: VariableLookup | None = None
) -> dict[str, ResolvedValue]:
    """Parse newline-separated ``property: value;`` lines.

    Lines that do not match are skipped. A property seen twice keeps its
    last value.
    """
    declarations: dict[str, ResolvedValue] = {}
    for line in (raw.strip() for raw in css.split("\n")):
        if not line:
            continue
        match = _DECL_RE.match(line)
        if match is None:
            logger.debug("Skipping unrecognised line: %r", line)
            continue
        declarations[match.group("prop")] = resolve_value(match.group("value"), variables)
    return declarations
