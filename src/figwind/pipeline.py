"""End-to-end conversion: parse, map, prefix, merge."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from figwind.mapper import to_tailwind
from figwind.merge import merge_classes, parse_class_list
from figwind.model.value import ResolvedValue
from figwind.parser import parse_declarations
from figwind.parser.declarations import VariableLookup
from figwind.prefix import apply_prefixes, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    declarations: dict[str, ResolvedValue] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    prefixed: list[str] = field(default_factory=list)
    merged: list[str] = field(default_factory=list)

    @property
    def output(self) -> str:
        return render(self.merged)


def convert(
    css: str,
    variables: VariableLookup | None = None,
    prefixes: str = "",
    existing: str = "",
) -> ConversionResult:
    """Convert CSS declarations into Tailwind classes.

    *variables* resolves ``var(--name, fallback)`` references (usually a
    ``DictionaryStore``). When *existing* holds classes, the generated
    classes are merged into it.

    Arbitrary values keep their spaces (``shadow-[0 0 1px #000]``), so such a
    class splits into several tokens when output is passed back in as
    *existing*, and merging it again appends it a second time.
    """
    declarations = parse_declarations(css, variables)
    classes = to_tailwind(declarations)
    prefixed = apply_prefixes(classes, prefixes)
    existing_classes = parse_class_list(existing)
    merged = merge_classes(existing_classes, prefixed) if existing_classes else prefixed
    logger.debug(
        "Converted %d declarations into %d classes (%d after merge)",
        len(declarations),
        len(classes),
        len(merged),
    )
    return ConversionResult(
        declarations=declarations,
        classes=classes,
        prefixed=prefixed,
        merged=merged,
    )


def convert_css(
    css: str,
    variables: VariableLookup | None = None,
    prefixes: str = "",
    existing: str = "",
) -> str:
    """Like :func:`convert` but returns only the class string."""
    return convert(css, variables, prefixes=prefixes, existing=existing).output
