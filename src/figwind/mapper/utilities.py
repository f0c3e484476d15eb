"""Map resolved CSS declarations to Tailwind utility classes."""

from __future__ import annotations

import re
from typing import Callable, Mapping

from figwind.mapper import tables
from figwind.model.value import ResolvedValue

__all__ = ["to_tailwind"]

_NUMBER_RE = re.compile(r"^-?\d*\.?\d+$")

Handler = Callable[[ResolvedValue], list[str]]


def _bracket(prefix: str, value: ResolvedValue) -> str:
    """``prefix-[value]``, or the dictionary value as-is."""
    mapped = value.dictionary_value
    if mapped is not None:
        return mapped
    return f"{prefix}-[{value.text}]"


def _scale(prefix: str, table: Mapping[str, str]) -> Handler:
    def handler(value: ResolvedValue) -> list[str]:
        token = table.get(value.text)
        if token:
            return [f"{prefix}-{token}"]
        return [f"{prefix}-[{value.text}]"]

    return handler


def _passthrough(prefix: str) -> Handler:
    def handler(value: ResolvedValue) -> list[str]:
        return [_bracket(prefix, value)]

    return handler


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def _text_align(value: ResolvedValue) -> list[str]:
    if value.text in tables.TEXT_ALIGN:
        return [f"text-{value.text}"]
    return [f"[text-align:{value.text}]"]


def _decoration_line(value: ResolvedValue) -> list[str]:
    mapped = tables.TEXT_DECORATION_LINE.get(value.text)
    return [mapped or f"decoration-[{value.text}]"]


def _decoration_style(value: ResolvedValue) -> list[str]:
    style = value.text
    if style == "solid":
        return []
    if style in tables.TEXT_DECORATION_STYLE:
        return [f"decoration-{style}"]
    return [f"decoration-[{style}]"]


def _skip_ink(value: ResolvedValue) -> list[str]:
    if value.text == "auto":
        return ["decoration-skip-ink"]
    if value.text == "none":
        return ["decoration-skip-ink-none"]
    return [f"decoration-skip-ink-[{value.text}]"]


def _decoration_thickness(value: ResolvedValue) -> list[str]:
    if value.text == "auto":
        return []
    mapped = tables.TEXT_DECORATION_THICKNESS.get(value.text)
    return [mapped or f"[text-decoration-thickness:{value.text}]"]


def _underline_offset(value: ResolvedValue) -> list[str]:
    if value.text == "auto":
        return []
    return [f"underline-offset-[{value.text}]"]


def _underline_position(value: ResolvedValue) -> list[str]:
    if value.text in ("auto", "from-font"):
        return []
    return [f"[text-underline-position:{value.text}]"]


# ---------------------------------------------------------------------------
# Font
# ---------------------------------------------------------------------------


def _font_size(value: ResolvedValue) -> list[str]:
    text = value.text
    size = text[:-2] if text.endswith("px") else text
    token = tables.FONT_SIZE.get(size)
    if token:
        return [f"text-{token}"]
    if _NUMBER_RE.match(size):
        return [f"text-[{size}px]"]
    return [f"text-[{text}]"]


def _font_family(value: ResolvedValue) -> list[str]:
    mapped = value.dictionary_value
    if mapped is not None:
        return [mapped if mapped.startswith("font-") else f"font-{mapped}"]
    return [f"font-[{value.text}]"]


def _font_style(value: ResolvedValue) -> list[str]:
    mapped = tables.FONT_STYLE.get(value.text)
    return [mapped or f"font-[{value.text}]"]


# ---------------------------------------------------------------------------
# Border radius
# ---------------------------------------------------------------------------


def _border_radius(value: ResolvedValue) -> list[str]:
    if value.text in tables.DEFAULT_RADIUS:
        return ["rounded"]
    return [f"rounded-[{value.text}]"]


# Handlers whose own formatting must see dictionary values.
_DICTIONARY_AWARE = frozenset({"font-family"})

_TEXT: list[tuple[str, Handler]] = [
    ("color", _passthrough("text")),
    ("text-align", _text_align),
    ("text-decoration-line", _decoration_line),
    ("text-decoration-style", _decoration_style),
    ("text-decoration-skip-ink", _skip_ink),
    ("text-decoration-thickness", _decoration_thickness),
    ("text-underline-offset", _underline_offset),
    ("text-underline-position", _underline_position),
]

_FONT: list[tuple[str, Handler]] = [
    ("font-size", _font_size),
    ("font-weight", _scale("font", tables.FONT_WEIGHT)),
    ("line-height", _scale("leading", tables.LINE_HEIGHT)),
    ("letter-spacing", _scale("tracking", tables.LETTER_SPACING)),
    ("font-family", _font_family),
    ("font-style", _font_style),
]

_BOX: list[tuple[str, Handler]] = [
    *((prop, _passthrough(prefix)) for prop, prefix in tables.SPACING.items()),
    *((prop, _passthrough(prefix)) for prop, prefix in tables.SIZE.items()),
    ("border-radius", _border_radius),
]

_SURFACE: list[tuple[str, Handler]] = [
    ("background-color", _passthrough("bg")),
    ("opacity", _passthrough("opacity")),
    ("box-shadow", _passthrough("shadow")),
]


def _emit(
    declarations: Mapping[str, ResolvedValue],
    handlers: list[tuple[str, Handler]],
    out: list[str],
) -> None:
    for prop, handler in handlers:
        value = declarations.get(prop)
        if value is None or not value.text:
            continue
        mapped = value.dictionary_value
        if mapped is not None and prop not in _DICTIONARY_AWARE:
            out.append(mapped)
            continue
        out.extend(handler(value))


def _emit_borders(declarations: Mapping[str, ResolvedValue], out: list[str]) -> None:
    """Expand ``border`` and ``border-<side>`` shorthands into width, style, and color.

    Tailwind's border style applies to every side, so each style is emitted
    at most once across all the shorthands.
    """
    seen_styles: set[str] = set()
    for prop, prefix in tables.BORDER_SIDES.items():
        value = declarations.get(prop)
        if value is None or not value.text.strip():
            continue
        parts = value.tokens()

        width = parts[0].text
        if width not in tables.ZERO_BORDER_WIDTH:
            if width in tables.DEFAULT_BORDER_WIDTH:
                out.append(prefix)
            else:
                out.append(_bracket(prefix, parts[0]))

        if len(parts) >= 2:
            style = parts[1].text
            if style != "none" and style not in seen_styles:
                out.append(f"border-{style}")
                seen_styles.add(style)

        if len(parts) >= 3:
            rest = parts[2:]
            if len(rest) == 1:
                color = rest[0]
            else:
                color = ResolvedValue.literal(" ".join(p.text for p in rest))
            if color.text != "transparent":
                out.append(_bracket(prefix, color))


def to_tailwind(declarations: Mapping[str, ResolvedValue]) -> list[str]:
    """Return utility classes for *declarations* in a fixed category order.

    Text, then font, spacing, size, border radius, borders, background and
    opacity, and finally shadow. Unknown properties are ignored and values
    with no matching scale token fall back to bracket syntax.
    """
    classes: list[str] = []
    _emit(declarations, _TEXT, classes)
    _emit(declarations, _FONT, classes)
    _emit(declarations, _BOX, classes)
    _emit_borders(declarations, classes)
    _emit(declarations, _SURFACE, classes)
    return classes
