"""Classify Tailwind utility classes by the CSS property they govern.

Classification looks at the utility part of a class only (variants such as
``lg:`` or ``hover:`` are stripped first) and depends on the structural form
of the name, never on the order rules are tried in. ``rounded`` is a
border-radius utility even though ``border`` is a prefix-sibling.
"""

from __future__ import annotations

import re

from figwind.model.category import PropertyCategory

__all__ = ["split_variants", "has_variant", "utility_of", "classify"]

_FONT_SIZES = frozenset(
    {"xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl"}
)
_FONT_WEIGHTS = frozenset(
    {"thin", "extralight", "light", "normal", "medium", "semibold", "bold", "extrabold", "black"}
)
# text-* utilities that are neither a size nor a color.
_TEXT_OTHER = frozenset(
    {
        "left", "center", "right", "justify", "start", "end",
        "ellipsis", "clip", "wrap", "nowrap", "balance", "pretty",
    }
)
_BORDER_OTHER = frozenset({"collapse", "separate", "spacing"})

_DECORATION_WORDS = frozenset({"underline", "overline", "line-through", "no-underline"})
_FONT_STYLE_WORDS = frozenset({"italic", "not-italic"})

_LENGTH_RE = re.compile(
    r"^-?\d*\.?\d+(px|rem|em|%|pt|pc|vh|vw|vmin|vmax|ch|ex|lh|cm|mm|in)?$"
)
_LENGTH_FUNCS = ("calc(", "clamp(", "min(", "max(")
_NUMBER_RE = re.compile(r"^\d+$")
_SPACING_RE = re.compile(r"^[mp][trblxyse]?-")

# CSS property -> category for arbitrary-property classes like [prop:value].
_CSS_PROPERTIES: dict[str, PropertyCategory] = {
    "font-size": PropertyCategory.FONT_SIZE,
    "font-weight": PropertyCategory.FONT_WEIGHT,
    "font-style": PropertyCategory.FONT_STYLE,
    "line-height": PropertyCategory.LINE_HEIGHT,
    "letter-spacing": PropertyCategory.LETTER_SPACING,
    "color": PropertyCategory.COLOR,
    "background-color": PropertyCategory.BACKGROUND_COLOR,
    "width": PropertyCategory.WIDTH,
    "height": PropertyCategory.HEIGHT,
    "opacity": PropertyCategory.OPACITY,
    "box-shadow": PropertyCategory.BOX_SHADOW,
}


def split_variants(cls: str) -> tuple[list[str], str]:
    """Split ``md:hover:text-sm`` into (``["md", "hover"]``, ``"text-sm"``).

    Colons inside ``[...]`` belong to arbitrary values and do not separate
    variants.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(cls):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        elif ch == ":" and depth == 0:
            parts.append(cls[start:i])
            start = i + 1
    return parts, cls[start:]


def has_variant(cls: str) -> bool:
    return bool(split_variants(cls)[0])


def utility_of(cls: str) -> str:
    """The class with its variant prefixes removed."""
    return split_variants(cls)[1]


def _css_property_category(prop: str) -> PropertyCategory:
    prop = prop.strip().lower()
    if prop in _CSS_PROPERTIES:
        return _CSS_PROPERTIES[prop]
    if prop.startswith(("text-decoration", "text-underline")):
        return PropertyCategory.TEXT_DECORATION
    if prop.startswith("border") and prop.endswith("radius"):
        return PropertyCategory.BORDER_RADIUS
    if prop.startswith("border"):
        return PropertyCategory.BORDER
    if prop.startswith(("margin", "padding")):
        return PropertyCategory.SPACING
    return PropertyCategory.NONE


def _bracketed(rest: str) -> str | None:
    if rest.startswith("[") and rest.endswith("]"):
        return rest[1:-1]
    return None


def _classify_text(rest: str) -> PropertyCategory:
    if rest in _FONT_SIZES:
        return PropertyCategory.FONT_SIZE
    if rest in _TEXT_OTHER:
        return PropertyCategory.NONE
    inner = _bracketed(rest)
    if inner is None:
        return PropertyCategory.COLOR
    if inner.startswith("length:"):
        return PropertyCategory.FONT_SIZE
    if inner.startswith("color:"):
        return PropertyCategory.COLOR
    if _LENGTH_RE.match(inner) or inner.startswith(_LENGTH_FUNCS):
        return PropertyCategory.FONT_SIZE
    return PropertyCategory.COLOR


def _classify_font(rest: str) -> PropertyCategory:
    if rest in _FONT_WEIGHTS:
        return PropertyCategory.FONT_WEIGHT
    inner = _bracketed(rest)
    if inner is None:
        return PropertyCategory.NONE
    if _NUMBER_RE.match(inner):
        return PropertyCategory.FONT_WEIGHT
    if inner == "italic" or inner.startswith("oblique"):
        return PropertyCategory.FONT_STYLE
    return PropertyCategory.NONE


def classify(cls: str) -> PropertyCategory:
    """Return the property category of *cls* (variants are ignored)."""
    utility = utility_of(cls).lstrip("!")
    if utility.startswith("-"):
        utility = utility[1:]
    if not utility:
        return PropertyCategory.NONE

    arbitrary = _bracketed(utility)
    if arbitrary is not None:
        prop, sep, _ = arbitrary.partition(":")
        return _css_property_category(prop) if sep else PropertyCategory.NONE

    if utility in _FONT_STYLE_WORDS:
        return PropertyCategory.FONT_STYLE
    if utility in _DECORATION_WORDS:
        return PropertyCategory.TEXT_DECORATION
    if utility == "rounded" or utility.startswith("rounded-"):
        return PropertyCategory.BORDER_RADIUS
    if utility == "border":
        return PropertyCategory.BORDER
    if utility.startswith("border-"):
        head = utility[len("border-"):].split("-", 1)[0]
        if head in _BORDER_OTHER:
            return PropertyCategory.NONE
        return PropertyCategory.BORDER
    if utility == "shadow" or utility.startswith("shadow-"):
        return PropertyCategory.BOX_SHADOW
    if utility.startswith(("decoration-", "underline-offset-")):
        return PropertyCategory.TEXT_DECORATION
    if utility.startswith("text-"):
        return _classify_text(utility[len("text-"):])
    if utility.startswith("font-"):
        return _classify_font(utility[len("font-"):])
    if utility.startswith("leading-"):
        return PropertyCategory.LINE_HEIGHT
    if utility.startswith("tracking-"):
        return PropertyCategory.LETTER_SPACING
    if utility.startswith("bg-"):
        return PropertyCategory.BACKGROUND_COLOR
    if utility.startswith("opacity-"):
        return PropertyCategory.OPACITY
    if utility.startswith("w-"):
        return PropertyCategory.WIDTH
    if utility.startswith("h-"):
        return PropertyCategory.HEIGHT
    if _SPACING_RE.match(utility):
        return PropertyCategory.SPACING
    return PropertyCategory.NONE
