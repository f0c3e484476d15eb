"""Tailwind scale tables used by the utility mapper."""

from __future__ import annotations

# font-size in px -> text-<size>
FONT_SIZE: dict[str, str] = {
    "12": "xs",
    "14": "sm",
    "16": "base",
    "18": "lg",
    "20": "xl",
    "24": "2xl",
    "30": "3xl",
    "36": "4xl",
    "48": "5xl",
    "60": "6xl",
    "72": "7xl",
    "96": "8xl",
    "128": "9xl",
}

FONT_WEIGHT: dict[str, str] = {
    "100": "thin",
    "200": "extralight",
    "300": "light",
    "400": "normal",
    "500": "medium",
    "600": "semibold",
    "700": "bold",
    "800": "extrabold",
    "900": "black",
}

LINE_HEIGHT: dict[str, str] = {
    "1": "none",
    "1.25": "tight",
    "1.5": "snug",
    "1.75": "normal",
    "2": "relaxed",
    "2.25": "loose",
}

LETTER_SPACING: dict[str, str] = {
    "-0.05em": "tighter",
    "-0.025em": "tight",
    "0em": "normal",
    "0.025em": "wide",
    "0.05em": "wider",
    "0.1em": "widest",
}

TEXT_ALIGN = frozenset({"left", "center", "right", "justify", "start", "end"})

TEXT_DECORATION_LINE: dict[str, str] = {
    "underline": "underline",
    "overline": "overline",
    "line-through": "line-through",
    "none": "no-underline",
}

TEXT_DECORATION_STYLE = frozenset({"double", "dotted", "dashed", "wavy"})

TEXT_DECORATION_THICKNESS: dict[str, str] = {
    "0": "decoration-0",
    "0px": "decoration-0",
    "1px": "decoration-1",
    "thin": "decoration-1",
    "2px": "decoration-2",
    "medium": "decoration-2",
    "4px": "decoration-4",
    "thick": "decoration-4",
    "8px": "decoration-8",
    "from-font": "decoration-from-font",
}

FONT_STYLE: dict[str, str] = {
    "italic": "italic",
    "normal": "not-italic",
}

# Values equal to the Tailwind default for the bare utility.
DEFAULT_RADIUS = frozenset({"4px", "0.25rem"})
DEFAULT_BORDER_WIDTH = frozenset({"1px", "0.0625rem"})
ZERO_BORDER_WIDTH = frozenset({"0", "0px"})

SPACING: dict[str, str] = {
    "margin": "m",
    "margin-top": "mt",
    "margin-bottom": "mb",
    "margin-left": "ml",
    "margin-right": "mr",
    "padding": "p",
    "padding-top": "pt",
    "padding-bottom": "pb",
    "padding-left": "pl",
    "padding-right": "pr",
}

SIZE: dict[str, str] = {
    "width": "w",
    "height": "h",
}

BORDER_SIDES: dict[str, str] = {
    "border": "border",
    "border-top": "border-t",
    "border-bottom": "border-b",
    "border-left": "border-l",
    "border-right": "border-r",
}
