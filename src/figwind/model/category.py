from __future__ import annotations

from enum import StrEnum


class PropertyCategory(StrEnum):
    """The CSS property a utility class governs, as far as merging cares."""

    FONT_SIZE = "font-size"
    FONT_WEIGHT = "font-weight"
    FONT_STYLE = "font-style"
    LINE_HEIGHT = "line-height"
    LETTER_SPACING = "letter-spacing"
    TEXT_DECORATION = "text-decoration"
    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    BORDER = "border"
    BORDER_RADIUS = "border-radius"
    WIDTH = "width"
    HEIGHT = "height"
    OPACITY = "opacity"
    BOX_SHADOW = "box-shadow"
    SPACING = "spacing"
    NONE = "none"
