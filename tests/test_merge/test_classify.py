"""Tests for utility-class classification."""

import pytest

from figwind.merge import classify, has_variant, split_variants, utility_of
from figwind.model.category import PropertyCategory as C


class TestSplitVariants:
    def test_no_variant(self):
        assert split_variants("text-sm") == ([], "text-sm")

    def test_stacked_variants(self):
        assert split_variants("md:hover:text-sm") == (["md", "hover"], "text-sm")

    def test_colon_inside_brackets(self):
        assert split_variants("[text-decoration-thickness:2px]") == (
            [],
            "[text-decoration-thickness:2px]",
        )
        assert split_variants("lg:[text-underline-position:under]") == (
            ["lg"],
            "[text-underline-position:under]",
        )

    def test_has_variant(self):
        assert has_variant("lg:text-sm")
        assert not has_variant("text-sm")
        assert not has_variant("[text-align:match-parent]")

    def test_utility_of(self):
        assert utility_of("hover:bg-[#FFF]") == "bg-[#FFF]"


class TestClassify:
    @pytest.mark.parametrize(
        "cls, expected",
        [
            # border-radius must never be read as border
            ("rounded", C.BORDER_RADIUS),
            ("rounded-[8px]", C.BORDER_RADIUS),
            ("rounded-t-lg", C.BORDER_RADIUS),
            ("[border-top-left-radius:2px]", C.BORDER_RADIUS),
            ("border", C.BORDER),
            ("border-b", C.BORDER),
            ("border-t-[0.5px]", C.BORDER),
            ("border-solid", C.BORDER),
            ("border-[#ABABAB]", C.BORDER),
            ("border-gray-400", C.BORDER),
            ("border-collapse", C.NONE),
            # text-* is size, color, or neither
            ("text-sm", C.FONT_SIZE),
            ("text-9xl", C.FONT_SIZE),
            ("text-[16px]", C.FONT_SIZE),
            ("text-[1.5rem]", C.FONT_SIZE),
            ("text-[length:var(--size)]", C.FONT_SIZE),
            ("text-[#272727]", C.COLOR),
            ("text-[rgb(0,0,0)]", C.COLOR),
            ("text-red-500", C.COLOR),
            ("text-white", C.COLOR),
            ("text-center", C.NONE),
            ("text-ellipsis", C.NONE),
            # font-* is weight, style, or a family
            ("font-bold", C.FONT_WEIGHT),
            ("font-[450]", C.FONT_WEIGHT),
            ("font-[italic]", C.FONT_STYLE),
            ("font-[oblique]", C.FONT_STYLE),
            ("font-[Inter]", C.NONE),
            ("font-mackinac", C.NONE),
            ("italic", C.FONT_STYLE),
            ("not-italic", C.FONT_STYLE),
            ("leading-snug", C.LINE_HEIGHT),
            ("tracking-[0.2px]", C.LETTER_SPACING),
            ("underline", C.TEXT_DECORATION),
            ("no-underline", C.TEXT_DECORATION),
            ("line-through", C.TEXT_DECORATION),
            ("decoration-wavy", C.TEXT_DECORATION),
            ("decoration-skip-ink-none", C.TEXT_DECORATION),
            ("underline-offset-[25%]", C.TEXT_DECORATION),
            ("[text-decoration-thickness:1.5px]", C.TEXT_DECORATION),
            ("[text-underline-position:under]", C.TEXT_DECORATION),
            ("bg-[#FFF]", C.BACKGROUND_COLOR),
            ("opacity-[0.5]", C.OPACITY),
            ("shadow", C.BOX_SHADOW),
            ("shadow-[0_0_1px_#000]", C.BOX_SHADOW),
            ("w-[24px]", C.WIDTH),
            ("h-full", C.HEIGHT),
            ("m-[8px]", C.SPACING),
            ("mt-2", C.SPACING),
            ("-mx-4", C.SPACING),
            ("pr-[8px]", C.SPACING),
            ("px-4", C.SPACING),
            ("min-w-0", C.NONE),
            ("flex", C.NONE),
            ("[text-align:match-parent]", C.NONE),
            ("", C.NONE),
        ],
    )
    def test_category(self, cls, expected):
        assert classify(cls) is expected

    def test_variants_are_ignored(self):
        assert classify("lg:hover:rounded") is C.BORDER_RADIUS
        assert classify("md:text-[16px]") is C.FONT_SIZE

    def test_important_modifier(self):
        assert classify("!font-bold") is C.FONT_WEIGHT

    def test_category_values_match_css_names(self):
        assert C.BACKGROUND_COLOR == "background-color"
        assert C.NONE == "none"
