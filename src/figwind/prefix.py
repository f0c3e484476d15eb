"""Variant prefix application (``lg:``, ``hover:``, ...)."""

from __future__ import annotations

from typing import Iterable

__all__ = ["normalize_prefixes", "apply_prefixes", "render"]


def normalize_prefixes(prefix_str: str) -> list[str]:
    """Split *prefix_str* on whitespace and end each prefix with exactly one colon."""
    return [p.rstrip(":") + ":" for p in prefix_str.split()]


def apply_prefixes(classes: Iterable[str], prefix_str: str) -> list[str]:
    """Cross every class with every prefix, class-major.

    ``apply_prefixes(["text-sm"], "lg hover")`` gives
    ``["lg:text-sm", "hover:text-sm"]``. A blank prefix string returns the
    classes unchanged.
    """
    prefixes = normalize_prefixes(prefix_str)
    if not prefixes:
        return list(classes)
    return [f"{p}{cls}" for cls in classes for p in prefixes]


def render(classes: Iterable[str]) -> str:
    """Join classes into a class-attribute string."""
    return " ".join(classes)
