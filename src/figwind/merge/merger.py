"""Merge freshly generated utility classes into an existing class list."""

from __future__ import annotations

import logging
from typing import Iterable

from figwind.merge.classify import classify, has_variant, utility_of
from figwind.model.category import PropertyCategory

__all__ = ["merge_classes", "parse_class_list"]

logger = logging.getLogger(__name__)


def parse_class_list(text: str) -> list[str]:
    """Split a class attribute string on whitespace."""
    return text.split()


def _conflicts(new: str, placed: str) -> bool:
    """True if *new* duplicates *placed*, a class of the same category.

    A class with a variant and one without apply in different contexts and
    never conflict. Otherwise they conflict when their utilities match.
    """
    if has_variant(new) != has_variant(placed):
        return False
    return utility_of(new) == utility_of(placed)


def merge_classes(existing: Iterable[str], new: Iterable[str]) -> list[str]:
    """Append *new* classes to *existing*, skipping duplicates.

    Existing classes are kept in order and never removed. A classified new
    class is checked only when the existing list holds a class of its
    category. It is compared with the most recently placed class of that
    category, and once appended it becomes the reference for later new
    classes. So of two new classes in such a category, the second is
    checked against the first and not against the existing class.
    """
    result = list(existing)
    present = set(result)
    latest: dict[PropertyCategory, str] = {}
    for cls in result:
        category = classify(cls)
        if category is not PropertyCategory.NONE:
            latest[category] = cls

    for cls in new:
        if cls in present:
            continue
        category = classify(cls)
        placed = latest.get(category)
        if placed is not None:
            if _conflicts(cls, placed):
                logger.debug("Dropping %s: duplicates %s", cls, placed)
                continue
            latest[category] = cls
        result.append(cls)
        present.add(cls)
    return result
