"""figwind model layer -- public type re-exports."""

from figwind.model.category import PropertyCategory
from figwind.model.value import FromDictionary, Literal, ResolvedValue, Segment

__all__ = [
    "PropertyCategory",
    "Literal",
    "FromDictionary",
    "Segment",
    "ResolvedValue",
]
