"""figwind: Figma CSS to Tailwind utility-class converter."""
from __future__ import annotations

__version__ = "0.1.0"

from figwind.config import FigwindConfig
from figwind.pipeline import ConversionResult, convert, convert_css

__all__ = [
    "__version__",
    "FigwindConfig",
    "ConversionResult",
    "convert",
    "convert_css",
]
