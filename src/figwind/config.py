from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FigwindConfig:
    db_path: str = "figwind.db"
    storage_key: str = "figma-tailwind-var-dict"
    host: str = "127.0.0.1"
    port: int = 5000
