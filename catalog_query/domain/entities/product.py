from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    slug: str
    price: float
    image: Any = None  # list of urls or a single url, passed through untouched
