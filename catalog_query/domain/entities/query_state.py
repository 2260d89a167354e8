from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 20, 30)
DEFAULT_PAGE_SIZE = 10


class SortMode(str, Enum):
    RELEVANT = "relevant"
    PRICE_LOW_HIGH = "low-high"
    PRICE_HIGH_LOW = "high-low"


@dataclass(frozen=True)
class QueryState:
    categories: frozenset[str] = field(default_factory=frozenset)
    sub_categories: frozenset[str] = field(default_factory=frozenset)
    sort_mode: SortMode = SortMode.RELEVANT
    search_text: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def filter_key(self) -> tuple[frozenset[str], frozenset[str], SortMode, str, int]:
        """Everything that decides the result set, i.e. every field but the page."""
        return (self.categories, self.sub_categories, self.sort_mode, self.search_text, self.page_size)
