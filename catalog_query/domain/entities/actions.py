from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from catalog_query.domain.entities.query_state import SortMode


@dataclass(frozen=True)
class ToggleCategory:
    tag: str


@dataclass(frozen=True)
class ToggleSubCategory:
    tag: str


@dataclass(frozen=True)
class SetSort:
    mode: SortMode


@dataclass(frozen=True)
class SetSearch:
    text: str


@dataclass(frozen=True)
class SetPage:
    page: int


@dataclass(frozen=True)
class SetPageSize:
    page_size: int


Action = Union[ToggleCategory, ToggleSubCategory, SetSort, SetSearch, SetPage, SetPageSize]
