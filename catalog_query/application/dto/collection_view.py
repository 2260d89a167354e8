from __future__ import annotations

from dataclasses import dataclass

from catalog_query.domain.entities.product import ProductSummary


@dataclass(frozen=True)
class CollectionView:
    """Everything a host needs to draw the collection page."""

    items: tuple[ProductSummary, ...]
    page: int
    total_pages: int
    can_go_previous: bool
    can_go_next: bool
    is_loading: bool
    show_loading_indicator: bool
    failed: bool
    is_current: bool  # result was produced for the state being shown
    error: str | None = None

    @property
    def page_label(self) -> str:
        return f"Page {self.page} of {self.total_pages}"
