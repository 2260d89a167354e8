from __future__ import annotations

import logging
from typing import Callable

from catalog_query.application.dto.collection_view import CollectionView
from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.use_cases.fetch_coordinator import FetchCoordinator
from catalog_query.application.use_cases.present_collection import present_collection
from catalog_query.application.utils.query_reducer import apply
from catalog_query.domain.entities.actions import (
    Action,
    SetPage,
    SetPageSize,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleSubCategory,
)
from catalog_query.domain.entities.query_state import QueryState, SortMode
from catalog_query.domain.entities.result import Result, ResultStatus


ViewListener = Callable[[CollectionView], None]


class CollectionController:
    """Owns the query state and the latest result of one collection page."""

    def __init__(
        self,
        catalog: ProductCatalogPort,
        initial_state: QueryState | None = None,
        cancel_superseded: bool = False,
    ) -> None:
        self._state = initial_state or QueryState()
        self._result = Result.initial(self._state)
        self._last_ready: Result | None = None
        self._listeners: list[ViewListener] = []
        self._coordinator = FetchCoordinator(
            catalog=catalog,
            on_result=self._on_result,
            initial=self._result,
            cancel_superseded=cancel_superseded,
        )
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def result(self) -> Result:
        return self._result

    def load(self) -> None:
        """Fetch the current state. Safe to call repeatedly."""
        self._coordinator.on_state_change(self._state)

    def dispatch(self, action: Action) -> bool:
        """Apply a user action. Returns False when it left the state unchanged."""
        next_state = apply(self._state, action, total_pages=self.known_total_pages())
        if next_state == self._state:
            self._logger.debug("Action left query unchanged", extra={"action": type(action).__name__})
            return False
        self._state = next_state
        self._coordinator.on_state_change(next_state)
        return True

    def known_total_pages(self) -> int | None:
        """Page count of the latest loaded result for the current filters, if any."""
        ready = self._last_ready
        if ready is None or ready.for_query.filter_key() != self._state.filter_key():
            return None
        return ready.total_pages

    def toggle_category(self, tag: str) -> bool:
        return self.dispatch(ToggleCategory(tag))

    def toggle_sub_category(self, tag: str) -> bool:
        return self.dispatch(ToggleSubCategory(tag))

    def set_sort(self, mode: SortMode) -> bool:
        return self.dispatch(SetSort(mode))

    def set_search(self, text: str) -> bool:
        return self.dispatch(SetSearch(text))

    def set_page_size(self, page_size: int) -> bool:
        return self.dispatch(SetPageSize(page_size))

    def go_to_page(self, page: int) -> bool:
        return self.dispatch(SetPage(page))

    def next_page(self) -> bool:
        return self.dispatch(SetPage(self._state.page + 1))

    def previous_page(self) -> bool:
        return self.dispatch(SetPage(self._state.page - 1))

    def view(self) -> CollectionView:
        return present_collection(self._state, self._result)

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Call `listener` with a fresh view on every published result. Returns an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def wait_idle(self) -> None:
        await self._coordinator.wait_idle()

    def _on_result(self, result: Result) -> None:
        self._result = result
        if result.status is ResultStatus.READY:
            self._last_ready = result
        view = self.view()
        for listener in list(self._listeners):
            listener(view)
