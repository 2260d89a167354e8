from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable

from catalog_query.application.exceptions import CatalogContractError, CatalogUpstreamError
from catalog_query.application.ports.product_catalog import ProductCatalogPort
from catalog_query.application.utils.query_serializer import serialize_query
from catalog_query.domain.entities.query_state import QueryState
from catalog_query.domain.entities.result import Result, ResultStatus


class FetchCoordinator:
    """
    Turn query states into product page requests and publish their results.

    Every issued request gets the next generation number. A response is only
    published when its generation is still the latest one issued, so a slow
    reply to an old query never replaces the reply to a newer query, whatever
    the arrival order. All publishing happens on the event loop thread and the
    generation check and publish run without an await in between.
    """

    def __init__(
        self,
        catalog: ProductCatalogPort,
        on_result: Callable[[Result], None],
        initial: Result,
        cancel_superseded: bool = False,
    ) -> None:
        self._catalog = catalog
        self._on_result = on_result
        self._result = initial
        self._cancel_superseded = cancel_superseded
        self._generation = 0
        self._last_issued: QueryState | None = None
        self._inflight: dict[int, asyncio.Task[None]] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def result(self) -> Result:
        return self._result

    @property
    def generation(self) -> int:
        return self._generation

    def on_state_change(self, state: QueryState) -> asyncio.Task[None] | None:
        """
        Issue a request for `state` unless it equals the last issued one.

        Must be called from a running event loop. Returns the request task,
        or None when nothing was issued.
        """
        if self._last_issued is not None and state == self._last_issued:
            self._logger.debug("Query unchanged, no request issued", extra={"generation": self._generation})
            return None

        self._generation += 1
        generation = self._generation
        self._last_issued = state

        if self._cancel_superseded:
            for task in self._inflight.values():
                task.cancel()

        # keep showing the current items while the new page loads
        self._publish(replace(self._result, status=ResultStatus.LOADING, error=None))

        task = asyncio.get_running_loop().create_task(self._fetch(generation, state))
        self._inflight[generation] = task
        task.add_done_callback(lambda _task, g=generation: self._inflight.pop(g, None))
        return task

    async def wait_idle(self) -> None:
        """Wait until every request issued so far has settled."""
        while True:
            pending = [task for task in self._inflight.values() if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    async def _fetch(self, generation: int, state: QueryState) -> None:
        self._logger.info("Fetching product page", extra={"generation": generation, "page": state.page})
        try:
            response = await self._catalog.fetch_page(serialize_query(state))
            if not response.success:
                raise CatalogContractError("Product list responded with success=false")
        except (CatalogUpstreamError, CatalogContractError) as e:
            self._settle_failure(generation, state, str(e))
            return
        except Exception as e:
            self._logger.exception("Unexpected product list failure", extra={"generation": generation})
            self._settle_failure(generation, state, str(e) or type(e).__name__)
            return

        if not self._is_latest(generation):
            return
        self._publish(
            Result(
                items=response.products(),
                total_pages=response.total_pages,
                status=ResultStatus.READY,
                for_query=state,
            )
        )

    def _settle_failure(self, generation: int, state: QueryState, reason: str) -> None:
        if not self._is_latest(generation):
            return
        self._logger.warning("Product page fetch failed", extra={"generation": generation, "reason": reason})
        self._publish(
            Result(
                items=self._result.items,
                total_pages=self._result.total_pages,
                status=ResultStatus.FAILED,
                for_query=state,
                error=reason,
            )
        )

    def _is_latest(self, generation: int) -> bool:
        if generation == self._generation:
            return True
        self._logger.debug(
            "Discarding stale response",
            extra={"generation": generation, "reason": f"superseded by {self._generation}"},
        )
        return False

    def _publish(self, result: Result) -> None:
        self._result = result
        self._on_result(result)
