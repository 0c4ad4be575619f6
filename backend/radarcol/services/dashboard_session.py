"""
DashboardSession: caller-side state for one dashboard view.

Holds the active filters, page and page size, and the last collection
applied from the contracts API. Page resets on filter or page-size
changes happen here, not in the pagination engine. Each refresh and each
filter change advances a generation token; a response whose token is no
longer the latest is dropped so a slow earlier fetch cannot overwrite
fresher results.
"""
from __future__ import annotations

import threading
from typing import List, Optional

import structlog

from ..config.constants import DEFAULT_PAGE_SIZE
from ..models.contract import ApiSummary, Contract, ContractsPage, FilterCriteria
from ..models.stats import DashboardStats
from .contracts_client import ContractsClient
from .pagination import PaginatedResult, paginate_data
from .stats_service import get_dashboard_stats

logger = structlog.get_logger("radarcol.services.dashboard_session")


class DashboardSession:
    """Filter, page and fetch state for a dashboard view. Thread-safe."""

    def __init__(
        self,
        client: ContractsClient,
        page_size: int = DEFAULT_PAGE_SIZE,
        limit: Optional[int] = None,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._client = client
        self._lock = threading.Lock()
        self._generation = 0
        self._filters = FilterCriteria()
        self._page = 1
        self._page_size = page_size
        self._limit = limit
        self._contracts: List[Contract] = []
        self._summary = ApiSummary()

    # --- State ---

    @property
    def filters(self) -> FilterCriteria:
        return self._filters

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def contracts(self) -> List[Contract]:
        return list(self._contracts)

    @property
    def summary(self) -> ApiSummary:
        return self._summary

    def set_filters(self, filters: FilterCriteria) -> None:
        """
        Replace the filter set and go back to page 1.

        Also advances the generation, so a fetch still in flight under the
        old filters is dropped when it resolves. Call refresh() to refetch.
        """
        with self._lock:
            self._filters = filters.model_copy()
            self._page = 1
            self._generation += 1

    def clear_filters(self) -> None:
        self.set_filters(FilterCriteria())

    def set_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        with self._lock:
            self._page = page

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and go back to page 1."""
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        with self._lock:
            self._page_size = page_size
            self._page = 1

    # --- Fetching ---

    def begin_fetch(self) -> tuple[int, FilterCriteria]:
        """Start a fetch: bump the generation and snapshot the filters."""
        with self._lock:
            self._generation += 1
            return self._generation, self._filters.model_copy()

    def apply(self, token: int, result: ContractsPage) -> bool:
        """Install a fetch result if token is still the latest generation."""
        with self._lock:
            if token != self._generation:
                logger.info("stale_fetch_ignored", token=token, current=self._generation)
                return False
            self._contracts = list(result.contracts)
            self._summary = result.summary
            return True

    def refresh(self) -> bool:
        """
        Fetch with the current filters and apply the result.

        Returns:
            True if the result was applied, False if a newer refresh
            started while this one was in flight.

        Errors from the client propagate unchanged.
        """
        token, filters = self.begin_fetch()
        result = self._client.fetch_contracts(filters, self._limit)
        return self.apply(token, result)

    # --- Derived views (always recomputed) ---

    def current_page(self) -> PaginatedResult[Contract]:
        with self._lock:
            contracts, page, page_size = self._contracts, self._page, self._page_size
        return paginate_data(contracts, page, page_size)

    def stats(self) -> DashboardStats:
        with self._lock:
            contracts, summary = self._contracts, self._summary
        return get_dashboard_stats(contracts, summary)
