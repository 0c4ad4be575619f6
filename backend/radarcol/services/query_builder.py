"""
QueryParamsBuilder — fluent construction of the contracts list query.

Produces ordered (key, value) pairs for GET /contracts. Parameters always
come out in the same order regardless of call order, so identical
filters yield an identical query string (the list cache keys on it).
"""
from __future__ import annotations

import math
from datetime import date

import httpx

from ..config.constants import MAX_RESULT_LIMIT, MIN_RESULT_LIMIT, MIN_TITLE_LENGTH
from ..models.contract import FilterCriteria

# Canonical parameter order on the wire
PARAM_ORDER = (
    "limit",
    "date_from",
    "date_to",
    "min_amount",
    "max_amount",
    "title_contains",
    "contract_id",
)


def _format_number(value: float) -> str:
    """Render 1000000.0 as '1000000' and 2.5 as '2.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _valid_amount(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value >= 0


class QueryParamsBuilder:
    """Fluent builder for contracts list query parameters."""

    def __init__(self):
        self._params: dict[str, str] = {}

    # --- Result size ---

    def limit(self, n: int | None) -> QueryParamsBuilder:
        """Set the result-size cap, clamped to [1, 100]."""
        if n is not None:
            self._params["limit"] = str(min(max(int(n), MIN_RESULT_LIMIT), MAX_RESULT_LIMIT))
        return self

    # --- Filters ---

    def filter_date_range(
        self,
        date_from: date | str | None,
        date_to: date | str | None,
    ) -> QueryParamsBuilder:
        """Inclusive range over the signing date."""
        if date_from:
            self._params["date_from"] = str(date_from)
        if date_to:
            self._params["date_to"] = str(date_to)
        return self

    def filter_amount_range(
        self,
        min_amount: float | None,
        max_amount: float | None,
    ) -> QueryParamsBuilder:
        """Amount bounds. Negative or non-finite bounds are dropped; 0 is a valid minimum."""
        if _valid_amount(min_amount):
            self._params["min_amount"] = _format_number(min_amount)
        if _valid_amount(max_amount):
            self._params["max_amount"] = _format_number(max_amount)
        return self

    def filter_title(self, title: str | None) -> QueryParamsBuilder:
        """Substring search on the title; ignored until it has 3+ characters."""
        if title and len(title) >= MIN_TITLE_LENGTH:
            self._params["title_contains"] = title
        return self

    def filter_contract_id(self, contract_id: str | None) -> QueryParamsBuilder:
        """Exact match on the contract code."""
        if contract_id:
            self._params["contract_id"] = contract_id
        return self

    def apply_filters(self, filters: FilterCriteria | None) -> QueryParamsBuilder:
        """Apply every dimension of a FilterCriteria."""
        if filters is None:
            return self
        return (
            self.filter_date_range(filters.date_from, filters.date_to)
            .filter_amount_range(filters.min_amount, filters.max_amount)
            .filter_title(filters.title_contains)
            .filter_contract_id(filters.contract_id)
        )

    # --- Build methods ---

    def build(self) -> list[tuple[str, str]]:
        """Return the parameters in canonical order."""
        return [(key, self._params[key]) for key in PARAM_ORDER if key in self._params]

    def build_query_string(self) -> str:
        """Return 'k=v&...' (no leading '?'), or '' when nothing is set."""
        return str(httpx.QueryParams(self.build()))


def build_query_params(
    filters: FilterCriteria | None = None,
    limit: int | None = None,
) -> list[tuple[str, str]]:
    """Build the canonical parameter list for a filter set and optional cap."""
    return QueryParamsBuilder().limit(limit).apply_filters(filters).build()
