"""
Dashboard API endpoints.

One call runs the whole contract list pipeline: filters become upstream
query parameters, the fetched collection is paginated locally, and
statistics are computed over the full collection.
"""
from datetime import date
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query

from ..cache import CONTRACTS_CACHE, CONTRACTS_CACHE_MAXSIZE, CONTRACTS_CACHE_TTL, app_cache
from ..config.constants import DEFAULT_PAGE_SIZE, MAX_RESULT_LIMIT
from ..dependencies import get_contracts_client
from ..models.common import PaginationMeta
from ..models.contract import ContractsPage, FilterCriteria
from ..models.dashboard import DashboardResponse, SourceMetadata
from ..services.contracts_client import ContractsClient
from ..services.pagination import paginate_data
from ..services.query_builder import QueryParamsBuilder
from ..services.stats_service import get_dashboard_stats

logger = structlog.get_logger("radarcol.api.dashboard")

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/contracts", response_model=DashboardResponse)
def list_dashboard_contracts(
    # Pagination
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_RESULT_LIMIT, description="Items per page"),
    limit: Optional[int] = Query(None, description="Upstream result cap (clamped to 1-100)"),
    # Filters
    date_from: Optional[date] = Query(None, description="Signed on or after (YYYY-MM-DD)"),
    date_to: Optional[date] = Query(None, description="Signed on or before (YYYY-MM-DD)"),
    min_amount: Optional[float] = Query(None, description="Minimum amount"),
    max_amount: Optional[float] = Query(None, description="Maximum amount"),
    title_contains: Optional[str] = Query(None, description="Title search, ignored below 3 characters"),
    contract_id: Optional[str] = Query(None, description="Exact contract code"),
    client: ContractsClient = Depends(get_contracts_client),
):
    """
    List one page of contracts with dashboard statistics.

    `stats.local_*` describe the fetched collection; `stats.total_*` are
    the server-reported figures for the whole population.
    """
    filters = FilterCriteria(
        date_from=date_from,
        date_to=date_to,
        min_amount=min_amount,
        max_amount=max_amount,
        title_contains=title_contains,
        contract_id=contract_id,
    )
    qb = QueryParamsBuilder().limit(limit).apply_filters(filters)
    cache_key = qb.build_query_string()

    result: Optional[ContractsPage] = app_cache.get(CONTRACTS_CACHE, cache_key)
    if result is None:
        result = client.fetch_contracts_with_params(qb.build())
        app_cache.set(
            CONTRACTS_CACHE, cache_key, result,
            maxsize=CONTRACTS_CACHE_MAXSIZE, ttl=CONTRACTS_CACHE_TTL,
        )
    else:
        logger.debug("contracts_cache_hit", key=cache_key)

    paginated = paginate_data(result.contracts, page, page_size)

    return DashboardResponse(
        data=paginated.data,
        pagination=PaginationMeta.from_result(paginated),
        stats=get_dashboard_stats(result.contracts, result.summary),
        metadata=SourceMetadata(
            source=result.summary.source,
            simulated_fields=result.summary.simulated_fields,
        ),
    )
