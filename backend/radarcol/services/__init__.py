"""
Service layer for RadarCol.

The contract list pipeline: build query -> fetch and normalize ->
paginate -> aggregate. Routers stay thin: parse request -> call
services -> return response.
"""
from .query_builder import QueryParamsBuilder, build_query_params
from .pagination import paginate_data, PaginatedResult
from .contracts_client import ContractsClient
from .stats_service import average_anomaly, get_dashboard_stats
from .dashboard_session import DashboardSession

__all__ = [
    "QueryParamsBuilder",
    "build_query_params",
    "paginate_data",
    "PaginatedResult",
    "ContractsClient",
    "average_anomaly",
    "get_dashboard_stats",
    "DashboardSession",
]
