"""Pydantic models for RadarCol."""
from .common import PaginationMeta, PaginatedResponse
from .contract import (
    ApiSummary,
    Contract,
    ContractsPage,
    FilterCriteria,
    RiskLevel,
)
from .analysis import AnalysisDetail, AnalysisResponse, ContractAnalysis, ShapValue
from .stats import DashboardStats
from .dashboard import DashboardResponse, SourceMetadata

__all__ = [
    "PaginationMeta",
    "PaginatedResponse",
    "ApiSummary",
    "Contract",
    "ContractsPage",
    "FilterCriteria",
    "RiskLevel",
    "AnalysisDetail",
    "AnalysisResponse",
    "ContractAnalysis",
    "ShapValue",
    "DashboardStats",
    "DashboardResponse",
    "SourceMetadata",
]
