"""Pydantic models for the dashboard endpoint."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import PaginatedResponse
from .contract import Contract
from .stats import DashboardStats


class SourceMetadata(BaseModel):
    """Where the upstream data came from."""
    source: Optional[str] = None
    simulated_fields: List[str] = Field(default_factory=list)


class DashboardResponse(PaginatedResponse[Contract]):
    """One page of contracts plus aggregate statistics."""
    stats: DashboardStats
    metadata: SourceMetadata
