"""Pydantic models for dashboard statistics."""
from pydantic import BaseModel, Field
from typing import Optional


class DashboardStats(BaseModel):
    """Local aggregates next to server-wide figures.

    local_* fields describe the fetched (filtered) collection; the others
    are passed through from the upstream envelope and cover the whole
    remote population. The two groups are never mixed.
    """

    local_count: int = Field(..., description="Contracts in the fetched collection")
    local_high_risk_count: int
    local_total_amount: int
    local_average_anomaly: int = Field(..., description="Mean anomaly probability, rounded")

    total_analyzed: Optional[int] = Field(None, description="Server-reported contracts analyzed")
    total_high_risk: Optional[int] = None
    total_amount_reported: Optional[float] = None

    total_amount_display: str = ""
    total_amount_reported_display: Optional[str] = None
