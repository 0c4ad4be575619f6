"""
Dashboard statistics: local aggregates plus server-reported totals.
"""
from __future__ import annotations

import math
from typing import Sequence

from ..helpers.formatting import format_large_amount
from ..models.contract import ApiSummary, Contract, RiskLevel
from ..models.stats import DashboardStats


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (70.5 -> 71)."""
    return int(math.floor(value + 0.5))


def average_anomaly(contracts: Sequence[Contract]) -> int:
    """Mean anomaly probability, rounded; 0 for an empty collection."""
    if not contracts:
        return 0
    total = sum(c.anomaly_probability for c in contracts)
    return round_half_up(total / len(contracts))


def get_dashboard_stats(contracts: Sequence[Contract], summary: ApiSummary) -> DashboardStats:
    """
    Compute dashboard figures.

    Args:
        contracts: Full fetched collection (not a single page)
        summary: Server envelope; its totals are copied verbatim

    Returns:
        DashboardStats with local_* aggregates and server-wide totals kept apart
    """
    total_amount = sum(c.amount for c in contracts)
    reported = summary.total_amount

    return DashboardStats(
        local_count=len(contracts),
        local_high_risk_count=sum(1 for c in contracts if c.risk_level == RiskLevel.HIGH),
        local_total_amount=total_amount,
        local_average_anomaly=average_anomaly(contracts),
        total_analyzed=summary.total_analyzed,
        total_high_risk=summary.total_high_risk,
        total_amount_reported=reported,
        total_amount_display=format_large_amount(total_amount),
        total_amount_reported_display=format_large_amount(reported) if reported is not None else None,
    )
