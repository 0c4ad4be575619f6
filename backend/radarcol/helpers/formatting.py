"""
Display helpers shared by the dashboard and analysis endpoints.
"""
from typing import List, Sequence

from ..models.analysis import ShapValue


def format_large_amount(amount: float) -> str:
    """Format amount as '$1.2T', '$3.4B' or '$56M'."""
    if amount >= 1e12:
        return f"${amount / 1e12:.1f}T"
    if amount >= 1e9:
        return f"${amount / 1e9:.1f}B"
    return f"${amount / 1e6:.0f}M"


def rank_shap_values(values: Sequence[ShapValue]) -> List[ShapValue]:
    """Order SHAP values by absolute impact, largest first. Ties keep input order."""
    return sorted(values, key=lambda v: abs(v.value), reverse=True)
