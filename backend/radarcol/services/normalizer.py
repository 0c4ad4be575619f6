"""
Transforms upstream payloads into internal models.

Every parsing failure is raised as SchemaError; an absent start date is
None, not an error.
"""
from __future__ import annotations

import math
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog
from pydantic import ValidationError

from ..config.constants import FALLBACK_RISK_LEVEL, RISK_LEVEL_LABELS
from ..middleware.error_handler import SchemaError
from ..models.analysis import (
    AnalysisDetail,
    ApiAnalysis,
    ApiAnalysisContract,
    ContractAnalysis,
    ContractAnalysisApiResponse,
    ShapValue,
)
from ..models.contract import (
    ApiContract,
    ApiSummary,
    Contract,
    ContractsApiResponse,
    ContractsPage,
    RiskLevel,
)
from .stats_service import round_half_up

logger = structlog.get_logger("radarcol.services.normalizer")

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def normalize_risk_level(label: str | None, strict: bool = False) -> RiskLevel:
    """
    Map an upstream risk label ('Alto', 'Medio', 'Bajo' or English) to RiskLevel.

    Unrecognised labels fall back to LOW with a warning, or raise
    SchemaError when strict is set.
    """
    key = (label or "").strip().lower()
    if key in RISK_LEVEL_LABELS:
        return RiskLevel(RISK_LEVEL_LABELS[key])
    if strict:
        raise SchemaError(f"Unknown risk level '{label}'", {"risk_level": label})
    logger.warning("unknown_risk_level", value=label, fallback=FALLBACK_RISK_LEVEL)
    return RiskLevel(FALLBACK_RISK_LEVEL)


def parse_amount(raw: Any) -> int:
    """Parse '4500000000', '$1,200,000.50' or a number into whole currency units."""
    if isinstance(raw, bool):
        raise SchemaError(f"Invalid amount {raw!r}", {"amount": raw})
    if isinstance(raw, (int, float)):
        text = str(raw)
    else:
        text = _NON_NUMERIC.sub("", str(raw))
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise SchemaError(f"Invalid amount {raw!r}", {"amount": raw}) from None
    if not value.is_finite() or value < 0:
        raise SchemaError(f"Invalid amount {raw!r}", {"amount": raw})
    return int(value)


def parse_start_date(raw: str | None) -> date | None:
    """Parse 'YYYY-MM-DD' or an ISO timestamp; None/empty stays None."""
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        raise SchemaError(f"Invalid start date {raw!r}", {"start_date": raw}) from None


def parse_anomaly(raw: float) -> int:
    """Anomaly probability as an integer percentage in [0, 100], rounded half up."""
    if not math.isfinite(raw):
        raise SchemaError(f"Anomaly probability is not a number: {raw}", {"anomaly": str(raw)})
    value = round_half_up(raw)
    if not 0 <= value <= 100:
        raise SchemaError(f"Anomaly probability out of range: {raw}", {"anomaly": raw})
    return value


def transform_api_contract(record: ApiContract, strict: bool = False) -> Contract:
    """Flatten a list-endpoint record into a Contract."""
    return Contract(
        id=record.contract.code,
        title=record.contract.description,
        entity=record.entity,
        amount=parse_amount(record.amount),
        signed_date=parse_start_date(record.start_date),
        risk_level=normalize_risk_level(record.risk_level, strict),
        anomaly_probability=parse_anomaly(record.anomaly),
        contractor=record.contractor,
        description=record.purpose,
    )


def transform_analysis_contract(record: ApiAnalysisContract, strict: bool = False) -> Contract:
    """The analysis envelope carries a flat contract block; the code is the id."""
    return Contract(
        id=record.code,
        title=record.description,
        entity=record.entity,
        amount=parse_amount(record.amount),
        signed_date=parse_start_date(record.start_date),
        risk_level=normalize_risk_level(record.risk_level, strict),
        anomaly_probability=parse_anomaly(record.anomaly),
    )


def transform_api_analysis(analysis: ApiAnalysis) -> ContractAnalysis:
    return ContractAnalysis(
        contract_id=analysis.contract_id,
        summary=analysis.summary,
        key_factors=list(analysis.key_factors),
        recommendations=list(analysis.recommendations),
        shap_values=[
            ShapValue(
                variable=shap.variable,
                value=shap.value,
                description=shap.description,
                actual_value=shap.actual_value,
            )
            for shap in analysis.shap_values
        ],
        base_probability=analysis.base_probability,
        confidence=analysis.confidence,
        analysis_date=analysis.analysis_date,
    )


def normalize_contracts_response(payload: Any, strict: bool = False) -> ContractsPage:
    """Validate a list envelope and normalize every record."""
    if not isinstance(payload, dict) or not isinstance(payload.get("contracts"), list):
        raise SchemaError("Invalid API response: missing contracts array")
    try:
        envelope = ContractsApiResponse.model_validate(payload)
        contracts = [transform_api_contract(record, strict) for record in envelope.contracts]
    except ValidationError as exc:
        raise SchemaError("Invalid API response: malformed contract list", {"errors": exc.error_count()}) from exc

    summary = ApiSummary(
        source=envelope.metadata.source,
        simulated_fields=list(envelope.metadata.simulated_fields),
        total_analyzed=envelope.total_analyzed,
        total_high_risk=envelope.total_high_risk,
        total_amount=envelope.total_amount,
    )
    return ContractsPage(contracts=contracts, summary=summary)


def normalize_analysis_response(payload: Any, strict: bool = False) -> AnalysisDetail:
    """Validate an analysis envelope; both contract and analysis blocks are required."""
    if not isinstance(payload, dict):
        raise SchemaError("Invalid API response: expected a JSON object")
    try:
        envelope = ContractAnalysisApiResponse.model_validate(payload)
    except ValidationError as exc:
        raise SchemaError("Invalid API response: malformed analysis", {"errors": exc.error_count()}) from exc

    if envelope.contract is None or envelope.analysis is None:
        raise SchemaError("Invalid API response: missing contract or analysis data")

    try:
        contract = transform_analysis_contract(envelope.contract, strict)
    except ValidationError as exc:
        raise SchemaError("Invalid API response: malformed contract", {"errors": exc.error_count()}) from exc
    return AnalysisDetail(contract=contract, analysis=transform_api_analysis(envelope.analysis))
