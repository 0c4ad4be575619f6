"""
Tests for upstream payload normalization.
"""
from datetime import date, datetime, timezone

import pytest

from conftest import make_analysis_payload, make_contracts_payload, make_raw_contract
from radarcol.middleware.error_handler import SchemaError
from radarcol.models.contract import RiskLevel
from radarcol.services.normalizer import (
    normalize_analysis_response,
    normalize_contracts_response,
    normalize_risk_level,
    parse_amount,
    parse_start_date,
)


class TestRiskLevel:
    """Test risk label mapping."""

    def test_spanish_labels(self):
        assert normalize_risk_level("Alto") == RiskLevel.HIGH
        assert normalize_risk_level("Medio") == RiskLevel.MEDIUM
        assert normalize_risk_level("Bajo") == RiskLevel.LOW

    def test_english_labels_case_insensitive(self):
        assert normalize_risk_level("High") == RiskLevel.HIGH
        assert normalize_risk_level("MEDIUM") == RiskLevel.MEDIUM
        assert normalize_risk_level(" low ") == RiskLevel.LOW

    def test_unknown_label_falls_back_to_low(self):
        assert normalize_risk_level("Altísimo") == RiskLevel.LOW
        assert normalize_risk_level(None) == RiskLevel.LOW

    def test_unknown_label_strict_raises(self):
        with pytest.raises(SchemaError, match="Unknown risk level"):
            normalize_risk_level("Crítico", strict=True)


class TestFieldParsing:
    """Test amount and date parsing."""

    def test_plain_amount(self):
        assert parse_amount("4500000000") == 4_500_000_000

    def test_formatted_amount(self):
        assert parse_amount("$1,200,000.75") == 1_200_000

    def test_numeric_amount(self):
        assert parse_amount(350000000) == 350_000_000
        assert parse_amount(12.9) == 12

    def test_bad_amounts(self):
        for raw in ["", "N/A", "-5", True]:
            with pytest.raises(SchemaError):
                parse_amount(raw)

    def test_missing_date_is_none(self):
        assert parse_start_date(None) is None
        assert parse_start_date("") is None

    def test_dates(self):
        assert parse_start_date("2024-11-15") == date(2024, 11, 15)
        assert parse_start_date("2024-11-15T08:00:00Z") == date(2024, 11, 15)

    def test_bad_date(self):
        with pytest.raises(SchemaError):
            parse_start_date("15/11/2024")


class TestContractsResponse:
    """Test list envelope normalization."""

    def test_records_flattened(self):
        page = normalize_contracts_response(make_contracts_payload())
        first = page.contracts[0]
        assert first.id == "CONT-2024-001"
        assert first.title == "Adquisición de equipos médicos"
        assert first.amount == 4_500_000_000
        assert first.signed_date == date(2024, 11, 15)
        assert first.risk_level == RiskLevel.HIGH
        assert first.anomaly_probability == 87
        assert page.contracts[2].signed_date is None

    def test_summary_passed_through(self):
        page = normalize_contracts_response(make_contracts_payload())
        assert page.summary.source == "SECOP II"
        assert page.summary.simulated_fields == ["riskLevel"]
        assert page.summary.total_analyzed == 15230
        assert page.summary.total_high_risk == 1840
        assert page.summary.total_amount == 98500000000000

    def test_missing_summary_fields_are_none(self):
        page = normalize_contracts_response({"contracts": []})
        assert page.contracts == []
        assert page.summary.total_analyzed is None
        assert page.summary.simulated_fields == []

    def test_missing_contracts_array(self):
        for payload in [{}, {"contracts": None}, {"contracts": {}}, [], "text"]:
            with pytest.raises(SchemaError, match="missing contracts array"):
                normalize_contracts_response(payload)

    def test_malformed_record(self):
        payload = make_contracts_payload([{"entity": "no contract block"}])
        with pytest.raises(SchemaError, match="malformed"):
            normalize_contracts_response(payload)

    def test_anomaly_out_of_range(self):
        payload = make_contracts_payload([make_raw_contract(anomaly=140)])
        with pytest.raises(SchemaError, match="out of range"):
            normalize_contracts_response(payload)

    def test_non_finite_anomaly(self):
        """NaN and infinity are schema errors, not ValueError/OverflowError."""
        for raw in [float("nan"), float("inf"), float("-inf")]:
            payload = make_contracts_payload([make_raw_contract(anomaly=raw)])
            with pytest.raises(SchemaError, match="not a number"):
                normalize_contracts_response(payload)

    def test_anomaly_rounds_half_up(self):
        page = normalize_contracts_response(
            make_contracts_payload([make_raw_contract(anomaly=86.5), make_raw_contract(anomaly=99.5)])
        )
        assert [c.anomaly_probability for c in page.contracts] == [87, 100]


class TestAnalysisResponse:
    """Test analysis envelope normalization."""

    def test_contract_and_analysis(self):
        detail = normalize_analysis_response(make_analysis_payload())
        assert detail.contract.id == "CONT-2024-001"
        assert detail.contract.amount == 4_500_000_000
        assert detail.contract.risk_level == RiskLevel.HIGH
        assert detail.analysis.contract_id == "CONT-2024-001"
        assert detail.analysis.base_probability == 35
        assert detail.analysis.analysis_date == datetime(2024, 11, 20, 10, 30, tzinfo=timezone.utc)
        assert [s.variable for s in detail.analysis.shap_values] == [
            "bidder_count", "amount_vs_mean", "entity_history",
        ]
        assert detail.analysis.shap_values[2].actual_value == 0.3

    def test_missing_analysis_block(self):
        payload = make_analysis_payload()
        del payload["analysis"]
        with pytest.raises(SchemaError, match="missing contract or analysis"):
            normalize_analysis_response(payload)

    def test_missing_contract_block(self):
        payload = make_analysis_payload()
        payload["contract"] = None
        with pytest.raises(SchemaError, match="missing contract or analysis"):
            normalize_analysis_response(payload)
