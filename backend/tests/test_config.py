"""
Tests for ApiConfig.
"""
import pytest

from radarcol.config.api_config import ApiConfig
from radarcol.config.constants import DEFAULT_API_BASE_URL


class TestApiConfig:
    """Test URL building and environment loading."""

    def test_defaults(self):
        config = ApiConfig()
        assert config.base_url == DEFAULT_API_BASE_URL
        assert config.timeout_seconds == 10.0
        assert config.strict_risk_levels is False

    def test_trailing_slash_stripped(self):
        config = ApiConfig(base_url="http://localhost:8000/")
        assert config.contracts_url() == "http://localhost:8000/contracts"

    def test_analysis_url_quotes_id(self):
        config = ApiConfig(base_url="http://localhost:8000")
        assert config.analysis_url("CONT-1") == "http://localhost:8000/contracts/CONT-1/analysis"
        assert config.analysis_url("a/b c") == "http://localhost:8000/contracts/a%2Fb%20c/analysis"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("RADARCOL_API_BASE_URL", "http://api.internal:9000")
        monkeypatch.setenv("RADARCOL_API_TIMEOUT", "2.5")
        monkeypatch.setenv("RADARCOL_STRICT_RISK_LEVELS", "true")
        config = ApiConfig.from_env()
        assert config.base_url == "http://api.internal:9000"
        assert config.timeout_seconds == 2.5
        assert config.strict_risk_levels is True

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            ApiConfig(timeout_seconds=0)
