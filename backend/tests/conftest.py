"""
Pytest fixtures: sample upstream payloads, a MockTransport-backed
contracts client, and a TestClient wired to it.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from radarcol.cache import app_cache, CONTRACTS_CACHE
from radarcol.config.api_config import ApiConfig
from radarcol.dependencies import get_contracts_client
from radarcol.main import app
from radarcol.services.contracts_client import ContractsClient

BASE_URL = "http://upstream.test"


def make_raw_contract(code="CONT-2024-001", risk="Alto", anomaly=87, amount="4500000000",
                      start_date="2024-11-15", description="Adquisición de equipos médicos"):
    return {
        "contract": {"code": code, "description": description},
        "entity": "Ministerio de Salud y Protección Social",
        "amount": amount,
        "startDate": start_date,
        "riskLevel": risk,
        "anomaly": anomaly,
    }


def make_contracts_payload(contracts=None):
    if contracts is None:
        contracts = [
            make_raw_contract("CONT-2024-001", "Alto", 87, "4500000000"),
            make_raw_contract("CONT-2024-002", "Medio", 64, "8200000000", "2024-10-22"),
            make_raw_contract("CONT-2024-003", "Bajo", 12, "350000000", None),
        ]
    return {
        "metadata": {"source": "SECOP II", "simulatedFields": ["riskLevel"]},
        "totalAnalyzed": 15230,
        "totalHighRisk": 1840,
        "totalAmount": 98500000000000,
        "contracts": contracts,
    }


def make_analysis_payload(code="CONT-2024-001"):
    return {
        "contract": {
            "id": 1,
            "code": code,
            "description": "Adquisición de equipos médicos",
            "entity": "Ministerio de Salud y Protección Social",
            "amount": "$4,500,000,000",
            "startDate": "2024-11-15",
            "riskLevel": "Alto",
            "anomaly": 87,
        },
        "analysis": {
            "contractId": code,
            "summary": "High anomaly probability driven by amount deviation.",
            "keyFactors": ["Amount 340% above similar contracts"],
            "recommendations": ["Benchmark the amount against market prices"],
            "shapValues": [
                {"variable": "bidder_count", "value": 12.3, "description": "Number of bidders", "actualValue": "2"},
                {"variable": "amount_vs_mean", "value": 18.5, "description": "Amount deviation", "actualValue": "+340%"},
                {"variable": "entity_history", "value": -4.1, "description": "Entity track record", "actualValue": 0.3},
            ],
            "baseProbability": 35,
            "confidence": 92,
            "analysisDate": "2024-11-20T10:30:00Z",
        },
    }


class UpstreamStub:
    """Records requests and answers with a configurable handler."""

    def __init__(self, handler=None):
        self.requests = []
        self.handler = handler or (lambda request: httpx.Response(200, json=make_contracts_payload()))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def api_config():
    return ApiConfig(base_url=BASE_URL)


@pytest.fixture
def contracts_client(api_config, upstream):
    http = httpx.Client(transport=httpx.MockTransport(upstream))
    with ContractsClient(api_config, http_client=http) as client:
        yield client
    http.close()


@pytest.fixture(autouse=True)
def clear_contracts_cache():
    app_cache.invalidate(CONTRACTS_CACHE)
    yield
    app_cache.invalidate(CONTRACTS_CACHE)


@pytest.fixture
def client(contracts_client):
    """Test client whose routers talk to the stubbed upstream."""
    app.dependency_overrides[get_contracts_client] = lambda: contracts_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def base_url():
    """Base URL for API v1 endpoints."""
    return "/api/v1"
