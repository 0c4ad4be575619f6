"""
Contracts API client: the remote fetch adapter.

Issues GET requests against the upstream contracts API, parses the JSON
envelope and returns normalized models. Failures surface immediately as
NetworkError / HttpError / NotFoundError / SchemaError; retry policy, if
any, belongs to the caller.
"""
from __future__ import annotations

from typing import Any

import httpx
import structlog

from ..config.api_config import ApiConfig
from ..middleware.error_handler import HttpError, NetworkError, NotFoundError, SchemaError
from ..models.analysis import AnalysisDetail
from ..models.contract import ContractsPage, FilterCriteria
from .normalizer import normalize_analysis_response, normalize_contracts_response
from .query_builder import build_query_params

logger = structlog.get_logger("radarcol.services.contracts_client")

HEADERS = {
    "Accept": "application/json",
    "User-Agent": "RadarCol-Dashboard/1.0",
}


class ContractsClient:
    """HTTP adapter for the contracts API."""

    def __init__(self, config: ApiConfig, http_client: httpx.Client | None = None):
        """
        Args:
            config: Base URL, endpoints and timeout
            http_client: Optional pre-built client (tests pass one with a
                         MockTransport). When omitted the client owns one.
        """
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            timeout=config.timeout_seconds,
            headers=HEADERS,
            follow_redirects=True,
        )

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> ContractsClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Transport ---

    def _get(self, url: str, params: list[tuple[str, str]] | None = None) -> httpx.Response:
        """GET url; transport failures become NetworkError."""
        logger.debug("upstream_request", url=url, params=params or [])
        try:
            response = self._http.get(url, params=params)
        except httpx.TransportError as exc:
            logger.error("upstream_unreachable", url=url, error_type=type(exc).__name__, error=str(exc))
            raise NetworkError(
                f"Cannot reach contracts API at {self.config.base_url}",
                {"url": url, "reason": type(exc).__name__},
            ) from exc
        logger.info("upstream_response", url=url, status=response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise SchemaError("Invalid API response: body is not JSON", {"url": str(response.url)}) from exc

    @staticmethod
    def _http_error(response: httpx.Response) -> HttpError:
        return HttpError(
            f"HTTP error: {response.status_code} - {response.reason_phrase}",
            status=response.status_code,
        )

    # --- Operations ---

    def fetch_contracts(
        self,
        filters: FilterCriteria | None = None,
        limit: int | None = None,
    ) -> ContractsPage:
        """
        Fetch the contract list matching filters.

        Args:
            filters: Sparse filter criteria (None means no filtering)
            limit: Optional result-size cap, clamped to [1, 100]

        Returns:
            ContractsPage with normalized contracts and the server summary
        """
        return self.fetch_contracts_with_params(build_query_params(filters, limit))

    def fetch_contracts_with_params(self, params: list[tuple[str, str]]) -> ContractsPage:
        """Fetch the contract list for an already-built parameter list."""
        response = self._get(self.config.contracts_url(), params)
        if not response.is_success:
            raise self._http_error(response)
        payload = self._decode(response)

        page = normalize_contracts_response(payload, strict=self.config.strict_risk_levels)
        logger.info("contracts_fetched", count=len(page.contracts))
        return page

    def fetch_contract_analysis(self, contract_id: str) -> AnalysisDetail:
        """
        Fetch the AI analysis for one contract.

        Raises:
            NotFoundError: upstream answered 404 for this id
        """
        response = self._get(self.config.analysis_url(contract_id))
        if response.status_code == 404:
            raise NotFoundError(contract_id)
        if not response.is_success:
            raise self._http_error(response)
        payload = self._decode(response)

        detail = normalize_analysis_response(payload, strict=self.config.strict_risk_levels)
        logger.info(
            "analysis_fetched",
            contract_id=contract_id,
            risk_level=detail.contract.risk_level.value,
            shap_values=len(detail.analysis.shap_values),
        )
        return detail
