"""
Contract analysis endpoint: contract detail, AI explanation and SHAP values.
"""
from fastapi import APIRouter, Depends, Path

from ..dependencies import get_contracts_client
from ..helpers.formatting import rank_shap_values
from ..models.analysis import AnalysisResponse
from ..services.contracts_client import ContractsClient

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/{contract_id}", response_model=AnalysisResponse)
def get_contract_analysis(
    contract_id: str = Path(..., min_length=1, description="Contract code"),
    client: ContractsClient = Depends(get_contracts_client),
):
    """
    Get the AI analysis for one contract.

    `shap_ranking` holds the same SHAP values ordered by absolute impact.
    Unknown ids answer 404.
    """
    detail = client.fetch_contract_analysis(contract_id)
    return AnalysisResponse(
        contract=detail.contract,
        analysis=detail.analysis,
        shap_ranking=rank_shap_values(detail.analysis.shap_values),
    )
