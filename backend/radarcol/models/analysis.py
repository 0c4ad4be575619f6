"""
Pydantic models for the single-contract analysis endpoint.

SHAP values are pre-computed upstream; a positive value pushes the
anomaly probability up, a negative one pulls it down.
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .contract import Contract


class ApiShapValue(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    variable: str
    value: float
    description: str = ""
    actual_value: Optional[Union[float, str]] = Field(None, alias="actualValue")


class ApiAnalysis(BaseModel):
    """Analysis block as returned by GET /contracts/{id}/analysis."""
    model_config = ConfigDict(populate_by_name=True)

    contract_id: str = Field(alias="contractId")
    summary: str
    key_factors: List[str] = Field(default_factory=list, alias="keyFactors")
    recommendations: List[str] = Field(default_factory=list)
    shap_values: List[ApiShapValue] = Field(default_factory=list, alias="shapValues")
    base_probability: float = Field(alias="baseProbability")
    confidence: float
    analysis_date: datetime = Field(alias="analysisDate")


class ApiAnalysisContract(BaseModel):
    """Contract block of the analysis envelope (flat, unlike the list shape)."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[str, int]] = None
    code: str
    description: str
    entity: str
    amount: Union[str, int, float]
    start_date: Optional[str] = Field(None, alias="startDate")
    risk_level: str = Field(alias="riskLevel")
    anomaly: float


class ContractAnalysisApiResponse(BaseModel):
    """Envelope of the analysis endpoint. Both blocks are checked by the normalizer."""
    contract: Optional[ApiAnalysisContract] = None
    analysis: Optional[ApiAnalysis] = None


# --- Internal models ---


class ShapValue(BaseModel):
    """Contribution of one model feature, in percentage points."""
    variable: str
    value: float
    description: str = ""
    actual_value: Optional[Union[float, str]] = None


class ContractAnalysis(BaseModel):
    """AI explanation for one contract."""
    contract_id: str
    summary: str
    key_factors: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    shap_values: List[ShapValue] = Field(default_factory=list)
    base_probability: float
    confidence: float = Field(description="Model confidence (0-100)")
    analysis_date: datetime


class AnalysisDetail(BaseModel):
    """Normalized result of an analysis lookup."""
    contract: Contract
    analysis: ContractAnalysis


class AnalysisResponse(AnalysisDetail):
    """Analysis endpoint response with SHAP values ordered by impact."""
    shap_ranking: List[ShapValue] = Field(default_factory=list)
