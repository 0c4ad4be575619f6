"""
Pydantic models for contracts: the upstream wire shapes and the
normalized internal record.
"""
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """Coarse three-tier classification of anomaly probability."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Contract(BaseModel):
    """Normalized contract record used everywhere past the fetch adapter."""
    id: str = Field(description="Contract code, stable identifier")
    title: str
    entity: str = Field(description="Contracting public body")
    amount: int = Field(ge=0, description="Amount in whole currency units")
    signed_date: Optional[date] = None
    risk_level: RiskLevel
    anomaly_probability: int = Field(ge=0, le=100)
    contractor: Optional[str] = None
    description: Optional[str] = None


class FilterCriteria(BaseModel):
    """Sparse filter options. None on a field means no constraint."""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    title_contains: Optional[str] = None
    contract_id: Optional[str] = None


# --- Upstream wire models ---


class ApiContractInfo(BaseModel):
    """Nested code/description block of an upstream contract."""
    code: str
    description: str


class ApiContract(BaseModel):
    """Contract record as returned by GET /contracts."""
    model_config = ConfigDict(populate_by_name=True)

    contract: ApiContractInfo
    entity: str
    amount: Union[str, int, float]
    start_date: Optional[str] = Field(None, alias="startDate")
    risk_level: str = Field(alias="riskLevel")
    anomaly: float
    contractor: Optional[str] = None
    purpose: Optional[str] = Field(None, alias="object")


class ApiMetadata(BaseModel):
    """Provenance block of the list envelope."""
    model_config = ConfigDict(populate_by_name=True)

    source: Optional[str] = None
    simulated_fields: List[str] = Field(default_factory=list, alias="simulatedFields")


class ContractsApiResponse(BaseModel):
    """Full envelope of GET /contracts."""
    model_config = ConfigDict(populate_by_name=True)

    metadata: ApiMetadata = Field(default_factory=ApiMetadata)
    total_analyzed: Optional[int] = Field(None, alias="totalAnalyzed")
    total_high_risk: Optional[int] = Field(None, alias="totalHighRisk")
    total_amount: Optional[float] = Field(None, alias="totalAmount")
    contracts: List[ApiContract]


class ApiSummary(BaseModel):
    """Server-reported figures for the whole remote population."""
    source: Optional[str] = None
    simulated_fields: List[str] = Field(default_factory=list)
    total_analyzed: Optional[int] = None
    total_high_risk: Optional[int] = None
    total_amount: Optional[float] = None


class ContractsPage(BaseModel):
    """Normalized result of a list fetch."""
    contracts: List[Contract]
    summary: ApiSummary
