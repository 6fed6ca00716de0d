from typing import List, Optional

from pydantic import BaseModel, Field

from .hospitals import SearchResponse


class SearchQuery(BaseModel):
    user_id: str = Field(..., min_length=1)
    symptoms: str = Field(..., min_length=1, description="Free-text symptoms, e.g. 'chest pain'")
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lng: Optional[float] = Field(default=None, ge=-180.0, le=180.0)


class HospitalCard(BaseModel):
    name: str
    address: str
    phone: str
    hospital_type: str
    accepts_insurance: bool
    procedure_name: str
    average_cost: int
    insurance_covers: int
    patient_responsibility: int
    savings: int
    maps_url: str
    tel_url: str


class CostAnalysisPanel(BaseModel):
    symptoms: str
    likely_procedures: List[str] = []
    annual_deductible: int
    remaining_deductible: int
    deductible_met: bool
    coverage_percentage: int
    in_network: bool


class SearchOutcome(BaseModel):
    user_id: str
    symptoms: str
    generation: int = 0
    superseded: bool = False
    error_message: Optional[str] = None
    expiry_message: Optional[str] = None
    used_mock_data: bool = False
    response: Optional[SearchResponse] = None
    hospitals: List[HospitalCard] = []
    cost_analysis: Optional[CostAnalysisPanel] = None
