from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Location(Frozen):
    lat: float
    lng: float


class EstimatedCosts(Frozen):
    procedure_name: str
    average_cost: float
    with_insurance_cost: float
    patient_responsibility: float
    # expected to roughly add up to average_cost with patient_responsibility; not validated
    insurance_covers: float


class HospitalWithCosts(Frozen):
    name: str
    address: str
    phone: str
    hospital_type: str
    accepts_insurance: bool
    estimated_costs: EstimatedCosts


class DeductibleInfo(Frozen):
    annual_deductible: float
    deductible_met: bool
    remaining_deductible: float


class CoverageDetails(Frozen):
    coverage_percentage: int
    in_network: bool


class CostAnalysis(Frozen):
    symptoms: str
    likely_procedures: List[str]
    deductible_info: DeductibleInfo
    coverage_details: CoverageDetails


class SearchResponse(Frozen):
    status: str
    message: str
    insurance_provider: str
    location: Location
    symptoms: str
    hospitals: List[HospitalWithCosts]
    cost_analysis: Optional[CostAnalysis] = None
    total_found: int
