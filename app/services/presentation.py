from typing import Optional

from app.schemas.hospitals import CostAnalysis, HospitalWithCosts, SearchResponse
from app.schemas.search import CostAnalysisPanel, HospitalCard, SearchOutcome
from app.services.coverage import classify_search_error
from app.services.links import maps_url, tel_url
from app.services.mock_data import mock_search_response


def hospital_card(hospital: HospitalWithCosts) -> HospitalCard:
    costs = hospital.estimated_costs
    # whole dollars, truncated
    return HospitalCard(
        name=hospital.name,
        address=hospital.address,
        phone=hospital.phone,
        hospital_type=hospital.hospital_type,
        accepts_insurance=hospital.accepts_insurance,
        procedure_name=costs.procedure_name,
        average_cost=int(costs.average_cost),
        insurance_covers=int(costs.insurance_covers),
        patient_responsibility=int(costs.patient_responsibility),
        savings=int(costs.average_cost - costs.patient_responsibility),
        maps_url=maps_url(hospital.address),
        tel_url=tel_url(hospital.phone),
    )


def cost_analysis_panel(analysis: Optional[CostAnalysis]) -> Optional[CostAnalysisPanel]:
    if analysis is None:
        return None
    return CostAnalysisPanel(
        symptoms=analysis.symptoms,
        likely_procedures=list(analysis.likely_procedures),
        annual_deductible=int(analysis.deductible_info.annual_deductible),
        remaining_deductible=int(analysis.deductible_info.remaining_deductible),
        deductible_met=analysis.deductible_info.deductible_met,
        coverage_percentage=analysis.coverage_details.coverage_percentage,
        in_network=analysis.coverage_details.in_network,
    )


def present(user_id: str, symptoms: str, response: SearchResponse, used_mock_data: bool = False) -> SearchOutcome:
    error_message = None
    if not response.hospitals:
        error_message = f"No hospitals found for '{symptoms}'. Try a different symptom or condition."
    return SearchOutcome(
        user_id=user_id,
        symptoms=symptoms,
        error_message=error_message,
        used_mock_data=used_mock_data,
        response=response,
        hospitals=[hospital_card(h) for h in response.hospitals],
        cost_analysis=cost_analysis_panel(response.cost_analysis),
    )


def present_failure(user_id: str, symptoms: str, message: str, show_mock: bool) -> SearchOutcome:
    info = classify_search_error(message)
    if show_mock:
        outcome = present(user_id, symptoms, mock_search_response(), used_mock_data=True)
    else:
        outcome = SearchOutcome(user_id=user_id, symptoms=symptoms)
    return outcome.model_copy(
        update={"error_message": info.error_message, "expiry_message": info.expiry_message}
    )


def unavailable(user_id: str, symptoms: str, message: str) -> SearchOutcome:
    return SearchOutcome(user_id=user_id, symptoms=symptoms, error_message=message)
