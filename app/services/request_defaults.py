import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TRADING_PARTNERS: Dict[str, str] = {
    "Cigna": "62308",
    "Aetna": "60054",
    "UnitedHealthcare": "87726",
    "Humana": "61101",
    "Anthem": "00227",
    "Blue Cross Blue Shield": "00060",
    "Kaiser Permanente": "94134",
}


class RequestDefaults(BaseModel):
    """Static values the request builder falls back to when stored data is thin."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    trading_partners: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TRADING_PARTNERS))
    default_trading_partner_id: str = "62308"

    payer_name: str = "CHLIC"
    payer_last_name: str = "CHLIC"
    payer_federal_taxpayers_id_number: str = "591056496"
    # (communication mode, communication number)
    payer_contacts: List[Tuple[str, str]] = Field(
        default_factory=lambda: [
            ("Telephone", "8002446224"),
            ("Uniform Resource Locator (URL)", "cignaforhcp.cigna.com"),
        ]
    )

    group_number: str = "6500216"
    group_description: str = "Simonis - Bechtelar"

    plan_begin: str = "20240101"
    eligibility_begin: str = "20210101"

    plan_details: str = "Open Access Plus"
    service_type: str = "Health Benefit Plan Coverage"
    deductible_amount: str = "5000"


def load_request_defaults(path: Optional[str] = None) -> RequestDefaults:
    """
    Build defaults, optionally overlaid with a JSON file.
    Keys in the file replace the matching field wholesale; unknown keys are rejected.
    """
    if not path:
        return RequestDefaults()
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return RequestDefaults.model_validate(raw)
