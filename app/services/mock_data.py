from app.schemas.hospitals import SearchResponse


# Canned agent reply used while the hospital search agent is unavailable or
# returning payloads this client can't read.
MOCK_SEARCH_RESPONSE_JSON = """
{
    "status": "success",
    "message": "Found 6 hospitals with cost estimates for symptoms: chest pain",
    "insurance_provider": "Cigna",
    "location": {
        "lat": 40.71427,
        "lng": -74.00597
    },
    "symptoms": "chest pain",
    "hospitals": [
        {
            "name": "NYC Health + Hospitals/Bellevue",
            "address": "462 1st Ave, New York, NY 10016",
            "phone": "(212) 562-4141",
            "hospital_type": "Public, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 2500,
                "with_insurance_cost": 700,
                "patient_responsibility": 700,
                "insurance_covers": 1800
            }
        },
        {
            "name": "NYC Health + Hospitals/Metropolitan",
            "address": "1901 1st Ave, New York, NY 10029",
            "phone": "(212) 423-6262",
            "hospital_type": "Public, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 2300,
                "with_insurance_cost": 660,
                "patient_responsibility": 660,
                "insurance_covers": 1640
            }
        },
        {
            "name": "Mount Sinai Hospital",
            "address": "1425 Madison Ave, New York, NY 10029",
            "phone": "(212) 241-6500",
            "hospital_type": "Private, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 3000,
                "with_insurance_cost": 1100,
                "patient_responsibility": 1100,
                "insurance_covers": 1900
            }
        },
        {
            "name": "NewYork-Presbyterian/Weill Cornell Medical Center",
            "address": "525 E 68th St, New York, NY 10065",
            "phone": "(212) 746-5454",
            "hospital_type": "Private, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 3200,
                "with_insurance_cost": 1140,
                "patient_responsibility": 1140,
                "insurance_covers": 2060
            }
        },
        {
            "name": "Lenox Hill Hospital",
            "address": "100 E 77th St, New York, NY 10075",
            "phone": "(212) 434-2000",
            "hospital_type": "Private, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 2800,
                "with_insurance_cost": 760,
                "patient_responsibility": 760,
                "insurance_covers": 2040
            }
        },
        {
            "name": "NYU Langone Hospitals",
            "address": "550 1st Ave, New York, NY 10016",
            "phone": "(212) 263-7300",
            "hospital_type": "Private, Teaching Hospital",
            "accepts_insurance": true,
            "estimated_costs": {
                "procedure_name": "Evaluation and Treatment for Chest Pain",
                "average_cost": 3100,
                "with_insurance_cost": 1120,
                "patient_responsibility": 1120,
                "insurance_covers": 1980
            }
        }
    ],
    "cost_analysis": {
        "symptoms": "chest pain",
        "likely_procedures": [
            "Electrocardiogram (EKG)",
            "Blood Tests (Cardiac Enzymes, CBC, BMP)",
            "Cardiac Stress Test",
            "Coronary Angiogram",
            "Cardiac Catheterization"
        ],
        "deductible_info": {
            "annual_deductible": 5000,
            "deductible_met": false,
            "remaining_deductible": 5000
        },
        "coverage_details": {
            "coverage_percentage": 80,
            "in_network": true
        }
    },
    "total_found": 6
}
"""


def mock_search_response() -> SearchResponse:
    return SearchResponse.model_validate_json(MOCK_SEARCH_RESPONSE_JSON)
