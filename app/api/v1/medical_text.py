"""
Medical Text API Endpoints

Direct access to the clinic's medicine normalization, condition detection and
form-autocomplete helpers.
"""

from fastapi import APIRouter, Depends, Query

from app.core.auth import verify_api_key
from app.core.logging import get_logger
from app.dependencies import get_clinic_data_source
from app.schemas.medical_text import (
    DetectConditionsResponse,
    ExtractMedicinesResponse,
    GroupMedicinesRequest,
    GroupMedicinesResponse,
    NormalizeRequest,
    NormalizeResponse,
    SuggestionsResponse,
    TextRequest,
)
from app.services.clinic_data import ClinicDataSource
from app.services.condition_detector import detect_conditions
from app.services.medicine_normalizer import (
    extract_medicines,
    group_medicines,
    normalize_medicine,
)
from app.services.suggestions import suggest_conditions, suggest_medicines

logger = get_logger(__name__)

router = APIRouter(
    prefix="/medical-text",
    tags=["medical-text"],
    dependencies=[Depends(verify_api_key)]
)


# ============================================================================
# MEDICINES
# ============================================================================

@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(request: NormalizeRequest) -> NormalizeResponse:
    """Normalize one medicine mention (brand -> generic, unit spacing, casing)."""
    return NormalizeResponse(
        original=request.medicine,
        normalized=normalize_medicine(request.medicine)
    )


@router.post("/medicines/extract", response_model=ExtractMedicinesResponse)
async def extract(request: TextRequest) -> ExtractMedicinesResponse:
    """Split a medicines note into normalized names, one per line."""
    medicines = extract_medicines(request.text)
    logger.debug(f"Extracted {len(medicines)} medicines")
    return ExtractMedicinesResponse(medicines=medicines)


@router.post("/medicines/group", response_model=GroupMedicinesResponse)
async def group(request: GroupMedicinesRequest) -> GroupMedicinesResponse:
    """Count medicines by dosage-free name."""
    return GroupMedicinesResponse(groups=group_medicines(request.medicines))


# ============================================================================
# CONDITIONS
# ============================================================================

@router.post("/conditions/detect", response_model=DetectConditionsResponse)
async def detect(request: TextRequest) -> DetectConditionsResponse:
    """Detect canonical conditions in a signs/symptoms note."""
    return DetectConditionsResponse(conditions=detect_conditions(request.text))


# ============================================================================
# AUTOCOMPLETE
# ============================================================================

@router.get("/suggestions/conditions", response_model=SuggestionsResponse)
async def condition_suggestions(
    q: str = Query("", max_length=200, description="Text typed so far")
) -> SuggestionsResponse:
    """Suggest conditions matching the last word typed."""
    return SuggestionsResponse(query=q, suggestions=suggest_conditions(q))


@router.get("/suggestions/medicines", response_model=SuggestionsResponse)
async def medicine_suggestions(
    q: str = Query("", max_length=200, description="Current medicine line"),
    source: ClinicDataSource = Depends(get_clinic_data_source)
) -> SuggestionsResponse:
    """Suggest medicines, clinic-specific names first."""
    custom_names = await source.fetch_custom_medicines()
    return SuggestionsResponse(query=q, suggestions=suggest_medicines(q, custom_names))
