"""API endpoints for campaign personas."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from inclusive_hub.core.config import settings
from inclusive_hub.core.deps import get_generator, get_store
from inclusive_hub.schemas.common import ApiResponse
from inclusive_hub.schemas.persona import CampaignCreate, CampaignPersona, PersonaPage
from inclusive_hub.services.mock_data import MockDataGenerator, sector_for
from inclusive_hub.services.store import PersonaStore

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=PersonaPage, response_model_exclude_none=True)
async def list_campaigns(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    freeze: bool = Query(False, description="Always serve the first page"),
    store: PersonaStore = Depends(get_store),
) -> PersonaPage:
    """List personas newest first."""
    start = 0 if freeze else (page - 1) * limit
    end = start + limit
    total = len(store)
    return PersonaPage(
        data=store.slice(start, end),
        page=page,
        limit=limit,
        total=total,
        has_more=end < total,
    )


@router.get(
    "/{persona_id}",
    response_model=ApiResponse[CampaignPersona],
    response_model_exclude_none=True,
)
async def get_campaign(persona_id: str, store: PersonaStore = Depends(get_store)):
    persona = store.get(persona_id)
    if persona is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")
    return ApiResponse[CampaignPersona](data=persona)


@router.post(
    "",
    response_model=ApiResponse[CampaignPersona],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_campaign(
    payload: CampaignCreate,
    store: PersonaStore = Depends(get_store),
    generator: MockDataGenerator = Depends(get_generator),
):
    """Generate a persona, apply the submitted fields and put it at the front of the list."""
    persona = generator.persona().model_copy(
        update={
            "business_name": payload.business_name,
            "business_type": payload.business_type,
            "sector": sector_for(payload.business_type),
            "target_audience": payload.target_audience,
            "marketing_goals": payload.marketing_goals,
        }
    )
    store.prepend(persona)
    logger.bind(persona_id=persona.id, total=len(store)).info("campaign_created")
    return ApiResponse[CampaignPersona](data=persona, message="Campaign created successfully")
