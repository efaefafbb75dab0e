"""Pydantic models for campaign persona endpoints."""

from typing import List

from pydantic import Field, field_validator

from inclusive_hub.schemas.common import ApiResponse, CamelModel


class Demographics(CamelModel):
    """Owner demographics for a persona."""

    age: int = Field(description="Owner age in years")
    gender: str = Field(description="Male, Female or Non-binary")
    education: str = Field(description="Highest education level")
    experience: str = Field(description="Years in business, e.g. '7 years'")


class DigitalPresence(CamelModel):
    """Online footprint of the business."""

    has_website: bool
    has_social_media: bool
    platforms: List[str] = Field(default_factory=list)
    monthly_posts: int = 0


class CampaignPersona(CamelModel):
    """Synthetic small-business profile used as a campaign target."""

    id: str
    name: str
    business_name: str
    business_type: str
    sector: str
    city: str
    province: str
    demographics: Demographics
    pain_points: List[str]
    marketing_goals: List[str]
    target_audience: str
    monthly_revenue: str
    digital_presence: DigitalPresence
    created_at: str = Field(description="ISO-8601 UTC creation timestamp")


class CampaignCreate(CamelModel):
    """Request body for creating a persona."""

    business_name: str = Field(..., max_length=255)
    business_type: str = Field(..., max_length=100)
    target_audience: str = Field(..., max_length=500)
    marketing_goals: List[str] = Field(..., min_length=1)

    @field_validator("business_name", "business_type", "target_audience")
    @classmethod
    def require_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("marketing_goals")
    @classmethod
    def drop_blank_goals(cls, v: List[str]) -> List[str]:
        goals = [goal.strip() for goal in v if goal.strip()]
        if not goals:
            raise ValueError("must contain at least one non-empty goal")
        return goals


class PersonaPage(ApiResponse[List[CampaignPersona]]):
    """Paginated persona listing."""

    page: int
    limit: int
    total: int
    has_more: bool
