"""Pydantic models for platform statistics."""

from typing import Dict, List

from pydantic import Field

from inclusive_hub.schemas.common import CamelModel


class TopBiasType(CamelModel):
    type: str
    count: int
    percentage: float


class LanguageDistribution(CamelModel):
    en: int = 0
    id: int = 0


class PlatformStats(CamelModel):
    """Aggregates over the persona store plus a few reporting constants."""

    total_campaigns: int = Field(description="Number of personas in the store")
    total_bias_checks: int = 0
    average_inclusivity_score: float = 0
    total_biases_detected: float = 0
    bias_reduction: float = 0
    top_bias_types: List[TopBiasType] = Field(default_factory=list)
    language_distribution: LanguageDistribution = Field(default_factory=LanguageDistribution)
    monthly_growth: float = 0
    business_type_distribution: Dict[str, int] = Field(default_factory=dict)
    city_distribution: Dict[str, int] = Field(default_factory=dict)
