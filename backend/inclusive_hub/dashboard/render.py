"""Plain-text rendering of dashboard data for terminal use."""

from typing import Iterable, List

from inclusive_hub.schemas.bias import BiasInsight
from inclusive_hub.schemas.copy_suggestion import CopySuggestion
from inclusive_hub.schemas.persona import CampaignPersona
from inclusive_hub.schemas.stats import PlatformStats

BAR_WIDTH = 30


def _bar(value: float, maximum: float) -> str:
    if maximum <= 0:
        return ""
    filled = int(round(BAR_WIDTH * value / maximum))
    return "#" * filled


def render_persona(persona: CampaignPersona) -> str:
    presence = persona.digital_presence
    platforms = ", ".join(presence.platforms) if presence.platforms else "none"
    lines = [
        f"{persona.business_name} ({persona.business_type} / {persona.sector})",
        f"  Owner: {persona.name}, {persona.demographics.age}, {persona.city}, {persona.province}",
        f"  Revenue: {persona.monthly_revenue}  Audience: {persona.target_audience}",
        f"  Platforms: {platforms}  Posts/month: {presence.monthly_posts}",
        "  Goals: " + "; ".join(persona.marketing_goals),
        "  Pain points: " + "; ".join(persona.pain_points),
    ]
    return "\n".join(lines)


def render_personas(personas: Iterable[CampaignPersona]) -> str:
    return "\n\n".join(render_persona(p) for p in personas) or "No personas."


def render_bias(insight: BiasInsight) -> str:
    lines = [
        f"Bias score {insight.overall_score}/100 ({insight.severity})"
        f"  model={insight.metadata.model_version} confidence={insight.metadata.confidence:.2f}",
    ]
    for bias in insight.biases:
        lines.append(f"  [{bias.type}] {bias.score:>3} {bias.description}")
        if bias.affected_text:
            lines.append(f"        \"{bias.affected_text}\"")
        lines.append(f"        -> {bias.recommendation}")
    if insight.suggestions:
        lines.append("Suggestions:")
        lines.extend(f"  - {tip}" for tip in insight.suggestions)
    return "\n".join(lines)


def render_copy(suggestion: CopySuggestion) -> str:
    lines: List[str] = [f"Original ({suggestion.language}): {suggestion.original}"]
    for variant in suggestion.suggestions:
        lines.append(
            f"  [{variant.tone}] inclusivity={variant.inclusivity_score} bias={variant.bias_score}"
            f" engagement={variant.engagement.predicted:.1f}"
        )
        lines.append(f"    {variant.text}")
    return "\n".join(lines)


def render_distribution(title: str, counts: dict) -> str:
    if not counts:
        return f"{title}: none"
    top = max(counts.values())
    width = max(len(name) for name in counts)
    rows = [title]
    for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        rows.append(f"  {name:<{width}} {count:>4} {_bar(count, top)}")
    return "\n".join(rows)


def render_stats(stats: PlatformStats) -> str:
    return "\n".join(
        [
            f"Campaigns: {stats.total_campaigns}",
            f"Average inclusivity: {stats.average_inclusivity_score}",
            f"Biases detected: {stats.total_biases_detected}",
            render_distribution("By business type", stats.business_type_distribution),
            render_distribution("By city", stats.city_distribution),
        ]
    )
