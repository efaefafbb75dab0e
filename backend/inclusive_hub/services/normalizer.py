"""Map arbitrarily-shaped upstream JSON onto the bias, copy and stats schemas.

Each output field is described by a :class:`FieldRule`: an ordered list of
alias paths (dotted for nested keys), a value kind, and a default. The first
alias holding an acceptable value wins. Nothing in this module raises for bad
input; anything unusable becomes the field default.

Scores are coerced to numbers, clamped to ``[0, 100]`` and rounded half-up.
When a score is read from a field literally named ``overallScore`` or
``score`` and lies in ``[0, 1]`` it is taken to be a fraction and multiplied by
100 first. A genuine 1% score is therefore reported as 100.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from inclusive_hub.schemas.bias import BiasDetection, BiasInsight, BiasMetadata, severity_for
from inclusive_hub.schemas.common import round_half_up, utc_now_iso
from inclusive_hub.schemas.copy_suggestion import CopyMetadata, CopySuggestion, CopyVariant, Engagement
from inclusive_hub.schemas.stats import LanguageDistribution, PlatformStats, TopBiasType

FRACTION_FIELDS = frozenset({"overallScore", "score"})

DEFAULT_CAMPAIGN_ID = "default"
DEFAULT_OVERALL_SCORE = 65

_MISSING = object()


@dataclass(frozen=True)
class FieldRule:
    """How to find one output field in a raw payload."""

    aliases: Sequence[str]
    kind: str = "text"
    default: Any = None
    # Aliases whose scalar value is wrapped into a one-item list.
    wrap: Sequence[str] = ()
    # Context key consulted after the aliases and before the default.
    context: Optional[str] = None


def _dig(raw: Any, path: str) -> Any:
    current = raw
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return _MISSING if current is None else current


def to_number(value: Any) -> Optional[float]:
    """Coerce ints, floats and numeric strings; ``None`` for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def clamp_score(value: float) -> int:
    return round_half_up(min(100.0, max(0.0, value)))


def score_from(value: Any, field: str, default: int) -> int:
    number = to_number(value)
    if number is None:
        return clamp_score(default)
    if field in FRACTION_FIELDS and 0 <= number <= 1:
        number *= 100
    return clamp_score(number)


def _as_text(value: Any, alias: str, rule: FieldRule) -> Any:
    if isinstance(value, str):
        return value if value else _MISSING
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _MISSING


def _as_list(value: Any, alias: str, rule: FieldRule) -> Any:
    if isinstance(value, list):
        return [item if isinstance(item, str) else str(item) for item in value if item is not None]
    if alias in rule.wrap and isinstance(value, str) and value:
        return [value]
    return _MISSING


def _as_records(value: Any, alias: str, rule: FieldRule) -> Any:
    return value if isinstance(value, list) else _MISSING


def _as_counts(value: Any, alias: str, rule: FieldRule) -> Any:
    if not isinstance(value, Mapping):
        return _MISSING
    counts: Dict[str, int] = {}
    for key, raw_count in value.items():
        number = to_number(raw_count)
        if number is not None:
            counts[str(key)] = round_half_up(number)
    return counts


def _as_mapping(value: Any, alias: str, rule: FieldRule) -> Any:
    return value if isinstance(value, Mapping) else _MISSING


# Acceptance converters: returning _MISSING moves on to the next alias.
_ACCEPT: Dict[str, Callable[[Any, str, FieldRule], Any]] = {
    "text": _as_text,
    "id": _as_text,
    "timestamp": _as_text,
    "list": _as_list,
    "records": _as_records,
    "counts": _as_counts,
    "mapping": _as_mapping,
}

def _float_from(value: Any, field: str, default: float) -> float:
    number = to_number(value)
    return float(default) if number is None else number


def _count_from(value: Any, field: str, default: int) -> int:
    number = to_number(value)
    return int(default) if number is None else round_half_up(number)


# Numeric kinds stop at the first present alias and fall back to the default
# when that value is not a number.
_NUMERIC: Dict[str, Callable[[Any, str, Any], Any]] = {
    "score": score_from,
    "float": _float_from,
    "count": _count_from,
}


def _default(rule: FieldRule, context: Mapping[str, Any]) -> Any:
    if rule.context and context.get(rule.context):
        return context[rule.context]
    if rule.kind == "id":
        return str(uuid.uuid4())
    if rule.kind == "timestamp":
        return utc_now_iso()
    if rule.kind == "score":
        return clamp_score(rule.default)
    if rule.kind in ("list", "records"):
        return list(rule.default or [])
    if rule.kind in ("counts", "mapping"):
        return dict(rule.default or {})
    return rule.default


def resolve(raw: Any, rule: FieldRule, context: Optional[Mapping[str, Any]] = None) -> Any:
    """Resolve one field against a raw payload."""
    context = context or {}
    for alias in rule.aliases:
        value = _dig(raw, alias)
        if value is _MISSING:
            continue
        numeric = _NUMERIC.get(rule.kind)
        if numeric is not None:
            return numeric(value, alias.rsplit(".", 1)[-1], rule.default)
        accepted = _ACCEPT[rule.kind](value, alias, rule)
        if accepted is not _MISSING:
            return accepted
    return _default(rule, context)


def resolve_all(
    raw: Any, rules: Mapping[str, FieldRule], context: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    return {name: resolve(raw, rule, context) for name, rule in rules.items()}


BIAS_RULES: Dict[str, FieldRule] = {
    "id": FieldRule(("id", "_id", "uuid", "checkId"), kind="id"),
    "campaign_id": FieldRule(("campaignId",), default=DEFAULT_CAMPAIGN_ID),
    "detected_at": FieldRule(("detectedAt", "timestamp"), kind="timestamp"),
    "overall_score": FieldRule(("overallScore", "score"), kind="score", default=DEFAULT_OVERALL_SCORE),
    "biases": FieldRule(("biases", "issues", "detections", "findings"), kind="records"),
    "suggestions": FieldRule(("suggestions", "tips", "recommendations"), kind="list"),
    "model_version": FieldRule(("metadata.modelVersion", "modelVersion"), default="kolosal-unknown"),
    "confidence": FieldRule(("metadata.confidence", "confidence"), kind="float", default=0.9),
}

DETECTION_RULES: Dict[str, FieldRule] = {
    "type": FieldRule(("type", "category"), default="gender"),
    "description": FieldRule(("description",), default="Potential bias detected"),
    "affected_text": FieldRule(("affectedText", "text"), default=""),
    "score": FieldRule(("score",), kind="score", default=50),
    "recommendation": FieldRule(("recommendation", "suggestion"), default="Use neutral language"),
    "examples": FieldRule(("examples", "example", "sample"), kind="list", wrap=("example", "sample")),
}

COPY_RULES: Dict[str, FieldRule] = {
    "id": FieldRule(("id", "_id", "generationId"), kind="id"),
    "campaign_id": FieldRule(("campaignId",), default=DEFAULT_CAMPAIGN_ID),
    "language": FieldRule(("language",), default="en", context="language"),
    "original": FieldRule(("original", "input", "prompt"), default=""),
    "suggestions": FieldRule(("suggestions", "variants"), kind="records"),
    "created_at": FieldRule(("createdAt", "timestamp"), kind="timestamp"),
    "target_audience": FieldRule(("metadata.targetAudience", "targetAudience"), default="Broad audience"),
    "tone": FieldRule(("metadata.tone",), default="friendly", context="tone"),
    "inclusivity_score": FieldRule(
        ("metadata.inclusivityScore", "overallScore"), kind="score", default=90
    ),
}

VARIANT_RULES: Dict[str, FieldRule] = {
    "id": FieldRule(("id", "_id"), kind="id"),
    "text": FieldRule(("text", "content", "copy"), default=""),
    "language": FieldRule(("language",), default="en", context="language"),
    "tone": FieldRule(("tone",), default="friendly", context="tone"),
    "inclusivity_score": FieldRule(("inclusivityScore", "score"), kind="score", default=85),
    "bias_score": FieldRule(("biasScore", "bias"), kind="score", default=15),
    "predicted": FieldRule(("engagement.predicted", "predictedEngagement"), kind="float", default=5.0),
    "confidence": FieldRule(
        ("engagement.confidence", "engagementConfidence"), kind="float", default=0.85
    ),
    "highlights": FieldRule(("highlights", "highlight"), kind="list", wrap=("highlight",)),
}

STATS_RULES: Dict[str, FieldRule] = {
    "total_campaigns": FieldRule(("totalCampaigns", "campaigns"), kind="count", default=0),
    "total_bias_checks": FieldRule(("totalBiasChecks", "totalChecks", "biasChecks"), kind="count", default=0),
    "average_inclusivity_score": FieldRule(
        ("averageInclusivityScore", "avgInclusivity"), kind="float", default=0
    ),
    "total_biases_detected": FieldRule(
        ("totalBiasesDetected", "totalBiases", "biasesDetected"), kind="float", default=0
    ),
    "bias_reduction": FieldRule(("biasReduction",), kind="float", default=0),
    "top_bias_types": FieldRule(("topBiasTypes", "topBiases"), kind="records"),
    "language_distribution": FieldRule(("languageDistribution", "languages"), kind="counts"),
    "monthly_growth": FieldRule(("monthlyGrowth", "growth"), kind="float", default=0),
    "business_type_distribution": FieldRule(("businessTypeDistribution",), kind="counts"),
    "city_distribution": FieldRule(("cityDistribution",), kind="counts"),
}

TOP_BIAS_RULES: Dict[str, FieldRule] = {
    "type": FieldRule(("type",), default="unknown"),
    "count": FieldRule(("count",), kind="count", default=0),
    "percentage": FieldRule(("percentage",), kind="float", default=0),
}


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def normalize_bias_detection(raw: Any) -> BiasDetection:
    return BiasDetection(**resolve_all(raw, DETECTION_RULES))


def normalize_bias_response(raw: Any, campaign_id: Optional[str] = None) -> BiasInsight:
    """Build a :class:`BiasInsight` from any JSON-like value.

    When detections are present the overall score is their half-up rounded
    mean; otherwise it comes from ``overallScore``/``score`` or the default.
    Severity always follows the final overall score.
    """
    fields = resolve_all(raw, BIAS_RULES)
    biases = [normalize_bias_detection(item) for item in fields["biases"]]
    overall = fields["overall_score"]
    if biases:
        overall = round_half_up(sum(b.score for b in biases) / len(biases))

    return BiasInsight(
        id=fields["id"],
        campaign_id=campaign_id or fields["campaign_id"],
        detected_at=fields["detected_at"],
        overall_score=overall,
        severity=severity_for(overall),
        biases=biases,
        suggestions=_dedupe(fields["suggestions"]),
        metadata=BiasMetadata(
            model_version=fields["model_version"],
            confidence=fields["confidence"],
        ),
    )


def normalize_copy_variant(raw: Any, context: Mapping[str, Any]) -> CopyVariant:
    fields = resolve_all(raw, VARIANT_RULES, context)
    return CopyVariant(
        id=fields["id"],
        text=fields["text"],
        language=fields["language"],
        tone=fields["tone"],
        inclusivity_score=fields["inclusivity_score"],
        bias_score=fields["bias_score"],
        engagement=Engagement(predicted=fields["predicted"], confidence=fields["confidence"]),
        highlights=fields["highlights"],
    )


def normalize_copy_response(
    raw: Any,
    campaign_id: Optional[str] = None,
    language: Optional[str] = None,
    tone: Optional[str] = None,
) -> CopySuggestion:
    """Build a :class:`CopySuggestion` from any JSON-like value."""
    context = {"language": language, "tone": tone}
    fields = resolve_all(raw, COPY_RULES, context)
    # Variants inherit the resolved language when the caller did not pass one.
    variant_context = {"language": language or fields["language"], "tone": tone}

    return CopySuggestion(
        id=fields["id"],
        campaign_id=campaign_id or fields["campaign_id"],
        language=fields["language"],
        original=fields["original"],
        suggestions=[normalize_copy_variant(item, variant_context) for item in fields["suggestions"]],
        created_at=fields["created_at"],
        metadata=CopyMetadata(
            target_audience=fields["target_audience"],
            tone=fields["tone"],
            inclusivity_score=fields["inclusivity_score"],
        ),
    )


def normalize_stats_response(raw: Any) -> PlatformStats:
    """Build :class:`PlatformStats` from any JSON-like value."""
    fields = resolve_all(raw, STATS_RULES)
    languages = fields.pop("language_distribution")
    top = [TopBiasType(**resolve_all(item, TOP_BIAS_RULES)) for item in fields.pop("top_bias_types")]

    return PlatformStats(
        **fields,
        top_bias_types=top,
        language_distribution=LanguageDistribution(en=languages.get("en", 0), id=languages.get("id", 0)),
    )
