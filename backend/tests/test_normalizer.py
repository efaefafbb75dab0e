import pytest

from inclusive_hub.schemas.common import round_half_up
from inclusive_hub.services.normalizer import (
    DEFAULT_OVERALL_SCORE,
    FieldRule,
    clamp_score,
    normalize_bias_response,
    normalize_copy_response,
    normalize_stats_response,
    resolve,
    to_number,
)


def test_bias_normalization_is_identity_on_canonical_input(generator):
    for _ in range(25):
        raw = generator.bias_insight("camp-9").model_dump(by_alias=True)
        assert normalize_bias_response(raw).model_dump(by_alias=True) == raw


def test_copy_normalization_is_identity_on_canonical_input(generator):
    raw = generator.copy_suggestion("camp-9", "id").model_dump(by_alias=True)
    assert normalize_copy_response(raw).model_dump(by_alias=True) == raw


@pytest.mark.parametrize("score", [-50, -0.4, 1.5, 12.5, 49.5, 50.4999, 99.5, 100, 100.2, 250, "73", "88.6"])
def test_clamp_law_for_overall_score(score):
    number = float(score)
    insight = normalize_bias_response({"overallScore": score})
    assert 0 <= insight.overall_score <= 100
    assert insight.overall_score == round_half_up(min(100, max(0, number)))


@pytest.mark.parametrize("score, expected", [(0.72, 72), (0.005, 1), (1, 100), (0, 0), (0.999, 100)])
def test_fractions_are_scaled_for_score_fields(score, expected):
    assert normalize_bias_response({"score": score}).overall_score == expected
    assert normalize_bias_response({"overallScore": score}).overall_score == expected


def test_fraction_rule_does_not_apply_to_other_score_names():
    raw = {"suggestions": [{"text": "hi", "biasScore": 0.5, "inclusivityScore": 1}]}
    variant = normalize_copy_response(raw).suggestions[0]
    assert variant.bias_score == 1
    assert variant.inclusivity_score == 1


def test_non_numeric_score_falls_back_to_default():
    assert normalize_bias_response({"overallScore": "high"}).overall_score == DEFAULT_OVERALL_SCORE
    assert normalize_bias_response({"overallScore": True}).overall_score == DEFAULT_OVERALL_SCORE
    detection = normalize_bias_response({"biases": [{"score": None}]}).biases[0]
    assert detection.score == 50


def test_bias_synonyms_and_defaults():
    raw = {
        "_id": "chk-1",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "findings": [
            {"category": "age", "text": "young people only", "score": 0.8, "suggestion": "Be broad", "example": "x"},
            {"type": "gender", "score": 60, "sample": "y"},
        ],
        "tips": ["a", "b", "a"],
        "modelVersion": "ext-1",
        "confidence": "0.66",
    }
    insight = normalize_bias_response(raw, campaign_id="camp-3")
    assert insight.id == "chk-1"
    assert insight.campaign_id == "camp-3"
    assert insight.detected_at == "2024-01-01T00:00:00.000Z"
    first, second = insight.biases
    assert (first.type, first.affected_text, first.score, first.recommendation) == ("age", "young people only", 80, "Be broad")
    assert first.examples == ["x"]
    assert second.examples == ["y"]
    assert second.description == "Potential bias detected"
    assert second.recommendation == "Use neutral language"
    assert insight.overall_score == 70
    assert insight.severity == "high"
    assert insight.suggestions == ["a", "b"]
    assert insight.metadata.model_version == "ext-1"
    assert insight.metadata.confidence == pytest.approx(0.66)


def test_overall_score_follows_biases_when_present():
    raw = {"overallScore": 10, "biases": [{"score": 40}, {"score": 81}]}
    insight = normalize_bias_response(raw)
    assert insight.overall_score == 61
    assert insight.severity == "high"


def test_alias_order_prefers_canonical_name():
    raw = {"biases": [{"score": 90}], "issues": [{"score": 10}]}
    assert normalize_bias_response(raw).overall_score == 90


@pytest.mark.parametrize("garbage", [None, 42, "text", [], [1, 2], {"biases": "nope", "metadata": 3}])
def test_never_raises_on_unexpected_shapes(garbage):
    insight = normalize_bias_response(garbage)
    assert insight.id
    assert insight.campaign_id == "default"
    assert insight.overall_score == DEFAULT_OVERALL_SCORE
    assert insight.biases == []
    copy = normalize_copy_response(garbage, language="id", tone="casual")
    assert copy.language == "id"
    assert copy.metadata.tone == "casual"
    assert copy.metadata.inclusivity_score == 90
    stats = normalize_stats_response(garbage)
    assert stats.total_campaigns == 0


def test_oversized_integers_fall_back_to_defaults():
    huge = 10**400
    assert to_number(huge) is None
    insight = normalize_bias_response({"overallScore": huge, "metadata": {"confidence": huge}})
    assert insight.overall_score == DEFAULT_OVERALL_SCORE
    assert insight.metadata.confidence == 0.9
    copy = normalize_copy_response({"variants": [{"text": "Hi all", "score": huge}]}, language="en")
    assert 0 <= copy.suggestions[0].inclusivity_score <= 100
    stats = normalize_stats_response({"totalCampaigns": huge})
    assert stats.total_campaigns == 0


def test_copy_variants_fill_from_context():
    raw = {
        "variants": [
            {"content": "Hello all", "score": 0.9, "bias": "12", "predictedEngagement": 6.1, "highlight": "neutral"},
            "not-a-dict",
        ],
        "prompt": "Hello guys",
        "targetAudience": "everyone",
    }
    suggestion = normalize_copy_response(raw, campaign_id="c1", language="en", tone="formal")
    assert suggestion.original == "Hello guys"
    assert suggestion.metadata.target_audience == "everyone"
    first, second = suggestion.suggestions
    assert first.text == "Hello all"
    assert first.tone == "formal"
    assert first.inclusivity_score == 90
    assert first.bias_score == 12
    assert first.engagement.predicted == pytest.approx(6.1)
    assert first.engagement.confidence == pytest.approx(0.85)
    assert first.highlights == ["neutral"]
    assert second.text == ""
    assert second.inclusivity_score == 85
    assert second.bias_score == 15


def test_stats_synonyms():
    raw = {
        "campaigns": 12.6,
        "biasChecks": 543,
        "avgInclusivity": 87.5,
        "totalBiases": 892,
        "growth": 23.5,
        "topBiases": [{"type": "gender", "count": 234, "percentage": 26.2}, {}],
        "languages": {"en": 312, "id": "231"},
        "cityDistribution": {"Jakarta": 3, "Bali": "x"},
    }
    stats = normalize_stats_response(raw)
    assert stats.total_campaigns == 13
    assert stats.total_bias_checks == 543
    assert stats.average_inclusivity_score == 87.5
    assert stats.total_biases_detected == 892
    assert stats.monthly_growth == 23.5
    assert stats.top_bias_types[0].type == "gender"
    assert stats.top_bias_types[1].type == "unknown"
    assert (stats.language_distribution.en, stats.language_distribution.id) == (312, 231)
    assert stats.city_distribution == {"Jakarta": 3}
    assert stats.business_type_distribution == {}


def test_resolve_uses_context_before_default():
    rule = FieldRule(("tone",), default="friendly", context="tone")
    assert resolve({}, rule, {"tone": "casual"}) == "casual"
    assert resolve({"tone": "formal"}, rule, {"tone": "casual"}) == "formal"
    assert resolve({"tone": ""}, rule, {}) == "friendly"


def test_clamp_score_rounds_half_up():
    assert clamp_score(49.5) == 50
    assert clamp_score(50.5) == 51
    assert clamp_score(-1) == 0
    assert clamp_score(101) == 100
