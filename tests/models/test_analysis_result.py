"""
tests/models/test_analysis_result.py

Tests for the frozen result models and their camelCase serialization.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from argument_miner.models.analysis_result import (
    AnalysisResult,
    Argument,
    Claim,
    Position,
    Statistics,
)


def make_argument(**overrides) -> Argument:
    fields = {
        "id": "arg_0",
        "type": "premise",
        "text": "Because it rains.",
        "confidence": 50,
        "position": Position(start=0, end=17),
    }
    fields.update(overrides)
    return Argument(**fields)


def test_models_are_frozen():
    argument = make_argument()
    with pytest.raises(ValidationError):
        argument.confidence = 60


def test_argument_sources_default_to_empty():
    assert make_argument().sources == []


@pytest.mark.parametrize("confidence", [-1, 96])
def test_argument_confidence_bounds(confidence):
    with pytest.raises(ValidationError):
        make_argument(confidence=confidence)


def test_argument_type_is_restricted():
    with pytest.raises(ValidationError):
        make_argument(type="rebuttal")


def test_claim_confidence_is_unbounded_above():
    assert Claim(id="claim_0", text="Surely.", confidence=110).confidence == 110


def test_claim_caps_evidence_and_contradictions():
    with pytest.raises(ValidationError):
        Claim(id="claim_0", text="x", confidence=40, evidence=["a", "b", "c", "d"])
    with pytest.raises(ValidationError):
        Claim(id="claim_0", text="x", confidence=40, contradictions=["a", "b", "c"])


def test_statistics_accept_camel_case_input():
    stats = Statistics.model_validate(
        {
            "totalSentences": 3,
            "argumentativeSentences": 1,
            "neutralSentences": 2,
            "averageConfidence": 62.0,
        }
    )
    assert stats.neutral_sentences == 2


def test_result_dumps_with_camel_case_aliases():
    result = AnalysisResult(
        id="analysis_1",
        text="Because it rains.",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        main_thesis="Because it rains.",
        arguments=[make_argument()],
        statistics=Statistics(
            total_sentences=1,
            argumentative_sentences=1,
            neutral_sentences=0,
            average_confidence=50.0,
        ),
    )

    dumped = result.model_dump(by_alias=True)

    assert set(dumped) == {"id", "text", "timestamp", "mainThesis", "arguments", "claims", "statistics"}
    assert dumped["claims"] == []
    assert dumped["statistics"]["averageConfidence"] == 50.0
