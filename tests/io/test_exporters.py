"""
tests/io/test_exporters.py

Tests for the JSON, CSV and plain-text report exports.
"""

import json
from datetime import datetime, timezone

import pytest

from argument_miner.io.exporters import (
    export_filename,
    render_export,
    to_csv,
    to_json,
    to_report,
)
from argument_miner.models.analysis_result import (
    AnalysisResult,
    Argument,
    Claim,
    Position,
    Statistics,
)


@pytest.fixture
def result() -> AnalysisResult:
    return AnalysisResult(
        id="analysis_1704067200000",
        text='He said "yes". Therefore, we agree.',
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        main_thesis="Therefore, we agree.",
        arguments=[
            Argument(
                id="arg_0",
                type="premise",
                text='He said "yes".',
                confidence=55,
                position=Position(start=0, end=14),
                sources=["https://example.org", "External source mentioned"],
            ),
            Argument(
                id="arg_1",
                type="conclusion",
                text="Therefore, we agree.",
                confidence=76,
                position=Position(start=15, end=35),
                sources=[],
            ),
        ],
        claims=[
            Claim(
                id="claim_1",
                text="Therefore, we agree.",
                confidence=102,
                evidence=["According to polls, we agree.", "Studies indicate agreement."],
                contradictions=["But we do not agree."],
            )
        ],
        statistics=Statistics(
            total_sentences=2,
            argumentative_sentences=2,
            neutral_sentences=0,
            average_confidence=65.5,
        ),
    )


@pytest.fixture
def empty_result() -> AnalysisResult:
    return AnalysisResult(
        id="analysis_1",
        text="",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        main_thesis="No clear thesis identified",
        statistics=Statistics(
            total_sentences=0,
            argumentative_sentences=0,
            neutral_sentences=0,
            average_confidence=0,
        ),
    )


# --- JSON ---


def test_json_uses_camel_case_and_keeps_structure(result):
    data = json.loads(to_json(result))

    assert data["id"] == "analysis_1704067200000"
    assert data["mainThesis"] == "Therefore, we agree."
    assert data["arguments"][0]["position"] == {"start": 0, "end": 14}
    assert data["arguments"][0]["sources"] == ["https://example.org", "External source mentioned"]
    assert data["claims"][0]["contradictions"] == ["But we do not agree."]
    assert data["statistics"] == {
        "totalSentences": 2,
        "argumentativeSentences": 2,
        "neutralSentences": 0,
        "averageConfidence": 65.5,
    }
    assert data["timestamp"].startswith("2024-01-01T00:00:00")


def test_json_round_trips_into_model(result):
    assert AnalysisResult.model_validate_json(to_json(result)) == result


# --- CSV ---


def test_csv_rows_quote_text_and_double_embedded_quotes(result):
    lines = to_csv(result).split("\n")

    assert lines[0] == "Type,Text,Confidence,Sources"
    assert lines[1] == '"premise","He said ""yes"".",55,"https://example.org; External source mentioned"'
    assert lines[2] == '"conclusion","Therefore, we agree.",76,""'
    assert lines[3] == (
        '"claim","Therefore, we agree.",102,'
        '"According to polls, we agree.; Studies indicate agreement."'
    )
    assert len(lines) == 4


def test_csv_without_rows_is_header_only(empty_result):
    assert to_csv(empty_result) == "Type,Text,Confidence,Sources"


# --- Report ---


def test_report_contains_sections_and_statistics(result):
    report = to_report(result, generated_at=datetime(2024, 1, 2, 3, 4, 5))

    assert "ARGUMENT ANALYSIS REPORT\nGenerated: 2024-01-02 03:04:05\n" in report
    assert "MAIN THESIS:\nTherefore, we agree.\n" in report
    assert "- Total Sentences: 2" in report
    assert "- Argumentative Sentences: 2" in report
    assert "- Neutral Sentences: 0" in report
    assert "- Average Confidence: 66%" in report
    assert report.rstrip().endswith("END OF REPORT")


def test_report_enumerates_arguments_and_claims(result):
    report = to_report(result, generated_at=datetime(2024, 1, 2))

    assert "IDENTIFIED ARGUMENTS (2):" in report
    assert (
        '1. [PREMISE] (55% confidence)\n   He said "yes".\n'
        "   Sources: https://example.org, External source mentioned\n"
    ) in report
    assert "2. [CONCLUSION] (76% confidence)\n   Therefore, we agree.\n   No sources identified\n" in report
    assert "EXTRACTED CLAIMS (1):" in report
    assert (
        "1. (102% confidence)\n   Therefore, we agree.\n"
        "   Supporting Evidence: According to polls, we agree. | Studies indicate agreement.\n"
        "   Contradictions: But we do not agree.\n"
    ) in report


def test_report_placeholders_for_missing_links(empty_result):
    claim = Claim(id="claim_0", text="All is well.", confidence=40)
    report = to_report(
        empty_result.model_copy(update={"claims": [claim]}),
        generated_at=datetime(2024, 1, 2),
    )
    assert "IDENTIFIED ARGUMENTS (0):" in report
    assert "No supporting evidence found" in report
    assert "No contradictions found" in report


# --- Helpers ---


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("json", "argument-analysis-1700000000000.json"),
        ("csv", "argument-analysis-1700000000000.csv"),
        ("report", "argument-analysis-report-1700000000000.txt"),
    ],
)
def test_export_filename(fmt, expected):
    assert export_filename(fmt, 1700000000000) == expected


def test_render_export_dispatches_by_format(result):
    assert render_export(result, "csv") == to_csv(result)
    assert json.loads(render_export(result, "json"))["id"] == result.id


def test_render_export_rejects_unknown_format(result):
    with pytest.raises(ValueError, match="Unsupported export format 'xml'"):
        render_export(result, "xml")
