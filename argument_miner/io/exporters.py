"""
exporters.py

Serializers for an `AnalysisResult`: a JSON document, a CSV table of
arguments and claims, and a plain-text report.
"""

import csv
from datetime import datetime
from typing import Callable, Dict, List, NamedTuple, Optional

import pandas as pd

from argument_miner.analysis.text_analyzer import round_half_up
from argument_miner.models.analysis_result import AnalysisResult

CSV_COLUMNS = ["Type", "Text", "Confidence", "Sources"]


def to_json(result: AnalysisResult) -> str:
    """The result with camelCase keys, indented by two spaces."""
    return result.model_dump_json(by_alias=True, indent=2)


def to_csv(result: AnalysisResult) -> str:
    """
    One row per argument, then one per claim.

    Text columns are always quoted with embedded quotes doubled; the
    confidence column is left bare. Argument rows list their sources and
    claim rows (type `claim`) list their evidence, both joined with "; ".
    """
    rows: List[Dict[str, object]] = [
        {
            "Type": arg.type,
            "Text": arg.text,
            "Confidence": arg.confidence,
            "Sources": "; ".join(arg.sources),
        }
        for arg in result.arguments
    ]
    rows.extend(
        {
            "Type": "claim",
            "Text": claim.text,
            "Confidence": claim.confidence,
            "Sources": "; ".join(claim.evidence),
        }
        for claim in result.claims
    )

    header = ",".join(CSV_COLUMNS)
    if not rows:
        return header

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    body = df.to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_NONNUMERIC,
        lineterminator="\n",
    )
    return header + "\n" + body.rstrip("\n")


def to_report(result: AnalysisResult, generated_at: Optional[datetime] = None) -> str:
    """Human-readable report with fixed section headers."""
    generated_at = generated_at or datetime.now()
    stats = result.statistics

    lines = [
        "",
        "ARGUMENT ANALYSIS REPORT",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        "MAIN THESIS:",
        result.main_thesis,
        "",
        "ANALYSIS STATISTICS:",
        f"- Total Sentences: {stats.total_sentences}",
        f"- Argumentative Sentences: {stats.argumentative_sentences}",
        f"- Neutral Sentences: {stats.neutral_sentences}",
        f"- Average Confidence: {round_half_up(stats.average_confidence)}%",
        "",
        f"IDENTIFIED ARGUMENTS ({len(result.arguments)}):",
    ]
    for index, arg in enumerate(result.arguments, start=1):
        sources = (
            f"Sources: {', '.join(arg.sources)}" if arg.sources else "No sources identified"
        )
        lines += [
            "",
            f"{index}. [{arg.type.upper()}] ({arg.confidence}% confidence)",
            f"   {arg.text}",
            f"   {sources}",
        ]

    lines += ["", "", f"EXTRACTED CLAIMS ({len(result.claims)}):"]
    for index, claim in enumerate(result.claims, start=1):
        evidence = (
            f"Supporting Evidence: {' | '.join(claim.evidence)}"
            if claim.evidence
            else "No supporting evidence found"
        )
        contradictions = (
            f"Contradictions: {' | '.join(claim.contradictions)}"
            if claim.contradictions
            else "No contradictions found"
        )
        lines += [
            "",
            f"{index}. ({claim.confidence}% confidence)",
            f"   {claim.text}",
            f"   {evidence}",
            f"   {contradictions}",
        ]

    lines += ["", "", "END OF REPORT", ""]
    return "\n".join(lines)


class ExportFormat(NamedTuple):
    render: Callable[[AnalysisResult], str]
    media_type: str
    filename_prefix: str
    extension: str


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "json": ExportFormat(to_json, "application/json", "argument-analysis", "json"),
    "csv": ExportFormat(to_csv, "text/csv", "argument-analysis", "csv"),
    "report": ExportFormat(to_report, "text/plain", "argument-analysis-report", "txt"),
}


def export_filename(fmt: str, timestamp_ms: int) -> str:
    """Download name for an export, e.g. `argument-analysis-1700000000000.csv`."""
    export_format = EXPORT_FORMATS[fmt]
    return f"{export_format.filename_prefix}-{timestamp_ms}.{export_format.extension}"


def render_export(result: AnalysisResult, fmt: str) -> str:
    """
    Renders `result` in one of the formats of `EXPORT_FORMATS`.

    Raises:
        ValueError: If `fmt` is not a known export format.
    """
    try:
        export_format = EXPORT_FORMATS[fmt]
    except KeyError:
        raise ValueError(
            f"Unsupported export format '{fmt}'. Choose one of: {', '.join(EXPORT_FORMATS)}."
        ) from None
    return export_format.render(result)
