"""
argument_miner/api/schemas.py

Defines Pydantic models used for API request validation and response serialization.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from argument_miner.analysis.text_analyzer import round_half_up
from argument_miner.models.analysis_result import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request model for analyzing pasted text."""
    text: str


class HistoryEntry(BaseModel):
    """Summary of one history item, as listed before reselecting it."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    timestamp: datetime
    preview: str
    argument_count: int
    claim_count: int
    average_confidence: int

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "HistoryEntry":
        return cls(
            id=result.id,
            timestamp=result.timestamp,
            preview=result.text[:100],
            argument_count=len(result.arguments),
            claim_count=len(result.claims),
            average_confidence=round_half_up(result.statistics.average_confidence),
        )


class HistoryResponse(BaseModel):
    entries: List[HistoryEntry]


class UploadResponse(BaseModel):
    """Response model for a decoded upload."""
    filename: str
    text: str
    characters: int
