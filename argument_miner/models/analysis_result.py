"""
analysis_result.py

Defines the Pydantic models for the output of one analysis run: the
classified arguments, the extracted claims, the aggregate statistics and the
`AnalysisResult` that bundles them.

All models are frozen. Python attributes use snake_case; serialization
(`model_dump(by_alias=True)`, FastAPI responses, JSON export) uses the
camelCase field names consumers of the results expect.
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ArgumentType = Literal["premise", "conclusion", "evidence"]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Position(_FrozenModel):
    """Character span of a sentence, as computed by the running offset."""

    start: int
    end: int


class Argument(_FrozenModel):
    """
    A sentence classified as premise, conclusion or evidence.

    Attributes:
        id (str): `arg_<sentence index>`.
        type (str): One of premise, conclusion, evidence.
        text (str): The sentence text.
        confidence (int): Heuristic score, 0-95.
        position (Position): Offset span of the sentence.
        sources (List[str]): URLs and source annotations found in the sentence.
    """

    id: str
    type: ArgumentType
    text: str
    confidence: int = Field(..., ge=0, le=95)
    position: Position
    sources: List[str] = Field(default_factory=list)


class Claim(_FrozenModel):
    """
    A sentence judged assertive, with linked evidence and contradictions.

    Confidence has no upper bound.
    """

    id: str
    text: str
    confidence: int = Field(..., ge=0)
    evidence: List[str] = Field(default_factory=list, max_length=3)
    contradictions: List[str] = Field(default_factory=list, max_length=2)


class Statistics(_FrozenModel):
    total_sentences: int
    argumentative_sentences: int
    neutral_sentences: int
    average_confidence: float


class AnalysisResult(_FrozenModel):
    """
    The complete, immutable result of analyzing one text.

    Attributes:
        id (str): `analysis_<epoch milliseconds>` of the submission time.
        text (str): The analyzed source text.
        timestamp (datetime): When the result was created.
        main_thesis (str): The selected thesis sentence or the fallback text.
        arguments (List[Argument]): Retained arguments in sentence order.
        claims (List[Claim]): Retained claims in sentence order.
        statistics (Statistics): Aggregate counts for the run.
    """

    id: str
    text: str
    timestamp: datetime
    main_thesis: str
    arguments: List[Argument] = Field(default_factory=list)
    claims: List[Claim] = Field(default_factory=list)
    statistics: Statistics
