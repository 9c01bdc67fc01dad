"""
text_analyzer.py

Defines the TextAnalyzer class, the rule-based heuristic that turns free-form
text into an `AnalysisResult`.

The analysis runs in five sequential steps:
    - Segment the text into sentences.
    - Score every sentence against the argument markers and keep the ones
      above the argument threshold as premise, conclusion or evidence.
    - Score every sentence against the claim markers, keep the ones above the
      claim threshold and link them to evidence and contradicting sentences by
      word overlap.
    - Pick the main thesis from the retained arguments.
    - Aggregate sentence and confidence statistics.

Confidence scores include a random jitter term. The random source is injected
so tests can pass a seeded `random.Random`.
"""

import asyncio
import math
import random
import re
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from argument_miner.analysis.markers import (
    ARGUMENTATIVE_MARKERS,
    CLAIM_MARKERS,
    COMPARATIVE_MARKERS,
    CONCLUSION_MARKERS,
    EVIDENCE_MARKERS,
    EXTERNAL_SOURCE_NOTE,
    NEGATION_MARKERS,
    NO_THESIS_FALLBACK,
    RESEARCH_SOURCE_NOTE,
    STRONG_LANGUAGE_MARKERS,
    contains_any,
)
from argument_miner.config import config
from argument_miner.models.analysis_result import (
    AnalysisResult,
    Argument,
    ArgumentType,
    Claim,
    Position,
    Statistics,
)
from argument_miner.utils.logger import get_logger
from argument_miner.utils.text_processing import segment_text

logger = get_logger()

_URL_RE = re.compile(r"https?://\S+")

ARGUMENT_THRESHOLD = 40
CLAIM_THRESHOLD = 35
MAX_ARGUMENT_CONFIDENCE = 95
STRONG_ARGUMENT_CONFIDENCE = 75
MAX_EVIDENCE = 3
MAX_CONTRADICTIONS = 2
EVIDENCE_SIMILARITY = 0.3
CONTRADICTION_OVERLAP = 2


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _words(sentence: str) -> List[str]:
    # Single-space split keeps empty tokens for repeated spaces.
    return sentence.lower().split(" ")


def word_overlap(claim: str, sentence: str) -> Tuple[int, float]:
    """
    Counts the claim's words that also occur in the sentence.

    Returns:
        Tuple[int, float]: The raw shared-word count (claim words are counted
        with repetition) and that count divided by the larger word count.
    """
    claim_words = _words(claim)
    sentence_words = _words(sentence)
    present = set(sentence_words)
    overlap = sum(1 for word in claim_words if word in present)
    similarity = overlap / max(len(claim_words), len(sentence_words))
    return overlap, similarity


class TextAnalyzer:
    """
    Heuristic argument miner over fixed marker word lists.

    Stateless between calls apart from the injected random source; the marker
    lists are module constants.

    Attributes:
        rng (random.Random): Source of the confidence jitter.
        simulated_delay (float): Seconds awaited before analyzing.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        simulated_delay: Optional[float] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.rng = rng if rng is not None else random.Random()
        if simulated_delay is None:
            simulated_delay = config.get("analyzer", {}).get("simulated_delay_seconds", 0.0)
        self.simulated_delay = simulated_delay
        self._clock = clock

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyzes `text` and returns a new `AnalysisResult`.

        Never fails on string input: empty text yields no sentences, the
        fallback thesis and zeroed statistics.

        Args:
            text (str): The text to analyze.

        Returns:
            AnalysisResult: The immutable result of this run.
        """
        submitted_at = self._clock()
        if self.simulated_delay:
            await asyncio.sleep(self.simulated_delay)

        sentences = segment_text(text)
        analyzed_arguments = self.identify_arguments(sentences)
        claims = self.extract_claims(sentences)
        main_thesis = self.identify_main_thesis(sentences, analyzed_arguments)
        statistics = self.calculate_statistics(sentences, analyzed_arguments)

        logger.info(
            f"Analyzed {len(sentences)} sentences: {len(analyzed_arguments)} arguments, "
            f"{len(claims)} claims."
        )
        return AnalysisResult(
            id=f"analysis_{int(submitted_at.timestamp() * 1000)}",
            text=text,
            timestamp=submitted_at,
            main_thesis=main_thesis,
            arguments=analyzed_arguments,
            claims=claims,
            statistics=statistics,
        )

    # --- Arguments ---

    def score_argument(self, sentence: str) -> Tuple[float, ArgumentType]:
        """
        Scores one sentence as an argument.

        The conclusion check runs after the evidence check, so a sentence
        matching both is typed `conclusion` but keeps both bonuses.

        Returns:
            Tuple[float, str]: The unrounded, clamped score and the type.
        """
        lower_sentence = sentence.lower()
        confidence = 0.0
        arg_type: ArgumentType = "premise"

        if contains_any(lower_sentence, ARGUMENTATIVE_MARKERS):
            confidence += 30
        if contains_any(lower_sentence, EVIDENCE_MARKERS):
            confidence += 40
            arg_type = "evidence"
        if contains_any(lower_sentence, CONCLUSION_MARKERS):
            confidence += 35
            arg_type = "conclusion"

        if 50 < len(sentence) < 200:
            confidence += 15
        if "," in sentence or ";" in sentence:
            confidence += 10

        confidence += self.rng.random() * 20
        return min(confidence, MAX_ARGUMENT_CONFIDENCE), arg_type

    def identify_arguments(self, sentences: List[str]) -> List[Argument]:
        """
        Classifies each sentence and keeps those scoring above the threshold.

        Positions come from a running offset that advances by the sentence
        length plus one for every sentence, kept or not, so they drift from
        the source text wherever more than one separator character was
        removed by segmentation.
        """
        analyzed_arguments: List[Argument] = []
        current_position = 0

        for index, sentence in enumerate(sentences):
            score, arg_type = self.score_argument(sentence)
            confidence = round_half_up(score)

            if confidence > ARGUMENT_THRESHOLD:
                analyzed_arguments.append(
                    Argument(
                        id=f"arg_{index}",
                        type=arg_type,
                        text=sentence,
                        confidence=confidence,
                        position=Position(
                            start=current_position,
                            end=current_position + len(sentence),
                        ),
                        sources=self.extract_sources(sentence),
                    )
                )

            current_position += len(sentence) + 1

        return analyzed_arguments

    @staticmethod
    def extract_sources(sentence: str) -> List[str]:
        """URLs in the sentence followed by fixed source annotations."""
        sources = _URL_RE.findall(sentence)
        lower_sentence = sentence.lower()
        if "according to" in lower_sentence:
            sources.append(EXTERNAL_SOURCE_NOTE)
        if "study" in lower_sentence or "research" in lower_sentence:
            sources.append(RESEARCH_SOURCE_NOTE)
        return sources

    # --- Claims ---

    def score_claim(self, sentence: str) -> float:
        """Scores one sentence as a claim; the score is not clamped."""
        lower_sentence = sentence.lower()
        confidence = 0.0

        if contains_any(lower_sentence, CLAIM_MARKERS):
            confidence += 40
        if contains_any(lower_sentence, STRONG_LANGUAGE_MARKERS):
            confidence += 25
        if contains_any(lower_sentence, COMPARATIVE_MARKERS):
            confidence += 20

        confidence += self.rng.random() * 15
        return confidence

    def extract_claims(self, sentences: List[str]) -> List[Claim]:
        claims: List[Claim] = []

        for index, sentence in enumerate(sentences):
            confidence = round_half_up(self.score_claim(sentence))
            if confidence > CLAIM_THRESHOLD:
                claims.append(
                    Claim(
                        id=f"claim_{index}",
                        text=sentence,
                        confidence=confidence,
                        evidence=self.find_supporting_evidence(sentence, sentences),
                        contradictions=self.find_contradictions(sentence, sentences),
                    )
                )

        return claims

    @staticmethod
    def find_supporting_evidence(claim: str, sentences: List[str]) -> List[str]:
        """
        First sentences that share enough words with the claim and carry an
        evidence marker. Sentences equal to the claim text are skipped.
        """
        evidence: List[str] = []
        for sentence in sentences:
            if sentence == claim:
                continue
            _, similarity = word_overlap(claim, sentence)
            if similarity > EVIDENCE_SIMILARITY and contains_any(sentence.lower(), EVIDENCE_MARKERS):
                evidence.append(sentence)
                if len(evidence) == MAX_EVIDENCE:
                    break
        return evidence

    @staticmethod
    def find_contradictions(claim: str, sentences: List[str]) -> List[str]:
        """
        First sentences with a negation word that share more than two words
        with the claim. Sentences equal to the claim text are skipped.
        """
        contradictions: List[str] = []
        for sentence in sentences:
            if sentence == claim:
                continue
            if not contains_any(sentence.lower(), NEGATION_MARKERS):
                continue
            overlap, _ = word_overlap(claim, sentence)
            if overlap > CONTRADICTION_OVERLAP:
                contradictions.append(sentence)
                if len(contradictions) == MAX_CONTRADICTIONS:
                    break
        return contradictions

    # --- Thesis and statistics ---

    @staticmethod
    def identify_main_thesis(sentences: List[str], analyzed_arguments: List[Argument]) -> str:
        """
        The most confident conclusion (earliest wins ties), else the first
        argument above 75, else the first sentence, else a fallback text.
        """
        conclusions = [arg for arg in analyzed_arguments if arg.type == "conclusion"]
        if conclusions:
            return max(conclusions, key=lambda arg: arg.confidence).text

        for arg in analyzed_arguments:
            if arg.confidence > STRONG_ARGUMENT_CONFIDENCE:
                return arg.text

        return sentences[0] if sentences else NO_THESIS_FALLBACK

    @staticmethod
    def calculate_statistics(sentences: List[str], analyzed_arguments: List[Argument]) -> Statistics:
        total_sentences = len(sentences)
        argumentative_sentences = len(analyzed_arguments)
        average_confidence = (
            sum(arg.confidence for arg in analyzed_arguments) / argumentative_sentences
            if analyzed_arguments
            else 0
        )
        return Statistics(
            total_sentences=total_sentences,
            argumentative_sentences=argumentative_sentences,
            neutral_sentences=total_sentences - argumentative_sentences,
            average_confidence=average_confidence,
        )
