"""
markers.py

Fixed marker phrases used by the heuristic classifier.

Every entry is matched as a lowercase substring of the lowercased sentence,
so short entries such as "as" or "no" also match inside longer words. The
lists are tuples and are shared read-only by every analysis.
"""

ARGUMENTATIVE_MARKERS = (
    "therefore", "thus", "hence", "consequently", "as a result",
    "because", "since", "due to", "given that", "as",
    "however", "but", "yet", "nevertheless", "although",
    "furthermore", "moreover", "additionally", "in addition",
    "for example", "for instance", "specifically", "namely",
    "in conclusion", "to summarize", "in summary", "finally",
    "evidently", "clearly", "obviously", "undoubtedly",
    "on the other hand", "conversely", "in contrast", "whereas",
)

EVIDENCE_MARKERS = (
    "according to", "research shows", "studies indicate", "data suggests",
    "statistics reveal", "evidence suggests", "experts believe",
    "as reported by", "documented in", "cited in", "referenced in",
    "survey results", "findings indicate", "analysis reveals",
)

CONCLUSION_MARKERS = (
    "therefore", "thus", "hence", "consequently", "in conclusion",
)

# Stored lowercase; matched against the lowercased sentence.
CLAIM_MARKERS = (
    "i believe", "i argue", "i contend", "i propose", "i suggest",
    "it is clear that", "it is evident that", "it is obvious that",
    "the fact is", "the truth is", "undeniably", "certainly",
    "without doubt", "unquestionably", "definitely",
)

STRONG_LANGUAGE_MARKERS = (
    "must", "should", "will", "always", "never", "all", "every",
)

COMPARATIVE_MARKERS = (
    "better", "worse", "more", "less", "superior", "inferior",
)

NEGATION_MARKERS = (
    "not", "never", "no", "false", "incorrect", "wrong", "however", "but",
)

EXTERNAL_SOURCE_NOTE = "External source mentioned"
RESEARCH_SOURCE_NOTE = "Research study referenced"
NO_THESIS_FALLBACK = "No clear thesis identified"


def contains_any(lower_text: str, markers) -> bool:
    """True if any marker occurs as a substring of the already-lowercased text."""
    return any(marker in lower_text for marker in markers)
