# argument_miner/utils/text_processing.py
import re
from typing import List

from argument_miner.utils.logger import get_logger

logger = get_logger()

_SENTENCE_BREAK_RE = re.compile(r"([.!?])\s+")
_SPLIT_MARKER = "|SPLIT|"


def segment_text(text: str) -> List[str]:
    """
    Segment input text into sentences on terminal punctuation.

    A split marker is inserted after every run of whitespace that follows
    `.`, `!` or `?`; the text is split on it and each piece is stripped.
    Abbreviations, decimals and quoted punctuation are not special-cased.

    Args:
        text (str): The input text to be segmented.

    Returns:
        List[str]: Non-empty, stripped sentences in their original order.
    """
    if not text:
        logger.debug("Input text is empty, returning empty list for segmentation.")
        return []

    marked = _SENTENCE_BREAK_RE.sub(r"\1" + _SPLIT_MARKER, text)
    sentences = [piece.strip() for piece in marked.split(_SPLIT_MARKER)]
    sentences = [s for s in sentences if s]
    logger.debug(f"Segmented text into {len(sentences)} sentences.")
    return sentences
