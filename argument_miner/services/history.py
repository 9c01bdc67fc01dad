# argument_miner/services/history.py
from collections import deque
from typing import Deque, List, Optional

from argument_miner.models.analysis_result import AnalysisResult
from argument_miner.utils.logger import get_logger

logger = get_logger()


class AnalysisHistory:
    """
    In-memory list of the most recent analysis results, newest first.

    Adding beyond `max_entries` evicts the oldest result.
    """

    def __init__(self, max_entries: int = 5):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: Deque[AnalysisResult] = deque(maxlen=max_entries)

    def add(self, result: AnalysisResult) -> None:
        if len(self._entries) == self.max_entries:
            logger.debug(f"History full, evicting {self._entries[-1].id}")
        self._entries.appendleft(result)

    def entries(self) -> List[AnalysisResult]:
        return list(self._entries)

    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        """Returns the newest entry with `analysis_id`, or None."""
        for result in self._entries:
            if result.id == analysis_id:
                return result
        return None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
