# argument_miner/services/analysis_service.py
from typing import Any, Dict, Optional

from argument_miner.analysis.text_analyzer import TextAnalyzer
from argument_miner.models.analysis_result import AnalysisResult
from argument_miner.services.history import AnalysisHistory
from argument_miner.utils.logger import get_logger
from argument_miner.utils.metrics import MetricsTracker

logger = get_logger()


class AnalysisInProgressError(RuntimeError):
    """Raised when an analysis is requested while another one is running."""

    def __init__(self):
        super().__init__("An analysis is already in progress.")


class AnalysisFailedError(RuntimeError):
    """Generic failure notice for an analysis run; the cause is chained."""

    def __init__(self):
        super().__init__("Analysis failed. Please try again.")


class AnalysisService:
    def __init__(
        self,
        config: Dict[str, Any],
        analyzer: TextAnalyzer,
        metrics_tracker: MetricsTracker,
        history: Optional[AnalysisHistory] = None,
    ):
        """
        Initializes the AnalysisService with configuration and injected dependencies.

        Args:
            config (Dict[str, Any]): Application configuration.
            analyzer (TextAnalyzer): The heuristic analyzer to run.
            metrics_tracker (MetricsTracker): Instance for tracking metrics.
            history (AnalysisHistory, optional): History store; one sized from
                `config["history"]["max_entries"]` is created when omitted.
        """
        self.config = config
        self.analyzer = analyzer
        self.metrics_tracker = metrics_tracker
        if history is None:
            max_entries = config.get("history", {}).get("max_entries", 5)
            history = AnalysisHistory(max_entries=max_entries)
        self.history = history
        self.current: Optional[AnalysisResult] = None
        self._in_progress = False
        logger.info("AnalysisService initialized with injected dependencies.")

    @property
    def is_analyzing(self) -> bool:
        return self._in_progress

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Runs one analysis, records it as current and adds it to the history.

        Only one analysis may be in flight; the in-progress flag is reset on
        success and on failure.

        Raises:
            AnalysisInProgressError: If another analysis is still running.
            AnalysisFailedError: If the analyzer raised unexpectedly.
        """
        if self._in_progress:
            logger.warning("Rejected analysis request: another analysis is in progress.")
            raise AnalysisInProgressError()

        self._in_progress = True
        self.metrics_tracker.start_run_timer()
        try:
            result = await self.analyzer.analyze(text)
        except Exception as e:
            logger.error(f"Analysis failed: {e}", exc_info=True)
            self.metrics_tracker.increment_errors()
            raise AnalysisFailedError() from e
        finally:
            self._in_progress = False
            self.metrics_tracker.stop_run_timer()

        self.metrics_tracker.record_analysis(
            sentences=result.statistics.total_sentences,
            arguments=len(result.arguments),
            claims=len(result.claims),
        )
        self.current = result
        self.history.add(result)
        logger.info(f"Analysis {result.id} completed; history holds {len(self.history)} entries.")
        return result

    def select(self, analysis_id: str) -> Optional[AnalysisResult]:
        """Makes a history entry current again; returns None for unknown ids."""
        result = self.history.get(analysis_id)
        if result is not None:
            self.current = result
        return result

    def find(self, analysis_id: str) -> Optional[AnalysisResult]:
        """Looks up a result by id in the current result and the history."""
        if self.current is not None and self.current.id == analysis_id:
            return self.current
        return self.history.get(analysis_id)

    def clear_history(self) -> None:
        """Drops all history entries and the current result."""
        self.history.clear()
        self.current = None
        logger.info("Analysis history cleared.")
