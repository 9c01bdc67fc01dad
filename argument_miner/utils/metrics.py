"""
metrics.py

Provides a simple centralized tracker for analysis counts and timings.
"""

from time import time


class MetricsTracker:
    """
    Tracks operational metrics for the analysis service.

    Counts completed analyses, the sentences, arguments and claims they
    produced, and errors; times the most recent analysis run. A global
    instance `metrics_tracker` is provided for convenience.

    Attributes:
        analyses_run (int): Number of analyses that completed.
        sentences_processed (int): Total sentences tokenized across analyses.
        arguments_found (int): Total arguments retained across analyses.
        claims_found (int): Total claims retained across analyses.
        errors (int): Count of failed analyses or rejected inputs.
        run_start_time (float | None): Start of the latest run.
        run_end_time (float | None): End of the latest run.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Resets all tracked metrics to their initial state (0 or None)."""
        self.analyses_run: int = 0
        self.sentences_processed: int = 0
        self.arguments_found: int = 0
        self.claims_found: int = 0
        self.errors: int = 0
        self.run_start_time: float | None = None
        self.run_end_time: float | None = None

    def start_run_timer(self):
        """Records the start time of an analysis run using `time.time()`."""
        self.run_start_time = time()
        self.run_end_time = None

    def stop_run_timer(self):
        """Records the end time of an analysis run using `time.time()`."""
        self.run_end_time = time()

    def record_analysis(self, sentences: int, arguments: int, claims: int):
        """
        Adds the counts of one completed analysis.

        Args:
            sentences (int): Sentences produced by tokenization.
            arguments (int): Arguments retained by the classifier.
            claims (int): Claims retained by the extractor.
        """
        self.analyses_run += 1
        self.sentences_processed += sentences
        self.arguments_found += arguments
        self.claims_found += claims

    def increment_errors(self, count: int = 1):
        self.errors += count

    def get_summary(self) -> dict:
        """
        Returns a dictionary summarizing the tracked metrics.

        The duration is only reported once the latest run has both a start
        and an end time.
        """
        duration = None
        if self.run_start_time and self.run_end_time:
            duration = self.run_end_time - self.run_start_time

        return {
            "total_analyses": self.analyses_run,
            "total_sentences": self.sentences_processed,
            "total_arguments": self.arguments_found,
            "total_claims": self.claims_found,
            "total_errors": self.errors,
            "last_run_duration_seconds": duration,
        }


# Global instance
metrics_tracker = MetricsTracker()
