"""
argument_miner/api/dependencies.py

FastAPI dependency providers shared by the routers.
"""

from typing import Any, Dict, Optional

from argument_miner.analysis.text_analyzer import TextAnalyzer
from argument_miner.config import config
from argument_miner.services.analysis_service import AnalysisService
from argument_miner.utils.metrics import metrics_tracker

_analysis_service: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Returns the process-wide AnalysisService, creating it on first use."""
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = AnalysisService(
            config=config,
            analyzer=TextAnalyzer(),
            metrics_tracker=metrics_tracker,
        )
    return _analysis_service


def get_upload_config() -> Dict[str, Any]:
    """Dependency function to get the `upload` section from config."""
    return config.get("upload", {})
