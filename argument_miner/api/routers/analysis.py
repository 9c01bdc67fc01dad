"""
argument_miner/api/routers/analysis.py

API router for running analyses, browsing the history and exporting results.
"""

import time

from fastapi import APIRouter, Depends, HTTPException, Response, status

from argument_miner.api.dependencies import get_analysis_service
from argument_miner.api.schemas import AnalyzeRequest, HistoryEntry, HistoryResponse
from argument_miner.io.exporters import EXPORT_FORMATS, export_filename, render_export
from argument_miner.models.analysis_result import AnalysisResult
from argument_miner.services.analysis_service import (
    AnalysisFailedError,
    AnalysisInProgressError,
    AnalysisService,
)
from argument_miner.utils.logger import get_logger

router = APIRouter(prefix="/analysis", tags=["Analysis"])

logger = get_logger()


async def run_analysis(text: str, service: AnalysisService) -> AnalysisResult:
    """
    Runs `service.analyze` and maps its errors to HTTP responses.

    Raises:
        HTTPException(400): If the text is empty after trimming.
        HTTPException(409): If another analysis is still running.
        HTTPException(500): If the analysis failed.
    """
    if not text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Text to analyze must not be empty.",
        )
    try:
        return await service.analyze(text)
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except AnalysisFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )


@router.post(
    "/",
    response_model=AnalysisResult,
    summary="Analyze Text",
)
async def analyze_text(
    request: AnalyzeRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Analyzes the submitted text and returns the full result.

    The result becomes the current result and is added to the history.
    """
    logger.info(f"Received analysis request ({len(request.text)} characters).")
    return await run_analysis(request.text, service)


@router.get("/current", response_model=AnalysisResult, summary="Get Current Result")
async def get_current_result(service: AnalysisService = Depends(get_analysis_service)):
    if service.current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No analysis has been run yet.")
    return service.current


@router.get("/history", response_model=HistoryResponse, summary="List Analysis History")
async def list_history(service: AnalysisService = Depends(get_analysis_service)):
    """Lists the retained analyses, most recent first."""
    return HistoryResponse(
        entries=[HistoryEntry.from_result(result) for result in service.history.entries()]
    )


@router.get(
    "/history/{analysis_id}",
    response_model=AnalysisResult,
    summary="Reselect Analysis From History",
)
async def select_from_history(
    analysis_id: str,
    service: AnalysisService = Depends(get_analysis_service),
):
    """Returns a history entry and makes it the current result."""
    result = service.select(analysis_id)
    if result is None:
        logger.warning(f"Requested analysis not found in history: {analysis_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Analysis not found: {analysis_id}",
        )
    return result


@router.delete(
    "/history",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear Analysis History",
)
async def clear_history(service: AnalysisService = Depends(get_analysis_service)):
    service.clear_history()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{analysis_id}/export/{fmt}", summary="Export Analysis")
async def export_analysis(
    analysis_id: str,
    fmt: str,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Renders a result as JSON, CSV or a plain-text report for download.

    Raises:
        HTTPException(400): If `fmt` is not json, csv or report.
        HTTPException(404): If no current or history result has `analysis_id`.
    """
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported export format: {fmt}",
        )
    result = service.find(analysis_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Analysis not found: {analysis_id}",
        )

    content = render_export(result, fmt)
    filename = export_filename(fmt, int(time.time() * 1000))
    logger.info(f"Exported {analysis_id} as {fmt} ({filename}).")
    return Response(
        content=content,
        media_type=EXPORT_FORMATS[fmt].media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
