"""
argument_miner/api/routers/files.py

API router for document uploads.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from argument_miner.api.dependencies import get_analysis_service, get_upload_config
from argument_miner.api.routers.analysis import run_analysis
from argument_miner.api.schemas import UploadResponse
from argument_miner.io.file_input import (
    FileInputError,
    FileReadError,
    FileTooLargeError,
    read_uploaded_file,
)
from argument_miner.models.analysis_result import AnalysisResult
from argument_miner.services.analysis_service import AnalysisService
from argument_miner.utils.logger import get_logger

router = APIRouter(prefix="/files", tags=["Files"])

logger = get_logger()


async def _decode_upload(file: UploadFile, upload_config: Dict[str, Any]) -> str:
    filename = file.filename or ""
    try:
        try:
            data = await file.read()
        except OSError as e:
            logger.error(f"Error reading upload '{filename}': {e}", exc_info=True)
            raise FileReadError() from e
        return read_uploaded_file(filename, file.content_type, data, upload_config)
    except FileTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except FileInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/upload", response_model=UploadResponse, summary="Upload Document")
async def upload_document(
    file: UploadFile = File(...),
    upload_config: Dict[str, Any] = Depends(get_upload_config),
):
    """
    Validates an uploaded document and returns its decoded text.

    Raises:
        HTTPException(400): Unsupported file type or unreadable file.
        HTTPException(413): File larger than the configured limit.
    """
    text = await _decode_upload(file, upload_config)
    return UploadResponse(filename=file.filename or "", text=text, characters=len(text))


@router.post("/analyze", response_model=AnalysisResult, summary="Upload And Analyze Document")
async def upload_and_analyze(
    file: UploadFile = File(...),
    upload_config: Dict[str, Any] = Depends(get_upload_config),
    service: AnalysisService = Depends(get_analysis_service),
):
    """Decodes an uploaded document and analyzes its text in one request."""
    text = await _decode_upload(file, upload_config)
    return await run_analysis(text, service)
