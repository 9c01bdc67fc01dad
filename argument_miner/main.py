"""
main.py

Entry points for ArgumentMiner: the FastAPI application and the command-line
tool that analyzes a single document and writes the requested exports.
"""
import argparse
import asyncio
import json
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI

from argument_miner.analysis.text_analyzer import TextAnalyzer
from argument_miner.api.routers import analysis as analysis_router
from argument_miner.api.routers import files as files_router
from argument_miner.config import config
from argument_miner.io.exporters import EXPORT_FORMATS, export_filename, render_export, to_report
from argument_miner.io.file_input import decode_content, guess_content_type, validate_upload
from argument_miner.io.local_storage import LocalExportWriter, LocalTextDataSource
from argument_miner.models.analysis_result import AnalysisResult
from argument_miner.services.analysis_service import AnalysisFailedError, AnalysisService
from argument_miner.utils.logger import get_logger
from argument_miner.utils.metrics import metrics_tracker

logger = get_logger()

app = FastAPI(
    title="ArgumentMiner API",
    description="Heuristic identification of arguments, claims and evidence in text.",
    version="0.1.0",
)

app.include_router(files_router.router)
app.include_router(analysis_router.router)


@app.get("/", tags=["Health Check"])
async def read_root():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/metrics", tags=["Health Check"])
async def read_metrics():
    return metrics_tracker.get_summary()


async def analyze_file(
    input_file: Path,
    exports: List[str],
    output_dir: Path,
    seed: Optional[int] = None,
) -> AnalysisResult:
    """
    Reads, validates and analyzes one document, then writes its exports.

    The document goes through the same type and size checks as an upload,
    with the content type guessed from the file name. The size is taken from
    the file system, so oversize files are rejected before they are read.

    Args:
        input_file (Path): Document to analyze.
        exports (List[str]): Export formats to write (json, csv, report).
        output_dir (Path): Directory receiving the export files.
        seed (int, optional): Seed for the confidence jitter.

    Returns:
        AnalysisResult: The analysis of the document.
    """
    source = LocalTextDataSource(input_file)
    validate_upload(
        source.name, guess_content_type(source.name), source.size(), config.get("upload", {})
    )
    text = decode_content(await source.read_bytes())

    rng = random.Random(seed) if seed is not None else None
    service = AnalysisService(
        config=config,
        analyzer=TextAnalyzer(rng=rng),
        metrics_tracker=metrics_tracker,
    )
    result = await service.analyze(text)
    print(to_report(result))

    writer = LocalExportWriter(output_dir)
    now_ms = int(time.time() * 1000)
    for fmt in exports:
        await writer.write(export_filename(fmt, now_ms), render_export(result, fmt))
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Parses arguments (output directory defaults to `paths.output_dir` from
    configuration), runs `analyze_file`, and logs a metrics summary whether
    the run succeeded or not.

    Returns:
        int: 0 on success, 1 if the analysis failed.
    """
    parser = argparse.ArgumentParser(
        description="Identify arguments, claims and evidence in a text document"
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="Path to the document to analyze (.txt, .pdf, .doc, .docx)",
    )
    parser.add_argument(
        "--export",
        nargs="*",
        choices=sorted(EXPORT_FORMATS),
        default=[],
        help="Export formats to write to the output directory",
    )
    parser.add_argument(
        "--output_dir",
        type=Path,
        default=Path(config["paths"]["output_dir"]),
        help="Directory for export files",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the confidence jitter for reproducible scores",
    )
    args = parser.parse_args(argv)

    metrics_tracker.reset()
    exit_code = 0

    logger.info(f"Starting analysis of {args.input_file}")
    try:
        asyncio.run(analyze_file(
            input_file=args.input_file,
            exports=args.export,
            output_dir=args.output_dir,
            seed=args.seed,
        ))
        logger.info("Analysis completed.")
    except Exception as e:
        logger.critical(f"Analysis of {args.input_file} failed: {e}", exc_info=True)
        if not isinstance(e, AnalysisFailedError):
            metrics_tracker.increment_errors()
        exit_code = 1
    finally:
        summary = metrics_tracker.get_summary()
        logger.info(f"Analysis Summary: {json.dumps(summary, indent=2)}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
