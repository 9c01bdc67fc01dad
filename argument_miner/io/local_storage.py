# argument_miner/io/local_storage.py
"""
Concrete implementations of IO protocols using the local filesystem and aiofiles.
"""

import logging
from pathlib import Path

import aiofiles

from .file_input import FileReadError
from .protocols import ExportWriter, TextDataSource

logger = logging.getLogger(__name__)


class LocalTextDataSource(TextDataSource):
    """Reads input documents from a local file."""

    def __init__(self, file_path: Path):
        if not isinstance(file_path, Path):
            raise TypeError("file_path must be a Path object")
        self._file_path = file_path

    @property
    def name(self) -> str:
        return self._file_path.name

    def size(self) -> int:
        """Size of the file in bytes; raises FileNotFoundError for missing files."""
        return self._file_path.stat().st_size

    async def read_bytes(self) -> bytes:
        """
        Reads the file content asynchronously.

        Raises:
            FileNotFoundError: If the file does not exist.
            FileReadError: For any other OS error while reading.
        """
        try:
            async with aiofiles.open(self._file_path, mode="rb") as f:
                logger.debug(f"Reading bytes from: {self._file_path}")
                return await f.read()
        except FileNotFoundError:
            logger.error(f"Local text data source file not found: {self._file_path}")
            raise
        except OSError as e:
            logger.error(f"OS error reading local file {self._file_path}: {e}", exc_info=True)
            raise FileReadError() from e

    def get_identifier(self) -> str:
        return str(self._file_path)


class LocalExportWriter(ExportWriter):
    """Writes rendered exports into a local directory."""

    def __init__(self, output_dir: Path):
        if not isinstance(output_dir, Path):
            raise TypeError("output_dir must be a Path object")
        self._output_dir = output_dir

    async def write(self, filename: str, content: str) -> str:
        """
        Writes `content` to `output_dir/filename`, creating the directory if needed.

        Returns:
            str: The path of the written file.
        """
        if "/" in filename or ".." in filename:
            raise ValueError(f"Invalid export filename: {filename}")
        file_path = self._output_dir / filename
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, mode="w", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            logger.error(f"Failed to write export {file_path}: {e}", exc_info=True)
            raise
        logger.info(f"Wrote export: {file_path}")
        return str(file_path)

    def get_identifier(self) -> str:
        return str(self._output_dir)
