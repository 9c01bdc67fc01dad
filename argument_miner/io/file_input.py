"""
file_input.py

Validation and decoding of uploaded documents before analysis.

A file is accepted when its content type is one of the configured document
types or its name ends with an allowed extension, and its size does not
exceed the configured limit. Accepted content is decoded as UTF-8 text; the
analyzer never receives bytes.
"""

import mimetypes
from typing import Any, Dict, Optional

from argument_miner.utils.logger import get_logger

logger = get_logger()


class FileInputError(ValueError):
    """Base class for rejected uploads; `str(error)` is the user-facing message."""

    message = "Error reading file. Please try again."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class UnsupportedFileTypeError(FileInputError):
    message = "Please upload a text file, PDF, or Word document"


class FileTooLargeError(FileInputError):
    message = "File size must be less than 10MB"


class FileReadError(FileInputError):
    message = "Error reading file. Please try again."


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or "application/octet-stream"


def validate_upload(
    filename: str,
    content_type: Optional[str],
    size: int,
    upload_config: Dict[str, Any],
) -> None:
    """
    Checks type first, then size.

    Raises:
        UnsupportedFileTypeError: Neither the content type nor the extension is allowed.
        FileTooLargeError: `size` exceeds `max_file_size_bytes`.
    """
    allowed_types = upload_config.get("allowed_content_types", [])
    allowed_extensions = upload_config.get("allowed_extensions", [".txt"])
    max_size = upload_config.get("max_file_size_bytes", 10 * 1024 * 1024)

    if content_type not in allowed_types and not filename.endswith(tuple(allowed_extensions)):
        logger.warning(f"Rejected upload '{filename}' with content type '{content_type}'.")
        raise UnsupportedFileTypeError()

    if size > max_size:
        logger.warning(f"Rejected upload '{filename}': {size} bytes exceeds {max_size}.")
        raise FileTooLargeError()


def decode_content(data: bytes) -> str:
    """Decodes bytes as UTF-8, replacing undecodable sequences."""
    return data.decode("utf-8", errors="replace")


def read_uploaded_file(
    filename: str,
    content_type: Optional[str],
    data: bytes,
    upload_config: Dict[str, Any],
) -> str:
    """
    Validates an uploaded file and returns its text.

    Args:
        filename (str): Original file name, used for the extension check.
        content_type (str | None): Declared MIME type.
        data (bytes): Raw file content.
        upload_config (Dict[str, Any]): The `upload` configuration section.

    Returns:
        str: The decoded text.

    Raises:
        UnsupportedFileTypeError: See `validate_upload`.
        FileTooLargeError: See `validate_upload`.
    """
    validate_upload(filename, content_type, len(data), upload_config)
    text = decode_content(data)
    logger.info(f"Accepted upload '{filename}' ({len(data)} bytes, {len(text)} characters).")
    return text
