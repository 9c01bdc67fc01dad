# argument_miner/io/protocols.py
"""
Defines Protocol interfaces for reading input text and writing exports.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextDataSource(Protocol):
    """Protocol for reading input text data."""

    async def read_bytes(self) -> bytes:
        """Reads and returns the raw content."""
        ...

    def get_identifier(self) -> str:
        """Returns a unique string identifier for the data source (e.g., filename, URI)."""
        ...


@runtime_checkable
class ExportWriter(Protocol):
    """Protocol for writing rendered exports."""

    async def write(self, filename: str, content: str) -> str:
        """Writes `content` under `filename` and returns where it was written."""
        ...

    def get_identifier(self) -> str:
        """Returns a unique string identifier for the destination."""
        ...
