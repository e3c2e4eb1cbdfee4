"""Backend protocol for PDF operations."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PDFBackend(Protocol):
    """Protocol defining the PDF library operations the merger relies on."""

    def open_reader(self, pdf_path: Path) -> object:
        """Open *pdf_path* and return a reader handle."""

    def release(self, reader: object) -> None:
        """Release every resource held by *reader*."""

    def new_writer(self) -> object:
        """Return an empty backend writer instance."""

    def append(self, writer: object, reader: object) -> None:
        """Append every page of *reader* to *writer*, in order."""

    def page_count(self, writer: object) -> int:
        """Return the number of pages currently held by *writer*."""

    def deduplicate(self, writer: object) -> None:
        """Share identical objects in *writer* to shrink the output."""

    def write(self, writer: object, destination: Path) -> None:
        """Persist *writer* to *destination*."""
