"""pypdf backend implementation for mergepdf."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import MergeIOError
from .base import PDFBackend


@dataclass
class PypdfReader:
    path: Path
    stream: BinaryIO
    reader: PdfReader


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def open_reader(self, pdf_path: Path) -> PypdfReader:
        path = Path(pdf_path)
        try:
            stream = path.open("rb")
        except OSError as exc:
            raise MergeIOError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(stream)
            if reader.is_encrypted:
                raise MergeIOError(f"PDF is encrypted and cannot be merged: {pdf_path}")
        except MergeIOError:
            stream.close()
            raise
        except PdfReadError as exc:
            stream.close()
            raise MergeIOError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            stream.close()
            raise MergeIOError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        return PypdfReader(path=path, stream=stream, reader=reader)

    def release(self, reader: PypdfReader) -> None:
        reader.stream.close()

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def append(self, writer: PdfWriter, reader: PypdfReader) -> None:
        try:
            writer.append(reader.reader)
        except Exception as exc:
            raise MergeIOError(f"Failed to copy pages from {reader.path}. Error: {exc}") from exc

    def page_count(self, writer: PdfWriter) -> int:
        return len(writer.pages)

    def deduplicate(self, writer: PdfWriter) -> None:
        try:
            writer.compress_identical_objects()
        except Exception as exc:
            raise MergeIOError(f"Failed to share identical objects. Error: {exc}") from exc

    def write(self, writer: PdfWriter, destination: Path) -> None:
        path = Path(destination)
        try:
            handle = path.open("wb")
        except OSError as exc:
            raise MergeIOError(f"Unable to create output file {path}. Error: {exc}") from exc

        try:
            with handle:
                writer.write(handle)
        except Exception as exc:
            # A half written file is never a usable PDF.
            path.unlink(missing_ok=True)
            raise MergeIOError(f"Failed to write merged PDF to {path}. Error: {exc}") from exc
