from __future__ import annotations

import itertools
import logging
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from pypdf import PdfReader, PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., Path]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> PdfFactory:
    """Create PDFs below ``tmp_path``.

    Every document gets its own page width and every page its own height,
    so the origin and position of a page can be read back from the merged
    output.
    """

    widths = itertools.count(400, 10)

    def _create(filename: str, pages: int = 1, width: int | None = None) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        page_width = next(widths) if width is None else width
        writer = PdfWriter()
        for index in range(pages):
            writer.add_blank_page(width=page_width, height=200 + index)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: PdfFactory) -> list[Path]:
    one = pdf_factory("one.pdf", width=100)
    two = pdf_factory("two.pdf", pages=2, width=200)
    three = pdf_factory("three.pdf", width=300)
    return [one, two, three]


@pytest.fixture()
def page_widths() -> Callable[[Path], list[float]]:
    def _read(path: Path) -> list[float]:
        reader = PdfReader(str(path))
        return [float(page.mediabox.width) for page in reader.pages]

    return _read


@pytest.fixture()
def text_pdf_factory(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Create PDFs whose pages draw *texts* with one shared Helvetica font."""

    def _create(filename: str, texts: list[str]) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        font = DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject("/Helvetica"),
            }
        )
        font_ref = writer._add_object(font)
        for text in texts:
            page = writer.add_blank_page(width=300, height=300)
            content = DecodedStreamObject()
            content.set_data(f"BT /F1 24 Tf 40 150 Td ({text}) Tj ET".encode("latin-1"))
            page[NameObject("/Contents")] = writer._add_object(content)
            page[NameObject("/Resources")] = DictionaryObject(
                {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font_ref})}
            )
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def page_texts() -> Callable[[Path], list[str]]:
    def _read(path: Path) -> list[str]:
        reader = PdfReader(str(path))
        return [page.extract_text().strip() for page in reader.pages]

    return _read


@pytest.fixture()
def log_records() -> Iterator[list[logging.LogRecord]]:
    """Collect records emitted by the mergepdf loggers during a test."""

    records: list[logging.LogRecord] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    handler = _Collector(level=logging.DEBUG)
    loggers = [
        logging.getLogger(name)
        for name in ("mergepdf.arguments", "mergepdf.expander", "mergepdf.merger", "mergepdf.cli")
    ]
    for logger in loggers:
        logger.addHandler(handler)
    yield records
    for logger in loggers:
        logger.removeHandler(handler)
