"""Merge functionality for the :mod:`mergepdf` package."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .exceptions import MergeIOError, OutputDirectoryCreationFailed
from .types import MergeResult
from .utils import PathLike, ensure_iterable, get_logger

LOGGER = get_logger("mergepdf.merger")


def ensure_output_directory(output: PathLike) -> Path:
    """Create the parent directories of *output* when they are missing."""

    parent = Path(output).parent
    if parent.is_dir():
        return parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        LOGGER.debug("Failed to create output directory %s: %s", parent, exc)
        raise OutputDirectoryCreationFailed(
            f"Output directory {parent.absolute()} could not be created."
        ) from exc
    LOGGER.debug("Created output directory %s", parent)
    return parent


def merge_documents(
    inputs: Iterable[PathLike],
    output: PathLike,
    *,
    smart: bool = True,
    backend: Optional[PDFBackend] = None,
) -> MergeResult:
    """Concatenate *inputs* into a single PDF written to *output*.

    Pages are appended input by input in the order given, each input
    contributing all of its pages in their original order. Every reader is
    released as soon as its pages have been copied. The output file is
    only created once all inputs were read, so a failing input never
    leaves a merged file behind.

    Args:
        inputs: Paths of the PDF files to merge, in merge order.
        output: Path of the merged PDF. Missing parent directories are
            created.
        smart: Share identical objects (fonts, images) between inputs
            before writing.
        backend: PDF library backend, :class:`PypdfBackend` by default.

    Raises:
        OutputDirectoryCreationFailed: If the output's parent directory
            cannot be created.
        MergeIOError: If an input cannot be read or copied, or the output
            cannot be written.
    """

    pdf_paths = ensure_iterable(inputs)
    if not pdf_paths:
        raise MergeIOError("No input PDFs provided")

    output_path = Path(output)
    ensure_output_directory(output_path)

    backend = backend or PypdfBackend()
    writer = backend.new_writer()

    for pdf_path in pdf_paths:
        LOGGER.debug("Processing input PDF %s", pdf_path)
        try:
            reader = backend.open_reader(pdf_path)
            try:
                backend.append(writer, reader)
            finally:
                backend.release(reader)
        except MergeIOError as exc:
            LOGGER.debug("Aborting merge at %s: %s", pdf_path, exc)
            raise

    if smart:
        LOGGER.debug("Sharing identical objects in merged PDF")
        backend.deduplicate(writer)

    page_count = backend.page_count(writer)
    try:
        backend.write(writer, output_path)
    except MergeIOError as exc:
        LOGGER.debug("Failed to write merged PDF to %s: %s", output_path, exc)
        raise

    LOGGER.info(
        "Merged %d PDFs (%d pages) into %s", len(pdf_paths), page_count, output_path
    )
    return MergeResult(output=output_path, inputs=tuple(pdf_paths), page_count=page_count)


__all__ = ["ensure_output_directory", "merge_documents"]
