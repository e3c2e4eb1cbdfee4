"""Recursive expansion of directory inputs into an ordered list of files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterator, List, Optional

from .exceptions import DirectoryCycleError, DirectoryUnreadable
from .types import Flag
from .utils import PathLike, absolute_path, get_logger
from .visibility import is_visible_and_ordinary

LOGGER = get_logger("mergepdf.expander")

PDF_EXTENSION = ".pdf"


def _accept(entry: os.DirEntry, pdf_only: bool) -> bool:
    if not is_visible_and_ordinary(entry):
        return False
    if pdf_only and not entry.is_dir() and not entry.name.endswith(PDF_EXTENSION):
        return False
    return True


def _list_directory(directory: Path, pdf_only: bool) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as iterator:
            entries = [entry for entry in iterator if _accept(entry, pdf_only)]
    except OSError as exc:
        LOGGER.debug("Unable to list directory %s: %s", directory, exc)
        raise DirectoryUnreadable(
            f"Directory {directory} could not be read: {exc.strerror or exc}"
        ) from exc
    entries.sort(key=lambda entry: entry.name)
    return entries


def _walk(directory: Path, pdf_only: bool, ancestors: frozenset) -> Iterator[Path]:
    real = os.path.realpath(directory)
    if real in ancestors:
        LOGGER.debug("Directory cycle detected at %s", directory)
        raise DirectoryCycleError(
            f"Directory {directory} links back to one of its parents."
        )
    ancestors = ancestors | {real}

    subdirectories: List[Path] = []
    for entry in _list_directory(directory, pdf_only):
        path = directory / entry.name
        if entry.is_dir():
            subdirectories.append(path)
        else:
            LOGGER.debug("Found input %s", path)
            yield path

    for subdirectory in subdirectories:
        yield from _walk(subdirectory, pdf_only, ancestors)


def iter_directory(directory: PathLike, flags: AbstractSet[Flag] = frozenset()) -> Iterator[Path]:
    """Yield the files below *directory* in merge order.

    At every level the visible entries are sorted by name; files are
    yielded first, then each subdirectory is walked in the same order.
    With :attr:`Flag.PDF_EXTENSION_ONLY` only files whose name ends with
    ``.pdf`` (case-sensitive) are yielded.

    Raises:
        DirectoryUnreadable: If any directory in the tree cannot be listed.
        DirectoryCycleError: If a symlinked directory points back to one
            of its own parents.
    """

    root = absolute_path(directory)
    pdf_only = Flag.PDF_EXTENSION_ONLY in flags
    LOGGER.debug("Expanding directory %s (pdf only: %s)", root, pdf_only)
    return _walk(root, pdf_only, frozenset())


def expand_directory(
    directory: PathLike,
    flags: AbstractSet[Flag] = frozenset(),
    into: Optional[List[Path]] = None,
) -> List[Path]:
    """Append the files below *directory* to *into* and return it.

    The whole tree is read before *into* is touched, so a failure leaves
    the target list unchanged.
    """

    target: List[Path] = [] if into is None else into
    found = list(iter_directory(directory, flags))
    LOGGER.debug("Directory %s expanded to %d file(s)", directory, len(found))
    target.extend(found)
    return target


__all__ = ["PDF_EXTENSION", "iter_directory", "expand_directory"]
