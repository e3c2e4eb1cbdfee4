"""
Console output for the mergepdf command line.

Paths are printed verbatim: markup and highlighting are disabled and long
lines are never wrapped.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console

from .utils import PathLike

USAGE = (
    "Usage: mergepdf <input...> -o <output> [-v] [-e]\n"
    "  <input>  PDF files or directories, merged in the order given\n"
    "  -o       the output file\n"
    "  -v       verbose output\n"
    "  -e       only merge files ending in .pdf when expanding directories\n"
    "  -h       show this message and exit"
)

console = Console(highlight=False, emoji=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def _emit(target: Console, text: str) -> None:
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_usage(target: Optional[Console] = None) -> None:
    _emit(target or console, USAGE)


def print_error(message: str, target: Optional[Console] = None) -> None:
    _emit(target or error_console, f"Error: {message}")


def print_manifest(
    inputs: Sequence[PathLike],
    output: PathLike,
    target: Optional[Console] = None,
) -> None:
    """Print the merged inputs, numbered from 1, followed by the output path."""

    target = target or console
    _emit(target, "Merged files:")
    for number, path in enumerate(inputs, start=1):
        _emit(target, f"  {number}. {path}")
    _emit(target, f"Output: {output}")


__all__ = ["USAGE", "console", "error_console", "print_usage", "print_error", "print_manifest"]
