"""
Type definitions and dataclasses for mergepdf.

This module defines the data structures passed between the argument
resolver, the directory expander and the merge orchestrator.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Tuple


class Flag(enum.Enum):
    """Boolean command line flags recognised by ``mergepdf``."""

    VERBOSE = "-v"
    PDF_EXTENSION_ONLY = "-e"

    @classmethod
    def from_token(cls, token: str) -> Optional["Flag"]:
        for flag in cls:
            if flag.value == token:
                return flag
        return None


@dataclass(frozen=True)
class MergeRequest:
    """
    A fully resolved merge invocation.

    Attributes:
        inputs: Absolute paths of the files to merge, in merge order
        output: Output file path exactly as given on the command line
        flags: Recognised flags present on the command line
    """
    inputs: Tuple[Path, ...]
    output: Path
    flags: FrozenSet[Flag] = field(default_factory=frozenset)

    def has_flag(self, flag: Flag) -> bool:
        return flag in self.flags

    @property
    def verbose(self) -> bool:
        return Flag.VERBOSE in self.flags

    @property
    def pdf_extension_only(self) -> bool:
        return Flag.PDF_EXTENSION_ONLY in self.flags


@dataclass(frozen=True)
class MergeResult:
    """
    Result of a completed merge.

    Attributes:
        output: Path of the written PDF
        inputs: Input files in the order they were appended
        page_count: Total number of pages in the output
    """
    output: Path
    inputs: Tuple[Path, ...]
    page_count: int

    def __str__(self) -> str:
        return f"MergeResult(files={len(self.inputs)}, pages={self.page_count})"
