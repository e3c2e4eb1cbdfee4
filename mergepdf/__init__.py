"""
mergepdf - merge PDF files and directories of PDF files into one PDF.

Quick Start:
    >>> from mergepdf import resolve_arguments, merge_documents
    >>> request = resolve_arguments(["one.pdf", "chapters/", "-o", "out.pdf"])
    >>> result = merge_documents(request.inputs, request.output)

Directory inputs are expanded recursively: at every level visible entries
are sorted by name, files come first and subdirectories follow.

For CLI usage, use the 'mergepdf' command after installation.
"""

# Core operations
from mergepdf.arguments import collect_flags, resolve_arguments
from mergepdf.expander import expand_directory, iter_directory
from mergepdf.merger import ensure_output_directory, merge_documents

# Data types
from mergepdf.types import Flag, MergeRequest, MergeResult

# Exceptions
from mergepdf.exceptions import (
    MergePDFError,
    UsageError,
    HelpRequested,
    InvalidArgument,
    DirectoryUnreadable,
    DirectoryCycleError,
    OutputDirectoryCreationFailed,
    MergeIOError,
)

__version__ = "1.0.0"

__all__ = [
    # Operations
    "resolve_arguments",
    "collect_flags",
    "expand_directory",
    "iter_directory",
    "ensure_output_directory",
    "merge_documents",
    # Data types
    "Flag",
    "MergeRequest",
    "MergeResult",
    # Exceptions
    "MergePDFError",
    "UsageError",
    "HelpRequested",
    "InvalidArgument",
    "DirectoryUnreadable",
    "DirectoryCycleError",
    "OutputDirectoryCreationFailed",
    "MergeIOError",
    # Version info
    "__version__",
]
