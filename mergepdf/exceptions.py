"""
Custom exceptions for mergepdf.

Every error carries the process exit code the command line should use
when it escapes to :func:`mergepdf.cli.main`.
"""


class MergePDFError(Exception):
    """Base exception for all mergepdf errors."""

    exit_code = 2

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown merge error occurred."


class UsageError(MergePDFError):
    """Raised when the command line is missing required arguments."""

    exit_code = 1

    @property
    def default_message(self) -> str:
        return "Invalid command line usage."


class HelpRequested(UsageError):
    """Raised when ``-h``/``--help`` is the first token."""

    exit_code = 0

    @property
    def default_message(self) -> str:
        return ""


class InvalidArgument(MergePDFError):
    """Raised when a named input path does not exist."""

    exit_code = 1

    @property
    def default_message(self) -> str:
        return "Input path does not exist."


class DirectoryUnreadable(MergePDFError):
    """Raised when a directory cannot be listed during expansion."""

    @property
    def default_message(self) -> str:
        return "Directory could not be read."


class DirectoryCycleError(DirectoryUnreadable):
    """Raised when a symlinked directory points back into its own ancestry."""

    @property
    def default_message(self) -> str:
        return "Directory cycle detected."


class OutputDirectoryCreationFailed(MergePDFError):
    """Raised when the parent directory of the output cannot be created."""

    @property
    def default_message(self) -> str:
        return "Output directory could not be created."


class MergeIOError(MergePDFError):
    """Raised when an input cannot be read or copied, or the output cannot be written."""

    @property
    def default_message(self) -> str:
        return "Failed to merge PDF files."
