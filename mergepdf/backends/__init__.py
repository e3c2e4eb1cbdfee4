"""Backend abstractions for mergepdf."""

from .base import PDFBackend
from .pypdf_backend import PypdfBackend, PypdfReader

__all__ = [
    "PDFBackend",
    "PypdfBackend",
    "PypdfReader",
]
