"""
Request-scoped data for a single conversion
"""
import os
from dataclasses import dataclass
from typing import List, Union

# A plain string for DOCX and PDF, one string per text run for PPTX
ExtractedText = Union[str, List[str]]

OUTPUT_SUFFIX = "_UPPER"


@dataclass(frozen=True)
class UploadedFile:
    """An upload stored on disk for the lifetime of one request."""

    original_filename: str
    path: str
    extension: str

    @property
    def base_name(self) -> str:
        name = os.path.basename(self.original_filename.replace("\\", "/"))
        return os.path.splitext(name)[0]

    @property
    def output_name(self) -> str:
        """Download name of the converted document, ``<base>_UPPER<ext>``."""
        return f"{self.base_name}{OUTPUT_SUFFIX}{self.extension}"


def detect_extension(filename: str) -> str:
    """Lowercased extension of the original filename, dot included."""
    return os.path.splitext((filename or "").strip())[1].lower()


@dataclass(frozen=True)
class ConversionJob:
    """Paths reserved for one request: the staged upload and its output."""

    request_id: str
    upload: UploadedFile
    output_path: str
