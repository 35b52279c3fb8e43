"""DOCX text extraction and rendering.

Only body paragraphs are read; tables, headers, footers and images are
ignored. Rendering writes everything back as a single paragraph.
"""
from __future__ import annotations

import docx

from docupper.errors import ProcessingError


def extract_text(docx_path: str) -> str:
    try:
        document = docx.Document(docx_path)
        return "\n".join(p.text for p in document.paragraphs).strip()
    except Exception as exc:
        raise ProcessingError(f"DOCX extraction failed: {type(exc).__name__}: {exc}") from exc


def build_document(text: str, output_path: str) -> str:
    """Write ``text`` as one paragraph; newlines become line breaks."""
    try:
        document = docx.Document()
        document.add_paragraph(text)
        document.save(output_path)
    except Exception as exc:
        raise ProcessingError(f"DOCX export failed: {type(exc).__name__}: {exc}") from exc
    return output_path
