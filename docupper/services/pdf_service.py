"""PDF text extraction and rendering.

Rendering draws the whole text as one block on a single fixed-size page.
There is no wrapping and no pagination: lines longer than the page width or
more lines than fit the page height are clipped by the page boundary.
"""
from __future__ import annotations

import hashlib
import os
from functools import lru_cache
from typing import List

import PyPDF2
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from docupper.errors import ProcessingError

PAGE_SIZE = (600, 800)
TEXT_ORIGIN = (50, 750)
FONT_SIZE = 12
LEADING = 14.4


def extract_text(pdf_path: str) -> str:
    """Concatenate page texts in the parser's reading order."""
    try:
        reader = PyPDF2.PdfReader(pdf_path)
        parts: List[str] = []
        for page in reader.pages:
            parts.append(page.extract_text() or "")
    except Exception as exc:
        raise ProcessingError(f"PDF extraction failed: {type(exc).__name__}: {exc}") from exc
    return "\n".join(parts).strip()


@lru_cache(maxsize=8)
def register_font(font_name: str, font_path: str) -> str:
    """Register a TrueType font with reportlab once per (name, path).

    reportlab keeps one global registry, so the registered name carries a
    digest of the path; the same name pointing at two files registers twice.
    """
    digest = hashlib.sha1(os.path.abspath(font_path).encode("utf-8")).hexdigest()[:8]
    registered = f"{font_name}-{digest}"
    pdfmetrics.registerFont(TTFont(registered, font_path))
    return registered


def build_document(text: str, output_path: str, font_path: str, font_name: str = "DejaVuSans") -> str:
    """Write ``text`` to a new one-page PDF and return ``output_path``."""
    try:
        font = register_font(font_name, font_path)
    except Exception as exc:
        raise ProcessingError(f"Could not load PDF font {font_path}: {exc}") from exc

    try:
        pdf = canvas.Canvas(output_path, pagesize=PAGE_SIZE)
        block = pdf.beginText(*TEXT_ORIGIN)
        block.setFont(font, FONT_SIZE, leading=LEADING)
        block.textLines(text, trim=0)
        pdf.drawText(block)
        pdf.showPage()
        pdf.save()
    except Exception as exc:
        raise ProcessingError(f"PDF export failed: {type(exc).__name__}: {exc}") from exc
    return output_path
