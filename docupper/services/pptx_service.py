"""PPTX text extraction and rendering.

Extraction reads the slide parts straight from the zip archive and collects
every DrawingML text run (``<a:t>``) in document order. Each run becomes one
entry, and rendering turns each entry into its own slide, so the output has
as many slides as the input had runs.
"""
from __future__ import annotations

import re
import zipfile
import xml.etree.ElementTree as ET
from typing import List

from pptx import Presentation
from pptx.util import Inches, Pt

from docupper.errors import ProcessingError

DRAWINGML_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
RUN_TEXT_TAG = f"{{{DRAWINGML_NS}}}t"
SLIDE_PART_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$")

BLANK_LAYOUT = 6
TEXT_BOX = (Inches(1), Inches(1), Inches(8), Inches(1.5))
FONT_SIZE = Pt(18)


def slide_parts(names: List[str]) -> List[str]:
    """Slide part names ordered by slide number, not archive position."""
    numbered = []
    for name in names:
        m = SLIDE_PART_RE.match(name)
        if m:
            numbered.append((int(m.group(1)), name))
    return [name for _, name in sorted(numbered)]


def run_texts(xml_bytes: bytes) -> List[str]:
    root = ET.fromstring(xml_bytes)
    return [el.text or "" for el in root.iter(RUN_TEXT_TAG)]


def extract_text(pptx_path: str) -> List[str]:
    """Return the text of every run across all slides, in slide order."""
    texts: List[str] = []
    try:
        with zipfile.ZipFile(pptx_path) as archive:
            for name in slide_parts(archive.namelist()):
                texts.extend(run_texts(archive.read(name)))
    except Exception as exc:
        raise ProcessingError(f"PPTX extraction failed: {type(exc).__name__}: {exc}") from exc
    return texts


def build_document(texts: List[str], output_path: str) -> str:
    """Write one slide per entry, each holding a single text box."""
    try:
        prs = Presentation()
        layout = prs.slide_layouts[BLANK_LAYOUT]
        for text in texts:
            slide = prs.slides.add_slide(layout)
            frame = slide.shapes.add_textbox(*TEXT_BOX).text_frame
            # One run per slide, even for empty or multi-line text
            run = frame.paragraphs[0].add_run()
            run.text = text
            run.font.size = FONT_SIZE
        prs.save(output_path)
    except Exception as exc:
        raise ProcessingError(f"PPTX export failed: {type(exc).__name__}: {exc}") from exc
    return output_path
