"""Format services: one extractor and one builder per supported format."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from docupper.errors import UnsupportedFormatError
from docupper.models import ExtractedText, UploadedFile
from docupper.services import docx_service, pdf_service, pptx_service
from docupper.services.transform import uppercase


@dataclass(frozen=True)
class Converter:
    extract: Callable[[str], ExtractedText]
    build: Callable[[Any, str, Mapping[str, Any]], str]
    mimetype: str


def _build_docx(text: str, output_path: str, options: Mapping[str, Any]) -> str:
    return docx_service.build_document(text, output_path)


def _build_pdf(text: str, output_path: str, options: Mapping[str, Any]) -> str:
    return pdf_service.build_document(
        text,
        output_path,
        font_path=options["PDF_FONT_PATH"],
        font_name=options.get("PDF_FONT_NAME", "DejaVuSans"),
    )


def _build_pptx(texts, output_path: str, options: Mapping[str, Any]) -> str:
    return pptx_service.build_document(texts, output_path)


CONVERTERS: Dict[str, Converter] = {
    ".docx": Converter(
        docx_service.extract_text,
        _build_docx,
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ),
    ".pdf": Converter(pdf_service.extract_text, _build_pdf, "application/pdf"),
    ".pptx": Converter(
        pptx_service.extract_text,
        _build_pptx,
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ),
}

SUPPORTED_EXTENSIONS = tuple(CONVERTERS)


def get_converter(extension: str) -> Converter:
    converter = CONVERTERS.get(extension)
    if converter is None:
        raise UnsupportedFormatError(f"extension '{extension}' is not one of {list(CONVERTERS)}")
    return converter


def convert(upload: UploadedFile, output_path: str, options: Mapping[str, Any]) -> str:
    """Extract, uppercase and rebuild ``upload`` into ``output_path``."""
    converter = get_converter(upload.extension)
    text = converter.extract(upload.path)
    return converter.build(uppercase(text), output_path, options)
