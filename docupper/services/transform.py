"""Text transforms applied between extraction and rendering."""
from __future__ import annotations

from docupper.models import ExtractedText


def uppercase(text: ExtractedText) -> ExtractedText:
    """Uppercase a string, or each string of a run list.

    Uses Python's Unicode case mapping, which does not depend on the
    process locale. Characters without case are left as they are.
    """
    if isinstance(text, str):
        return text.upper()
    return [t.upper() for t in text]
