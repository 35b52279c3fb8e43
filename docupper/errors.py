"""Conversion error taxonomy.

Each error carries the HTTP status and the plain-text message shown to the
client. The underlying cause of a ProcessingError is chained with
``raise ... from`` and only ever reaches the server log.
"""


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    status_code = 500
    message = "Error processing file"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class MissingFileError(ConversionError):
    """Raised when the request carries no upload in the ``file`` field."""

    status_code = 400
    message = "No file uploaded"


class UnsupportedFormatError(ConversionError):
    """Raised when the upload's extension is not a supported format."""

    status_code = 400
    message = "Unsupported file format"


class ProcessingError(ConversionError):
    """Raised when extracting or building a document fails."""
