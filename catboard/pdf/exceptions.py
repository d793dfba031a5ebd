class PdfBackendError(Exception):
    """Raised by a PDF backend adapter when the underlying library fails."""
