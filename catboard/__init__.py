"""Copy file contents to the clipboard, extracting text from PDFs and images."""

__version__ = "0.1.0"
