from enum import Enum


class FileClassification(Enum):
    """Which reader handles a file, decided from its extension."""

    TEXT = "text"
    PDF = "pdf"
    IMAGE = "image"
