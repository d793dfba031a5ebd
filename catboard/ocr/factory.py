from catboard.config.settings import Settings
from catboard.ocr.base import BaseOcr
from catboard.ocr.system_ocr import SystemOcr


class OcrFactory:
    """Creates the OCR backend used in production."""

    @classmethod
    def create(cls, settings: Settings) -> BaseOcr:
        return SystemOcr(helper_name=settings.ocr_helper_name)
