from catboard.ocr.base import BaseOcr
from catboard.ocr.factory import OcrFactory
from catboard.ocr.mock_ocr import MockOcr
from catboard.ocr.system_ocr import SystemOcr

__all__ = ["BaseOcr", "MockOcr", "OcrFactory", "SystemOcr"]
