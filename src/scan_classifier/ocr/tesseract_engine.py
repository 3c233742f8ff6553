"""
Tesseract OCR backend via pytesseract.
"""

import io
from typing import Optional

import pytesseract
import structlog
from PIL import Image, ImageOps, UnidentifiedImageError

from scan_classifier.ocr.base_engine import BaseOCREngine
from scan_classifier.ocr.exceptions import OCRError


logger = structlog.get_logger(__name__)


class TesseractOCREngine(BaseOCREngine):
    """
    OCR backend running the local tesseract binary.

    Camera photos are rotated upright according to their EXIF orientation
    before recognition.
    """

    def __init__(
        self,
        language: str = "eng",
        tesseract_cmd: Optional[str] = None,
        timeout: int = 30,
        config: str = "",
    ):
        """
        Args:
            language: Tesseract language pack(s), e.g. "eng" or "eng+fra"
            tesseract_cmd: Path to the tesseract binary if not on PATH
            timeout: Seconds before the tesseract process is killed (0 = none)
            config: Extra tesseract flags, e.g. "--psm 6"
        """
        self.language = language
        self.timeout = timeout
        self.config = config
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

        logger.info(
            "Tesseract OCR engine initialized",
            language=language,
            timeout=timeout,
            config=config or None,
        )

    def _extract_text(self, image: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image)) as img:
                upright = ImageOps.exif_transpose(img)
                text = pytesseract.image_to_string(
                    upright,
                    lang=self.language,
                    config=self.config,
                    timeout=self.timeout,
                )
        except UnidentifiedImageError as e:
            raise OCRError("Unsupported or corrupt image", details={"error": str(e)}) from e
        except Image.DecompressionBombError as e:
            raise OCRError("Image too large", details={"error": str(e)}) from e
        except pytesseract.TesseractNotFoundError as e:
            raise OCRError("Tesseract is not installed or not on PATH") from e
        except pytesseract.TesseractError as e:
            raise OCRError(
                "Tesseract failed",
                details={"status": e.status, "error": str(e.message)},
            ) from e
        except RuntimeError as e:
            # pytesseract signals a killed process (timeout) with RuntimeError
            raise OCRError("Tesseract timed out", details={"timeout": self.timeout}) from e
        except OSError as e:
            raise OCRError("Image could not be decoded", details={"error": str(e)}) from e

        return text.strip()

    def health_check(self) -> bool:
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError):
            return False
        logger.debug("Tesseract available", version=str(version))
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(language={self.language}, timeout={self.timeout}s)"
