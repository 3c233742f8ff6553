"""
Integration tests against the real tesseract binary.

Skipped when tesseract is not installed.
"""

import io

import pytest
from PIL import Image, ImageDraw, ImageFont

from scan_classifier.ocr.tesseract_engine import TesseractOCREngine


def _render(text: str) -> bytes:
    image = Image.new("RGB", (900, 200), color="white")
    draw = ImageDraw.Draw(image)
    draw.text((40, 60), text, fill="black", font=ImageFont.load_default(size=64))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.mark.asyncio
async def test_recognizes_rendered_text(check_tesseract):
    engine = TesseractOCREngine(language="eng", timeout=30)

    result = await engine.recognize(_render("INVOICE 1234"))

    assert result.succeeded
    assert "invoice" in result.text.lower()


@pytest.mark.asyncio
async def test_blank_image_gives_empty_text(check_tesseract):
    engine = TesseractOCREngine(language="eng", timeout=30)

    result = await engine.recognize(_render(""))

    assert result.succeeded
    assert result.text == ""


@pytest.mark.asyncio
async def test_missing_language_pack_is_failure(check_tesseract):
    engine = TesseractOCREngine(language="zzz_missing", timeout=30)

    result = await engine.recognize(_render("hello"))

    assert not result.succeeded
    assert result.error == "Tesseract failed"
