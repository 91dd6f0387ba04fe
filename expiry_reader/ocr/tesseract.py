from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

import pytesseract
from dotenv import load_dotenv
from PIL import Image, UnidentifiedImageError

from .base import OcrEngine, OcrRecognitionError, OcrUnavailableError, finish_text

logger = logging.getLogger(__name__)

# Checked in order when TESSDATA_PREFIX is not set.
TESSDATA_CANDIDATES = (
    r"C:\Program Files\Tesseract-OCR\tessdata",
    r"C:\Program Files (x86)\Tesseract-OCR\tessdata",
    "/usr/share/tesseract-ocr/5/tessdata",
    "/usr/share/tesseract-ocr/4.00/tessdata",
    "/usr/share/tesseract-ocr/tessdata",
    "/usr/local/share/tessdata",
    "/opt/homebrew/share/tessdata",
)


def find_tessdata_dir(language: str = "eng") -> Path | None:
    """Locate a tessdata directory holding ``<language>.traineddata``.

    TESSDATA_PREFIX wins if it points at an existing directory. Returns None to
    let tesseract fall back to its compiled-in default.
    """
    prefix = os.environ.get("TESSDATA_PREFIX", "").strip()
    if prefix and Path(prefix).is_dir():
        return Path(prefix)

    for cand in TESSDATA_CANDIDATES:
        p = Path(cand)
        if (p / f"{language}.traineddata").is_file():
            return p
    return None


@dataclass
class TesseractEngine(OcrEngine):
    """Local Tesseract via pytesseract: LSTM engine, automatic page segmentation."""

    tesseract_cmd: str | None = None
    tessdata_dir: Path | None = None
    language: str = "eng"
    psm: int = 1
    oem: int = 1
    dpi: int = 300
    timeout_s: int = 60

    name: str = "tesseract"

    @classmethod
    def from_env(cls, *, language: str | None = None, timeout_s: int = 60) -> "TesseractEngine":
        load_dotenv()
        lang = language or os.environ.get("OCR_LANGUAGE", "").strip() or "eng"
        cmd = os.environ.get("TESSERACT_CMD", "").strip() or None
        engine = cls(tesseract_cmd=cmd, tessdata_dir=find_tessdata_dir(lang), language=lang, timeout_s=int(timeout_s))
        engine.check_available()
        return engine

    def check_available(self) -> str:
        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        try:
            version = str(pytesseract.get_tesseract_version())
        except pytesseract.TesseractNotFoundError as e:
            raise OcrUnavailableError(
                "Tesseract binary not found. Install tesseract-ocr or set TESSERACT_CMD (see .env.example)"
            ) from e
        logger.info("Tesseract %s (tessdata: %s)", version, self.tessdata_dir or "default")
        return version

    def config_string(self) -> str:
        cfg = f"--psm {self.psm} --oem {self.oem} -c user_defined_dpi={self.dpi}"
        if self.tessdata_dir:
            cfg += f' --tessdata-dir "{self.tessdata_dir}"'
        return cfg

    def ocr_image_bytes(self, image_bytes: bytes) -> str:
        try:
            img = Image.open(BytesIO(image_bytes))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise OcrRecognitionError(f"Unreadable image: {e}") from e

        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        try:
            raw = pytesseract.image_to_string(
                img, lang=self.language, config=self.config_string(), timeout=self.timeout_s
            )
        except pytesseract.TesseractNotFoundError as e:
            raise OcrUnavailableError("Tesseract binary not found") from e
        except (pytesseract.TesseractError, RuntimeError) as e:
            # pytesseract signals a timeout with a bare RuntimeError.
            raise OcrRecognitionError(f"Tesseract failed: {e}") from e

        text = finish_text(raw.splitlines())
        logger.debug("Tesseract extracted %d characters", len(text))
        return text
