from __future__ import annotations

from abc import ABC, abstractmethod


class OcrError(RuntimeError):
    """Base class for OCR failures."""


class OcrUnavailableError(OcrError):
    """The engine is not configured or cannot be reached (missing binary, credentials)."""


class OcrRecognitionError(OcrError):
    """The engine ran but recognition failed (bad image, provider error, timeout)."""


class OcrEngine(ABC):
    name: str

    @abstractmethod
    def ocr_image_bytes(self, image_bytes: bytes) -> str:
        """Return OCR text for an encoded image (PNG/JPEG bytes). Should return a trailing newline when non-empty."""
        raise NotImplementedError


def finish_text(lines: list[str]) -> str:
    """Join non-empty lines; non-empty output ends with a newline."""
    out = "\n".join(ln.strip() for ln in lines if ln and ln.strip()).strip()
    return out + ("\n" if out else "")
