from __future__ import annotations

from .azure import AzureVisionReadEngine
from .base import OcrEngine
from .tesseract import TesseractEngine

ENGINE_NAMES = ("tesseract", "azure")


def build_engine(name: str, **kwargs) -> OcrEngine:
    """Engine factory.

    Raises OcrUnavailableError when the engine exists but is not configured.
    """
    n = (name or "tesseract").lower()
    if n in ("tesseract", "tess"):
        return TesseractEngine.from_env(
            language=kwargs.get("language"),
            timeout_s=int(kwargs.get("timeout_s", 60)),
        )
    if n in ("azure", "azure-read", "azure_read"):
        return AzureVisionReadEngine.from_env(
            language=str(kwargs.get("azure_language", "en")),
            timeout_s=int(kwargs.get("timeout_s", 60)),
        )

    raise ValueError(f"Unsupported OCR engine: {name} (choose from: {', '.join(ENGINE_NAMES)})")
