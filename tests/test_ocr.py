from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
import pytesseract
from PIL import Image

from expiry_reader.ocr import azure as azure_mod
from expiry_reader.ocr import tesseract as tess_mod
from expiry_reader.ocr.azure import AzureVisionReadEngine
from expiry_reader.ocr.base import OcrError, OcrRecognitionError, OcrUnavailableError, finish_text
from expiry_reader.ocr.registry import build_engine
from expiry_reader.ocr.tesseract import TesseractEngine, find_tessdata_dir


def _png_bytes() -> bytes:
    buf = BytesIO()
    Image.new("RGB", (8, 8), "white").save(buf, format="PNG")
    return buf.getvalue()


class _Resp:
    def __init__(self, status_code: int, payload: dict | None = None, headers: dict | None = None) -> None:
        self.status_code = status_code
        self._payload = payload or {}
        self.headers = headers or {}
        self.text = str(payload)

    def json(self) -> dict:
        return self._payload


def test_finish_text() -> None:
    assert finish_text([]) == ""
    assert finish_text(["  FRESH MILK ", "", "EXP 12/11/2026"]) == "FRESH MILK\nEXP 12/11/2026\n"


def test_error_taxonomy() -> None:
    assert issubclass(OcrUnavailableError, OcrError)
    assert issubclass(OcrRecognitionError, OcrError)
    assert issubclass(OcrError, RuntimeError)


def test_build_engine_unknown_name() -> None:
    with pytest.raises(ValueError):
        build_engine("nope")


def test_azure_from_env_requires_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(azure_mod, "load_dotenv", lambda: None)
    monkeypatch.delenv("AZURE_VISION_ENDPOINT", raising=False)
    monkeypatch.delenv("AZURE_VISION_KEY", raising=False)
    with pytest.raises(OcrUnavailableError):
        build_engine("azure")


def test_azure_read_success(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_post(url, **kwargs):
        assert url == "https://example.test/vision/v3.2/read/analyze"
        return _Resp(202, headers={"Operation-Location": "https://example.test/op/1"})

    def fake_get(url, **kwargs):
        return _Resp(
            200,
            {
                "status": "succeeded",
                "analyzeResult": {"readResults": [{"lines": [{"text": "FRESH MILK"}, {"text": "EXP 12/11/2026"}]}]},
            },
        )

    monkeypatch.setattr(azure_mod.requests, "post", fake_post)
    monkeypatch.setattr(azure_mod.requests, "get", fake_get)

    engine = AzureVisionReadEngine(endpoint="https://example.test/", key="k")
    assert engine.ocr_image_bytes(b"img") == "FRESH MILK\nEXP 12/11/2026\n"


def test_azure_read_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    engine = AzureVisionReadEngine(endpoint="https://example.test", key="k")

    monkeypatch.setattr(azure_mod.requests, "post", lambda url, **kw: _Resp(401, {"error": "denied"}))
    with pytest.raises(OcrRecognitionError):
        engine.ocr_image_bytes(b"img")

    monkeypatch.setattr(
        azure_mod.requests, "post", lambda url, **kw: _Resp(202, headers={"Operation-Location": "https://x/op"})
    )
    monkeypatch.setattr(azure_mod.requests, "get", lambda url, **kw: _Resp(200, {"status": "failed"}))
    with pytest.raises(OcrRecognitionError):
        engine.ocr_image_bytes(b"img")


def test_tesseract_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    def not_found():
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(tess_mod.pytesseract, "get_tesseract_version", not_found)
    with pytest.raises(OcrUnavailableError):
        TesseractEngine().check_available()


def test_tesseract_unreadable_image() -> None:
    with pytest.raises(OcrRecognitionError):
        TesseractEngine().ocr_image_bytes(b"definitely not an image")


def test_tesseract_text_and_config(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict = {}

    def fake_image_to_string(img, lang=None, config="", timeout=0):
        seen.update(lang=lang, config=config)
        return "  FRESH MILK \n\nEXP 12/11/2026  \n"

    monkeypatch.setattr(tess_mod.pytesseract, "image_to_string", fake_image_to_string)

    engine = TesseractEngine(tessdata_dir=Path("/data/tess"))
    assert engine.ocr_image_bytes(_png_bytes()) == "FRESH MILK\nEXP 12/11/2026\n"
    assert seen["lang"] == "eng"
    assert "--psm 1 --oem 1 -c user_defined_dpi=300" in seen["config"]
    assert "--tessdata-dir" in seen["config"]


def test_tesseract_recognition_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*args, **kwargs):
        raise pytesseract.TesseractError(1, "bad things")

    monkeypatch.setattr(tess_mod.pytesseract, "image_to_string", boom)
    with pytest.raises(OcrRecognitionError):
        TesseractEngine().ocr_image_bytes(_png_bytes())


def test_find_tessdata_dir_prefers_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TESSDATA_PREFIX", str(tmp_path))
    assert find_tessdata_dir() == tmp_path
