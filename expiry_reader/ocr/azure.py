from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass

import requests
from dotenv import load_dotenv

from .base import OcrEngine, OcrRecognitionError, OcrUnavailableError, finish_text

logger = logging.getLogger(__name__)


@dataclass
class AzureVisionReadEngine(OcrEngine):
    """Azure AI Vision Read (v3.2) engine."""

    endpoint: str
    key: str
    language: str = "en"
    timeout_s: int = 60
    poll_interval_s: float = 0.7

    name: str = "azure"

    @classmethod
    def from_env(cls, *, language: str = "en", timeout_s: int = 60) -> "AzureVisionReadEngine":
        load_dotenv()
        endpoint = os.environ.get("AZURE_VISION_ENDPOINT", "").strip()
        key = os.environ.get("AZURE_VISION_KEY", "").strip()
        if not endpoint or not key:
            raise OcrUnavailableError(
                "Missing AZURE_VISION_ENDPOINT/AZURE_VISION_KEY (set env vars or create .env; see .env.example)"
            )
        return cls(endpoint=endpoint, key=key, language=language, timeout_s=int(timeout_s))

    def ocr_image_bytes(self, image_bytes: bytes) -> str:
        analyze_url = self.endpoint.rstrip("/") + "/vision/v3.2/read/analyze"
        headers = {
            "Ocp-Apim-Subscription-Key": self.key,
            "Content-Type": "application/octet-stream",
        }
        params = {"language": self.language}

        try:
            r = requests.post(analyze_url, headers=headers, params=params, data=image_bytes, timeout=30)
        except requests.RequestException as e:
            raise OcrUnavailableError(f"Azure endpoint unreachable: {e}") from e
        if r.status_code != 202:
            raise OcrRecognitionError(f"Azure analyze failed ({r.status_code}): {r.text}")

        op_loc = r.headers.get("Operation-Location")
        if not op_loc:
            raise OcrRecognitionError("Azure response missing Operation-Location header")
        logger.debug("Azure Read accepted %d bytes, polling %s", len(image_bytes), op_loc)

        deadline = time.time() + int(self.timeout_s)
        while time.time() < deadline:
            try:
                pr = requests.get(op_loc, headers={"Ocp-Apim-Subscription-Key": self.key}, timeout=30)
            except requests.RequestException as e:
                raise OcrUnavailableError(f"Azure poll failed: {e}") from e
            if pr.status_code != 200:
                raise OcrRecognitionError(f"Azure poll failed ({pr.status_code}): {pr.text}")
            j = pr.json()
            status = str(j.get("status", "")).lower()
            if status == "succeeded":
                analyze = j.get("analyzeResult") or {}
                lines_out: list[str] = []
                for page in analyze.get("readResults") or []:
                    for line in page.get("lines") or []:
                        lines_out.append(str(line.get("text") or ""))
                text = finish_text(lines_out)
                logger.info("Azure Read returned %d lines", len(text.splitlines()))
                return text
            if status == "failed":
                raise OcrRecognitionError(f"Azure Read failed: {j}")
            time.sleep(self.poll_interval_s)

        raise OcrRecognitionError("Azure Read timed out polling")
