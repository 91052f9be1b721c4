from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from platecraft.shared.config.settings import Settings, settings as default_settings

log = logging.getLogger("vertex_imagen")

_ENDPOINT = (
    "https://{location}-aiplatform.googleapis.com/v1/projects/{project}"
    "/locations/{location}/publishers/{publisher}/models/{model}:predict"
)


class ImagenError(RuntimeError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.details = details if details is not None else message


def predict_url(project_id: str, cfg: Settings = default_settings) -> str:
    return _ENDPOINT.format(
        location=cfg.VERTEX_LOCATION,
        project=project_id,
        publisher=cfg.VERTEX_PUBLISHER,
        model=cfg.IMAGEN_MODEL,
    )


def build_request_body(prompt: str, cfg: Settings = default_settings) -> Dict[str, Any]:
    return {
        "instances": [{"prompt": prompt}],
        "parameters": {
            "sampleCount": cfg.IMAGEN_SAMPLE_COUNT,
            "aspectRatio": cfg.IMAGEN_ASPECT_RATIO,
            "safetyFilterLevel": cfg.IMAGEN_SAFETY_FILTER_LEVEL,
            "personGeneration": cfg.IMAGEN_PERSON_GENERATION,
        },
    }


def extract_image_base64(data: Any) -> str:
    preds = (data or {}).get("predictions") if isinstance(data, dict) else None
    first = preds[0] if isinstance(preds, list) and preds else None
    b64 = first.get("bytesBase64Encoded") if isinstance(first, dict) else None
    if not b64:
        log.error("No image data in response: %s", data)
        raise ImagenError("No image data received from Vertex AI", details=data)
    return b64


def to_data_url(image_b64: str, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{image_b64}"


def _error_from_response(resp: httpx.Response) -> ImagenError:
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    err = body.get("error") if isinstance(body, dict) else None
    message = err.get("message") if isinstance(err, dict) else None
    return ImagenError(message or f"Vertex AI returned HTTP {resp.status_code}", details=body)


class ImagenClient:
    """
    Thin async client for the Vertex AI Imagen :predict endpoint.

    `credentials` must expose project_id() and access_token(); both are
    blocking, so they run in a worker thread. Concurrent requests through one
    client are capped at cfg.IMAGEN_MAX_CONCURRENCY.
    """

    def __init__(
        self,
        credentials,
        *,
        cfg: Settings = default_settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials
        self.cfg = cfg
        self._transport = transport
        self._semaphore = asyncio.Semaphore(cfg.IMAGEN_MAX_CONCURRENCY)

    async def predict(self, prompt: str) -> str:
        """Generate one image for `prompt` and return it as base64 PNG."""
        token = await asyncio.to_thread(self.credentials.access_token)
        project_id = await asyncio.to_thread(self.credentials.project_id)
        url = predict_url(project_id, self.cfg)
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        timeout = httpx.Timeout(self.cfg.IMAGEN_REQUEST_TIMEOUT)

        log.info("Making request to Vertex AI (model=%s)", self.cfg.IMAGEN_MODEL)
        async with self._semaphore:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                try:
                    resp = await client.post(url, headers=headers, json=build_request_body(prompt, self.cfg))
                except httpx.HTTPError as e:
                    raise ImagenError(f"Vertex AI request failed: {e}") from e

        if resp.is_error:
            raise _error_from_response(resp)
        log.info("Received response from Vertex AI")
        try:
            data = resp.json()
        except ValueError as e:
            raise ImagenError("Vertex AI returned a non-JSON response", details=resp.text) from e
        return extract_image_base64(data)
