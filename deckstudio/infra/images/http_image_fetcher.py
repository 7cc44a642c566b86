"""
Resolves image references (remote URLs and inline data URIs) into bytes.
"""

import base64
import binascii
from typing import Optional

import httpx

from deckstudio.application.ports import ImageFetcherPort
from deckstudio.domain.exceptions import ExternalServiceError, ValidationError
from deckstudio.infra.config.logging_config import get_logger


class HttpImageFetcher(ImageFetcherPort):
    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 30.0):
        self._client = client
        self._timeout = timeout
        self._log = get_logger("infra.image_fetcher")

    async def fetch(self, url: str) -> bytes:
        if url[:5].lower() == "data:":
            return self._decode_data_uri(url)
        if not url.lower().startswith(("http://", "https://")):
            raise ValidationError(f"Unsupported image reference: {url[:64]}")

        try:
            if self._client is not None:
                response = await self._client.get(url, follow_redirects=True)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._log.warning("image.fetch.failed", url=url, error=str(exc))
            raise ExternalServiceError(f"Failed to download image from {url}") from exc

        self._log.info("image.fetch", url=url, size=len(response.content))
        return response.content

    @staticmethod
    def _decode_data_uri(uri: str) -> bytes:
        header, sep, payload = uri.partition(",")
        header = header.lower()
        if not sep or not header.startswith("data:image/"):
            raise ValidationError("Malformed inline image data")
        if not header.endswith(";base64"):
            raise ValidationError("Inline image data must be base64 encoded")
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError("Malformed inline image data") from exc
