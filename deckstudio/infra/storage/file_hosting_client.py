"""
HTTP client for the third-party file hosting service.

The service accepts a multipart upload and answers with JSON carrying the
permanent URL of the stored file, under ``url`` or ``data.url``.
"""

from typing import Optional

import httpx

from deckstudio.application.ports import FileHostingPort
from deckstudio.domain.exceptions import ExternalServiceError
from deckstudio.infra.config.logging_config import get_logger


class FileHostingClient(FileHostingPort):
    def __init__(
        self,
        upload_url: str,
        api_key: str = "",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.upload_url = upload_url
        self.api_key = api_key
        self.timeout = timeout
        self._client = client
        self._log = get_logger("infra.file_hosting")

    async def upload_file(self, data: bytes, filename: str) -> str:
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        files = {"file": (filename, data, "application/octet-stream")}

        try:
            if self._client is not None:
                response = await self._client.post(
                    self.upload_url, files=files, headers=headers
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        self.upload_url, files=files, headers=headers
                    )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self._log.warning("file_hosting.upload.failed", filename=filename, error=str(exc))
            raise ExternalServiceError("Failed to upload file to file hosting") from exc

        url = payload.get("url") or (payload.get("data") or {}).get("url")
        if not url:
            self._log.warning("file_hosting.upload.no_url", filename=filename)
            raise ExternalServiceError("Failed to upload file to file hosting")

        self._log.info("file_hosting.upload", filename=filename, url=url)
        return url
