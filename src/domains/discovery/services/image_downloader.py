"""Downloads candidate logo images and checks type and size.

Rejections are returned as LogoCheck values rather than raised, so the
orchestrator can tell the three outcomes apart: accept, try the next
candidate, or stop because the logo is too large.
"""

from __future__ import annotations

from typing import Any

import requests
import structlog

from src.core.http_headers import extract_content_type, is_supported_image_type
from src.models.company_logo import LogoCheck, RejectionReason, ValidatedLogo
from src.services.page_fetcher import DEFAULT_TIMEOUT, build_session

logger = structlog.get_logger(__name__)

MAX_LOGO_BYTES = 2 * 1024 * 1024
CHUNK_SIZE = 64 * 1024


class ImageDownloader:
    """Fetches one image URL and validates it as a logo."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_logo_bytes: int = MAX_LOGO_BYTES,
    ) -> None:
        self.session = session if session is not None else build_session()
        self.timeout = timeout
        self.max_logo_bytes = max_logo_bytes

    def download_and_validate(self, url: str) -> LogoCheck:
        """Download an image and decide whether it is an acceptable logo.

        - transport failure: download_error (continue)
        - non-2xx status: fetch_failed (continue)
        - content type other than JPEG/PNG: unsupported_type (continue)
        - body of max_logo_bytes or more: too_large (halt)

        The body is streamed and reading stops once the limit is reached, so
        the size reported for a too_large rejection is the number of bytes
        read at that point, not the full length of the resource.
        """
        response = None
        try:
            response = self.session.get(
                url, timeout=self.timeout, allow_redirects=True, stream=True
            )
            status_code = response.status_code
            if not 200 <= status_code < 300:
                logger.debug("logo_fetch_failed", url=url, status_code=status_code)
                return LogoCheck.rejected(url, RejectionReason.FETCH_FAILED)

            content_type = extract_content_type(response.headers)
            if not is_supported_image_type(content_type):
                logger.debug("logo_unsupported_type", url=url, content_type=content_type)
                return LogoCheck.rejected(url, RejectionReason.UNSUPPORTED_TYPE)

            data = self._read_body(response)
        except Exception as exc:
            logger.warning("logo_download_error", url=url, error=str(exc))
            return LogoCheck.rejected(url, RejectionReason.DOWNLOAD_ERROR)
        finally:
            if response is not None:
                response.close()

        size = len(data)
        if size >= self.max_logo_bytes:
            logger.info("logo_too_large", url=url, size=size, limit=self.max_logo_bytes)
            return LogoCheck.rejected(url, RejectionReason.TOO_LARGE, size=size)

        logo = ValidatedLogo(url=url, size=size, content_type=content_type, data=data)
        logger.debug("logo_accepted", url=url, size=size, content_type=content_type)
        return LogoCheck.accepted(logo)

    def _read_body(self, response: Any) -> bytes:
        """Read the body in chunks, stopping once max_logo_bytes is reached."""
        chunks: list[bytes] = []
        size = 0
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            chunks.append(chunk)
            size += len(chunk)
            if size >= self.max_logo_bytes:
                break
        return b"".join(chunks)
