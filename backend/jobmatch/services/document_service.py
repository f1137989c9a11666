"""
Document Service — fetch resume documents and extract plain text.

Responsibilities:
  • GET the stored resume URI with httpx (timeout + bounded retry)
  • Extract raw text from PDF (pdfplumber, page by page) or DOCX (python-docx)
  • Clean up extracted text
"""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from typing import Iterator

import docx
import httpx
import pdfplumber

from jobmatch.config import Settings
from jobmatch.errors import FetchError
from jobmatch.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_CONTENT_TYPE = "application/pdf"
_ZIP_MAGIC = b"PK\x03\x04"

# Statuses worth another attempt; everything else non-2xx fails immediately
_RETRYABLE_STATUSES = {429, 500, 502, 503, 504}


class DocumentTextExtractor:
    """Fetches binary documents by URL and returns their text."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        retries: int = 0,
        backoff: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._retries = retries
        self._backoff = backoff
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentTextExtractor":
        return cls(
            timeout=settings.document_fetch_timeout_seconds,
            retries=settings.document_fetch_retries,
            backoff=settings.document_fetch_backoff_seconds,
        )

    # ── Public API ───────────────────────────────────────────────────────

    async def extract_text_from_url(self, url: str | None) -> str:
        """
        Fetch `url` and return the document's text, whitespace-trimmed.

        An empty/absent URL returns "" (no resume available) without any
        network call.

        Raises:
            FetchError: unreachable resource, timeout, non-success status,
                or an undecodable payload.
        """
        if not url or not url.strip():
            logger.warning("Resume URL is empty.")
            return ""

        response = await self._fetch(url.strip())
        try:
            return await extract_text_off_loop(
                response.content,
                file_name=url,
                content_type=response.headers.get("content-type"),
            )
        except Exception as e:
            logger.error(f"Error extracting text from {url}: {e}")
            raise FetchError(f"Could not read document at {url}: {e}", url=url) from e

    # ── Fetching ─────────────────────────────────────────────────────────

    async def _fetch(self, url: str) -> httpx.Response:
        attempt = 0
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            while True:
                try:
                    resp = await client.get(url)
                except httpx.HTTPError as e:
                    if attempt < self._retries:
                        attempt += 1
                        await self._sleep(attempt, url, str(e))
                        continue
                    logger.error(f"Failed to fetch document from {url}: {e}")
                    raise FetchError(f"Failed to fetch document from {url}: {e}", url=url) from e

                if resp.is_success:
                    return resp

                if resp.status_code in _RETRYABLE_STATUSES and attempt < self._retries:
                    attempt += 1
                    await self._sleep(attempt, url, f"HTTP {resp.status_code}")
                    continue

                logger.error(f"Failed to fetch document from {url}: HTTP {resp.status_code}")
                raise FetchError(
                    f"Failed to fetch document from {url}: HTTP {resp.status_code}",
                    url=url,
                    status_code=resp.status_code,
                )

    async def _sleep(self, attempt: int, url: str, reason: str) -> None:
        delay = self._backoff * (2 ** (attempt - 1))
        logger.warning(f"Retrying {url} in {delay:.2f}s (attempt {attempt}/{self._retries}): {reason}")
        await asyncio.sleep(delay)


# ── Text Extraction ──────────────────────────────────────────────────────────


async def extract_text_off_loop(
    data: bytes,
    *,
    file_name: str | None = None,
    content_type: str | None = None,
) -> str:
    """Run extract_text_from_bytes in a worker thread; PDF parsing is CPU-bound."""
    return await asyncio.to_thread(
        extract_text_from_bytes, data, file_name=file_name, content_type=content_type
    )


def extract_text_from_bytes(
    data: bytes,
    *,
    file_name: str | None = None,
    content_type: str | None = None,
) -> str:
    """Extract text from an in-memory document. PDF unless it looks like DOCX."""
    if not data:
        return ""
    reader = _extract_docx_text if _looks_like_docx(data, file_name, content_type) else _extract_pdf_text
    return normalize_text(reader(data))


def _looks_like_docx(data: bytes, file_name: str | None, content_type: str | None) -> bool:
    """
    Decide the format from the content-type, then the URL/file suffix, then the
    payload itself (DOCX is a zip archive, PDF starts with %PDF).
    """
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime == DOCX_CONTENT_TYPE:
            return True
        if mime == PDF_CONTENT_TYPE:
            return False
    if file_name:
        path = file_name.split("?", 1)[0].lower()
        if path.endswith(".docx"):
            return True
        if path.endswith(".pdf"):
            return False
    return data.startswith(_ZIP_MAGIC)


def _extract_pdf_text(data: bytes) -> str:
    with pdfplumber.open(BytesIO(data)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(page for page in pages if page.strip())


def _docx_blocks(document) -> Iterator[str]:
    yield from (para.text for para in document.paragraphs)

    # Layout tables; a merged cell is reported once per spanned column
    seen_cells = set()
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell._tc in seen_cells:
                    continue
                seen_cells.add(cell._tc)
                yield cell.text


def _extract_docx_text(data: bytes) -> str:
    document = docx.Document(BytesIO(data))
    return "\n".join(block.strip() for block in _docx_blocks(document) if block.strip())
