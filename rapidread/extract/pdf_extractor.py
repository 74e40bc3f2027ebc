import asyncio
import io
import logging

from rapidread.errors import ExtractionError
from rapidread.extract.base import DocumentExtractor, ExtractedText

logger = logging.getLogger(__name__)


class PdfExtractor(DocumentExtractor):
    """Extracts page text from PDF bytes with pypdf."""

    suffixes = (".pdf",)

    async def extract(self, data: bytes) -> ExtractedText:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._extract_sync, data)

    def _extract_sync(self, data: bytes) -> ExtractedText:
        """Synchronous parse (runs in thread pool)."""
        from pypdf import PdfReader

        try:
            reader = PdfReader(io.BytesIO(data))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as exc:
            logger.error("PDF parsing failed: %s", exc)
            raise ExtractionError(f"Could not read PDF: {exc}") from exc

        text = " ".join(pages).strip()
        if not text:
            raise ExtractionError(
                "PDF has no extractable text. It may be a scanned document "
                "or contain only images."
            )
        logger.debug("Extracted %d characters from %d pages", len(text), len(pages))
        return ExtractedText(text=text, unit_count=len(pages))
