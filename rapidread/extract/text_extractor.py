from rapidread.errors import ExtractionError
from rapidread.extract.base import DocumentExtractor, ExtractedText


class PlainTextExtractor(DocumentExtractor):
    """Decodes UTF-8 text files. Plain text has no page count."""

    suffixes = (".txt", ".md", ".text")

    async def extract(self, data: bytes) -> ExtractedText:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8 text: {exc}") from exc
        return ExtractedText(text=text, unit_count=0)
