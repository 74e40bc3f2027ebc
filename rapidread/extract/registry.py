from rapidread.errors import ExtractionError
from rapidread.extract.base import DocumentExtractor
from rapidread.extract.pdf_extractor import PdfExtractor
from rapidread.extract.text_extractor import PlainTextExtractor

EXTRACTORS: list[DocumentExtractor] = [PdfExtractor(), PlainTextExtractor()]


def extractor_for(filename: str) -> DocumentExtractor:
    """Pick the extractor that handles a file by its suffix."""
    for extractor in EXTRACTORS:
        if extractor.supports(filename):
            return extractor
    raise ExtractionError(
        f"Unsupported file type: {filename}. Use a PDF or a plain text file."
    )
