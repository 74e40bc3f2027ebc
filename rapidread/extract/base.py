from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedText:
    text: str
    unit_count: int = 0


class DocumentExtractor(ABC):
    """Abstract document-to-text backend."""

    suffixes: tuple[str, ...] = ()

    def supports(self, filename: str) -> bool:
        return filename.lower().endswith(self.suffixes)

    @abstractmethod
    async def extract(self, data: bytes) -> ExtractedText:
        """Return the plain text of a document. Raises ExtractionError."""
        ...
