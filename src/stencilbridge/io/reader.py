"""Document reader for loading outline documents.

This module provides the DocumentReader class for loading SVG outline
documents from disk.
"""

from pathlib import Path

RASTER_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp"})


def is_raster(path: Path) -> bool:
    """Check if a path names a raster image that must be traced first."""
    return path.suffix.lower() in RASTER_SUFFIXES


class DocumentReader:
    """Loads SVG outline documents.

    Example:
        reader = DocumentReader(Path("logo.svg"))
        document = reader.load()
    """

    def __init__(self, document_path: Path) -> None:
        """Initialize the document reader.

        Args:
            document_path: Path to the SVG document
        """
        self._document_path = document_path

    def load(self) -> str:
        """Load the document text.

        Returns:
            The document text

        Raises:
            FileNotFoundError: If the document does not exist
            OSError: If the document cannot be read
        """
        if not self._document_path.exists():
            raise FileNotFoundError(f"Document not found: {self._document_path}")

        return self._document_path.read_text(encoding="utf-8", errors="replace")
