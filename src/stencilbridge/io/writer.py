"""Document writer for saving stencil documents.

This module provides the DocumentWriter class for writing composed stencil
documents with the stencil naming convention.
"""

from pathlib import Path

from stencilbridge.exceptions import DocumentSaveError

STENCIL_SUFFIX = "_stencil"


class DocumentWriter:
    """Writes stencil documents to disk.

    Example:
        writer = DocumentWriter(Path("logo_stencil.svg"))
        writer.save(document)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the document writer.

        Args:
            output_path: Where the document is written
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, document: str) -> Path:
        """Write the document, creating parent directories as needed.

        Args:
            document: Complete document text

        Returns:
            The output path

        Raises:
            DocumentSaveError: If the document cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_stencil_path(input_path: Path) -> Path:
        """Generate the default output path for an input file.

        "logo.png" and "logo.svg" both become "logo_stencil.svg".

        Args:
            input_path: Original input path

        Returns:
            Output path in the same directory
        """
        return input_path.with_name(f"{input_path.stem}{STENCIL_SUFFIX}.svg")
