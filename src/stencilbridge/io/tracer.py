"""Raster tracing through Pillow preprocessing and potrace.

This module turns a raster image into an SVG outline document:
1. Grayscale conversion, optional blur, threshold binarization and inversion
   with Pillow
2. Vectorization by the external ``potrace`` executable

The stencil core never calls this module; it only consumes the document text
that tracing produces.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path

import structlog
from PIL import Image, ImageFilter, ImageOps, UnidentifiedImageError

from stencilbridge.config import TraceConfig
from stencilbridge.exceptions import TracerNotFoundError, TracingError

logger = structlog.get_logger(__name__)


class RasterTracer:
    """Traces raster images into SVG outline documents.

    Example:
        tracer = RasterTracer(TraceConfig(threshold=150))
        document = tracer.trace(Path("logo.png"))
    """

    def __init__(self, config: TraceConfig | None = None) -> None:
        """Initialize the tracer.

        Args:
            config: Preprocessing and potrace settings
        """
        self.config = config or TraceConfig()

    def preprocess(self, image: Image.Image) -> Image.Image:
        """Binarize an image for tracing.

        Pixels at or above the threshold become white, the rest black.

        Args:
            image: Source image in any mode

        Returns:
            A 1-bit image
        """
        gray = image.convert("L")

        if self.config.blur > 0:
            gray = gray.filter(ImageFilter.GaussianBlur(self.config.blur))

        threshold = self.config.threshold
        binary = gray.point(lambda value: 255 if value >= threshold else 0)

        if self.config.invert:
            binary = ImageOps.invert(binary)

        return binary.convert("1", dither=Image.Dither.NONE)

    def build_command(self, bitmap_path: Path, output_path: Path) -> list[str]:
        """Build the potrace command line for one bitmap."""
        return [
            self.config.potrace_path,
            str(bitmap_path),
            "-s",
            "-t",
            str(self.config.turdsize),
            "-a",
            str(self.config.alphamax),
            "-O",
            str(self.config.opttolerance),
            "-o",
            str(output_path),
        ]

    def trace(self, image_path: Path) -> str:
        """Trace a raster image into an SVG document.

        Args:
            image_path: Path to a PNG/JPEG/WebP/GIF/BMP image

        Returns:
            SVG document text produced by potrace

        Raises:
            TracerNotFoundError: If potrace is not installed
            TracingError: If the image cannot be read or potrace fails
        """
        executable = shutil.which(self.config.potrace_path)
        if executable is None:
            raise TracerNotFoundError(self.config.potrace_path)

        try:
            with Image.open(image_path) as image:
                bitmap = self.preprocess(image)
        except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
            raise TracingError(str(image_path), f"cannot read image: {e}") from e

        logger.info(
            "Image preprocessed",
            image=str(image_path),
            size=bitmap.size,
            threshold=self.config.threshold,
            blur=self.config.blur,
            invert=self.config.invert,
        )

        with tempfile.TemporaryDirectory() as temp_dir:
            bitmap_path = Path(temp_dir) / "stencil_input.pbm"
            svg_path = Path(temp_dir) / "stencil_output.svg"
            bitmap.save(bitmap_path)

            cmd = self.build_command(bitmap_path, svg_path)
            try:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    timeout=self.config.timeout_seconds,
                )
            except subprocess.TimeoutExpired as e:
                raise TracingError(
                    str(image_path), f"potrace timed out after {self.config.timeout_seconds}s"
                ) from e

            if result.returncode != 0:
                stderr = result.stderr.decode("utf-8", errors="replace").strip()
                raise TracingError(
                    str(image_path), stderr or f"potrace exited with code {result.returncode}"
                )

            if not svg_path.exists():
                raise TracingError(str(image_path), "potrace produced no output")

            document = svg_path.read_text(encoding="utf-8", errors="replace")

        logger.info("Image traced", image=str(image_path), length=len(document))
        return document
