"""Quick technical analysis of raster input.

Reports size, transparency and a rough complexity tier derived from pixel
variance, with an island estimate for that tier. The estimate is a
heuristic shown before tracing; the actual island count comes from the
stencil pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from PIL import Image, ImageStat, UnidentifiedImageError

from stencilbridge.exceptions import DocumentLoadError

HIGH_COMPLEXITY_STDDEV = 80.0
MEDIUM_COMPLEXITY_STDDEV = 40.0


class Complexity(str, Enum):
    """Visual complexity tier of an image."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


ESTIMATED_ISLANDS: dict[Complexity, int] = {
    Complexity.LOW: 5,
    Complexity.MEDIUM: 15,
    Complexity.HIGH: 30,
}


@dataclass(frozen=True)
class ImageAnalysis:
    """Technical summary of a raster image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        has_transparency: True if the image carries an alpha channel
        mean_stddev: Mean of the per-band standard deviations
        complexity: Tier derived from mean_stddev
        estimated_islands: Rough island count for the tier
    """

    width: int
    height: int
    has_transparency: bool
    mean_stddev: float
    complexity: Complexity
    estimated_islands: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "has_transparency": self.has_transparency,
            "mean_stddev": self.mean_stddev,
            "complexity": self.complexity.value,
            "estimated_islands": self.estimated_islands,
        }


def complexity_for(mean_stddev: float) -> Complexity:
    """Map a mean band standard deviation to a complexity tier.

    Both thresholds are exclusive.

    Examples:
        >>> complexity_for(80.0).value
        'medium'
        >>> complexity_for(80.5).value
        'high'
    """
    if mean_stddev > HIGH_COMPLEXITY_STDDEV:
        return Complexity.HIGH
    if mean_stddev > MEDIUM_COMPLEXITY_STDDEV:
        return Complexity.MEDIUM
    return Complexity.LOW


def summarize_image(image: Image.Image) -> ImageAnalysis:
    """Analyze an opened image.

    Args:
        image: Image in any mode

    Returns:
        ImageAnalysis for the image
    """
    has_transparency = "A" in image.getbands() or "transparency" in image.info
    if image.mode not in ("L", "LA", "RGB", "RGBA"):
        image = image.convert("RGBA" if has_transparency else "RGB")

    stddev = ImageStat.Stat(image).stddev
    mean_stddev = sum(stddev) / len(stddev)
    complexity = complexity_for(mean_stddev)

    return ImageAnalysis(
        width=image.width,
        height=image.height,
        has_transparency=has_transparency,
        mean_stddev=mean_stddev,
        complexity=complexity,
        estimated_islands=ESTIMATED_ISLANDS[complexity],
    )


def analyze_image(image_path: Path) -> ImageAnalysis:
    """Analyze a raster image file.

    Args:
        image_path: Path to a PNG/JPEG/WebP/GIF/BMP image

    Returns:
        ImageAnalysis for the image

    Raises:
        DocumentLoadError: If the file cannot be read as an image
    """
    try:
        with Image.open(image_path) as image:
            return summarize_image(image)
    except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
        raise DocumentLoadError(str(image_path), f"cannot read image: {e}") from e
