"""Configuration settings for Stencilbridge."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ClassificationMode(str, Enum):
    """Strategy for deciding which sub-paths are islands."""

    AUTO = "auto"
    GROUPED = "grouped"
    CONTAINMENT = "containment"


class BridgeConfig(BaseModel):
    """Configuration for bridge planning.

    The numeric defaults are calibration constants carried over from observed
    laser-cutting output. They are not derived from material physics.
    """

    width_mm: float = Field(
        default=2.0,
        gt=0.0,
        le=50.0,
        description="Physical bridge width in millimeters",
    )
    unit_scale: float = Field(
        default=10.0,
        gt=0.0,
        description="Document units per millimeter",
    )
    offset: float = Field(
        default=30.0,
        ge=0.0,
        description="Distance a bridge extends beyond the island edge (document units)",
    )
    large_area: float = Field(
        default=1000.0,
        ge=0.0,
        description="Islands with a larger bounding-box area get large_count bridges",
    )
    medium_area: float = Field(
        default=500.0,
        ge=0.0,
        description="Islands with a larger bounding-box area get medium_count bridges",
    )
    large_count: int = Field(default=4, ge=1, le=4)
    medium_count: int = Field(default=3, ge=1, le=4)
    small_count: int = Field(default=2, ge=1, le=4)

    def document_width(self, width_mm: float | None = None) -> float:
        """Convert a physical bridge width to document units.

        Args:
            width_mm: Width in millimeters (defaults to the configured width)

        Returns:
            Bridge stroke thickness in document units
        """
        if width_mm is None:
            width_mm = self.width_mm
        return width_mm * self.unit_scale


class CanvasConfig(BaseModel):
    """Fallback canvas description used when a document omits its own."""

    default_width: float = Field(
        default=500.0,
        gt=0.0,
        description="Canvas width used for clamping when the document has none",
    )
    default_height: float = Field(
        default=500.0,
        gt=0.0,
        description="Canvas height used for clamping when the document has none",
    )
    default_view_box: str = Field(
        default="0 0 100 100",
        description="viewBox written to the output when the input has none",
    )
    default_size_text: str = Field(
        default="100",
        description="width/height written to the output when the input has none",
    )


# Hex, named and functional CSS colors; no characters that end a value or a rule.
COLOR_PATTERN = r"^[#A-Za-z0-9(),.% -]+$"


class RenderConfig(BaseModel):
    """Configuration for the output document."""

    show_bridges: bool = Field(
        default=True,
        description="Emit the bridges layer",
    )
    bridge_color: str = Field(
        default="#FFFFFF",
        pattern=COLOR_PATTERN,
        description="Fill of bridge rectangles (the material color)",
    )
    path_color: str = Field(
        default="#000000",
        pattern=COLOR_PATTERN,
        description="Fill of stencil paths (the cut color)",
    )


class TraceConfig(BaseModel):
    """Configuration for raster preprocessing and tracing."""

    threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Binarization threshold",
    )
    blur: float = Field(
        default=0.0,
        ge=0.0,
        le=10.0,
        description="Gaussian blur radius applied before thresholding",
    )
    invert: bool = Field(
        default=False,
        description="Swap black and white after thresholding",
    )
    turdsize: int = Field(
        default=5,
        ge=0,
        description="Suppress speckles up to this many pixels",
    )
    alphamax: float = Field(
        default=1.0,
        ge=0.0,
        le=1.34,
        description="Corner smoothing threshold",
    )
    opttolerance: float = Field(
        default=0.2,
        ge=0.0,
        description="Curve optimization tolerance",
    )
    potrace_path: str = Field(
        default="potrace",
        description="Name or path of the potrace executable",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        description="Maximum time allowed for one tracing run",
    )


class ClassifierConfig(BaseModel):
    """Configuration for island classification."""

    mode: ClassificationMode = Field(
        default=ClassificationMode.AUTO,
        description="Island classification strategy",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StencilBridgeSettings(BaseModel):
    """Main application settings."""

    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    trace: TraceConfig = Field(default_factory=TraceConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
