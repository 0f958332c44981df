"""Exception hierarchy for Stencilbridge.

The core pipeline (extraction, classification, planning, composition) never
raises on malformed content. These exceptions are raised only at the edges:
reading and writing documents, tracing raster images, and validating options.
"""


class StencilBridgeError(Exception):
    """Base exception for all Stencilbridge errors."""

    pass


class DocumentError(StencilBridgeError):
    """Errors related to loading or saving outline documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading an outline document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving an outline document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class TracerError(StencilBridgeError):
    """Errors related to raster tracing."""

    pass


class TracerNotFoundError(TracerError):
    """The tracing executable could not be found."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"Tracer '{executable}' not found. Install it with: sudo apt install potrace"
        )


class TracingError(TracerError):
    """The tracer ran but did not produce a usable document."""

    def __init__(self, image_path: str, reason: str) -> None:
        self.image_path = image_path
        self.reason = reason
        super().__init__(f"Tracing failed for '{image_path}': {reason}")


class InvalidOptionError(StencilBridgeError):
    """An option value is outside its accepted set."""

    def __init__(self, option: str, value: str, valid: list[str]) -> None:
        self.option = option
        self.value = value
        self.valid = valid
        super().__init__(
            f"Invalid value '{value}' for {option}. Valid values: {', '.join(valid)}"
        )
