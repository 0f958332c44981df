"""Logging utilities for Stencilbridge."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from a processing run."""

    shapes_count: int = 0
    contours_count: int = 0
    degenerate_count: int = 0
    islands_count: int = 0
    unresolved_count: int = 0
    bridges_count: int = 0
    step_timings_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("stencilbridge")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking pipeline steps and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_document_start(self, source: str, length: int) -> None:
        """Log start of document processing."""
        self._logger.debug("Processing document", source=source, length=length)

    def log_extraction(self, shapes: int, contours: int, degenerate: int, duration_ms: float) -> None:
        """Log path extraction results."""
        self._logger.debug(
            "Paths extracted",
            shapes=shapes,
            contours=contours,
            degenerate=degenerate,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.shapes_count = shapes
        self._stats.contours_count = contours
        self._stats.degenerate_count = degenerate
        self._stats.step_timings_ms["extract"] = duration_ms

    def log_classification(
        self,
        mode: str,
        islands: int,
        unresolved: int,
        duration_ms: float,
    ) -> None:
        """Log island classification results."""
        self._logger.info(
            "Islands classified",
            mode=mode,
            islands=islands,
            unresolved=unresolved,
            duration_ms=round(duration_ms, 3),
        )
        if unresolved:
            self._logger.warning("Islands without resolvable parent", count=unresolved)
        self._stats.islands_count = islands
        self._stats.unresolved_count = unresolved
        self._stats.step_timings_ms["classify"] = duration_ms

    def log_bridges(self, bridges: int, width: float, duration_ms: float) -> None:
        """Log bridge planning results."""
        self._logger.info(
            "Bridges planned",
            bridges=bridges,
            width=width,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.bridges_count = bridges
        self._stats.step_timings_ms["plan"] = duration_ms

    def log_composed(self, length: int, show_bridges: bool, duration_ms: float) -> None:
        """Log output composition."""
        self._logger.debug(
            "Document composed",
            length=length,
            show_bridges=show_bridges,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.step_timings_ms["compose"] = duration_ms

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
