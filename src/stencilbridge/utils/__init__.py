"""Utility functions for stencilbridge.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics collection
"""

from stencilbridge.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
