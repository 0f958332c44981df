"""Configuration management for stencilbridge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BridgeConfig: Bridge planning settings (tiers, offset, unit scale)
- CanvasConfig: Fallback canvas description
- RenderConfig: Output document styling
- TraceConfig: Raster preprocessing and potrace settings
- ClassifierConfig: Island classification strategy
- LoggingConfig: Logging settings
- StencilBridgeSettings: Main application settings
"""

from stencilbridge.config.settings import (
    BridgeConfig,
    CanvasConfig,
    ClassificationMode,
    ClassifierConfig,
    LoggingConfig,
    RenderConfig,
    StencilBridgeSettings,
    TraceConfig,
)

__all__ = [
    "BridgeConfig",
    "CanvasConfig",
    "ClassificationMode",
    "ClassifierConfig",
    "LoggingConfig",
    "RenderConfig",
    "StencilBridgeSettings",
    "TraceConfig",
]
