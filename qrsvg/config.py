"""Configuration management."""

import os


# Layout Configuration
QUIET_ZONE_SIZE = os.getenv("QRSVG_QUIET_ZONE", "4")

# Encoder Configuration
ERROR_CORRECTION = os.getenv("QRSVG_ERROR_CORRECTION", "L")

# Render Sink Configuration
SVG_PROFILE = os.getenv("QRSVG_SVG_PROFILE", "full")
FILL_COLOR = os.getenv("QRSVG_FILL_COLOR", "#000000")
BACK_COLOR = os.getenv("QRSVG_BACK_COLOR", "#ffffff")

# Logging Configuration
LOG_LEVEL = os.getenv("QRSVG_LOG_LEVEL", "info")
