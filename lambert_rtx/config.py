"""Default settings, overridable through environment variables."""

import os
from pathlib import Path

LOG_LEVEL = os.getenv("LAMBERT_RTX_LOG_LEVEL", "INFO")
OUTPUT_DIR = Path(os.getenv("LAMBERT_RTX_OUTPUT_DIR", "output"))

# Image settings used when neither the scene file nor the CLI gives one
WIDTH = int(os.getenv("LAMBERT_RTX_WIDTH", "800"))
HEIGHT = int(os.getenv("LAMBERT_RTX_HEIGHT", "600"))
FOV = float(os.getenv("LAMBERT_RTX_FOV", "90.0"))

__all__ = [
    "LOG_LEVEL",
    "OUTPUT_DIR",
    "WIDTH",
    "HEIGHT",
    "FOV",
]
