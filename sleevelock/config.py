"""Configuration: environment variables and path resolution."""
import os
from pathlib import Path

# Paths
PACKAGE_DIR = Path(__file__).resolve().parent
OUT_DIR = Path(os.environ.get("SLEEVELOCK_OUT_DIR", Path.cwd() / "out"))

# Logging
LOG_LEVEL = os.environ.get("SLEEVELOCK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Export
EXPORT_FORMATS = [
    f.strip().lower()
    for f in os.environ.get("SLEEVELOCK_FORMATS", "stl").split(",")
    if f.strip()
]
STL_TOLERANCE = float(os.environ.get("SLEEVELOCK_TOLERANCE", "0.05"))  # [mm]

# Layout
LAYOUT_SPACING = float(os.environ.get("SLEEVELOCK_SPACING", "5.0"))  # [mm] gap between parts
