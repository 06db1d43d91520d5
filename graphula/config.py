"""
Configuration constants for graphula.

Storage types, sentinels and logging settings are defined here.
Values that can be tuned per deployment are read from environment
variables (a local .env file is honored).
"""

import logging
import os

import numpy as np
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Storage Configuration
# =============================================================================

# numpy dtype backing every Row
WEIGHT_DTYPE = "int64"

# Value new cells are filled with when no filler is given (no edge)
DEFAULT_FILLER = 0

# =============================================================================
# Shortest Path Configuration
# =============================================================================

# Tentative distance of a node that has not been reached yet.
# Relaxed sums are computed with Python ints, so anything that reaches
# this value is still treated as unreachable rather than wrapping.
DIST_INFINITY = int(np.iinfo(WEIGHT_DTYPE).max)

# =============================================================================
# Display Configuration
# =============================================================================

# Rendered in place of rows when a matrix has no nodes
EMPTY_MATRIX_TEXT = "Matrix is empty!"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
# DEBUG shows the BFS frontier trace
LOG_LEVEL = os.environ.get("GRAPHULA_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for scripts and notebooks using graphula."""
    logging.basicConfig(
        level=level if level is not None else LOG_LEVEL,
        format=LOG_FORMAT,
    )
