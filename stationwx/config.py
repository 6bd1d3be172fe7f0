"""
Thresholds and defaults for report parsing and station classification.

Values that operators commonly tune can be overridden through environment
variables; everything else is a plain module constant.
"""

import os
import re
from datetime import timedelta


def _env_float(name: str, default: float) -> float:
    """Read a non-negative float from the environment, falling back to default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value != value or value < 0:
        return default
    return value


# Default dispatch minima
DEFAULT_MINIMA_CEILING_FT = _env_float("STATIONWX_MINIMA_CEILING_FT", 500.0)
DEFAULT_MINIMA_VIS_SM = _env_float("STATIONWX_MINIMA_VIS_SM", 1.0)

# Advisory windows
PIREP_MAX_AGE = timedelta(hours=12)
SIGMET_LOOKBACK = timedelta(hours=12)
SIGMET_DEFAULT_DURATION = timedelta(hours=6)
SIGMET_DEFAULT_ALTITUDE_MIN_FT = 0
SIGMET_DEFAULT_ALTITUDE_MAX_FT = 60000

# Station status thresholds (strictly-below comparisons)
CRITICAL_VIS_SM = 0.5
CRITICAL_CEILING_FT = 100
CAUTION_VIS_SM = 1.0
CAUTION_CEILING_FT = 200

# Station identifiers
ICAO_PATTERN = re.compile(r'^[A-Z0-9]{4}$')
