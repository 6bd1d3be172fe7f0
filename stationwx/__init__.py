"""
Aviation weather report parsing and station status classification.

This package turns raw METAR/TAF text and provider PIREP/SIGMET payloads into
structured records, checks them against operator minima and classifies the
operational risk of each station.

The main public API includes:
- ReportLineParser / meets_minima / TextHighlighter: METAR/TAF text vs minima
- AdvisoryExtractor: PIREP and SIGMET payload normalization
- StationStatusClassifier: NORMAL/CAUTION/CRITICAL station classification
- InvalidStationError: Raised for identifiers that are not ICAO codes
"""

from stationwx.validation import StationWxError, InvalidStationError
from stationwx.weather import (
    ParsedConditions,
    Minima,
    MinimaProfile,
    WeatherData,
    ReportLineParser,
    meets_minima,
    TextHighlighter,
)
from stationwx.advisories import AdvisoryExtractor, Pirep, Sigmet
from stationwx.status import (
    OperationalStatus,
    StationStatus,
    StationStatusClassifier,
    StationStatusCollection,
)

__version__ = '0.1.0'
__all__ = [
    'StationWxError',
    'InvalidStationError',
    'ParsedConditions',
    'Minima',
    'MinimaProfile',
    'WeatherData',
    'ReportLineParser',
    'meets_minima',
    'TextHighlighter',
    'AdvisoryExtractor',
    'Pirep',
    'Sigmet',
    'OperationalStatus',
    'StationStatus',
    'StationStatusClassifier',
    'StationStatusCollection',
]
