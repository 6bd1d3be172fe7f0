"""
Weather module for reading ceiling and visibility out of METAR/TAF text.

Provides:
- ParsedConditions: Ceiling/visibility of one report line
- Minima / MinimaProfile: Operator minima, global and per station
- WeatherData: Raw METAR/TAF text and fetch error of a station
- ReportLineParser: Regex extraction of ceiling and visibility groups
- meets_minima: Minima comparison
- TextHighlighter: Per-line minima highlighting for display

Example:
    from stationwx.weather import Minima, ReportLineParser, meets_minima

    conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT P6SM OVC020")
    print(meets_minima(conditions, Minima(ceiling=500, vis=3)))  # True
"""

from stationwx.weather.models import (
    ParsedConditions,
    Minima,
    MinimaProfile,
    WeatherData,
    HighlightedLine,
    HighlightResult,
    NOT_REPORTED,
)
from stationwx.weather.parser import ReportLineParser, parse_line
from stationwx.weather.minima import meets_minima
from stationwx.weather.highlight import TextHighlighter, highlight

__all__ = [
    'ParsedConditions',
    'Minima',
    'MinimaProfile',
    'WeatherData',
    'HighlightedLine',
    'HighlightResult',
    'NOT_REPORTED',
    'ReportLineParser',
    'parse_line',
    'meets_minima',
    'TextHighlighter',
    'highlight',
]
