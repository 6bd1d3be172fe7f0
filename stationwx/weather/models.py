"""Weather report data models."""

import math
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from stationwx import config

# Sentinel for a ceiling or visibility that the report did not state
NOT_REPORTED = math.inf


@dataclass(frozen=True)
class ParsedConditions:
    """
    Ceiling and visibility extracted from one line of report text.

    A field the line does not contain is NOT_REPORTED (positive infinity),
    which satisfies any minima comparison.

    Attributes:
        ceiling: Lowest BKN/OVC/VV layer in feet
        vis_miles: Visibility in statute miles
        is_greater: True when visibility was reported with a "P" prefix (P6SM)
    """

    ceiling: float = NOT_REPORTED
    vis_miles: float = NOT_REPORTED
    is_greater: bool = False

    @property
    def has_ceiling(self) -> bool:
        return not math.isinf(self.ceiling)

    @property
    def has_visibility(self) -> bool:
        return not math.isinf(self.vis_miles)

    @property
    def has_data(self) -> bool:
        """True if the line reported a ceiling or a visibility."""
        return self.has_ceiling or self.has_visibility


def _clamp(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return number


@dataclass(frozen=True)
class Minima:
    """
    Operator minimum ceiling (ft) and visibility (SM) for dispatch.

    Example:
        minima = Minima(ceiling=500, vis=1)
    """

    ceiling: float = config.DEFAULT_MINIMA_CEILING_FT
    vis: float = config.DEFAULT_MINIMA_VIS_SM

    @classmethod
    def from_input(cls, ceiling: Any, vis: Any) -> 'Minima':
        """
        Build minima from user input, clamping negative, NaN and
        non-numeric values to 0.
        """
        return cls(ceiling=_clamp(ceiling), vis=_clamp(vis))

    def to_dict(self) -> dict:
        return {'ceiling': self.ceiling, 'vis': self.vis}

    @classmethod
    def from_dict(cls, data: dict) -> 'Minima':
        return cls.from_input(
            data.get('ceiling', config.DEFAULT_MINIMA_CEILING_FT),
            data.get('vis', config.DEFAULT_MINIMA_VIS_SM),
        )


@dataclass(frozen=True)
class MinimaProfile:
    """
    Global minima with optional per-station overrides.

    Profiles are immutable: the with_* methods return new profiles.
    Changing the default clears all overrides.
    """

    default: Minima = field(default_factory=Minima)
    overrides: Dict[str, Minima] = field(default_factory=dict)

    def for_station(self, icao: str) -> Minima:
        """Minima that apply to a station, falling back to the default."""
        return self.overrides.get(icao.upper(), self.default)

    def with_default(self, minima: Minima) -> 'MinimaProfile':
        return MinimaProfile(default=minima)

    def with_override(self, icao: str, minima: Minima) -> 'MinimaProfile':
        overrides = dict(self.overrides)
        overrides[icao.upper()] = minima
        return MinimaProfile(default=self.default, overrides=overrides)

    def without_override(self, icao: str) -> 'MinimaProfile':
        overrides = {k: v for k, v in self.overrides.items() if k != icao.upper()}
        return MinimaProfile(default=self.default, overrides=overrides)

    def to_dict(self) -> dict:
        return {
            'default': self.default.to_dict(),
            'overrides': {k: v.to_dict() for k, v in self.overrides.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'MinimaProfile':
        default = Minima.from_dict(data.get('default') or {})
        overrides = {
            icao.upper(): Minima.from_dict(value)
            for icao, value in (data.get('overrides') or {}).items()
        }
        return cls(default=default, overrides=overrides)


@dataclass
class WeatherData:
    """
    Raw METAR and TAF text for a station, as delivered by the fetch layer.

    Attributes:
        metar: Latest METAR text (empty if unavailable)
        taf: Latest TAF text (empty if unavailable)
        error: Fetch failure description, if the fetch failed
    """

    metar: str = ""
    taf: str = ""
    error: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def to_dict(self) -> dict:
        data = {'metar': self.metar, 'taf': self.taf}
        if self.error:
            data['error'] = self.error
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'WeatherData':
        return cls(
            metar=data.get('metar') or '',
            taf=data.get('taf') or '',
            error=data.get('error') or None,
        )


@dataclass(frozen=True)
class HighlightedLine:
    """One line of a highlighted report."""

    text: str
    conditions: ParsedConditions
    violation: bool = False


@dataclass
class HighlightResult:
    """
    Result of highlighting a multi-line report against minima.

    Attributes:
        html: Per-line <div> fragments separated by newlines, report text unescaped
        has_violations: True if any line is below minima
        lines: Per-line detail, in report order
    """

    html: str = ""
    has_violations: bool = False
    lines: List[HighlightedLine] = field(default_factory=list)

    @property
    def violations(self) -> List[HighlightedLine]:
        return [line for line in self.lines if line.violation]
