"""Station operational status models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List

from stationwx.weather.models import WeatherData
from stationwx.advisories.models import Pirep, Sigmet


class OperationalStatus(Enum):
    """
    Operational risk level of a station.

    Ordered from best to worst: NORMAL < CAUTION < CRITICAL, so the worst
    of several signals is their max().
    """

    NORMAL = "NORMAL"
    CAUTION = "CAUTION"
    CRITICAL = "CRITICAL"

    @property
    def order(self) -> int:
        """Numeric ordering from best (0) to worst (2)."""
        return _STATUS_ORDER[self]

    def __lt__(self, other: 'OperationalStatus') -> bool:
        if not isinstance(other, OperationalStatus):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'OperationalStatus') -> bool:
        if not isinstance(other, OperationalStatus):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'OperationalStatus') -> bool:
        if not isinstance(other, OperationalStatus):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'OperationalStatus') -> bool:
        if not isinstance(other, OperationalStatus):
            return NotImplemented
        return self.order >= other.order


_STATUS_ORDER = {
    OperationalStatus.NORMAL: 0,
    OperationalStatus.CAUTION: 1,
    OperationalStatus.CRITICAL: 2,
}


@dataclass(frozen=True)
class StationStatus:
    """
    Weather picture and operational status of one station.

    Built in one go on every refresh; never updated in place.

    Attributes:
        icao: Station ICAO code
        name: Display name
        metar: Raw METAR/TAF text and fetch error
        pireps: Pilot reports near the station
        sigmets: SIGMET/AIRMET advisories affecting the station
        operational_status: Classified risk level
        last_updated: Time the status was built
    """

    icao: str
    name: str = ""
    metar: WeatherData = field(default_factory=WeatherData)
    pireps: List[Pirep] = field(default_factory=list)
    sigmets: List[Sigmet] = field(default_factory=list)
    operational_status: OperationalStatus = OperationalStatus.NORMAL
    last_updated: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'icao': self.icao,
            'name': self.name,
            'metar': self.metar.to_dict(),
            'pireps': [p.to_dict() for p in self.pireps],
            'sigmets': [s.to_dict() for s in self.sigmets],
            'operational_status': self.operational_status.value,
            'last_updated': self.last_updated.isoformat() if self.last_updated else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StationStatus':
        """Create StationStatus from dictionary."""
        last_updated = None
        if data.get('last_updated'):
            last_updated = datetime.fromisoformat(data['last_updated'])

        status = OperationalStatus.NORMAL
        if data.get('operational_status'):
            try:
                status = OperationalStatus(data['operational_status'])
            except ValueError:
                pass

        return cls(
            icao=data.get('icao', ''),
            name=data.get('name', ''),
            metar=WeatherData.from_dict(data.get('metar') or {}),
            pireps=[Pirep.from_dict(p) for p in data.get('pireps', [])],
            sigmets=[Sigmet.from_dict(s) for s in data.get('sigmets', [])],
            operational_status=status,
            last_updated=last_updated,
        )

    def __repr__(self) -> str:
        return f"StationStatus({self.icao} {self.operational_status.value})"


@dataclass(frozen=True)
class StationOverview:
    """Counts across a set of monitored stations."""

    total_stations: int = 0
    normal: int = 0
    caution: int = 0
    critical: int = 0
    active_pireps: int = 0
    active_sigmets: int = 0
    expired_sigmets: int = 0

    def to_dict(self) -> dict:
        return {
            'total_stations': self.total_stations,
            'normal': self.normal,
            'caution': self.caution,
            'critical': self.critical,
            'active_pireps': self.active_pireps,
            'active_sigmets': self.active_sigmets,
            'expired_sigmets': self.expired_sigmets,
        }
