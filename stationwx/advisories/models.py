"""PIREP and SIGMET/AIRMET data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional


class TurbulenceIntensity(Enum):
    """Turbulence intensity reported by a pilot."""

    NONE = "NONE"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"


class IcingIntensity(Enum):
    """Icing intensity reported by a pilot."""

    NONE = "NONE"
    TRACE = "TRACE"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"


class AdvisoryType(Enum):
    SIGMET = "SIGMET"
    AIRMET = "AIRMET"


class HazardType(Enum):
    """Hazard covered by a SIGMET/AIRMET."""

    TURB = "TURB"               # Turbulence
    ICE = "ICE"                 # Icing
    IFR = "IFR"                 # Low ceiling / visibility
    MT_OBSC = "MT_OBSC"         # Mountain obscuration
    CONVECTIVE = "CONVECTIVE"   # Thunderstorms


class Severity(Enum):
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"


@dataclass(frozen=True)
class Location:
    lat: float = 0.0
    lon: float = 0.0


@dataclass(frozen=True)
class Pirep:
    """
    Pilot report of turbulence and icing.

    is_expired is derived when the report is built (older than 12 hours at
    that time) and stored, not recomputed.

    Attributes:
        id: Report identifier
        icao: Station the report was requested for
        aircraft: Aircraft type
        altitude: Altitude in feet
        turbulence: Reported turbulence intensity
        icing: Reported icing intensity
        timestamp: Observation time (UTC)
        raw_report: Original report text
        location: Position of the report
        is_expired: True if older than the PIREP window when built
    """

    id: str
    icao: str
    aircraft: str = "UNKNOWN"
    altitude: int = 0
    turbulence: TurbulenceIntensity = TurbulenceIntensity.NONE
    icing: IcingIntensity = IcingIntensity.NONE
    timestamp: Optional[datetime] = None
    raw_report: str = ""
    location: Location = field(default_factory=Location)
    is_expired: bool = False

    @property
    def is_severe(self) -> bool:
        """Severe turbulence or severe icing."""
        return (
            self.turbulence == TurbulenceIntensity.SEVERE
            or self.icing == IcingIntensity.SEVERE
        )

    @property
    def is_moderate(self) -> bool:
        """Moderate turbulence or moderate icing."""
        return (
            self.turbulence == TurbulenceIntensity.MODERATE
            or self.icing == IcingIntensity.MODERATE
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'icao': self.icao,
            'aircraft': self.aircraft,
            'altitude': self.altitude,
            'turbulence': self.turbulence.value,
            'icing': self.icing.value,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'raw_report': self.raw_report,
            'location': {'lat': self.location.lat, 'lon': self.location.lon},
            'is_expired': self.is_expired,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Pirep':
        timestamp = None
        if data.get('timestamp'):
            timestamp = datetime.fromisoformat(data['timestamp'])
        location = data.get('location') or {}
        return cls(
            id=data.get('id', ''),
            icao=data.get('icao', ''),
            aircraft=data.get('aircraft', 'UNKNOWN'),
            altitude=data.get('altitude', 0),
            turbulence=TurbulenceIntensity(data.get('turbulence', 'NONE')),
            icing=IcingIntensity(data.get('icing', 'NONE')),
            timestamp=timestamp,
            raw_report=data.get('raw_report', ''),
            location=Location(lat=location.get('lat', 0.0), lon=location.get('lon', 0.0)),
            is_expired=data.get('is_expired', False),
        )

    def __repr__(self) -> str:
        return f"Pirep({self.id} {self.icao} TB={self.turbulence.value} IC={self.icing.value})"


@dataclass(frozen=True)
class Sigmet:
    """
    SIGMET or AIRMET advisory over an altitude band and validity window.

    is_expired (valid_to has passed) and is_active (valid_from <= now <=
    valid_to) are derived when the advisory is built. A future advisory is
    neither active nor expired.
    """

    id: str
    type: AdvisoryType = AdvisoryType.AIRMET
    hazard: HazardType = HazardType.TURB
    severity: Severity = Severity.MODERATE
    altitude_min: int = 0
    altitude_max: int = 60000
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    affected_icaos: FrozenSet[str] = frozenset()
    raw_text: str = ""
    is_expired: bool = False
    is_active: bool = False

    @property
    def is_future(self) -> bool:
        return not self.is_active and not self.is_expired

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'type': self.type.value,
            'hazard': self.hazard.value,
            'severity': self.severity.value,
            'altitude_min': self.altitude_min,
            'altitude_max': self.altitude_max,
            'valid_from': self.valid_from.isoformat() if self.valid_from else None,
            'valid_to': self.valid_to.isoformat() if self.valid_to else None,
            'affected_icaos': sorted(self.affected_icaos),
            'raw_text': self.raw_text,
            'is_expired': self.is_expired,
            'is_active': self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Sigmet':
        valid_from = None
        if data.get('valid_from'):
            valid_from = datetime.fromisoformat(data['valid_from'])
        valid_to = None
        if data.get('valid_to'):
            valid_to = datetime.fromisoformat(data['valid_to'])
        return cls(
            id=data.get('id', ''),
            type=AdvisoryType(data.get('type', 'AIRMET')),
            hazard=HazardType(data.get('hazard', 'TURB')),
            severity=Severity(data.get('severity', 'MODERATE')),
            altitude_min=data.get('altitude_min', 0),
            altitude_max=data.get('altitude_max', 60000),
            valid_from=valid_from,
            valid_to=valid_to,
            affected_icaos=frozenset(data.get('affected_icaos', [])),
            raw_text=data.get('raw_text', ''),
            is_expired=data.get('is_expired', False),
            is_active=data.get('is_active', False),
        )

    def __repr__(self) -> str:
        return f"Sigmet({self.type.value} {self.id} {self.hazard.value} {self.severity.value})"
