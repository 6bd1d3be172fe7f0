"""
Advisory module for pilot reports and SIGMET/AIRMET advisories.

Provides:
- Pirep / Sigmet: Normalized advisory records with expiry flags
- TurbulenceIntensity, IcingIntensity, HazardType, Severity, AdvisoryType
- AdvisoryExtractor: Provider payload to record mapping
- PirepCollection / SigmetCollection: Queryable advisory collections

Example:
    from stationwx.advisories import AdvisoryExtractor, SigmetCollection

    sigmets = AdvisoryExtractor.extract_sigmets(payloads, "KJFK")
    active = SigmetCollection(sigmets).active().severe().all()
"""

from stationwx.advisories.models import (
    Pirep,
    Sigmet,
    Location,
    TurbulenceIntensity,
    IcingIntensity,
    AdvisoryType,
    HazardType,
    Severity,
)
from stationwx.advisories.extractors import AdvisoryExtractor
from stationwx.advisories.collection import PirepCollection, SigmetCollection

__all__ = [
    'Pirep',
    'Sigmet',
    'Location',
    'TurbulenceIntensity',
    'IcingIntensity',
    'AdvisoryType',
    'HazardType',
    'Severity',
    'AdvisoryExtractor',
    'PirepCollection',
    'SigmetCollection',
]
