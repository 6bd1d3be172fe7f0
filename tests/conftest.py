import pytest
from datetime import datetime, timedelta, timezone

from stationwx.advisories.models import (
    Pirep,
    Sigmet,
    TurbulenceIntensity,
    IcingIntensity,
    Severity,
    AdvisoryType,
    HazardType,
)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for expiry and validity checks."""
    return datetime(2024, 3, 29, 19, 51, tzinfo=timezone.utc)


@pytest.fixture
def make_pirep(now):
    """Factory for Pirep records relative to the reference time."""
    def factory(
        turbulence=TurbulenceIntensity.NONE,
        icing=IcingIntensity.NONE,
        age=timedelta(hours=1),
        is_expired=None,
        id="pirep-1",
        icao="KJFK",
    ) -> Pirep:
        timestamp = now - age
        if is_expired is None:
            is_expired = timestamp < now - timedelta(hours=12)
        return Pirep(
            id=id,
            icao=icao,
            turbulence=turbulence,
            icing=icing,
            timestamp=timestamp,
            is_expired=is_expired,
        )
    return factory


@pytest.fixture
def make_sigmet(now):
    """Factory for Sigmet records; active unless told otherwise."""
    def factory(
        severity=Severity.MODERATE,
        hazard=HazardType.TURB,
        is_active=True,
        is_expired=False,
        id="sigmet-1",
        icao="KJFK",
    ) -> Sigmet:
        return Sigmet(
            id=id,
            type=AdvisoryType.SIGMET,
            hazard=hazard,
            severity=severity,
            valid_from=now - timedelta(hours=1),
            valid_to=now + timedelta(hours=5),
            affected_icaos=frozenset({icao}),
            is_active=is_active,
            is_expired=is_expired,
        )
    return factory
