"""Queryable collections for PIREPs and SIGMETs."""

from typing import List, Optional

from stationwx.models.queryable_collection import QueryableCollection
from stationwx.advisories.models import (
    Pirep,
    Sigmet,
    AdvisoryType,
    HazardType,
    Severity,
)


class PirepCollection(QueryableCollection[Pirep]):
    """
    Queryable collection of pilot reports.

    Example:
        severe_now = PirepCollection(pireps).current().severe().all()
    """

    def __init__(self, items: List[Pirep]):
        super().__init__(items)

    def current(self) -> 'PirepCollection':
        """Reports that were within the PIREP window when built."""
        return self.filter(lambda p: not p.is_expired)

    def expired(self) -> 'PirepCollection':
        return self.filter(lambda p: p.is_expired)

    def severe(self) -> 'PirepCollection':
        """Reports of severe turbulence or severe icing."""
        return self.filter(lambda p: p.is_severe)

    def moderate(self) -> 'PirepCollection':
        """Reports of moderate turbulence or moderate icing."""
        return self.filter(lambda p: p.is_moderate)

    def moderate_or_worse(self) -> 'PirepCollection':
        return self.filter(lambda p: p.is_severe or p.is_moderate)

    def for_station(self, icao: str) -> 'PirepCollection':
        icao_upper = icao.upper()
        return self.filter(lambda p: p.icao.upper() == icao_upper)

    def chronological(self) -> 'PirepCollection':
        """Sort reports by time (oldest first, undated reports before all)."""
        return self.order_by(lambda p: (p.timestamp is not None, p.timestamp))

    def latest(self) -> Optional[Pirep]:
        with_time = [p for p in self._items if p.timestamp is not None]
        if not with_time:
            return self.last()
        return max(with_time, key=lambda p: p.timestamp)


class SigmetCollection(QueryableCollection[Sigmet]):
    """
    Queryable collection of SIGMET/AIRMET advisories.

    Example:
        active_ice = SigmetCollection(sigmets).active().by_hazard(HazardType.ICE)
    """

    def __init__(self, items: List[Sigmet]):
        super().__init__(items)

    def active(self) -> 'SigmetCollection':
        return self.filter(lambda s: s.is_active)

    def expired(self) -> 'SigmetCollection':
        return self.filter(lambda s: s.is_expired)

    def future(self) -> 'SigmetCollection':
        """Advisories whose validity has not started yet."""
        return self.filter(lambda s: s.is_future)

    def severe(self) -> 'SigmetCollection':
        return self.filter(lambda s: s.severity == Severity.SEVERE)

    def by_hazard(self, hazard: HazardType) -> 'SigmetCollection':
        return self.filter(lambda s: s.hazard == hazard)

    def affecting(self, icao: str) -> 'SigmetCollection':
        """Advisories listing the station among affected ICAOs."""
        icao_upper = icao.upper()
        return self.filter(lambda s: icao_upper in s.affected_icaos)

    def sigmets(self) -> 'SigmetCollection':
        return self.filter(lambda s: s.type == AdvisoryType.SIGMET)

    def airmets(self) -> 'SigmetCollection':
        return self.filter(lambda s: s.type == AdvisoryType.AIRMET)
