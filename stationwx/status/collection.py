"""Queryable collection of station statuses."""

from typing import List, Optional

from stationwx.models.queryable_collection import QueryableCollection
from stationwx.status.models import OperationalStatus, StationStatus, StationOverview


class StationStatusCollection(QueryableCollection[StationStatus]):
    """
    Queryable collection of monitored stations.

    Example:
        stations = StationStatusCollection(statuses)
        for station in stations.critical():
            print(station.icao, station.name)
        print(stations.overview().to_dict())
    """

    def __init__(self, items: List[StationStatus]):
        super().__init__(items)

    def by_status(self, status: OperationalStatus) -> 'StationStatusCollection':
        return self.filter(lambda s: s.operational_status == status)

    def normal(self) -> 'StationStatusCollection':
        return self.by_status(OperationalStatus.NORMAL)

    def caution(self) -> 'StationStatusCollection':
        return self.by_status(OperationalStatus.CAUTION)

    def critical(self) -> 'StationStatusCollection':
        return self.by_status(OperationalStatus.CRITICAL)

    def at_or_above(self, status: OperationalStatus) -> 'StationStatusCollection':
        """Stations whose status is status or worse."""
        return self.filter(lambda s: s.operational_status >= status)

    def for_station(self, icao: str) -> Optional[StationStatus]:
        icao_upper = icao.upper()
        return self.filter(lambda s: s.icao == icao_upper).first()

    def worst(self) -> Optional[StationStatus]:
        """Station with the worst status (first one on ties)."""
        if not self._items:
            return None
        return max(self._items, key=lambda s: s.operational_status.order)

    def overview(self) -> StationOverview:
        """Status counts and advisory totals across all stations."""
        return StationOverview(
            total_stations=len(self._items),
            normal=self.normal().count(),
            caution=self.caution().count(),
            critical=self.critical().count(),
            active_pireps=sum(
                sum(1 for p in s.pireps if not p.is_expired) for s in self._items
            ),
            active_sigmets=sum(
                sum(1 for sig in s.sigmets if sig.is_active) for s in self._items
            ),
            expired_sigmets=sum(
                sum(1 for sig in s.sigmets if sig.is_expired) for s in self._items
            ),
        )
