"""
Status module for classifying the operational risk of stations.

Provides:
- OperationalStatus: NORMAL/CAUTION/CRITICAL enum with ordering
- StationStatus: Full weather picture and status of a station
- StationOverview: Counts across monitored stations
- StationStatusClassifier: Escalate-only fold of METAR, PIREP and SIGMET signals
- StationStatusCollection: Queryable collection of station statuses
- validate_icao / parse_station_list / station_name: Station identifiers

Example:
    from stationwx.status import StationStatusClassifier

    status = StationStatusClassifier.build_status("KJFK", weather, pireps, sigmets)
    print(status.operational_status)  # OperationalStatus.CAUTION
"""

from stationwx.status.models import (
    OperationalStatus,
    StationStatus,
    StationOverview,
)
from stationwx.status.stations import (
    validate_icao,
    is_valid_icao,
    parse_station_list,
    station_name,
)
from stationwx.status.classifier import StationStatusClassifier, classify
from stationwx.status.collection import StationStatusCollection

__all__ = [
    'OperationalStatus',
    'StationStatus',
    'StationOverview',
    'validate_icao',
    'is_valid_icao',
    'parse_station_list',
    'station_name',
    'StationStatusClassifier',
    'classify',
    'StationStatusCollection',
]
