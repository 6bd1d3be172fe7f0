"""Operational status classification of a station."""

import logging
from datetime import datetime
from typing import Optional, List

from stationwx import config
from stationwx.clock import resolve_now
from stationwx.weather.models import WeatherData
from stationwx.weather.parser import ReportLineParser
from stationwx.advisories.models import Pirep, Sigmet
from stationwx.advisories.collection import PirepCollection, SigmetCollection
from stationwx.status.models import OperationalStatus, StationStatus
from stationwx.status.stations import validate_icao, station_name

logger = logging.getLogger(__name__)


class StationStatusClassifier:
    """
    Fold METAR, PIREP and SIGMET signals into one OperationalStatus.

    Each signal can only raise the status (the fold is a max over
    NORMAL < CAUTION < CRITICAL); a fetch error is CRITICAL on its own.

    Signals:
        - METAR fetch error                                  -> CRITICAL
        - active SEVERE SIGMET, current SEVERE PIREP         -> CRITICAL
        - any active SIGMET, current MODERATE PIREP          -> CAUTION
        - METAR vis < 0.5 SM or ceiling < 100 ft             -> CRITICAL
        - METAR vis < 1 SM or ceiling < 200 ft               -> CAUTION
    """

    @classmethod
    def classify(
        cls,
        weather: WeatherData,
        pireps: List[Pirep],
        sigmets: List[Sigmet],
    ) -> OperationalStatus:
        """
        Classify a station.

        Args:
            weather: Current METAR/TAF text and fetch error
            pireps: Pilot reports, with expiry flags already derived
            sigmets: Advisories, with activity flags already derived

        Returns:
            The worst status any signal reached
        """
        if weather.has_error:
            logger.info("Station data unavailable (%s): CRITICAL", weather.error)
            return OperationalStatus.CRITICAL

        status = OperationalStatus.NORMAL
        status = max(status, cls.advisory_status(pireps, sigmets))
        status = max(status, cls.metar_status(weather.metar))
        return status

    @staticmethod
    def advisory_status(pireps: List[Pirep], sigmets: List[Sigmet]) -> OperationalStatus:
        """Status from active SIGMETs and non-expired PIREPs."""
        current = PirepCollection(pireps).current()
        active = SigmetCollection(sigmets).active()

        if active.severe().exists() or current.severe().exists():
            return OperationalStatus.CRITICAL
        if active.exists() or current.moderate().exists():
            return OperationalStatus.CAUTION
        return OperationalStatus.NORMAL

    @staticmethod
    def metar_status(metar: Optional[str]) -> OperationalStatus:
        """
        Status from the visibility and ceiling of the current METAR.

        Groups the METAR does not report never lower the status.
        """
        if not metar:
            return OperationalStatus.NORMAL

        conditions = ReportLineParser.parse_conditions(metar)
        vis = conditions.vis_miles
        ceiling = conditions.ceiling

        if vis < config.CRITICAL_VIS_SM or ceiling < config.CRITICAL_CEILING_FT:
            return OperationalStatus.CRITICAL
        if vis < config.CAUTION_VIS_SM or ceiling < config.CAUTION_CEILING_FT:
            return OperationalStatus.CAUTION
        return OperationalStatus.NORMAL

    @classmethod
    def build_status(
        cls,
        icao: str,
        weather: WeatherData,
        pireps: List[Pirep],
        sigmets: List[Sigmet],
        now: Optional[datetime] = None,
        name: Optional[str] = None,
    ) -> StationStatus:
        """
        Build the full status record of a station.

        Args:
            icao: Station ICAO code
            weather: Current METAR/TAF text and fetch error
            pireps: Pilot reports for the station
            sigmets: Advisories for the station
            now: Time of the refresh, recorded as last_updated
            name: Display name; looked up from the ICAO code if omitted

        Returns:
            StationStatus

        Raises:
            InvalidStationError: If icao is not a valid ICAO code
        """
        icao = validate_icao(icao)
        return StationStatus(
            icao=icao,
            name=name or station_name(icao),
            metar=weather,
            pireps=list(pireps),
            sigmets=list(sigmets),
            operational_status=cls.classify(weather, pireps, sigmets),
            last_updated=resolve_now(now),
        )


def classify(
    weather: WeatherData,
    pireps: List[Pirep],
    sigmets: List[Sigmet],
) -> OperationalStatus:
    """Module-level shortcut for StationStatusClassifier.classify."""
    return StationStatusClassifier.classify(weather, pireps, sigmets)
