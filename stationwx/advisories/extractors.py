"""Normalization of loosely-typed PIREP and SIGMET payloads."""

import re
import math
import logging
from datetime import datetime, timezone
from typing import Optional, List, Any, Iterable, Tuple

from dateutil import parser as date_parser

from stationwx import config
from stationwx.clock import as_utc, resolve_now
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

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'^\s*([-+]?\d+)')
_LEADING_FLOAT = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')

# Epoch values above this are taken as milliseconds
_EPOCH_MS_THRESHOLD = 1e11


class AdvisoryExtractor:
    """
    Map external PIREP/SIGMET payloads to Pirep and Sigmet records.

    Field names vary between providers, so each field is looked up under a
    list of aliases. Nothing here raises on bad content: unknown intensities
    map to NONE, unknown hazards to TURB, unknown severities to MODERATE,
    bad numbers and times to their defaults.

    Example:
        pireps = AdvisoryExtractor.extract_pireps(payload_list, "KJFK")
        sigmets = AdvisoryExtractor.extract_sigmets(payload_list, "KJFK")
    """

    # Keyword tables, checked in order; the first match wins
    TURBULENCE_KEYWORDS: List[Tuple[TurbulenceIntensity, Tuple[str, ...]]] = [
        (TurbulenceIntensity.SEVERE, ('severe', 'extreme', 'extrm', 'sev')),
        (TurbulenceIntensity.MODERATE, ('moderate', 'mod')),
        (TurbulenceIntensity.LIGHT, ('light', 'weak', 'lgt')),
    ]

    ICING_KEYWORDS: List[Tuple[IcingIntensity, Tuple[str, ...]]] = [
        (IcingIntensity.SEVERE, ('severe', 'heavy', 'hvy', 'sev')),
        (IcingIntensity.MODERATE, ('moderate', 'mod')),
        (IcingIntensity.LIGHT, ('light', 'lgt')),
        (IcingIntensity.TRACE, ('trace', 'trc')),
    ]

    HAZARD_KEYWORDS: List[Tuple[HazardType, Tuple[str, ...]]] = [
        (HazardType.TURB, ('turbulence', 'turb')),
        (HazardType.ICE, ('icing', 'ice')),
        (HazardType.IFR, ('ifr', 'visibility', 'fog')),
        (HazardType.MT_OBSC, ('mountain', 'obscur', 'mtn', 'obsc')),
        (HazardType.CONVECTIVE, ('convective', 'thunderstorm', 'tstm')),
    ]

    SEVERITY_KEYWORDS: List[Tuple[Severity, Tuple[str, ...]]] = [
        (Severity.SEVERE, ('severe', 'extreme', 'strong')),
        (Severity.LIGHT, ('light', 'weak', 'mild')),
    ]

    # Payload field aliases
    PIREP_ID_FIELDS = ('reportId', 'pirepId', 'id')
    PIREP_STATION_FIELDS = ('stationId', 'icaoId', 'icao')
    PIREP_AIRCRAFT_FIELDS = ('aircraftRef', 'acType')
    PIREP_ALTITUDE_FIELDS = ('altitude', 'altitudeFt')
    PIREP_TURBULENCE_FIELDS = ('turbulenceCondition', 'tbInt1')
    PIREP_ICING_FIELDS = ('icingCondition', 'icgInt1')
    PIREP_TIME_FIELDS = ('reportTime', 'obsTime', 'receiptTime')
    PIREP_RAW_FIELDS = ('rawOb', 'pirepText', 'rawText')
    SIGMET_ID_FIELDS = ('hazardId', 'airSigmetId', 'isigmetId', 'id')
    SIGMET_TYPE_FIELDS = ('hazardType', 'airSigmetType')
    SIGMET_ALT_LOW_FIELDS = ('altitudeLow', 'altitudeLow1')
    SIGMET_ALT_HIGH_FIELDS = ('altitudeHigh', 'altitudeHigh1')
    SIGMET_RAW_FIELDS = ('rawText', 'rawAirSigmet', 'text')

    # --- Keyword mapping ---

    @classmethod
    def map_turbulence(cls, condition: Any) -> TurbulenceIntensity:
        """
        Map a turbulence condition to an intensity.

        Args:
            condition: Intensity text, a dict with "intensity"/"type", a list
                of those, or None

        Returns:
            TurbulenceIntensity, NONE if nothing matches
        """
        return _match_keywords(
            _intensity_text(condition), cls.TURBULENCE_KEYWORDS, TurbulenceIntensity.NONE
        )

    @classmethod
    def map_icing(cls, condition: Any) -> IcingIntensity:
        """Map an icing condition to an intensity; NONE if nothing matches."""
        return _match_keywords(
            _intensity_text(condition), cls.ICING_KEYWORDS, IcingIntensity.NONE
        )

    @classmethod
    def map_hazard(cls, hazard: Any) -> HazardType:
        """Map hazard text to a HazardType. Unrecognized hazards are TURB."""
        text = str(hazard) if hazard else ''
        return _match_keywords(text, cls.HAZARD_KEYWORDS, HazardType.TURB)

    @classmethod
    def map_severity(cls, severity: Any) -> Severity:
        """Map severity text to a Severity. Unrecognized severities are MODERATE."""
        text = str(severity) if severity else ''
        return _match_keywords(text, cls.SEVERITY_KEYWORDS, Severity.MODERATE)

    @staticmethod
    def map_advisory_type(value: Any) -> AdvisoryType:
        if value and 'SIGMET' in str(value).upper():
            return AdvisoryType.SIGMET
        return AdvisoryType.AIRMET

    # --- Safe parsing ---

    @staticmethod
    def safe_int(value: Any, default: int = 0) -> int:
        """
        Parse the leading integer of a value, like JavaScript parseInt.

        "12000ft" gives 12000; None, "", "abc" and booleans give default.
        """
        if value is None or isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                return default
            return int(value)
        match = _LEADING_INT.match(str(value))
        if not match:
            return default
        try:
            return int(match.group(1))
        except ValueError as e:
            logger.debug("Integer out of range: %.40s...: %s", match.group(1), e)
            return default

    @staticmethod
    def safe_float(value: Any, default: float = 0.0) -> float:
        """Parse the leading number of a value, like JavaScript parseFloat."""
        if value is None or isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            text = value
        else:
            match = _LEADING_FLOAT.match(str(value))
            if not match:
                return default
            text = match.group(1)
        try:
            number = float(text)
        except OverflowError:
            logger.debug("Number out of float range")
            return default
        if math.isnan(number) or math.isinf(number):
            return default
        return number

    @classmethod
    def parse_timestamp(cls, value: Any, default: datetime) -> datetime:
        """
        Parse a timestamp into an aware UTC datetime.

        Accepts datetime objects, epoch seconds or milliseconds (numbers or
        digit strings), ISO-8601 and other date strings dateutil understands.
        Naive values are taken as UTC.

        Args:
            value: Raw timestamp
            default: Returned when value is missing or unparseable

        Returns:
            Aware UTC datetime
        """
        if value is None or value == '' or isinstance(value, bool):
            return default
        if isinstance(value, datetime):
            return as_utc(value)
        if isinstance(value, (int, float)):
            return cls._from_epoch(value, default)

        text = str(value).strip()
        if text.isdigit():
            try:
                epoch = int(text)
            except ValueError as e:
                logger.debug("Unparseable epoch timestamp %.40s...: %s", text, e)
                return default
            return cls._from_epoch(epoch, default)
        try:
            return as_utc(date_parser.isoparse(text))
        except (ValueError, OverflowError):
            pass
        try:
            return as_utc(date_parser.parse(text))
        except (ValueError, OverflowError) as e:
            logger.debug("Unparseable timestamp %r: %s", value, e)
            return default

    @staticmethod
    def _from_epoch(value: float, default: datetime) -> datetime:
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return default
        try:
            seconds = value / 1000 if abs(value) >= _EPOCH_MS_THRESHOLD else value
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Epoch timestamp out of range")
            return default

    # --- Record builders ---

    @classmethod
    def pirep_from_payload(
        cls,
        payload: dict,
        icao: str,
        index: int = 0,
        now: Optional[datetime] = None,
    ) -> Pirep:
        """
        Build a Pirep from a provider payload.

        Args:
            payload: Provider record
            icao: Station the reports were requested for
            index: Position in the provider list, used for a fallback id
            now: Current time for the expiry flag

        Returns:
            Pirep with is_expired derived from now
        """
        now = resolve_now(now)
        timestamp = cls.parse_timestamp(_first(payload, cls.PIREP_TIME_FIELDS), now)

        altitude_raw = _first(payload, cls.PIREP_ALTITUDE_FIELDS)
        if altitude_raw is None and payload.get('fltLvl') is not None:
            altitude = cls.safe_int(payload.get('fltLvl')) * 100
        else:
            altitude = cls.safe_int(altitude_raw)

        return Pirep(
            id=str(_first(payload, cls.PIREP_ID_FIELDS) or f"pirep-{icao}-{index}"),
            icao=str(_first(payload, cls.PIREP_STATION_FIELDS) or icao).upper(),
            aircraft=str(_first(payload, cls.PIREP_AIRCRAFT_FIELDS) or 'UNKNOWN'),
            altitude=altitude,
            turbulence=cls.map_turbulence(_first(payload, cls.PIREP_TURBULENCE_FIELDS)),
            icing=cls.map_icing(_first(payload, cls.PIREP_ICING_FIELDS)),
            timestamp=timestamp,
            raw_report=str(_first(payload, cls.PIREP_RAW_FIELDS) or ''),
            location=Location(
                lat=cls.safe_float(_first(payload, ('latitude', 'lat'))),
                lon=cls.safe_float(_first(payload, ('longitude', 'lon'))),
            ),
            is_expired=timestamp < now - config.PIREP_MAX_AGE,
        )

    @classmethod
    def sigmet_from_payload(
        cls,
        payload: dict,
        icao: str,
        index: int = 0,
        now: Optional[datetime] = None,
    ) -> Sigmet:
        """
        Build a Sigmet from a provider payload.

        A missing validity start defaults to now and a missing end to
        now + 6 hours.

        Args:
            payload: Provider record
            icao: Station the advisories were requested for
            index: Position in the provider list, used for a fallback id
            now: Current time for the expiry and activity flags

        Returns:
            Sigmet with is_expired and is_active derived from now
        """
        now = resolve_now(now)
        valid_from = cls.parse_timestamp(payload.get('validTimeFrom'), now)
        valid_to = cls.parse_timestamp(
            payload.get('validTimeTo'), now + config.SIGMET_DEFAULT_DURATION
        )

        return Sigmet(
            id=str(_first(payload, cls.SIGMET_ID_FIELDS) or f"sigmet-{icao}-{index}"),
            type=cls.map_advisory_type(_first(payload, cls.SIGMET_TYPE_FIELDS)),
            hazard=cls.map_hazard(payload.get('hazard')),
            severity=cls.map_severity(payload.get('severity') or payload.get('hazard')),
            altitude_min=cls.safe_int(
                _first(payload, cls.SIGMET_ALT_LOW_FIELDS), config.SIGMET_DEFAULT_ALTITUDE_MIN_FT
            ),
            altitude_max=cls.safe_int(
                _first(payload, cls.SIGMET_ALT_HIGH_FIELDS), config.SIGMET_DEFAULT_ALTITUDE_MAX_FT
            ),
            valid_from=valid_from,
            valid_to=valid_to,
            affected_icaos=frozenset({icao.upper()}),
            raw_text=str(_first(payload, cls.SIGMET_RAW_FIELDS) or ''),
            is_expired=valid_to < now,
            is_active=valid_from <= now <= valid_to,
        )

    @classmethod
    def extract_pireps(
        cls,
        payloads: Any,
        icao: str,
        now: Optional[datetime] = None,
        include_expired: bool = False,
    ) -> List[Pirep]:
        """
        Build Pireps from a provider list.

        Reports older than the PIREP window are dropped unless
        include_expired is set. Anything that is not a list yields [].
        """
        now = resolve_now(now)
        pireps = []
        for index, payload in _records(payloads, "PIREP"):
            pirep = cls.pirep_from_payload(payload, icao, index, now)
            if pirep.is_expired and not include_expired:
                continue
            pireps.append(pirep)
        return pireps

    @classmethod
    def extract_sigmets(
        cls,
        payloads: Any,
        icao: str,
        now: Optional[datetime] = None,
    ) -> List[Sigmet]:
        """
        Build Sigmets from a provider list.

        Keeps advisories that started within the lookback window or are
        still valid. Anything that is not a list yields [].
        """
        now = resolve_now(now)
        cutoff = now - config.SIGMET_LOOKBACK
        sigmets = []
        for index, payload in _records(payloads, "SIGMET"):
            sigmet = cls.sigmet_from_payload(payload, icao, index, now)
            if sigmet.valid_from >= cutoff or sigmet.valid_to >= now:
                sigmets.append(sigmet)
        return sigmets


# --- Module-level helpers ---

def _first(payload: dict, keys: Iterable[str]) -> Any:
    """Value of the first alias present with a non-empty value."""
    for key in keys:
        value = payload.get(key)
        if value is not None and value != '':
            return value
    return None


def _intensity_text(condition: Any) -> str:
    if not condition:
        return ''
    if isinstance(condition, dict):
        return str(condition.get('intensity') or condition.get('type') or '')
    if isinstance(condition, (list, tuple)):
        return ' '.join(_intensity_text(c) for c in condition)
    return str(condition)


def _match_keywords(text: str, table, default):
    lowered = text.lower()
    for value, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return value
    return default


def _records(payloads: Any, kind: str):
    """Yield (index, dict) pairs, skipping anything that is not a dict."""
    if not isinstance(payloads, list):
        logger.debug("Ignoring %s payload of type %s", kind, type(payloads).__name__)
        return
    for index, payload in enumerate(payloads):
        if not isinstance(payload, dict):
            logger.debug("Skipping %s record %d of type %s", kind, index, type(payload).__name__)
            continue
        yield index, payload
