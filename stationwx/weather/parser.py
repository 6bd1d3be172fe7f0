"""Ceiling and visibility extraction from raw METAR/TAF text."""

import re
import logging
from typing import Optional

from stationwx.weather.models import ParsedConditions, NOT_REPORTED

logger = logging.getLogger(__name__)


class ReportLineParser:
    """
    Extract ceiling and visibility from free-form report text.

    Only the first cloud-layer group and the first statute-mile visibility
    group of the text are used. Missing groups are NOT_REPORTED, never an
    error.

    Example:
        conditions = ReportLineParser.parse_line(
            "KJFK 291951Z 18010KT 1/2SM BKN005"
        )
        # ParsedConditions(ceiling=500, vis_miles=0.5, is_greater=False)
    """

    # BKN/OVC/VV layer with a 3-digit height in hundreds of feet
    CEILING_PATTERN = re.compile(r'(BKN|OVC|VV)(\d{3})')

    # Statute-mile visibility: P6SM, M1/4SM, 10SM, 1/2SM, 1 1/2SM.
    # Not preceded by a digit or slash, so "1/2SM" never matches as "2SM".
    VISIBILITY_PATTERN = re.compile(
        r'(?<![\d/])'
        r'([PM])?'
        r'(\d{1,2} \d/\d{1,2}|\d/\d{1,2}|\d{1,2})'
        r'SM'
    )

    REPORT_KEYWORD_PREFIX = re.compile(r'^(METAR|TAF|SPECI)\s+')
    REPORT_KEYWORD_SUFFIX = re.compile(r'\s+(METAR|TAF|SPECI)$')
    NWS_TIMESTAMP_PREFIX = re.compile(r'^\d{4}/\d{2}/\d{2}\s+\d{2}:\d{2}\s*')

    @classmethod
    def parse_line(cls, line: str) -> ParsedConditions:
        """
        Parse one line of report text.

        Args:
            line: Raw report line

        Returns:
            ParsedConditions with NOT_REPORTED for absent groups
        """
        vis_miles, is_greater = cls._extract_visibility(line)
        return ParsedConditions(
            ceiling=cls._extract_ceiling(line),
            vis_miles=vis_miles,
            is_greater=is_greater,
        )

    @classmethod
    def parse_conditions(cls, text: Optional[str]) -> ParsedConditions:
        """
        Parse a whole report (e.g. the current METAR) for classification.

        Args:
            text: Report text, possibly empty or None

        Returns:
            ParsedConditions of the first ceiling and visibility groups
        """
        if not text:
            return ParsedConditions()
        return cls.parse_line(text)

    @classmethod
    def clean_report_text(cls, text: Optional[str]) -> str:
        """
        Normalize report text as delivered by plain-text feeds.

        Collapses whitespace, drops a leading or trailing METAR/TAF/SPECI
        keyword and a leading "YYYY/MM/DD HH:MM" timestamp.
        """
        if not text:
            return ""
        cleaned = re.sub(r'\s+', ' ', text).strip()
        cleaned = cls.REPORT_KEYWORD_PREFIX.sub('', cleaned)
        cleaned = cls.REPORT_KEYWORD_SUFFIX.sub('', cleaned)
        cleaned = cls.NWS_TIMESTAMP_PREFIX.sub('', cleaned)
        return cleaned

    # --- Field extraction helpers ---

    @classmethod
    def _extract_ceiling(cls, line: str) -> float:
        match = cls.CEILING_PATTERN.search(line)
        if not match:
            return NOT_REPORTED
        return int(match.group(2)) * 100

    @classmethod
    def _extract_visibility(cls, line: str) -> tuple:
        """Returns (vis_miles, is_greater)."""
        match = cls.VISIBILITY_PATTERN.search(line)
        if not match:
            return NOT_REPORTED, False

        prefix, amount = match.group(1), match.group(2)
        vis = cls._safe_parse_fraction(amount)
        if vis is None:
            logger.debug("Unparseable visibility group: %s", match.group(0))
            return NOT_REPORTED, False
        return vis, prefix == 'P'

    @classmethod
    def _safe_parse_fraction(cls, text: str) -> Optional[float]:
        """
        Parse "6", "1/2" or "1 1/2" without eval().

        Returns:
            Float value or None if the fraction is malformed
        """
        text = text.strip()
        if ' ' in text:
            whole, frac = text.split(None, 1)
            frac_value = cls._parse_simple_fraction(frac)
            if frac_value is None:
                return None
            return float(whole) + frac_value
        if '/' in text:
            return cls._parse_simple_fraction(text)
        return float(text)

    @staticmethod
    def _parse_simple_fraction(text: str) -> Optional[float]:
        num, den = text.split('/')
        if float(den) == 0:
            return None
        return float(num) / float(den)


def parse_line(line: str) -> ParsedConditions:
    """Module-level shortcut for ReportLineParser.parse_line."""
    return ReportLineParser.parse_line(line)
