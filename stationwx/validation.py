"""
Exceptions raised by stationwx.

Report content never raises: malformed fields are absorbed into defaults.
The only failure surfaced to callers is a station identifier that is not a
4-character ICAO code.
"""

from typing import Any


class StationWxError(Exception):
    """Base class for stationwx errors."""


class InvalidStationError(StationWxError, ValueError):
    """Exception raised when a station identifier is not a valid ICAO code."""

    def __init__(self, code: Any, message: str = "Invalid ICAO code"):
        """
        Initialize the error.

        Args:
            code: The rejected identifier, as supplied by the caller
            message: Error message
        """
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"{super().__str__()}: {self.code!r}"
