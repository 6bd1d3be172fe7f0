"""Comparison of parsed conditions against operator minima."""

from stationwx.weather.models import ParsedConditions, Minima


def meets_minima(conditions: ParsedConditions, minima: Minima) -> bool:
    """
    Check ceiling and visibility against minima.

    Visibility reported as "greater than" (P6SM) always passes. Fields that
    were not reported are infinite and therefore always pass.

    Args:
        conditions: Parsed ceiling/visibility
        minima: Minimum ceiling (ft) and visibility (SM)

    Returns:
        True if both ceiling and visibility are at or above minima
    """
    vis_ok = conditions.is_greater or conditions.vis_miles >= minima.vis
    ceil_ok = conditions.ceiling >= minima.ceiling
    return vis_ok and ceil_ok
