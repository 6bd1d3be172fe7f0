"""Station identifier validation and display names."""

import re
from typing import Any, List

from stationwx import config
from stationwx.validation import InvalidStationError

_SEPARATORS = re.compile(r'[,\s]+')

STATION_NAMES = {
    'CYYT': "St. John's Intl",
    'KJFK': 'John F Kennedy Intl',
    'EGLL': 'London Heathrow',
    'KORD': "Chicago O'Hare",
    'KLAX': 'Los Angeles Intl',
    'KDEN': 'Denver Intl',
    'KATL': 'Atlanta Hartsfield',
    'KSEA': 'Seattle Tacoma',
    'KBOS': 'Boston Logan',
    'KMIA': 'Miami Intl',
    'KEWR': 'Newark Liberty',
    'KSFO': 'San Francisco Intl',
    'KLAS': 'Las Vegas McCarran',
    'KPHX': 'Phoenix Sky Harbor',
    'KDFW': 'Dallas Fort Worth',
    'KIAH': 'Houston Intercontinental',
    'KMSP': 'Minneapolis St Paul',
    'KDTW': 'Detroit Metropolitan',
    'KPHL': 'Philadelphia Intl',
    'KLGA': 'LaGuardia',
    'KDCA': 'Reagan National',
    'KBWI': 'Baltimore Washington',
    'KMDW': 'Chicago Midway',
    'KHOU': 'Houston Hobby',
    'KOAK': 'Oakland Intl',
    'KSAN': 'San Diego Intl',
    'KTPA': 'Tampa Intl',
    'KBNA': 'Nashville Intl',
    'KSTL': 'St Louis Lambert',
    'KCVG': 'Cincinnati Northern Kentucky',
    'KCLT': 'Charlotte Douglas',
    'KPIT': 'Pittsburgh Intl',
    'KCLE': 'Cleveland Hopkins',
    'KIND': 'Indianapolis Intl',
    'KMKE': 'Milwaukee Mitchell',
}


def validate_icao(code: Any) -> str:
    """
    Normalize and validate a station identifier.

    Args:
        code: Caller-supplied identifier

    Returns:
        Upper-case 4-character ICAO code

    Raises:
        InvalidStationError: If code is not 4 letters/digits
    """
    if not isinstance(code, str):
        raise InvalidStationError(code)
    icao = code.strip().upper()
    if not config.ICAO_PATTERN.match(icao):
        raise InvalidStationError(code)
    return icao


def is_valid_icao(code: Any) -> bool:
    try:
        validate_icao(code)
    except InvalidStationError:
        return False
    return True


def parse_station_list(text: str) -> List[str]:
    """
    Parse user input like "kjfk, EGLL KORD" into ICAO codes.

    Invalid tokens are dropped and duplicates removed, keeping first-seen order.
    """
    stations = []
    for token in _SEPARATORS.split(text or ''):
        if not token or not is_valid_icao(token):
            continue
        icao = token.upper()
        if icao not in stations:
            stations.append(icao)
    return stations


def station_name(icao: str) -> str:
    """Display name of a station; the ICAO code itself if unknown."""
    return STATION_NAMES.get(icao.upper(), icao)
