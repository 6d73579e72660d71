"""Geo operations"""
from collections import namedtuple
import logging
import math
import re


logger = logging.getLogger(__name__)

MAX_LAT = 90
MAX_LON = 180

# Hemisphere letters for (non-negative, negative) values
HEMISPHERES = {
    "lat": ("N", "S"),
    "lon": ("E", "W")
}

WHITESPACE_RE = re.compile(r'\s+')
# Anything that can't be part of a decimal coordinate pair
DELIMITER_RE = re.compile(r'[^A-Za-z0-9 .+-]')

# Sexagesimal field grammars. Bounds are part of the pattern.
_LAT_DEG = r'(?P<lat_degrees>0?90|0?[0-8]?\d)'
_LON_DEG = r'(?P<lon_degrees>180|1[0-7]\d|0?\d{1,2})'
_MIN = r'(?P<{}_minutes>60|[0-5]?\d)'
_SEC = r'(?P<{}_seconds>60(?:\.0+)?|[0-5]?\d(?:\.\d+)?)'
_DEG_SEP = r'(?:\s?[°º:]\s?|\s)'
_MIN_SEP = r'(?:\s?[\'′’:]\s?|\s)'
_SEC_SYM = r'(?:"|\'\'|″|”)'


def _dms_group(axis):
    degrees = _LAT_DEG if axis == "lat" else _LON_DEG
    return degrees + _DEG_SEP + _MIN.format(axis) + _MIN_SEP + _SEC.format(axis)


# 45°34'21" N 120°47'23" E, 45 34 21 N 120 47 23 E, 45:34:21N 120:47:23E
SEXAGESIMAL_SUFFIXED_RE = re.compile(
    r'^' + _dms_group("lat") + r'\s?' + _SEC_SYM + r'?\s?(?P<lat_hemisphere>[NS])\s?'
    + _dms_group("lon") + r'\s?' + _SEC_SYM + r'?\s?(?P<lon_hemisphere>[EW])$',
    re.IGNORECASE
)
# N 45:34:21 E 120:47:23
SEXAGESIMAL_PREFIXED_RE = re.compile(
    r'^(?P<lat_hemisphere>[NS])\s?' + _dms_group("lat") + r'\s?' + _SEC_SYM + r'?\s?'
    + r'(?P<lon_hemisphere>[EW])\s?' + _dms_group("lon") + r'\s?' + _SEC_SYM + r'?$',
    re.IGNORECASE
)
# 34.45456 -101.21354 (latitude first)
DECIMAL_RE = re.compile(
    r'^(?P<lat>[-+]?(?:90(?:\.0+)?|[0-8]?\d(?:\.\d+)?))'
    r' '
    r'(?P<lon>[-+]?(?:180(?:\.0+)?|(?:1[0-7]\d|\d{1,2})(?:\.\d+)?))$'
)

SexagesimalMatch = namedtuple(
    "SexagesimalMatch",
    [
        "lat_degrees", "lat_minutes", "lat_seconds", "lat_hemisphere",
        "lon_degrees", "lon_minutes", "lon_seconds", "lon_hemisphere"
    ]
)


def normalize(text):
    """
    Canonical form of a raw coordinate string.

    Commas are replaced by spaces, runs of whitespace are collapsed to a
    single space and the result is trimmed. Returns None for None, empty or
    whitespace-only input.
    """
    if text is None:
        return None
    text = WHITESPACE_RE.sub(" ", str(text).replace(",", " ")).strip()
    if not text:
        return None
    return text


def match_sexagesimal(text):
    """
    Match a sexagesimal latitude/longitude string.

    Both hemisphere suffixed ("45:34:21 N 120:47:23 E") and prefixed
    ("N 45:34:21 E 120:47:23") forms are accepted, latitude first. Returns a
    SexagesimalMatch or None if text doesn't match.
    """
    clean = normalize(text)
    if clean is None:
        return None
    match = SEXAGESIMAL_SUFFIXED_RE.match(clean) or SEXAGESIMAL_PREFIXED_RE.match(clean)
    if not match:
        logger.debug("'%s' is not in sexagesimal notation", text)
        return None
    tokens = SexagesimalMatch(
        int(match.group("lat_degrees")),
        int(match.group("lat_minutes")),
        float(match.group("lat_seconds")),
        match.group("lat_hemisphere").upper(),
        int(match.group("lon_degrees")),
        int(match.group("lon_minutes")),
        float(match.group("lon_seconds")),
        match.group("lon_hemisphere").upper()
    )
    # 90 and 180 degrees only leave room for zero minutes and seconds
    if dms2dd(tokens.lat_degrees, tokens.lat_minutes, tokens.lat_seconds) > MAX_LAT:
        logger.debug("latitude in '%s' is greater than %d degrees", text, MAX_LAT)
        return None
    if dms2dd(tokens.lon_degrees, tokens.lon_minutes, tokens.lon_seconds) > MAX_LON:
        logger.debug("longitude in '%s' is greater than %d degrees", text, MAX_LON)
        return None
    return tokens


def match_decimal(text):
    """
    Match a decimal "latitude longitude" string.

    Delimiters other than space, '.', '-' and '+' are stripped before
    matching, so "34.45456°, -101.21354°" is accepted. Returns a
    (latitude, longitude) tuple of floats or None if text doesn't match.
    """
    clean = normalize(text)
    if clean is None:
        return None
    clean = normalize(DELIMITER_RE.sub("", clean))
    match = DECIMAL_RE.match(clean) if clean else None
    if not match:
        logger.debug("'%s' is not in decimal notation", text)
        return None
    return (float(match.group("lat")), float(match.group("lon")))


def is_sexagesimal(text):
    """Is this a valid sexagesimal coordinate string"""
    return match_sexagesimal(text) is not None


def is_decimal(text):
    """Is this a valid decimal coordinate string"""
    return match_decimal(text) is not None


def sexagesimal2dd(tokens):
    """SexagesimalMatch to (latitude, longitude) decimal degrees."""
    lat = dms2dd(tokens.lat_degrees, tokens.lat_minutes, tokens.lat_seconds, tokens.lat_hemisphere)
    lon = dms2dd(tokens.lon_degrees, tokens.lon_minutes, tokens.lon_seconds, tokens.lon_hemisphere)
    return (lat, lon)


def dms2dd(degrees, minutes, seconds, hemisphere=None):
    """
    Degrees, minutes, seconds to decimal degrees.

    All fields are non-negative. The result is negative for hemisphere 'S'
    or 'W'.
    """
    dd = float(degrees) + (float(minutes) + float(seconds) / 60.0) / 60.0
    if hemisphere is not None and hemisphere.upper() in ("S", "W"):
        dd = -dd
    return dd


def dd2dms(value):
    """
    Decimal degrees to (degrees, minutes, seconds) of the absolute value.

    Degrees and minutes are floored integers, seconds keep the remainder.
    e.g. 121.135 -> (121, 8, 6.0)
    """
    value = abs(value)
    degrees = math.floor(value)
    minutes_dec = (value % 1) * 60
    minutes = math.floor(minutes_dec)
    seconds = (minutes_dec % 1) * 60
    return (int(degrees), int(minutes), seconds)


def format_dms(value, axis, precision=3):
    """
    Decimal degrees to a sexagesimal string with hemisphere suffix.

    axis is "lat" or "lon". Seconds are rendered with precision decimal
    places. Zero is treated as north/east.
    e.g. format_dms(-101.21354, "lon") -> 101°12'48.744"W
    """
    if axis not in HEMISPHERES:
        raise ValueError("axis must be one of {}, got '{}'".format(list(HEMISPHERES), axis))
    if precision < 0:
        raise ValueError("precision must be >= 0")
    degrees, minutes, seconds = dd2dms(value)
    hemisphere = HEMISPHERES[axis][1 if value < 0 else 0]
    return "{}°{}'{:.{prec}f}\"{}".format(degrees, minutes, seconds, hemisphere, prec=precision)
