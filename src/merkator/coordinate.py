"""WGS84 coordinate read from and written to sexagesimal or decimal notation"""
import logging
from . import errors
from . import geo


logger = logging.getLogger(__name__)

# Accepted decimal string orders and whether longitude comes first
DECIMAL_ORDERS = {
    "lat-lon": False,
    "yx": False,
    "lon-lat": True,
    "xy": True
}
DEFAULT_DECIMAL_ORDER = "lat-lon"
DEFAULT_SECONDS_PRECISION = 3


class Coordinate:
    """
    A single WGS84 point.

    Longitude and latitude are both None until a string or number pair has
    been read successfully. Every read clears the previous value first, so a
    failed read leaves the coordinate empty.
    """

    def __init__(self, lon=None, lat=None):
        self._lon = None
        self._lat = None
        self._source_text = ""

        if lon is not None or lat is not None:
            if lon is None or lat is None:
                raise ValueError("lon and lat must be given together")
            self.read_numbers(lon, lat)

    def __repr__(self):
        return "Coordinate(lon={!r}, lat={!r})".format(self._lon, self._lat)

    def __str__(self):
        if self.is_empty:
            return "POINT EMPTY"
        return self.to_wkt()

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (self._lon, self._lat) == (other._lon, other._lat)

    __hash__ = None

    @property
    def longitude(self):
        return self._lon

    @property
    def latitude(self):
        return self._lat

    @property
    def source_text(self):
        """Raw input string of the last successful parse, "" otherwise"""
        return self._source_text

    @property
    def is_empty(self):
        return self._lon is None

    def clear(self):
        self._lon = None
        self._lat = None
        self._source_text = ""

    def parse_string(self, text):
        """
        Read a coordinate string in sexagesimal or decimal notation.

        Sexagesimal notation is tried first, then decimal. Decimal pairs are
        always read as latitude then longitude, use swap() to correct a pair
        given the other way around.

        Returns self. Raises errors.InvalidCoordinateFormat if text matches
        neither notation.
        """
        self.clear()

        if geo.normalize(text) is None:
            logger.debug("refusing to parse empty coordinate string")
            raise errors.InvalidCoordinateFormat("Empty coordinate string")

        tokens = geo.match_sexagesimal(text)
        if tokens is not None:
            lat, lon = geo.sexagesimal2dd(tokens)
        else:
            pair = geo.match_decimal(text)
            if pair is None:
                logger.debug("'%s' is not a valid coordinate string", text)
                raise errors.InvalidCoordinateFormat(
                    "Input string '{}' is not a valid coordinate string".format(text)
                )
            lat, lon = pair

        self._lon = lon
        self._lat = lat
        self._source_text = str(text)
        return self

    def read_numbers(self, lon, lat):
        """
        Read a longitude, latitude pair of decimal degrees.

        Returns self. Raises errors.LatitudeOutOfRange or
        errors.LongitudeOutOfRange.
        """
        self.clear()
        lon = _to_float(lon, "Longitude", errors.LongitudeOutOfRange)
        lat = _to_float(lat, "Latitude", errors.LatitudeOutOfRange)
        check_latitude(lat)
        check_longitude(lon)
        self._lon = lon
        self._lat = lat
        return self

    def swap(self):
        """
        Exchange longitude and latitude in place.

        Returns self. An empty coordinate is left empty. Raises
        errors.LatitudeOutOfRange without changing anything if the current
        longitude can't be a latitude.
        """
        if self.is_empty:
            return self
        check_latitude(self._lon)
        self._lon, self._lat = self._lat, self._lon
        return self

    def to_decimal_string(self, order=DEFAULT_DECIMAL_ORDER):
        """
        Space separated decimal degrees.

        order is "lat-lon" (or "yx") or "lon-lat" (or "xy"). The default is
        "lat-lon", the order parse_string reads decimal pairs in. Merkator for
        JavaScript defaulted to "xy" (longitude first), pass order="xy" for
        that output.
        """
        lon_first = decimal_order(order)
        self._check_not_empty("decimal string")
        if lon_first:
            return "{} {}".format(self._lon, self._lat)
        return "{} {}".format(self._lat, self._lon)

    def to_sexagesimal_string(self, precision=DEFAULT_SECONDS_PRECISION):
        """Latitude then longitude as degrees, minutes, seconds and hemisphere."""
        self._check_not_empty("sexagesimal string")
        return "{} {}".format(
            geo.format_dms(self._lat, "lat", precision=precision),
            geo.format_dms(self._lon, "lon", precision=precision)
        )

    def to_wkt(self):
        """Well-Known Text point, e.g. POINT(-101.21354 34.45456)"""
        self._check_not_empty("WKT string")
        return "POINT({} {})".format(self._lon, self._lat)

    @staticmethod
    def is_valid_sexagesimal_string(text):
        return geo.is_sexagesimal(text)

    @staticmethod
    def is_valid_decimal_string(text):
        return geo.is_decimal(text)

    def _check_not_empty(self, what):
        if self.is_empty:
            logger.debug("cannot build %s from empty coordinate", what)
            raise errors.EmptyCoordinate(
                "Cannot build {} from empty coordinate value".format(what)
            )


def parse(text):
    """New Coordinate from a sexagesimal or decimal coordinate string"""
    return Coordinate().parse_string(text)


def from_numbers(lon, lat):
    """New Coordinate from longitude and latitude decimal degrees"""
    return Coordinate().read_numbers(lon, lat)


def decimal_order(order):
    """True if order puts longitude first, raise ValueError on unknown order"""
    try:
        return DECIMAL_ORDERS[order.lower()]
    except (AttributeError, KeyError) as e:
        raise ValueError(
            "order must be one of {}, got '{}'".format(list(DECIMAL_ORDERS), order)
        ) from e


def check_latitude(lat):
    # Written as "not <=" so NaN is rejected too
    if not abs(lat) <= geo.MAX_LAT:
        logger.debug("latitude %s out of range", lat)
        raise errors.LatitudeOutOfRange(
            "Latitude value cannot be higher than {}, got {}".format(geo.MAX_LAT, lat)
        )


def check_longitude(lon):
    if not abs(lon) <= geo.MAX_LON:
        logger.debug("longitude %s out of range", lon)
        raise errors.LongitudeOutOfRange(
            "Longitude value cannot be higher than {}, got {}".format(geo.MAX_LON, lon)
        )


def _to_float(value, name, exc_class):
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise exc_class("{} value '{}' is not a number".format(name, value)) from e
