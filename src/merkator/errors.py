class MerkatorError(Exception):
    """Base class for all merkator exceptions"""
    pass


class InvalidCoordinateFormat(MerkatorError, ValueError):
    """Input string matched neither the sexagesimal nor the decimal grammar"""
    pass


class OutOfRange(MerkatorError, ValueError):
    """Numeric input outside of WGS84 latitude or longitude bounds"""
    pass


class LatitudeOutOfRange(OutOfRange):
    """Latitude magnitude greater than 90"""
    pass


class LongitudeOutOfRange(OutOfRange):
    """Longitude magnitude greater than 180"""
    pass


class EmptyCoordinate(MerkatorError):
    """Coordinate formatted before any value was stored"""
    pass
