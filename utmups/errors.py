"""Errors raised when caller supplied coordinates are rejected."""


class UTMUPSError(ValueError):
    """Base class for UTM/UPS conversion errors."""


class InputRangeError(UTMUPSError):
    """A latitude, longitude or zone is outside its legal domain."""


class OutOfRangeError(UTMUPSError):
    """Projected coordinates are outside the legal envelope for their zone.

    This is raised for the input of a reverse conversion, and for the output of a
    forward conversion, e.g. when a caller forces a zone far from the point.
    """
