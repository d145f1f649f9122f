# ABOUTME: Error kinds raised by the lookup stages and reported to the presentation layer.
# ABOUTME: Each exception carries an ErrorKind so failures can be turned into plain values.

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a failed lookup."""

    INPUT = "input"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"


class WeatherLookupError(Exception):
    """Base class for every failure a lookup stage can raise."""

    kind: ErrorKind


class InputError(WeatherLookupError):
    """The place name was empty or whitespace only."""

    kind = ErrorKind.INPUT


class NotFoundError(WeatherLookupError):
    """Geocoding returned no match for the place name."""

    kind = ErrorKind.NOT_FOUND


class TransportError(WeatherLookupError):
    """Network failure or non-success status from a remote API."""

    kind = ErrorKind.TRANSPORT


class MalformedResponseError(WeatherLookupError):
    """The remote API answered, but the body lacks required fields."""

    kind = ErrorKind.MALFORMED_RESPONSE
