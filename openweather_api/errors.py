"""
Client Failure Types

Canonical failure taxonomy for the OpenWeatherMap client.
All failures raised by the client MUST be instances of these types.
"""

from __future__ import annotations

from typing import Any


class WeatherClientError(Exception):
    """Base class for all client failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class OptionsValidationError(WeatherClientError):
    """
    A configuration value was rejected.

    - Fatality: Fatal to the call. Raised before any network I/O.
    - Recovery: None. The caller must fix the input.
    """

    failure_category = "validation_error"


class InvalidKey(OptionsValidationError):
    """The API key is empty or missing."""


class UnsupportedLanguage(OptionsValidationError):
    """The language code is not one the API accepts."""


class UnsupportedUnits(OptionsValidationError):
    """Units must be standard, metric or imperial."""


class InvalidCoordinates(OptionsValidationError):
    """Latitude or longitude is not a number or is out of range."""


class InvalidLocationName(OptionsValidationError):
    """The location name is empty or not a string."""


class MissingLocation(OptionsValidationError):
    """Neither coordinates nor a location name are configured."""


class MalformedOptionsArgument(OptionsValidationError):
    """Options were given as something other than a mapping."""


class UnknownParameter(OptionsValidationError):
    """An options mapping contained a key the client does not know."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Unknown parameter: {parameter}")
        self.parameter = parameter


class UnknownLocation(WeatherClientError):
    """
    Geocoding returned no match for a location name.

    - Fatality: Fatal to the call. The weather fetch is never attempted.
    """

    failure_category = "unknown_location"

    def __init__(self, location_name: str) -> None:
        super().__init__(f"Unknown location name: {location_name}")
        self.location_name = location_name


class UpstreamError(WeatherClientError):
    """
    The OpenWeatherMap API returned an error body or an unreadable response.

    - Fatality: Fatal to the call. No partial result is returned.
    - Representation: message is the serialized error body when there is one.
    """

    failure_category = "upstream_failure"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.body = body


class TransportFailure(UpstreamError):
    """
    Communication with the API failed before any response arrived.

    Timeouts and connection errors land here; there is no body to inspect.
    """

    failure_category = "transport_failure"
