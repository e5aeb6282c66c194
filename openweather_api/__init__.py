"""OpenWeatherMap One Call client package."""

from .client import OpenWeatherAPI
from .config import (
    API_ENDPOINT,
    HTTP_TIMEOUT_SECONDS,
    SUPPORTED_LANGUAGES,
    SUPPORTED_UNITS,
)
from .errors import (
    InvalidCoordinates,
    InvalidKey,
    InvalidLocationName,
    MalformedOptionsArgument,
    MissingLocation,
    OptionsValidationError,
    TransportFailure,
    UnknownLocation,
    UnknownParameter,
    UnsupportedLanguage,
    UnsupportedUnits,
    UpstreamError,
    WeatherClientError,
)
from .formatters import format_current, format_daily, format_hourly, format_minutely
from .models import (
    CallOptions,
    Coordinates,
    EffectiveOptions,
    EverythingDict,
    GlobalOptions,
    WeatherDict,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "OpenWeatherAPI",
    # Config
    "API_ENDPOINT",
    "HTTP_TIMEOUT_SECONDS",
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_UNITS",
    # Errors
    "WeatherClientError",
    "OptionsValidationError",
    "InvalidKey",
    "UnsupportedLanguage",
    "UnsupportedUnits",
    "InvalidCoordinates",
    "InvalidLocationName",
    "MissingLocation",
    "MalformedOptionsArgument",
    "UnknownParameter",
    "UnknownLocation",
    "UpstreamError",
    "TransportFailure",
    # Formatters
    "format_current",
    "format_minutely",
    "format_hourly",
    "format_daily",
    # Models
    "Coordinates",
    "GlobalOptions",
    "CallOptions",
    "EffectiveOptions",
    "WeatherDict",
    "EverythingDict",
]
