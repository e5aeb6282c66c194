"""
Centralized configuration for the OpenWeatherMap client.

All magic values, API URLs, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# API Base URLs
# -----------------------------------------------------------------------------

API_ENDPOINT = os.environ.get(
    "OPENWEATHER_API_ENDPOINT",
    "https://api.openweathermap.org/",
)

GEO_PATH = "geo/1.0/"
DATA_PATH = "data/2.5/onecall"

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = float(os.environ.get("OPENWEATHER_HTTP_TIMEOUT", "30.0"))

# -----------------------------------------------------------------------------
# Environment variables read by OpenWeatherAPI.from_env()
# -----------------------------------------------------------------------------

ENV_API_KEY = "OPENWEATHER_API_KEY"
ENV_LANGUAGE = "OPENWEATHER_LANGUAGE"
ENV_UNITS = "OPENWEATHER_UNITS"
ENV_LOCATION = "OPENWEATHER_LOCATION"

# -----------------------------------------------------------------------------
# Supported Values
# Reference: https://openweathermap.org/current#multi
# -----------------------------------------------------------------------------

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "af", "al", "ar", "az", "bg", "ca", "cz", "da", "de", "el",
    "en", "eu", "fa", "fi", "fr", "gl", "he", "hi", "hr", "hu",
    "id", "it", "ja", "kr", "la", "lt", "mk", "no", "nl", "pl",
    "pt", "pt_br", "ro", "ru", "sv", "se", "sk", "sl", "sp", "es",
    "sr", "th", "tr", "ua", "uk", "vi", "zh_cn", "zh_tw", "zu",
})

SUPPORTED_UNITS: frozenset[str] = frozenset({"standard", "metric", "imperial"})

# -----------------------------------------------------------------------------
# Forecast Sections
# Each call asks the One Call API to omit the sections it will not format.
# -----------------------------------------------------------------------------

EXCLUDE_FOR_CURRENT = ("alerts", "minutely", "hourly", "daily")
EXCLUDE_FOR_MINUTELY = ("alerts", "current", "hourly", "daily")
EXCLUDE_FOR_HOURLY = ("alerts", "current", "minutely", "daily")
EXCLUDE_FOR_DAILY = ("alerts", "current", "minutely", "hourly")
EXCLUDE_FOR_ALERTS = ("current", "minutely", "hourly", "daily")
