"""
OpenWeatherMap One Call Client

Wraps the One Call and Geocoding APIs behind convenience coroutines.

Every weather coroutine follows the same path:
1. Validate per-call options (fail before any I/O)
2. Merge them onto the global defaults
3. Resolve the location to coordinates (geocoding a name if needed)
4. Build the URL, asking upstream to exclude unused sections
5. Fetch and classify the response
6. Format the payload into weather records
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from .config import (
    ENV_API_KEY,
    ENV_LANGUAGE,
    ENV_LOCATION,
    ENV_UNITS,
    EXCLUDE_FOR_ALERTS,
    EXCLUDE_FOR_CURRENT,
    EXCLUDE_FOR_DAILY,
    EXCLUDE_FOR_HOURLY,
    EXCLUDE_FOR_MINUTELY,
    HTTP_TIMEOUT_SECONDS,
)
from .errors import (
    MalformedOptionsArgument,
    MissingLocation,
    TransportFailure,
    UnknownLocation,
    UpstreamError,
)
from .formatters import format_current, format_daily, format_hourly, format_minutely
from .merge import merge_records
from .models import (
    CallOptions,
    Coordinates,
    EffectiveOptions,
    EverythingDict,
    GlobalOptions,
    WeatherDict,
)
from .options import resolve_options
from .urls import (
    build_direct_geocoding_url,
    build_onecall_url,
    build_reverse_geocoding_url,
)
from .validation import (
    evaluate_coordinates,
    evaluate_key,
    evaluate_language,
    evaluate_location_name,
    evaluate_units,
    parse_options,
)

logger = logging.getLogger(__name__)

_APPID_PATTERN = re.compile(r"(appid=)[^&]*")


def _mask_key(url: str) -> str:
    return _APPID_PATTERN.sub(r"\1***", url)


class OpenWeatherAPI:
    """
    Async client for the OpenWeatherMap One Call API.

    Holds global defaults (key, language, units, location) that every call
    starts from. Each coroutine also accepts an ``options`` mapping with the
    same keys as the constructor; those overrides apply to that call only
    and never touch the global defaults.

    A global location name is geocoded once and the coordinates are cached
    until the global location changes. A per-call location name is geocoded
    on every call.

    Example:
        async with OpenWeatherAPI({"key": "...", "location_name": "Paris"}) as api:
            current = await api.get_current({"units": "metric"})
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        call_options = parse_options(options)
        self._global_options = GlobalOptions(**call_options.model_dump())
        self._location_cache: Coordinates | None = None
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_env(
        cls,
        overrides: Mapping[str, Any] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> OpenWeatherAPI:
        """
        Build a client from ``OPENWEATHER_*`` environment variables.

        Unset variables are skipped; ``overrides`` win over the environment.
        """
        options: dict[str, Any] = {}
        for option, variable in (
            ("key", ENV_API_KEY),
            ("language", ENV_LANGUAGE),
            ("units", ENV_UNITS),
            ("location_name", ENV_LOCATION),
        ):
            value = os.environ.get(variable)
            if value:
                options[option] = value
        if overrides is not None:
            if not isinstance(overrides, Mapping):
                raise MalformedOptionsArgument(
                    f"Provide a mapping as options, got {type(overrides).__name__}"
                )
            if "coordinates" in overrides:
                options.pop("location_name", None)
            options.update(overrides)
        return cls(options, http_client=http_client)

    # -------------------------------------------------------------------------
    # HTTP client lifecycle
    # -------------------------------------------------------------------------

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client (injected clients are left open)."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> OpenWeatherAPI:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Global options
    # -------------------------------------------------------------------------

    def get_global_options(self) -> GlobalOptions:
        """Return a copy of the global defaults."""
        return self._global_options.model_copy(deep=True)

    def set_key(self, key: str) -> None:
        self._global_options.key = evaluate_key(key)

    def get_key(self) -> str | None:
        return self._global_options.key

    def set_language(self, language: str) -> None:
        """Set the global language; see ``config.SUPPORTED_LANGUAGES``."""
        self._global_options.language = evaluate_language(language)

    def get_language(self) -> str | None:
        return self._global_options.language

    def set_units(self, units: str) -> None:
        """Set global units: standard, metric or imperial."""
        self._global_options.units = evaluate_units(units)

    def get_units(self) -> str | None:
        return self._global_options.units

    def set_location_by_name(self, name: str) -> None:
        """Set the global location by name; clears coordinates and the cache."""
        self._global_options.location_name = evaluate_location_name(name)
        self._global_options.coordinates = None
        self._location_cache = None

    def get_location_name(self) -> str | None:
        return self._global_options.location_name

    def set_location_by_coordinates(self, lat: float, lon: float) -> None:
        """Set the global location by coordinates; clears the location name."""
        self._global_options.coordinates = evaluate_coordinates(lat, lon)
        self._global_options.location_name = None
        self._location_cache = None

    def get_coordinates(self) -> Coordinates | None:
        """Global coordinates, either set explicitly or cached from geocoding."""
        return self._global_options.coordinates or self._location_cache

    # -------------------------------------------------------------------------
    # Weather getters
    # -------------------------------------------------------------------------

    async def get_current(
        self, options: Mapping[str, Any] | None = None
    ) -> WeatherDict | None:
        """Current weather, or ``None`` if the API returned no current section."""
        payload = await self._fetch_onecall(options, EXCLUDE_FOR_CURRENT)
        return format_current(payload)

    async def get_minutely_forecast(
        self,
        limit: int | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> list[WeatherDict]:
        """
        Minute-by-minute precipitation for the next hour.

        Empty if the API returned no minutely data for this location.
        """
        payload = await self._fetch_onecall(options, EXCLUDE_FOR_MINUTELY)
        return format_minutely(payload, limit)

    async def get_hourly_forecast(
        self,
        limit: int | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> list[WeatherDict]:
        payload = await self._fetch_onecall(options, EXCLUDE_FOR_HOURLY)
        return format_hourly(payload, limit)

    async def get_daily_forecast(
        self,
        limit: int | None = None,
        include_today: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> list[WeatherDict]:
        """
        Daily forecast, one record per day.

        The first upstream entry is today; it is dropped unless
        ``include_today`` is true.
        """
        payload = await self._fetch_onecall(options, EXCLUDE_FOR_DAILY)
        if not include_today:
            payload = {**payload, "daily": (payload.get("daily") or [])[1:]}
        return format_daily(payload, limit)

    async def get_today(
        self, options: Mapping[str, Any] | None = None
    ) -> WeatherDict | None:
        """Today's daily summary. Not the same thing as ``get_current``."""
        forecast = await self.get_daily_forecast(1, True, options)
        return forecast[0] if forecast else None

    async def get_alerts(
        self, options: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]] | None:
        """Government weather alerts as returned upstream, or ``None``."""
        payload = await self._fetch_onecall(options, EXCLUDE_FOR_ALERTS)
        return payload.get("alerts")

    async def get_everything(
        self, options: Mapping[str, Any] | None = None
    ) -> EverythingDict:
        """Every section in one request, formatted."""
        payload = await self._fetch_onecall(options, None)
        return {
            "lat": payload.get("lat"),
            "lon": payload.get("lon"),
            "timezone": payload.get("timezone"),
            "timezone_offset": payload.get("timezone_offset"),
            "current": format_current(payload),
            "minutely": format_minutely(payload),
            "hourly": format_hourly(payload),
            "daily": format_daily(payload),
            "alerts": payload.get("alerts"),
        }

    async def get_location(
        self, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Reverse-geocode the effective location; ``None`` if nothing matches."""
        effective, coordinates = await self._prepare(options)
        data = await self._fetch(build_reverse_geocoding_url(coordinates, effective.key))
        return data[0] if data else None

    # -------------------------------------------------------------------------
    # Utilities
    # -------------------------------------------------------------------------

    def merge_weathers(self, weathers: Sequence[WeatherDict]) -> WeatherDict:
        """
        Deep-merge formatted weather records into one.

        On conflicting fields the earliest record in ``weathers`` wins.
        The inputs are left untouched.
        """
        if not isinstance(weathers, (list, tuple)):
            raise MalformedOptionsArgument("Provide a list of weather records")
        return merge_records(list(weathers))  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _prepare(
        self, options: Mapping[str, Any] | None
    ) -> tuple[EffectiveOptions, Coordinates]:
        # Validation and merging are synchronous; nothing below them runs
        # unless the options are sound.
        call_options = parse_options(options)
        effective = resolve_options(self._global_options, call_options)
        coordinates = await self._resolve_location(effective, call_options)
        return effective, coordinates

    async def _resolve_location(
        self, effective: EffectiveOptions, call_options: CallOptions
    ) -> Coordinates:
        if effective.coordinates is not None:
            return effective.coordinates
        if call_options.location_name is not None:
            return await self._geocode(call_options.location_name, effective.key)
        return await self._uncache_location(effective.location_name, effective.key)

    async def _uncache_location(self, name: str | None, key: str) -> Coordinates:
        """Resolve the global location name, reusing cached coordinates."""
        if self._location_cache is not None:
            logger.debug("Using cached coordinates for %r", self._global_options.location_name)
            return self._location_cache

        if name is None:
            raise MissingLocation(
                "No location configured; set coordinates or a location name"
            )
        coordinates = await self._geocode(name, key)
        # The global location may have been reassigned while we awaited.
        if self._global_options.location_name == name:
            self._location_cache = coordinates
        return coordinates

    async def _geocode(self, name: str, key: str) -> Coordinates:
        logger.debug("Geocoding location name %r", name)
        data = await self._fetch(build_direct_geocoding_url(name, key))
        if not data:
            raise UnknownLocation(name)
        place = data[0]
        return Coordinates(lat=place["lat"], lon=place["lon"])

    async def _fetch_onecall(
        self,
        options: Mapping[str, Any] | None,
        exclude: tuple[str, ...] | None,
    ) -> dict[str, Any]:
        effective, coordinates = await self._prepare(options)
        return await self._fetch(build_onecall_url(effective, coordinates, exclude))

    async def _fetch(self, url: str) -> Any:
        """
        GET ``url`` and classify the result.

        Non-2xx responses are not errors by themselves: OpenWeatherMap
        reports failures as a JSON body with a ``cod`` field, which is
        what gets checked. There is no retry.

        Raises:
            TransportFailure: If no response arrived at all.
            UpstreamError: If the body is not JSON or carries ``cod``.
        """
        logger.debug("GET %s", _mask_key(url))
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise TransportFailure(f"HTTP error: {e!s}", cause=e) from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Non-JSON response ({response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
                cause=e,
            ) from e

        if isinstance(data, dict) and data.get("cod"):
            logger.debug("Upstream error %s: %s", response.status_code, data)
            raise UpstreamError(
                json.dumps(data),
                status_code=response.status_code,
                body=data,
            )
        return data
