"""Open-Meteo geocoding and current-weather lookups (no API key needed).

Two stages share the same shape: fetch, decode the JSON envelope into
``src.weather.models`` objects, render text.  Every public method returns a
string, including on failure.
"""

import json
from typing import Any, Dict, List, Optional

import httpx

from src.utils.config import settings
from src.utils.errors import EmptyResultError, MalformedResponseError, UpstreamStatusError
from src.utils.logger import get_logger
from src.weather.formatter import format_candidates, format_coordinate, format_weather
from src.weather.models import (
    CURRENT_FIELDS,
    GeocodeCandidate,
    WeatherReading,
    parse_candidates,
)
from src.web.fetcher import fetch_text

log = get_logger(__name__)


def _decode(body: str) -> Dict[str, Any]:
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(f"invalid JSON: {e}", body) from e
    if not isinstance(payload, dict):
        raise MalformedResponseError("expected a JSON object", body)
    return payload


class OpenMeteoWeather:
    """Geocoding + current conditions through the Open-Meteo APIs."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        geocoding_url: str | None = None,
        weather_url: str | None = None,
    ):
        self._client = client
        self._geocoding_url = geocoding_url or settings.geocoding_url
        self._weather_url = weather_url or settings.weather_url

    # ---- Geocoding stage ---------------------------------------------------

    def geocode(self, location: str, count: int) -> List[GeocodeCandidate]:
        """Return up to *count* ranked candidates for *location*.

        Raises ``EmptyResultError`` when nothing matched and
        ``MalformedResponseError`` when the body cannot be decoded.
        """
        body = fetch_text(
            self._geocoding_url,
            params={
                "name": location,
                "count": str(count),
                "language": settings.geocoding_language,
                "format": "json",
            },
            client=self._client,
        )
        payload = _decode(body)
        try:
            candidates = parse_candidates(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"unexpected candidate shape: {e}", body) from e
        if not candidates:
            raise EmptyResultError(f"no candidates for {location!r}", body)
        log.info("Geocoded '%s' -> %d candidates", location, len(candidates))
        return candidates

    def resolve_coordinates(self, location: str) -> str:
        """Coordinates of the top matches for *location*, as text."""
        try:
            candidates = self.geocode(location, settings.geocoding_candidates)
        except UpstreamStatusError as e:
            return (
                f"❌ Error en la API de geocodificación para '{location}' (código: {e.status_code})\n"
                f"URL: {e.url}"
            )
        except EmptyResultError as e:
            return (
                f"❌ No se encontraron coordenadas para '{location}'\n"
                f"Respuesta de la API: {e.raw_body}"
            )
        except MalformedResponseError as e:
            log.warning("Malformed geocoding response for '%s': %s", location, e)
            return (
                f"❌ No se pudieron procesar las coordenadas para '{location}'\n"
                f"Respuesta de la API: {e.raw_body}"
            )
        except Exception as e:
            log.exception("Geocoding failed for '%s'", location)
            return (
                f"❌ Error al obtener coordenadas para '{location}': {e}\n"
                f"Tipo de error: {type(e).__name__}"
            )
        return format_candidates(location, candidates, limit=settings.max_displayed_candidates)

    def _geocode_top(self, location: str) -> Optional[GeocodeCandidate]:
        """Best-ranked candidate, or None on any failure."""
        try:
            return self.geocode(location, 1)[0]
        except Exception as e:
            log.info("No geocoding match for '%s' (%s)", location, type(e).__name__)
            return None

    # ---- Weather stage -----------------------------------------------------

    def fetch_reading(self, latitude: float, longitude: float) -> WeatherReading:
        body = fetch_text(
            self._weather_url,
            params={
                "latitude": format_coordinate(latitude),
                "longitude": format_coordinate(longitude),
                "current": ",".join(CURRENT_FIELDS),
                "timezone": "auto",
            },
            client=self._client,
        )
        current = _decode(body).get("current")
        if not isinstance(current, dict):
            raise MalformedResponseError("missing 'current' block", body)
        try:
            return WeatherReading.from_current(current)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"incomplete 'current' block: {e}", body) from e

    def current_weather(self, latitude: float, longitude: float, display_name: str = "") -> str:
        """Current conditions at the given coordinates, as text."""
        try:
            reading = self.fetch_reading(latitude, longitude)
        except UpstreamStatusError as e:
            return f"❌ Error en la API del clima (código: {e.status_code})\nURL: {e.url}"
        except MalformedResponseError as e:
            log.warning("Malformed weather response: %s", e)
            return (
                f"❌ No se pudieron procesar los datos del clima\n"
                f"Respuesta de la API: {e.raw_body}"
            )
        except Exception as e:
            log.exception("Weather lookup failed for (%s, %s)", latitude, longitude)
            return (
                f"❌ Error al obtener el clima para las coordenadas "
                f"({format_coordinate(latitude)}°, {format_coordinate(longitude)}°): {e}\n"
                f"Tipo de error: {type(e).__name__}"
            )
        return format_weather(reading, latitude, longitude, display_name)

    # ---- Composed ----------------------------------------------------------

    def lookup_by_name(self, location: str) -> str:
        """Geocode *location*, then report its current weather.

        Ambiguous names resolve to whatever the geocoder ranks first; callers
        wanting another match should pass e.g. the country as well.
        """
        try:
            place = self._geocode_top(location)
            if place is None:
                return (
                    f"❌ No se pudieron encontrar las coordenadas para '{location}'.\n"
                    f"Intenta ser más específico (ej: 'Madrid, España' en lugar de solo 'Madrid')."
                )
            return self.current_weather(place.latitude, place.longitude, place.display_name)
        except Exception as e:
            log.exception("Weather lookup failed for '%s'", location)
            return (
                f"❌ Error al obtener el clima para '{location}': {e}\n"
                f"Tipo de error: {type(e).__name__}"
            )
