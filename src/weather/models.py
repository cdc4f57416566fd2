"""Domain model for the Open-Meteo geocoding and forecast responses."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.weather.codes import description_for, icon_for

# Fields requested from the forecast endpoint's ``current`` block.
CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)


@dataclass
class GeocodeCandidate:
    """One match from the geocoding endpoint, ranked by the upstream."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "GeocodeCandidate":
        return cls(
            name=str(item["name"]),
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
            country=item.get("country") or None,
        )


def parse_candidates(payload: Dict[str, Any]) -> List[GeocodeCandidate]:
    """Decode the ``results`` array; the key is absent when nothing matched."""
    return [GeocodeCandidate.from_dict(item) for item in payload.get("results") or []]


@dataclass
class WeatherReading:
    """Current conditions at one point; icon and description are derived."""

    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_kmh: float
    weather_code: int

    @property
    def icon(self) -> str:
        return icon_for(self.weather_code)

    @property
    def description(self) -> str:
        return description_for(self.weather_code)

    @classmethod
    def from_current(cls, current: Dict[str, Any]) -> "WeatherReading":
        return cls(
            temperature_c=float(current["temperature_2m"]),
            feels_like_c=float(current["apparent_temperature"]),
            humidity_pct=int(current["relative_humidity_2m"]),
            wind_speed_kmh=float(current["wind_speed_10m"]),
            weather_code=int(current["weather_code"]),
        )
