"""WMO weather-code tables used by the Open-Meteo API.

Each code belongs to exactly one bucket; a bucket carries one icon and one
description per code.  Codes outside the table fall back to
``DEFAULT_ICON`` / ``UNKNOWN_DESCRIPTION``.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

DEFAULT_ICON = "🌤️"
UNKNOWN_DESCRIPTION = "Condición desconocida"


@dataclass(frozen=True)
class WeatherBucket:
    name: str
    icon: str
    descriptions: Dict[int, str]


WEATHER_BUCKETS: Tuple[WeatherBucket, ...] = (
    WeatherBucket("clear", "☀️", {0: "Cielo despejado"}),
    WeatherBucket(
        "cloudy",
        "⛅",
        {1: "Principalmente despejado", 2: "Parcialmente nublado", 3: "Nublado"},
    ),
    WeatherBucket("fog", "🌫️", {45: "Niebla", 48: "Niebla con escarcha"}),
    WeatherBucket(
        "drizzle",
        "🌦️",
        {51: "Llovizna ligera", 53: "Llovizna moderada", 55: "Llovizna intensa"},
    ),
    WeatherBucket(
        "freezing_drizzle",
        "🌨️",
        {56: "Llovizna helada ligera", 57: "Llovizna helada intensa"},
    ),
    WeatherBucket(
        "rain",
        "🌧️",
        {61: "Lluvia ligera", 63: "Lluvia moderada", 65: "Lluvia intensa"},
    ),
    WeatherBucket(
        "freezing_rain",
        "🌨️",
        {66: "Lluvia helada ligera", 67: "Lluvia helada intensa"},
    ),
    WeatherBucket(
        "snow",
        "❄️",
        {71: "Nevada ligera", 73: "Nevada moderada", 75: "Nevada intensa"},
    ),
    WeatherBucket("snow_grains", "🌨️", {77: "Granizo blando"}),
    WeatherBucket(
        "rain_showers",
        "🌦️",
        {80: "Chubascos ligeros", 81: "Chubascos moderados", 82: "Chubascos intensos"},
    ),
    WeatherBucket(
        "snow_showers",
        "🌨️",
        {85: "Chubascos de nieve ligeros", 86: "Chubascos de nieve intensos"},
    ),
    WeatherBucket("thunderstorm", "⛈️", {95: "Tormenta"}),
    WeatherBucket(
        "thunderstorm_hail",
        "⛈️",
        {96: "Tormenta con granizo ligero", 99: "Tormenta con granizo intenso"},
    ),
)

_BUCKET_BY_CODE: Dict[int, WeatherBucket] = {
    code: bucket for bucket in WEATHER_BUCKETS for code in bucket.descriptions
}


def bucket_for(code: int) -> Optional[WeatherBucket]:
    return _BUCKET_BY_CODE.get(code)


def icon_for(code: int) -> str:
    bucket = bucket_for(code)
    return bucket.icon if bucket else DEFAULT_ICON


def description_for(code: int) -> str:
    bucket = bucket_for(code)
    return bucket.descriptions[code] if bucket else UNKNOWN_DESCRIPTION
