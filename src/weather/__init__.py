"""Weather module -- Open-Meteo geocoding, current conditions, WMO code tables."""

from src.weather.codes import description_for, icon_for
from src.weather.models import GeocodeCandidate, WeatherReading
from src.weather.open_meteo import OpenMeteoWeather

__all__ = [
    "GeocodeCandidate",
    "OpenMeteoWeather",
    "WeatherReading",
    "description_for",
    "icon_for",
]
