"""Rendering of geocoding candidates and weather readings."""

from typing import List

from src.weather.models import GeocodeCandidate, WeatherReading


def format_coordinate(value: float) -> str:
    """Four decimals with a '.' separator, whatever the host locale."""
    return f"{value:.4f}"


def format_candidates(location: str, candidates: List[GeocodeCandidate], limit: int = 3) -> str:
    lines = [f"📍 Coordenadas encontradas para '{location}':"]
    shown = candidates[:limit]
    for i, place in enumerate(shown, 1):
        lines.append(f"{i}. {place.display_name}")
        lines.append(f"   📐 Latitud: {format_coordinate(place.latitude)}°")
        lines.append(f"   📐 Longitud: {format_coordinate(place.longitude)}°")
        if i < len(shown):
            lines.append("")
    return "\n".join(lines)


def format_weather(
    reading: WeatherReading, latitude: float, longitude: float, display_name: str = ""
) -> str:
    lat, lon = format_coordinate(latitude), format_coordinate(longitude)
    label = display_name or f"({lat}°, {lon}°)"
    return (
        f"{reading.icon} Clima actual en {label}:\n"
        f"🌡️ Temperatura: {round(reading.temperature_c, 1)}°C "
        f"(se siente como {round(reading.feels_like_c, 1)}°C)\n"
        f"📝 Descripción: {reading.description}\n"
        f"💧 Humedad: {reading.humidity_pct}%\n"
        f"💨 Viento: {round(reading.wind_speed_kmh, 1)} km/h\n"
        f"📡 Datos de Open Meteo\n"
        f"📍 Coordenadas: {lat}°, {lon}°"
    )
