"""Unit tests for CLI dispatch."""

from unittest.mock import patch

from main import build_parser, run_command


def test_search_command_joins_words():
    args = build_parser().parse_args(["search", "open", "source"])
    with patch("main.DuckDuckGoSearch") as mock_cls:
        mock_cls.return_value.search.return_value = "ok"
        assert run_command(args) == "ok"
    mock_cls.return_value.search.assert_called_once_with("open source")


def test_weather_by_name():
    args = build_parser().parse_args(["weather", "San", "Sebastián"])
    with patch("main.OpenMeteoWeather") as mock_cls:
        run_command(args)
    mock_cls.return_value.lookup_by_name.assert_called_once_with("San Sebastián")


def test_weather_by_coordinates():
    args = build_parser().parse_args(
        ["weather", "--lat", "43.3183", "--lon", "-1.9812", "--name", "Donostia"]
    )
    with patch("main.OpenMeteoWeather") as mock_cls:
        run_command(args)
    mock_cls.return_value.current_weather.assert_called_once_with(43.3183, -1.9812, "Donostia")


def test_coords_command():
    args = build_parser().parse_args(["coords", "Madrid"])
    with patch("main.OpenMeteoWeather") as mock_cls:
        run_command(args)
    mock_cls.return_value.resolve_coordinates.assert_called_once_with("Madrid")


def test_weather_without_location_or_coordinates():
    args = build_parser().parse_args(["weather"])
    with patch("main.OpenMeteoWeather"):
        assert run_command(args).startswith("❌")
