"""Endpoint templates for the OpenWeather air pollution API."""
import numpy as np

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/air_pollution"

POLLUTION_URL = "{base}?appid={key}&lat={lat}&lon={lon}"
FORECAST_POLLUTION_URL = "{base}/forecast?appid={key}&lat={lat}&lon={lon}"
HISTORICAL_POLLUTION_URL = "{base}/history?appid={key}&lat={lat}&lon={lon}&start={start}&end={end}"


def format_coordinate(value: float) -> str:
    """Shortest positional decimal text for a float: 0.0 -> "0", 1e-05 -> "0.00001"."""
    return np.format_float_positional(float(value), unique=True, trim="-")


def redact_key(url: str, key: str) -> str:
    return url.replace(f"appid={key}", "appid=***")
