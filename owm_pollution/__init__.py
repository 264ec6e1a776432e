"""
Client for the OpenWeather air pollution API
"""

from .api_client import (
    PollutionClient,
    PollutionClientError,
    InvalidKeyError,
    InvalidOptionError,
    InvalidHttpClientError,
    Coordinates,
    PollutionQuery,
    HistoricalPollutionQuery,
    PollutionEntry,
    PollutionResult,
    with_http_client,
    with_timeout,
    with_base_url
)
from .config import load_config, get_api_key

__all__ = [
    'PollutionClient',
    'PollutionClientError',
    'InvalidKeyError',
    'InvalidOptionError',
    'InvalidHttpClientError',
    'Coordinates',
    'PollutionQuery',
    'HistoricalPollutionQuery',
    'PollutionEntry',
    'PollutionResult',
    'with_http_client',
    'with_timeout',
    'with_base_url',
    'load_config',
    'get_api_key'
]
