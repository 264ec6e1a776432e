"""
OpenWeather air pollution API client package
"""

from .errors import (
    PollutionClientError,
    InvalidKeyError,
    InvalidOptionError,
    InvalidHttpClientError
)
from .models import (
    Coordinates,
    PollutionQuery,
    HistoricalPollutionQuery,
    PollutionComponents,
    PollutionEntry,
    PollutionResult
)
from .pollution_client import (
    PollutionClient,
    ClientSettings,
    ClientOption,
    HttpClient,
    with_http_client,
    with_timeout,
    with_base_url
)

__all__ = [
    'PollutionClientError',
    'InvalidKeyError',
    'InvalidOptionError',
    'InvalidHttpClientError',
    'Coordinates',
    'PollutionQuery',
    'HistoricalPollutionQuery',
    'PollutionComponents',
    'PollutionEntry',
    'PollutionResult',
    'PollutionClient',
    'ClientSettings',
    'ClientOption',
    'HttpClient',
    'with_http_client',
    'with_timeout',
    'with_base_url'
]
