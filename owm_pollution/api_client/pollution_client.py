import logging
from contextlib import closing
from typing import Any, Callable, Dict, Optional, Protocol

import requests
from pydantic import BaseModel, ConfigDict, Field

from owm_pollution.api_client.errors import InvalidHttpClientError, InvalidKeyError, InvalidOptionError
from owm_pollution.api_client.models import HistoricalPollutionQuery, PollutionQuery, PollutionResult
from owm_pollution.api_client.urls import (
    DEFAULT_BASE_URL,
    FORECAST_POLLUTION_URL,
    HISTORICAL_POLLUTION_URL,
    POLLUTION_URL,
    format_coordinate,
    redact_key,
)

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpClient(Protocol):
    """The one capability the client needs from its transport."""

    def get(self, url: str) -> Any: ...


class ClientSettings(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    http_client: Any = Field(default_factory=requests.Session)
    # None leaves timeouts to the http client's own setting
    timeout: Optional[float] = None
    default_transport: bool = True
    base_url: str = DEFAULT_BASE_URL


class ClientOption:
    """A named change to ClientSettings, checked when it is applied."""

    def __init__(self, name: str, apply: Callable[[ClientSettings], ClientSettings]):
        self.name = name
        self._apply = apply

    def __call__(self, settings: ClientSettings) -> ClientSettings:
        return self._apply(settings)

    def __repr__(self) -> str:
        return f"ClientOption({self.name})"


def with_http_client(client: Optional[HttpClient]) -> ClientOption:
    """Replace the transport, e.g. a requests.Session with adapters mounted."""

    def apply(settings: ClientSettings) -> ClientSettings:
        if client is None or not callable(getattr(client, "get", None)):
            raise InvalidHttpClientError()
        return settings.model_copy(update={"http_client": client, "default_transport": False})

    return ClientOption("http_client", apply)


def with_timeout(seconds: float) -> ClientOption:
    def apply(settings: ClientSettings) -> ClientSettings:
        if seconds is None or isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
            raise InvalidOptionError(f"invalid timeout: {seconds!r}")
        return settings.model_copy(update={"timeout": float(seconds)})

    return ClientOption("timeout", apply)


def with_base_url(url: str) -> ClientOption:
    def apply(settings: ClientSettings) -> ClientSettings:
        if not isinstance(url, str) or not url.strip():
            raise InvalidOptionError(f"invalid base url: {url!r}")
        return settings.model_copy(update={"base_url": url.strip().rstrip("/")})

    return ClientOption("base_url", apply)


def _check_key(key: Optional[str]) -> str:
    if not isinstance(key, str) or not key.strip():
        raise InvalidKeyError()
    return key.strip()


class PollutionClient:
    """Client for the OpenWeather Air Pollution API.

    Each call makes one blocking GET and returns a fresh PollutionResult;
    nothing from a previous call is kept on the client.
    """

    def __init__(self, api_key: str, *options: ClientOption):
        self.api_key = _check_key(api_key)
        settings = ClientSettings()
        for option in options:
            if not isinstance(option, ClientOption):
                raise InvalidOptionError(f"invalid option: {option!r}")
            settings = option(settings)
        self.settings = settings

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]] = None, *options: ClientOption) -> "PollutionClient":
        """Build a client from the `openweather` section of load_config()."""
        if cfg is None:
            from owm_pollution.config import load_config

            cfg = load_config()
        section = cfg.get("openweather") or {}
        key = section.get("api_key")
        key = "" if key is None else str(key)
        if "${" in key:
            # placeholder left unresolved by load_config
            key = ""
        configured = []
        if section.get("base_url"):
            configured.append(with_base_url(str(section["base_url"])))
        if section.get("timeout") is not None:
            configured.append(with_timeout(section["timeout"]))
        return cls(key, *configured, *options)

    @property
    def http_client(self) -> HttpClient:
        return self.settings.http_client

    @property
    def timeout(self) -> Optional[float]:
        """Timeout passed to each request; None when the http client decides."""
        if self.settings.timeout is not None:
            return self.settings.timeout
        if self.settings.default_transport:
            return DEFAULT_TIMEOUT
        return None

    def current(self, query: PollutionQuery) -> PollutionResult:
        """Current air pollution for the query location."""
        url = POLLUTION_URL.format(
            base=self.settings.base_url,
            key=self.api_key,
            lat=format_coordinate(query.location.latitude),
            lon=format_coordinate(query.location.longitude),
        )
        return self._fetch(url)

    def forecast(self, query: PollutionQuery) -> PollutionResult:
        """Hourly air pollution forecast for the query location."""
        url = FORECAST_POLLUTION_URL.format(
            base=self.settings.base_url,
            key=self.api_key,
            lat=format_coordinate(query.location.latitude),
            lon=format_coordinate(query.location.longitude),
        )
        return self._fetch(url)

    def historical(self, query: HistoricalPollutionQuery) -> PollutionResult:
        """Air pollution history between query.start and query.end (unix seconds, UTC)."""
        url = HISTORICAL_POLLUTION_URL.format(
            base=self.settings.base_url,
            key=self.api_key,
            lat=format_coordinate(query.location.latitude),
            lon=format_coordinate(query.location.longitude),
            start=int(query.start),
            end=int(query.end),
        )
        return self._fetch(url)

    def _fetch(self, url: str) -> PollutionResult:
        safe_url = redact_key(url, self.api_key)
        log.debug("Requesting %s", safe_url)
        timeout = self.timeout
        if timeout is None:
            resp = self.settings.http_client.get(url)
        else:
            resp = self.settings.http_client.get(url, timeout=timeout)
        with closing(resp):
            status = resp.status_code
            if status == 401:
                raise InvalidKeyError()
            if not 200 <= status < 300:
                log.warning("Air pollution request returned status %s for %s", status, safe_url)
            result = PollutionResult.model_validate(resp.json())
        log.info("Fetched %d pollution entries from %s", len(result.entries), safe_url)
        return result
