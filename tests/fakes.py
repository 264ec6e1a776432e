import json
from typing import Any, Dict, List, Optional


SAMPLE_BODY = {
    "coord": {"lon": 10.0, "lat": 0.0},
    "list": [
        {
            "main": {"aqi": 1},
            "components": {
                "co": 201.94, "no": 0.02, "no2": 0.77, "o3": 68.66,
                "so2": 0.64, "pm2_5": 0.5, "pm10": 0.54, "nh3": 0.12,
            },
            "dt": 1606223802,
        },
        {
            "main": {"aqi": 4},
            "components": {
                "co": 330.45, "no": 0.1, "no2": 2.5, "o3": 120.0,
                "so2": 1.1, "pm2_5": 60.2, "pm10": 80.4, "nh3": 0.9,
            },
            "dt": 1606227402,
        },
    ],
}


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._text = text if text is not None else json.dumps(body if body is not None else {})
        self.closed = False
        self.json_calls = 0

    def json(self):
        self.json_calls += 1
        return json.loads(self._text)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class FakeHttpClient:
    """Records requested URLs and hands back queued responses."""

    def __init__(self, *responses: Any):
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


class CloseOnlyResponse:
    """A response offering status_code, json() and close(), nothing else."""

    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self._body = body if body is not None else {}
        self.closed = False

    def json(self):
        return self._body

    def close(self):
        self.closed = True


class UrlOnlyHttpClient:
    """Transport whose get() accepts nothing but the url."""

    def __init__(self, response: Any):
        self.response = response
        self.urls: List[str] = []

    def get(self, url):
        self.urls.append(url)
        return self.response
