import json

import pytest

from tests.fakes import SAMPLE_BODY, FakeHttpClient, FakeResponse


@pytest.fixture
def sample_body():
    return json.loads(json.dumps(SAMPLE_BODY))


@pytest.fixture
def ok_http(sample_body):
    return FakeHttpClient(FakeResponse(200, sample_body))
