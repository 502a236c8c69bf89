from typing import Callable

import httpx
import pytest

from adapters.api_client import APIClient
from adapters.http_client import build_client
from adapters.people_service import HTTPPeopleService
from core.config import AppSettings

BASE_URL = "https://api.example.test/.api/"


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, api_base_url=BASE_URL, api_token="s3cret")


@pytest.fixture
def make_service(settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], HTTPPeopleService]:
    """Build a people service whose HTTP traffic goes to `handler`."""

    created: list[httpx.Client] = []

    def _make(handler):
        http = build_client(settings, transport=httpx.MockTransport(handler))
        created.append(http)
        return HTTPPeopleService(APIClient(settings, http_client=http))

    yield _make

    for http in created:
        http.close()
