"""Shared fixtures: a fake requests session so no test touches the network."""

from datetime import datetime

import pytest
import requests

from limited_hangout.config import SourceConfig

# A fixed "now" well before the sample shows below
NOW = datetime(2025, 10, 20, 15, 0)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Answers GETs from a {url: body} map. Bodies may be exceptions to raise."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        body = self.responses.get(url)
        if body is None:
            return FakeResponse("Not Found", status_code=404)
        if isinstance(body, Exception):
            raise body
        if isinstance(body, FakeResponse):
            return body
        return FakeResponse(body)


def config_for(encoding):
    return SourceConfig(encoding=encoding, url_template="https://sheet.test/{tab}")


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def session():
    return FakeSession()
