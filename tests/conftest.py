"""Shared fixtures for the scraper tests."""

from pathlib import Path

import pytest
import requests

from swimscraper.parsers import extract_results_text

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding='utf-8')


@pytest.fixture
def individual_html():
    return load_fixture('individual_500free.htm')


@pytest.fixture
def relay_html():
    return load_fixture('relay_200medley.htm')


@pytest.fixture
def index_html():
    return load_fixture('evtindex.htm')


@pytest.fixture
def individual_text(individual_html):
    return extract_results_text(individual_html)


@pytest.fixture
def relay_text(relay_html):
    return extract_results_text(relay_html)


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session, serving pages from a URL -> html dict."""

    def __init__(self, pages: dict):
        self.pages = pages
        self.headers = {}
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        if url not in self.pages:
            return FakeResponse('', status_code=404)
        return FakeResponse(self.pages[url])


@pytest.fixture
def fake_session_factory():
    return FakeSession
