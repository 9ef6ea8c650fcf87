"""
Test configuration and fixtures for the AEO Scanner API.

Provides the FastAPI test client, a page builder for synthetic HTML and a
fake fetcher that stands in for the target site.
"""

from typing import Callable, Generator, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.features.scan.routes.scan import get_scan_service
from app.features.scan.services.scan.scan import ScanService


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    A fresh TestClient per test keeps dependency overrides isolated.
    """
    with TestClient(test_app, raise_server_exceptions=False) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


def build_html(
    *,
    headings: tuple = (),
    meta_description: Optional[str] = None,
    json_ld: tuple = (),
    body: str = "",
) -> str:
    """Assemble a small but complete HTML page."""
    head = ["<title>Test page</title>"]
    if meta_description is not None:
        head.append(f'<meta name="description" content="{meta_description}">')
    for block in json_ld:
        head.append(f'<script type="application/ld+json">{block}</script>')

    heading_markup = "".join(f"<{tag}>{text}</{tag}>" for tag, text in headings)
    return (
        "<!DOCTYPE html><html><head>"
        + "".join(head)
        + "</head><body>"
        + heading_markup
        + body
        + "</body></html>"
    )


def words(count: int) -> str:
    return " ".join(["word"] * count)


@pytest.fixture
def page() -> Callable[..., str]:
    return build_html


@pytest.fixture
def filler() -> Callable[[int], str]:
    return words


class FakeFetcher:
    """Returns fixed markup or raises a fixed error instead of touching the network."""

    def __init__(self, html: str = "", error: Optional[Exception] = None):
        self.html = html
        self.error = error
        self.requested = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.html


def http_status_error(status_code: int, url: str = "https://example.com") -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"{status_code} error", request=request, response=response)


@pytest.fixture
def use_fetcher(test_app):
    """Route /api/scan through a ScanService backed by a FakeFetcher."""

    def _install(html: str = "", error: Optional[Exception] = None) -> FakeFetcher:
        fetcher = FakeFetcher(html=html, error=error)
        test_app.dependency_overrides[get_scan_service] = lambda: ScanService(fetcher=fetcher)
        return fetcher

    return _install


@pytest.fixture
def make_fetcher() -> Callable[..., FakeFetcher]:
    return FakeFetcher


@pytest.fixture
def status_error() -> Callable[..., httpx.HTTPStatusError]:
    return http_status_error
