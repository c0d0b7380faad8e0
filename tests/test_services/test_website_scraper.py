"""Tests for WebsiteScraperService."""

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import FetchError, NetworkError
from app.services.website_scraper import USER_AGENT, WebsiteScraperService


@pytest.fixture
async def client():
    async with httpx.AsyncClient() as c:
        yield c


@pytest.fixture
def scraper(client):
    return WebsiteScraperService(client)


def _html(body: str) -> str:
    return f"<html><body>{body}</body></html>"


@respx.mock
async def test_fetch_returns_html_and_url(scraper):
    respx.get("https://acme.com/about").mock(
        return_value=Response(200, html=_html("<p>Acme Corp</p>"))
    )
    page = await scraper.fetch("https://acme.com/about")
    assert page.final_url == "https://acme.com/about"
    assert page.html == _html("<p>Acme Corp</p>")
    assert not page.redirected


@respx.mock
async def test_fetch_sends_user_agent(scraper):
    route = respx.get("https://acme.com/about").mock(
        return_value=Response(200, html=_html(""))
    )
    await scraper.fetch("https://acme.com/about")
    assert route.calls.last.request.headers["user-agent"] == USER_AGENT


@respx.mock
async def test_fetch_follows_redirects(scraper):
    respx.get("https://acme.com/old").mock(
        return_value=Response(301, headers={"location": "https://www.acme.com/new"})
    )
    respx.get("https://www.acme.com/new").mock(
        return_value=Response(200, html=_html("<p>Moved</p>"))
    )
    page = await scraper.fetch("https://acme.com/old")
    assert page.final_url == "https://www.acme.com/new"
    assert page.redirected
    assert "Moved" in page.html


@respx.mock
async def test_fetch_non_success_raises_fetch_error(scraper):
    respx.get("https://acme.com/missing").mock(return_value=Response(404))
    with pytest.raises(FetchError) as exc_info:
        await scraper.fetch("https://acme.com/missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.status_text == "Not Found"
    assert exc_info.value.message == "Failed to fetch website: 404 Not Found"


@respx.mock
async def test_fetch_server_error_raises_fetch_error(scraper):
    respx.get("https://acme.com/about").mock(return_value=Response(503))
    with pytest.raises(FetchError) as exc_info:
        await scraper.fetch("https://acme.com/about")
    assert exc_info.value.status_code == 503


@respx.mock
async def test_fetch_connect_error_raises_network_error(scraper):
    respx.get("https://acme.com/about").mock(side_effect=httpx.ConnectError("refused"))
    with pytest.raises(NetworkError):
        await scraper.fetch("https://acme.com/about")


@respx.mock
async def test_fetch_timeout_raises_network_error(scraper):
    respx.get("https://acme.com/about").mock(side_effect=httpx.ReadTimeout("timeout"))
    with pytest.raises(NetworkError) as exc_info:
        await scraper.fetch("https://acme.com/about")
    assert "timeout" in exc_info.value.message


@respx.mock
async def test_fetch_redirect_loop_raises_network_error(scraper):
    respx.get("https://acme.com/about").mock(
        return_value=Response(302, headers={"location": "https://acme.com/about"})
    )
    with pytest.raises(NetworkError) as exc_info:
        await scraper.fetch("https://acme.com/about")
    assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)

