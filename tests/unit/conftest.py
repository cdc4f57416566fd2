"""Shared fixtures: canned upstream payloads and a mock HTTP transport."""

from typing import Callable, List

import httpx
import pytest


def _result_block(title: str | None, url: str = "", snippet: str = "") -> str:
    title_html = (
        f'<h2 class="result__title"><a rel="nofollow" class="result__a" '
        f'href="https://example.com">{title}</a></h2>'
        if title is not None
        else ""
    )
    url_html = f'<a class="result__url" href="https://example.com">{url}</a>' if url else ""
    snippet_html = (
        f'<a class="result__snippet" href="https://example.com">{snippet}</a>' if snippet else ""
    )
    return (
        '<div class="result results_links results_links_deep web-result ">\n'
        '  <div class="links_main links_deep result__body">\n'
        f"    {title_html}\n"
        f"    {url_html}\n"
        f"    {snippet_html}\n"
        "  </div>\n"
        "</div>\n"
    )


@pytest.fixture
def result_block() -> Callable[..., str]:
    return _result_block


@pytest.fixture
def results_page() -> Callable[[List[str]], str]:
    def build(blocks: List[str]) -> str:
        return (
            "<html><body><div id=\"links\" class=\"results\">\n"
            + "".join(blocks)
            + "</div></body></html>"
        )

    return build


@pytest.fixture
def mock_client():
    """Build an ``httpx.Client`` whose requests are answered by *handler*.

    Every request is appended to ``client.requests`` for later assertions.
    """
    clients: List[httpx.Client] = []

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        seen: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(record))
        client.requests = seen  # type: ignore[attr-defined]
        clients.append(client)
        return client

    yield build
    for c in clients:
        c.close()
