"""DuckDuckGo HTML search (keyless web search)."""

from typing import List, Optional

import httpx

from src.security.guardrails import validate_query
from src.utils.config import settings
from src.utils.errors import UpstreamStatusError
from src.utils.logger import get_logger
from src.web.duckduckgo_parser import DuckDuckGoHtmlParser
from src.web.fetcher import fetch_text
from src.web.formatter import format_search_error, format_search_results
from src.web.search_provider import ResultParser, SearchResult

log = get_logger(__name__)


class DuckDuckGoSearch:
    """Web search via the DuckDuckGo HTML endpoint.

    The endpoint serves different markup (or blocks the request) for generic
    HTTP clients, so every request carries a browser ``User-Agent``.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        parser: Optional[ResultParser] = None,
        base_url: str | None = None,
    ):
        self._client = client
        self._parser = parser or DuckDuckGoHtmlParser()
        self._base_url = base_url or settings.search_url

    def fetch_results(self, query: str) -> List[SearchResult]:
        """Fetch and parse results for *query* (raises on HTTP failures)."""
        html = fetch_text(
            self._base_url,
            params={"q": query},
            headers={"User-Agent": settings.search_user_agent},
            client=self._client,
        )
        results = self._parser.parse(html)
        log.info("Search '%s' -> %d results", query, len(results))
        return results

    def search(self, query: str) -> str:
        """Search the web and return the formatted result block."""
        ok, reason = validate_query(query)
        if not ok:
            return reason

        try:
            results = self.fetch_results(query)
        except UpstreamStatusError as e:
            return f"❌ Error en la búsqueda (código: {e.status_code})\nURL: {e.url}"
        except Exception as e:
            log.exception("Web search failed for query: %s", query)
            return format_search_error(query, e)

        return format_search_results(query, results, limit=settings.max_search_results)
