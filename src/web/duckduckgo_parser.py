"""Regex extraction of results from the DuckDuckGo HTML endpoint."""

import re
from typing import List, Optional, Pattern

from src.utils.logger import get_logger
from src.web.converter import clean_html_text
from src.web.search_provider import ResultParser, SearchResult

log = get_logger(__name__)

_FLAGS = re.DOTALL | re.IGNORECASE

RESULT_PATTERN = re.compile(
    r'<div[^>]*class="[^"]*result[^"]*results_links[^"]*"[^>]*>.*?</div>\s*</div>', _FLAGS
)
TITLE_PATTERN = re.compile(
    r'<h2[^>]*class="[^"]*result__title[^"]*"[^>]*>.*?<a[^>]*>([^<]+)</a>', _FLAGS
)
URL_PATTERN = re.compile(r'<a[^>]*class="[^"]*result__url[^"]*"[^>]*>([^<]+)</a>', _FLAGS)
# Snippets wrap the matched query terms in <b>...</b>.
SNIPPET_PATTERN = re.compile(
    r'<a[^>]*class="[^"]*result__snippet[^"]*"[^>]*>((?:[^<]|</?b>)*)</a>', _FLAGS
)


def _extract(pattern: Pattern[str], fragment: str) -> str:
    match: Optional[re.Match[str]] = pattern.search(fragment)
    return clean_html_text(match.group(1)) if match else ""


class DuckDuckGoHtmlParser(ResultParser):
    """Parses ``html.duckduckgo.com/html/`` result pages."""

    def parse(self, html: str) -> List[SearchResult]:
        results: List[SearchResult] = []
        try:
            for fragment in RESULT_PATTERN.finditer(html):
                block = fragment.group(0)
                title = _extract(TITLE_PATTERN, block)
                if not title:
                    continue
                results.append(
                    SearchResult(
                        title=title,
                        url=_extract(URL_PATTERN, block),
                        snippet=_extract(SNIPPET_PATTERN, block),
                    )
                )
        except Exception:
            log.exception("Error parsing results page, keeping %d results", len(results))
        return results
