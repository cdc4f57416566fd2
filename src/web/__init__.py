"""Web module -- DuckDuckGo search, HTML parsing, result formatting."""

from src.web.duckduckgo_parser import DuckDuckGoHtmlParser
from src.web.duckduckgo_search import DuckDuckGoSearch
from src.web.search_provider import ResultParser, SearchResult

__all__ = ["DuckDuckGoHtmlParser", "DuckDuckGoSearch", "ResultParser", "SearchResult"]
