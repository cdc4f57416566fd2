"""Search result model and the HTML parser boundary."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class SearchResult:
    """A single web search result, in the order the engine ranked it."""

    title: str
    url: str = ""
    snippet: str = ""


class ResultParser(ABC):
    """Turns a results page into ``SearchResult`` entries.

    Implementations own the extraction patterns, so markup changes upstream
    only touch the parser and never the formatting or error handling.
    Implementations must not raise: on failure they return whatever they
    managed to extract.
    """

    @abstractmethod
    def parse(self, html: str) -> List[SearchResult]:
        """Return the titled results found in *html*."""
        ...
