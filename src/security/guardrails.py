"""Input validation for search queries."""

from typing import Optional, Tuple

EMPTY_QUERY_MESSAGE = "❌ La consulta de búsqueda no puede estar vacía."


def validate_query(query: str) -> Tuple[bool, Optional[str]]:
    """Reject blank queries before any network call."""
    if not query or not query.strip():
        return False, EMPTY_QUERY_MESSAGE
    return True, None
