"""Rendering of search results as user-facing text."""

from typing import List

from src.web.search_provider import SearchResult

NO_RESULTS_LINES = (
    "❌ No se encontraron resultados para esta búsqueda.",
    "💡 Intenta con palabras clave diferentes o más específicas.",
)


def format_search_results(query: str, results: List[SearchResult], limit: int = 10) -> str:
    """Header echoing *query*, then up to *limit* numbered entries."""
    lines = [f"🔍 Resultados de búsqueda para: '{query}'", ""]

    if not results:
        lines.extend(NO_RESULTS_LINES)
        return "\n".join(lines)

    lines.append("🌐 **Resultados web:**")
    for i, result in enumerate(results[:limit], 1):
        lines.append(f"{i}. **{result.title}**")
        if result.snippet:
            lines.append(f"   {result.snippet}")
        if result.url:
            lines.append(f"   🔗 {result.url}")
        lines.append("")

    return "\n".join(lines).rstrip()


def format_search_error(query: str, exc: Exception) -> str:
    return (
        f"❌ Error al realizar la búsqueda web: {exc}\n"
        f"Consulta: '{query}'\n"
        f"Tipo de error: {type(exc).__name__}"
    )
