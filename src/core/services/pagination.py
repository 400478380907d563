"""Paginación de listados de releases.

Reglas:
- Base: `/releases/{release_type}`.
- Solo los listados de búsqueda arrastran `?search=...` entre páginas.
- No se recorta `page_number`: si el caller pide "anterior" en la página 1,
  el enlace apunta a la página 0.
"""

from __future__ import annotations

from urllib.parse import quote

from core.domain.listing_kind import ListingKind
from core.domain.models import ListingContext, Pagination


def base_path(release_type: str) -> str:
    return f"/releases/{quote(release_type, safe='')}"


def query_suffix(context: ListingContext) -> str:
    """Query string que preserva el contexto entre páginas."""

    if context.kind is not ListingKind.SEARCH:
        return ""
    return f"?search={quote(context.search_query or '', safe='')}"


def page_href(context: ListingContext, page: int) -> str:
    return f"{base_path(context.release_type)}/{page}{query_suffix(context)}"


def build_pagination(context: ListingContext) -> Pagination:
    """Construye los enlaces anterior/siguiente a partir de los flags del caller."""

    previous_href = None
    if context.show_previous_page:
        previous_href = page_href(context, context.page_number - 1)

    next_href = None
    if context.show_next_page:
        next_href = page_href(context, context.page_number + 1)

    return Pagination(previous_href=previous_href, next_href=next_href)
