"""Resolución del enlace canónico de una release.

Por qué un resultado etiquetado (`DocsLink` | `CrateLink`):
- La decisión "docs vs página del crate" se toma una sola vez y el render
  solo consume el `href`.
- Deja explícita la dependencia entre `rustdoc_status` y `target_name`.
"""

from __future__ import annotations

from core.domain.models import CrateLink, DocsLink, Release, ReleaseLink


def resolve_release_link(release: Release) -> ReleaseLink:
    """Devuelve el destino de navegación de `release`.

    - Con docs servibles: `/{name}/{version}/{target_name}`.
    - Sin docs: `/crate/{name}/{version}`.
    """

    if release.rustdoc_status:
        return DocsLink(
            name=release.name,
            version=release.version,
            target=release.target_name or "",
        )
    return CrateLink(name=release.name, version=release.version)


def release_href(release: Release) -> str:
    return resolve_release_link(release).href
