"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación en el borde (JSON de releases) y documentación
  autocontenida (Field) sin acoplar el Core a librerías de I/O.
- Los modelos son `frozen`: el listado se construye por request y no se muta
  durante el render.

Nota:
- Estos modelos describen *qué* se muestra, no *cómo* se obtiene ni *cómo*
  se pinta (eso vive en `adapters/`).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union
from urllib.parse import quote

from pydantic import AwareDatetime, BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict

from core.domain.listing_kind import ListingKind


def _segment(value: str) -> str:
    # Cada segmento se codifica por separado: un "/" dentro del nombre no abre ruta.
    return quote(value, safe="")


class Release(BaseModel):
    """Una release publicada tal y como la entrega la capa de datos.

    Invariante:
    - Si `rustdoc_status` es True, `target_name` debe venir relleno. No se
      valida aquí; el resolver produciría un path con segmento vacío.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del crate.",
    )
    version: str = Field(
        ...,
        min_length=1,
        description="Versión publicada (semver tal cual).",
    )
    description: str = Field(
        default="",
        description="Descripción corta; puede estar vacía.",
    )
    rustdoc_status: bool = Field(
        default=False,
        description="True si existe un build de documentación servible.",
    )
    target_name: str | None = Field(
        default=None,
        description="Target cuya documentación se enlaza (solo con rustdoc_status).",
    )
    release_time: AwareDatetime = Field(
        ...,
        description="Instante de publicación (con zona horaria).",
    )
    stars: int = Field(
        default=0,
        ge=0,
        description="Popularidad (estrellas del repositorio).",
    )


class ListingContext(BaseModel):
    """Contexto del listado para un request concreto.

    Por qué un modelo y no kwargs sueltos:
    - Los defaults (`title`, `description`, `author`) quedan documentados en un
      solo sitio y se aplican siempre igual.
    - `page_number` no se valida ni se recorta: el caller decide los flags.
    """

    model_config = ConfigDict(frozen=True)

    release_type: str = Field(
        ...,
        description="Naturaleza del listado ('recent', 'author', 'search', ...).",
    )
    page_number: int = Field(
        default=1,
        description="Página actual (1-based).",
    )
    show_previous_page: bool = Field(default=False)
    show_next_page: bool = Field(default=False)
    search_query: str | None = Field(
        default=None,
        description="Texto buscado; solo viaja en la paginación de 'search'.",
    )
    title: str = Field(default="Releases")
    description: str = Field(default="")
    author: str | None = Field(
        default=None,
        description="Etiqueta del autor; None significa 'sin autor'.",
    )

    @field_validator("title", "description", mode="before")
    @classmethod
    def _default_when_none(cls, value: object, info: ValidationInfo) -> object:
        # Un `null` explícito (p.ej. desde JSON) equivale a omitir el campo.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def kind(self) -> ListingKind:
        return ListingKind.from_release_type(self.release_type)


class DocsLink(BaseModel):
    """Enlace a la documentación generada de un target."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["docs"] = "docs"
    name: str
    version: str
    target: str

    @property
    def href(self) -> str:
        return f"/{_segment(self.name)}/{_segment(self.version)}/{_segment(self.target)}"


class CrateLink(BaseModel):
    """Enlace a la página resumen del crate (sin docs servibles)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["crate"] = "crate"
    name: str
    version: str

    @property
    def href(self) -> str:
        return f"/crate/{_segment(self.name)}/{_segment(self.version)}"


ReleaseLink = Annotated[Union[DocsLink, CrateLink], Field(discriminator="kind")]


class StarsMetadata(BaseModel):
    """Metadato final en el listado de autor: estrellas + tooltip de publicación."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stars"] = "stars"
    stars: int
    tooltip: str


class PublishedMetadata(BaseModel):
    """Metadato final por defecto: tiempo relativo visible + instante absoluto."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["published"] = "published"
    text: str
    tooltip: str


RowMetadata = Annotated[Union[StarsMetadata, PublishedMetadata], Field(discriminator="kind")]


class ReleaseRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    link: ReleaseLink
    href: str
    label: str
    description: str
    metadata: RowMetadata


class Pagination(BaseModel):
    """Controles de paginación: cero, uno o dos enlaces."""

    model_config = ConfigDict(frozen=True)

    previous_href: str | None = None
    next_href: str | None = None

    @property
    def links(self) -> list[str]:
        return [href for href in (self.previous_href, self.next_href) if href is not None]


class ListingPage(BaseModel):
    """Resultado del render: filas resueltas + paginación + cabecera.

    Nota:
    - Un listado vacío sigue siendo un `ListingPage` válido con paginación.
    """

    model_config = ConfigDict(frozen=True)

    release_type: str
    page_number: int
    title: str
    description: str
    author: str | None = None
    rows: list[ReleaseRow] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def is_empty(self) -> bool:
        return not self.rows
