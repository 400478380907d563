"""Listing page composition.

This module turns an already-sliced page of release records plus a listing
context into a `ListingPage`. It is a single synchronous pass: no sorting,
no I/O, no shared state. The HTML/JSON adapters consume the result, which
keeps the row and pagination decisions testable without templates.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from core.domain.listing_kind import ListingKind
from core.domain.models import (
    ListingContext,
    ListingPage,
    PublishedMetadata,
    Release,
    ReleaseRow,
    RowMetadata,
    StarsMetadata,
)
from core.interfaces.time_formatter import TimeFormatter
from core.services.link_resolver import resolve_release_link
from core.services.pagination import build_pagination
from core.services.timeformat import HumanTimeFormatter, utc_now

logger = logging.getLogger(__name__)


def release_label(release: Release) -> str:
    return f"{release.name}-{release.version}"


def build_metadata(
    release: Release,
    kind: ListingKind,
    *,
    now: datetime,
    formatter: TimeFormatter,
) -> RowMetadata:
    """Pick the trailing metadata for a row.

    Author listings show the star count with the publish time as tooltip;
    every other listing shows the relative time with the absolute instant
    as tooltip.
    """

    relative = formatter.relative(release.release_time, now)
    if kind.shows_stars():
        return StarsMetadata(stars=release.stars, tooltip=f"Published {relative}")
    return PublishedMetadata(
        text=relative,
        tooltip=formatter.absolute(release.release_time),
    )


def build_row(
    release: Release,
    kind: ListingKind,
    *,
    now: datetime,
    formatter: TimeFormatter,
) -> ReleaseRow:
    link = resolve_release_link(release)
    return ReleaseRow(
        link=link,
        href=link.href,
        label=release_label(release),
        description=release.description,
        metadata=build_metadata(release, kind, now=now, formatter=formatter),
    )


def render_listing(
    releases: Iterable[Release],
    context: ListingContext,
    *,
    now: datetime | None = None,
    formatter: TimeFormatter | None = None,
) -> ListingPage:
    """Compose rows and pagination for one page of releases.

    `now` is read once so that every row on the page is measured against the
    same instant. An empty `releases` still yields pagination from the
    context flags.
    """

    now = now or utc_now()
    formatter = formatter or HumanTimeFormatter()
    kind = context.kind

    rows = [build_row(release, kind, now=now, formatter=formatter) for release in releases]
    pagination = build_pagination(context)

    logger.debug(
        "Rendered %d release rows for %s page %d (links: %s)",
        len(rows),
        context.release_type,
        context.page_number,
        pagination.links,
    )

    return ListingPage(
        release_type=context.release_type,
        page_number=context.page_number,
        title=context.title,
        description=context.description,
        author=context.author,
        rows=rows,
        pagination=pagination,
    )
