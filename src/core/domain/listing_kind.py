"""Listing kinds for release pages.

The routing layer hands us a free-form `release_type` string taken from the
URL (`/releases/{release_type}/{page}`). Only two values change how a row is
rendered, so everything else collapses into `DEFAULT`. Keeping it in the
domain layer lets services and adapters branch on a closed set instead of
comparing strings ad hoc.
"""

from __future__ import annotations

from enum import Enum


class ListingKind(str, Enum):
    """Rendering behaviour selected by a listing's `release_type`."""

    AUTHOR = "author"
    SEARCH = "search"
    DEFAULT = "default"

    @classmethod
    def from_release_type(cls, release_type: str) -> "ListingKind":
        """Map a raw release type to its kind; unknown values use `DEFAULT`."""

        if release_type == cls.AUTHOR.value:
            return cls.AUTHOR
        if release_type == cls.SEARCH.value:
            return cls.SEARCH
        return cls.DEFAULT

    def shows_stars(self) -> bool:
        """Author listings show star counts instead of publish times."""

        return self is ListingKind.AUTHOR
