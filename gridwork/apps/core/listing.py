"""List-view pipeline shared by every resource list page.

A list page hands its complete, already-fetched collection to
:func:`recompute_view` together with a :class:`ListState` parsed from the
query string. The pipeline runs three steps in order:

1. Filter: keep records whose status (lower-cased, trimmed) equals the
   active filter key, or every record when the filter is ``"all"``.
2. Search: keep records whose name (lower-cased) contains the query
   (lower-cased). An empty query matches everything.
3. Paginate: slice the result into fixed-size pages.

Records are never mutated; the returned :class:`ListPage` is a derived view
recomputed on every request. Records may be model instances or mappings.

Usage::

    state = ListState.from_params(request.GET)
    page = recompute_view(Reservation.objects.all(), state)
    page.records        # visible slice
    page.total_pages    # ceil(filtered / PAGE_SIZE)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any
from urllib.parse import urlencode

ALL = "all"
"""Filter key that disables status filtering."""

PAGE_SIZE = 8
"""Number of records shown per page."""


def normalize_key(value: Any) -> str:
    """Lower-case and trim a status/category value for comparison."""
    return str(value or "").strip().lower()


def get_field(record: Any, name: str) -> str:
    """Read a field from a model instance or mapping as a string ("" if absent)."""
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return "" if value is None else str(value)


def parse_page(value: Any) -> int:
    """Parse a requested page number; anything non-numeric becomes page 1."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def total_pages_for(count: int, page_size: int = PAGE_SIZE) -> int:
    """Return ceil(count / page_size). Zero records means zero pages."""
    return math.ceil(count / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a page number to [1, total_pages]; page 1 when there are no pages."""
    return min(max(page, 1), max(total_pages, 1))


# ---- State ------------------------------------------------------------------


@dataclass(frozen=True)
class ListState:
    """Filter, search and page selection for one list page."""

    status: str = ALL
    query: str = ""
    page: int = 1

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> ListState:
        """Build state from a query dict (``status``, ``q``, ``page``)."""
        return cls(
            status=normalize_key(params.get("status")) or ALL,
            query=params.get("q") or "",
            page=parse_page(params.get("page")),
        )

    def with_filter(self, status: str) -> ListState:
        """Select a status filter. Always returns to page 1."""
        return replace(self, status=normalize_key(status) or ALL, page=1)

    def with_query(self, query: str) -> ListState:
        """Set the search query. Always returns to page 1."""
        return replace(self, query=query or "", page=1)

    def with_page(self, page: int, total_pages: int) -> ListState:
        """Move to a page, clamped to [1, total_pages]."""
        return replace(self, page=clamp_page(page, total_pages))

    def to_params(self, *, page: int | None = None) -> dict[str, str]:
        """Return query parameters for this state.

        ``page`` is only included when given, so links built for filter tabs
        and the search form drop the page and land on page 1.
        """
        params: dict[str, str] = {}
        if self.status != ALL:
            params["status"] = self.status
        if self.query:
            params["q"] = self.query
        if page is not None:
            params["page"] = str(page)
        return params

    def query_string(self, *, page: int | None = None) -> str:
        return urlencode(self.to_params(page=page))


# ---- Pipeline steps ---------------------------------------------------------


def filter_records(records: Iterable, status: str, *, field: str = "status") -> list:
    """Keep records whose ``field`` matches ``status`` case-insensitively."""
    key = normalize_key(status) or ALL
    if key == ALL:
        return list(records)
    return [record for record in records if normalize_key(get_field(record, field)) == key]


def search_records(records: Iterable, query: str, *, field: str = "name") -> list:
    """Keep records whose ``field`` contains ``query`` case-insensitively."""
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [record for record in records if needle in get_field(record, field).lower()]


def paginate(records: Sequence, page: int, page_size: int = PAGE_SIZE) -> list:
    """Return the slice of ``records`` shown on ``page`` (1-based)."""
    start = (page - 1) * page_size
    return list(records[start : start + page_size])


# ---- Result -----------------------------------------------------------------


@dataclass(frozen=True)
class PageLink:
    """A numbered pagination button."""

    number: int
    current: bool
    query: str


@dataclass(frozen=True)
class ListPage:
    """The derived view of a collection for one :class:`ListState`."""

    records: list
    state: ListState
    total_count: int
    total_pages: int
    page_size: int = PAGE_SIZE

    @property
    def number(self) -> int:
        return self.state.page

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def previous_page_number(self) -> int:
        return clamp_page(self.number - 1, self.total_pages)

    @property
    def next_page_number(self) -> int:
        return clamp_page(self.number + 1, self.total_pages)

    @property
    def previous_query(self) -> str:
        return self.state.query_string(page=self.previous_page_number)

    @property
    def next_query(self) -> str:
        return self.state.query_string(page=self.next_page_number)

    @property
    def page_links(self) -> list[PageLink]:
        return [
            PageLink(
                number=n,
                current=n == self.number,
                query=self.state.query_string(page=n),
            )
            for n in range(1, self.total_pages + 1)
        ]

    @property
    def start_index(self) -> int:
        """1-based index of the first visible record (0 when empty)."""
        if self.is_empty:
            return 0
        return (self.number - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based index of the last visible record (0 when empty)."""
        if self.is_empty:
            return 0
        return self.start_index + len(self.records) - 1


def recompute_view(
    records: Iterable | None,
    state: ListState,
    *,
    status_field: str = "status",
    search_field: str = "name",
    page_size: int = PAGE_SIZE,
) -> ListPage:
    """Filter, search and paginate ``records`` for ``state``.

    ``records`` may be ``None`` (treated as empty). Out-of-range pages are
    clamped; the returned page's ``state`` holds the effective page.
    """
    filtered = filter_records(records or (), state.status, field=status_field)
    filtered = search_records(filtered, state.query, field=search_field)

    total_pages = total_pages_for(len(filtered), page_size)
    effective = state.with_page(state.page, total_pages)

    return ListPage(
        records=paginate(filtered, effective.page, page_size),
        state=effective,
        total_count=len(filtered),
        total_pages=total_pages,
        page_size=page_size,
    )


# ---- Filter tabs ------------------------------------------------------------


@dataclass(frozen=True)
class FilterTab:
    """One status tab above a list (e.g. "All", "Upcoming")."""

    label: str
    key: str
    active: bool
    query: str


def build_filter_tabs(labels: Iterable[str], state: ListState) -> list[FilterTab]:
    """Build status tabs for ``labels``, marking the one matching ``state``.

    Each tab's query keeps the search text but drops the page.
    """
    tabs = []
    for label in labels:
        key = normalize_key(label)
        tabs.append(
            FilterTab(
                label=label,
                key=key,
                active=key == state.status,
                query=state.with_filter(key).query_string(),
            )
        )
    return tabs
