"""Reusable view mixins for the core app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.http import JsonResponse

from gridwork.apps.core.forms import SearchForm
from gridwork.apps.core.listing import (
    PAGE_SIZE,
    ListPage,
    ListState,
    build_filter_tabs,
    recompute_view,
)

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser
    from django.db import models
    from django.http import HttpRequest


def can_access_admin_portal(user: AbstractUser | Any) -> bool:
    """
    Check if user can access the admin portal.

    Used by CanAccessAdminPortalMixin and inline permission checks.
    Currently checks is_staff or is_superuser.
    """
    return user.is_staff or user.is_superuser


class CanAccessAdminPortalMixin(LoginRequiredMixin, UserPassesTestMixin):
    """
    Mixin requiring admin portal access.

    Behavior:
    - Unauthenticated users -> redirect to login
    - Authenticated but unauthorized -> 403
    """

    request: HttpRequest  # Provided by View

    def test_func(self) -> bool:
        return can_access_admin_portal(self.request.user)


class RecordListMixin:
    """
    Mixin that runs a view's full record collection through the list pipeline.

    The view supplies the collection via get_records(); the current filter,
    search and page come from the query string. Subclasses set:
        - model: the model whose records are listed
        - filter_labels: status tab labels, "All" first
        - status_field / search_field: record fields the pipeline reads
    """

    request: HttpRequest  # Provided by View

    model: type[models.Model]
    filter_labels: tuple[str, ...] = ("All",)
    status_field = "status"
    search_field = "name"
    page_size = PAGE_SIZE

    def get_records(self):
        """Return the full collection handed to the pipeline."""
        return self.model.objects.all()

    def get_list_state(self) -> ListState:
        return ListState.from_params(self.request.GET)

    def get_list_page(self) -> ListPage:
        return recompute_view(
            self.get_records(),
            self.get_list_state(),
            status_field=self.status_field,
            search_field=self.search_field,
            page_size=self.page_size,
        )


class RecordListPageMixin(RecordListMixin):
    """
    Adds the pipeline's output to a template view's context.

    Context:
        - list_page: the ListPage (visible slice plus pagination state)
        - <context_object_name>: the visible slice
        - filter_tabs: status tabs with active state and links
        - search_form: SearchForm pre-filled with the current query
    """

    context_object_name = "records"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)  # type: ignore[misc]
        list_page = self.get_list_page()
        context.update(
            {
                "list_page": list_page,
                self.context_object_name: list_page.records,
                "filter_tabs": build_filter_tabs(self.filter_labels, list_page.state),
                "search_form": SearchForm(initial={"q": list_page.state.query}),
                "active_status": list_page.state.status,
            }
        )
        return context


class RecordEntriesMixin(RecordListMixin):
    """
    JSON rendition of the same visible slice a list page shows.

    Records are serialized with their ``as_record()`` method.
    """

    def serialize(self, record) -> dict:
        return record.as_record()

    def get(self, request, *args, **kwargs):
        list_page = self.get_list_page()
        return JsonResponse(
            {
                "items": [self.serialize(record) for record in list_page.records],
                "status": list_page.state.status,
                "q": list_page.state.query,
                "page": list_page.number,
                "page_size": list_page.page_size,
                "total_count": list_page.total_count,
                "total_pages": list_page.total_pages,
                "has_previous": list_page.has_previous,
                "has_next": list_page.has_next,
            }
        )
