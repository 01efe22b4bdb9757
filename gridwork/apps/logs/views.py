"""Activity log views: listing and CRUD."""

from __future__ import annotations

import logging

from django.contrib.messages.views import SuccessMessageMixin
from django.urls import reverse_lazy
from django.utils import timezone
from django.views import View
from django.views.generic import CreateView, DeleteView, DetailView, TemplateView, UpdateView

from gridwork.apps.core.mixins import (
    CanAccessAdminPortalMixin,
    RecordEntriesMixin,
    RecordListPageMixin,
)
from gridwork.apps.logs.forms import LogEntryForm
from gridwork.apps.logs.models import LogEntry

logger = logging.getLogger(__name__)

LOG_FILTER_LABELS = ("All", "Success", "Warning", "Failed")


class LogListView(CanAccessAdminPortalMixin, RecordListPageMixin, TemplateView):
    """Activity log with status tabs, name search and pagination."""

    template_name = "logs/log_list.html"
    model = LogEntry
    filter_labels = LOG_FILTER_LABELS
    context_object_name = "log_entries"


class LogEntriesView(CanAccessAdminPortalMixin, RecordEntriesMixin, View):
    """JSON endpoint returning the same page of log entries as the list view."""

    model = LogEntry


class LogDetailView(CanAccessAdminPortalMixin, DetailView):
    model = LogEntry
    template_name = "logs/log_detail.html"
    context_object_name = "entry"


class LogCreateView(CanAccessAdminPortalMixin, SuccessMessageMixin, CreateView):
    model = LogEntry
    form_class = LogEntryForm
    template_name = "logs/log_form.html"
    success_message = "Log entry added."

    def get_initial(self):
        initial = super().get_initial()
        initial["name"] = self.request.user.get_full_name() or self.request.user.get_username()
        initial["occurred_at"] = timezone.localtime().replace(second=0, microsecond=0)
        return initial

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info("log_entry_created", extra={"log_entry_id": self.object.pk})
        return response


class LogUpdateView(CanAccessAdminPortalMixin, SuccessMessageMixin, UpdateView):
    model = LogEntry
    form_class = LogEntryForm
    template_name = "logs/log_form.html"
    context_object_name = "entry"
    success_message = "Log entry updated."


class LogDeleteView(CanAccessAdminPortalMixin, SuccessMessageMixin, DeleteView):
    model = LogEntry
    template_name = "logs/log_confirm_delete.html"
    context_object_name = "entry"
    success_url = reverse_lazy("log-list")
    success_message = "Log entry deleted."

    def form_valid(self, form):
        log_entry_id = self.object.pk
        response = super().form_valid(form)
        logger.info("log_entry_deleted", extra={"log_entry_id": log_entry_id})
        return response
