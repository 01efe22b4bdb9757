"""Ticket views: listing and CRUD."""

from __future__ import annotations

import logging

from django.contrib.messages.views import SuccessMessageMixin
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import CreateView, DeleteView, DetailView, TemplateView, UpdateView

from gridwork.apps.core.mixins import (
    CanAccessAdminPortalMixin,
    RecordEntriesMixin,
    RecordListPageMixin,
)
from gridwork.apps.tickets.forms import TicketForm
from gridwork.apps.tickets.models import Ticket

logger = logging.getLogger(__name__)

TICKET_FILTER_LABELS = ("All", "Pending", "Ongoing", "Archived/Delivered")


class TicketListView(CanAccessAdminPortalMixin, RecordListPageMixin, TemplateView):
    """Tickets with status tabs, name search and pagination."""

    template_name = "tickets/ticket_list.html"
    model = Ticket
    filter_labels = TICKET_FILTER_LABELS
    context_object_name = "tickets"


class TicketEntriesView(CanAccessAdminPortalMixin, RecordEntriesMixin, View):
    """JSON endpoint returning the same page of tickets as the list view."""

    model = Ticket


class TicketDetailView(CanAccessAdminPortalMixin, DetailView):
    model = Ticket
    template_name = "tickets/ticket_detail.html"
    context_object_name = "ticket"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["history"] = self.object.history.select_related("history_user")[:10]
        return context


class TicketCreateView(CanAccessAdminPortalMixin, SuccessMessageMixin, CreateView):
    model = Ticket
    form_class = TicketForm
    template_name = "tickets/ticket_form.html"

    def get_success_message(self, cleaned_data):
        return f"Ticket {self.object.ticket_number} created."

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(
            "ticket_created",
            extra={"ticket_id": self.object.pk, "ticket_number": self.object.ticket_number},
        )
        return response


class TicketUpdateView(CanAccessAdminPortalMixin, SuccessMessageMixin, UpdateView):
    model = Ticket
    form_class = TicketForm
    template_name = "tickets/ticket_form.html"

    def get_success_message(self, cleaned_data):
        return f"Ticket {self.object.ticket_number} updated."

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(
            "ticket_updated",
            extra={"ticket_id": self.object.pk, "changed": form.changed_data},
        )
        return response


class TicketDeleteView(CanAccessAdminPortalMixin, SuccessMessageMixin, DeleteView):
    model = Ticket
    template_name = "tickets/ticket_confirm_delete.html"
    context_object_name = "ticket"
    success_url = reverse_lazy("ticket-list")

    def get_success_message(self, cleaned_data):
        return f"Ticket {self.object.ticket_number} deleted."

    def form_valid(self, form):
        ticket_id = self.object.pk
        response = super().form_valid(form)
        logger.info("ticket_deleted", extra={"ticket_id": ticket_id})
        return response
