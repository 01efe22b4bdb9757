"""Reservation views: listing and CRUD."""

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
from gridwork.apps.reservations.forms import ReservationForm
from gridwork.apps.reservations.models import Reservation

logger = logging.getLogger(__name__)

RESERVATION_FILTER_LABELS = ("All", "Upcoming", "Ongoing", "Archived/Delivered")


class ReservationListView(CanAccessAdminPortalMixin, RecordListPageMixin, TemplateView):
    """Reservations with status tabs, name search and pagination."""

    template_name = "reservations/reservation_list.html"
    model = Reservation
    filter_labels = RESERVATION_FILTER_LABELS
    context_object_name = "reservations"


class ReservationEntriesView(CanAccessAdminPortalMixin, RecordEntriesMixin, View):
    """JSON endpoint returning the same page of reservations as the list view."""

    model = Reservation


class ReservationDetailView(CanAccessAdminPortalMixin, DetailView):
    model = Reservation
    template_name = "reservations/reservation_detail.html"
    context_object_name = "reservation"


class ReservationCreateView(CanAccessAdminPortalMixin, SuccessMessageMixin, CreateView):
    model = Reservation
    form_class = ReservationForm
    template_name = "reservations/reservation_form.html"
    success_message = "Reservation for %(name)s created."

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(
            "reservation_created",
            extra={"reservation_id": self.object.pk, "status": self.object.status},
        )
        return response


class ReservationUpdateView(CanAccessAdminPortalMixin, SuccessMessageMixin, UpdateView):
    model = Reservation
    form_class = ReservationForm
    template_name = "reservations/reservation_form.html"
    success_message = "Reservation for %(name)s updated."

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(
            "reservation_updated",
            extra={"reservation_id": self.object.pk, "changed": form.changed_data},
        )
        return response


class ReservationDeleteView(CanAccessAdminPortalMixin, SuccessMessageMixin, DeleteView):
    model = Reservation
    template_name = "reservations/reservation_confirm_delete.html"
    context_object_name = "reservation"
    success_url = reverse_lazy("reservation-list")
    success_message = "Reservation deleted."

    def form_valid(self, form):
        reservation_id = self.object.pk
        response = super().form_valid(form)
        logger.info("reservation_deleted", extra={"reservation_id": reservation_id})
        return response
