"""Dashboard and health check views."""

from __future__ import annotations

import logging

from django.http import JsonResponse
from django.views.generic import TemplateView

from gridwork.apps.core.health import check_db_and_orm
from gridwork.apps.core.listing import filter_records
from gridwork.apps.core.mixins import CanAccessAdminPortalMixin
from gridwork.apps.logs.models import LogEntry
from gridwork.apps.logs.views import LOG_FILTER_LABELS
from gridwork.apps.reservations.models import Reservation
from gridwork.apps.reservations.views import RESERVATION_FILTER_LABELS
from gridwork.apps.tickets.models import Ticket
from gridwork.apps.tickets.views import TICKET_FILTER_LABELS

logger = logging.getLogger(__name__)


def _status_stats(records, labels) -> list[dict]:
    """Count records per status tab, using the same matching as the list pages."""
    records = list(records.only("status"))
    return [{"label": label, "value": len(filter_records(records, label))} for label in labels]


class HomeView(CanAccessAdminPortalMixin, TemplateView):
    """Dashboard with per-status counts for each resource."""

    template_name = "home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["sections"] = [
            {
                "title": "Reservations",
                "url_name": "reservation-list",
                "stats": _status_stats(Reservation.objects.all(), RESERVATION_FILTER_LABELS),
            },
            {
                "title": "Tickets",
                "url_name": "ticket-list",
                "stats": _status_stats(Ticket.objects.all(), TICKET_FILTER_LABELS),
            },
            {
                "title": "Logs",
                "url_name": "log-list",
                "stats": _status_stats(LogEntry.objects.all(), LOG_FILTER_LABELS),
            },
        ]
        context["recent_logs"] = LogEntry.objects.all()[:5]
        return context


def healthz(request):
    """Public health check endpoint."""
    try:
        details = check_db_and_orm()
    except Exception as exc:  # noqa: BLE001
        logger.exception("healthz_failed")
        resp = JsonResponse({"status": "error", "error": str(exc)})
        resp.status_code = 503
        resp["Cache-Control"] = "no-store"
        return resp

    resp = JsonResponse({"status": "ok", "checks": details})
    resp["Cache-Control"] = "no-store"
    return resp
