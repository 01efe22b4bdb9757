"""Health check helpers."""

from __future__ import annotations

from django.db import connection

from gridwork.apps.reservations.models import Reservation


def check_db_and_orm() -> dict:
    """Verify DB connectivity and ORM access by touching the reservations table."""
    details: dict[str, object] = {}
    connection.ensure_connection()
    details["db"] = "ok"

    sample = Reservation.objects.order_by("id").values_list("id", flat=True).first()
    details["orm_reservation_sample"] = sample if sample is not None else "none"
    return details
