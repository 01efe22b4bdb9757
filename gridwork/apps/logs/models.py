"""Activity log models."""

from __future__ import annotations

from django.db import models
from django.urls import reverse
from django.utils import timezone
from simple_history.models import HistoricalRecords

from gridwork.apps.core.models import TimeStampedMixin


class LogEntry(TimeStampedMixin):
    """Something that happened to a reservation, ticket, account or the system."""

    class Category(models.TextChoices):
        RESERVATION = "Reservation", "Reservation"
        TICKET = "Ticket", "Ticket"
        ACCOUNT = "Account", "Account"
        SYSTEM = "System", "System"

    class Status(models.TextChoices):
        SUCCESS = "Success", "Success"
        WARNING = "Warning", "Warning"
        FAILED = "Failed", "Failed"

    name = models.CharField(max_length=200, help_text="Who performed the action.")
    action = models.CharField(max_length=255)
    category = models.CharField(
        max_length=50,
        choices=Category.choices,
        default=Category.SYSTEM,
        db_index=True,
    )
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.SUCCESS,
        db_index=True,
    )
    record_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        help_text="Primary key of the reservation or ticket this entry is about.",
    )
    occurred_at = models.DateTimeField(default=timezone.now, db_index=True)

    history = HistoricalRecords()

    class Meta:
        ordering = ["-occurred_at", "-pk"]
        verbose_name_plural = "log entries"

    def __str__(self) -> str:
        return f"{self.name}: {self.action}"

    def get_absolute_url(self) -> str:
        return reverse("log-detail", kwargs={"pk": self.pk})

    def as_record(self) -> dict:
        """Return the flat record shape used by list views and the JSON API."""
        return {
            "id": self.pk,
            "name": self.name,
            "action": self.action,
            "category": self.category,
            "status": self.status,
            "record_id": self.record_id,
            "occurred_at": self.occurred_at.isoformat() if self.occurred_at else "",
        }
