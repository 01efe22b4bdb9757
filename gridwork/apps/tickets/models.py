"""Support ticket models."""

from __future__ import annotations

from itertools import chain

from django.db import models
from django.urls import reverse
from django.utils import timezone
from simple_history.models import HistoricalRecords

from gridwork.apps.core.models import TimeStampedMixin

TICKET_NUMBER_PREFIX = "TCK-"


def format_ticket_number(sequence: int) -> str:
    """Format a sequence number as a ticket number, e.g. 42 -> "TCK-00042"."""
    return f"{TICKET_NUMBER_PREFIX}{sequence:05d}"


def parse_ticket_number(ticket_number: str) -> int:
    """Return the sequence of a ticket number, or 0 if it is not one of ours."""
    suffix = ticket_number.removeprefix(TICKET_NUMBER_PREFIX)
    if ticket_number.startswith(TICKET_NUMBER_PREFIX) and suffix.isdigit():
        return int(suffix)
    return 0


class Ticket(TimeStampedMixin):
    """A support request raised by a member or staff."""

    class Category(models.TextChoices):
        TECHNICAL = "Technical", "Technical"
        BILLING = "Billing", "Billing"
        SUPPORT = "Support", "Support"
        BUG = "Bug", "Bug"

    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        ONGOING = "Ongoing", "Ongoing"
        ARCHIVED = "Archived/Delivered", "Archived/Delivered"

    name = models.CharField(max_length=200)
    concern = models.CharField(max_length=255, blank=True)
    ticket_number = models.CharField(max_length=20, unique=True, editable=False)
    date_requested = models.DateField(default=timezone.localdate)
    approved_by = models.CharField(max_length=200, blank=True)
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    category = models.CharField(
        max_length=50,
        choices=Category.choices,
        default=Category.SUPPORT,
        db_index=True,
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ["-date_requested", "-pk"]

    def __str__(self) -> str:
        return f"{self.ticket_number} · {self.name}"

    def get_absolute_url(self) -> str:
        return reverse("ticket-detail", kwargs={"pk": self.pk})

    def save(self, *args, **kwargs):
        if not self.ticket_number:
            self.ticket_number = self._next_ticket_number()
        super().save(*args, **kwargs)

    @classmethod
    def _next_ticket_number(cls) -> str:
        """Return the number after the highest ever issued.

        History rows are included so numbers of deleted tickets are not reused.
        """
        prefixed = {"ticket_number__startswith": TICKET_NUMBER_PREFIX}
        current = cls.objects.filter(**prefixed).values_list("ticket_number", flat=True)
        past = (
            cls.history.filter(**prefixed)
            .values_list("ticket_number", flat=True)
            .order_by()
            .distinct()
        )
        issued = chain(current, past)
        highest = max((parse_ticket_number(number) for number in issued), default=0)
        return format_ticket_number(highest + 1)

    @property
    def last_updated(self):
        return self.updated_at

    def as_record(self) -> dict:
        """Return the flat record shape used by list views and the JSON API."""
        return {
            "id": self.pk,
            "name": self.name,
            "concern": self.concern,
            "ticket_number": self.ticket_number,
            "date_requested": self.date_requested.isoformat() if self.date_requested else "",
            "approved_by": self.approved_by,
            "last_updated": self.updated_at.isoformat() if self.updated_at else "",
            "status": self.status,
            "category": self.category,
        }
