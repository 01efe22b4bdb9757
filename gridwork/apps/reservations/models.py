"""Reservation domain models."""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.urls import reverse
from simple_history.models import HistoricalRecords

from gridwork.apps.core.models import TimeStampedMixin


class Reservation(TimeStampedMixin):
    """A booking of co-working, virtual, private or meeting space."""

    class Category(models.TextChoices):
        """Kinds of space that can be reserved."""

        CO_WORKING = "Co-working", "Co-working"
        VIRTUAL = "Virtual", "Virtual"
        PRIVATE = "Private", "Private"
        MEETING = "Meeting", "Meeting"

    class Status(models.TextChoices):
        """Where a reservation is in its lifecycle."""

        UPCOMING = "Upcoming", "Upcoming"
        ONGOING = "Ongoing", "Ongoing"
        ARCHIVED = "Archived/Delivered", "Archived/Delivered"

    name = models.CharField(max_length=200)
    category = models.CharField(
        max_length=50,
        choices=Category.choices,
        default=Category.CO_WORKING,
        db_index=True,
    )
    email = models.EmailField(blank=True)
    contact_number = models.CharField(max_length=50, blank=True)
    start_date = models.DateField()
    end_date = models.DateField()
    location = models.CharField(max_length=200, blank=True)
    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.UPCOMING,
        db_index=True,
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ["-start_date", "-pk"]

    def __str__(self) -> str:
        return f"{self.name} ({self.start_date:%Y-%m-%d})"

    def get_absolute_url(self) -> str:
        return reverse("reservation-detail", kwargs={"pk": self.pk})

    def clean(self):
        super().clean()
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({"end_date": "End date cannot be before the start date."})

    def as_record(self) -> dict:
        """Return the flat record shape used by list views and the JSON API."""
        return {
            "id": self.pk,
            "name": self.name,
            "category": self.category,
            "email": self.email,
            "contact_number": self.contact_number,
            "start_date": self.start_date.isoformat() if self.start_date else "",
            "end_date": self.end_date.isoformat() if self.end_date else "",
            "location": self.location,
            "status": self.status,
        }
