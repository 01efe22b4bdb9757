"""Tests for the dashboard, health check and sample data command."""

from io import StringIO
from unittest import mock

from django.core.management import CommandError, call_command
from django.db import connection
from django.test import TestCase, tag
from django.urls import reverse

from gridwork.apps.core.test_utils import (
    SuppressRequestLogsMixin,
    TestDataMixin,
    create_log_entry,
    create_reservation,
    create_ticket,
)
from gridwork.apps.logs.models import LogEntry
from gridwork.apps.reservations.models import Reservation
from gridwork.apps.tickets.models import Ticket


@tag("views")
class HomeViewTests(SuppressRequestLogsMixin, TestDataMixin, TestCase):
    def test_requires_authentication(self):
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 302)
        self.assertIn("/login/", response.url)

    def test_requires_staff(self):
        self.client.force_login(self.regular_user)
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 403)

    def test_superuser_allowed(self):
        self.client.force_login(self.superuser)
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 200)

    def test_counts_per_status(self):
        create_reservation(status="Upcoming")
        create_reservation(status="upcoming ")
        create_reservation(status="Ongoing")
        create_ticket(status="Pending")
        self.client.force_login(self.staff_user)

        response = self.client.get(reverse("home"))

        self.assertTemplateUsed(response, "home.html")
        reservations = response.context["sections"][0]
        self.assertEqual(reservations["title"], "Reservations")
        stats = {s["label"]: s["value"] for s in reservations["stats"]}
        self.assertEqual(stats, {"All": 3, "Upcoming": 2, "Ongoing": 1, "Archived/Delivered": 0})
        tickets = {s["label"]: s["value"] for s in response.context["sections"][1]["stats"]}
        self.assertEqual(tickets["Pending"], 1)

    def test_shows_recent_activity(self):
        create_log_entry(action="Printer jammed")
        self.client.force_login(self.staff_user)
        response = self.client.get(reverse("home"))
        self.assertContains(response, "Printer jammed")


@tag("views")
class HealthzTests(SuppressRequestLogsMixin, TestCase):
    def test_ok(self):
        response = self.client.get(reverse("healthz"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")
        self.assertEqual(response.json()["checks"]["db"], "ok")
        self.assertEqual(response["Cache-Control"], "no-store")

    def test_public(self):
        response = self.client.get(reverse("healthz"))
        self.assertNotEqual(response.status_code, 302)

    def test_failure_returns_503(self):
        with mock.patch(
            "gridwork.apps.core.views.check_db_and_orm", side_effect=RuntimeError("db down")
        ):
            response = self.client.get(reverse("healthz"))
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json(), {"status": "error", "error": "db down"})


@tag("models")
class CreateSampleDataCommandTests(TestCase):
    def test_populates_empty_database(self):
        out = StringIO()
        call_command("create_sample_data", stdout=out)

        self.assertEqual(Reservation.objects.count(), 20)
        self.assertEqual(Ticket.objects.count(), 12)
        self.assertEqual(LogEntry.objects.count(), 16)
        self.assertIn("Sample data creation complete.", out.getvalue())

    def test_refuses_non_empty_database(self):
        create_reservation()
        with self.assertRaises(CommandError):
            call_command("create_sample_data", stdout=StringIO())

    def test_refuses_non_sqlite(self):
        with mock.patch.dict(connection.settings_dict, {"ENGINE": "django.db.backends.postgresql"}):
            with self.assertRaises(CommandError):
                call_command("create_sample_data", stdout=StringIO())
