"""Tests for activity log list and CRUD views."""

import datetime

from django.test import SimpleTestCase, TestCase, tag
from django.urls import reverse
from django.utils import timezone

from gridwork.apps.core.test_utils import (
    DATETIME_INPUT_FORMAT,
    SuppressRequestLogsMixin,
    TestDataMixin,
    create_log_entry,
)
from gridwork.apps.logs.models import LogEntry
from gridwork.apps.logs.templatetags.log_tags import log_category_class, log_status_class


class LoggedInStaffMixin(TestDataMixin):
    """Log in as staff and clear the login's own activity entry."""

    def setUp(self):
        super().setUp()
        self.client.force_login(self.staff_user)
        LogEntry.objects.all().delete()


@tag("views")
class LogListAccessTests(SuppressRequestLogsMixin, TestDataMixin, TestCase):
    def test_requires_authentication(self):
        response = self.client.get(reverse("log-list"))
        self.assertEqual(response.status_code, 302)

    def test_requires_staff(self):
        self.client.force_login(self.regular_user)
        self.assertEqual(self.client.get(reverse("log-list")).status_code, 403)


@tag("views")
class LogListViewTests(LoggedInStaffMixin, TestCase):
    def setUp(self):
        super().setUp()
        now = timezone.now()
        create_log_entry(name="Alice", action="Booked room", status="Success", occurred_at=now)
        create_log_entry(
            name="Bob",
            action="Payment retry",
            status="Warning",
            occurred_at=now - datetime.timedelta(minutes=1),
        )
        create_log_entry(
            name="Carol",
            action="Login",
            status="failed",
            category="Account",
            occurred_at=now - datetime.timedelta(minutes=2),
        )

    def names(self, response):
        return [e.name for e in response.context["log_entries"]]

    def test_newest_first_with_headers(self):
        response = self.client.get(reverse("log-list"))
        self.assertEqual(self.names(response), ["Alice", "Bob", "Carol"])
        for header in ["Name", "Action", "Category", "Date", "Status"]:
            self.assertContains(response, f"<div>{header}</div>")

    def test_filter_tabs(self):
        response = self.client.get(reverse("log-list"), {"status": "failed"})
        self.assertEqual(
            [t.label for t in response.context["filter_tabs"]],
            ["All", "Success", "Warning", "Failed"],
        )
        self.assertEqual(self.names(response), ["Carol"])
        self.assertContains(response, "bg-red-100 text-red-700")

    def test_search(self):
        response = self.client.get(reverse("log-list"), {"q": "ob"})
        self.assertEqual(self.names(response), ["Bob"])

    def test_empty_state(self):
        LogEntry.objects.all().delete()
        response = self.client.get(reverse("log-list"))
        self.assertContains(response, "No log entries found.")

    def test_entries_endpoint(self):
        data = self.client.get(reverse("log-list-entries"), {"status": "warning"}).json()
        self.assertEqual([item["name"] for item in data["items"]], ["Bob"])
        self.assertEqual(data["total_count"], 1)


@tag("views")
class LogCrudViewTests(SuppressRequestLogsMixin, LoggedInStaffMixin, TestCase):
    def test_create_form_prefills_user(self):
        response = self.client.get(reverse("log-create"))
        self.assertEqual(response.context["form"].initial["name"], "Sam Staff")
        self.assertContains(response, 'type="datetime-local"')

    def test_create(self):
        occurred = timezone.localtime() - datetime.timedelta(hours=1)
        response = self.client.post(
            reverse("log-create"),
            {
                "name": "Sam Staff",
                "action": "Restocked coffee",
                "category": "System",
                "status": "Success",
                "occurred_at": occurred.strftime(DATETIME_INPUT_FORMAT),
            },
            follow=True,
        )
        entry = LogEntry.objects.get()
        self.assertRedirects(response, reverse("log-detail", args=[entry.pk]))
        self.assertEqual(entry.action, "Restocked coffee")
        self.assertContains(response, "Log entry added.")

    def test_future_date_rejected(self):
        future = timezone.localtime() + datetime.timedelta(days=2)
        response = self.client.post(
            reverse("log-create"),
            {
                "name": "Sam Staff",
                "action": "Time travel",
                "category": "System",
                "status": "Success",
                "occurred_at": future.strftime(DATETIME_INPUT_FORMAT),
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Date cannot be in the future.")
        self.assertFalse(LogEntry.objects.exists())

    def test_edit(self):
        entry = create_log_entry(action="Typo")
        response = self.client.post(
            reverse("log-edit", args=[entry.pk]),
            {
                "name": entry.name,
                "action": "Fixed",
                "category": "Ticket",
                "status": "Warning",
                "occurred_at": timezone.localtime(entry.occurred_at).strftime(
                    DATETIME_INPUT_FORMAT
                ),
            },
        )
        self.assertRedirects(response, reverse("log-detail", args=[entry.pk]))
        entry.refresh_from_db()
        self.assertEqual(entry.action, "Fixed")
        self.assertEqual(entry.status, "Warning")

    def test_detail_and_delete(self):
        entry = create_log_entry(action="Spilled coffee")
        detail = self.client.get(reverse("log-detail", args=[entry.pk]))
        self.assertContains(detail, "Spilled coffee")

        response = self.client.post(reverse("log-delete", args=[entry.pk]), follow=True)
        self.assertRedirects(response, reverse("log-list"))
        self.assertFalse(LogEntry.objects.filter(pk=entry.pk).exists())
        self.assertContains(response, "Log entry deleted.")

    def test_missing_entry_404(self):
        self.assertEqual(self.client.get(reverse("log-detail", args=[999999])).status_code, 404)


@tag("unit")
class LogBadgeTests(SimpleTestCase):
    def test_status_colors(self):
        self.assertIn("green", log_status_class("Success"))
        self.assertIn("yellow", log_status_class("WARNING"))
        self.assertIn("red", log_status_class(" failed"))
        self.assertIn("bg-gray-100", log_status_class("Unknown"))

    def test_category_colors(self):
        expected = {"Reservation": "cyan", "Ticket": "indigo", "Account": "purple", "System": "gray"}
        for category, color in expected.items():
            with self.subTest(category=category):
                self.assertIn(f"text-{color}-700", log_category_class(category))
