"""Tests for ticket create, detail, edit and delete views."""

from django.test import TestCase, tag
from django.urls import reverse

from gridwork.apps.core.test_utils import (
    SuppressRequestLogsMixin,
    TestDataMixin,
    create_ticket,
)
from gridwork.apps.tickets.models import Ticket


def ticket_form_data(**overrides):
    data = {
        "name": "Dan Cruz",
        "concern": "Locker key missing",
        "category": Ticket.Category.SUPPORT,
        "status": Ticket.Status.PENDING,
        "approved_by": "",
        "date_requested": "2026-07-01",
    }
    data.update(overrides)
    return data


@tag("views")
class TicketCreateViewTests(SuppressRequestLogsMixin, TestDataMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("ticket-create")

    def test_requires_staff(self):
        self.client.force_login(self.regular_user)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_create_assigns_ticket_number(self):
        self.client.force_login(self.staff_user)
        response = self.client.post(self.url, ticket_form_data(), follow=True)

        ticket = Ticket.objects.get()
        self.assertRedirects(response, reverse("ticket-detail", args=[ticket.pk]))
        self.assertRegex(ticket.ticket_number, r"^TCK-\d{5}$")
        self.assertContains(response, f"Ticket {ticket.ticket_number} created.")

    def test_ticket_number_not_editable(self):
        self.client.force_login(self.staff_user)
        self.client.post(self.url, ticket_form_data(ticket_number="HACKED"))
        self.assertNotEqual(Ticket.objects.get().ticket_number, "HACKED")

    def test_invalid_category_rejected(self):
        self.client.force_login(self.staff_user)
        response = self.client.post(self.url, ticket_form_data(category="Nope"))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Ticket.objects.exists())


@tag("views")
class TicketDetailEditDeleteTests(SuppressRequestLogsMixin, TestDataMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.client.force_login(self.staff_user)
        self.ticket = create_ticket(name="Eve Tan", concern="Aircon too cold")

    def test_detail_shows_history(self):
        self.ticket.status = Ticket.Status.ONGOING
        self.ticket.save()
        response = self.client.get(reverse("ticket-detail", args=[self.ticket.pk]))
        self.assertContains(response, self.ticket.ticket_number)
        self.assertContains(response, "Aircon too cold")
        self.assertEqual(len(response.context["history"]), 2)

    def test_edit_keeps_ticket_number(self):
        number = self.ticket.ticket_number
        response = self.client.post(
            reverse("ticket-edit", args=[self.ticket.pk]),
            ticket_form_data(name="Eve Tan", status=Ticket.Status.ONGOING, approved_by="Sam"),
            follow=True,
        )
        self.ticket.refresh_from_db()
        self.assertEqual(self.ticket.ticket_number, number)
        self.assertEqual(self.ticket.status, "Ongoing")
        self.assertEqual(self.ticket.approved_by, "Sam")
        self.assertContains(response, f"Ticket {number} updated.")

    def test_delete(self):
        number = self.ticket.ticket_number
        response = self.client.post(reverse("ticket-delete", args=[self.ticket.pk]), follow=True)
        self.assertRedirects(response, reverse("ticket-list"))
        self.assertFalse(Ticket.objects.exists())
        self.assertContains(response, f"Ticket {number} deleted.")

    def test_edit_missing_returns_404(self):
        response = self.client.get(reverse("ticket-edit", args=[999999]))
        self.assertEqual(response.status_code, 404)
