"""Tests for the Reservation model and its badge filters."""

import datetime

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase, tag

from gridwork.apps.core.test_utils import create_reservation
from gridwork.apps.core.templatetags.ui_tags import PILL_BASE_CLASS
from gridwork.apps.reservations.models import Reservation
from gridwork.apps.reservations.templatetags.reservation_tags import (
    RESERVATION_STATUS_DEFAULT,
    reservation_category_class,
    reservation_status_class,
)


@tag("models")
class ReservationModelTests(TestCase):
    def test_clean_rejects_end_before_start(self):
        reservation = Reservation(
            name="Alice",
            start_date=datetime.date(2026, 5, 2),
            end_date=datetime.date(2026, 5, 1),
        )
        with self.assertRaises(ValidationError) as ctx:
            reservation.full_clean()
        self.assertIn("end_date", ctx.exception.message_dict)

    def test_same_day_allowed(self):
        day = datetime.date(2026, 5, 2)
        Reservation(name="Alice", start_date=day, end_date=day).full_clean()

    def test_defaults(self):
        reservation = create_reservation(name="Alice")
        self.assertEqual(reservation.category, Reservation.Category.CO_WORKING)
        self.assertEqual(reservation.status, Reservation.Status.UPCOMING)

    def test_ordering_newest_start_first(self):
        older = create_reservation(start_date=datetime.date(2026, 1, 1))
        newer = create_reservation(start_date=datetime.date(2026, 2, 1))
        self.assertEqual(list(Reservation.objects.all()), [newer, older])

    def test_as_record(self):
        reservation = create_reservation(
            name="Alice",
            start_date=datetime.date(2026, 5, 1),
            end_date=datetime.date(2026, 5, 3),
            location="Online",
        )
        record = reservation.as_record()
        self.assertEqual(record["id"], reservation.pk)
        self.assertEqual(record["start_date"], "2026-05-01")
        self.assertEqual(record["end_date"], "2026-05-03")
        self.assertEqual(record["location"], "Online")

    def test_absolute_url(self):
        reservation = create_reservation()
        self.assertEqual(reservation.get_absolute_url(), f"/reservations/{reservation.pk}/")


@tag("unit")
class ReservationBadgeTests(SimpleTestCase):
    def test_category_colors(self):
        expected = {
            "Co-working": "cyan",
            "Virtual": "blue",
            "Private": "indigo",
            "Meeting": "purple",
        }
        for category, color in expected.items():
            with self.subTest(category=category):
                self.assertIn(f"bg-{color}-100", reservation_category_class(category))

    def test_status_colors(self):
        self.assertIn("yellow", reservation_status_class("Upcoming"))
        self.assertIn("green", reservation_status_class("ongoing "))
        self.assertIn("gray", reservation_status_class("ARCHIVED/DELIVERED"))

    def test_unknown_status_uses_default(self):
        self.assertEqual(
            reservation_status_class("Cancelled"), f"{RESERVATION_STATUS_DEFAULT} {PILL_BASE_CLASS}"
        )

    def test_unknown_category_is_neutral(self):
        self.assertIn("bg-gray-100 text-gray-700", reservation_category_class("Rooftop"))
