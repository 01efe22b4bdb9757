"""Create sample reservations, tickets and activity logs (dev/PR only)."""

import datetime
import random

from django.core.management.base import BaseCommand, CommandError
from django.db import connection
from django.utils import timezone

from gridwork.apps.logs.models import LogEntry
from gridwork.apps.reservations.models import Reservation
from gridwork.apps.tickets.models import Ticket

GUESTS = [
    ("Alice Santos", "alice@example.com", "0917 555 0101"),
    ("Bob Reyes", "bob@example.com", "0917 555 0102"),
    ("Carol Lim", "carol@example.com", "0917 555 0103"),
    ("Dan Cruz", "dan@example.com", "0917 555 0104"),
    ("Eve Tan", "eve@example.com", "0917 555 0105"),
    ("Frank Uy", "frank@example.com", "0917 555 0106"),
    ("Grace Go", "grace@example.com", "0917 555 0107"),
    ("Hector Dy", "hector@example.com", "0917 555 0108"),
    ("Ivy Ong", "ivy@example.com", "0917 555 0109"),
    ("Jun Sy", "jun@example.com", "0917 555 0110"),
]

LOCATIONS = ["Makati Hub", "BGC Tower", "Ortigas Loft", "Online"]

CONCERNS = [
    ("Wi-Fi keeps dropping", Ticket.Category.TECHNICAL),
    ("Double charge on invoice", Ticket.Category.BILLING),
    ("Need extra locker key", Ticket.Category.SUPPORT),
    ("Booking page shows wrong date", Ticket.Category.BUG),
    ("Projector in meeting room 2 is broken", Ticket.Category.TECHNICAL),
    ("Request for official receipt", Ticket.Category.BILLING),
]


class Command(BaseCommand):
    help = "Create sample reservations, tickets and logs (dev/PR only)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--seed", type=int, default=1, help="Random seed for repeatable data (default 1)"
        )

    def handle(self, *args, **options):
        # Safety check: SQLite only (blocks production PostgreSQL)
        if "sqlite" not in connection.settings_dict["ENGINE"].lower():
            raise CommandError(
                "This command only runs on SQLite databases (local dev or PR environments)"
            )

        # Safety check: empty database only
        if Reservation.objects.exists() or Ticket.objects.exists():
            raise CommandError(
                "Database already contains data. This command only runs on empty databases."
            )

        rng = random.Random(options["seed"])
        today = timezone.localdate()

        self.stdout.write(self.style.NOTICE("Creating sample reservations..."))
        for index, (name, email, phone) in enumerate(GUESTS * 2):
            start = today + datetime.timedelta(days=rng.randint(-30, 30))
            if start > today:
                status = Reservation.Status.UPCOMING
            elif index % 3:
                status = Reservation.Status.ONGOING
            else:
                status = Reservation.Status.ARCHIVED
            reservation = Reservation(
                name=name,
                email=email,
                contact_number=phone,
                category=rng.choice(Reservation.Category.values),
                location=rng.choice(LOCATIONS),
                start_date=start,
                end_date=start + datetime.timedelta(days=rng.randint(0, 14)),
                status=status,
            )
            reservation._skip_activity_log = True  # Logs are created separately below
            reservation.save()
        self.stdout.write(f"Created {Reservation.objects.count()} reservations")

        self.stdout.write(self.style.NOTICE("Creating sample tickets..."))
        for concern, category in CONCERNS * 2:
            name = rng.choice(GUESTS)[0]
            status = rng.choice(Ticket.Status.values)
            ticket = Ticket(
                name=name,
                concern=concern,
                category=category,
                status=status,
                date_requested=today - datetime.timedelta(days=rng.randint(0, 20)),
                approved_by="" if status == Ticket.Status.PENDING else "Sam Staff",
            )
            ticket._skip_activity_log = True
            ticket.save()
        self.stdout.write(f"Created {Ticket.objects.count()} tickets")

        self.stdout.write(self.style.NOTICE("Creating sample activity logs..."))
        now = timezone.now()
        for hours_ago, reservation in enumerate(Reservation.objects.all()[:8]):
            LogEntry.objects.create(
                name="Sam Staff",
                action=f"Reservation created: {reservation.name}",
                category=LogEntry.Category.RESERVATION,
                record_id=reservation.pk,
                occurred_at=now - datetime.timedelta(hours=hours_ago * 5),
            )
        for hours_ago, ticket in enumerate(Ticket.objects.all()[:6]):
            LogEntry.objects.create(
                name="Sam Staff",
                action=f"Ticket created: {ticket.ticket_number} ({ticket.name})",
                category=LogEntry.Category.TICKET,
                record_id=ticket.pk,
                occurred_at=now - datetime.timedelta(hours=hours_ago * 7 + 1),
            )
        LogEntry.objects.create(
            name="unknown",
            action="Failed login attempt for unknown",
            category=LogEntry.Category.ACCOUNT,
            status=LogEntry.Status.FAILED,
            occurred_at=now - datetime.timedelta(hours=2),
        )
        LogEntry.objects.create(
            name="System",
            action="Nightly backup took longer than expected",
            category=LogEntry.Category.SYSTEM,
            status=LogEntry.Status.WARNING,
            occurred_at=now - datetime.timedelta(hours=9),
        )
        self.stdout.write(f"Created {LogEntry.objects.count()} log entries")

        self.stdout.write(self.style.SUCCESS("Sample data creation complete."))
