import django.db.models.deletion
import django.utils.timezone
import simple_history.models
from django.conf import settings
from django.db import migrations, models

LOG_CATEGORY_CHOICES = [
    ("Reservation", "Reservation"),
    ("Ticket", "Ticket"),
    ("Account", "Account"),
    ("System", "System"),
]

LOG_STATUS_CHOICES = [
    ("Success", "Success"),
    ("Warning", "Warning"),
    ("Failed", "Failed"),
]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="LogEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "name",
                    models.CharField(help_text="Who performed the action.", max_length=200),
                ),
                ("action", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=LOG_CATEGORY_CHOICES,
                        db_index=True,
                        default="System",
                        max_length=50,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=LOG_STATUS_CHOICES,
                        db_index=True,
                        default="Success",
                        max_length=50,
                    ),
                ),
                (
                    "record_id",
                    models.PositiveBigIntegerField(
                        blank=True,
                        help_text="Primary key of the reservation or ticket this entry is about.",
                        null=True,
                    ),
                ),
                (
                    "occurred_at",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now),
                ),
            ],
            options={
                "verbose_name_plural": "log entries",
                "ordering": ["-occurred_at", "-pk"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalLogEntry",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                (
                    "name",
                    models.CharField(help_text="Who performed the action.", max_length=200),
                ),
                ("action", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=LOG_CATEGORY_CHOICES,
                        db_index=True,
                        default="System",
                        max_length=50,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=LOG_STATUS_CHOICES,
                        db_index=True,
                        default="Success",
                        max_length=50,
                    ),
                ),
                (
                    "record_id",
                    models.PositiveBigIntegerField(
                        blank=True,
                        help_text="Primary key of the reservation or ticket this entry is about.",
                        null=True,
                    ),
                ),
                (
                    "occurred_at",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical log entry",
                "verbose_name_plural": "historical log entries",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
