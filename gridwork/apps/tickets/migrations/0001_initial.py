import django.db.models.deletion
import django.utils.timezone
import simple_history.models
from django.conf import settings
from django.db import migrations, models

TICKET_STATUS_CHOICES = [
    ("Pending", "Pending"),
    ("Ongoing", "Ongoing"),
    ("Archived/Delivered", "Archived/Delivered"),
]

TICKET_CATEGORY_CHOICES = [
    ("Technical", "Technical"),
    ("Billing", "Billing"),
    ("Support", "Support"),
    ("Bug", "Bug"),
]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Ticket",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("concern", models.CharField(blank=True, max_length=255)),
                (
                    "ticket_number",
                    models.CharField(editable=False, max_length=20, unique=True),
                ),
                ("date_requested", models.DateField(default=django.utils.timezone.localdate)),
                ("approved_by", models.CharField(blank=True, max_length=200)),
                (
                    "status",
                    models.CharField(
                        choices=TICKET_STATUS_CHOICES,
                        db_index=True,
                        default="Pending",
                        max_length=50,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=TICKET_CATEGORY_CHOICES,
                        db_index=True,
                        default="Support",
                        max_length=50,
                    ),
                ),
            ],
            options={
                "ordering": ["-date_requested", "-pk"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalTicket",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                ("name", models.CharField(max_length=200)),
                ("concern", models.CharField(blank=True, max_length=255)),
                (
                    "ticket_number",
                    models.CharField(db_index=True, editable=False, max_length=20),
                ),
                ("date_requested", models.DateField(default=django.utils.timezone.localdate)),
                ("approved_by", models.CharField(blank=True, max_length=200)),
                (
                    "status",
                    models.CharField(
                        choices=TICKET_STATUS_CHOICES,
                        db_index=True,
                        default="Pending",
                        max_length=50,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=TICKET_CATEGORY_CHOICES,
                        db_index=True,
                        default="Support",
                        max_length=50,
                    ),
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
                "verbose_name": "historical ticket",
                "verbose_name_plural": "historical tickets",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
