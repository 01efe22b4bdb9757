from django.apps import AppConfig


class TicketsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gridwork.apps.tickets"
    verbose_name = "Tickets"
