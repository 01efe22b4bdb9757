"""Admin configuration for tickets app."""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from gridwork.apps.tickets.models import Ticket


@admin.register(Ticket)
class TicketAdmin(SimpleHistoryAdmin):
    list_display = [
        "ticket_number",
        "name",
        "category",
        "status",
        "approved_by",
        "date_requested",
        "updated_at",
    ]
    list_filter = ["status", "category", "date_requested"]
    search_fields = ["ticket_number", "name", "concern", "approved_by"]
    readonly_fields = ["ticket_number", "created_at", "updated_at"]
    ordering = ["-date_requested"]
