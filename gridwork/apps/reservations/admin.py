"""Admin configuration for reservations app."""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from gridwork.apps.reservations.models import Reservation


@admin.register(Reservation)
class ReservationAdmin(SimpleHistoryAdmin):
    list_display = ["id", "name", "category", "status", "start_date", "end_date", "location"]
    list_filter = ["status", "category", "start_date"]
    search_fields = ["name", "email", "contact_number", "location"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-start_date"]
