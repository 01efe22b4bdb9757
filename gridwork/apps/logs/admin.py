"""Admin configuration for logs app."""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from gridwork.apps.logs.models import LogEntry


@admin.register(LogEntry)
class LogEntryAdmin(SimpleHistoryAdmin):
    list_display = ["id", "name", "action_preview", "category", "status", "occurred_at"]
    list_filter = ["status", "category", "occurred_at"]
    search_fields = ["name", "action"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-occurred_at"]

    @admin.display(description="Action")
    def action_preview(self, obj):
        """Return truncated action text."""
        return obj.action[:50] + "..." if len(obj.action) > 50 else obj.action
