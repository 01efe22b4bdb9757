"""Ticket badge colors."""

from django import template

from gridwork.apps.core.templatetags.ui_tags import badge_class

register = template.Library()

TICKET_STATUS_COLORS = {
    "pending": "bg-red-100 text-red-700",
    "ongoing": "bg-green-100 text-green-700",
    "archived/delivered": "bg-blue-100 text-blue-700",
}

TICKET_STATUS_DEFAULT = "bg-gray-100 text-gray-600"

TICKET_CATEGORY_COLORS = {
    "technical": "bg-green-100 text-green-700",
    "billing": "bg-blue-100 text-blue-700",
    "support": "bg-yellow-100 text-yellow-700",
    "bug": "bg-red-100 text-red-700",
}

# Category badges are squarer than status pills
TICKET_CATEGORY_BASE = "text-xs font-medium px-3 py-1 rounded-lg whitespace-nowrap"


@register.filter
def ticket_status_class(status):
    return badge_class(status, TICKET_STATUS_COLORS, default=TICKET_STATUS_DEFAULT)


@register.filter
def ticket_category_class(category):
    return badge_class(category, TICKET_CATEGORY_COLORS, base=TICKET_CATEGORY_BASE)
