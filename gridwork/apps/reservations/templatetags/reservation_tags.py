"""Reservation badge colors."""

from django import template

from gridwork.apps.core.templatetags.ui_tags import badge_class

register = template.Library()

RESERVATION_CATEGORY_COLORS = {
    "co-working": "bg-cyan-100 text-cyan-700",
    "virtual": "bg-blue-100 text-blue-700",
    "private": "bg-indigo-100 text-indigo-700",
    "meeting": "bg-purple-100 text-purple-700",
}

RESERVATION_STATUS_COLORS = {
    "upcoming": "bg-yellow-100 text-yellow-700",
    "ongoing": "bg-green-100 text-green-700",
    "archived/delivered": "bg-gray-200 text-gray-700",
}

RESERVATION_STATUS_DEFAULT = "bg-gray-100 text-gray-600"


@register.filter
def reservation_category_class(category):
    return badge_class(category, RESERVATION_CATEGORY_COLORS)


@register.filter
def reservation_status_class(status):
    return badge_class(status, RESERVATION_STATUS_COLORS, default=RESERVATION_STATUS_DEFAULT)
