"""Activity log badge colors."""

from django import template

from gridwork.apps.core.templatetags.ui_tags import badge_class

register = template.Library()

LOG_STATUS_COLORS = {
    "success": "bg-green-100 text-green-700",
    "warning": "bg-yellow-100 text-yellow-700",
    "failed": "bg-red-100 text-red-700",
}

LOG_CATEGORY_COLORS = {
    "reservation": "bg-cyan-100 text-cyan-700",
    "ticket": "bg-indigo-100 text-indigo-700",
    "account": "bg-purple-100 text-purple-700",
    "system": "bg-gray-200 text-gray-700",
}


@register.filter
def log_status_class(status):
    return badge_class(status, LOG_STATUS_COLORS)


@register.filter
def log_category_class(category):
    return badge_class(category, LOG_CATEGORY_COLORS)
