"""Atomic UI primitives: badge, badge_class, addstr.

App-level tag libraries build their status/category filters on
``badge_class``::

    from gridwork.apps.core.templatetags.ui_tags import badge_class
"""

from __future__ import annotations

from collections.abc import Mapping

from django import template
from django.utils.html import format_html

from gridwork.apps.core.listing import normalize_key

register = template.Library()


# ---- Badge ------------------------------------------------------------------

PILL_BASE_CLASS = "text-xs px-3 py-1 rounded-full font-semibold"
"""Shape shared by rounded status/category pills."""

NEUTRAL_COLOR_CLASS = "bg-gray-100 text-gray-700"
"""Colors for values missing from a lookup table."""


def badge_class(
    value: str | None,
    colors: Mapping[str, str],
    *,
    default: str = NEUTRAL_COLOR_CLASS,
    base: str = PILL_BASE_CLASS,
) -> str:
    """Look up the presentational classes for a status/category value.

    ``value`` is compared lower-cased and trimmed against the keys of
    ``colors``. Unmapped or empty values get ``default``.

    Returns the color classes followed by the ``base`` shape classes.
    """
    color = colors.get(normalize_key(value), default)
    return f"{color} {base}"


@register.simple_tag
def badge(label: str | None, css_class: str = "") -> str:
    """Render a status/category badge.

    Usage:
        {% badge reservation.status reservation.status|reservation_status_class %}
    """
    if not css_class:
        css_class = badge_class(label, {})
    return format_html('<span class="{}">{}</span>', css_class, label or "")


# ---- Filters ----------------------------------------------------------------


@register.filter
def addstr(value, arg):
    """Concatenate two values as strings.

    Usage:
        {{ "Ticket #"|addstr:ticket.pk }}
    """
    return f"{value}{arg}"
