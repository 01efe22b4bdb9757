"""Signals for the logs app.

Writes LogEntry records when reservations or tickets are created, change
status or are deleted, and when users log in or fail to.
Set ``instance._skip_activity_log = True`` to suppress logging for one save.
"""

from __future__ import annotations

import logging

from django.contrib.auth.signals import user_logged_in, user_login_failed
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver
from django.utils.text import Truncator

from gridwork.apps.core.listing import normalize_key
from gridwork.apps.reservations.models import Reservation
from gridwork.apps.tickets.models import Ticket
from gridwork.logging import current_log_context

from .models import LogEntry

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "System"

_CATEGORY_BY_MODEL = {
    Reservation: LogEntry.Category.RESERVATION,
    Ticket: LogEntry.Category.TICKET,
}


def _current_actor() -> str:
    """Username bound by the request middleware, or "System" outside a request."""
    return current_log_context().get("username") or SYSTEM_ACTOR


def _label(instance) -> str:
    if isinstance(instance, Ticket):
        return f"{instance.ticket_number} ({instance.name})"
    return instance.name


def record_activity(
    action: str,
    *,
    category: str,
    status: str = LogEntry.Status.SUCCESS,
    record_id: int | None = None,
    name: str | None = None,
) -> LogEntry:
    """Create a LogEntry attributed to the current user.

    Long actions are truncated to fit the column.
    """
    max_length = LogEntry._meta.get_field("action").max_length
    entry = LogEntry.objects.create(
        name=name or _current_actor(),
        action=Truncator(action).chars(max_length),
        category=category,
        status=status,
        record_id=record_id,
    )
    logger.info(
        "activity_logged",
        extra={"log_entry_id": entry.pk, "category": category, "record_id": record_id},
    )
    return entry


# =============================================================================
# Reservation / ticket lifecycle
# =============================================================================


@receiver(pre_save, sender=Reservation)
@receiver(pre_save, sender=Ticket)
def capture_original_status(sender, instance, **kwargs):
    """Remember the stored status so post_save can detect a change."""
    instance._original_status = None
    if instance.pk:
        instance._original_status = (
            sender.objects.filter(pk=instance.pk).values_list("status", flat=True).first()
        )


@receiver(post_save, sender=Reservation)
@receiver(post_save, sender=Ticket)
def log_record_saved(sender, instance, created, **kwargs):
    if getattr(instance, "_skip_activity_log", False):
        return

    category = _CATEGORY_BY_MODEL[sender]
    noun = category.label

    if created:
        record_activity(
            f"{noun} created: {_label(instance)}",
            category=category,
            record_id=instance.pk,
        )
        return

    original_status = getattr(instance, "_original_status", None)
    if original_status is not None and normalize_key(original_status) != normalize_key(
        instance.status
    ):
        record_activity(
            f"{noun} {_label(instance)} status changed: "
            f"{original_status} \u2192 {instance.status}",
            category=category,
            record_id=instance.pk,
        )


@receiver(post_delete, sender=Reservation)
@receiver(post_delete, sender=Ticket)
def log_record_deleted(sender, instance, **kwargs):
    if getattr(instance, "_skip_activity_log", False):
        return

    category = _CATEGORY_BY_MODEL[sender]
    record_activity(
        f"{category.label} deleted: {_label(instance)}",
        category=category,
        status=LogEntry.Status.WARNING,
        record_id=instance.pk,
    )


# =============================================================================
# Authentication
# =============================================================================


@receiver(user_logged_in)
def log_user_logged_in(sender, request, user, **kwargs):
    record_activity(
        "Logged in",
        category=LogEntry.Category.ACCOUNT,
        name=user.get_username(),
    )


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    username = (credentials or {}).get("username") or "unknown"
    record_activity(
        f"Failed login attempt for {username}",
        category=LogEntry.Category.ACCOUNT,
        status=LogEntry.Status.FAILED,
        name=username,
    )
