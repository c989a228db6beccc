"""
Fire-and-forget notification inserts.

A notification is a side effect of the action that triggers it; failing
to store one is logged and never surfaces to the client.
"""
import logging

from django.db import transaction

from .models import Notification

logger = logging.getLogger(__name__)


def notify(user_id, notification_type, **payload):
    try:
        with transaction.atomic():
            return Notification.objects.create(user_id=user_id, type=notification_type, payload=payload)
    except Exception:
        logger.warning("Notification insert failed for user=%s type=%s", user_id, notification_type, exc_info=True)
        return None
