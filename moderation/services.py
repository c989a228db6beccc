"""
Best-effort audit logging.

Audit rows are a side effect of the request that triggers them: a failure
here is logged and dropped, it never fails or rolls back the caller.
"""
import logging

from django.db import transaction

from .models import ModerationLog

logger = logging.getLogger(__name__)


def log_audit(actor, action_type, target_type, target_id, tenant=None, **metadata):
    """Append a `ModerationLog` row; returns it, or ``None`` when skipped or failed."""
    if actor is None or not getattr(actor, "is_authenticated", False):
        return None
    try:
        with transaction.atomic():
            return ModerationLog.objects.create(
                tenant=tenant,
                actor=actor,
                action_type=action_type,
                target_type=target_type,
                target_id=str(target_id),
                metadata=metadata,
            )
    except Exception:
        logger.warning(
            "Audit log write failed: %s %s:%s by user=%s",
            action_type, target_type, target_id, getattr(actor, "pk", None),
            exc_info=True,
        )
        return None
