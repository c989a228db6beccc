# users/validators.py
from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ValidationError

from email_validator import validate_email as ev_validate_email, EmailNotValidError


def validate_email_smart(value: str) -> str:
    """
    Validate & normalize an email using the 'email-validator' library.

    - Handles syntax, IDN/unicode, and (optionally) DNS deliverability
    - Returns the normalized (lowercased) email string
    """
    v = (value or "").strip()
    check_deliverability = bool(getattr(settings, "STRICT_EMAIL_DNS", False))
    try:
        info = ev_validate_email(v, check_deliverability=check_deliverability)
        return info.normalized.lower()
    except EmailNotValidError as e:
        raise ValidationError(str(e))
