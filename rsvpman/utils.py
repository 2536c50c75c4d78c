"""
Normalization helpers for contact and RSVP values.

All functions are total over optional input: unusable values come back as
None, nothing here raises.
"""

import re

_NON_DIGITS = re.compile(r"\D")

# E.164 caps a number at 15 digits including the country code
MAX_PHONE_DIGITS = 15

RSVP_YES = "yes"
RSVP_NO = "no"

_RSVP_ALIASES = {
    "yes": RSVP_YES,
    "y": RSVP_YES,
    "no": RSVP_NO,
    "n": RSVP_NO,
}


def normalize_phone(
    value: str | None, default_country_code: str | None = None
) -> str | None:
    """
    Normalize a phone number to E.164.

    10 digits are domestic and get the default country code.
    11 to 15 digits already carry a country code. Anything shorter or
    longer is unusable.

    Examples:
        "555-123-4567" -> "+15551234567"
        "14155550123"  -> "+14155550123"
        "123"          -> None
        "1" * 16       -> None
    """
    if value is None:
        return None

    digits = _NON_DIGITS.sub("", str(value))
    if len(digits) < 10 or len(digits) > MAX_PHONE_DIGITS:
        return None

    if len(digits) == 10:
        if default_country_code is None:
            from rsvpman.conf import rsvpman_settings

            default_country_code = rsvpman_settings.DEFAULT_COUNTRY_CODE
        return f"+{default_country_code}{digits}"

    return f"+{digits}"


def normalize_email(value: str | None) -> str | None:
    """Trim and lowercase an email address."""
    if value is None:
        return None
    email = str(value).strip().lower()
    return email or None


def normalize_rsvp_status(value: str | None) -> str | None:
    """Map free-form RSVP answers to "yes"/"no"; anything else is None."""
    if value is None:
        return None
    return _RSVP_ALIASES.get(str(value).strip().lower())


def coerce_party_size(value) -> int | None:
    """Party size as a non-negative int, or None if it isn't one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            return None
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None
