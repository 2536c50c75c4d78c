"""
Rsvpman configuration.

Usage in settings.py:
    RSVPMAN = {
        "DEFAULT_COUNTRY_CODE": "1",
        "RSVP_TARGET": "guests",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class RsvpmanSettings:
    """Rsvpman configuration settings."""

    # Prefixed to 10-digit (domestic) phone numbers
    DEFAULT_COUNTRY_CODE: str = "1"

    # Provider name stamped on every RawSubmission
    PROVIDER: str = "tally"

    # Where RSVP answers land: "household" or "guests" (fan-out)
    RSVP_TARGET: str = "household"

    # Household display name when the form carried no name fields
    DEFAULT_HOUSEHOLD_NAME: str = "Guest"

    # Error responses echo at most this many characters of the raw body
    RAW_PREVIEW_CHARS: int = 500

    # Log every inbound payload at DEBUG level
    LOG_PAYLOADS: bool = False


def get_rsvpman_settings() -> RsvpmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "RSVPMAN", {})
    return RsvpmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_rsvpman_settings(), name)


rsvpman_settings = _LazySettings()
