"""Rsvpman models."""

from rsvpman.models.wedding import Wedding
from rsvpman.models.raw_submission import RawSubmission
from rsvpman.models.household import Household, RsvpStatus
from rsvpman.models.guest import Guest

__all__ = [
    # Tenant
    "Wedding",
    # Ingestion ledger
    "RawSubmission",
    # Identity
    "Household",
    "RsvpStatus",
    "Guest",
]
