"""Rsvpman services.

- WeddingService: public code -> wedding id
- LedgerService: idempotent raw payload storage
- HouseholdService: contact sheet dedup/merge
- RsvpService: RSVP answers (household or guest fan-out)
"""

from rsvpman.services.wedding import WeddingService
from rsvpman.services.ledger import LedgerService
from rsvpman.services.household import ContactDetails, HouseholdMatch, HouseholdService
from rsvpman.services.rsvp import RsvpAnswers, RsvpResult, RsvpService

__all__ = [
    "WeddingService",
    "LedgerService",
    "ContactDetails",
    "HouseholdMatch",
    "HouseholdService",
    "RsvpAnswers",
    "RsvpResult",
    "RsvpService",
]
