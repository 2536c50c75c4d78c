"""
Rsvpman signals — public event API.

Emitted signals:
- household_created: Emitted by HouseholdService.match_or_create()
- household_updated: Emitted by HouseholdService.match_or_create()
- rsvp_applied: Emitted by RsvpService.apply()
"""

from django.dispatch import Signal

# Household signals (emitted by services)
household_created = Signal()  # sender=Household, household=Household
household_updated = Signal()  # sender=Household, household=Household, changes=dict

# RSVP signals
rsvp_applied = Signal()  # sender=Household, household=Household, result=RsvpResult
