"""
RSVP service - apply RSVP answers to an explicitly referenced household.

The household is never inferred from contact details: the RSVP form carries
it in a hidden ``household_id`` field. Answers are applied as a sparse
update, so a form that doesn't ask a question never erases the stored
answer to it.
"""

import logging
import uuid
from dataclasses import dataclass, field

from django.db import DatabaseError, transaction
from django.utils import timezone

from rsvpman.conf import rsvpman_settings
from rsvpman.exceptions import RsvpmanError
from rsvpman.fields import FormFields
from rsvpman.models import Guest, Household
from rsvpman.signals import rsvp_applied
from rsvpman.utils import coerce_party_size, normalize_rsvp_status

logger = logging.getLogger(__name__)

TARGET_HOUSEHOLD = "household"
TARGET_GUESTS = "guests"


@dataclass
class RsvpAnswers:
    """
    RSVP answers as a partial update.

    ``status`` is always written. ``optional`` holds only the fields the
    form actually carried; anything missing from it stays untouched.
    """

    status: str | None
    optional: dict = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: FormFields) -> "RsvpAnswers":
        optional = {}

        dietary_notes = fields.get_text("dietary_notes")
        if dietary_notes is not None:
            optional["dietary_notes"] = dietary_notes

        questions = fields.get_text("questions")
        if questions is not None:
            optional["questions"] = questions

        attending_events = fields.get_list("attending_events")
        if attending_events is not None:
            optional["attending_events"] = attending_events

        party_size = coerce_party_size(fields.get("party_size"))
        if party_size is not None:
            optional["party_size"] = party_size

        return cls(status=fields.get_text("rsvp_status"), optional=optional)

    def as_update(self, raw_submission_id) -> dict:
        """Column -> value for the store write; status must be normalized first."""
        return {
            "rsvp_status": normalize_rsvp_status(self.status),
            "last_raw_submission_id": raw_submission_id,
            **self.optional,
        }


@dataclass
class RsvpResult:
    """Result of RsvpService.apply."""

    household_id: uuid.UUID
    status: str
    target: str
    updated: int


class RsvpService:
    """Applies RSVP answers to a household or its guests."""

    @classmethod
    def apply(
        cls,
        wedding_id: uuid.UUID,
        household_ref: str | None,
        answers: RsvpAnswers,
        raw_submission_id: uuid.UUID | None = None,
        target: str | None = None,
    ) -> RsvpResult:
        """
        Apply RSVP answers.

        Args:
            wedding_id: Resolved wedding UUID
            household_ref: Household id from the form's hidden field
            answers: Extracted answers
            raw_submission_id: Ledger entry that carried the submission
            target: "household" or "guests" (defaults to RSVP_TARGET)

        Returns:
            RsvpResult with the number of rows updated

        Raises:
            RsvpmanError: INVALID_REFERENCE, INVALID_STATUS,
                HOUSEHOLD_NOT_FOUND (also for another wedding's household),
                STORE_FAILURE
        """
        household_id = cls._parse_reference(household_ref)

        status = normalize_rsvp_status(answers.status)
        if status is None:
            raise RsvpmanError("INVALID_STATUS", received=answers.status)

        target = target or rsvpman_settings.RSVP_TARGET
        if target not in (TARGET_HOUSEHOLD, TARGET_GUESTS):
            raise ValueError(f"Unknown RSVP target: {target!r}")

        household = Household.objects.filter(pk=household_id, wedding_id=wedding_id).first()
        if household is None:
            raise RsvpmanError("HOUSEHOLD_NOT_FOUND")

        now = timezone.now()
        update = {**answers.as_update(raw_submission_id), "updated_at": now}

        try:
            with transaction.atomic():
                if target == TARGET_HOUSEHOLD:
                    updated = Household.objects.filter(
                        pk=household.pk, wedding_id=wedding_id
                    ).update(**update)
                else:
                    updated = Guest.objects.filter(
                        household_id=household.pk, wedding_id=wedding_id
                    ).update(**update)
                    Household.objects.filter(pk=household.pk).update(
                        last_raw_submission_id=raw_submission_id, updated_at=now
                    )
        except DatabaseError as exc:
            raise RsvpmanError("STORE_FAILURE", str(exc)) from exc

        if target == TARGET_GUESTS and not updated:
            logger.warning("Household %s has no guests to update", household.pk)

        logger.info(
            "RSVP %s applied to %s (%d rows) for household %s",
            status,
            target,
            updated,
            household.pk,
        )

        result = RsvpResult(
            household_id=household.pk,
            status=status,
            target=target,
            updated=updated,
        )
        rsvp_applied.send(sender=Household, household=household, result=result)
        return result

    @staticmethod
    def _parse_reference(household_ref) -> uuid.UUID:
        try:
            return uuid.UUID(str(household_ref).strip())
        except (TypeError, ValueError, AttributeError):
            raise RsvpmanError("INVALID_REFERENCE", received=household_ref)
