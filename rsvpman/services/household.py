"""
Household service - dedup and merge of contact sheet submissions.

Matching precedence within a wedding:
    1. phone_normalized
    2. email_normalized

A match is overwritten with the latest contact details; no match inserts a
new household. Per-wedding unique constraints on both keys turn a lost
insert race into an IntegrityError, which is retried once as a merge.
"""

import logging
import uuid
from dataclasses import dataclass

from django.db import DatabaseError, IntegrityError, transaction

from rsvpman.conf import rsvpman_settings
from rsvpman.exceptions import RsvpmanError
from rsvpman.fields import FormFields
from rsvpman.models import Household
from rsvpman.services.ledger import is_duplicate_error
from rsvpman.signals import household_created, household_updated

logger = logging.getLogger(__name__)

ACTION_INSERTED = "inserted"
ACTION_UPDATED = "updated"

ADDRESS_FIELDS = (
    "address_line1",
    "address_line2",
    "city",
    "state",
    "postal_code",
    "country",
)


@dataclass
class ContactDetails:
    """Contact sheet answers as extracted from the form."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None

    @classmethod
    def from_fields(cls, fields: FormFields) -> "ContactDetails":
        return cls(
            first_name=fields.get_text("first_name"),
            last_name=fields.get_text("last_name"),
            phone=fields.get_text("phone_number"),
            email=fields.get_text("email"),
            **{name: fields.get_text(name) for name in ADDRESS_FIELDS},
        )

    @property
    def primary_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or rsvpman_settings.DEFAULT_HOUSEHOLD_NAME


@dataclass
class HouseholdMatch:
    """Result of match_or_create."""

    id: uuid.UUID
    action: str


class HouseholdService:
    """Contact sheet dedup/merge into households."""

    @classmethod
    def match_or_create(
        cls,
        wedding_id: uuid.UUID,
        phone_normalized: str | None,
        email_normalized: str | None,
        contact: ContactDetails,
        raw_submission_id: uuid.UUID | None = None,
    ) -> HouseholdMatch:
        """
        Merge a contact sheet into the wedding's households.

        Args:
            wedding_id: Resolved wedding UUID
            phone_normalized: E.164 phone or None
            email_normalized: Lowercase email or None
            contact: Extracted contact/address answers
            raw_submission_id: Ledger entry that carried the submission

        Returns:
            HouseholdMatch with the household id and "inserted"/"updated"

        Raises:
            RsvpmanError: AMBIGUOUS_IDENTITY without phone and email,
                STORE_FAILURE on database errors
        """
        if not phone_normalized and not email_normalized:
            raise RsvpmanError("AMBIGUOUS_IDENTITY")

        for attempt in range(2):
            existing = cls.find_match(wedding_id, phone_normalized, email_normalized)
            try:
                with transaction.atomic():
                    if existing is not None:
                        changes = cls._update(
                            existing,
                            phone_normalized,
                            email_normalized,
                            contact,
                            raw_submission_id,
                        )
                        household, action = existing, ACTION_UPDATED
                    else:
                        household = cls._insert(
                            wedding_id,
                            phone_normalized,
                            email_normalized,
                            contact,
                            raw_submission_id,
                        )
                        action = ACTION_INSERTED
            except IntegrityError as exc:
                if attempt == 0 and is_duplicate_error(exc):
                    # Another submission for the same key won the insert
                    logger.info("Household write conflict in wedding %s, retrying", wedding_id)
                    continue
                raise RsvpmanError("STORE_FAILURE", str(exc)) from exc
            except DatabaseError as exc:
                logger.error("Household write failed in wedding %s: %s", wedding_id, exc)
                raise RsvpmanError("STORE_FAILURE", str(exc)) from exc
            break

        if action == ACTION_INSERTED:
            logger.info("Household %s inserted for wedding %s", household.id, wedding_id)
            household_created.send(sender=Household, household=household)
        else:
            logger.info("Household %s updated for wedding %s", household.id, wedding_id)
            household_updated.send(sender=Household, household=household, changes=changes)

        return HouseholdMatch(id=household.id, action=action)

    @classmethod
    def find_match(
        cls,
        wedding_id: uuid.UUID,
        phone_normalized: str | None,
        email_normalized: str | None,
    ) -> Household | None:
        """Find the household for phone, then email, within one wedding."""
        qs = Household.objects.filter(wedding_id=wedding_id)

        if phone_normalized:
            household = qs.filter(phone_normalized=phone_normalized).first()
            if household:
                return household

        if email_normalized:
            return qs.filter(email_normalized=email_normalized).first()

        return None

    @classmethod
    def _contact_values(
        cls,
        phone_normalized: str | None,
        email_normalized: str | None,
        contact: ContactDetails,
    ) -> dict:
        values = {
            "primary_name": contact.primary_name,
            "phone_raw": contact.phone or "",
            "phone_normalized": phone_normalized or "",
            "email_raw": contact.email or "",
            "email_normalized": email_normalized or "",
        }
        for name in ADDRESS_FIELDS:
            values[name] = getattr(contact, name) or ""
        return values

    @classmethod
    def _insert(
        cls,
        wedding_id,
        phone_normalized,
        email_normalized,
        contact,
        raw_submission_id,
    ) -> Household:
        return Household.objects.create(
            wedding_id=wedding_id,
            last_raw_submission_id=raw_submission_id,
            **cls._contact_values(phone_normalized, email_normalized, contact),
        )

    @classmethod
    def _update(
        cls,
        household: Household,
        phone_normalized,
        email_normalized,
        contact,
        raw_submission_id,
    ) -> dict:
        values = cls._contact_values(phone_normalized, email_normalized, contact)

        if email_normalized and email_normalized != household.email_normalized:
            taken = (
                Household.objects.filter(
                    wedding_id=household.wedding_id,
                    email_normalized=email_normalized,
                )
                .exclude(pk=household.pk)
                .exists()
            )
            if taken:
                logger.warning(
                    "Email already belongs to another household in wedding %s; "
                    "keeping the current email on household %s",
                    household.wedding_id,
                    household.id,
                )
                del values["email_raw"]
                del values["email_normalized"]

        changes = {}
        for key, value in values.items():
            old_value = getattr(household, key)
            if old_value != value:
                changes[key] = {"old": old_value, "new": value}
            setattr(household, key, value)

        household.last_raw_submission_id = raw_submission_id
        household.save()
        return changes
