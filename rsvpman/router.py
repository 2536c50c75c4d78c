"""
Submission router.

Flow:
    1. Read the public wedding code (several legacy locations). This is the
       only look at the answers before ledgering, and it cannot fail
    2. Resolve the wedding
    3. Record the raw payload in the ledger (always, whatever follows)
    4. Interpret the answers and dispatch on form type:
        - contact_sheet -> HouseholdService
        - rsvp          -> RsvpService
        - anything else -> stop; the raw payload is already stored
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from rsvpman.conf import rsvpman_settings
from rsvpman.exceptions import RsvpmanError
from rsvpman.fields import FormFields, payload_descriptors
from rsvpman.services import (
    ContactDetails,
    HouseholdService,
    LedgerService,
    RsvpAnswers,
    RsvpService,
    WeddingService,
)
from rsvpman.utils import normalize_email, normalize_phone

logger = logging.getLogger(__name__)

FORM_CONTACT_SHEET = "contact_sheet"
FORM_RSVP = "rsvp"

CODE_KEYS = ("wedding_code", "code")


@dataclass
class Acknowledgement:
    """Successful outcome of a submission, rendered as the webhook response."""

    raw_submission_id: uuid.UUID
    duplicate: bool = False
    routed: str | None = None
    household_id: uuid.UUID | None = None
    action: str | None = None
    target: str | None = None
    updated: int | None = None

    def as_dict(self) -> dict:
        body = {
            "ok": True,
            "routed": self.routed,
            "raw_submission_id": str(self.raw_submission_id),
            "duplicate": self.duplicate,
        }
        if self.routed is None:
            body["stored"] = "raw_only"
        if self.household_id is not None:
            body["household_id"] = str(self.household_id)
        if self.action is not None:
            body["action"] = self.action
        if self.target is not None:
            body["target"] = self.target
            body["updated"] = self.updated
        return body


# =============================================================================
# Payload locations
# =============================================================================


def _clean(value) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _hidden_value(payload: dict, label: str):
    """First non-blank raw value for ``label`` among the form's descriptors."""
    for descriptor in payload_descriptors(payload):
        if not isinstance(descriptor, dict):
            continue
        name = descriptor.get("label")
        if isinstance(name, str) and name.strip() == label:
            value = _clean(descriptor.get("value"))
            if value:
                return value
    return None


def read_code(payload: dict, query: Mapping[str, Any] | None = None) -> str | None:
    """
    Public wedding code, from the first location that has one.

    Query string, body top level, ``data`` object, then hidden form fields.
    Older form configurations used ``code`` instead of ``wedding_code``.
    Hidden fields are read raw, without option resolution.
    """
    query = query or {}
    data = payload.get("data") if isinstance(payload.get("data"), dict) else {}

    candidates = [query.get(key) for key in CODE_KEYS]
    candidates += [payload.get(key) for key in CODE_KEYS]
    candidates += [data.get(key) for key in CODE_KEYS]
    candidates += [_hidden_value(payload, key) for key in CODE_KEYS]

    for candidate in candidates:
        code = _clean(candidate)
        if code:
            return code
    return None


def read_form_type(
    payload: dict, fields: FormFields, query: Mapping[str, Any] | None = None
) -> str | None:
    query = query or {}
    for candidate in (fields.get("form_type"), payload.get("form_type"), query.get("form_type")):
        form_type = _clean(candidate)
        if form_type:
            return form_type.lower()
    return None


def read_submission_id(payload: dict) -> str | None:
    """Provider-assigned submission id used for ledger dedup."""
    data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
    for candidate in (data.get("submissionId"), data.get("responseId"), payload.get("eventId")):
        submission_id = _clean(candidate)
        if submission_id:
            return submission_id
    return None


# =============================================================================
# Routing
# =============================================================================


def route_submission(
    payload: dict, query: Mapping[str, Any] | None = None
) -> Acknowledgement:
    """
    Resolve, ledger and process one webhook payload.

    Raises:
        RsvpmanError: On validation or store failures (see exceptions)
    """
    if not isinstance(payload, dict):
        raise RsvpmanError("MISSING_CODE", "Payload must be a JSON object")

    code = read_code(payload, query)
    if not code:
        raise RsvpmanError("MISSING_CODE")

    wedding_id = WeddingService.resolve_code(code)

    raw_submission_id, created = LedgerService.record(
        wedding_id,
        rsvpman_settings.PROVIDER,
        read_submission_id(payload),
        payload,
    )

    ack = process_submission(wedding_id, payload, raw_submission_id, query=query)
    ack.duplicate = not created
    return ack


def process_submission(
    wedding_id: uuid.UUID,
    payload: dict,
    raw_submission_id: uuid.UUID,
    fields: FormFields | None = None,
    query: Mapping[str, Any] | None = None,
) -> Acknowledgement:
    """Dispatch an already-ledgered payload on its form type."""
    if fields is None:
        fields = FormFields.from_payload(payload)

    form_type = read_form_type(payload, fields, query)

    if form_type == FORM_CONTACT_SHEET:
        contact = ContactDetails.from_fields(fields)
        match = HouseholdService.match_or_create(
            wedding_id,
            normalize_phone(contact.phone),
            normalize_email(contact.email),
            contact,
            raw_submission_id,
        )
        return Acknowledgement(
            raw_submission_id=raw_submission_id,
            routed=FORM_CONTACT_SHEET,
            household_id=match.id,
            action=match.action,
        )

    if form_type == FORM_RSVP:
        result = RsvpService.apply(
            wedding_id,
            fields.get_text("household_id"),
            RsvpAnswers.from_fields(fields),
            raw_submission_id,
        )
        return Acknowledgement(
            raw_submission_id=raw_submission_id,
            routed=FORM_RSVP,
            household_id=result.household_id,
            target=result.target,
            updated=result.updated,
        )

    logger.info(
        "Form type %r not routed; raw submission %s stored only",
        form_type,
        raw_submission_id,
    )
    return Acknowledgement(raw_submission_id=raw_submission_id)
