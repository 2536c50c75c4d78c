"""Pytest fixtures for Rsvpman tests."""

import pytest

from rsvpman.models import Guest, Household, Wedding


@pytest.fixture
def wedding(db):
    """Wedding with public code TT01."""
    return Wedding.objects.create(code="TT01", name="Taylor & Tran")


@pytest.fixture
def other_wedding(db):
    """A second tenant."""
    return Wedding.objects.create(code="ZZ99", name="Zed & Zoe")


@pytest.fixture
def household(wedding):
    """Existing household with contact details and prior RSVP answers."""
    return Household.objects.create(
        wedding=wedding,
        primary_name="John Doe",
        phone_raw="(555) 222-3333",
        phone_normalized="+15552223333",
        email_raw="John@Example.com",
        email_normalized="john@example.com",
        city="Portland",
        dietary_notes="vegetarian",
        questions="Is there parking?",
        party_size=2,
    )


@pytest.fixture
def guests(household):
    """Two guests under the household."""
    return [
        Guest.objects.create(household=household, first_name="John", last_name="Doe"),
        Guest.objects.create(
            household=household,
            first_name="Mary",
            last_name="Doe",
            dietary_notes="gluten free",
        ),
    ]


@pytest.fixture
def tally_payload():
    """
    Build a Tally FORM_RESPONSE payload.

    Usage:
        tally_payload("contact_sheet", {"first_name": "Jane"})
    """

    def build(form_type=None, answers=None, code="TT01", submission_id="sub-001"):
        fields = []
        if code is not None:
            fields.append({"key": "h1", "label": "wedding_code", "type": "HIDDEN_FIELDS", "value": code})
        if form_type is not None:
            fields.append({"key": "h2", "label": "form_type", "type": "HIDDEN_FIELDS", "value": form_type})
        for index, (label, value) in enumerate((answers or {}).items()):
            if isinstance(value, dict):
                fields.append({"key": f"q{index}", "label": label, **value})
            else:
                fields.append({"key": f"q{index}", "label": label, "value": value})

        data = {
            "responseId": f"resp-{submission_id}" if submission_id else None,
            "formId": "form-1",
            "formName": "Wedding form",
            "createdAt": "2026-05-01T12:00:00.000Z",
            "fields": fields,
        }
        if submission_id:
            data["submissionId"] = submission_id
        else:
            data.pop("responseId")

        return {
            "eventId": f"evt-{submission_id}" if submission_id else None,
            "eventType": "FORM_RESPONSE",
            "createdAt": "2026-05-01T12:00:00.000Z",
            "data": data,
        }

    return build
