"""Tests for admin registration and the reprocess command."""

import uuid
from io import StringIO

import pytest
from django.contrib import admin
from django.core.management import CommandError, call_command

from rsvpman.models import Guest, Household, RawSubmission, Wedding
from rsvpman.services import LedgerService


class TestAdminRegistration:
    def test_models_registered(self):
        for model in (Wedding, Household, Guest, RawSubmission):
            assert admin.site.is_registered(model)

    def test_raw_submissions_are_read_only(self, rf):
        model_admin = admin.site._registry[RawSubmission]
        request = rf.get("/")
        assert model_admin.has_add_permission(request) is False
        assert model_admin.has_change_permission(request) is False
        assert model_admin.has_delete_permission(request) is False

    def test_changelist_renders(self, admin_client, household):
        response = admin_client.get("/admin/rsvpman/household/")
        assert response.status_code == 200


class TestReprocessCommand:
    def test_reprocesses_stored_payload(self, wedding, tally_payload):
        payload = tally_payload("contact_sheet", {"email": "re@example.com", "first_name": "Re"})
        entry_id, _ = LedgerService.record(wedding.id, "tally", "sub-1", payload)

        out = StringIO()
        call_command("rsvpman_reprocess", str(entry_id), stdout=out)

        assert '"action": "inserted"' in out.getvalue()
        household = Household.objects.get(wedding=wedding)
        assert household.last_raw_submission_id == entry_id
        assert RawSubmission.objects.count() == 1

    def test_unknown_submission(self, db):
        with pytest.raises(CommandError, match="not found"):
            call_command("rsvpman_reprocess", str(uuid.uuid4()))

    def test_processing_error(self, wedding, tally_payload):
        payload = tally_payload("contact_sheet", {"first_name": "NoContact"})
        entry_id, _ = LedgerService.record(wedding.id, "tally", "sub-1", payload)

        with pytest.raises(CommandError, match="AMBIGUOUS_IDENTITY"):
            call_command("rsvpman_reprocess", str(entry_id))
