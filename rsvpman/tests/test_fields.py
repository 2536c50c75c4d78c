"""Tests for label-based field extraction."""

from rsvpman.fields import FormFields


class TestFormFields:
    def test_lookup_by_label(self):
        fields = FormFields([
            {"label": "first_name", "value": "Jane"},
            {"label": "last_name", "value": "Doe"},
        ])
        assert fields.get("first_name") == "Jane"
        assert fields.get("last_name") == "Doe"

    def test_missing_label_is_none(self):
        fields = FormFields([{"label": "first_name", "value": "Jane"}])
        assert fields.get("email") is None
        assert "email" not in fields

    def test_first_descriptor_wins(self):
        fields = FormFields([
            {"label": "email", "value": "first@example.com"},
            {"label": "email", "value": "second@example.com"},
        ])
        assert fields.get("email") == "first@example.com"

    def test_empty_values_are_absent(self):
        fields = FormFields([
            {"label": "dietary_notes", "value": ""},
            {"label": "attending_events", "value": []},
            {"label": "questions", "value": None},
        ])
        assert len(fields) == 0

    def test_empty_value_does_not_shadow_later_descriptor(self):
        fields = FormFields([
            {"label": "email", "value": ""},
            {"label": "email", "value": "jane@example.com"},
        ])
        assert fields.get("email") == "jane@example.com"

    def test_option_ids_resolve_to_text(self):
        fields = FormFields([
            {
                "label": "attending_events",
                "value": ["opt-1", "opt-3"],
                "options": [
                    {"id": "opt-1", "text": "Ceremony"},
                    {"id": "opt-2", "text": "Brunch"},
                    {"id": "opt-3", "text": "Reception"},
                ],
            },
            {
                "label": "rsvp_status",
                "value": "opt-y",
                "options": [{"id": "opt-y", "text": "Yes"}],
            },
        ])
        assert fields.get("attending_events") == ["Ceremony", "Reception"]
        assert fields.get("rsvp_status") == "Yes"

    def test_unknown_option_id_passes_through(self):
        fields = FormFields([
            {
                "label": "attending_events",
                "value": ["opt-1", "opt-9"],
                "options": [{"id": "opt-1", "text": "Ceremony"}],
            },
        ])
        assert fields.get("attending_events") == ["Ceremony", "opt-9"]

    def test_malformed_options_are_ignored(self):
        fields = FormFields([
            {"label": "x", "value": "a", "options": [{"id": ["a"], "text": "A"}]},
            {
                "label": "attending_events",
                "value": ["e1", ["nested"], "e2"],
                "options": [
                    {"id": {"nested": True}, "text": "Broken"},
                    {"id": "e1"},
                    {"text": "No id"},
                    "not-a-dict",
                    {"id": "e1", "text": "Ceremony"},
                    {"id": "e2", "text": "Reception"},
                ],
            },
        ])
        assert fields.get("x") == "a"
        assert fields.get("attending_events") == ["Ceremony", ["nested"], "Reception"]

    def test_scalars_pass_through(self):
        fields = FormFields([
            {"label": "party_size", "value": 3},
            {"label": "plus_one", "value": True},
        ])
        assert fields.get("party_size") == 3
        assert fields.get("plus_one") is True

    def test_malformed_descriptors_are_skipped(self):
        fields = FormFields([
            "not-a-dict",
            {"value": "no label"},
            {"label": 42, "value": "numeric label"},
            {"label": " city ", "value": "Austin"},
        ])
        assert fields.labels() == ["city"]

    def test_get_text_and_get_list(self):
        fields = FormFields([
            {"label": "first_name", "value": "  Jane  "},
            {"label": "attending_events", "value": "Ceremony"},
            {"label": "tags", "value": ["a", "b"]},
        ])
        assert fields.get_text("first_name") == "Jane"
        assert fields.get_list("attending_events") == ["Ceremony"]
        assert fields.get_text("tags") == "a, b"
        assert fields.get_text("missing") is None
        assert fields.get_list("missing") is None


class TestFromPayload:
    def test_reads_data_fields(self, tally_payload):
        payload = tally_payload("contact_sheet", {"first_name": "Jane"})
        fields = FormFields.from_payload(payload)
        assert fields.get("first_name") == "Jane"
        assert fields.get("wedding_code") == "TT01"

    def test_reads_top_level_fields(self):
        fields = FormFields.from_payload({"fields": [{"label": "city", "value": "Austin"}]})
        assert fields.get("city") == "Austin"

    def test_no_fields_is_empty(self):
        assert len(FormFields.from_payload({})) == 0
        assert len(FormFields.from_payload({"data": {"fields": "nope"}})) == 0
