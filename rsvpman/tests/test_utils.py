"""Tests for phone, email, RSVP status and party size normalization."""

import pytest

from rsvpman.utils import (
    coerce_party_size,
    normalize_email,
    normalize_phone,
    normalize_rsvp_status,
)


class TestNormalizePhone:
    def test_domestic_number_gets_country_code(self):
        assert normalize_phone("555-123-4567") == "+15551234567"

    def test_eleven_digits_keep_their_country_code(self):
        assert normalize_phone("14155550123") == "+14155550123"

    def test_international_number_with_plus(self):
        assert normalize_phone("+44 20 7946 0958") == "+442079460958"

    def test_too_short_is_rejected(self):
        assert normalize_phone("123") is None

    def test_longer_than_e164_is_rejected(self):
        assert normalize_phone("+1 234 567 890 123 456") is None
        assert normalize_phone("9" * 21) is None

    def test_fifteen_digits_is_the_limit(self):
        assert normalize_phone("123456789012345") == "+123456789012345"

    def test_none_and_empty(self):
        assert normalize_phone(None) is None
        assert normalize_phone("") is None

    def test_formatting_is_stripped(self):
        assert normalize_phone("(555) 000.1111") == "+15550001111"

    def test_explicit_country_code(self):
        assert normalize_phone("5550001111", default_country_code="52") == "+525550001111"

    def test_country_code_from_settings(self, settings):
        settings.RSVPMAN = {"DEFAULT_COUNTRY_CODE": "61"}
        assert normalize_phone("5550001111") == "+615550001111"


class TestNormalizeEmail:
    def test_trims_and_lowercases(self):
        assert normalize_email("  Jane.Doe@Example.COM ") == "jane.doe@example.com"

    def test_blank_is_none(self):
        assert normalize_email("   ") is None
        assert normalize_email(None) is None


class TestNormalizeRsvpStatus:
    @pytest.mark.parametrize("value", ["Yes", "y", " YES ", "Y"])
    def test_yes(self, value):
        assert normalize_rsvp_status(value) == "yes"

    @pytest.mark.parametrize("value", ["no", "N", " No "])
    def test_no(self, value):
        assert normalize_rsvp_status(value) == "no"

    @pytest.mark.parametrize("value", ["maybe", "", "yess", None])
    def test_invalid(self, value):
        assert normalize_rsvp_status(value) is None


class TestCoercePartySize:
    def test_int_and_numeric_string(self):
        assert coerce_party_size(3) == 3
        assert coerce_party_size(" 4 ") == 4
        assert coerce_party_size(2.0) == 2

    def test_unusable_values(self):
        assert coerce_party_size("two") is None
        assert coerce_party_size(-1) is None
        assert coerce_party_size(1.5) is None
        assert coerce_party_size(True) is None
        assert coerce_party_size(None) is None
