"""Rsvpman admin.

RawSubmission is append-only: its admin is read-only.
"""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from rsvpman.models import Guest, Household, RawSubmission, Wedding


# ===========================================
# Wedding Admin
# ===========================================


@admin.register(Wedding)
class WeddingAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "household_count", "created_at"]
    search_fields = ["code", "name"]
    readonly_fields = ["id", "created_at"]

    def household_count(self, obj):
        return obj.households.count()

    household_count.short_description = "Households"


# ===========================================
# Household Admin
# ===========================================


class GuestInline(admin.TabularInline):
    model = Guest
    extra = 0
    fields = ["first_name", "last_name", "rsvp_status", "party_size", "dietary_notes"]
    readonly_fields = ["rsvp_status"]


@admin.register(Household)
class HouseholdAdmin(admin.ModelAdmin):
    list_display = [
        "primary_name",
        "wedding",
        "phone_normalized",
        "email_normalized",
        "rsvp_status",
        "updated_at",
    ]
    list_filter = ["wedding", "rsvp_status"]
    search_fields = ["primary_name", "phone_normalized", "email_normalized"]
    raw_id_fields = ["last_raw_submission"]
    readonly_fields = ["id", "created_at", "updated_at", "submission_link"]
    inlines = [GuestInline]

    fieldsets = [
        (None, {"fields": ["id", "wedding", "primary_name"]}),
        (
            "Contact",
            {"fields": ["phone_raw", "phone_normalized", "email_raw", "email_normalized"]},
        ),
        (
            "Address",
            {
                "fields": [
                    "address_line1",
                    "address_line2",
                    "city",
                    "state",
                    "postal_code",
                    "country",
                ]
            },
        ),
        (
            "RSVP",
            {
                "fields": [
                    "rsvp_status",
                    "party_size",
                    "attending_events",
                    "dietary_notes",
                    "questions",
                ]
            },
        ),
        (
            "System",
            {
                "fields": ["submission_link", "created_at", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    def submission_link(self, obj):
        if not obj.last_raw_submission_id:
            return "-"
        url = reverse(
            "admin:rsvpman_rawsubmission_change", args=[obj.last_raw_submission_id]
        )
        return format_html('<a href="{}">{}</a>', url, obj.last_raw_submission_id)

    submission_link.short_description = "Last submission"


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    list_display = ["__str__", "household", "wedding", "rsvp_status", "party_size"]
    list_filter = ["wedding", "rsvp_status"]
    search_fields = ["first_name", "last_name", "household__primary_name"]
    raw_id_fields = ["household", "last_raw_submission"]
    readonly_fields = ["id", "updated_at"]


# ===========================================
# RawSubmission Admin (read-only ledger)
# ===========================================


@admin.register(RawSubmission)
class RawSubmissionAdmin(admin.ModelAdmin):
    list_display = ["id", "wedding", "provider", "provider_submission_id", "created_at"]
    list_filter = ["provider", "wedding"]
    search_fields = ["provider_submission_id"]
    readonly_fields = ["id", "wedding", "provider", "provider_submission_id", "payload", "created_at"]
    ordering = ["-created_at"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
