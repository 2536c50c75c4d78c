# Generated migration for Wedding, RawSubmission, Household and Guest

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Wedding",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Short code used in form configuration (ex: TT01)",
                        max_length=32,
                        unique=True,
                        verbose_name="public code",
                    ),
                ),
                ("name", models.CharField(blank=True, max_length=200, verbose_name="name")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "wedding",
                "verbose_name_plural": "weddings",
                "db_table": "rsvpman_wedding",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="RawSubmission",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("provider", models.CharField(db_index=True, max_length=50, verbose_name="provider")),
                (
                    "provider_submission_id",
                    models.CharField(
                        blank=True,
                        help_text="Submission id assigned by the form provider",
                        max_length=255,
                        null=True,
                        verbose_name="provider submission id",
                    ),
                ),
                ("payload", models.JSONField(default=dict, verbose_name="payload")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at"),
                ),
                (
                    "wedding",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="raw_submissions",
                        to="rsvpman.wedding",
                        verbose_name="wedding",
                    ),
                ),
            ],
            options={
                "verbose_name": "raw submission",
                "verbose_name_plural": "raw submissions",
                "db_table": "rsvpman_raw_submission",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["wedding", "-created_at"],
                        name="rsvpman_raw_wedding_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(provider_submission_id__isnull=False),
                        fields=("wedding", "provider", "provider_submission_id"),
                        name="rsvpman_unique_provider_submission",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Household",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("primary_name", models.CharField(max_length=200, verbose_name="name")),
                ("phone_raw", models.CharField(blank=True, max_length=50, verbose_name="phone (as sent)")),
                (
                    "phone_normalized",
                    models.CharField(
                        blank=True,
                        help_text="E.164 (+15551234567)",
                        max_length=20,
                        verbose_name="phone",
                    ),
                ),
                ("email_raw", models.CharField(blank=True, max_length=254, verbose_name="email (as sent)")),
                (
                    "email_normalized",
                    models.CharField(
                        blank=True,
                        help_text="Lowercase, trimmed",
                        max_length=254,
                        verbose_name="email",
                    ),
                ),
                ("address_line1", models.CharField(blank=True, max_length=200, verbose_name="address line 1")),
                ("address_line2", models.CharField(blank=True, max_length=200, verbose_name="address line 2")),
                ("city", models.CharField(blank=True, max_length=100, verbose_name="city")),
                ("state", models.CharField(blank=True, max_length=100, verbose_name="state")),
                ("postal_code", models.CharField(blank=True, max_length=20, verbose_name="postal code")),
                ("country", models.CharField(blank=True, max_length=100, verbose_name="country")),
                (
                    "rsvp_status",
                    models.CharField(
                        blank=True,
                        choices=[("yes", "Attending"), ("no", "Not attending")],
                        max_length=10,
                        verbose_name="RSVP",
                    ),
                ),
                ("dietary_notes", models.TextField(blank=True, verbose_name="dietary notes")),
                ("questions", models.TextField(blank=True, verbose_name="questions")),
                (
                    "attending_events",
                    models.JSONField(blank=True, default=list, verbose_name="attending events"),
                ),
                (
                    "party_size",
                    models.PositiveIntegerField(blank=True, null=True, verbose_name="party size"),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "last_raw_submission",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="rsvpman.rawsubmission",
                        verbose_name="last submission",
                    ),
                ),
                (
                    "wedding",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="households",
                        to="rsvpman.wedding",
                        verbose_name="wedding",
                    ),
                ),
            ],
            options={
                "verbose_name": "household",
                "verbose_name_plural": "households",
                "db_table": "rsvpman_household",
                "ordering": ["primary_name"],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("phone_normalized", ""), _negated=True),
                        fields=("wedding", "phone_normalized"),
                        name="rsvpman_unique_household_phone",
                    ),
                    models.UniqueConstraint(
                        condition=models.Q(("email_normalized", ""), _negated=True),
                        fields=("wedding", "email_normalized"),
                        name="rsvpman_unique_household_email",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Guest",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=100, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=100, verbose_name="last name")),
                (
                    "rsvp_status",
                    models.CharField(
                        blank=True,
                        choices=[("yes", "Attending"), ("no", "Not attending")],
                        max_length=10,
                        verbose_name="RSVP",
                    ),
                ),
                ("dietary_notes", models.TextField(blank=True, verbose_name="dietary notes")),
                ("questions", models.TextField(blank=True, verbose_name="questions")),
                (
                    "attending_events",
                    models.JSONField(blank=True, default=list, verbose_name="attending events"),
                ),
                (
                    "party_size",
                    models.PositiveIntegerField(blank=True, null=True, verbose_name="party size"),
                ),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                (
                    "household",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="guests",
                        to="rsvpman.household",
                        verbose_name="household",
                    ),
                ),
                (
                    "last_raw_submission",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="rsvpman.rawsubmission",
                        verbose_name="last submission",
                    ),
                ),
                (
                    "wedding",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="guests",
                        to="rsvpman.wedding",
                        verbose_name="wedding",
                    ),
                ),
            ],
            options={
                "verbose_name": "guest",
                "verbose_name_plural": "guests",
                "db_table": "rsvpman_guest",
                "ordering": ["last_name", "first_name"],
                "indexes": [
                    models.Index(
                        fields=["wedding", "household"],
                        name="rsvpman_guest_household_idx",
                    ),
                ],
            },
        ),
    ]
