"""
Household model - deduplicated contact record for one invited party.

Data architecture:
    phone_raw / email_raw
        Exactly what the form sent, kept for display and debugging.

    phone_normalized / email_normalized
        Dedup keys (E.164 phone, lowercase email). Unique per wedding when
        non-empty, so two concurrent inserts for the same key cannot both win.

    RSVP fields
        Written by RsvpService when RSVP_TARGET is "household".
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class RsvpStatus(models.TextChoices):
    YES = "yes", _("Attending")
    NO = "no", _("Not attending")


class Household(models.Model):
    """Invited party within a wedding."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    wedding = models.ForeignKey(
        "rsvpman.Wedding",
        on_delete=models.PROTECT,
        related_name="households",
        verbose_name=_("wedding"),
    )

    primary_name = models.CharField(_("name"), max_length=200)

    # Contact
    phone_raw = models.CharField(_("phone (as sent)"), max_length=50, blank=True)
    phone_normalized = models.CharField(
        _("phone"),
        max_length=20,
        blank=True,
        help_text=_("E.164 (+15551234567)"),
    )
    email_raw = models.CharField(_("email (as sent)"), max_length=254, blank=True)
    email_normalized = models.CharField(
        _("email"),
        max_length=254,
        blank=True,
        help_text=_("Lowercase, trimmed"),
    )

    # Address
    address_line1 = models.CharField(_("address line 1"), max_length=200, blank=True)
    address_line2 = models.CharField(_("address line 2"), max_length=200, blank=True)
    city = models.CharField(_("city"), max_length=100, blank=True)
    state = models.CharField(_("state"), max_length=100, blank=True)
    postal_code = models.CharField(_("postal code"), max_length=20, blank=True)
    country = models.CharField(_("country"), max_length=100, blank=True)

    # RSVP
    rsvp_status = models.CharField(
        _("RSVP"),
        max_length=10,
        choices=RsvpStatus.choices,
        blank=True,
    )
    dietary_notes = models.TextField(_("dietary notes"), blank=True)
    questions = models.TextField(_("questions"), blank=True)
    attending_events = models.JSONField(_("attending events"), default=list, blank=True)
    party_size = models.PositiveIntegerField(_("party size"), null=True, blank=True)

    # Audit
    last_raw_submission = models.ForeignKey(
        "rsvpman.RawSubmission",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
        verbose_name=_("last submission"),
    )
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:
        db_table = "rsvpman_household"
        verbose_name = _("household")
        verbose_name_plural = _("households")
        ordering = ["primary_name"]
        constraints = [
            models.UniqueConstraint(
                fields=["wedding", "phone_normalized"],
                condition=~models.Q(phone_normalized=""),
                name="rsvpman_unique_household_phone",
            ),
            models.UniqueConstraint(
                fields=["wedding", "email_normalized"],
                condition=~models.Q(email_normalized=""),
                name="rsvpman_unique_household_email",
            ),
        ]

    def __str__(self):
        return self.primary_name
