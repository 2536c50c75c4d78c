"""Guest model - individual attendee within a household."""

import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from rsvpman.models.household import RsvpStatus


class Guest(models.Model):
    """
    Attendee record.

    Guests are created by the host product; rsvpman only updates their RSVP
    fields when RSVP_TARGET is "guests".

    Rules:
    - guest.wedding must equal guest.household.wedding
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        "rsvpman.Household",
        on_delete=models.CASCADE,
        related_name="guests",
        verbose_name=_("household"),
    )
    wedding = models.ForeignKey(
        "rsvpman.Wedding",
        on_delete=models.PROTECT,
        related_name="guests",
        verbose_name=_("wedding"),
    )

    first_name = models.CharField(_("first name"), max_length=100, blank=True)
    last_name = models.CharField(_("last name"), max_length=100, blank=True)

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

    last_raw_submission = models.ForeignKey(
        "rsvpman.RawSubmission",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
        verbose_name=_("last submission"),
    )
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:
        db_table = "rsvpman_guest"
        verbose_name = _("guest")
        verbose_name_plural = _("guests")
        ordering = ["last_name", "first_name"]
        indexes = [
            models.Index(fields=["wedding", "household"], name="rsvpman_guest_household_idx"),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name}".strip() or str(self.id)

    def clean(self):
        if self.household_id and self.household.wedding_id != self.wedding_id:
            raise ValidationError(
                {"wedding": _("Guest must belong to its household's wedding.")}
            )

    def save(self, *args, **kwargs):
        # Inherit the wedding from the household when not given
        if self.household_id and not self.wedding_id:
            self.wedding_id = self.household.wedding_id
        self.clean()
        super().save(*args, **kwargs)
