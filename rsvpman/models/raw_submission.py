"""
RawSubmission model - append-only ledger of inbound webhook payloads.

Every payload is stored before it is interpreted, so the audit trail is
complete even when processing fails or the form type is unknown.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class RawSubmission(models.Model):
    """
    One inbound webhook delivery.

    Rules:
    - (wedding, provider, provider_submission_id) is unique when the
      submission id is present; redeliveries resolve to the same row.
    - Never updated or deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    wedding = models.ForeignKey(
        "rsvpman.Wedding",
        on_delete=models.PROTECT,
        related_name="raw_submissions",
        verbose_name=_("wedding"),
    )
    provider = models.CharField(_("provider"), max_length=50, db_index=True)
    provider_submission_id = models.CharField(
        _("provider submission id"),
        max_length=255,
        null=True,
        blank=True,
        help_text=_("Submission id assigned by the form provider"),
    )
    payload = models.JSONField(_("payload"), default=dict)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True, db_index=True)

    class Meta:
        db_table = "rsvpman_raw_submission"
        verbose_name = _("raw submission")
        verbose_name_plural = _("raw submissions")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["wedding", "provider", "provider_submission_id"],
                condition=models.Q(provider_submission_id__isnull=False),
                name="rsvpman_unique_provider_submission",
            ),
        ]
        indexes = [
            models.Index(fields=["wedding", "-created_at"], name="rsvpman_raw_wedding_idx"),
        ]

    def __str__(self):
        return f"{self.provider}:{self.provider_submission_id or self.id}"
