"""Wedding model - the tenant every record belongs to."""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class Wedding(models.Model):
    """
    A wedding (tenant).

    ``code`` is the short public code pasted into third-party form
    configuration instead of the internal UUID. Rsvpman never writes
    weddings; they are managed by the host product.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(
        _("public code"),
        max_length=32,
        unique=True,
        help_text=_("Short code used in form configuration (ex: TT01)"),
    )
    name = models.CharField(_("name"), max_length=200, blank=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        db_table = "rsvpman_wedding"
        verbose_name = _("wedding")
        verbose_name_plural = _("weddings")
        ordering = ["code"]

    def __str__(self):
        return f"{self.name or self.code} ({self.code})"
