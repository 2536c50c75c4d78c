"""Tally app config."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class TallyConfig(AppConfig):
    name = "rsvpman.contrib.tally"
    label = "rsvpman_tally"
    verbose_name = _("Tally")
