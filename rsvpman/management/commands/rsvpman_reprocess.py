"""Management command to re-run routing for a ledgered submission."""

import json

from django.core.management.base import BaseCommand, CommandError

from rsvpman.exceptions import RsvpmanError
from rsvpman.router import process_submission
from rsvpman.services import LedgerService


class Command(BaseCommand):
    help = "Re-process a stored raw submission without recording a new ledger entry"

    def add_arguments(self, parser):
        parser.add_argument("raw_submission_id", help="RawSubmission id")

    def handle(self, *args, **options):
        entry = LedgerService.get(options["raw_submission_id"])
        if entry is None:
            raise CommandError(f"Raw submission {options['raw_submission_id']} not found")

        try:
            ack = process_submission(entry.wedding_id, entry.payload, entry.id)
        except RsvpmanError as exc:
            raise CommandError(f"{exc.code}: {exc.message}") from exc

        self.stdout.write(self.style.SUCCESS(json.dumps(ack.as_dict())))
