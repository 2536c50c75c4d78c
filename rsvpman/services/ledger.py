"""
Ledger service - idempotent storage of raw webhook payloads.

Uniqueness of (wedding, provider, provider_submission_id) is enforced by
the database, not by a lock: concurrent redeliveries race on the insert,
the loser gets an IntegrityError and recovers the winner's row.
"""

import logging
import uuid

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction

from rsvpman.exceptions import RsvpmanError
from rsvpman.models import RawSubmission

logger = logging.getLogger(__name__)

_DUPLICATE_MARKERS = ("unique", "duplicate")


def is_duplicate_error(exc: Exception) -> bool:
    """True if a store error reports a uniqueness violation."""
    message = str(exc).lower()
    return any(marker in message for marker in _DUPLICATE_MARKERS)


class LedgerService:
    """Append-only raw submission ledger."""

    @classmethod
    def record(
        cls,
        wedding_id: uuid.UUID,
        provider: str,
        provider_submission_id: str | None,
        payload: dict,
    ) -> tuple[uuid.UUID, bool]:
        """
        Store a raw payload.

        Args:
            wedding_id: Resolved wedding UUID
            provider: Provider name (tally)
            provider_submission_id: Provider's id for the submission, if any
            payload: Full original payload

        Returns:
            Tuple of (RawSubmission id, created: bool). created is False
            when the same submission was already recorded.

        Raises:
            RsvpmanError: STORE_FAILURE for any store error other than a
                duplicate delivery
        """
        submission_id = str(provider_submission_id) if provider_submission_id else None

        try:
            with transaction.atomic():
                entry = RawSubmission.objects.create(
                    wedding_id=wedding_id,
                    provider=provider,
                    provider_submission_id=submission_id,
                    payload=payload,
                )
        except IntegrityError as exc:
            if submission_id and is_duplicate_error(exc):
                existing_id = cls._find_existing(wedding_id, provider, submission_id)
                if existing_id is not None:
                    logger.debug(
                        "Duplicate delivery %s:%s for wedding %s",
                        provider,
                        submission_id,
                        wedding_id,
                    )
                    return existing_id, False
            logger.error("Ledger insert failed: %s", exc)
            raise RsvpmanError("STORE_FAILURE", str(exc)) from exc
        except DatabaseError as exc:
            logger.error("Ledger insert failed: %s", exc)
            raise RsvpmanError("STORE_FAILURE", str(exc)) from exc

        logger.info("Recorded %s submission %s", provider, entry.id)
        return entry.id, True

    @classmethod
    def _find_existing(
        cls, wedding_id: uuid.UUID, provider: str, submission_id: str
    ) -> uuid.UUID | None:
        return (
            RawSubmission.objects.filter(
                wedding_id=wedding_id,
                provider=provider,
                provider_submission_id=submission_id,
            )
            .values_list("id", flat=True)
            .first()
        )

    @classmethod
    def get(cls, raw_submission_id) -> RawSubmission | None:
        """Get a ledger entry by id."""
        try:
            return RawSubmission.objects.get(pk=raw_submission_id)
        except (RawSubmission.DoesNotExist, ValidationError, ValueError):
            return None
