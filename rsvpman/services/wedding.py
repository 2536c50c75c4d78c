"""Wedding service - public code resolution."""

import logging
import uuid

from rsvpman.exceptions import RsvpmanError
from rsvpman.models import Wedding

logger = logging.getLogger(__name__)


class WeddingService:
    """Maps public wedding codes to internal wedding ids."""

    @classmethod
    def resolve_code(cls, code: str | None) -> uuid.UUID:
        """
        Resolve a public code to the wedding's UUID.

        Args:
            code: Public code as configured in the form (exact match)

        Returns:
            Wedding UUID

        Raises:
            RsvpmanError: UNKNOWN_CODE if no wedding matches or the stored
                id is not a well-formed UUID
        """
        code = (code or "").strip()
        if not code:
            raise RsvpmanError("UNKNOWN_CODE", received=code)

        raw_id = Wedding.objects.filter(code=code).values_list("id", flat=True).first()
        if raw_id is None:
            raise RsvpmanError("UNKNOWN_CODE", received=code)

        try:
            return raw_id if isinstance(raw_id, uuid.UUID) else uuid.UUID(str(raw_id))
        except (TypeError, ValueError):
            logger.error("Wedding %s has a malformed id: %r", code, raw_id)
            raise RsvpmanError("UNKNOWN_CODE", received=code)
