"""Rsvpman exceptions."""


class RsvpmanError(Exception):
    """
    Structured exception for ingestion operations.

    Every failure the webhook reports to the caller is an RsvpmanError with a
    stable ``code``. The HTTP status is derived from the code.

    Usage:
        try:
            wedding_id = WeddingService.resolve_code("TT01")
        except RsvpmanError as e:
            if e.code == "UNKNOWN_CODE":
                handle_unknown()
    """

    _default_messages = {
        "INVALID_JSON": "Request body is not valid JSON",
        "MISSING_CODE": "Missing wedding code",
        "UNKNOWN_CODE": "Unknown wedding code",
        "AMBIGUOUS_IDENTITY": "Submission has neither a usable phone nor email",
        "INVALID_REFERENCE": "Household reference is not a valid identifier",
        "INVALID_STATUS": "RSVP status must be yes or no",
        "HOUSEHOLD_NOT_FOUND": "Household not found",
        "STORE_FAILURE": "Database write failed",
    }

    _status_codes = {
        "HOUSEHOLD_NOT_FOUND": 404,
        "STORE_FAILURE": 500,
    }

    def __init__(self, code: str, message: str | None = None, **details):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.details = details
        super().__init__(f"[{code}] {self.message}")

    @property
    def status(self) -> int:
        """HTTP status code for this error."""
        return self._status_codes.get(self.code, 400)

    def as_dict(self) -> dict:
        return {"code": self.code, "error": self.message, **self.details}
