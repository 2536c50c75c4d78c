"""
Django Rsvpman - Wedding RSVP ingestion.

Usage:
    from rsvpman import route_submission, RsvpmanError

    ack = route_submission(payload, query=request.GET)
    ack.as_dict()  # {"ok": True, "routed": "contact_sheet", ...}

    # Services
    from rsvpman.services import WeddingService, LedgerService
    wedding_id = WeddingService.resolve_code("TT01")
"""


def __getattr__(name):
    if name == "route_submission":
        from rsvpman.router import route_submission

        return route_submission
    if name == "process_submission":
        from rsvpman.router import process_submission

        return process_submission
    if name == "RsvpmanError":
        from rsvpman.exceptions import RsvpmanError

        return RsvpmanError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["route_submission", "process_submission", "RsvpmanError"]
__version__ = "0.1.0"
