"""
Tally webhook endpoint.

Receives form submissions from Tally and hands them to the router.

Flow:
    1. Non-POST requests get 200 OK (Tally and uptime checks probe the URL)
    2. Parses the JSON body
    3. Calls route_submission() (resolve code, ledger, dispatch)
    4. Returns {"ok": true, ...} or {"ok": false, "error": ...} with context
"""

from __future__ import annotations

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from rsvpman.conf import rsvpman_settings
from rsvpman.exceptions import RsvpmanError
from rsvpman.router import route_submission

logger = logging.getLogger("rsvpman.tally")


@method_decorator(csrf_exempt, name="dispatch")
class TallyWebhookView(View):
    """
    POST endpoint for Tally webhooks.

    Expects:
        - JSON body with ``data.fields`` as a list of {label, value, options?}
        - The wedding code in the query string, body or a hidden field

    Settings:
        RSVPMAN["RAW_PREVIEW_CHARS"] — size of the body echoed on errors.
        RSVPMAN["LOG_PAYLOADS"] — log every payload at DEBUG level.
    """

    def post(self, request):
        body = request.body

        if rsvpman_settings.LOG_PAYLOADS:
            logger.debug("Tally webhook payload: %s", body.decode("utf-8", "replace"))

        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
            return self._error_response(RsvpmanError("INVALID_JSON"), body)

        try:
            ack = route_submission(payload, query=request.GET)
        except RsvpmanError as exc:
            if exc.status >= 500:
                logger.error("Tally webhook: %s — %s", exc.code, exc.message)
            else:
                logger.warning("Tally webhook: %s — %s", exc.code, exc.message)
            return self._error_response(exc, body, payload)
        except Exception:
            logger.exception("Tally webhook: processing failed")
            return JsonResponse({"ok": False, "error": "Server error"}, status=500)

        return JsonResponse(ack.as_dict())

    def http_method_not_allowed(self, request, *args, **kwargs):
        return HttpResponse("OK")

    @staticmethod
    def _error_response(exc: RsvpmanError, body: bytes, payload=None) -> JsonResponse:
        """Error body with enough context to debug a webhook configuration."""
        preview_chars = rsvpman_settings.RAW_PREVIEW_CHARS
        return JsonResponse(
            {
                "ok": False,
                "error": exc.message,
                "code": exc.code,
                "received": exc.details.get("received"),
                "keys": sorted(payload) if isinstance(payload, dict) else [],
                "raw_preview": body.decode("utf-8", "replace")[:preview_chars],
            },
            status=exc.status,
        )
