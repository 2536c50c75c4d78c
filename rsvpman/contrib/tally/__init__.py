"""
Rsvpman Tally - webhook endpoint for Tally form submissions.

Usage:
    INSTALLED_APPS = [
        ...
        "rsvpman",
        "rsvpman.contrib.tally",
    ]

    urlpatterns = [
        path("tally/", include("rsvpman.contrib.tally.urls")),
    ]
"""
