from django.urls import path

from .views import TallyWebhookView

app_name = "rsvpman_tally"

urlpatterns = [
    path("webhook/", TallyWebhookView.as_view(), name="tally-webhook"),
]
