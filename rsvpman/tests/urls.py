from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("tally/", include("rsvpman.contrib.tally.urls")),
]
