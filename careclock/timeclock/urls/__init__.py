# timeclock/urls/__init__.py
from django.urls import path, include

urlpatterns = [
    path("staff/", include("timeclock.urls.staff_urls")),
    path("clock/", include("timeclock.urls.clock_urls")),
    path("shifts/", include("timeclock.urls.shift_urls")),
    path("zones/", include("timeclock.urls.zone_urls")),
    path("analytics/", include("timeclock.urls.analytics_urls")),
]
