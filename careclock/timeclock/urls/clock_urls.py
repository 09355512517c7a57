from django.urls import path
from timeclock.views.clock_view import ClockInView, ClockOutView, ClockStateView

urlpatterns = [
    path("in/", ClockInView.as_view(), name="clock-in"),
    path("out/", ClockOutView.as_view(), name="clock-out"),
    path("state/", ClockStateView.as_view(), name="clock-state"),
]
