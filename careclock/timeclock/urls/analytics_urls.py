from django.urls import path
from timeclock.views.analytics_view import DashboardSummaryView, HoursPerDayView, MyTodayView, StaffTotalsView

urlpatterns = [
    path("summary/", DashboardSummaryView.as_view(), name="analytics-summary"),
    path("hours-per-day/", HoursPerDayView.as_view(), name="analytics-hours-per-day"),
    path("staff-totals/", StaffTotalsView.as_view(), name="analytics-staff-totals"),
    path("me/today/", MyTodayView.as_view(), name="analytics-me-today"),
]
