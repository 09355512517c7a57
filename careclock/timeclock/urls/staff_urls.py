from django.urls import path
from timeclock.views.staff_view import CurrentStaffView, StaffMeView, StaffRegisterView

urlpatterns = [
    path("register/", StaffRegisterView.as_view(), name="staff-register"),
    path("me/", StaffMeView.as_view(), name="staff-me"),
    path("current/", CurrentStaffView.as_view(), name="staff-current"),
]
