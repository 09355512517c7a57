from django.urls import path
from timeclock.views.shift_view import MyShiftsView, ShiftListView

urlpatterns = [
    path("", ShiftListView.as_view(), name="shift-list"),
    path("me/", MyShiftsView.as_view(), name="shift-me"),
]
