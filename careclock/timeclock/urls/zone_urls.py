from django.urls import path
from timeclock.views.zone_view import MyZoneView, ZoneListView, ZoneUpsertView

urlpatterns = [
    path("", ZoneListView.as_view(), name="zone-list"),
    path("me/", MyZoneView.as_view(), name="zone-me"),
    path("<str:role>/", ZoneUpsertView.as_view(), name="zone-upsert"),
]
