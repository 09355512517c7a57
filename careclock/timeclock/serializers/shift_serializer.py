from rest_framework import serializers
from django.utils import timezone

from timeclock.geo import Position
from timeclock.models import Shift


class ClockRequestSerializer(serializers.Serializer):
    """Body of clock-in / clock-out: current position + optional note."""
    lat = serializers.FloatField(min_value=-90.0, max_value=90.0)
    lng = serializers.FloatField(min_value=-180.0, max_value=180.0)
    note = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)

    def to_position(self) -> Position:
        return Position(self.validated_data["lat"], self.validated_data["lng"])


class ShiftReadSerializer(serializers.ModelSerializer):
    staff_name = serializers.CharField(source="staff.name", read_only=True)
    role = serializers.CharField(source="staff.role", read_only=True)
    is_open = serializers.BooleanField(read_only=True)
    duration_hours = serializers.SerializerMethodField()

    class Meta:
        model = Shift
        fields = [
            "id",
            "staff", "staff_name", "role",
            "clock_in_at", "clock_in_lat", "clock_in_lng", "clock_in_note",
            "clock_out_at", "clock_out_lat", "clock_out_lng", "clock_out_note",
            "is_open", "duration_hours",
            "created_at", "updated_at",
        ]
        read_only_fields = fields

    def get_duration_hours(self, obj: Shift) -> float:
        now = self.context.get("now") or timezone.now()
        return round(obj.duration_hours(now), 2)


class ClockStateSerializer(serializers.Serializer):
    state = serializers.CharField()
    shift = ShiftReadSerializer(allow_null=True)


class ShiftFilterSerializer(serializers.Serializer):
    active = serializers.BooleanField(required=False, allow_null=True, default=None)
    staff_id = serializers.IntegerField(required=False, min_value=1)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        df, dt = attrs.get("date_from"), attrs.get("date_to")
        if df and dt and df > dt:
            raise serializers.ValidationError({"date_to": "date_to must be on or after date_from."})
        return attrs
