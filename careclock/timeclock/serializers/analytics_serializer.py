from rest_framework import serializers


class DashboardSummarySerializer(serializers.Serializer):
    date = serializers.DateField()
    active_workers = serializers.IntegerField()
    todays_check_ins = serializers.IntegerField()
    avg_hours_today = serializers.FloatField()
    total_hours = serializers.FloatField()


class HoursPerDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    hours = serializers.FloatField()
    shifts = serializers.IntegerField()


class StaffTotalSerializer(serializers.Serializer):
    staff_id = serializers.IntegerField()
    name = serializers.CharField()
    role = serializers.CharField()
    shift_count = serializers.IntegerField()
    total_hours = serializers.FloatField()


class MyTodaySerializer(serializers.Serializer):
    date = serializers.DateField()
    hours = serializers.FloatField()
    is_clocked_in = serializers.BooleanField()


class DateQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class DateRangeQuerySerializer(serializers.Serializer):
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        df, dt = attrs.get("date_from"), attrs.get("date_to")
        if df and dt and df > dt:
            raise serializers.ValidationError({"date_to": "date_to must be on or after date_from."})
        return attrs
