from rest_framework import serializers

from timeclock.geo import km_to_m, m_to_km
from timeclock.models import WorkerType, WorkerZone


class WorkerZoneReadSerializer(serializers.ModelSerializer):
    radius_km = serializers.SerializerMethodField()

    class Meta:
        model = WorkerZone
        fields = ["id", "lat", "lng", "radius_m", "radius_km", "updated_at"]
        read_only_fields = fields

    def get_radius_km(self, obj: WorkerZone) -> float:
        return m_to_km(obj.radius_m)


class WorkerTypeReadSerializer(serializers.ModelSerializer):
    """A role with its label and zone (null when the manager has not set one)."""
    role_display = serializers.CharField(source="get_role_display", read_only=True)
    zone = serializers.SerializerMethodField()

    class Meta:
        model = WorkerType
        fields = ["id", "role", "role_display", "label", "zone"]
        read_only_fields = fields

    def get_zone(self, obj: WorkerType):
        # reverse one-to-one raises (an AttributeError subclass) when missing
        zone = getattr(obj, "zone", None)
        return WorkerZoneReadSerializer(zone).data if zone is not None else None


class ZoneWriteSerializer(serializers.Serializer):
    """
    Radius may be sent in meters (radius_m) or kilometers (radius_km), not both.
    validated_data always carries radius_m.
    """
    lat = serializers.FloatField(min_value=-90.0, max_value=90.0)
    lng = serializers.FloatField(min_value=-180.0, max_value=180.0)
    radius_m = serializers.FloatField(required=False)
    radius_km = serializers.FloatField(required=False)
    label = serializers.CharField(required=False, allow_blank=True, max_length=120)

    def validate(self, attrs):
        has_m = attrs.get("radius_m") is not None
        has_km = attrs.get("radius_km") is not None
        if has_m == has_km:
            raise serializers.ValidationError("Send exactly one of radius_m or radius_km.")
        radius_m = attrs["radius_m"] if has_m else km_to_m(attrs.pop("radius_km"))
        attrs.pop("radius_km", None)
        if radius_m <= 0:
            raise serializers.ValidationError({"radius_m": "Radius must be greater than 0."})
        attrs["radius_m"] = radius_m
        return attrs
