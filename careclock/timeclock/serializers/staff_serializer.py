from rest_framework import serializers

from timeclock.models import Role, StaffMember


class StaffReadSerializer(serializers.ModelSerializer):
    role_display = serializers.CharField(source="get_role_display", read_only=True)

    class Meta:
        model = StaffMember
        fields = [
            "id", "auth_subject", "name", "email", "picture",
            "role", "role_display", "additional_data",
            "created_at", "updated_at",
        ]
        read_only_fields = fields


class StaffRegisterSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    role = serializers.ChoiceField(choices=Role.choices)


class StaffUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=False, max_length=200)
    additional_data = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if "role" in self.initial_data:
            raise serializers.ValidationError({"role": "Role cannot be changed after registration."})
        return attrs


class RegistrationResultSerializer(serializers.Serializer):
    user = StaffReadSerializer(source="staff")
    is_new_user = serializers.BooleanField(source="is_new")
    message = serializers.CharField()


class CurrentStaffSerializer(serializers.Serializer):
    user = StaffReadSerializer(allow_null=True)
