from django.contrib import admin
from .models import AuditLog, Shift, StaffMember, WorkerType, WorkerZone


@admin.register(StaffMember)
class StaffMemberAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "role", "created_at")
    list_filter = ("role",)
    search_fields = ("name", "email", "auth_subject")


class WorkerZoneInline(admin.StackedInline):
    model = WorkerZone
    extra = 0


@admin.register(WorkerType)
class WorkerTypeAdmin(admin.ModelAdmin):
    list_display = ("role", "label")
    inlines = [WorkerZoneInline]


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ("id", "staff", "clock_in_at", "clock_out_at")
    list_filter = ("clock_out_at",)
    search_fields = ("staff__name",)
    raw_id_fields = ("staff",)


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "actor", "action", "object_type", "object_id")
    list_filter = ("action", "object_type")
    readonly_fields = ("actor", "action", "object_type", "object_id", "before", "after", "ip", "created_at")
