from datetime import datetime
from typing import Optional

from django.db import models
from django.db.models import Q, F, UniqueConstraint, CheckConstraint
from django.utils import timezone
from .mixins import TimeStampedModel


class Shift(TimeStampedModel):
    staff = models.ForeignKey("timeclock.StaffMember", on_delete=models.PROTECT, related_name="shifts")

    clock_in_at = models.DateTimeField(db_index=True)
    clock_in_lat = models.FloatField()
    clock_in_lng = models.FloatField()
    clock_in_note = models.TextField(null=True, blank=True)

    clock_out_at = models.DateTimeField(null=True, blank=True)
    clock_out_lat = models.FloatField(null=True, blank=True)
    clock_out_lng = models.FloatField(null=True, blank=True)
    clock_out_note = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "Shift"
        ordering = ["-clock_in_at"]
        constraints = [
            # one open shift per staff member
            UniqueConstraint(fields=["staff"], condition=Q(clock_out_at__isnull=True), name="uniq_open_shift_per_staff"),
            CheckConstraint(
                name="shift_clock_out_gte_clock_in",
                condition=Q(clock_out_at__isnull=True) | Q(clock_out_at__gte=F("clock_in_at")),
            ),
        ]
        indexes = [
            models.Index(fields=["staff", "clock_in_at"], name="shift_staff_clock_in_idx"),
        ]

    @property
    def is_open(self) -> bool:
        return self.clock_out_at is None

    def duration_hours(self, now: Optional[datetime] = None) -> float:
        """Hours worked; an open shift counts up to `now`."""
        end = self.clock_out_at or now or timezone.now()
        return max(0.0, (end - self.clock_in_at).total_seconds() / 3600.0)

    def __str__(self):
        state = "open" if self.is_open else "closed"
        return f"SHIFT {self.staff_id} {self.clock_in_at:%Y-%m-%d %H:%M} [{state}]"
