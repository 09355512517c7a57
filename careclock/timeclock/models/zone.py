from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q, CheckConstraint
from .mixins import TimeStampedModel
from .staff import Role


class WorkerType(TimeStampedModel):
    role = models.CharField(max_length=32, choices=Role.choices, unique=True)
    label = models.CharField(max_length=120, blank=True, default="")

    class Meta:
        db_table = "WorkerType"
        ordering = ["role"]

    def __str__(self):
        return self.label or self.get_role_display()


class WorkerZone(TimeStampedModel):
    worker_type = models.OneToOneField(WorkerType, on_delete=models.CASCADE, related_name="zone")
    lat = models.FloatField(validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)])
    lng = models.FloatField(validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)])
    radius_m = models.FloatField(help_text="Allowed radius around (lat, lng), in meters")

    class Meta:
        db_table = "WorkerZone"
        constraints = [
            CheckConstraint(name="zone_radius_m_positive", condition=Q(radius_m__gt=0)),
        ]

    def __str__(self):
        return f"{self.worker_type.role} @ ({self.lat:.5f}, {self.lng:.5f}) r={self.radius_m:.0f}m"
