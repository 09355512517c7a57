from django.db import models
from .mixins import TimeStampedModel


class Role(models.TextChoices):
    DOCTOR = "DOCTOR", "Doctor"
    NURSE = "NURSE", "Nurse"
    PARAMEDIC = "PARAMEDIC", "Paramedic"
    TECHNICIAN = "TECHNICIAN", "Technician"
    SUPPORT_STAFF = "SUPPORT_STAFF", "Support staff"
    PHARMACIST = "PHARMACIST", "Pharmacist"
    THERAPIST = "THERAPIST", "Therapist"
    ADMINISTRATIVE = "ADMINISTRATIVE", "Administrative"
    HCA = "HCA", "Healthcare assistant"


class StaffMember(TimeStampedModel):
    auth_subject = models.CharField(max_length=255, unique=True, help_text="Subject ('sub') issued by the identity provider")
    name = models.CharField(max_length=200)
    email = models.CharField(max_length=254, blank=True, default="")
    picture = models.CharField(max_length=500, blank=True, default="")
    role = models.CharField(max_length=32, choices=Role.choices)
    additional_data = models.TextField(blank=True, default="")

    class Meta:
        db_table = "StaffMember"
        ordering = ["name"]
        indexes = [models.Index(fields=["role"], name="staff_role_idx")]

    def __str__(self):
        return f"{self.name} ({self.role})"
