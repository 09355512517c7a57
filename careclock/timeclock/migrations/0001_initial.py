import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


ROLE_CHOICES = [
    ('DOCTOR', 'Doctor'),
    ('NURSE', 'Nurse'),
    ('PARAMEDIC', 'Paramedic'),
    ('TECHNICIAN', 'Technician'),
    ('SUPPORT_STAFF', 'Support staff'),
    ('PHARMACIST', 'Pharmacist'),
    ('THERAPIST', 'Therapist'),
    ('ADMINISTRATIVE', 'Administrative'),
    ('HCA', 'Healthcare assistant'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StaffMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('auth_subject', models.CharField(help_text="Subject ('sub') issued by the identity provider", max_length=255, unique=True)),
                ('name', models.CharField(max_length=200)),
                ('email', models.CharField(blank=True, default='', max_length=254)),
                ('picture', models.CharField(blank=True, default='', max_length=500)),
                ('role', models.CharField(choices=ROLE_CHOICES, max_length=32)),
                ('additional_data', models.TextField(blank=True, default='')),
            ],
            options={
                'db_table': 'StaffMember',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['role'], name='staff_role_idx')],
            },
        ),
        migrations.CreateModel(
            name='WorkerType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('role', models.CharField(choices=ROLE_CHOICES, max_length=32, unique=True)),
                ('label', models.CharField(blank=True, default='', max_length=120)),
            ],
            options={
                'db_table': 'WorkerType',
                'ordering': ['role'],
            },
        ),
        migrations.CreateModel(
            name='WorkerZone',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('lat', models.FloatField(validators=[django.core.validators.MinValueValidator(-90.0), django.core.validators.MaxValueValidator(90.0)])),
                ('lng', models.FloatField(validators=[django.core.validators.MinValueValidator(-180.0), django.core.validators.MaxValueValidator(180.0)])),
                ('radius_m', models.FloatField(help_text='Allowed radius around (lat, lng), in meters')),
                ('worker_type', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='zone', to='timeclock.workertype')),
            ],
            options={
                'db_table': 'WorkerZone',
                'constraints': [models.CheckConstraint(condition=models.Q(('radius_m__gt', 0)), name='zone_radius_m_positive')],
            },
        ),
        migrations.CreateModel(
            name='Shift',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('clock_in_at', models.DateTimeField(db_index=True)),
                ('clock_in_lat', models.FloatField()),
                ('clock_in_lng', models.FloatField()),
                ('clock_in_note', models.TextField(blank=True, null=True)),
                ('clock_out_at', models.DateTimeField(blank=True, null=True)),
                ('clock_out_lat', models.FloatField(blank=True, null=True)),
                ('clock_out_lng', models.FloatField(blank=True, null=True)),
                ('clock_out_note', models.TextField(blank=True, null=True)),
                ('staff', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='shifts', to='timeclock.staffmember')),
            ],
            options={
                'db_table': 'Shift',
                'ordering': ['-clock_in_at'],
                'indexes': [models.Index(fields=['staff', 'clock_in_at'], name='shift_staff_clock_in_idx')],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('clock_out_at__isnull', True)), fields=('staff',), name='uniq_open_shift_per_staff'),
                    models.CheckConstraint(condition=models.Q(('clock_out_at__isnull', True), ('clock_out_at__gte', models.F('clock_in_at')), _connector='OR'), name='shift_clock_out_gte_clock_in'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('actor', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('action', models.CharField(max_length=64)),
                ('object_type', models.CharField(max_length=64)),
                ('object_id', models.CharField(max_length=64)),
                ('before', models.JSONField(blank=True, null=True)),
                ('after', models.JSONField(blank=True, null=True)),
                ('ip', models.GenericIPAddressField(blank=True, null=True)),
            ],
            options={
                'db_table': 'AuditLog',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['object_type', 'object_id'], name='audit_object_idx')],
            },
        ),
    ]
