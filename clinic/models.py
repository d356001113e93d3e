"""
Database models for the doctor portal.

One model per table of the hospital schema.  Records are flat and
related by integer foreign keys; a record belongs to exactly one doctor
and/or patient.  Field names follow the table columns so the JSON
responses stay close to what the dashboard already consumes.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class Specialty(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    class Meta:
        verbose_name_plural = 'specialties'

    def __str__(self) -> str:
        return self.name


class Department(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return self.name


class Doctor(AbstractUser):
    """The authenticated user of the portal.

    ``email`` is the login identifier used by the dashboard; ``username``
    is kept for Django's own tooling.  ``role`` is a job title such as
    'Senior Doctor', not an access level: approvals that need elevated
    rights go through ``is_staff``.
    """
    STATUS_ACTIVE = 'Active'
    STATUS_INACTIVE = 'Inactive'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
    ]

    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=255, blank=True)
    specialty = models.ForeignKey(
        Specialty, null=True, blank=True, on_delete=models.SET_NULL, related_name='doctors'
    )
    phone = models.CharField(max_length=32, blank=True)
    birth_date = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=16, blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_ACTIVE, db_index=True)
    join_date = models.DateField(null=True, blank=True)
    role = models.CharField(max_length=64, blank=True)
    address = models.CharField(max_length=255, blank=True)

    def display_name(self) -> str:
        return self.full_name or self.get_full_name() or self.username

    def __str__(self) -> str:
        return f"{self.display_name()} ({self.email})"


class Patient(models.Model):
    full_name = models.CharField(max_length=255)
    personal_id = models.CharField(max_length=32, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    birth_date = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=16, blank=True)
    status = models.CharField(max_length=32, default='Active')
    email = models.EmailField(blank=True)
    address = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return self.full_name


class Shift(models.Model):
    name = models.CharField(max_length=64)
    start_time = models.TimeField()
    end_time = models.TimeField()

    def __str__(self) -> str:
        return f"{self.name} {self.start_time:%H:%M}-{self.end_time:%H:%M}"


class Room(models.Model):
    name = models.CharField(max_length=64)
    type = models.CharField(max_length=64, blank=True)
    floor = models.IntegerField(default=0)
    department = models.ForeignKey(Department, on_delete=models.CASCADE, related_name='rooms')

    def __str__(self) -> str:
        return self.name


class DoctorWorkSchedule(models.Model):
    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
        ('Pending', 'Pending'),
    ]
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='work_schedules')
    shift = models.ForeignKey(Shift, on_delete=models.PROTECT, related_name='work_schedules')
    room = models.ForeignKey(Room, on_delete=models.PROTECT, related_name='work_schedules')
    work_date = models.DateField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='Active')

    class Meta:
        indexes = [models.Index(fields=['doctor', 'work_date'])]

    def __str__(self) -> str:
        return f"Schedule(d={self.doctor_id}, {self.work_date}, shift={self.shift_id})"


class Appointment(models.Model):
    STATUS_SCHEDULED = 'Scheduled'
    STATUS_ACCEPTED = 'Accepted'
    STATUS_REJECTED = 'Rejected'
    STATUS_IN_PROGRESS = 'In Progress'
    STATUS_COMPLETED = 'Completed'
    STATUS_CANCELLED = 'Cancelled'
    STATUS_CHOICES = [
        (STATUS_SCHEDULED, 'Scheduled'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
        (STATUS_IN_PROGRESS, 'In Progress'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='appointments')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='appointments')
    shift = models.ForeignKey(Shift, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments')
    appointment_date = models.DateTimeField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_SCHEDULED, db_index=True)
    notes = models.TextField(blank=True)

    class Meta:
        indexes = [models.Index(fields=['doctor', 'appointment_date'])]

    def __str__(self) -> str:
        return f"Appointment #{self.pk} p={self.patient_id} d={self.doctor_id} {self.status}"


class MedicalRecord(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='medical_records')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='medical_records')
    diagnosis = models.TextField(blank=True)
    treatment = models.TextField(blank=True)
    record_date = models.DateField()

    class Meta:
        indexes = [models.Index(fields=['doctor', 'patient', 'record_date'])]

    def is_complete(self) -> bool:
        return bool((self.diagnosis or '').strip() and (self.treatment or '').strip())

    def __str__(self) -> str:
        return f"Record #{self.pk} p={self.patient_id} {self.record_date}"


class Medicine(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    quantity = models.PositiveIntegerField(default=0)
    expiry_date = models.DateField(null=True, blank=True)

    def __str__(self) -> str:
        return self.name


class Prescription(models.Model):
    medical_record = models.ForeignKey(MedicalRecord, on_delete=models.CASCADE, related_name='prescriptions')
    medicine = models.ForeignKey(Medicine, on_delete=models.PROTECT, related_name='prescriptions')
    dosage = models.CharField(max_length=64)
    frequency = models.CharField(max_length=64, blank=True)
    duration = models.CharField(max_length=64, blank=True)

    def __str__(self) -> str:
        return f"{self.medicine_id} {self.dosage} (record {self.medical_record_id})"


class LabTest(models.Model):
    RESULT_PENDING = 'Pending'

    medical_record = models.ForeignKey(MedicalRecord, on_delete=models.CASCADE, related_name='lab_tests')
    test_type = models.CharField(max_length=255)
    result = models.CharField(max_length=255, default=RESULT_PENDING, db_index=True)
    test_date = models.DateField()

    def __str__(self) -> str:
        return f"{self.test_type} ({self.result})"


class LeaveRequest(models.Model):
    STATUS_PENDING = 'Pending'
    STATUS_APPROVED = 'Approved'
    STATUS_REJECTED = 'Rejected'
    STATUS_CANCELLED = 'Cancelled'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_REJECTED, 'Rejected'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='leave_requests')
    request_date = models.DateField()
    start_date = models.DateField()
    end_date = models.DateField()
    reason = models.TextField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Leave #{self.pk} d={self.doctor_id} {self.start_date}~{self.end_date} {self.status}"


class Certificate(models.Model):
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='certificates')
    name = models.CharField(max_length=255)
    issued_by = models.CharField(max_length=255)
    issue_date = models.DateField()
    expiry_date = models.DateField()

    def __str__(self) -> str:
        return f"{self.name} (expires {self.expiry_date})"


class AuditEvent(models.Model):
    user = models.ForeignKey(Doctor, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.IntegerField(blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at']),
            models.Index(fields=['object_type', 'object_id', 'created_at']),
        ]

    def __str__(self):
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
