"""
Django admin registrations for the clinic models.

Hospital administrators maintain the reference tables (specialties,
departments, rooms, shifts, medicines) and the doctors' work schedule
through ``/admin/``; the doctor-facing tables are registered too so
that records can be inspected and corrected by hand.
"""

from django.contrib import admin

from .models import (
    Appointment,
    AuditEvent,
    Certificate,
    Department,
    Doctor,
    DoctorWorkSchedule,
    LabTest,
    LeaveRequest,
    MedicalRecord,
    Medicine,
    Patient,
    Prescription,
    Room,
    Shift,
    Specialty,
)


@admin.register(Specialty)
class SpecialtyAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'location')
    search_fields = ('name', 'location')


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('username', 'email', 'full_name', 'specialty', 'status', 'is_staff')
    list_filter = ('status', 'specialty', 'is_staff')
    search_fields = ('username', 'email', 'full_name', 'phone')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'full_name', 'personal_id', 'phone', 'status')
    list_filter = ('status', 'gender')
    search_fields = ('full_name', 'personal_id', 'phone', 'email')


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'start_time', 'end_time')


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'type', 'floor', 'department')
    list_filter = ('department', 'type')


@admin.register(DoctorWorkSchedule)
class DoctorWorkScheduleAdmin(admin.ModelAdmin):
    list_display = ('id', 'doctor', 'work_date', 'shift', 'room', 'status')
    list_filter = ('status', 'shift')
    search_fields = ('doctor__username', 'doctor__full_name')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'appointment_date', 'shift', 'status')
    list_filter = ('status',)
    search_fields = ('patient__full_name', 'doctor__full_name', 'notes')


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'record_date', 'diagnosis')
    search_fields = ('patient__full_name', 'diagnosis', 'treatment')


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'unit_price', 'quantity', 'expiry_date')
    search_fields = ('name',)


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ('id', 'medical_record', 'medicine', 'dosage', 'frequency', 'duration')
    search_fields = ('medicine__name', 'medical_record__patient__full_name')


@admin.register(LabTest)
class LabTestAdmin(admin.ModelAdmin):
    list_display = ('id', 'medical_record', 'test_type', 'result', 'test_date')
    list_filter = ('result',)
    search_fields = ('test_type',)


@admin.register(LeaveRequest)
class LeaveRequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'doctor', 'start_date', 'end_date', 'status', 'request_date')
    list_filter = ('status',)
    search_fields = ('doctor__username', 'reason')


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ('id', 'doctor', 'name', 'issued_by', 'expiry_date')
    search_fields = ('name', 'issued_by', 'doctor__username')


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('id', 'action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('user__username',)
