from rest_framework import serializers

from clinic.models import Appointment
from clinic.services.appointments import DATE_WINDOWS


class AppointmentListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=128, required=False, allow_blank=True)
    status = serializers.ChoiceField(
        choices=['all'] + [value for value, _ in Appointment.STATUS_CHOICES], required=False)
    date = serializers.ChoiceField(choices=DATE_WINDOWS, required=False)


class AppointmentNotesSerializer(serializers.Serializer):
    notes = serializers.CharField(max_length=4000, allow_blank=True)


class MedicalRecordInputSerializer(serializers.Serializer):
    diagnosis = serializers.CharField(max_length=4000, allow_blank=True)
    treatment = serializers.CharField(max_length=4000, allow_blank=True)


class LabTestOrderSerializer(serializers.Serializer):
    test_type = serializers.CharField(max_length=255, allow_blank=True)
    test_date = serializers.DateField(required=False)


class AppointmentPrescriptionSerializer(serializers.Serializer):
    medicine_id = serializers.IntegerField(min_value=1)
    dosage = serializers.CharField(max_length=64, allow_blank=True)
    frequency = serializers.CharField(max_length=64, allow_blank=True)
    duration = serializers.CharField(max_length=64, allow_blank=True)
