"""
Prescription list and maintenance for the current doctor.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Prescription
from clinic.permissions import IsDoctor
from clinic.serializers.prescriptions import (
    PrescriptionCreateSerializer, PrescriptionListQuerySerializer, PrescriptionUpdateSerializer,
)
from clinic.services import prescriptions as svc
from clinic.services.formatters import format_patient, format_prescription
from clinic.services.reference import get_medicine
from .common import get_owned, ok


def _row(p: Prescription) -> dict:
    data = format_prescription(p)
    record = p.medical_record
    data['record_date'] = record.record_date.isoformat() if record and record.record_date else None
    data['patient'] = format_patient(record.patient) if record else None
    data['frequencyBadge'] = svc.frequency_badge(p.frequency)
    data['durationTone'] = svc.duration_tone(p.duration)
    return data


def _prescription(request, pk) -> Prescription:
    return get_owned(
        Prescription.objects.select_related('medical_record__patient', 'medicine'), pk, request.user,
        owner_attr='medical_record.doctor_id', label='prescription',
    )


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def prescription_list(request):
    """
    GET: list prescriptions (``q`` searches patient, medicine and dosage;
    ``status`` is ``all`` or ``active``).
    POST: write a prescription on a medical record, given either
    ``medical_record_id`` or ``patient_id``.
    """
    if request.method == 'GET':
        q = PrescriptionListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        rows = svc.filter_prescriptions(
            svc.enriched_for_doctor(request.user),
            search=q.validated_data.get('q'),
            status=q.validated_data.get('status'),
        )
        return Response(ok([_row(p) for p in rows], found=len(rows)))

    s = PrescriptionCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data
    p = svc.create_prescription(
        request.user,
        medicine=get_medicine(data['medicine_id']),
        dosage=data['dosage'],
        frequency=data.get('frequency', ''),
        duration=data.get('duration', ''),
        medical_record_id=data.get('medical_record_id'),
        patient_id=data.get('patient_id'),
    )
    return Response(ok(_row(p)), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsDoctor])
def prescription_detail(request, pk: int):
    p = _prescription(request, pk)
    if request.method == 'GET':
        return Response(ok(_row(p)))

    if request.method == 'DELETE':
        svc.delete_prescription(p, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = PrescriptionUpdateSerializer(data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    changes = dict(s.validated_data)
    if 'medicine_id' in changes:
        changes['medicine'] = get_medicine(changes.pop('medicine_id'))
    svc.update_prescription(p, changes, user=request.user)
    return Response(ok(_row(p)))
