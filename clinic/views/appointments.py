"""
Appointment triage views.

A doctor sees only their own appointments.  The list endpoint returns
the filtered rows together with counts computed over the unfiltered
set; the detail endpoint bundles the visit's medical record, its
prescriptions and lab tests, and the medicine catalogue so the detail
screen needs a single round-trip.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Appointment
from clinic.permissions import IsDoctor
from clinic.serializers.appointments import (
    AppointmentListQuerySerializer, AppointmentNotesSerializer, AppointmentPrescriptionSerializer,
    LabTestOrderSerializer, MedicalRecordInputSerializer,
)
from clinic.services import appointments as svc
from clinic.services.formatters import (
    format_appointment, format_lab_test, format_medicine, format_prescription, format_record,
)
from clinic.services.reference import get_medicine
from .common import get_owned, ok


def _appointment(request, pk) -> Appointment:
    return get_owned(Appointment.objects.select_related('patient', 'shift'), pk, request.user, label='appointment')


def _row(a: Appointment) -> dict:
    data = format_appointment(a, badge=svc.status_badge(a.status))
    data['overdue'] = svc.is_overdue(a)
    return data


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_list(request):
    """List the current doctor's appointments.

    Query params:
      - q: search in patient name and notes
      - status: exact status, or ``all``
      - date: ``all`` | ``today`` | ``upcoming``
    """
    q = AppointmentListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    everything = list(svc.appointments_for_doctor(request.user))
    rows = svc.filter_appointments(
        everything,
        search=q.validated_data.get('q'),
        status=q.validated_data.get('status'),
        date_window=q.validated_data.get('date'),
    )
    return Response(ok([_row(a) for a in rows], counts=svc.appointment_counts(everything), found=len(rows)))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_detail(request, pk: int):
    appointment = _appointment(request, pk)
    detail = svc.appointment_detail(appointment)
    record = detail['record']
    return Response(ok({
        'appointment': _row(appointment),
        'medicalRecord': format_record(record, with_patient=False) if record else None,
        'prescriptions': [format_prescription(p) for p in detail['prescriptions']],
        'labTests': [format_lab_test(t) for t in detail['lab_tests']],
        'medicines': [format_medicine(m) for m in detail['medicines']],
    }))


def _set_status(request, pk, new_status):
    appointment = _appointment(request, pk)
    svc.triage(appointment, new_status, user=request.user)
    return Response(ok(_row(appointment)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_accept(request, pk: int):
    return _set_status(request, pk, Appointment.STATUS_ACCEPTED)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_reject(request, pk: int):
    return _set_status(request, pk, Appointment.STATUS_REJECTED)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_complete(request, pk: int):
    appointment = _appointment(request, pk)
    svc.complete(appointment, user=request.user)
    return Response(ok(_row(appointment)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_notes(request, pk: int):
    s = AppointmentNotesSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment = _appointment(request, pk)
    svc.update_notes(appointment, s.validated_data['notes'], user=request.user)
    return Response(ok(_row(appointment)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_record(request, pk: int):
    """Create or update the medical record of this visit."""
    s = MedicalRecordInputSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment = _appointment(request, pk)
    record = svc.save_record(appointment, user=request.user, **s.validated_data)
    return Response(ok(format_record(record, with_patient=False)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_order_lab_test(request, pk: int):
    s = LabTestOrderSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment = _appointment(request, pk)
    test = svc.order_lab_test(
        appointment,
        test_type=s.validated_data['test_type'],
        test_date=s.validated_data.get('test_date'),
        user=request.user,
    )
    return Response(ok(format_lab_test(test)), status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def appointment_add_prescription(request, pk: int):
    s = AppointmentPrescriptionSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment = _appointment(request, pk)
    prescription = svc.add_prescription(
        appointment,
        medicine=get_medicine(s.validated_data['medicine_id']),
        dosage=s.validated_data['dosage'],
        frequency=s.validated_data['frequency'],
        duration=s.validated_data['duration'],
        user=request.user,
    )
    return Response(ok(format_prescription(prescription)), status=status.HTTP_201_CREATED)
