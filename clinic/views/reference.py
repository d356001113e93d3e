"""
Read-only patient and medicine lookups used by the prescription forms.
Lists come from the reference cache.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Medicine, Patient
from clinic.permissions import IsDoctor
from clinic.services.formatters import format_medicine, format_patient
from clinic.services.reference import reference_list
from .common import ok


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def patient_list(request):
    return Response(ok(reference_list('ref:patients')))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def patient_detail(request, pk: int):
    patient = Patient.objects.filter(pk=pk).first()
    if patient is None:
        raise NotFound('patient not found')
    return Response(ok(format_patient(patient)))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def medicine_list(request):
    return Response(ok(reference_list('ref:medicines')))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def medicine_detail(request, pk: int):
    medicine = Medicine.objects.filter(pk=pk).first()
    if medicine is None:
        raise NotFound('medicine not found')
    return Response(ok(format_medicine(medicine)))
