"""
Medical record history, statistics and lab tests of the current doctor.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import LabTest, MedicalRecord
from clinic.permissions import IsDoctor
from clinic.serializers.records import LabResultSerializer, LabTestListQuerySerializer, RecordListQuerySerializer
from clinic.services import records as svc
from clinic.services.formatters import format_lab_test, format_prescription, format_record
from .common import get_owned, ok


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def record_list(request):
    """Records newest first; ``q`` searches patient name, diagnosis and treatment."""
    q = RecordListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    rows = svc.filter_records(svc.records_for_doctor(request.user), q.validated_data.get('q'))
    return Response(ok([format_record(r) for r in rows], found=len(rows)))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def record_stats(request):
    records = list(svc.records_for_doctor(request.user))
    return Response(ok({
        'stats': svc.stats_for_doctor(request.user),
        'recent': [format_record(r) for r in svc.recent_records(records)],
    }))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def record_detail(request, pk: int):
    record = get_owned(MedicalRecord.objects.select_related('patient'), pk, request.user, label='medical record')
    detail = svc.record_detail(record)
    data = format_record(record)
    data['prescriptions'] = [format_prescription(p) for p in detail['prescriptions']]
    data['labTests'] = [format_lab_test(t) for t in detail['lab_tests']]
    return Response(ok(data))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def lab_test_list(request):
    q = LabTestListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    rows = list(svc.lab_tests_for_doctor(request.user, result=q.validated_data.get('result')))
    return Response(ok([format_lab_test(t) for t in rows], found=len(rows)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def lab_test_result(request, pk: int):
    s = LabResultSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    test = get_owned(LabTest.objects.select_related('medical_record'), pk, request.user,
                     owner_attr='medical_record.doctor_id', label='lab test')
    svc.set_lab_result(test, s.validated_data['result'], user=request.user)
    return Response(ok(format_lab_test(test)))
