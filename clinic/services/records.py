"""
Medical records: search, statistics and the record → prescriptions /
lab tests join.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from clinic.exceptions import DomainError
from clinic.models import LabTest, MedicalRecord, Prescription
from clinic.services.audit import log_action

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


def matches_search(record: MedicalRecord, term: Optional[str]) -> bool:
    """Case-insensitive substring match on patient name, diagnosis or treatment."""
    if not term:
        return True
    term = term.lower()
    name = record.patient.full_name if record.patient_id and record.patient else ''
    return any(term in (value or '').lower() for value in (name, record.diagnosis, record.treatment))


def filter_records(records: Iterable[MedicalRecord], search: Optional[str] = None) -> list[MedicalRecord]:
    return [r for r in records if matches_search(r, search)]


def sort_recent(records: Iterable[MedicalRecord]) -> list[MedicalRecord]:
    return sorted(records, key=lambda r: (r.record_date, r.id or 0), reverse=True)


def recent_records(records: Iterable[MedicalRecord], limit: int = RECENT_LIMIT) -> list[MedicalRecord]:
    return sort_recent(records)[:limit]


def record_stats(records: Iterable[MedicalRecord], *, lab_test_count: int, prescription_count: int) -> dict:
    records = list(records)
    return {
        'totalRecords': len(records),
        'patientsTreated': len({r.patient_id for r in records}),
        'labTests': lab_test_count,
        'prescriptions': prescription_count,
    }


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def records_for_doctor(doctor):
    return (MedicalRecord.objects.filter(doctor=doctor)
            .select_related('patient')
            .order_by('-record_date', '-id'))


def stats_for_doctor(doctor) -> dict:
    records = list(records_for_doctor(doctor))
    return record_stats(
        records,
        lab_test_count=LabTest.objects.filter(medical_record__doctor=doctor).count(),
        prescription_count=Prescription.objects.filter(medical_record__doctor=doctor).count(),
    )


def record_detail(record: MedicalRecord) -> dict:
    return {
        'record': record,
        'prescriptions': list(record.prescriptions.select_related('medicine').order_by('id')),
        'lab_tests': list(record.lab_tests.order_by('-test_date', '-id')),
    }


def lab_tests_for_doctor(doctor, *, result: Optional[str] = None):
    qs = LabTest.objects.filter(medical_record__doctor=doctor).select_related('medical_record__patient')
    if result:
        qs = qs.filter(result=result)
    return qs.order_by('-test_date', '-id')


def set_lab_result(test: LabTest, result: str, *, user) -> LabTest:
    result = (result or '').strip()
    if not result:
        raise DomainError('result must not be empty')
    old = test.result
    test.result = result
    test.save(update_fields=['result'])
    log_action(user=user, action='lab_test_result', object_type='lab_test', object_id=test.id,
               detail={'from': old, 'to': result})
    return test
