"""
Prescriptions enriched with their medical record, patient and medicine.

The enrichment that the dashboard used to perform by fetching four
tables and matching ids in memory is a single ``select_related`` here.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.db import transaction

from clinic.exceptions import DomainError
from clinic.models import MedicalRecord, Prescription
from clinic.services.audit import log_action

logger = logging.getLogger(__name__)

FREQUENCY_BADGES = {
    'Once daily': 'green',
    'Twice daily': 'blue',
    'Three times daily': 'orange',
    'Four times daily': 'red',
    'As needed': 'purple',
}

STATUS_FILTERS = ('all', 'active')

EDITABLE_FIELDS = ('medicine', 'dosage', 'frequency', 'duration')


def frequency_badge(frequency: str) -> str:
    return FREQUENCY_BADGES.get(frequency, 'gray')


def duration_tone(duration: str) -> str:
    duration = duration or ''
    if duration == 'Ongoing':
        return 'blue'
    if '30 days' in duration or 'month' in duration:
        return 'green'
    if '7 days' in duration or 'week' in duration:
        return 'orange'
    return 'gray'


def matches_search(prescription: Prescription, term: Optional[str]) -> bool:
    """Case-insensitive substring match on patient name, medicine name or dosage."""
    if not term:
        return True
    term = term.lower()
    record = prescription.medical_record
    patient_name = record.patient.full_name if record and record.patient else ''
    medicine_name = prescription.medicine.name if prescription.medicine_id else ''
    return any(term in (v or '').lower() for v in (patient_name, medicine_name, prescription.dosage))


def filter_prescriptions(prescriptions: Iterable[Prescription], *, search: Optional[str] = None,
                         status: Optional[str] = None) -> list[Prescription]:
    # there is no prescription status column: every prescription is active
    if status and status not in STATUS_FILTERS:
        return []
    return [p for p in prescriptions if matches_search(p, search)]


# ---------------------------------------------------------------------------
# Queries & writes
# ---------------------------------------------------------------------------

def enriched_for_doctor(doctor):
    return (Prescription.objects
            .filter(medical_record__doctor=doctor)
            .select_related('medical_record__patient', 'medicine')
            .order_by('-medical_record__record_date', '-id'))


def resolve_record(doctor, *, medical_record_id: Optional[int] = None,
                   patient_id: Optional[int] = None) -> MedicalRecord:
    """Pick the record a new prescription is written on.

    An explicit record must belong to the doctor; a bare patient id maps
    to the doctor's latest record for that patient.
    """
    if medical_record_id:
        record = MedicalRecord.objects.filter(id=medical_record_id, doctor=doctor).first()
        if record is None:
            raise DomainError('medical record not found for this doctor')
        return record
    if patient_id:
        record = (MedicalRecord.objects.filter(patient_id=patient_id, doctor=doctor)
                  .order_by('-record_date', '-id').first())
        if record is None:
            raise DomainError('no medical record for this patient; create one from an appointment first')
        return record
    raise DomainError('medicalRecordId or patientId is required')


@transaction.atomic
def create_prescription(doctor, *, medicine, dosage: str, frequency: str = '', duration: str = '',
                        medical_record_id: Optional[int] = None, patient_id: Optional[int] = None) -> Prescription:
    if not (dosage or '').strip():
        raise DomainError('Please fill in all required fields')
    record = resolve_record(doctor, medical_record_id=medical_record_id, patient_id=patient_id)
    prescription = Prescription.objects.create(
        medical_record=record,
        medicine=medicine,
        dosage=dosage.strip(),
        frequency=(frequency or '').strip(),
        duration=(duration or '').strip(),
    )
    log_action(user=doctor, action='prescription_create', object_type='prescription', object_id=prescription.id,
               detail={'recordId': record.id})
    return prescription


def update_prescription(prescription: Prescription, changes: dict, *, user) -> Prescription:
    fields = [f for f in EDITABLE_FIELDS if f in changes]
    for field in fields:
        setattr(prescription, field, changes[field])
    if fields:
        prescription.save(update_fields=fields)
        log_action(user=user, action='prescription_update', object_type='prescription', object_id=prescription.id,
                   detail={'fields': fields})
    return prescription


def delete_prescription(prescription: Prescription, *, user) -> None:
    pid = prescription.id
    prescription.delete()
    log_action(user=user, action='prescription_delete', object_type='prescription', object_id=pid)
