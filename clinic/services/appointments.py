"""
Appointment triage.

The filter and count helpers are plain functions over lists of
:class:`Appointment` so they can run on any in-memory selection; the
remaining functions perform the writes and the sequential fetches that
back the appointment detail screen.
"""
from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

import bleach
from django.db import transaction
from django.utils import timezone

from clinic.exceptions import DomainError
from clinic.models import Appointment, LabTest, MedicalRecord, Medicine, Prescription
from clinic.services.audit import log_action

logger = logging.getLogger(__name__)

STATUS_BADGES = {
    Appointment.STATUS_SCHEDULED: 'blue',
    Appointment.STATUS_COMPLETED: 'green',
    Appointment.STATUS_CANCELLED: 'red',
    Appointment.STATUS_IN_PROGRESS: 'yellow',
}
DEFAULT_BADGE = 'gray'

DATE_WINDOWS = ('all', 'today', 'upcoming')


def status_badge(status: str) -> str:
    return STATUS_BADGES.get(status, DEFAULT_BADGE)


def _local(dt: datetime.datetime) -> datetime.datetime:
    return timezone.localtime(dt) if timezone.is_aware(dt) else dt


# statuses still awaiting the doctor's decision
PENDING_STATUSES = (Appointment.STATUS_SCHEDULED, 'Pending')


def is_past_date(appointment: Appointment, now: Optional[datetime.datetime] = None) -> bool:
    """True when the visit falls before today's local midnight."""
    now = now or timezone.now()
    return _local(appointment.appointment_date).date() < _local(now).date()


def is_overdue(appointment: Appointment, now: Optional[datetime.datetime] = None) -> bool:
    return appointment.status in PENDING_STATUSES and is_past_date(appointment, now)


def matches_search(appointment: Appointment, term: Optional[str]) -> bool:
    """Case-insensitive substring match on the patient name or the notes."""
    if not term:
        return True
    term = term.lower()
    patient = appointment.patient
    name = (patient.full_name if patient else '') or ''
    return term in name.lower() or term in (appointment.notes or '').lower()


def matches_date_window(appointment: Appointment, window: Optional[str], now: datetime.datetime) -> bool:
    if not window or window == 'all':
        return True
    if window == 'today':
        return _local(appointment.appointment_date).date() == _local(now).date()
    if window == 'upcoming':
        return appointment.appointment_date >= now
    return True


def filter_appointments(appointments: Iterable[Appointment], *, search: Optional[str] = None,
                        status: Optional[str] = None, date_window: Optional[str] = None,
                        now: Optional[datetime.datetime] = None) -> list[Appointment]:
    now = now or timezone.now()
    return [
        a for a in appointments
        if matches_search(a, search)
        and (not status or status == 'all' or a.status == status)
        and matches_date_window(a, date_window, now)
    ]


def appointment_counts(appointments: Iterable[Appointment], now: Optional[datetime.datetime] = None) -> dict:
    now = now or timezone.now()
    appointments = list(appointments)
    counts = {'total': len(appointments), 'upcoming': sum(1 for a in appointments if a.appointment_date >= now)}
    by_status = {value: 0 for value, _ in Appointment.STATUS_CHOICES}
    for a in appointments:
        by_status[a.status] = by_status.get(a.status, 0) + 1
    counts['byStatus'] = by_status
    return counts


def todays_appointments(appointments: Iterable[Appointment], now: Optional[datetime.datetime] = None) -> list[Appointment]:
    return filter_appointments(appointments, date_window='today', now=now)


# ---------------------------------------------------------------------------
# Queries & writes
# ---------------------------------------------------------------------------

def appointments_for_doctor(doctor):
    return (Appointment.objects.filter(doctor=doctor)
            .select_related('patient', 'shift')
            .order_by('appointment_date', 'id'))


def find_record(appointment: Appointment) -> Optional[MedicalRecord]:
    """The medical record that belongs to this visit.

    Records carry no appointment id, so the visit's record is the most
    recent one written by the same doctor for the same patient.
    """
    return (MedicalRecord.objects
            .filter(patient_id=appointment.patient_id, doctor_id=appointment.doctor_id)
            .order_by('-record_date', '-id')
            .first())


def require_record(appointment: Appointment) -> MedicalRecord:
    record = find_record(appointment)
    if record is None:
        raise DomainError('save the medical record for this appointment first')
    return record


def appointment_detail(appointment: Appointment) -> dict:
    """Appointment → its record → the record's prescriptions and lab tests."""
    record = find_record(appointment)
    prescriptions: list[Prescription] = []
    lab_tests: list[LabTest] = []
    if record is not None:
        prescriptions = list(record.prescriptions.select_related('medicine').order_by('id'))
        lab_tests = list(record.lab_tests.order_by('-test_date', '-id'))
    return {
        'appointment': appointment,
        'record': record,
        'prescriptions': prescriptions,
        'lab_tests': lab_tests,
        'medicines': list(Medicine.objects.order_by('name')),
    }


def set_status(appointment: Appointment, new_status: str, *, user) -> Appointment:
    old = appointment.status
    appointment.status = new_status
    appointment.save(update_fields=['status'])
    log_action(user=user, action='appointment_status', object_type='appointment', object_id=appointment.id,
               detail={'from': old, 'to': new_status})
    return appointment


def triage(appointment: Appointment, new_status: str, *, user,
           now: Optional[datetime.datetime] = None) -> Appointment:
    """Accept or reject a visit that is neither finished nor in the past."""
    if appointment.status == Appointment.STATUS_COMPLETED:
        raise DomainError('completed appointments cannot be accepted or rejected')
    if is_past_date(appointment, now):
        logger.info('Refused to triage past appointment %s', appointment.id)
        raise DomainError('past appointments cannot be accepted or rejected')
    return set_status(appointment, new_status, user=user)


def update_notes(appointment: Appointment, notes: str, *, user) -> Appointment:
    appointment.notes = bleach.clean((notes or '').strip(), tags=set(), strip=True)
    appointment.save(update_fields=['notes'])
    return appointment


@transaction.atomic
def save_record(appointment: Appointment, *, diagnosis: str, treatment: str, user,
                today: Optional[datetime.date] = None) -> MedicalRecord:
    diagnosis = bleach.clean((diagnosis or '').strip(), tags=set(), strip=True)
    treatment = bleach.clean((treatment or '').strip(), tags=set(), strip=True)
    if not diagnosis or not treatment:
        raise DomainError('Please fill in both diagnosis and treatment')
    record = find_record(appointment)
    created = record is None
    if created:
        record = MedicalRecord(
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            record_date=today or timezone.localdate(),
        )
    record.diagnosis = diagnosis
    record.treatment = treatment
    record.save()
    log_action(user=user, action='record_save', object_type='medical_record', object_id=record.id,
               detail={'appointmentId': appointment.id, 'created': created})
    return record


def complete(appointment: Appointment, *, user) -> Appointment:
    record = find_record(appointment)
    if record is None or not record.is_complete():
        logger.info('Refused to complete appointment %s without a medical record', appointment.id)
        raise DomainError('Please complete the medical record before marking as completed')
    return set_status(appointment, Appointment.STATUS_COMPLETED, user=user)


@transaction.atomic
def order_lab_test(appointment: Appointment, *, test_type: str, test_date: Optional[datetime.date] = None,
                   user) -> LabTest:
    test_type = (test_type or '').strip()
    if not test_type:
        raise DomainError('Please enter test type')
    record = require_record(appointment)
    test = LabTest.objects.create(
        medical_record=record,
        test_type=test_type,
        test_date=test_date or timezone.localdate(),
    )
    log_action(user=user, action='lab_test_order', object_type='lab_test', object_id=test.id,
               detail={'recordId': record.id, 'testType': test_type})
    return test


@transaction.atomic
def add_prescription(appointment: Appointment, *, medicine: Medicine, dosage: str, frequency: str,
                     duration: str, user) -> Prescription:
    if not all((v or '').strip() for v in (dosage, frequency, duration)):
        raise DomainError('Please fill in all prescription fields')
    record = require_record(appointment)
    prescription = Prescription.objects.create(
        medical_record=record,
        medicine=medicine,
        dosage=dosage.strip(),
        frequency=frequency.strip(),
        duration=duration.strip(),
    )
    log_action(user=user, action='prescription_create', object_type='prescription', object_id=prescription.id,
               detail={'recordId': record.id, 'appointmentId': appointment.id})
    return prescription
