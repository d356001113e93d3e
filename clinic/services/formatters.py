"""
Row formatters shared by the views.

Each ``format_*`` function turns a model instance into the dict shape the
dashboard consumes: table columns under their own names plus embedded
related rows where the dashboard previously joined them itself.
"""
from __future__ import annotations

from typing import Optional

from django.utils import timezone

from clinic.models import (
    Appointment, Certificate, Department, Doctor, DoctorWorkSchedule, LabTest,
    LeaveRequest, MedicalRecord, Medicine, Patient, Prescription, Room, Shift,
)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def format_doctor(d: Doctor) -> dict:
    # never expose the password hash
    return {
        'id': d.id,
        'username': d.username,
        'email': d.email,
        'full_name': d.display_name(),
        'specialty_id': d.specialty_id,
        'phone': d.phone,
        'birth_date': _iso(d.birth_date),
        'gender': d.gender,
        'status': d.status,
        'join_date': _iso(d.join_date),
        'role': d.role,
        'address': d.address,
        'is_staff': d.is_staff,
    }


def format_patient(p: Optional[Patient]) -> Optional[dict]:
    if p is None:
        return None
    return {
        'id': p.id,
        'full_name': p.full_name,
        'personal_id': p.personal_id,
        'phone': p.phone,
        'birth_date': _iso(p.birth_date),
        'gender': p.gender,
        'status': p.status,
        'email': p.email,
        'address': p.address,
    }


def format_shift(s: Optional[Shift]) -> Optional[dict]:
    if s is None:
        return None
    return {
        'id': s.id,
        'name': s.name,
        'start_time': s.start_time.strftime('%H:%M'),
        'end_time': s.end_time.strftime('%H:%M'),
    }


def format_department(d: Optional[Department]) -> Optional[dict]:
    if d is None:
        return None
    return {'id': d.id, 'name': d.name, 'description': d.description, 'location': d.location}


def format_room(r: Optional[Room]) -> Optional[dict]:
    if r is None:
        return None
    return {'id': r.id, 'name': r.name, 'type': r.type, 'floor': r.floor, 'department_id': r.department_id}


def format_medicine(m: Optional[Medicine]) -> Optional[dict]:
    if m is None:
        return None
    return {
        'id': m.id,
        'name': m.name,
        'description': m.description,
        'unit_price': float(m.unit_price),
        'quantity': m.quantity,
        'expiry_date': _iso(m.expiry_date),
    }


def format_appointment(a: Appointment, *, badge: Optional[str] = None) -> dict:
    data = {
        'id': a.id,
        'patient_id': a.patient_id,
        'doctor_id': a.doctor_id,
        'shift_id': a.shift_id,
        'appointment_date': timezone.localtime(a.appointment_date).isoformat() if timezone.is_aware(a.appointment_date) else a.appointment_date.isoformat(),
        'status': a.status,
        'notes': a.notes,
        'patient': format_patient(a.patient),
        'shift': format_shift(a.shift),
    }
    if badge is not None:
        data['badge'] = badge
    return data


def format_record(r: MedicalRecord, *, with_patient: bool = True) -> dict:
    data = {
        'id': r.id,
        'patient_id': r.patient_id,
        'doctor_id': r.doctor_id,
        'diagnosis': r.diagnosis,
        'treatment': r.treatment,
        'record_date': _iso(r.record_date),
    }
    if with_patient:
        data['patient'] = format_patient(r.patient)
    return data


def format_prescription(p: Prescription, *, with_medicine: bool = True) -> dict:
    data = {
        'id': p.id,
        'medical_record_id': p.medical_record_id,
        'medicine_id': p.medicine_id,
        'dosage': p.dosage,
        'frequency': p.frequency,
        'duration': p.duration,
    }
    if with_medicine:
        data['medicine'] = format_medicine(p.medicine)
    return data


def format_lab_test(t: LabTest) -> dict:
    return {
        'id': t.id,
        'medical_record_id': t.medical_record_id,
        'test_type': t.test_type,
        'result': t.result,
        'test_date': _iso(t.test_date),
    }


def format_leave_request(lr: LeaveRequest) -> dict:
    return {
        'id': lr.id,
        'doctor_id': lr.doctor_id,
        'request_date': _iso(lr.request_date),
        'start_date': _iso(lr.start_date),
        'end_date': _iso(lr.end_date),
        'reason': lr.reason,
        'status': lr.status,
        'created_at': _iso(lr.created_at),
        'updated_at': _iso(lr.updated_at),
    }


def format_certificate(c: Certificate) -> dict:
    return {
        'id': c.id,
        'doctor_id': c.doctor_id,
        'name': c.name,
        'issued_by': c.issued_by,
        'issue_date': _iso(c.issue_date),
        'expiry_date': _iso(c.expiry_date),
    }


def format_schedule(s: DoctorWorkSchedule) -> dict:
    room = s.room
    return {
        'id': s.id,
        'doctor_id': s.doctor_id,
        'shift_id': s.shift_id,
        'room_id': s.room_id,
        'work_date': _iso(s.work_date),
        'status': s.status,
        'shift': format_shift(s.shift),
        'room': format_room(room),
        'department': format_department(room.department if room else None),
    }
