from typing import Optional
import datetime

from django.utils import timezone

from clinic.models import LabTest, LeaveRequest
from clinic.services import appointments as appt_svc


def doctor_overview(doctor, now: Optional[datetime.datetime] = None) -> dict:
    """Headline counts and today's appointment rows for one doctor."""
    now = now or timezone.now()
    appointments = list(appt_svc.appointments_for_doctor(doctor))
    today = appt_svc.todays_appointments(appointments, now=now)
    return {
        'stats': {
            'totalAppointments': len(appointments),
            'todaysPatients': len(today),
            'pendingLabTests': LabTest.objects.filter(
                medical_record__doctor=doctor, result=LabTest.RESULT_PENDING).count(),
            'pendingLeaveRequests': LeaveRequest.objects.filter(
                doctor=doctor, status=LeaveRequest.STATUS_PENDING).count(),
        },
        'today': today,
    }


def today_row(appointment) -> dict:
    when = appointment.appointment_date
    if timezone.is_aware(when):
        when = timezone.localtime(when)
    return {
        'id': appointment.id,
        'patientName': appointment.patient.full_name if appointment.patient else 'Unknown Patient',
        'time': when.strftime('%H:%M'),
        'shiftName': appointment.shift.name if appointment.shift else 'Unknown Shift',
        'status': appointment.status,
        'badge': appt_svc.status_badge(appointment.status),
        'notes': appointment.notes,
    }
