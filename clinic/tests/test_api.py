"""
Integration tests for the doctor portal API.

These tests exercise appointment triage, the record → lab test /
prescription chain, leave and certificate maintenance and the doctor
isolation rules.  They use Django REST Framework's APIClient within the
APITestCase base class and authenticate with ``force_authenticate``.
"""
from datetime import date, time, timedelta

from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from ..models import (
    Appointment, AuditEvent, Certificate, Department, Doctor, DoctorWorkSchedule, LabTest, LeaveRequest,
    MedicalRecord, Medicine, Patient, Prescription, Room, Shift,
)


class DoctorPortalAPITests(APITestCase):
    def setUp(self) -> None:
        self.doctor = Doctor.objects.create_user(
            username='sjohnson', email='sarah.johnson@hospital.test', password='P@ssw0rd1',
            full_name='Dr. Sarah Johnson', role='Senior Doctor',
        )
        self.other = Doctor.objects.create_user(
            username='mlee', email='mike.lee@hospital.test', password='P@ssw0rd1', full_name='Dr. Mike Lee',
        )
        self.john = Patient.objects.create(full_name='John Smith', personal_id='123456789')
        self.emily = Patient.objects.create(full_name='Emily Davis', personal_id='987654321')
        self.morning = Shift.objects.create(name='Morning', start_time=time(8), end_time=time(16))
        self.aspirin = Medicine.objects.create(name='Aspirin', unit_price=40, quantity=50)

        today = timezone.localtime()
        self.early = Appointment.objects.create(
            patient=self.john, doctor=self.doctor, shift=self.morning,
            appointment_date=today.replace(hour=0, minute=1, second=0, microsecond=0),
            notes='Regular cardiology checkup',
        )
        self.late = Appointment.objects.create(
            patient=self.emily, doctor=self.doctor, shift=self.morning,
            appointment_date=today.replace(hour=23, minute=59, second=0, microsecond=0),
            notes='Follow-up appointment',
        )
        self.foreign = Appointment.objects.create(
            patient=self.john, doctor=self.other, appointment_date=today, notes='not mine',
        )

        self.client = APIClient()
        self.client.force_authenticate(self.doctor)

    # --- appointments -----------------------------------------------------

    def test_list_only_own_appointments_with_counts(self):
        resp = self.client.get(reverse('appointment_list'))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        ids = [row['id'] for row in resp.data['data']]
        self.assertEqual(ids, [self.early.id, self.late.id])
        self.assertEqual(resp.data['counts']['total'], 2)
        self.assertEqual(resp.data['data'][0]['badge'], 'blue')
        self.assertEqual(resp.data['data'][0]['patient']['full_name'], 'John Smith')

    def test_list_filters(self):
        resp = self.client.get(reverse('appointment_list'), {'q': 'emily', 'date': 'today'})
        self.assertEqual([row['id'] for row in resp.data['data']], [self.late.id])
        # counts are computed over the unfiltered set
        self.assertEqual(resp.data['counts']['total'], 2)
        resp = self.client.get(reverse('appointment_list'), {'date': 'someday'})
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'validation_error')

    def test_accept_and_reject(self):
        resp = self.client.post(reverse('appointment_accept', args=[self.early.id]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['data']['status'], 'Accepted')
        resp = self.client.post(reverse('appointment_reject', args=[self.late.id]))
        self.assertEqual(resp.data['data']['status'], 'Rejected')
        self.assertTrue(AuditEvent.objects.filter(action='appointment_status', object_id=self.late.id).exists())

    def test_completed_appointment_cannot_be_accepted(self):
        done = Appointment.objects.create(
            patient=self.john, doctor=self.doctor, status='Completed',
            appointment_date=timezone.localtime() + timedelta(days=1),
        )
        resp = self.client.post(reverse('appointment_accept', args=[done.id]))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')
        done.refresh_from_db()
        self.assertEqual(done.status, 'Completed')

    def test_past_appointment_cannot_be_rejected(self):
        stale = Appointment.objects.create(
            patient=self.emily, doctor=self.doctor,
            appointment_date=timezone.localtime() - timedelta(days=5),
        )
        resp = self.client.post(reverse('appointment_reject', args=[stale.id]))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')
        stale.refresh_from_db()
        self.assertEqual(stale.status, 'Scheduled')
        self.assertFalse(AuditEvent.objects.filter(action='appointment_status', object_id=stale.id).exists())

    def test_list_flags_overdue_rows(self):
        stale = Appointment.objects.create(
            patient=self.emily, doctor=self.doctor,
            appointment_date=timezone.localtime() - timedelta(days=5),
        )
        resp = self.client.get(reverse('appointment_list'))
        overdue = {row['id']: row['overdue'] for row in resp.data['data']}
        self.assertEqual(overdue, {stale.id: True, self.early.id: False, self.late.id: False})

    def test_other_doctors_appointment_is_forbidden(self):
        resp = self.client.post(reverse('appointment_accept', args=[self.foreign.id]))
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(resp.data['error']['code'], 'permission_denied')
        self.foreign.refresh_from_db()
        self.assertEqual(self.foreign.status, 'Scheduled')

    def test_missing_appointment_is_404(self):
        resp = self.client.get(reverse('appointment_detail', args=[99999]))
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data, {'ok': False, 'error': {'code': 'not_found', 'message': 'appointment not found'}})

    def test_complete_requires_medical_record(self):
        resp = self.client.post(reverse('appointment_complete', args=[self.early.id]))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')
        self.early.refresh_from_db()
        self.assertEqual(self.early.status, 'Scheduled')

    def test_record_then_complete(self):
        resp = self.client.post(reverse('appointment_record', args=[self.early.id]),
                                {'diagnosis': 'Hypertension', 'treatment': 'ACE inhibitor'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        record_id = resp.data['data']['id']
        # saving again updates the same record
        resp = self.client.post(reverse('appointment_record', args=[self.early.id]),
                                {'diagnosis': 'Hypertension stage 1', 'treatment': 'ACE inhibitor'}, format='json')
        self.assertEqual(resp.data['data']['id'], record_id)
        self.assertEqual(MedicalRecord.objects.filter(doctor=self.doctor, patient=self.john).count(), 1)

        resp = self.client.post(reverse('appointment_complete', args=[self.early.id]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['data']['status'], 'Completed')
        self.assertEqual(resp.data['data']['badge'], 'green')

    def test_record_needs_both_fields(self):
        resp = self.client.post(reverse('appointment_record', args=[self.early.id]),
                                {'diagnosis': 'Flu', 'treatment': '  '}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(MedicalRecord.objects.exists())

    def test_lab_test_and_prescription_from_appointment(self):
        url_lab = reverse('appointment_lab_tests', args=[self.early.id])
        url_rx = reverse('appointment_prescriptions', args=[self.early.id])
        rx = {'medicine_id': self.aspirin.id, 'dosage': '81mg', 'frequency': 'Once daily', 'duration': 'Ongoing'}

        # no record yet
        self.assertEqual(self.client.post(url_lab, {'test_type': 'ECG'}, format='json').status_code, 400)
        self.assertEqual(self.client.post(url_rx, rx, format='json').status_code, 400)

        MedicalRecord.objects.create(patient=self.john, doctor=self.doctor, diagnosis='Chest pain',
                                     treatment='Rest', record_date=date.today())
        resp = self.client.post(url_lab, {'test_type': 'ECG'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data['data']['result'], 'Pending')

        resp = self.client.post(url_rx, dict(rx, frequency=''), format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        resp = self.client.post(url_rx, rx, format='json')
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

        detail = self.client.get(reverse('appointment_detail', args=[self.early.id])).data['data']
        self.assertEqual(detail['medicalRecord']['diagnosis'], 'Chest pain')
        self.assertEqual([t['test_type'] for t in detail['labTests']], ['ECG'])
        self.assertEqual(detail['prescriptions'][0]['medicine']['name'], 'Aspirin')
        self.assertEqual(len(detail['medicines']), 1)

    def test_unknown_medicine_is_a_domain_error(self):
        record = MedicalRecord.objects.create(patient=self.john, doctor=self.doctor, diagnosis='Chest pain',
                                              treatment='Rest', record_date=date.today())
        rx = {'medicine_id': 99999, 'dosage': '81mg', 'frequency': 'Once daily', 'duration': 'Ongoing'}
        resp = self.client.post(reverse('appointment_prescriptions', args=[self.early.id]), rx, format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data, {'ok': False, 'error': {'code': 'domain_error', 'message': 'medicine not found'}})

        resp = self.client.post(reverse('prescription_list'), dict(rx, medical_record_id=record.id), format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')

        existing = Prescription.objects.create(medical_record=record, medicine=self.aspirin, dosage='81mg')
        resp = self.client.patch(reverse('prescription_detail', args=[existing.id]), {'medicine_id': 99999},
                                 format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')
        existing.refresh_from_db()
        self.assertEqual(existing.medicine_id, self.aspirin.id)
        self.assertFalse(Prescription.objects.exclude(id=existing.id).exists())

    def test_notes_are_cleaned(self):
        resp = self.client.post(reverse('appointment_notes', args=[self.late.id]),
                                {'notes': '<b>Bring</b> previous ECG'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['data']['notes'], 'Bring previous ECG')

    # --- records, lab tests, prescriptions ----------------------------------

    def _record(self, patient=None, doctor=None, days_ago=0):
        return MedicalRecord.objects.create(
            patient=patient or self.john, doctor=doctor or self.doctor, diagnosis='Hypertension',
            treatment='ACE inhibitor', record_date=date.today() - timedelta(days=days_ago),
        )

    def test_records_list_stats_and_detail(self):
        r1 = self._record(days_ago=2)
        r2 = self._record(patient=self.emily)
        self._record(doctor=self.other)
        LabTest.objects.create(medical_record=r1, test_type='CBC', test_date=date.today())
        Prescription.objects.create(medical_record=r1, medicine=self.aspirin, dosage='81mg')

        resp = self.client.get(reverse('record_list'), {'q': 'emily'})
        self.assertEqual([r['id'] for r in resp.data['data']], [r2.id])

        stats = self.client.get(reverse('record_stats')).data['data']
        self.assertEqual(stats['stats'], {'totalRecords': 2, 'patientsTreated': 2, 'labTests': 1, 'prescriptions': 1})
        self.assertEqual([r['id'] for r in stats['recent']], [r2.id, r1.id])

        detail = self.client.get(reverse('record_detail', args=[r1.id])).data['data']
        self.assertEqual(len(detail['prescriptions']), 1)
        self.assertEqual(detail['labTests'][0]['result'], 'Pending')

    def test_lab_test_list_and_result(self):
        record = self._record()
        test = LabTest.objects.create(medical_record=record, test_type='CBC', test_date=date.today())
        LabTest.objects.create(medical_record=record, test_type='ECG', result='Normal', test_date=date.today())

        resp = self.client.get(reverse('lab_test_list'), {'result': 'Pending'})
        self.assertEqual([t['id'] for t in resp.data['data']], [test.id])

        resp = self.client.post(reverse('lab_test_result', args=[test.id]), {'result': 'Normal'}, format='json')
        self.assertEqual(resp.data['data']['result'], 'Normal')

        foreign = LabTest.objects.create(medical_record=self._record(doctor=self.other), test_type='CBC',
                                         test_date=date.today())
        resp = self.client.post(reverse('lab_test_result', args=[foreign.id]), {'result': 'Normal'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_prescription_crud(self):
        url = reverse('prescription_list')
        payload = {'patient_id': self.emily.id, 'medicine_id': self.aspirin.id, 'dosage': '81mg',
                   'frequency': 'Once daily', 'duration': '30 days'}
        # the doctor has no record for Emily yet
        self.assertEqual(self.client.post(url, payload, format='json').status_code, 400)

        self._record(patient=self.emily, days_ago=5)
        latest = self._record(patient=self.emily)
        resp = self.client.post(url, payload, format='json')
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        pid = resp.data['data']['id']
        self.assertEqual(resp.data['data']['medical_record_id'], latest.id)
        self.assertEqual(resp.data['data']['frequencyBadge'], 'green')
        self.assertEqual(resp.data['data']['durationTone'], 'green')

        resp = self.client.get(url, {'q': 'emily', 'status': 'active'})
        self.assertEqual([p['id'] for p in resp.data['data']], [pid])

        resp = self.client.patch(reverse('prescription_detail', args=[pid]), {'dosage': '100mg'}, format='json')
        self.assertEqual(resp.data['data']['dosage'], '100mg')

        resp = self.client.delete(reverse('prescription_detail', args=[pid]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Prescription.objects.filter(id=pid).exists())

    def test_prescription_on_foreign_record_is_refused(self):
        foreign = self._record(doctor=self.other)
        resp = self.client.post(reverse('prescription_list'), {
            'medical_record_id': foreign.id, 'medicine_id': self.aspirin.id, 'dosage': '81mg',
        }, format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        resp = self.client.post(reverse('prescription_list'), {'medicine_id': self.aspirin.id, 'dosage': '81mg'},
                                format='json')
        self.assertEqual(resp.data['error']['code'], 'validation_error')

    # --- leave ---------------------------------------------------------------

    def test_leave_lifecycle(self):
        url = reverse('leave_list')
        resp = self.client.post(url, {'start_date': '2030-01-10', 'end_date': '2030-01-12',
                                      'reason': 'Personal leave'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data['data']['status'], 'Pending')
        self.assertEqual(resp.data['data']['days'], 3)
        lid = resp.data['data']['id']

        resp = self.client.post(reverse('leave_cancel', args=[lid]))
        self.assertEqual(resp.data['data']['status'], 'Cancelled')
        # only pending requests can change
        resp = self.client.post(reverse('leave_cancel', args=[lid]))
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

        stats = self.client.get(url).data['stats']
        self.assertEqual(stats['total'], 1)
        self.assertEqual(stats['cancelled'], 1)

    def test_leave_validation(self):
        url = reverse('leave_list')
        resp = self.client.post(url, {'start_date': '2030-01-12', 'end_date': '2030-01-10',
                                      'reason': 'Trip'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        resp = self.client.post(url, {'start_date': '2030-01-10', 'end_date': '2030-01-10', 'reason': ' '},
                                format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(LeaveRequest.objects.exists())

    def test_leave_filters(self):
        LeaveRequest.objects.create(doctor=self.doctor, request_date=date(2024, 11, 15), start_date=date(2024, 11, 20),
                                    end_date=date(2024, 11, 22), reason='Conference', status='Approved')
        LeaveRequest.objects.create(doctor=self.doctor, request_date=date(2024, 12, 15), start_date=date(2025, 1, 10),
                                    end_date=date(2025, 1, 12), reason='Personal', status='Pending')
        resp = self.client.get(reverse('leave_list'), {'status': 'Approved'})
        self.assertEqual([r['reason'] for r in resp.data['data']], ['Conference'])
        resp = self.client.get(reverse('leave_list'), {'status': 'all'})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(sorted(r['reason'] for r in resp.data['data']), ['Conference', 'Personal'])
        resp = self.client.get(reverse('leave_list'), {'start': '2024-12-01', 'end': '2024-12-31'})
        self.assertEqual([r['reason'] for r in resp.data['data']], ['Personal'])
        self.assertEqual(resp.data['stats']['totalApprovedDays'], 3)

    def test_leave_review_requires_staff(self):
        lr = LeaveRequest.objects.create(doctor=self.doctor, request_date=date.today(), start_date=date(2030, 1, 1),
                                         end_date=date(2030, 1, 2), reason='Trip')
        url = reverse('leave_review', args=[lr.id])
        resp = self.client.post(url, {'status': 'Approved'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

        self.other.is_staff = True
        self.other.save(update_fields=['is_staff'])
        staff = APIClient()
        staff.force_authenticate(self.other)
        resp = staff.post(url, {'status': 'Approved'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['data']['status'], 'Approved')

    def test_leave_of_other_doctor_cannot_be_deleted(self):
        lr = LeaveRequest.objects.create(doctor=self.other, request_date=date.today(), start_date=date(2030, 1, 1),
                                         end_date=date(2030, 1, 2), reason='Trip')
        resp = self.client.delete(reverse('leave_detail', args=[lr.id]))
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(LeaveRequest.objects.filter(id=lr.id).exists())

    # --- certificates --------------------------------------------------------

    def test_certificate_create_and_list(self):
        url = reverse('certificate_list')
        resp = self.client.post(url, {'name': 'Medical License', 'issued_by': 'State Medical Board',
                                      'issue_date': '2025-01-01', 'expiry_date': '2024-01-01'}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data['error']['code'], 'domain_error')

        for name, expiry in [('Medical License', date(2025, 1, 11)), ('Basic Life Support (BLS)', date(2024, 12, 27)),
                             ('Echocardiography', date(2027, 1, 1))]:
            Certificate.objects.create(doctor=self.doctor, name=name, issued_by='Board', issue_date=date(2020, 1, 1),
                                       expiry_date=expiry)
        Certificate.objects.create(doctor=self.other, name='Other', issued_by='Board', issue_date=date(2020, 1, 1),
                                   expiry_date=date(2030, 1, 1))

        resp = self.client.get(url, {'date': '2025-01-01'})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['stats'], {'total': 3, 'valid': 1, 'expiringSoon': 1, 'expired': 1})
        rows = {r['name']: r for r in resp.data['data']}
        self.assertEqual(rows['Medical License']['daysUntilExpiry'], 10)
        self.assertEqual(rows['Medical License']['status'], 'Expiring Soon')
        self.assertEqual(rows['Basic Life Support (BLS)']['category'], 'emergency')
        self.assertEqual(resp.data['alerts']['expired'][0]['daysAgo'], 5)
        self.assertEqual(len(resp.data['categories']['specialty']), 1)

    def test_certificate_delete(self):
        cert = Certificate.objects.create(doctor=self.doctor, name='BLS', issued_by='AHA',
                                          issue_date=date(2024, 1, 10), expiry_date=date(2026, 1, 10))
        resp = self.client.delete(reverse('certificate_detail', args=[cert.id]))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertTrue(AuditEvent.objects.filter(action='certificate_delete', object_id=cert.id).exists())

    # --- schedule, dashboard, reference ---------------------------------------

    def test_schedule_week_and_department_filter(self):
        cardio = Department.objects.create(name='Cardiology')
        er = Department.objects.create(name='Emergency')
        r301 = Room.objects.create(name='Room 301', department=cardio)
        r101 = Room.objects.create(name='Room 101', department=er)
        DoctorWorkSchedule.objects.create(doctor=self.doctor, shift=self.morning, room=r301, work_date=date(2024, 12, 20))
        DoctorWorkSchedule.objects.create(doctor=self.doctor, shift=self.morning, room=r101, work_date=date(2024, 12, 21))
        DoctorWorkSchedule.objects.create(doctor=self.doctor, shift=self.morning, room=r301, work_date=date(2024, 12, 22))

        resp = self.client.get(reverse('schedule_week'), {'date': '2024-12-20'})
        self.assertEqual(resp.data['weekStart'], '2024-12-15')
        self.assertEqual(resp.data['nextWeek'], '2024-12-22')
        self.assertEqual([len(d['entries']) for d in resp.data['data']], [0, 0, 0, 0, 0, 1, 1])

        resp = self.client.get(reverse('schedule_list'), {'departmentId': er.id})
        self.assertEqual([e['work_date'] for e in resp.data['data']], ['2024-12-21'])
        self.assertEqual(resp.data['data'][0]['department']['name'], 'Emergency')
        self.assertEqual(resp.data['data'][0]['badge'], 'green')

    def test_dashboard(self):
        record = self._record()
        LabTest.objects.create(medical_record=record, test_type='CBC', test_date=date.today())
        LeaveRequest.objects.create(doctor=self.doctor, request_date=date.today(), start_date=date(2030, 1, 1),
                                    end_date=date(2030, 1, 2), reason='Trip')
        resp = self.client.get(reverse('dashboard'))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.data['data']
        self.assertEqual(data['stats'], {'totalAppointments': 2, 'todaysPatients': 2,
                                         'pendingLabTests': 1, 'pendingLeaveRequests': 1})
        self.assertEqual([r['patientName'] for r in data['todaysAppointments']], ['John Smith', 'Emily Davis'])
        self.assertEqual(data['todaysAppointments'][0]['shiftName'], 'Morning')

    def test_reference_lists_are_cached(self):
        resp = self.client.get(reverse('medicine_list'))
        self.assertEqual([m['name'] for m in resp.data['data']], ['Aspirin'])
        Medicine.objects.create(name='Ibuprofen', unit_price=50, quantity=100)
        resp = self.client.get(reverse('medicine_list'))
        self.assertEqual(len(resp.data['data']), 1)

        call_command('refresh_caches')
        resp = self.client.get(reverse('medicine_list'))
        self.assertEqual([m['name'] for m in resp.data['data']], ['Aspirin', 'Ibuprofen'])

        resp = self.client.get(reverse('patient_list'))
        self.assertEqual([p['full_name'] for p in resp.data['data']], ['Emily Davis', 'John Smith'])
        resp = self.client.get(reverse('patient_detail', args=[self.john.id]))
        self.assertEqual(resp.data['data']['personal_id'], '123456789')
        self.assertEqual(self.client.get(reverse('medicine_detail', args=[99999])).status_code, 404)

    def test_anonymous_requests_are_rejected(self):
        resp = APIClient().get(reverse('appointment_list'))
        self.assertIn(resp.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertFalse(resp.data['ok'])

    def test_inactive_doctor_is_rejected(self):
        self.doctor.status = 'Inactive'
        self.doctor.save(update_fields=['status'])
        resp = self.client.get(reverse('dashboard'))
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
