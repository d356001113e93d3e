"""
Management command to populate the database with the demo dataset.

Dates are laid out around today (the demo "today" is the day the
command runs) so that the dashboard, the schedule week and the
certificate alerts all have something to show.
"""
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from clinic.models import (
    Appointment, Certificate, Department, Doctor, DoctorWorkSchedule, LabTest, LeaveRequest,
    MedicalRecord, Medicine, Patient, Prescription, Room, Shift, Specialty,
)
from clinic.services.reference import refresh_reference_lists


class Command(BaseCommand):
    help = 'Populate database with demo data'

    def add_arguments(self, parser):
        parser.add_argument('--password', default='password123', help='password of the demo doctor')

    @transaction.atomic
    def handle(self, *args, **options):
        self.today = timezone.localdate()
        self.stdout.write('Creating demo data...')

        specialties = self.create_specialties()
        departments = self.create_departments()
        doctor = self.create_doctor(specialties[0], options['password'])
        patients = self.create_patients()
        shifts = self.create_shifts()
        rooms = self.create_rooms(departments)
        self.create_schedule(doctor, shifts, rooms)
        self.create_appointments(doctor, patients, shifts)
        records = self.create_medical_records(doctor, patients)
        medicines = self.create_medicines()
        self.create_prescriptions(records, medicines)
        self.create_lab_tests(records)
        self.create_leave_requests(doctor)
        self.create_certificates(doctor)

        refresh_reference_lists()
        self.stdout.write(self.style.SUCCESS('Demo data created.'))

    def day(self, offset: int):
        return self.today + timedelta(days=offset)

    def at(self, offset: int, hour: int, minute: int = 0):
        naive = datetime.combine(self.day(offset), time(hour, minute))
        return timezone.make_aware(naive) if timezone.is_naive(naive) else naive

    def create_specialties(self):
        data = [
            ('Cardiology', 'Heart and cardiovascular system specialists'),
            ('Neurology', 'Brain and nervous system specialists'),
            ('Orthopedics', 'Bone and joint specialists'),
            ('Pediatrics', "Children's healthcare specialists"),
        ]
        result = []
        for name, description in data:
            obj, _ = Specialty.objects.get_or_create(name=name, defaults={'description': description})
            result.append(obj)
            self.stdout.write(f'specialty: {obj.name}')
        return result

    def create_departments(self):
        data = [
            ('Cardiology', 'Heart Care Department', 'Building A, Floor 3'),
            ('Emergency', 'Emergency Care', 'Building A, Floor 1'),
            ('Surgery', 'Surgical Department', 'Building B, Floor 2'),
            ('ICU', 'Intensive Care Unit', 'Building A, Floor 4'),
        ]
        result = []
        for name, description, location in data:
            obj, _ = Department.objects.get_or_create(
                name=name, defaults={'description': description, 'location': location})
            result.append(obj)
            self.stdout.write(f'department: {obj.name}')
        return result

    def create_doctor(self, specialty, password):
        doctor, created = Doctor.objects.get_or_create(
            username='sjohnson',
            defaults={
                'email': 'sarah.johnson@hospital.com',
                'password': make_password(password),
                'full_name': 'Dr. Sarah Johnson',
                'specialty': specialty,
                'phone': '+1-555-0123',
                'birth_date': datetime(1985, 3, 15).date(),
                'gender': 'Female',
                'join_date': datetime(2018, 1, 15).date(),
                'role': 'Senior Doctor',
                'address': '123 Medical Street, Healthcare City, HC 12345',
            },
        )
        self.stdout.write(f'doctor: {doctor.username} ({"created" if created else "exists"})')
        return doctor

    def create_patients(self):
        data = [
            ('John Smith', '123456789', '+1-555-0101', (1978, 6, 20), 'Male', 'john.smith@email.com',
             '456 Patient Ave, City, ST 12345'),
            ('Emily Davis', '987654321', '+1-555-0102', (1990, 11, 12), 'Female', 'emily.davis@email.com',
             '789 Health St, City, ST 12345'),
            ('Michael Brown', '456789123', '+1-555-0103', (1965, 9, 8), 'Male', 'michael.brown@email.com',
             '321 Care Blvd, City, ST 12345'),
            ('Lisa Wilson', '789123456', '+1-555-0104', (1982, 4, 25), 'Female', 'lisa.wilson@email.com',
             '654 Wellness Dr, City, ST 12345'),
        ]
        result = []
        for full_name, pid, phone, born, gender, email, address in data:
            obj, _ = Patient.objects.get_or_create(
                personal_id=pid,
                defaults={
                    'full_name': full_name, 'phone': phone, 'birth_date': datetime(*born).date(),
                    'gender': gender, 'email': email, 'address': address,
                },
            )
            result.append(obj)
            self.stdout.write(f'patient: {obj.full_name}')
        return result

    def create_shifts(self):
        data = [('Morning', time(8), time(16)), ('Evening', time(16), time(0)), ('Night', time(0), time(8))]
        return [
            Shift.objects.get_or_create(name=name, defaults={'start_time': start, 'end_time': end})[0]
            for name, start, end in data
        ]

    def create_rooms(self, departments):
        data = [
            ('Room 301', 'Consultation', 3, 0),
            ('Room 302', 'Consultation', 3, 0),
            ('Room 101', 'Emergency', 1, 1),
            ('OR 201', 'Surgery', 2, 2),
        ]
        return [
            Room.objects.get_or_create(
                name=name, defaults={'type': kind, 'floor': floor, 'department': departments[dept]})[0]
            for name, kind, floor, dept in data
        ]

    def create_schedule(self, doctor, shifts, rooms):
        for offset, shift, room in [(0, 0, 0), (1, 0, 0), (2, 1, 1), (3, 0, 0)]:
            DoctorWorkSchedule.objects.get_or_create(
                doctor=doctor, work_date=self.day(offset), shift=shifts[shift],
                defaults={'room': rooms[room], 'status': 'Active'},
            )
        self.stdout.write('schedule: 4 entries')

    def create_appointments(self, doctor, patients, shifts):
        data = [
            (0, 0, 10, 0, 0, Appointment.STATUS_SCHEDULED, 'Regular cardiology checkup'),
            (1, 0, 14, 30, 0, Appointment.STATUS_SCHEDULED, 'Follow-up appointment'),
            (2, 0, 16, 0, 1, Appointment.STATUS_COMPLETED, 'Chest pain evaluation'),
            (3, 1, 9, 0, 0, Appointment.STATUS_SCHEDULED, 'New patient consultation'),
        ]
        for patient, offset, hour, minute, shift, status, notes in data:
            Appointment.objects.get_or_create(
                doctor=doctor, patient=patients[patient], appointment_date=self.at(offset, hour, minute),
                defaults={'shift': shifts[shift], 'status': status, 'notes': notes},
            )
        self.stdout.write('appointments: 4 entries')

    def create_medical_records(self, doctor, patients):
        data = [
            (0, 'Hypertension', 'ACE inhibitor medication, lifestyle modifications', -1),
            (1, 'Anxiety disorder', 'Counseling sessions, stress management techniques', -2),
            (2, 'Chest pain - ruled out cardiac cause', 'Pain management, follow-up in 2 weeks', -3),
        ]
        return [
            MedicalRecord.objects.get_or_create(
                doctor=doctor, patient=patients[patient], diagnosis=diagnosis,
                defaults={'treatment': treatment, 'record_date': self.day(offset)},
            )[0]
            for patient, diagnosis, treatment, offset in data
        ]

    def create_medicines(self):
        data = [
            ('Lisinopril', 'ACE Inhibitor', 10, 100),
            ('Metoprolol', 'Beta Blocker', 20, 50),
            ('Atorvastatin', 'Statin', 30, 100),
            ('Aspirin', 'Antiplatelet', 40, 50),
            ('Ibuprofen', 'NSAID', 50, 100),
        ]
        return [
            Medicine.objects.get_or_create(
                name=name,
                defaults={'description': description, 'unit_price': Decimal(price), 'quantity': quantity,
                          'expiry_date': self.day(365)},
            )[0]
            for name, description, price, quantity in data
        ]

    def create_prescriptions(self, records, medicines):
        data = [
            (0, 0, '10mg', 'Once daily', '30 days'),
            (0, 3, '81mg', 'Once daily', 'Ongoing'),
            (2, 4, '400mg', 'Three times daily', '7 days'),
        ]
        for record, medicine, dosage, frequency, duration in data:
            Prescription.objects.get_or_create(
                medical_record=records[record], medicine=medicines[medicine],
                defaults={'dosage': dosage, 'frequency': frequency, 'duration': duration},
            )

    def create_lab_tests(self, records):
        data = [
            (0, 'Complete Blood Count', 'Normal'),
            (0, 'Lipid Panel', 'Elevated cholesterol'),
            (2, 'ECG', 'Normal sinus rhythm'),
        ]
        for record, test_type, result in data:
            LabTest.objects.get_or_create(
                medical_record=records[record], test_type=test_type,
                defaults={'result': result, 'test_date': records[record].record_date},
            )

    def create_leave_requests(self, doctor):
        data = [
            (-10, 5, 11, 'Annual vacation', LeaveRequest.STATUS_APPROVED),
            (-35, -30, -28, 'Medical conference', LeaveRequest.STATUS_APPROVED),
            (-5, 21, 23, 'Personal leave', LeaveRequest.STATUS_PENDING),
        ]
        for requested, start, end, reason, status in data:
            LeaveRequest.objects.get_or_create(
                doctor=doctor, reason=reason,
                defaults={'request_date': self.day(requested), 'start_date': self.day(start),
                          'end_date': self.day(end), 'status': status},
            )

    def create_certificates(self, doctor):
        # one valid, one renewal due, one expiring soon, one expired
        data = [
            ('Board Certification in Cardiology', 'American Board of Internal Medicine', -2000, 1650),
            ('Basic Life Support (BLS)', 'American Heart Association', -650, 60),
            ('Advanced Cardiac Life Support (ACLS)', 'American Heart Association', -700, 20),
            ('Medical License', 'State Medical Board', -2500, -15),
        ]
        for name, issued_by, issued, expires in data:
            Certificate.objects.get_or_create(
                doctor=doctor, name=name,
                defaults={'issued_by': issued_by, 'issue_date': self.day(issued),
                          'expiry_date': self.day(expires)},
            )
