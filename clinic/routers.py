"""
URL mappings for the doctor portal API.

Every page of the doctor dashboard has its endpoint group below.  Trailing
slashes are omitted (``APPEND_SLASH = False``).
"""
from django.urls import include, path

from .auth_views import jwt_logout_view, jwt_refresh_view, login_view, profile_view
from .views import appointments, certificates, leave, prescriptions, records, reference, schedule
from .views.dashboard import dashboard_view
from .views.health import healthz

urlpatterns = [
    # auth
    path('api/login', login_view, name='login_view'),
    path('api/auth/jwt/refresh', jwt_refresh_view, name='jwt_refresh'),
    path('api/auth/jwt/logout', jwt_logout_view, name='jwt_logout'),
    path('api/profile', profile_view, name='profile'),

    path('api/dashboard', dashboard_view, name='dashboard'),

    # appointments
    path('api/appointments', appointments.appointment_list, name='appointment_list'),
    path('api/appointments/<int:pk>', appointments.appointment_detail, name='appointment_detail'),
    path('api/appointments/<int:pk>/accept', appointments.appointment_accept, name='appointment_accept'),
    path('api/appointments/<int:pk>/reject', appointments.appointment_reject, name='appointment_reject'),
    path('api/appointments/<int:pk>/complete', appointments.appointment_complete, name='appointment_complete'),
    path('api/appointments/<int:pk>/notes', appointments.appointment_notes, name='appointment_notes'),
    path('api/appointments/<int:pk>/record', appointments.appointment_record, name='appointment_record'),
    path('api/appointments/<int:pk>/lab-tests', appointments.appointment_order_lab_test,
         name='appointment_lab_tests'),
    path('api/appointments/<int:pk>/prescriptions', appointments.appointment_add_prescription,
         name='appointment_prescriptions'),

    # medical records & lab tests
    path('api/records', records.record_list, name='record_list'),
    path('api/records/stats', records.record_stats, name='record_stats'),
    path('api/records/<int:pk>', records.record_detail, name='record_detail'),
    path('api/lab-tests', records.lab_test_list, name='lab_test_list'),
    path('api/lab-tests/<int:pk>/result', records.lab_test_result, name='lab_test_result'),

    # prescriptions
    path('api/prescriptions', prescriptions.prescription_list, name='prescription_list'),
    path('api/prescriptions/<int:pk>', prescriptions.prescription_detail, name='prescription_detail'),

    # leave
    path('api/leave-requests', leave.leave_list, name='leave_list'),
    path('api/leave-requests/stats', leave.leave_stats, name='leave_stats'),
    path('api/leave-requests/<int:pk>', leave.leave_detail, name='leave_detail'),
    path('api/leave-requests/<int:pk>/cancel', leave.leave_cancel, name='leave_cancel'),
    path('api/leave-requests/<int:pk>/review', leave.leave_review, name='leave_review'),

    # certificates
    path('api/certificates', certificates.certificate_list, name='certificate_list'),
    path('api/certificates/<int:pk>', certificates.certificate_detail, name='certificate_detail'),

    # schedule
    path('api/schedule', schedule.schedule_list, name='schedule_list'),
    path('api/schedule/week', schedule.schedule_week, name='schedule_week'),
    path('api/schedule/stats', schedule.schedule_stats, name='schedule_stats'),
    path('api/shifts', schedule.shift_list, name='shift_list'),
    path('api/rooms', schedule.room_list, name='room_list'),
    path('api/departments', schedule.department_list, name='department_list'),

    # reference data
    path('api/patients', reference.patient_list, name='patient_list'),
    path('api/patients/<int:pk>', reference.patient_detail, name='patient_detail'),
    path('api/medicines', reference.medicine_list, name='medicine_list'),
    path('api/medicines/<int:pk>', reference.medicine_detail, name='medicine_detail'),

    path('healthz', healthz, name='healthz'),
    # django_prometheus.urls serves the "metrics" path itself
    path('', include('django_prometheus.urls')),
]
