"""Clinic application for the doctor portal backend.

This package contains models, serializers, services, views and route
registrations backing the doctor dashboard: appointments, medical
records, prescriptions, lab tests, leave requests, certificates and the
work schedule.
"""
