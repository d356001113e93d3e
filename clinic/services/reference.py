from typing import Callable
from django.conf import settings
from django.core.cache import cache

from clinic.exceptions import DomainError
from clinic.models import Department, Medicine, Patient, Room, Shift
from clinic.services.formatters import (
    format_department, format_medicine, format_patient, format_room, format_shift,
)

# cache key -> (queryset factory, formatter)
REFERENCE_LISTS: dict[str, tuple[Callable, Callable]] = {
    'ref:medicines': (lambda: Medicine.objects.order_by('name', 'id'), format_medicine),
    'ref:patients': (lambda: Patient.objects.order_by('full_name', 'id'), format_patient),
    'ref:shifts': (lambda: Shift.objects.order_by('id'), format_shift),
    'ref:rooms': (lambda: Room.objects.order_by('department_id', 'id'), format_room),
    'ref:departments': (lambda: Department.objects.order_by('name', 'id'), format_department),
}


def build_reference_list(key: str) -> list[dict]:
    factory, fmt = REFERENCE_LISTS[key]
    return [fmt(obj) for obj in factory()]


def reference_list(key: str) -> list[dict]:
    cached = cache.get(key)
    if cached is not None:
        return cached
    data = build_reference_list(key)
    cache.set(key, data, settings.REFERENCE_CACHE_TTL)
    return data


def refresh_reference_lists() -> list[str]:
    for key in REFERENCE_LISTS:
        cache.set(key, build_reference_list(key), settings.REFERENCE_CACHE_TTL)
    return list(REFERENCE_LISTS)


def get_medicine(medicine_id: int) -> Medicine:
    medicine = Medicine.objects.filter(id=medicine_id).first()
    if medicine is None:
        raise DomainError('medicine not found')
    return medicine
