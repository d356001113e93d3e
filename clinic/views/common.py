"""
Helpers shared by the view modules.
"""
from __future__ import annotations

from rest_framework.exceptions import NotFound, PermissionDenied


def get_owned(queryset, pk, user, *, owner_attr: str = 'doctor_id', label: str = 'record'):
    """Fetch ``pk`` from ``queryset`` and make sure ``user`` owns it.

    ``owner_attr`` may be a dotted path (e.g. ``medical_record.doctor_id``)
    for rows owned through their parent.
    """
    obj = queryset.filter(pk=pk).first()
    if obj is None:
        raise NotFound(f'{label} not found')
    owner = obj
    for part in owner_attr.split('.'):
        owner = getattr(owner, part, None)
    if owner != user.id:
        raise PermissionDenied(f'forbidden for this {label}')
    return obj


def ok(data=None, **extra):
    payload = {'ok': True}
    if data is not None:
        payload['data'] = data
    payload.update(extra)
    return payload
