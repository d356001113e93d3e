"""
Certificate tracking.

All expiry arithmetic is whole calendar days between a reference date
(today unless given) and the expiry date; negative means already expired.
"""
from __future__ import annotations

import datetime
from typing import Iterable, Optional

from django.conf import settings
from django.utils import timezone

from clinic.exceptions import DomainError
from clinic.models import Certificate
from clinic.services.audit import log_action

MEDICAL_KEYWORDS = ('medical', 'board', 'license')
EMERGENCY_KEYWORDS = ('bls', 'acls', 'life support')

EXPIRING_SOON_DAYS = 30


def warning_days() -> int:
    return getattr(settings, 'CERT_EXPIRY_WARNING_DAYS', 90)


def days_until_expiry(expiry_date: datetime.date, reference_date: Optional[datetime.date] = None) -> int:
    reference_date = reference_date or timezone.localdate()
    return (expiry_date - reference_date).days


def expiry_status(days: int) -> dict:
    if days < 0:
        return {'status': 'Expired', 'badge': 'red'}
    if days <= EXPIRING_SOON_DAYS:
        return {'status': 'Expiring Soon', 'badge': 'yellow'}
    if days <= warning_days():
        return {'status': 'Renewal Due', 'badge': 'orange'}
    return {'status': 'Valid', 'badge': 'green'}


def categorize(name: str) -> str:
    name = (name or '').lower()
    if any(k in name for k in MEDICAL_KEYWORDS):
        return 'medical'
    if any(k in name for k in EMERGENCY_KEYWORDS):
        return 'emergency'
    return 'specialty'


def categorized(certificates: Iterable[Certificate]) -> dict[str, list[Certificate]]:
    groups: dict[str, list[Certificate]] = {'medical': [], 'emergency': [], 'specialty': []}
    for cert in certificates:
        groups[categorize(cert.name)].append(cert)
    return groups


def is_expiring_soon(days: int) -> bool:
    return 0 <= days <= warning_days()


def certificate_stats(certificates: Iterable[Certificate], reference_date: Optional[datetime.date] = None) -> dict:
    days = [days_until_expiry(c.expiry_date, reference_date) for c in certificates]
    return {
        'total': len(days),
        'valid': sum(1 for d in days if d > warning_days()),
        'expiringSoon': sum(1 for d in days if is_expiring_soon(d)),
        'expired': sum(1 for d in days if d < 0),
    }


def expiry_alerts(certificates: Iterable[Certificate], reference_date: Optional[datetime.date] = None) -> dict:
    expired, expiring = [], []
    for cert in certificates:
        days = days_until_expiry(cert.expiry_date, reference_date)
        if days < 0:
            expired.append((cert, abs(days)))
        elif is_expiring_soon(days):
            expiring.append((cert, days))
    return {'expired': expired, 'expiring': expiring}


# ---------------------------------------------------------------------------
# Queries & writes
# ---------------------------------------------------------------------------

def certificates_for_doctor(doctor):
    return Certificate.objects.filter(doctor=doctor).order_by('expiry_date', 'id')


def create_certificate(doctor, *, name: str, issued_by: str, issue_date: datetime.date,
                       expiry_date: datetime.date) -> Certificate:
    name = (name or '').strip()
    issued_by = (issued_by or '').strip()
    if not name or not issued_by:
        raise DomainError('Please fill in all fields')
    if issue_date > expiry_date:
        raise DomainError('Expiry date must be after issue date')
    cert = Certificate.objects.create(
        doctor=doctor, name=name, issued_by=issued_by, issue_date=issue_date, expiry_date=expiry_date,
    )
    log_action(user=doctor, action='certificate_create', object_type='certificate', object_id=cert.id)
    return cert


def delete_certificate(cert: Certificate, *, user) -> None:
    cid = cert.id
    cert.delete()
    log_action(user=user, action='certificate_delete', object_type='certificate', object_id=cid)
