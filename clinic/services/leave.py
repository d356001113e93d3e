"""
Leave requests: duration arithmetic, per-doctor statistics and the
request lifecycle (Pending → Approved | Rejected | Cancelled).
"""
from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

import bleach
from django.utils import timezone

from clinic.exceptions import DomainError
from clinic.models import LeaveRequest
from clinic.services.audit import log_action

logger = logging.getLogger(__name__)

STATUS_BADGES = {
    LeaveRequest.STATUS_PENDING: 'yellow',
    LeaveRequest.STATUS_APPROVED: 'green',
    LeaveRequest.STATUS_REJECTED: 'red',
    LeaveRequest.STATUS_CANCELLED: 'gray',
}

REVIEW_STATUSES = (LeaveRequest.STATUS_APPROVED, LeaveRequest.STATUS_REJECTED)


def status_badge(status: str) -> str:
    return STATUS_BADGES.get(status, 'gray')


def leave_duration(start: datetime.date, end: datetime.date) -> int:
    """Number of calendar days covered, both ends included."""
    return abs((end - start).days) + 1


def leave_stats(requests: Iterable[LeaveRequest]) -> dict:
    requests = list(requests)

    def count(status):
        return sum(1 for r in requests if r.status == status)

    return {
        'total': len(requests),
        'pending': count(LeaveRequest.STATUS_PENDING),
        'approved': count(LeaveRequest.STATUS_APPROVED),
        'rejected': count(LeaveRequest.STATUS_REJECTED),
        'cancelled': count(LeaveRequest.STATUS_CANCELLED),
        'totalApprovedDays': sum(
            leave_duration(r.start_date, r.end_date)
            for r in requests if r.status == LeaveRequest.STATUS_APPROVED
        ),
    }


# ---------------------------------------------------------------------------
# Queries & writes
# ---------------------------------------------------------------------------

def requests_for_doctor(doctor, *, status: Optional[str] = None,
                        start: Optional[datetime.date] = None, end: Optional[datetime.date] = None):
    qs = LeaveRequest.objects.filter(doctor=doctor)
    if status and status != 'all':
        qs = qs.filter(status=status)
    if start:
        qs = qs.filter(request_date__gte=start)
    if end:
        qs = qs.filter(request_date__lte=end)
    return qs.order_by('-request_date', '-id')


def create_request(doctor, *, start_date: datetime.date, end_date: datetime.date, reason: str,
                   today: Optional[datetime.date] = None) -> LeaveRequest:
    reason = bleach.clean((reason or '').strip(), tags=set(), strip=True)
    if not reason:
        raise DomainError('Please fill in all fields')
    if start_date > end_date:
        raise DomainError('End date must be after start date')
    lr = LeaveRequest.objects.create(
        doctor=doctor,
        request_date=today or timezone.localdate(),
        start_date=start_date,
        end_date=end_date,
        reason=reason,
        status=LeaveRequest.STATUS_PENDING,
    )
    log_action(user=doctor, action='leave_create', object_type='leave_request', object_id=lr.id,
               detail={'days': leave_duration(start_date, end_date)})
    return lr


def _transition(lr: LeaveRequest, new_status: str, *, user) -> LeaveRequest:
    if lr.status != LeaveRequest.STATUS_PENDING:
        logger.info('Leave request %s is %s, refusing %s', lr.id, lr.status, new_status)
        raise DomainError(f'only pending requests can be changed (current: {lr.status})')
    old = lr.status
    lr.status = new_status
    lr.save(update_fields=['status', 'updated_at'])
    log_action(user=user, action='leave_status', object_type='leave_request', object_id=lr.id,
               detail={'from': old, 'to': new_status})
    return lr


def cancel_request(lr: LeaveRequest, *, user) -> LeaveRequest:
    return _transition(lr, LeaveRequest.STATUS_CANCELLED, user=user)


def review_request(lr: LeaveRequest, new_status: str, *, user) -> LeaveRequest:
    if new_status not in REVIEW_STATUSES:
        raise DomainError('status must be Approved or Rejected')
    return _transition(lr, new_status, user=user)


def delete_request(lr: LeaveRequest, *, user) -> None:
    lid = lr.id
    lr.delete()
    log_action(user=user, action='leave_delete', object_type='leave_request', object_id=lid)
