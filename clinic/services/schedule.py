"""
Doctor work schedule: week arithmetic and schedule statistics.

Weeks start on Sunday, matching the calendar the dashboard renders.
"""
from __future__ import annotations

import datetime
from typing import Iterable, Optional

from django.utils import timezone

from clinic.models import DoctorWorkSchedule

STATUS_BADGES = {
    'Active': 'green',
    'Completed': 'blue',
    'Cancelled': 'red',
    'Pending': 'yellow',
}


def status_badge(status: str) -> str:
    return STATUS_BADGES.get(status, 'gray')


def week_start(day: datetime.date) -> datetime.date:
    # date.weekday(): Monday=0 .. Sunday=6
    return day - datetime.timedelta(days=(day.weekday() + 1) % 7)


def week_dates(day: datetime.date) -> list[datetime.date]:
    start = week_start(day)
    return [start + datetime.timedelta(days=i) for i in range(7)]


def shift_week(start: datetime.date, direction: str) -> datetime.date:
    step = 7 if direction == 'next' else -7
    return start + datetime.timedelta(days=step)


def entries_on(schedules: Iterable[DoctorWorkSchedule], day: datetime.date) -> list[DoctorWorkSchedule]:
    return [s for s in schedules if s.work_date == day]


def filter_by_department(schedules: Iterable[DoctorWorkSchedule], department_id: Optional[int]) -> list[DoctorWorkSchedule]:
    if not department_id:
        return list(schedules)
    return [s for s in schedules if s.room is not None and s.room.department_id == department_id]


def schedule_stats(schedules: Iterable[DoctorWorkSchedule], today: Optional[datetime.date] = None) -> dict:
    schedules = list(schedules)
    this_week = set(week_dates(today or timezone.localdate()))
    return {
        'totalShifts': len(schedules),
        'thisWeekShifts': sum(1 for s in schedules if s.work_date in this_week),
        'activeShifts': sum(1 for s in schedules if s.status == 'Active'),
        'completedShifts': sum(1 for s in schedules if s.status == 'Completed'),
    }


def schedules_for_doctor(doctor, *, start: Optional[datetime.date] = None, end: Optional[datetime.date] = None):
    qs = (DoctorWorkSchedule.objects.filter(doctor=doctor)
          .select_related('shift', 'room__department'))
    if start:
        qs = qs.filter(work_date__gte=start)
    if end:
        qs = qs.filter(work_date__lte=end)
    return qs.order_by('work_date', 'shift_id', 'id')
