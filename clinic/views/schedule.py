"""
Work schedule of the current doctor and the shift/room/department lists
the calendar filters use.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.permissions import IsDoctor
from clinic.serializers.schedule import ScheduleQuerySerializer, WeekQuerySerializer
from clinic.services import schedule as svc
from clinic.services.formatters import format_schedule
from clinic.services.reference import reference_list
from .common import ok


def _row(entry) -> dict:
    data = format_schedule(entry)
    data['badge'] = svc.status_badge(entry.status)
    return data


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def schedule_list(request):
    q = ScheduleQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    entries = svc.schedules_for_doctor(request.user, start=q.validated_data.get('start'),
                                       end=q.validated_data.get('end'))
    rows = svc.filter_by_department(entries, q.validated_data.get('departmentId'))
    return Response(ok([_row(e) for e in rows], found=len(rows)))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def schedule_week(request):
    """Seven days (Sunday first) around ``date`` with the entries of each day."""
    q = WeekQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    days = svc.week_dates(q.validated_data.get('date') or timezone.localdate())
    entries = svc.filter_by_department(
        svc.schedules_for_doctor(request.user, start=days[0], end=days[-1]),
        q.validated_data.get('departmentId'),
    )
    return Response(ok(
        [{'date': d.isoformat(), 'entries': [_row(e) for e in svc.entries_on(entries, d)]} for d in days],
        weekStart=days[0].isoformat(),
        previousWeek=svc.shift_week(days[0], 'previous').isoformat(),
        nextWeek=svc.shift_week(days[0], 'next').isoformat(),
    ))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def schedule_stats(request):
    return Response(ok(svc.schedule_stats(svc.schedules_for_doctor(request.user))))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def shift_list(request):
    return Response(ok(reference_list('ref:shifts')))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def room_list(request):
    return Response(ok(reference_list('ref:rooms')))


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def department_list(request):
    return Response(ok(reference_list('ref:departments')))
