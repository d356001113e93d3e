"""
Leave requests of the current doctor, plus the staff review endpoint.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import LeaveRequest
from clinic.permissions import IsDoctor, IsStaff
from clinic.serializers.leave import LeaveCreateSerializer, LeaveListQuerySerializer, LeaveReviewSerializer
from clinic.services import leave as svc
from clinic.services.formatters import format_leave_request
from .common import get_owned, ok


def _row(lr: LeaveRequest) -> dict:
    data = format_leave_request(lr)
    data['days'] = svc.leave_duration(lr.start_date, lr.end_date)
    data['badge'] = svc.status_badge(lr.status)
    return data


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def leave_list(request):
    """
    GET: requests newest first, filtered by ``status`` (or ``all``) and by request date
    between ``start`` and ``end``. Stats always cover every request.
    POST: submit a new Pending request.
    """
    if request.method == 'GET':
        q = LeaveListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        rows = list(svc.requests_for_doctor(request.user, **q.validated_data))
        stats = svc.leave_stats(svc.requests_for_doctor(request.user))
        return Response(ok([_row(lr) for lr in rows], stats=stats))

    s = LeaveCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    lr = svc.create_request(request.user, **s.validated_data)
    return Response(ok(_row(lr)), status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def leave_stats(request):
    return Response(ok(svc.leave_stats(svc.requests_for_doctor(request.user))))


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated, IsDoctor])
def leave_detail(request, pk: int):
    lr = get_owned(LeaveRequest.objects.all(), pk, request.user, label='leave request')
    if request.method == 'DELETE':
        svc.delete_request(lr, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(ok(_row(lr)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def leave_cancel(request, pk: int):
    lr = get_owned(LeaveRequest.objects.all(), pk, request.user, label='leave request')
    svc.cancel_request(lr, user=request.user)
    return Response(ok(_row(lr)))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStaff])
def leave_review(request, pk: int):
    """Approve or reject any doctor's pending request (staff only)."""
    s = LeaveReviewSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    lr = LeaveRequest.objects.filter(pk=pk).first()
    if lr is None:
        raise NotFound('leave request not found')
    svc.review_request(lr, s.validated_data['status'], user=request.user)
    return Response(ok(_row(lr)))
