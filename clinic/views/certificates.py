"""
Professional certificates: expiry tracking and maintenance.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Certificate
from clinic.permissions import IsDoctor
from clinic.serializers.certificates import CertificateCreateSerializer, CertificateQuerySerializer
from clinic.services import certificates as svc
from clinic.services.formatters import format_certificate
from .common import get_owned, ok


def _row(cert: Certificate, reference_date) -> dict:
    days = svc.days_until_expiry(cert.expiry_date, reference_date)
    data = format_certificate(cert)
    data['daysUntilExpiry'] = days
    data['category'] = svc.categorize(cert.name)
    data.update(svc.expiry_status(days))
    return data


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsDoctor])
def certificate_list(request):
    """
    GET: certificates with their expiry status, grouped by category, with
    stats and alerts computed against ``date`` (today by default).
    POST: add a certificate.
    """
    if request.method == 'POST':
        s = CertificateCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        cert = svc.create_certificate(request.user, **s.validated_data)
        return Response(ok(_row(cert, timezone.localdate())), status=status.HTTP_201_CREATED)

    q = CertificateQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    reference_date = q.validated_data.get('date') or timezone.localdate()
    certs = list(svc.certificates_for_doctor(request.user))
    alerts = svc.expiry_alerts(certs, reference_date)
    return Response(ok(
        [_row(c, reference_date) for c in certs],
        categories={k: [c.id for c in v] for k, v in svc.categorized(certs).items()},
        stats=svc.certificate_stats(certs, reference_date),
        alerts={
            'expired': [{'id': c.id, 'name': c.name, 'daysAgo': d} for c, d in alerts['expired']],
            'expiring': [{'id': c.id, 'name': c.name, 'daysLeft': d} for c, d in alerts['expiring']],
        },
        referenceDate=reference_date.isoformat(),
    ))


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated, IsDoctor])
def certificate_detail(request, pk: int):
    cert = get_owned(Certificate.objects.all(), pk, request.user, label='certificate')
    if request.method == 'DELETE':
        svc.delete_certificate(cert, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(ok(_row(cert, timezone.localdate())))
