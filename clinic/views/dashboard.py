from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.permissions import IsDoctor
from clinic.services.dashboard import doctor_overview, today_row
from clinic.services.formatters import format_doctor
from .common import ok


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctor])
def dashboard_view(request):
    """Headline stats and today's appointments of the logged-in doctor."""
    overview = doctor_overview(request.user)
    return Response(ok({
        'doctor': format_doctor(request.user),
        'stats': overview['stats'],
        'todaysAppointments': [today_row(a) for a in overview['today']],
    }))
