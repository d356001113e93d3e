"""
Authentication views and helper functions.

This module defines the login endpoint used by the dashboard, the JWT
refresh/logout pair and the profile endpoints of the logged-in doctor.
By isolating these views from the authentication class (see
``clinic.authentication``) we prevent circular imports when Django REST
framework initialises authentication classes.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from clinic.exceptions import DomainError
from clinic.serializers.auth import LoginSerializer, ProfileUpdateSerializer
from clinic.services.audit import log_action
from clinic.services.formatters import format_doctor

from .models import Doctor, Specialty

logger = logging.getLogger(__name__)


def _resolve_username(identifier: str) -> str:
    """Map an email address to its username; plain usernames pass through."""
    if '@' in identifier:
        doctor = Doctor.objects.filter(email__iexact=identifier).only('username').first()
        if doctor:
            return doctor.username
    return identifier


# ---------------------------------------------------------------------
# Email (or username) / password login
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    Log a doctor in.
    Accepts fields:
      - username: the account's username or its email address
      - password
    """
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    identifier = s.validated_data['username']
    password = s.validated_data['password']

    user = authenticate(request, username=_resolve_username(identifier), password=password)
    if not user:
        logger.info('Failed login for %s', identifier)
        log_action(user=None, action='login', object_type='doctor', object_id=None,
                   detail={'result': 'fail', 'username': identifier, 'ip': request.META.get('REMOTE_ADDR')})
        return Response({'ok': False, 'detail': 'Invalid email or password'}, status=400)

    log_action(user=user, action='login', object_type='doctor', object_id=user.id,
               detail={'result': 'ok', 'ip': request.META.get('REMOTE_ADDR')})

    token_obj, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)

    return Response({
        'ok': True,
        'token': token_obj.key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
        'user': format_doctor(user),
    }, status=200)

# ScopedRateThrottle reads throttle_scope from the wrapped APIView class
login_view.cls.throttle_scope = 'login'


# ---------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def profile_view(request):
    """GET returns the current doctor; POST updates editable fields.

    ``id``, ``email`` and ``password`` are never changed here.
    """
    user = request.user
    if request.method == 'GET':
        return Response({'ok': True, 'data': format_doctor(user)})

    s = ProfileUpdateSerializer(data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    changes = dict(s.validated_data)
    sid = changes.get('specialty_id')
    if sid is not None and not Specialty.objects.filter(id=sid).exists():
        raise DomainError('specialty not found')
    for field, value in changes.items():
        setattr(user, field, value)
    fields = ['specialty' if f == 'specialty_id' else f for f in changes]
    if fields:
        user.save(update_fields=fields)
        log_action(user=user, action='profile_update', object_type='doctor', object_id=user.id,
                   detail={'fields': fields})
    return Response({'ok': True, 'data': format_doctor(user)})


# ---------------------------------------------------------------------
# JWT: refresh & logout
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def jwt_refresh_view(request):
    """Return a new access token from refresh token."""
    view = TokenRefreshView.as_view()
    resp = view(request._request)
    if isinstance(resp, Response):
        data = dict(resp.data)
        if 'access' in data and 'jwt_access' not in data:
            data['jwt_access'] = data.pop('access')
        return Response(data, status=resp.status_code)
    return resp


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def jwt_logout_view(request):
    """Blacklist the current doctor's refresh tokens (all or a given one) and drop the legacy token."""
    refresh = request.data.get('refresh')
    count = 0
    if refresh:
        try:
            RefreshToken(refresh).blacklist()
            count = 1
        except TokenError as e:
            raise DomainError(f'invalid refresh token: {e}') from e
    else:
        for token in OutstandingToken.objects.filter(user=request.user):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            count += int(created)
    Token.objects.filter(user=request.user).delete()
    log_action(user=request.user, action='logout', object_type='doctor', object_id=request.user.id,
               detail={'blacklisted': count})
    return Response({'ok': True, 'blacklisted': count})
