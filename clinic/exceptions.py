import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class DomainError(exceptions.APIException):
    """A request that is well-formed but refused by a clinic rule."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'request refused'
    default_code = 'domain_error'


def _error_code(exc) -> str:
    if isinstance(exc, DomainError):
        return 'domain_error'
    if isinstance(exc, exceptions.ValidationError):
        return 'validation_error'
    if isinstance(exc, (exceptions.NotFound, Http404)):
        return 'not_found'
    if isinstance(exc, (exceptions.PermissionDenied, DjangoPermissionDenied)):
        return 'permission_denied'
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return 'not_authenticated'
    return 'api_error'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    view = context.get('view') if context else None
    if resp is None:
        logger.exception('Unhandled error in %s', getattr(view, '__name__', view), exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    code = _error_code(exc)
    logger.warning('API error %s (%s): %s', resp.status_code, code, detail)
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code)
