"""
Custom authentication backend for token-based auth.

A subclass of Django REST framework's ``TokenAuthentication`` kept in
its own module so that DRF can import it from settings without pulling
in any view code (and the circular imports that would bring).
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """Token authentication using the ``Token`` keyword.

    JWTs travel separately as ``Bearer`` and are handled by simplejwt.
    """

    keyword = 'Token'
