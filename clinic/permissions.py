"""
Custom permission classes for doctor and staff access control.

Ownership of individual rows is checked in the views (see
``clinic.views.common.get_owned``) since many rows are owned through
their medical record rather than directly.
"""
from rest_framework.permissions import BasePermission


class IsDoctor(BasePermission):
    """Allow access only to authenticated doctors whose account is active."""
    message = 'doctor account required'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "status", "Active") != "Inactive")


class IsStaff(BasePermission):
    """Staff may approve or reject leave requests."""
    message = 'staff account required'

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and user.is_staff)
