"""Role checks for staff endpoints."""

import logging

from rest_framework.permissions import BasePermission, SAFE_METHODS

from clinica_backend.core.models import StaffRole

logger = logging.getLogger(__name__)

ALL_STAFF = frozenset(StaffRole.values)


class RBACPermission(BasePermission):
    """Grant access by ``User.role_name``.

    Subclasses list the roles allowed to read (safe methods) and to write.
    Accounts without a role are always refused.
    """

    read_roles: frozenset = frozenset()
    write_roles: frozenset = frozenset()

    def allowed_roles(self, method):
        return self.read_roles if method in SAFE_METHODS else self.write_roles

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        role_name = getattr(user, 'role_name', '')
        if role_name in self.allowed_roles(request.method):
            return True

        logger.info('Denied %s %s for role %r', request.method, request.path, role_name)
        return False
