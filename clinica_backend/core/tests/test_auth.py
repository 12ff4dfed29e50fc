"""Tests for authentication endpoints, health check, role checks and the audit helper.

Tests cover:
- Login (POST /api/auth/login/)
- Refresh (POST /api/auth/refresh/)
- Me (GET /api/auth/me/)
- Health (GET /api/health/)
"""

from __future__ import annotations

from unittest.mock import patch

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from rest_framework import status
from rest_framework.response import Response
from rest_framework.test import APIClient, APIRequestFactory, force_authenticate
from rest_framework.views import APIView

from rest_framework_simplejwt.tokens import AccessToken

from clinica_backend.core.models import AuditLog, Role, StaffRole, User
from clinica_backend.core.permissions import RBACPermission
from clinica_backend.core.utils import log_patient_action


class AuthenticationTest(TestCase):
    """Tests for /api/auth/ endpoints."""

    databases = {"default"}

    def setUp(self):
        self.role_doctor, _ = Role.objects.using("default").get_or_create(
            name="doctor",
            defaults={"label": "Médico"},
        )
        self.doctor = User.objects.db_manager("default").create_user(
            username="doctor_auth_test",
            email="doctor_auth@example.com",
            password="SecurePass123!",
            role=self.role_doctor,
        )
        self.inactive_user = User.objects.db_manager("default").create_user(
            username="inactive_auth_test",
            email="inactive_auth@example.com",
            password="SecurePass123!",
            role=self.role_doctor,
            is_active=False,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _login(self, username="doctor_auth_test", password="SecurePass123!"):
        return self.client.post(
            "/api/auth/login/",
            {"username": username, "password": password},
            format="json",
        )

    def test_login_success_returns_tokens_and_user(self):
        response = self._login()

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)
        self.assertEqual(response.data["user"]["id"], self.doctor.id)
        self.assertEqual(response.data["user"]["role"]["name"], "doctor")

    def test_access_token_carries_role(self):
        access = AccessToken(self._login().data["access"])

        self.assertEqual(access["role"], "doctor")

    def test_login_wrong_password(self):
        response = self._login(password="wrong")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertNotIn("access", response.data)

    def test_login_inactive_user(self):
        response = self._login(username="inactive_auth_test")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh_returns_new_access_token_with_role(self):
        refresh = self._login().data["refresh"]

        response = self.client.post("/api/auth/refresh/", {"refresh": refresh}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(AccessToken(response.data["access"])["role"], "doctor")

    def test_refresh_rejects_garbage(self):
        response = self.client.post("/api/auth/refresh/", {"refresh": "not-a-token"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_with_bearer_token(self):
        access = self._login().data["access"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["username"], "doctor_auth_test")

    def test_me_unauthenticated(self):
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_health_needs_no_auth(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})


class _DoctorWritesBillingReads(RBACPermission):
    read_roles = frozenset({StaffRole.DOCTOR, StaffRole.BILLING})
    write_roles = frozenset({StaffRole.DOCTOR})


class _GuardedView(APIView):
    permission_classes = [_DoctorWritesBillingReads]

    def get(self, request):
        return Response({"ok": True})

    def post(self, request):
        return Response({"ok": True})


class RBACPermissionTest(TestCase):

    databases = {"default"}

    def setUp(self):
        self.factory = APIRequestFactory()
        self.view = _GuardedView.as_view()

    def _user(self, username, role_name=None):
        role = None
        if role_name:
            role, _ = Role.objects.using("default").get_or_create(name=role_name, defaults={"label": role_name})
        return User.objects.db_manager("default").create_user(
            username=username,
            email=f"{username}@example.com",
            password="SecurePass123!",
            role=role,
        )

    def _call(self, method, user):
        request = getattr(self.factory, method)("/guarded/")
        force_authenticate(request, user=user)
        return self.view(request)

    def test_read_and_write_roles(self):
        doctor = self._user("rbac_doctor", StaffRole.DOCTOR)
        billing = self._user("rbac_billing", StaffRole.BILLING)

        self.assertEqual(self._call("get", doctor).status_code, 200)
        self.assertEqual(self._call("post", doctor).status_code, 200)
        self.assertEqual(self._call("get", billing).status_code, 200)
        self.assertEqual(self._call("post", billing).status_code, 403)

    def test_unlisted_role_refused(self):
        assistant = self._user("rbac_assistant", StaffRole.ASSISTANT)

        self.assertEqual(self._call("get", assistant).status_code, 403)

    def test_account_without_role_refused(self):
        self.assertEqual(self._call("get", self._user("rbac_norole")).status_code, 403)

    def test_role_name_property(self):
        self.assertEqual(self._user("rbac_named", StaffRole.BILLING).role_name, "billing")
        self.assertEqual(self._user("rbac_blank").role_name, "")


class AuditLogHelperTest(TestCase):

    databases = {"default"}

    def setUp(self):
        role, _ = Role.objects.using("default").get_or_create(name="admin", defaults={"label": "Administrador"})
        self.user = User.objects.db_manager("default").create_user(
            username="audit_test",
            email="audit@example.com",
            password="SecurePass123!",
            role=role,
        )

    def test_entry_written_with_role(self):
        log_patient_action(self.user, AuditLog.Action.VIEW, patient_id=42, meta={"via": "test"})

        entry = AuditLog.objects.using("default").get()
        self.assertEqual(entry.user, self.user)
        self.assertEqual(entry.role_name, "admin")
        self.assertEqual(entry.patient_id, 42)
        self.assertEqual(entry.meta, {"via": "test"})
        self.assertEqual(entry.get_action_display(), "Consulta de paciente")

    def test_anonymous_user_stored_as_null(self):
        log_patient_action(AnonymousUser(), AuditLog.Action.LIST)

        entry = AuditLog.objects.using("default").get()
        self.assertIsNone(entry.user)
        self.assertEqual(entry.role_name, "")

    def test_write_failure_is_swallowed(self):
        with patch.object(AuditLog.objects, "using", side_effect=RuntimeError("db down")):
            with self.assertLogs("clinica_backend.core.utils", level="ERROR"):
                log_patient_action(self.user, "patient_view", patient_id=1)
