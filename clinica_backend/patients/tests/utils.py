from __future__ import annotations

from django.contrib.auth.hashers import make_password

from rest_framework.test import APIClient

from clinica_backend.core.models import Role, User
from clinica_backend.patients.models import Patient

# Checksum-valid CPFs
VALID_CPF = "52998224725"
OTHER_VALID_CPF = "11144477735"
THIRD_VALID_CPF = "93541134780"

INVALID_CPF = "52998224724"


def patient_payload(**overrides) -> dict:
    payload = {
        "cpf": "529.982.247-25",
        "nome": "Maria da Silva",
        "email": "Maria.Silva@Example.com",
        "senha": "SenhaForte123",
        "esta_ativo": True,
        "possui_plano_saude": False,
        "planos_saude": [],
        "telefone": "(11) 98765-4321",
        "imagem_url": "",
        "historico": ["Alergia a dipirona"],
    }
    payload.update(overrides)
    return payload


def create_patient_row(*, cpf=OTHER_VALID_CPF, nome="João Pereira", **extra) -> Patient:
    fields = {
        "email": "joao@example.com",
        "senha": make_password("OutraSenha123"),
        "telefone": "11912345678",
    }
    fields.update(extra)
    return Patient.objects.using("default").create(cpf=cpf, nome=nome, **fields)


class PatientAPITestMixin:
    """Roles, one user per role and an authenticated client factory."""

    def setUpUsers(self):
        self.role_admin, _ = Role.objects.using("default").get_or_create(
            name="admin",
            defaults={"label": "Administrador"},
        )
        self.role_doctor, _ = Role.objects.using("default").get_or_create(
            name="doctor",
            defaults={"label": "Médico"},
        )
        self.role_billing, _ = Role.objects.using("default").get_or_create(
            name="billing",
            defaults={"label": "Faturamento"},
        )

        self.admin = User.objects.db_manager("default").create_user(
            username="admin_patient_test",
            email="admin_patient@example.com",
            password="DummyPass123!",
            role=self.role_admin,
        )
        self.doctor = User.objects.db_manager("default").create_user(
            username="doctor_patient_test",
            email="doctor_patient@example.com",
            password="DummyPass123!",
            role=self.role_doctor,
        )
        self.billing = User.objects.db_manager("default").create_user(
            username="billing_patient_test",
            email="billing_patient@example.com",
            password="DummyPass123!",
            role=self.role_billing,
        )

    def _client_for(self, user: User) -> APIClient:
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=user)
        return client
