from django.contrib.auth.models import AbstractUser
from django.db import models
from django.conf import settings


class StaffRole(models.TextChoices):
    """Staff roles that may touch patient records."""

    ADMIN = 'admin', 'Administrador'
    ASSISTANT = 'assistant', 'Assistente'
    DOCTOR = 'doctor', 'Médico'
    BILLING = 'billing', 'Faturamento'


class Role(models.Model):
    name = models.CharField(max_length=64, unique=True, db_index=True, choices=StaffRole.choices)
    label = models.CharField(max_length=128)

    class Meta:
        db_table = 'core_role'
        ordering = ['name']
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'

    def __str__(self) -> str:
        return self.label


class User(AbstractUser):
    """Staff account with a role.

    Patients are not users: they live in ``patients.Patient`` and carry
    their own password hash.
    """

    email = models.EmailField('email address', blank=True, unique=True)
    role = models.ForeignKey(
        Role,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name='users',
    )

    class Meta:
        db_table = 'core_user'
        ordering = ['username']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    @property
    def role_name(self) -> str:
        """Name of the assigned role, '' when the account has none."""
        return self.role.name if self.role_id else ''


class AuditLog(models.Model):
    """One row per access to patient records.

    patient_id is a plain integer so entries survive patient removal.
    """

    class Action(models.TextChoices):
        LIST = 'patient_list', 'Listagem de pacientes'
        VIEW = 'patient_view', 'Consulta de paciente'
        CREATED = 'patient_created', 'Cadastro de paciente'
        UPDATED = 'patient_updated', 'Atualização de paciente'
        ADDRESS_UPDATED = 'patient_address_updated', 'Atualização de endereço'
        DEACTIVATED = 'patient_deactivated', 'Desativação de paciente'
        APPOINTMENTS_VIEW = 'patient_appointments_view', 'Consulta de agendamentos'
        SEARCH = 'patient_search', 'Busca por nome'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
    )
    role_name = models.CharField(max_length=50, db_index=True)
    action = models.CharField(max_length=50, db_index=True, choices=Action.choices)
    patient_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    meta = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'core_auditlog'
        ordering = ['-timestamp', '-id']
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'
        indexes = [
            models.Index(fields=['action', 'timestamp'], name='core_auditl_action_6f3b2e_idx'),
            models.Index(fields=['patient_id', 'timestamp'], name='core_auditl_patient_9d41c7_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.timestamp} {self.get_action_display()} (patient_id={self.patient_id})"
