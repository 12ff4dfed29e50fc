"""Appointments (consultas) and the specialists who run them.

Scheduling owns these rows; the patient-record endpoints only read them.
"""

from django.db import models


class Specialist(models.Model):
    nome = models.CharField(max_length=100)
    crm = models.CharField(max_length=20, unique=True)
    especialidade = models.CharField(max_length=100)

    class Meta:
        db_table = 'appointments_specialist'
        ordering = ['nome', 'id']
        verbose_name = 'Especialista'
        verbose_name_plural = 'Especialistas'

    def __str__(self) -> str:
        return f"{self.nome} ({self.especialidade})"


class Appointment(models.Model):
    """A patient's consultation with a specialist.

    ``lembretes`` holds the reminder entries configured for the appointment
    and is only meaningful when ``deseja_lembrete`` is set.
    """

    data = models.DateTimeField()
    deseja_lembrete = models.BooleanField(default=False)
    lembretes = models.JSONField(default=list, blank=True)
    especialista = models.ForeignKey(
        Specialist,
        on_delete=models.PROTECT,
        related_name='consultas',
    )
    paciente = models.ForeignKey(
        'patients.Patient',
        on_delete=models.CASCADE,
        related_name='consultas',
    )
    observacoes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'appointments_appointment'
        ordering = ['data', 'id']
        verbose_name = 'Consulta'
        verbose_name_plural = 'Consultas'

    def __str__(self) -> str:
        return f"Consulta {self.data:%Y-%m-%d %H:%M} paciente_id={self.paciente_id}"
