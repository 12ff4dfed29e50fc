"""
Appointments app configuration.
"""

from django.apps import AppConfig


class AppointmentsConfig(AppConfig):
    """Appointments are written by the scheduling side; read-only here."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinica_backend.appointments'
    verbose_name = 'Consultas'
