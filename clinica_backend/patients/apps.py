"""
Patients app configuration.
"""

from django.apps import AppConfig


class PatientsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinica_backend.patients'
    verbose_name = 'Pacientes'
