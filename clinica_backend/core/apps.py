"""
Core app configuration.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Users, roles and the audit trail."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinica_backend.core'
    verbose_name = 'Core (Usuários & Perfis)'
