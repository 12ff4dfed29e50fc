"""
Appointments admin: entry point for the scheduling staff.
"""

from django.contrib import admin

from .models import Appointment, Specialist


@admin.register(Specialist)
class SpecialistAdmin(admin.ModelAdmin):
    list_display = ("id", "nome", "crm", "especialidade")
    search_fields = ("nome", "crm", "especialidade")
    ordering = ("nome",)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ("id", "data", "paciente", "especialista", "deseja_lembrete")
    list_filter = ("deseja_lembrete", "especialista")
    search_fields = ("paciente__nome", "especialista__nome")
    date_hierarchy = "data"
    raw_id_fields = ("paciente", "especialista")
    list_per_page = 50
