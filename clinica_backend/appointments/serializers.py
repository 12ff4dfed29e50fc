from rest_framework import serializers

from .models import Appointment, Specialist


class SpecialistNestedSerializer(serializers.ModelSerializer):
    class Meta:
        model = Specialist
        fields = ['id', 'nome', 'especialidade']


class AppointmentSummarySerializer(serializers.ModelSerializer):
    """Appointment as listed for a patient: schedule and reminders only."""

    especialista = SpecialistNestedSerializer(read_only=True)

    class Meta:
        model = Appointment
        fields = ['id', 'data', 'deseja_lembrete', 'lembretes', 'especialista']
        read_only_fields = fields
