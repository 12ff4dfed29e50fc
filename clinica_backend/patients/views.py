import logging

from django.conf import settings

from rest_framework import generics, status
from rest_framework.response import Response

from clinica_backend.appointments.serializers import AppointmentSummarySerializer
from clinica_backend.core.models import AuditLog
from clinica_backend.core.utils import log_patient_action
from clinica_backend.patients import services
from clinica_backend.patients.exceptions import PatientError, flatten_errors
from clinica_backend.patients.permissions import PatientPermission
from clinica_backend.patients.serializers import (
    PatientPublicSerializer,
    PatientSearchSerializer,
)

logger = logging.getLogger(__name__)


class _PatientBaseView(generics.GenericAPIView):
    permission_classes = [PatientPermission]
    serializer_class = PatientPublicSerializer

    @property
    def db_alias(self):
        return getattr(settings, 'PATIENT_RECORDS_DB_ALIAS', 'default')

    def _audit(self, action, patient_id=None, meta=None):
        log_patient_action(self.request.user, action, patient_id=patient_id, meta=meta, using=self.db_alias)

    def _error(self, exc: PatientError):
        logger.info('Patient request rejected (%s): %s', exc.status_code, exc.message)
        return Response(exc.to_dict(), status=exc.status_code)


class PatientListCreateView(_PatientBaseView):
    """
    GET  /api/patients/ - every patient (public projection)
    POST /api/patients/ - register a patient, 202 on success
    """

    def get(self, request, *args, **kwargs):
        patients = services.list_patients(using=self.db_alias)
        self._audit(AuditLog.Action.LIST)
        return Response(self.get_serializer(patients, many=True).data, status=status.HTTP_200_OK)

    def post(self, request, *args, **kwargs):
        try:
            patient = services.create_patient(request.data, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.CREATED, patient_id=patient.pk)
        return Response(self.get_serializer(patient).data, status=status.HTTP_202_ACCEPTED)


class PatientDetailView(_PatientBaseView):
    """
    GET    /api/patients/<pk>/ - one patient with address and image
    PUT    /api/patients/<pk>/ - full replacement update
    DELETE /api/patients/<pk>/ - deactivate (soft delete)
    """

    def get(self, request, pk, *args, **kwargs):
        try:
            patient = services.get_patient(pk, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.VIEW, patient_id=patient.pk)
        return Response(self.get_serializer(patient).data, status=status.HTTP_200_OK)

    def put(self, request, pk, *args, **kwargs):
        try:
            patient = services.update_patient(pk, request.data, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.UPDATED, patient_id=patient.pk)
        return Response(self.get_serializer(patient).data, status=status.HTTP_200_OK)

    def delete(self, request, pk, *args, **kwargs):
        try:
            patient = services.deactivate_patient(pk, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.DEACTIVATED, patient_id=patient.pk)
        return Response({'message': 'Paciente desativado!'}, status=status.HTTP_200_OK)


class PatientAddressView(_PatientBaseView):
    """PUT /api/patients/<pk>/endereco/ - create or overwrite the address."""

    def put(self, request, pk, *args, **kwargs):
        try:
            patient = services.update_patient_address(pk, request.data, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.ADDRESS_UPDATED, patient_id=patient.pk)
        return Response(self.get_serializer(patient).data, status=status.HTTP_200_OK)


class PatientAppointmentsView(_PatientBaseView):
    """GET /api/patients/<pk>/consultas/ - the patient's appointments."""

    serializer_class = AppointmentSummarySerializer

    def get(self, request, pk, *args, **kwargs):
        try:
            appointments = services.list_patient_appointments(pk, using=self.db_alias)
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.APPOINTMENTS_VIEW, patient_id=pk)
        return Response(self.get_serializer(appointments, many=True).data, status=status.HTTP_200_OK)


class PatientSearchView(_PatientBaseView):
    """GET /api/patients/search/?userInput=<name> - exact name match."""

    def get(self, request, *args, **kwargs):
        query = PatientSearchSerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {'detail': 'Busca inválida.', 'errors': flatten_errors(query.errors)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            patients = services.search_patients_by_name(
                query.validated_data['userInput'],
                using=self.db_alias,
            )
        except PatientError as e:
            return self._error(e)

        self._audit(AuditLog.Action.SEARCH, meta={'term': query.validated_data['escaped'], 'hits': len(patients)})
        return Response(self.get_serializer(patients, many=True).data, status=status.HTTP_200_OK)
