"""
Patient record service.

Every entry point takes the database alias explicitly (``using``); views
pass ``settings.PATIENT_RECORDS_DB_ALIAS``. Multi-row writes run inside a
single ``transaction.atomic`` block so an address is never left behind
without its patient.

Workflow of ``create_patient`` (each step aborts the rest on failure):

1. sanitise the raw payload
2. validate it against ``PatientWriteSerializer``
3. check the CPF checksum
4. reject a CPF already in use
5. map health plans (only when ``possui_plano_saude`` is set)
6. hash the password
7. create the address, if any, and attach it
8. persist the patient
"""

from __future__ import annotations

import logging

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from clinica_backend.appointments.models import Appointment
from clinica_backend.patients.exceptions import (
    DuplicateCPFError,
    InvalidCPFError,
    PatientNotFound,
    PatientPersistenceError,
    PatientValidationError,
)
from clinica_backend.patients.models import Address, Patient
from clinica_backend.patients.plans import map_health_plans
from clinica_backend.patients.sanitizers import (
    ADDRESS_FIELDS,
    sanitize_address_payload,
    sanitize_patient_payload,
)
from clinica_backend.patients.serializers import (
    AddressWriteSerializer,
    PatientUpdateSerializer,
    PatientWriteSerializer,
)
from clinica_backend.patients.validators import cpf_is_valid

logger = logging.getLogger(__name__)

READ_FAILED_MESSAGE = 'Erro interno do servidor'

_MUTABLE_FIELDS = (
    'cpf',
    'nome',
    'email',
    'esta_ativo',
    'possui_plano_saude',
    'telefone',
    'imagem_url',
    'imagem',
    'historico',
)


def _validate(serializer_class, payload, *, using):
    serializer = serializer_class(data=payload, context={'using': using})
    if not serializer.is_valid():
        raise PatientValidationError(serializer.errors)
    return serializer.validated_data


def _resolve_plans(validated) -> list[str]:
    if validated.get('possui_plano_saude') is True and validated.get('planos_saude') is not None:
        try:
            return map_health_plans(validated['planos_saude'])
        except ValueError as exc:
            raise PatientValidationError({'planos_saude': [str(exc)]}) from exc
    return []


def _address_values(fields) -> dict[str, str]:
    return {name: fields.get(name) or '' for name in ADDRESS_FIELDS}


def _read_failed(what):
    logger.exception('Patient read failed (%s)', what)
    return PatientPersistenceError(READ_FAILED_MESSAGE, status_code=500)


def _get_patient(patient_id, *, using, related=()) -> Patient:
    try:
        return Patient.objects.using(using).select_related(*related).get(pk=patient_id)
    except Patient.DoesNotExist:
        raise PatientNotFound(patient_id) from None
    except Exception as exc:
        raise _read_failed(f'id={patient_id}') from exc


def get_patient(patient_id, *, using='default') -> Patient:
    """Load one patient with address and image."""
    return _get_patient(patient_id, using=using, related=('endereco', 'imagem'))


def list_patients(*, using='default') -> list[Patient]:
    """All patients, image and address joined."""
    try:
        return list(Patient.objects.using(using).select_related('imagem', 'endereco'))
    except Exception as exc:
        raise _read_failed('list') from exc


def create_patient(data, *, using='default') -> Patient:
    """Register a new patient from an untrusted payload.

    Raises:
        PatientValidationError: schema or plan mapping failure
        InvalidCPFError: bad CPF checksum
        DuplicateCPFError: CPF already registered
        PatientPersistenceError: any store failure
    """
    validated = _validate(PatientWriteSerializer, sanitize_patient_payload(data), using=using)

    cpf = validated['cpf']
    if not cpf_is_valid(cpf):
        raise InvalidCPFError()

    if Patient.objects.using(using).filter(cpf=cpf).exists():
        raise DuplicateCPFError()

    planos_saude = _resolve_plans(validated)

    patient = Patient(
        cpf=cpf,
        nome=validated['nome'],
        email=validated['email'],
        senha=make_password(validated['senha']),
        esta_ativo=validated['esta_ativo'],
        possui_plano_saude=validated['possui_plano_saude'],
        planos_saude=planos_saude,
        telefone=validated['telefone'],
        imagem_url=validated['imagem_url'],
        imagem=validated['imagem'],
        historico=validated['historico'],
    )

    try:
        with transaction.atomic(using=using):
            endereco = validated.get('endereco')
            if endereco is not None:
                address = Address(**_address_values(endereco))
                address.save(using=using)
                patient.endereco = address
            patient.save(using=using)
    except IntegrityError as exc:
        # Lost a race against a concurrent insert with the same CPF.
        logger.warning('Patient insert hit an integrity error: %s', exc)
        raise DuplicateCPFError() from exc
    except Exception as exc:
        logger.exception('Patient creation failed')
        raise PatientPersistenceError('Paciente não foi criado!') from exc

    logger.info('Patient created (id=%s)', patient.pk)
    return patient


def update_patient(patient_id, data, *, using='default') -> Patient:
    """Replace every mutable field of a patient.

    Omitted optional fields are reset to their defaults; the password is
    re-hashed only when a different one is supplied, so repeating the same
    payload leaves the stored record unchanged.
    """
    validated = _validate(PatientUpdateSerializer, sanitize_patient_payload(data), using=using)

    if not cpf_is_valid(validated['cpf']):
        raise InvalidCPFError()

    patient = _get_patient(patient_id, using=using, related=('endereco', 'imagem'))

    if Patient.objects.using(using).filter(cpf=validated['cpf']).exclude(pk=patient.pk).exists():
        raise DuplicateCPFError()

    planos_saude = _resolve_plans(validated)

    for name in _MUTABLE_FIELDS:
        setattr(patient, name, validated[name])
    patient.planos_saude = planos_saude

    senha = validated.get('senha')
    if senha and not check_password(senha, patient.senha):
        patient.senha = make_password(senha)

    try:
        with transaction.atomic(using=using):
            patient.save(using=using)
    except IntegrityError as exc:
        logger.warning('Patient update hit an integrity error (id=%s): %s', patient_id, exc)
        raise DuplicateCPFError() from exc
    except Exception as exc:
        logger.exception('Patient update failed (id=%s)', patient_id)
        raise PatientPersistenceError('Paciente não foi atualizado!') from exc

    return patient


def reconcile_address(patient: Patient, fields, *, using='default') -> Address:
    """Create the patient's address or overwrite the one it owns.

    All five fields are written; missing ones become blank. The patient is
    saved afterwards so the ownership link is committed. Call inside an
    atomic block.
    """
    values = _address_values(fields)
    address = patient.endereco

    if address is None:
        address = Address(**values)
        address.save(using=using)
        patient.endereco = address
    else:
        for name, value in values.items():
            setattr(address, name, value)
        address.save(using=using)

    patient.save(using=using)
    return address


def update_patient_address(patient_id, data, *, using='default') -> Patient:
    """Set a patient's address from an untrusted payload."""
    validated = _validate(AddressWriteSerializer, sanitize_address_payload(data), using=using)

    patient = _get_patient(patient_id, using=using, related=('endereco', 'imagem'))

    try:
        with transaction.atomic(using=using):
            reconcile_address(patient, validated, using=using)
    except Exception as exc:
        logger.exception('Address update failed (patient_id=%s)', patient_id)
        raise PatientPersistenceError('Endereço não foi atualizado!') from exc

    return patient


def deactivate_patient(patient_id, *, using='default') -> Patient:
    """Soft-delete: clear ``esta_ativo`` and keep the row."""
    patient = _get_patient(patient_id, using=using)

    patient.esta_ativo = False
    try:
        patient.save(using=using, update_fields=['esta_ativo', 'updated_at'])
    except Exception as exc:
        logger.exception('Patient deactivation failed (id=%s)', patient_id)
        raise PatientPersistenceError('Paciente não foi desativado!') from exc

    logger.info('Patient deactivated (id=%s)', patient.pk)
    return patient


def list_patient_appointments(patient_id, *, using='default') -> list[Appointment]:
    """Appointments of one patient, oldest first."""
    try:
        found = Patient.objects.using(using).filter(pk=patient_id).exists()
        appointments = list(
            Appointment.objects.using(using)
            .filter(paciente_id=patient_id)
            .select_related('especialista')
            .order_by('data', 'id')
        ) if found else []
    except Exception as exc:
        raise _read_failed(f'appointments of id={patient_id}') from exc

    if not found:
        raise PatientNotFound(patient_id)
    return appointments


def search_patients_by_name(term: str, *, using='default') -> list[Patient]:
    """Exact-match name lookup.

    ``term`` must already be validated; the ORM binds it as a query
    parameter.
    """
    try:
        patients = list(
            Patient.objects.using(using)
            .select_related('imagem', 'endereco')
            .filter(nome=term)
        )
    except Exception as exc:
        raise _read_failed('search') from exc

    if not patients:
        raise PatientNotFound()
    return patients
