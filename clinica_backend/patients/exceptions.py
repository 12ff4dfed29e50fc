"""
Patient-record exceptions.

Raised by ``patients.services`` and translated to DRF responses in the views
via ``status_code`` and ``to_dict()``.
"""

from __future__ import annotations

from typing import Any


class PatientError(Exception):
    """Base exception for all patient-record errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': self.message}


class PatientValidationError(PatientError):
    """
    Raised when a payload fails schema validation.

    ``errors`` is either the serializer's field->messages mapping or an
    already flattened list of ``{'field': ..., 'message': ...}`` entries.
    """

    status_code = 400

    def __init__(self, errors: dict | list, message: str = 'Dados inválidos.'):
        self.errors = errors
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': self.message, 'errors': self.errors}


class InvalidCPFError(PatientError):
    """Raised when a CPF fails the checksum."""

    status_code = 400

    def __init__(self, message: str = 'CPF Inválido!'):
        super().__init__(message)


class PatientNotFound(PatientError):
    """Raised when no patient matches the lookup."""

    status_code = 404

    def __init__(self, patient_id: int | None = None, message: str = 'Paciente não encontrado!'):
        self.patient_id = patient_id
        super().__init__(message)


class DuplicateCPFError(PatientError):
    """Raised when another patient already holds the CPF."""

    status_code = 409

    def __init__(self, message: str = 'Já existe um paciente com esse CPF!'):
        super().__init__(message)


class PatientPersistenceError(PatientError):
    """
    Raised when the store fails unexpectedly.

    The original exception is chained (``raise ... from exc``) and logged by
    the service; only the generic message reaches the client.
    """

    status_code = 502

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


def flatten_errors(errors: dict) -> list[dict[str, str]]:
    """Turn DRF's ``{field: [messages]}`` into a flat list of violations."""
    flat = []
    for field, messages in errors.items():
        if isinstance(messages, dict):
            for item in flatten_errors(messages):
                flat.append({'field': f"{field}.{item['field']}", 'message': item['message']})
            continue
        if not isinstance(messages, (list, tuple)):
            messages = [messages]
        for message in messages:
            flat.append({'field': field, 'message': str(message)})
    return flat
