"""Input normalisation for patient payloads.

Runs before schema validation. Only keys present in the input are emitted,
so required-field checks still see what the client actually sent, and
non-string values are passed through untouched for the serializer to reject.
"""

import re

from django.utils.html import strip_tags

ADDRESS_FIELDS = ('cep', 'rua', 'estado', 'numero', 'complemento')

_WHITESPACE = re.compile(r'\s+')
_NON_DIGITS = re.compile(r'\D')


def _clean_text(value):
    if not isinstance(value, str):
        return value
    return strip_tags(value).strip()


def _digits_only(value):
    if not isinstance(value, str):
        return value
    return _NON_DIGITS.sub('', value)


def _clean_name(value):
    if not isinstance(value, str):
        return value
    return _WHITESPACE.sub(' ', strip_tags(value)).strip()


def _clean_email(value):
    if not isinstance(value, str):
        return value
    return value.strip().lower()


def _clean_cep(value):
    if not isinstance(value, str):
        return value
    digits = _digits_only(value)
    if len(digits) == 8:
        return f'{digits[:5]}-{digits[5:]}'
    return value.strip()


def _clean_estado(value):
    if not isinstance(value, str):
        return value
    return value.strip().upper()


def _clean_historico(value):
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return value
    cleaned = [_clean_text(entry) for entry in value]
    return [entry for entry in cleaned if entry != '']


_ADDRESS_CLEANERS = {
    'cep': _clean_cep,
    'rua': _clean_text,
    'estado': _clean_estado,
    'numero': _clean_text,
    'complemento': _clean_text,
}

_PATIENT_CLEANERS = {
    'cpf': _digits_only,
    'nome': _clean_name,
    'email': _clean_email,
    'telefone': _digits_only,
    'imagem_url': _clean_text,
    'historico': _clean_historico,
}

# Passed through as-is; the serializer owns their types.
_PATIENT_PASSTHROUGH = (
    'senha',
    'esta_ativo',
    'possui_plano_saude',
    'planos_saude',
    'imagem',
)


def sanitize_address_payload(data):
    """Normalise the five address fields of ``data``."""
    if not hasattr(data, 'get'):
        return data

    return {
        name: _ADDRESS_CLEANERS[name](data.get(name))
        for name in ADDRESS_FIELDS
        if name in data
    }


def sanitize_patient_payload(data):
    """Return a cleaned copy of a raw patient payload.

    - ``cpf``/``telefone``: digits only
    - ``nome``: tags stripped, inner whitespace collapsed
    - ``email``: trimmed and lower-cased
    - ``historico``: a bare string becomes a one-entry list, blanks dropped
    - ``endereco``: see ``sanitize_address_payload``

    The password is never altered.
    """
    if not hasattr(data, 'get'):
        return {}

    cleaned = {}
    for name, cleaner in _PATIENT_CLEANERS.items():
        if name in data:
            cleaned[name] = cleaner(data.get(name))

    for name in _PATIENT_PASSTHROUGH:
        if name in data:
            cleaned[name] = data.get(name)

    if 'endereco' in data:
        endereco = data.get('endereco')
        cleaned['endereco'] = sanitize_address_payload(endereco) if endereco is not None else None

    return cleaned
