import re

from django.conf import settings

_CPF_LENGTH = 11

ALLOWED_NAME_PATTERN = re.compile(r"^[a-zA-ZÀ-ú\s'-]+$")
SUSPICIOUS_PATTERN = re.compile(
    r'(=|<|>|--|;|\b(SELECT|INSERT|UPDATE|DELETE|DROP|SCRIPT)\b)',
    re.IGNORECASE,
)


def _check_digit(digits, weight_start):
    total = sum(int(d) * w for d, w in zip(digits, range(weight_start, 1, -1)))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def cpf_is_valid(cpf) -> bool:
    """Return True when ``cpf`` carries two correct check digits.

    Punctuation is ignored. Sequences of one repeated digit
    (``111.111.111-11``) pass the arithmetic but are not issued, so they
    are rejected.
    """
    if not isinstance(cpf, str):
        return False

    digits = re.sub(r'\D', '', cpf)
    if len(digits) != _CPF_LENGTH or len(set(digits)) == 1:
        return False

    if _check_digit(digits[:9], 10) != int(digits[9]):
        return False
    return _check_digit(digits[:10], 11) == int(digits[10])


def search_term_errors(value) -> list[str]:
    """Every rule a free-text name search violates; empty when acceptable."""
    if not isinstance(value, str):
        return ['O campo de busca deve ser um texto.']

    min_length = getattr(settings, 'PATIENT_SEARCH_MIN_LENGTH', 2)
    max_length = getattr(settings, 'PATIENT_SEARCH_MAX_LENGTH', 80)

    errors = []
    if not min_length <= len(value) <= max_length:
        errors.append(f'A busca deve ter entre {min_length} e {max_length} caracteres.')
    if not ALLOWED_NAME_PATTERN.fullmatch(value):
        errors.append('O nome deve conter apenas letras, espaços e hífens.')
    if SUSPICIOUS_PATTERN.search(value):
        errors.append('A entrada contém caracteres ou palavras não permitidas.')
    return errors
