"""Health-plan mapping.

Clients submit plan selections either as the option index (0-based, in the
order of ``HealthPlan``) or as the plan name in any case/accentuation. The
stored representation is the list of canonical ``HealthPlan`` values,
de-duplicated in submission order.
"""

from __future__ import annotations

import unicodedata

from clinica_backend.patients.models import HealthPlan


def _fold(text: str) -> str:
    normalized = unicodedata.normalize('NFKD', text)
    return ''.join(ch for ch in normalized if not unicodedata.combining(ch)).strip().casefold()


_PLANS_BY_INDEX = list(HealthPlan.values)
_PLANS_BY_NAME = {_fold(value): value for value in HealthPlan.values}


def map_health_plan(entry) -> str:
    """Map one client entry to its canonical plan value.

    Raises ``ValueError`` for unknown names, out-of-range indexes and
    unsupported types.
    """
    if isinstance(entry, bool):
        raise ValueError(f'Plano de saúde inválido: {entry!r}')

    if isinstance(entry, int):
        if 0 <= entry < len(_PLANS_BY_INDEX):
            return _PLANS_BY_INDEX[entry]
        raise ValueError(f'Plano de saúde inválido: {entry!r}')

    if isinstance(entry, str):
        folded = _fold(entry)
        if folded.isdigit():
            return map_health_plan(int(folded))
        if folded in _PLANS_BY_NAME:
            return _PLANS_BY_NAME[folded]

    raise ValueError(f'Plano de saúde inválido: {entry!r}')


def map_health_plans(entries) -> list[str]:
    """Map a list of client entries, dropping repeats."""
    mapped: list[str] = []
    for entry in entries or []:
        plan = map_health_plan(entry)
        if plan not in mapped:
            mapped.append(plan)
    return mapped
