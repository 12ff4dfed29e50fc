import logging

from .models import AuditLog

logger = logging.getLogger(__name__)


def log_patient_action(user, action, patient_id=None, meta=None, *, using='default'):
    """Write a patient-access action to the audit log.

    ``action`` is one of ``AuditLog.Action``. Audit failures are logged and
    swallowed so they never break the request.
    """

    authenticated = getattr(user, 'is_authenticated', False)

    try:
        AuditLog.objects.using(using).create(
            user=user if authenticated else None,
            role_name=getattr(user, 'role_name', '') if authenticated else '',
            action=action,
            patient_id=patient_id,
            meta=meta,
        )
    except Exception:
        logger.exception('AuditLog write failed (action=%s, patient_id=%s)', action, patient_id)
