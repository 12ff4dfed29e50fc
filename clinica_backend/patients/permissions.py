from clinica_backend.core.models import StaffRole
from clinica_backend.core.permissions import ALL_STAFF, RBACPermission


class PatientPermission(RBACPermission):
    """RBAC for patient endpoints.

    - admin, assistant, doctor: read + write
    - billing: read-only
    """

    read_roles = ALL_STAFF
    write_roles = ALL_STAFF - {StaffRole.BILLING}
