"""Admin guard shared by ledger administration use cases."""

import logging

from accessledger.application.ports import AccessLedger
from accessledger.domain.exceptions import PermissionDenied

logger = logging.getLogger(__name__)


def ensure_admin(access_ledger: AccessLedger, actor_id: str, admin_role: str) -> None:
    """Raise PermissionDenied unless actor currently holds admin_role.

    Only the user ledger is consulted. Entity access roles and the base
    access role do not take part.
    """
    if admin_role not in access_ledger.get_active_user_roles(actor_id):
        logger.info("Admin access denied for user %r", actor_id)
        raise PermissionDenied(f"User '{actor_id}' does not have admin access")
