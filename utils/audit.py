"""
Audit logging helpers.
Records who changed what from the server actions; a failed audit write
is logged and never breaks the action itself.
"""

import logging
from flask import request
from flask_login import current_user

logger = logging.getLogger(__name__)


def _request_origin() -> tuple:
    """Client IP (first X-Forwarded-For hop) and user agent, if in a request."""
    try:
        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()
        user_agent = request.headers.get('User-Agent', '')[:255]
        return ip_address, user_agent
    except RuntimeError:
        # Outside request context (CLI seeding)
        return None, None


def log_audit(
    action: str,
    entity_type: str,
    entity_id: int = None,
    before: dict = None,
    after: dict = None,
    user_id: int = None
) -> int:
    """
    Log an audit entry.

    Args:
        action: Action type (CREATE, UPDATE, DELETE, STATUS)
        entity_type: Entity type (event, special_offer, reservation, ...)
        entity_id: ID of the affected entity
        before: Entity state before the change
        after: Entity state after the change
        user_id: Override user ID (defaults to current_user.id)

    Returns:
        New audit log ID, or None if logging failed

    Example:
        log_audit('STATUS', 'reservation', 12,
                  before={'status': 'PROVISIONAL'}, after={'status': 'CONFIRMED'})
    """
    try:
        from models.audit_log import create_audit_log

        if user_id is None:
            try:
                if current_user.is_authenticated:
                    user_id = current_user.id
            except (AttributeError, RuntimeError):
                user_id = None

        ip_address, user_agent = _request_origin()

        changes = None
        if before is not None or after is not None:
            changes = {'before': before, 'after': after}

        return create_audit_log(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            changes=changes,
            ip_address=ip_address,
            user_agent=user_agent
        )

    except Exception as e:
        logger.error(f"Failed to log audit entry: {e}", exc_info=True)
        return None


def log_create(entity_type: str, entity_id: int, data: dict = None) -> int:
    """Log a CREATE action."""
    return log_audit('CREATE', entity_type, entity_id, after=data)


def log_update(entity_type: str, entity_id: int, before: dict = None, after: dict = None) -> int:
    """Log an UPDATE action with before/after state."""
    return log_audit('UPDATE', entity_type, entity_id, before=before, after=after)


def log_delete(entity_type: str, entity_id: int, data: dict = None) -> int:
    """Log a DELETE action, keeping the deleted row in the trail."""
    return log_audit('DELETE', entity_type, entity_id, before=data)


def log_status_change(entity_type: str, entity_id: int, field: str, old, new) -> int:
    """Log a single-field state change (toggles, transitions)."""
    return log_audit('STATUS', entity_type, entity_id,
                     before={field: old}, after={field: new})


__all__ = [
    'log_audit',
    'log_create',
    'log_update',
    'log_delete',
    'log_status_change'
]
