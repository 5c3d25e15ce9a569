"""
Audit Log model and data access functions.
Handles audit log creation, retrieval and filtering.
"""

import json
from database import get_db
from utils.form_helpers import load_json


def _build_filters(user_id=None, action=None, entity_type=None, entity_id=None,
                   start_date=None, end_date=None) -> tuple:
    """Shared WHERE clause for list and count queries."""
    clauses = []
    params = []

    if user_id is not None:
        clauses.append('al.user_id = ?')
        params.append(user_id)

    if action:
        clauses.append('al.action = ?')
        params.append(action)

    if entity_type:
        clauses.append('al.entity_type = ?')
        params.append(entity_type)

    if entity_id is not None:
        clauses.append('al.entity_id = ?')
        params.append(entity_id)

    if start_date:
        clauses.append('date(al.created_at) >= date(?)')
        params.append(str(start_date))

    if end_date:
        clauses.append('date(al.created_at) <= date(?)')
        params.append(str(end_date))

    where = ' WHERE ' + ' AND '.join(clauses) if clauses else ''
    return where, params


def get_audit_logs(
    user_id: int = None,
    action: str = None,
    entity_type: str = None,
    entity_id: int = None,
    start_date: str = None,
    end_date: str = None,
    limit: int = 100,
    offset: int = 0
) -> list:
    """
    Get audit logs with optional filtering, newest first.

    Args:
        user_id: Filter by user ID
        action: Filter by action type (CREATE, UPDATE, DELETE, STATUS)
        entity_type: Filter by entity type
        entity_id: Filter by specific entity ID
        start_date: Filter logs from this date (YYYY-MM-DD)
        end_date: Filter logs until this date (YYYY-MM-DD)
        limit: Maximum number of records to return
        offset: Number of records to skip for pagination

    Returns:
        List of audit log dicts with decoded 'changes'
    """
    where, params = _build_filters(user_id, action, entity_type, entity_id,
                                   start_date, end_date)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT al.*, u.username, u.full_name as user_full_name
        FROM audit_log al
        LEFT JOIN users u ON al.user_id = u.id
        {where}
        ORDER BY al.created_at DESC, al.id DESC
        LIMIT ? OFFSET ?
    ''', params + [limit, offset])

    logs = []
    for row in cursor.fetchall():
        entry = dict(row)
        entry['changes'] = load_json(entry['changes'], default={})
        logs.append(entry)
    return logs


def count_audit_logs(
    user_id: int = None,
    action: str = None,
    entity_type: str = None,
    entity_id: int = None,
    start_date: str = None,
    end_date: str = None
) -> int:
    """Count audit logs matching the same filters as get_audit_logs."""
    where, params = _build_filters(user_id, action, entity_type, entity_id,
                                   start_date, end_date)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT COUNT(*) as count FROM audit_log al{where}', params)
    row = cursor.fetchone()
    return row['count'] if row else 0


def get_distinct_entity_types() -> list:
    """Entity types present in the log, for the filter dropdown."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT DISTINCT entity_type FROM audit_log ORDER BY entity_type')
    return [row['entity_type'] for row in cursor.fetchall()]


def create_audit_log(
    action: str,
    entity_type: str,
    entity_id: int = None,
    user_id: int = None,
    changes: dict = None,
    ip_address: str = None,
    user_agent: str = None
) -> int:
    """
    Create a new audit log entry.

    Args:
        action: Action type
        entity_type: Entity type
        entity_id: ID of the affected entity
        user_id: Acting user (None for system actions)
        changes: Dict with before/after state
        ip_address: Client IP address
        user_agent: Client user agent string

    Returns:
        New audit log ID
    """
    changes_json = None
    if changes is not None:
        changes_json = json.dumps(changes, default=str, ensure_ascii=False)

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO audit_log
        (user_id, action, entity_type, entity_id, changes, ip_address, user_agent)
        VALUES (?, ?, ?, ?, ?, ?, ?)
    ''', (user_id, action, entity_type, entity_id, changes_json, ip_address, user_agent))

    db.commit()
    return cursor.lastrowid
