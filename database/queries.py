"""
Shared query builders for the entity models.

Every model whitelists the columns it lets callers write; these helpers
turn a kwargs dict into the parameterised INSERT/UPDATE the models used
to spell out by hand.
"""

from database.connection import get_db
from utils.datetime_helpers import to_db_value


def insert_row(table: str, data: dict, allowed_fields: list) -> int:
    """
    Insert a row using only whitelisted columns.

    Args:
        table: Table name
        data: Column values
        allowed_fields: Columns callers may set

    Returns:
        New row ID
    """
    columns = [field for field in allowed_fields if field in data]
    values = [to_db_value(data[field]) for field in columns]
    placeholders = ', '.join('?' * len(columns))

    db = get_db()
    cursor = db.cursor()
    cursor.execute(
        f'INSERT INTO {table} ({", ".join(columns)}) VALUES ({placeholders})',
        values
    )
    db.commit()
    return cursor.lastrowid


def update_row(table: str, row_id: int, data: dict, allowed_fields: list) -> bool:
    """
    Update whitelisted columns of one row and bump updated_at.

    Args:
        table: Table name
        row_id: Row ID
        data: Column values to change
        allowed_fields: Columns callers may set

    Returns:
        True if a row was updated, False when nothing to update or not found
    """
    updates = []
    values = []

    for field in allowed_fields:
        if field in data:
            updates.append(f'{field} = ?')
            values.append(to_db_value(data[field]))

    if not updates:
        return False

    updates.append('updated_at = CURRENT_TIMESTAMP')
    values.append(row_id)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'UPDATE {table} SET {", ".join(updates)} WHERE id = ?', values)
    db.commit()
    return cursor.rowcount > 0


def toggle_flag(table: str, row_id: int, field: str):
    """
    Flip a 0/1 column.

    Args:
        table: Table name
        row_id: Row ID
        field: Flag column (is_active, is_featured, vip_status, ...)

    Returns:
        New flag value, or None if the row does not exist
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT {field} FROM {table} WHERE id = ?', (row_id,))
    row = cursor.fetchone()
    if row is None:
        return None

    new_value = 0 if row[field] else 1
    cursor.execute(
        f'UPDATE {table} SET {field} = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?',
        (new_value, row_id)
    )
    db.commit()
    return new_value


def delete_row(table: str, row_id: int) -> bool:
    """Hard delete one row."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'DELETE FROM {table} WHERE id = ?', (row_id,))
    db.commit()
    return cursor.rowcount > 0


def fetch_one(table: str, row_id: int) -> dict:
    """Row by ID as dict, or None."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT * FROM {table} WHERE id = ?', (row_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def count_where(table: str, column: str, value) -> int:
    """COUNT(*) of rows where column = value."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT COUNT(*) as count FROM {table} WHERE {column} = ?', (value,))
    return cursor.fetchone()['count']
