"""
Helpers shared by the admin server actions.
"""

from utils.api_response import action_result
from utils.audit import log_status_change
from utils.form_helpers import slugify, parse_date
from utils.messages import get_message


def derive_slug(data: dict, source_field: str) -> str:
    """
    Slug to store for a record.

    An explicit slug is normalised; a blank one is generated from the
    source field (title or name).

    Raises:
        ValueError if neither yields a usable slug
    """
    slug = slugify(data.get('slug') or '') or slugify(data.get(source_field) or '')
    if not slug:
        raise ValueError(get_message('field_required', field='Slug'))
    return slug


def require(data: dict, field: str, label: str):
    """Return data[field] or raise the 'is required' ValueError."""
    value = data.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(get_message('field_required', field=label))
    return value.strip() if isinstance(value, str) else value


def require_date_range(data: dict, start_field: str, end_field: str,
                       start_label: str, end_label: str) -> tuple:
    """
    Parse and check a required date pair.

    Returns:
        (start, end) as dates

    Raises:
        ValueError if a date is missing or end is before start
    """
    start = parse_date(data.get(start_field))
    end = parse_date(data.get(end_field))
    if start is None:
        raise ValueError(get_message('field_required', field=start_label))
    if end is None:
        raise ValueError(get_message('field_required', field=end_label))
    if end < start:
        raise ValueError(get_message('invalid_date_range', start=start_label, end=end_label))
    return start, end


def not_found(entity: str) -> dict:
    """Failure result for a missing row (rendered as 404 on JSON routes)."""
    return action_result(False, get_message('not_found', entity=entity), not_found=True)


def toggle_result(new_value, entity: str, entity_type: str, entity_id: int,
                  field: str, on_key: str, off_key: str) -> dict:
    """
    Result of a 0/1 flag toggle, audited.

    Args:
        new_value: Value returned by the model toggle (None = not found)
        entity: Display name ('Event')
        entity_type: Audit entity type ('event')
        entity_id: Row ID
        field: Flag column
        on_key: Message key when the flag is now set
        off_key: Message key when the flag is now cleared
    """
    if new_value is None:
        return not_found(entity)

    log_status_change(entity_type, entity_id, field, 1 - new_value, new_value)
    message = get_message(on_key if new_value else off_key, entity=entity)
    return action_result(True, message, id=entity_id, field=field, value=new_value)
