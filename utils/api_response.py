"""
Standardized action and API response helpers.

Server actions return a plain result dict:

    {"success": true, "message": "..."}
    {"success": false, "message": "..."}

JSON endpoints render those results with the same shape:

    Success:  {"success": true, "data": {...}, "message": "..."}
    Error:    {"success": false, "message": "Human readable reason"}

Usage:
    from utils.api_response import api_success, api_error, action_result

    return action_result(True, 'Event deleted successfully', id=event_id)
    return api_success(data={'id': 1}, message='Created')
    return api_error('Event not found', status=404)
"""

from flask import jsonify
from typing import Any


def action_result(success: bool, message: str, **extra_fields: Any) -> dict:
    """
    Build a server-action result.

    Args:
        success: Whether the action succeeded
        message: Message shown verbatim in the notification
        **extra_fields: Additional fields (e.g. id of a created row)

    Returns:
        Result dict
    """
    result = {'success': success, 'message': message}
    if extra_fields:
        result.update(extra_fields)
    return result


def api_success(
    data: dict | None = None,
    message: str | None = None,
    status: int = 200,
    **extra_fields: Any
) -> tuple:
    """
    Build a standardized success JSON response.

    Args:
        data: Optional dict to include as 'data' key.
        message: Optional success message.
        status: HTTP status code (default 200).
        **extra_fields: Additional top-level fields to include in the response.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': True}

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status


def api_error(message: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Build a standardized error JSON response.

    Args:
        message: Error message.
        status: HTTP status code (default 400).
        **extra_fields: Additional top-level fields.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': False, 'message': message}

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status


def api_from_result(result: dict) -> tuple:
    """
    Render a server-action result as JSON.

    Failures flagged with not_found map to 404, unexpected errors
    (flagged by the route wrapper) to 500, other business failures to 400.

    Args:
        result: Dict returned by a server action

    Returns:
        Tuple of (Response, status_code)
    """
    extra = {k: v for k, v in result.items()
             if k not in ('success', 'message', 'not_found', 'unexpected')}

    if result.get('success'):
        return api_success(message=result.get('message'), **extra)

    if result.get('unexpected'):
        status = 500
    elif result.get('not_found'):
        status = 404
    else:
        status = 400
    return api_error(result.get('message') or 'Request failed', status=status, **extra)
