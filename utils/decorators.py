"""
Route decorators for authentication and authorization.
Provides permission-based access control for routes.
"""

from functools import wraps
from flask import flash, g, abort, request
from flask_login import login_required, current_user

from utils.api_response import api_error
from utils.messages import MESSAGES


def permission_required(permission_code: str):
    """
    Decorator to require specific permission for a route.

    Usage:
        @bp.route('/events')
        @login_required
        @permission_required('cms.events.view')
        def events():
            ...

    Args:
        permission_code: Permission code required (e.g., 'cms.events.view')

    Returns:
        Decorator function
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # Check if user has permission
            if not hasattr(g, 'user_permissions'):
                # Load permissions if not cached
                from utils.permissions import load_user_permissions
                g.user_permissions = load_user_permissions(current_user.id)

            if permission_code not in g.user_permissions:
                if request.is_json or request.accept_mimetypes.best == 'application/json':
                    return api_error(MESSAGES['action_denied'], status=403)
                if request.accept_mimetypes.accept_html:
                    flash(MESSAGES['permission_denied'], 'error')
                abort(403)

            return func(*args, **kwargs)
        return wrapper
    return decorator


# Re-export login_required for convenience
__all__ = ['login_required', 'permission_required']
