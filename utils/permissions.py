"""
Permission checking and caching utilities.
Provides functions to load and check user permissions and build the sidebar.
"""

from flask import g, request

from database import get_db
from models.role import get_role_permissions


def load_user_permissions(user_id: int) -> set:
    """
    Load all permissions for a user based on their role.

    Args:
        user_id: User ID

    Returns:
        Set of permission codes
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute('SELECT role_id FROM users WHERE id = ?', (user_id,))
    row = cursor.fetchone()

    if not row or not row['role_id']:
        return set()

    return {perm['code'] for perm in get_role_permissions(row['role_id'])}


def get_user_permissions(user) -> set:
    """
    Permission set for the user, cached on g for the rest of the request.

    Args:
        user: User object (Flask-Login)

    Returns:
        Set of permission codes
    """
    if not getattr(user, 'is_authenticated', False):
        return set()
    if not hasattr(g, 'user_permissions'):
        g.user_permissions = load_user_permissions(user.id)
    return g.user_permissions


def has_permission(user, permission_code: str) -> bool:
    """
    Check if user has a specific permission.

    Args:
        user: User object (Flask-Login)
        permission_code: Permission code to check

    Returns:
        True if user has permission
    """
    return permission_code in get_user_permissions(user)


def get_menu_items(user) -> list:
    """
    Generate hierarchical navigation menu based on user permissions.

    Children are the menu permissions with a URL; a parent is shown only
    when the user can see at least one of its children. The child whose
    URL prefixes the current path is flagged active.

    Args:
        user: User object (Flask-Login)

    Returns:
        List of parent menu dicts with children lists
    """
    user_permissions = get_user_permissions(user)
    if not user_permissions:
        return []

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT * FROM permissions
        WHERE is_menu_item = 1 AND active = 1
        ORDER BY menu_order
    ''')
    rows = [dict(row) for row in cursor.fetchall()]

    try:
        current_path = request.path
    except RuntimeError:
        current_path = ''

    parents = [row for row in rows if row['parent_permission_id'] is None]
    menu_structure = []

    for parent in parents:
        children = []
        for child in rows:
            if child['parent_permission_id'] != parent['id']:
                continue
            if child['code'] not in user_permissions:
                continue
            url = child['menu_url'] or ''
            is_active = bool(url) and (
                current_path == url or
                (url != '/admin/' and current_path.startswith(url))
            )
            children.append({
                'code': child['code'],
                'name': child['name'],
                'icon': child['menu_icon'],
                'url': url,
                'module': child['module'],
                'active': is_active
            })

        if children:
            menu_structure.append({
                'id': parent['id'],
                'code': parent['code'],
                'name': parent['name'],
                'icon': parent['menu_icon'],
                'module': parent['module'],
                'children': children
            })

    return menu_structure
