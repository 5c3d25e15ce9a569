"""
User model and data access functions.
Handles staff authentication and Flask-Login integration.
"""

from werkzeug.security import generate_password_hash, check_password_hash
from database import get_db


class User:
    """
    User class for Flask-Login integration.
    Wraps a users row with the properties Flask-Login expects.
    """

    def __init__(self, user_dict):
        self.id = user_dict['id']
        self.username = user_dict['username']
        self.email = user_dict['email']
        self.full_name = user_dict['full_name']
        self.role_id = user_dict['role_id']
        self.role_name = user_dict.get('role_name')
        self.role_display_name = user_dict.get('role_display_name')
        self.active = user_dict['active']
        self.last_login = user_dict.get('last_login')

    @property
    def display_name(self):
        return self.full_name or self.username

    @property
    def is_authenticated(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_active(self):
        """Required by Flask-Login."""
        return self.active == 1

    @property
    def is_anonymous(self):
        """Required by Flask-Login."""
        return False

    def get_id(self):
        """Required by Flask-Login. Returns user ID as string."""
        return str(self.id)


_USER_SELECT = '''
    SELECT u.*, r.name as role_name, r.display_name as role_display_name
    FROM users u
    LEFT JOIN roles r ON u.role_id = r.id
'''


def get_user_by_id(user_id: int) -> dict:
    """
    Get user by ID.

    Args:
        user_id: User ID

    Returns:
        User dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_USER_SELECT + ' WHERE u.id = ?', (user_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def get_user_by_username(username: str) -> dict:
    """
    Get user by username.

    Args:
        username: Username to search for

    Returns:
        User dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_USER_SELECT + ' WHERE u.username = ?', (username,))
    row = cursor.fetchone()
    return dict(row) if row else None


def create_user(username: str, email: str, password: str, full_name: str = None, role_id: int = None) -> int:
    """
    Create new user with hashed password.

    Args:
        username: Unique username
        email: Unique email
        password: Plain text password (will be hashed)
        full_name: User's full name
        role_id: Role ID to assign

    Returns:
        New user ID

    Raises:
        sqlite3.IntegrityError if username or email already exists
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO users (username, email, password_hash, full_name, role_id)
        VALUES (?, ?, ?, ?, ?)
    ''', (username, email, generate_password_hash(password), full_name, role_id))

    db.commit()
    return cursor.lastrowid


def update_last_login(user_id: int) -> None:
    """Stamp the last login time."""
    db = get_db()
    db.execute('UPDATE users SET last_login = CURRENT_TIMESTAMP WHERE id = ?', (user_id,))
    db.commit()


def check_password(user_dict: dict, password: str) -> bool:
    """
    Verify password against stored hash.

    Args:
        user_dict: User dictionary with password_hash
        password: Plain text password to check

    Returns:
        True if password matches
    """
    return check_password_hash(user_dict['password_hash'], password)
