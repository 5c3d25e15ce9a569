"""
Authentication routes: login and logout.
"""

import logging
from flask import render_template, redirect, url_for, flash, request, Blueprint, g
from flask_login import login_user, logout_user, login_required, current_user
from urllib.parse import urlparse

from blueprints.auth.forms import LoginForm
from models.user import User, get_user_by_username, update_last_login, check_password
from utils.messages import MESSAGES, get_message
from utils.permissions import load_user_permissions

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _safe_next(next_page: str) -> str:
    """Only follow local redirect targets."""
    if not next_page:
        return None
    parsed = urlparse(next_page)
    if parsed.netloc or parsed.scheme or not next_page.startswith('/'):
        return None
    return next_page


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """
    Login route with form handling.

    GET: Display login form
    POST: Process login credentials
    """
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    form = LoginForm()

    if form.validate_on_submit():
        user_dict = get_user_by_username(form.username.data.strip())

        if user_dict is None or not check_password(user_dict, form.password.data):
            logger.info('Failed login for %s', form.username.data)
            flash(MESSAGES['invalid_credentials'], 'error')
            return redirect(url_for('auth.login'))

        if not user_dict.get('active'):
            flash(MESSAGES['account_disabled'], 'error')
            return redirect(url_for('auth.login'))

        user = User(user_dict)
        login_user(user, remember=form.remember_me.data)
        update_last_login(user.id)
        g.user_permissions = load_user_permissions(user.id)

        flash(get_message('login_success', name=user.display_name), 'success')

        next_page = _safe_next(request.args.get('next')) or url_for('admin.dashboard')
        return redirect(next_page)

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    """Logout current user."""
    logout_user()
    flash(MESSAGES['logout_success'], 'success')
    return redirect(url_for('auth.login'))
