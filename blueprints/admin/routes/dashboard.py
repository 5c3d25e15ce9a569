"""
Admin dashboard route.
"""

from flask import render_template, current_app
from flask_login import login_required

from utils.decorators import permission_required
from utils.datetime_helpers import get_today


def register_routes(bp):
    """Register dashboard routes on the blueprint."""

    @bp.route('/')
    @login_required
    @permission_required('admin.dashboard.view')
    def dashboard():
        """Entity counts, today's arrivals/departures and recent reservations."""
        from models.dashboard import get_dashboard_summary

        summary = get_dashboard_summary(
            get_today(),
            recent_limit=current_app.config['RECENT_RESERVATIONS_LIMIT']
        )
        return render_template('admin/dashboard.html', **summary)
