"""
Audit log routes.
Admin-only viewer for the change history written by the server actions.
"""

from flask import render_template, request
from flask_login import login_required

from utils.decorators import permission_required


def register_routes(bp):
    """Register audit log routes on the blueprint."""

    @bp.route('/audit')
    @login_required
    @permission_required('admin.audit.view')
    def audit():
        """
        Audit log viewer page.
        Filters by entity type and action, paginated.
        """
        from models.audit_log import get_audit_logs, count_audit_logs, get_distinct_entity_types

        entity_type = request.args.get('entity_type', '').strip() or None
        action = request.args.get('action', '').strip() or None

        page = max(request.args.get('page', 1, type=int), 1)
        per_page = min(request.args.get('per_page', 50, type=int), 100)
        offset = (page - 1) * per_page

        logs = get_audit_logs(entity_type=entity_type, action=action, limit=per_page, offset=offset)
        total = count_audit_logs(entity_type=entity_type, action=action)
        total_pages = (total + per_page - 1) // per_page if total > 0 else 1

        return render_template(
            'admin/audit.html',
            logs=logs,
            total=total,
            page=page,
            per_page=per_page,
            total_pages=total_pages,
            entity_types=get_distinct_entity_types(),
            actions=['CREATE', 'UPDATE', 'DELETE', 'STATUS'],
            entity_type=entity_type,
            action=action
        )
