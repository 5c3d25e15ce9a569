"""
Payment admin routes.
List, detail, status changes, refunds and the Excel export.
"""

from flask import render_template, request, redirect, url_for, flash, Response
from flask_login import login_required

from utils.decorators import permission_required
from utils.datetime_helpers import get_today
from utils.messages import get_message
from blueprints.admin.routes.helpers import run_action, action_response
from blueprints.admin.services import booking_service


def _list_filters() -> dict:
    return {
        'status': request.args.get('status', '').strip() or None,
        'method': request.args.get('method', '').strip() or None,
        'search': request.args.get('search', '').strip() or None,
    }


def register_routes(bp):
    """Register payment routes on the blueprint."""

    @bp.route('/payments')
    @login_required
    @permission_required('operations.payments.view')
    def payments():
        """Payment list with status/method/search filters and totals."""
        from models.payment import get_all_payments, get_payment_totals, PAYMENT_STATUSES, PAYMENT_METHODS

        filters = _list_filters()
        return render_template(
            'admin/payments.html',
            payments=get_all_payments(**filters),
            totals=get_payment_totals(),
            status_options=PAYMENT_STATUSES,
            method_options=PAYMENT_METHODS,
            filters=filters
        )

    @bp.route('/payments/<int:payment_id>')
    @login_required
    @permission_required('operations.payments.view')
    def payments_detail(payment_id):
        from models.payment import get_payment_by_id, can_refund, PAYMENT_STATUSES

        payment = get_payment_by_id(payment_id)
        if not payment:
            flash(get_message('error_load', entity='payment'), 'error')
            return redirect(url_for('admin.operations.payments'))

        return render_template(
            'admin/payment_detail.html',
            payment=payment,
            can_refund=can_refund(payment['status']),
            status_options=PAYMENT_STATUSES
        )

    @bp.route('/payments/<int:payment_id>/status', methods=['POST'])
    @login_required
    @permission_required('operations.payments.manage')
    def payments_status(payment_id):
        data = request.get_json(silent=True) or request.form
        status = (data.get('status') or '').strip().upper()
        result = run_action(booking_service.update_payment_status, payment_id, status,
                            error_key='error_update', entity='payment')
        return action_response(result, url_for('admin.operations.payments_detail', payment_id=payment_id))

    @bp.route('/payments/<int:payment_id>/refund', methods=['POST'])
    @login_required
    @permission_required('operations.payments.refund')
    def payments_refund(payment_id):
        """Refund a settled payment."""
        data = request.get_json(silent=True) or request.form
        result = run_action(booking_service.refund_payment, payment_id, data.get('reason'),
                            error_key='error_refund', entity='payment')
        return action_response(result, url_for('admin.operations.payments_detail', payment_id=payment_id))

    @bp.route('/payments/export')
    @login_required
    @permission_required('operations.payments.export')
    def payments_export():
        """Download the filtered payment list as .xlsx."""
        output = booking_service.build_payments_workbook(**_list_filters())
        filename = f"payments_{get_today().strftime('%Y-%m-%d')}.xlsx"

        return Response(
            output.getvalue(),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={
                "Content-Disposition": f"attachment; filename={filename}"
            }
        )
