"""
Reservation admin routes.
List and detail views plus the confirm/cancel transitions and
recording payments against a reservation.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.routes.helpers import run_action, action_response, property_choices
from blueprints.admin.services import booking_service


def register_routes(bp):
    """Register reservation routes on the blueprint."""

    @bp.route('/reservations')
    @login_required
    @permission_required('operations.reservations.view')
    def reservations():
        """
        Reservation list.
        Filters: property, status and free-text search.
        """
        from models.reservation import get_all_reservations, get_status_counts, RESERVATION_STATUSES

        business_unit_id = request.args.get('business_unit_id', type=int)
        status = request.args.get('status', '').strip() or None
        search = request.args.get('search', '').strip()

        rows = get_all_reservations(
            business_unit_id=business_unit_id,
            status=status,
            search=search or None
        )

        return render_template(
            'admin/reservations.html',
            reservations=rows,
            status_counts=get_status_counts(),
            status_options=RESERVATION_STATUSES,
            property_options=property_choices(),
            property_filter=business_unit_id,
            status_filter=status,
            search=search
        )

    @bp.route('/reservations/<int:reservation_id>')
    @login_required
    @permission_required('operations.reservations.view')
    def reservations_detail(reservation_id):
        """Reservation detail with rooms and payments."""
        from models.reservation import get_reservation_by_id, can_confirm, can_cancel
        from models.payment import PAYMENT_METHODS, PAYMENT_STATUSES

        reservation = get_reservation_by_id(reservation_id)
        if not reservation:
            flash(get_message('error_load', entity='reservation'), 'error')
            return redirect(url_for('admin.operations.reservations'))

        return render_template(
            'admin/reservation_detail.html',
            reservation=reservation,
            can_confirm=can_confirm(reservation['status']),
            can_cancel=can_cancel(reservation['status']),
            payment_methods=PAYMENT_METHODS,
            payment_statuses=PAYMENT_STATUSES
        )

    @bp.route('/reservations/<int:reservation_id>/confirm', methods=['POST'])
    @login_required
    @permission_required('operations.reservations.change_state')
    def reservations_confirm(reservation_id):
        result = run_action(booking_service.confirm_reservation, reservation_id,
                            error_key='error_reservation_action', entity='reservation')
        return action_response(result, url_for('admin.operations.reservations_detail',
                                               reservation_id=reservation_id))

    @bp.route('/reservations/<int:reservation_id>/cancel', methods=['POST'])
    @login_required
    @permission_required('operations.reservations.change_state')
    def reservations_cancel(reservation_id):
        data = request.get_json(silent=True) or request.form
        result = run_action(booking_service.cancel_reservation, reservation_id, data.get('reason'),
                            error_key='error_reservation_action', entity='reservation')
        return action_response(result, url_for('admin.operations.reservations_detail',
                                               reservation_id=reservation_id))

    @bp.route('/reservations/<int:reservation_id>/payments', methods=['POST'])
    @login_required
    @permission_required('operations.payments.manage')
    def reservations_add_payment(reservation_id):
        """Record a payment from the reservation detail page."""
        data = request.get_json(silent=True) or request.form
        result = run_action(booking_service.record_payment, reservation_id, data,
                            error_key='error_create', entity='payment')
        return action_response(result, url_for('admin.operations.reservations_detail',
                                               reservation_id=reservation_id))
