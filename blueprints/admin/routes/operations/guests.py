"""
Guest admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import GuestForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import operations_service

COLUMNS = [
    ('full_name', 'Guest', 'text'),
    ('email', 'Email', 'text'),
    ('phone', 'Phone', 'text'),
    ('country', 'Country', 'text'),
    ('reservation_count', 'Reservations', 'text'),
]

TOGGLES = [
    {'field': 'vip_status', 'endpoint': 'admin.operations.guests_vip', 'label': 'VIP',
     'icon': 'fa-crown'},
]


def register_routes(bp):
    """Register guest routes on the blueprint."""

    @bp.route('/guests')
    @login_required
    @permission_required('operations.guests.view')
    def guests():
        """List guests with search and VIP filter."""
        from models.guest import get_all_guests

        search = request.args.get('search', '').strip()
        vip_only = request.args.get('vip', '') == '1'
        return render_template(
            'admin/entity_list.html',
            title='Guests',
            rows=get_all_guests(search=search or None, vip_only=vip_only),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='guest_id',
            detail_endpoint='admin.operations.guests_detail',
            create_endpoint='admin.operations.guests_create',
            edit_endpoint='admin.operations.guests_edit',
            delete_endpoint='admin.operations.guests_delete',
            manage_permission='operations.guests.manage',
            search=search,
            vip_only=vip_only
        )

    @bp.route('/guests/<int:guest_id>')
    @login_required
    @permission_required('operations.guests.view')
    def guests_detail(guest_id):
        """Guest profile with recent reservations."""
        from models.guest import get_guest_with_reservations

        guest = get_guest_with_reservations(guest_id)
        if not guest:
            flash(get_message('not_found', entity='Guest'), 'error')
            return redirect(url_for('admin.operations.guests'))
        return render_template('admin/guest_detail.html', guest=guest)

    @bp.route('/guests/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.guests.manage')
    def guests_create():
        form = GuestForm()
        form.business_unit_id.choices = property_choices(blank_label='-')
        return handle_form(form, operations_service.create_guest, (), 'admin/entity_form.html',
                           'admin.operations.guests', 'error_create', 'guest', title='New Guest')

    @bp.route('/guests/<int:guest_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.guests.manage')
    def guests_edit(guest_id):
        from models.guest import get_guest_by_id

        guest = get_guest_by_id(guest_id)
        if not guest:
            flash(get_message('not_found', entity='Guest'), 'error')
            return redirect(url_for('admin.operations.guests'))

        form = GuestForm()
        form.business_unit_id.choices = property_choices(blank_label='-')
        if request.method == 'GET':
            form.load(guest)
        return handle_form(form, operations_service.update_guest, (guest_id,), 'admin/entity_form.html',
                           'admin.operations.guests', 'error_update', 'guest',
                           title=f"Edit Guest: {guest['full_name']}")

    @bp.route('/guests/<int:guest_id>/delete', methods=['POST'])
    @login_required
    @permission_required('operations.guests.manage')
    def guests_delete(guest_id):
        """Delete guest (blocked while the guest has reservations)."""
        result = run_action(operations_service.delete_guest, guest_id,
                            error_key='error_delete', entity='guest')
        return action_response(result, url_for('admin.operations.guests'))

    @bp.route('/guests/<int:guest_id>/vip', methods=['POST'])
    @login_required
    @permission_required('operations.guests.manage')
    def guests_vip(guest_id):
        """Toggle VIP flag."""
        result = run_action(operations_service.toggle_guest_vip, guest_id,
                            error_key='error_toggle', entity='guest')
        return action_response(result, url_for('admin.operations.guests'))
