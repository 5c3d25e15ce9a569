"""
Room admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import RoomForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import operations_service

COLUMNS = [
    ('room_number', 'Room', 'text'),
    ('business_unit_name', 'Property', 'text'),
    ('room_type_name', 'Type', 'text'),
    ('floor', 'Floor', 'text'),
    ('status', 'Status', 'status'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.operations.rooms_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
]


def _room_type_choices():
    from models.room_type import get_room_type_options
    return get_room_type_options()


def register_routes(bp):
    """Register room routes on the blueprint."""

    @bp.route('/rooms')
    @login_required
    @permission_required('operations.rooms.view')
    def rooms():
        """List rooms with property/status filters and the status switcher."""
        from models.room import get_all_rooms, ROOM_STATUSES

        business_unit_id = request.args.get('business_unit_id', type=int)
        status = request.args.get('status', '').strip() or None
        return render_template(
            'admin/entity_list.html',
            title='Rooms',
            rows=get_all_rooms(business_unit_id=business_unit_id, status=status),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='room_id',
            create_endpoint='admin.operations.rooms_create',
            edit_endpoint='admin.operations.rooms_edit',
            delete_endpoint='admin.operations.rooms_delete',
            status_endpoint='admin.operations.rooms_status',
            manage_permission='operations.rooms.manage',
            property_options=property_choices(),
            property_filter=business_unit_id,
            status_filter=status,
            status_options=ROOM_STATUSES
        )

    @bp.route('/rooms/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.rooms.manage')
    def rooms_create():
        form = RoomForm()
        form.room_type_id.choices = _room_type_choices()
        return handle_form(form, operations_service.create_room, (), 'admin/entity_form.html',
                           'admin.operations.rooms', 'error_create', 'room', title='New Room')

    @bp.route('/rooms/<int:room_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.rooms.manage')
    def rooms_edit(room_id):
        from models.room import get_room_by_id

        room = get_room_by_id(room_id)
        if not room:
            flash(get_message('not_found', entity='Room'), 'error')
            return redirect(url_for('admin.operations.rooms'))

        form = RoomForm()
        form.room_type_id.choices = _room_type_choices()
        if request.method == 'GET':
            form.load(room)
        return handle_form(form, operations_service.update_room, (room_id,), 'admin/entity_form.html',
                           'admin.operations.rooms', 'error_update', 'room',
                           title=f"Edit Room {room['room_number']}")

    @bp.route('/rooms/<int:room_id>/status', methods=['POST'])
    @login_required
    @permission_required('operations.rooms.manage')
    def rooms_status(room_id):
        """Change housekeeping/occupancy status."""
        data = request.get_json(silent=True) or request.form
        status = (data.get('status') or '').strip().upper()
        result = run_action(operations_service.update_room_status, room_id, status,
                            error_key='error_toggle', entity='room')
        return action_response(result, url_for('admin.operations.rooms'))

    @bp.route('/rooms/<int:room_id>/delete', methods=['POST'])
    @login_required
    @permission_required('operations.rooms.manage')
    def rooms_delete(room_id):
        result = run_action(operations_service.delete_room, room_id, error_key='error_delete', entity='room')
        return action_response(result, url_for('admin.operations.rooms'))

    @bp.route('/rooms/<int:room_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('operations.rooms.manage')
    def rooms_toggle_active(room_id):
        result = run_action(operations_service.toggle_room_active, room_id,
                            error_key='error_toggle', entity='room')
        return action_response(result, url_for('admin.operations.rooms'))
