"""
Room type admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import RoomTypeForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import operations_service

COLUMNS = [
    ('display_name', 'Room type', 'text'),
    ('business_unit_name', 'Property', 'text'),
    ('type', 'Category', 'status'),
    ('max_occupancy', 'Occupancy', 'text'),
    ('base_rate', 'Base rate', 'currency'),
    ('room_count', 'Rooms', 'text'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.operations.room_types_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
]


def register_routes(bp):
    """Register room type routes on the blueprint."""

    @bp.route('/room-types')
    @login_required
    @permission_required('operations.room_types.view')
    def room_types():
        from models.room_type import get_all_room_types

        business_unit_id = request.args.get('business_unit_id', type=int)
        return render_template(
            'admin/entity_list.html',
            title='Room Types',
            rows=get_all_room_types(business_unit_id=business_unit_id),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='room_type_id',
            create_endpoint='admin.operations.room_types_create',
            edit_endpoint='admin.operations.room_types_edit',
            delete_endpoint='admin.operations.room_types_delete',
            manage_permission='operations.room_types.manage',
            property_options=property_choices(),
            property_filter=business_unit_id
        )

    @bp.route('/room-types/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.room_types.manage')
    def room_types_create():
        form = RoomTypeForm()
        form.business_unit_id.choices = property_choices()
        return handle_form(form, operations_service.create_room_type, (), 'admin/entity_form.html',
                           'admin.operations.room_types', 'error_create', 'room type',
                           title='New Room Type')

    @bp.route('/room-types/<int:room_type_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.room_types.manage')
    def room_types_edit(room_type_id):
        from models.room_type import get_room_type_by_id

        room_type = get_room_type_by_id(room_type_id)
        if not room_type:
            flash(get_message('not_found', entity='Room type'), 'error')
            return redirect(url_for('admin.operations.room_types'))

        form = RoomTypeForm()
        form.business_unit_id.choices = property_choices()
        if request.method == 'GET':
            form.load(room_type)
        return handle_form(form, operations_service.update_room_type, (room_type_id,),
                           'admin/entity_form.html', 'admin.operations.room_types',
                           'error_update', 'room type',
                           title=f"Edit Room Type: {room_type['display_name']}")

    @bp.route('/room-types/<int:room_type_id>/delete', methods=['POST'])
    @login_required
    @permission_required('operations.room_types.manage')
    def room_types_delete(room_type_id):
        result = run_action(operations_service.delete_room_type, room_type_id,
                            error_key='error_delete', entity='room type')
        return action_response(result, url_for('admin.operations.room_types'))

    @bp.route('/room-types/<int:room_type_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('operations.room_types.manage')
    def room_types_toggle_active(room_type_id):
        result = run_action(operations_service.toggle_room_type_active, room_type_id,
                            error_key='error_toggle', entity='room type')
        return action_response(result, url_for('admin.operations.room_types'))
