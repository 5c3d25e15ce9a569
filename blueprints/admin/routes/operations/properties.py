"""
Property (business unit) admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import BusinessUnitForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response
from blueprints.admin.services import operations_service

COLUMNS = [
    ('display_name', 'Property', 'text'),
    ('property_type', 'Type', 'status'),
    ('location', 'Location', 'text'),
    ('restaurant_count', 'Restaurants', 'text'),
    ('room_count', 'Rooms', 'text'),
    ('reservation_count', 'Reservations', 'text'),
    ('is_published', 'Published', 'flag'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.operations.properties_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
    {'field': 'is_featured', 'endpoint': 'admin.operations.properties_toggle_featured',
     'label': 'Featured', 'icon': 'fa-star'},
]


def register_routes(bp):
    """Register property routes on the blueprint."""

    @bp.route('/properties')
    @login_required
    @permission_required('operations.properties.view')
    def properties():
        """List properties with dependant counts."""
        from flask import current_app
        from models.business_unit import get_all_business_units, format_location

        units = get_all_business_units()
        for unit in units:
            unit['location'] = format_location(unit, current_app.config['DEFAULT_COUNTRY'])

        return render_template(
            'admin/entity_list.html',
            title='Properties',
            rows=units,
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='unit_id',
            create_endpoint='admin.operations.properties_create',
            edit_endpoint='admin.operations.properties_edit',
            delete_endpoint='admin.operations.properties_delete',
            manage_permission='operations.properties.manage'
        )

    @bp.route('/properties/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.properties.manage')
    def properties_create():
        """Create property."""
        form = BusinessUnitForm()
        return handle_form(form, operations_service.create_property, (), 'admin/entity_form.html',
                           'admin.operations.properties', 'error_create', 'property',
                           title='New Property', slug_source='name')

    @bp.route('/properties/<int:unit_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.properties.manage')
    def properties_edit(unit_id):
        """Edit property."""
        from models.business_unit import get_business_unit_by_id

        unit = get_business_unit_by_id(unit_id)
        if not unit:
            flash(get_message('not_found', entity='Property'), 'error')
            return redirect(url_for('admin.operations.properties'))

        form = BusinessUnitForm()
        if request.method == 'GET':
            form.load(unit)
        return handle_form(form, operations_service.update_property, (unit_id,), 'admin/entity_form.html',
                           'admin.operations.properties', 'error_update', 'property',
                           title=f"Edit Property: {unit['display_name']}", slug_source='name')

    @bp.route('/properties/<int:unit_id>/delete', methods=['POST'])
    @login_required
    @permission_required('operations.properties.manage')
    def properties_delete(unit_id):
        """Delete property (blocked while it has reservations, rooms or restaurants)."""
        result = run_action(operations_service.delete_property, unit_id,
                            error_key='error_delete', entity='property')
        return action_response(result, url_for('admin.operations.properties'))

    @bp.route('/properties/<int:unit_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('operations.properties.manage')
    def properties_toggle_active(unit_id):
        result = run_action(operations_service.toggle_property_active, unit_id,
                            error_key='error_toggle', entity='property')
        return action_response(result, url_for('admin.operations.properties'))

    @bp.route('/properties/<int:unit_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('operations.properties.manage')
    def properties_toggle_featured(unit_id):
        result = run_action(operations_service.toggle_property_featured, unit_id,
                            error_key='error_toggle', entity='property')
        return action_response(result, url_for('admin.operations.properties'))
