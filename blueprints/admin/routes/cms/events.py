"""
Event admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import EventForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import cms_service

COLUMNS = [
    ('title', 'Title', 'text'),
    ('business_unit_name', 'Property', 'text'),
    ('type', 'Type', 'status'),
    ('status', 'Status', 'status'),
    ('start_date', 'Starts', 'date'),
    ('end_date', 'Ends', 'date'),
    ('is_published', 'Published', 'flag'),
]

TOGGLES = [
    {'field': 'is_featured', 'endpoint': 'admin.cms.events_toggle_featured', 'label': 'Featured',
     'icon': 'fa-star'},
]


def register_routes(bp):
    """Register event routes on the blueprint."""

    @bp.route('/events')
    @login_required
    @permission_required('cms.events.view')
    def events():
        """List events with optional status filter."""
        from models.event import get_all_events, EVENT_STATUSES

        status = request.args.get('status', '').strip() or None
        return render_template(
            'admin/entity_list.html',
            title='Events',
            rows=get_all_events(status=status),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='event_id',
            create_endpoint='admin.cms.events_create',
            edit_endpoint='admin.cms.events_edit',
            delete_endpoint='admin.cms.events_delete',
            manage_permission='cms.events.manage',
            status_filter=status,
            status_options=EVENT_STATUSES
        )

    @bp.route('/events/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.events.manage')
    def events_create():
        """Create event."""
        form = EventForm()
        form.business_unit_id.choices = property_choices()
        return handle_form(form, cms_service.create_event, (), 'admin/entity_form.html',
                           'admin.cms.events', 'error_create', 'event',
                           title='New Event', slug_source='title')

    @bp.route('/events/<int:event_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.events.manage')
    def events_edit(event_id):
        """Edit event."""
        from models.event import get_event_by_id

        event = get_event_by_id(event_id)
        if not event:
            flash(get_message('not_found', entity='Event'), 'error')
            return redirect(url_for('admin.cms.events'))

        form = EventForm()
        form.business_unit_id.choices = property_choices()
        if request.method == 'GET':
            form.load(event)
        return handle_form(form, cms_service.update_event, (event_id,), 'admin/entity_form.html',
                           'admin.cms.events', 'error_update', 'event',
                           title=f"Edit Event: {event['title']}", slug_source='title')

    @bp.route('/events/<int:event_id>/delete', methods=['POST'])
    @login_required
    @permission_required('cms.events.manage')
    def events_delete(event_id):
        """Delete event."""
        result = run_action(cms_service.delete_event, event_id, error_key='error_delete', entity='event')
        return action_response(result, url_for('admin.cms.events'))

    @bp.route('/events/<int:event_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('cms.events.manage')
    def events_toggle_featured(event_id):
        """Toggle event featured flag."""
        result = run_action(cms_service.toggle_event_featured, event_id,
                            error_key='error_toggle', entity='event')
        return action_response(result, url_for('admin.cms.events'))
