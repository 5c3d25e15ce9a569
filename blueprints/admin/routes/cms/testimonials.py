"""
Testimonial admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import TestimonialForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response
from blueprints.admin.services import cms_service

COLUMNS = [
    ('guest_name', 'Guest', 'text'),
    ('guest_country', 'Country', 'text'),
    ('rating', 'Rating', 'text'),
    ('source', 'Source', 'text'),
    ('review_date', 'Reviewed', 'date'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.cms.testimonials_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
    {'field': 'is_featured', 'endpoint': 'admin.cms.testimonials_toggle_featured', 'label': 'Featured',
     'icon': 'fa-star'},
]


def register_routes(bp):
    """Register testimonial routes on the blueprint."""

    @bp.route('/testimonials')
    @login_required
    @permission_required('cms.testimonials.view')
    def testimonials():
        from models.testimonial import get_all_testimonials

        return render_template(
            'admin/entity_list.html',
            title='Testimonials',
            rows=get_all_testimonials(),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='testimonial_id',
            create_endpoint='admin.cms.testimonials_create',
            edit_endpoint='admin.cms.testimonials_edit',
            delete_endpoint='admin.cms.testimonials_delete',
            manage_permission='cms.testimonials.manage'
        )

    @bp.route('/testimonials/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.testimonials.manage')
    def testimonials_create():
        form = TestimonialForm()
        return handle_form(form, cms_service.create_testimonial, (), 'admin/entity_form.html',
                           'admin.cms.testimonials', 'error_create', 'testimonial',
                           title='New Testimonial')

    @bp.route('/testimonials/<int:testimonial_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.testimonials.manage')
    def testimonials_edit(testimonial_id):
        from models.testimonial import get_testimonial_by_id

        testimonial = get_testimonial_by_id(testimonial_id)
        if not testimonial:
            flash(get_message('not_found', entity='Testimonial'), 'error')
            return redirect(url_for('admin.cms.testimonials'))

        form = TestimonialForm()
        if request.method == 'GET':
            form.load(testimonial)
        return handle_form(form, cms_service.update_testimonial, (testimonial_id,),
                           'admin/entity_form.html', 'admin.cms.testimonials',
                           'error_update', 'testimonial',
                           title=f"Edit Testimonial: {testimonial['guest_name']}")

    @bp.route('/testimonials/<int:testimonial_id>/delete', methods=['POST'])
    @login_required
    @permission_required('cms.testimonials.manage')
    def testimonials_delete(testimonial_id):
        result = run_action(cms_service.delete_testimonial, testimonial_id,
                            error_key='error_delete', entity='testimonial')
        return action_response(result, url_for('admin.cms.testimonials'))

    @bp.route('/testimonials/<int:testimonial_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('cms.testimonials.manage')
    def testimonials_toggle_active(testimonial_id):
        result = run_action(cms_service.toggle_testimonial_active, testimonial_id,
                            error_key='error_toggle', entity='testimonial')
        return action_response(result, url_for('admin.cms.testimonials'))

    @bp.route('/testimonials/<int:testimonial_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('cms.testimonials.manage')
    def testimonials_toggle_featured(testimonial_id):
        result = run_action(cms_service.toggle_testimonial_featured, testimonial_id,
                            error_key='error_toggle', entity='testimonial')
        return action_response(result, url_for('admin.cms.testimonials'))
