"""
Hero slide admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import HeroSlideForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response
from blueprints.admin.services import cms_service

COLUMNS = [
    ('title', 'Title', 'text'),
    ('display_type', 'Display', 'text'),
    ('target_pages', 'Pages', 'list'),
    ('show_from', 'Show from', 'datetime'),
    ('show_until', 'Show until', 'datetime'),
    ('view_count', 'Views', 'text'),
    ('click_count', 'Clicks', 'text'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.cms.hero_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
    {'field': 'is_featured', 'endpoint': 'admin.cms.hero_toggle_featured', 'label': 'Featured',
     'icon': 'fa-star'},
]


def register_routes(bp):
    """Register hero slide routes on the blueprint."""

    @bp.route('/hero')
    @login_required
    @permission_required('cms.hero.view')
    def hero():
        """List hero slides."""
        from models.hero_slide import get_all_hero_slides

        return render_template(
            'admin/entity_list.html',
            title='Hero Slides',
            rows=get_all_hero_slides(),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='slide_id',
            create_endpoint='admin.cms.hero_create',
            edit_endpoint='admin.cms.hero_edit',
            delete_endpoint='admin.cms.hero_delete',
            manage_permission='cms.hero.manage'
        )

    @bp.route('/hero/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.hero.manage')
    def hero_create():
        """Create hero slide."""
        form = HeroSlideForm()
        return handle_form(form, cms_service.create_hero_slide, (), 'admin/entity_form.html',
                           'admin.cms.hero', 'error_create', 'hero slide',
                           title='New Hero Slide')

    @bp.route('/hero/<int:slide_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.hero.manage')
    def hero_edit(slide_id):
        """Edit hero slide."""
        from models.hero_slide import get_hero_slide_by_id

        slide = get_hero_slide_by_id(slide_id)
        if not slide:
            flash(get_message('not_found', entity='Hero slide'), 'error')
            return redirect(url_for('admin.cms.hero'))

        form = HeroSlideForm()
        if request.method == 'GET':
            form.load(slide)
        return handle_form(form, cms_service.update_hero_slide, (slide_id,), 'admin/entity_form.html',
                           'admin.cms.hero', 'error_update', 'hero slide',
                           title=f"Edit Hero Slide: {slide['title']}")

    @bp.route('/hero/<int:slide_id>/delete', methods=['POST'])
    @login_required
    @permission_required('cms.hero.manage')
    def hero_delete(slide_id):
        """Delete hero slide."""
        result = run_action(cms_service.delete_hero_slide, slide_id,
                            error_key='error_delete', entity='hero slide')
        return action_response(result, url_for('admin.cms.hero'))

    @bp.route('/hero/<int:slide_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('cms.hero.manage')
    def hero_toggle_active(slide_id):
        result = run_action(cms_service.toggle_hero_slide_active, slide_id,
                            error_key='error_toggle', entity='hero slide')
        return action_response(result, url_for('admin.cms.hero'))

    @bp.route('/hero/<int:slide_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('cms.hero.manage')
    def hero_toggle_featured(slide_id):
        result = run_action(cms_service.toggle_hero_slide_featured, slide_id,
                            error_key='error_toggle', entity='hero slide')
        return action_response(result, url_for('admin.cms.hero'))
