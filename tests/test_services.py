"""
Admin server action tests.
Each action returns {'success': bool, 'message': str, ...}; failures
never raise.
"""

import pytest
from datetime import timedelta
from openpyxl import load_workbook

from utils.datetime_helpers import get_today


def _event_form(unit_id, **overrides):
    today = get_today()
    form = {
        'business_unit_id': str(unit_id),
        'title': 'Sunset Yoga',
        'slug': '',
        'type': 'WORKSHOP',
        'status': 'CONFIRMED',
        'start_date': (today + timedelta(days=3)).isoformat(),
        'end_date': (today + timedelta(days=3)).isoformat(),
        'is_published': 'on',
    }
    form.update(overrides)
    return form


def _offer_form(**overrides):
    today = get_today()
    form = {
        'title': 'Early Bird Deal',
        'type': 'EARLY_BIRD',
        'status': 'ACTIVE',
        'original_price': '1000',
        'offer_price': '875',
        'valid_from': today.isoformat(),
        'valid_to': (today + timedelta(days=30)).isoformat(),
    }
    form.update(overrides)
    return form


class TestCmsService:
    """Events, hero slides, offers, testimonials and FAQs."""

    def test_create_event_generates_slug(self, app, unit_id):
        from blueprints.admin.services import cms_service
        from models.event import get_event_by_id

        result = cms_service.create_event(_event_form(unit_id))
        assert result['success'] is True
        assert get_event_by_id(result['id'])['slug'] == 'sunset-yoga'

    def test_create_event_duplicate_slug(self, app, unit_id):
        from blueprints.admin.services import cms_service

        cms_service.create_event(_event_form(unit_id))
        result = cms_service.create_event(_event_form(unit_id, slug='Sunset Yoga'))
        assert result['success'] is False
        assert 'sunset-yoga' in result['message']

    def test_create_event_end_before_start(self, app, unit_id):
        from blueprints.admin.services import cms_service

        today = get_today()
        result = cms_service.create_event(_event_form(
            unit_id, start_date=today.isoformat(), end_date=(today - timedelta(days=1)).isoformat()
        ))
        assert result['success'] is False

    def test_free_event_clears_ticket_price(self, app, unit_id):
        from blueprints.admin.services import cms_service
        from models.event import get_event_by_id

        result = cms_service.create_event(_event_form(unit_id, is_free='on', ticket_price='500'))
        assert get_event_by_id(result['id'])['ticket_price'] is None

    def test_update_missing_event(self, app, unit_id):
        from blueprints.admin.services import cms_service

        result = cms_service.update_event(9999, _event_form(unit_id))
        assert result['success'] is False
        assert result['not_found'] is True

    def test_toggle_event_featured(self, app, unit_id):
        from blueprints.admin.services import cms_service

        event_id = cms_service.create_event(_event_form(unit_id))['id']
        result = cms_service.toggle_event_featured(event_id)
        assert result['success'] is True
        assert result['field'] == 'is_featured'
        assert result['value'] == 1

    def test_offer_savings_recomputed(self, app):
        from blueprints.admin.services import cms_service
        from models.special_offer import get_special_offer_by_id

        result = cms_service.create_special_offer(_offer_form(savings_amount='1', savings_percent='99'))
        offer = get_special_offer_by_id(result['id'])
        assert offer['savings_amount'] == 125.0
        assert offer['savings_percent'] == 13

    def test_offer_status_toggle(self, app):
        from blueprints.admin.services import cms_service

        offer_id = cms_service.create_special_offer(_offer_form())['id']
        result = cms_service.toggle_special_offer_status(offer_id)
        assert result['field'] == 'status'
        assert result['value'] == 'INACTIVE'
        assert cms_service.toggle_special_offer_status(offer_id)['value'] == 'ACTIVE'

    def test_offer_requires_price(self, app):
        from blueprints.admin.services import cms_service

        result = cms_service.create_special_offer(_offer_form(offer_price=''))
        assert result['success'] is False

    def test_hero_opacity_range(self, app):
        from blueprints.admin.services import cms_service

        result = cms_service.create_hero_slide({'title': 'Too dark', 'overlay_opacity': '1.5'})
        assert result['success'] is False

    def test_hero_target_pages_parsed(self, app):
        from blueprints.admin.services import cms_service
        from models.hero_slide import get_hero_slide_by_id

        result = cms_service.create_hero_slide({'title': 'Offers', 'target_pages': 'home, offers',
                                                'is_active': 'on'})
        assert get_hero_slide_by_id(result['id'])['target_pages'] == ['home', 'offers']

    def test_testimonial_rating(self, app):
        from blueprints.admin.services import cms_service

        result = cms_service.create_testimonial({'guest_name': 'Ana', 'content': 'Lovely', 'rating': '6'})
        assert result['success'] is False
        result = cms_service.create_testimonial({'guest_name': 'Ana', 'content': 'Lovely', 'rating': '4'})
        assert result['success'] is True

    def test_faq_required_fields(self, app):
        from blueprints.admin.services import cms_service

        result = cms_service.create_faq({'question': 'Parking?', 'answer': '', 'category': 'General'})
        assert result['success'] is False

    def test_delete_missing_faq(self, app):
        from blueprints.admin.services import cms_service

        assert cms_service.delete_faq(9999)['not_found'] is True


class TestOperationsService:
    """Properties, guests, room types and rooms."""

    def test_create_property(self, app):
        from blueprints.admin.services import operations_service
        from models.business_unit import get_business_unit_by_id

        result = operations_service.create_property({
            'name': 'Palawan Cove', 'display_name': 'Palawan Cove', 'city': 'El Nido',
            'latitude': '11.18', 'longitude': '119.39', 'is_published': 'on'
        })
        assert result['success'] is True
        assert get_business_unit_by_id(result['id'])['slug'] == 'palawan-cove'

    def test_property_invalid_coordinates(self, app):
        from blueprints.admin.services import operations_service

        result = operations_service.create_property({
            'name': 'Nowhere', 'display_name': 'Nowhere', 'city': 'X', 'latitude': '95', 'longitude': '0'
        })
        assert result['success'] is False

    def test_property_duplicate_slug(self, app, unit_id):
        from blueprints.admin.services import operations_service

        result = operations_service.create_property({
            'name': 'Test Resort', 'display_name': 'Another', 'city': 'Cebu'
        })
        assert result['success'] is False

    def test_delete_property_with_restaurant(self, app, demo_data):
        from blueprints.admin.services import operations_service

        result = operations_service.delete_property(1)
        assert result['success'] is False
        assert 'Cannot delete' in result['message']

    def test_guest_email_unique(self, app):
        from blueprints.admin.services import operations_service

        form = {'first_name': 'Lea', 'last_name': 'Cruz', 'email': 'Lea.Cruz@example.com'}
        assert operations_service.create_guest(form)['success'] is True
        result = operations_service.create_guest(dict(form, email='lea.cruz@example.com'))
        assert result['success'] is False

    def test_guest_invalid_email(self, app):
        from blueprints.admin.services import operations_service

        result = operations_service.create_guest({'first_name': 'A', 'last_name': 'B', 'email': 'nope'})
        assert result['success'] is False

    def test_toggle_vip(self, app, demo_data):
        from blueprints.admin.services import operations_service

        result = operations_service.toggle_guest_vip(2)
        assert result['value'] == 1
        assert result['field'] == 'vip_status'

    def test_room_takes_property_from_room_type(self, app, unit_id):
        from blueprints.admin.services import operations_service
        from models.room import get_room_by_id

        type_id = operations_service.create_room_type({
            'business_unit_id': str(unit_id), 'name': 'loft', 'display_name': 'Loft',
            'type': 'SUITE', 'base_rate': '7000', 'is_active': 'on'
        })['id']
        result = operations_service.create_room({'room_type_id': str(type_id), 'room_number': '501'})
        assert result['success'] is True
        assert get_room_by_id(result['id'])['business_unit_id'] == unit_id

        duplicate = operations_service.create_room({'room_type_id': str(type_id), 'room_number': '501'})
        assert duplicate['success'] is False

    def test_room_type_requires_rate(self, app, unit_id):
        from blueprints.admin.services import operations_service

        result = operations_service.create_room_type({
            'business_unit_id': str(unit_id), 'name': 'x', 'display_name': 'X'
        })
        assert result['success'] is False

    def test_update_room_status(self, app, demo_data):
        from blueprints.admin.services import operations_service

        result = operations_service.update_room_status(1, 'MAINTENANCE')
        assert result['success'] is True
        assert result['value'] == 'MAINTENANCE'
        assert operations_service.update_room_status(1, 'GONE')['success'] is False
        assert operations_service.update_room_status(9999, 'CLEANING')['not_found'] is True


class TestBookingService:
    """Reservation transitions, payments and export."""

    def test_confirm_provisional(self, app, demo_data):
        from blueprints.admin.services import booking_service

        result = booking_service.confirm_reservation(4)
        assert result['success'] is True
        assert result['value'] == 'CONFIRMED'

    def test_confirm_pending_fails(self, app, demo_data):
        from blueprints.admin.services import booking_service
        from models.reservation import get_reservation_by_id

        result = booking_service.confirm_reservation(2)
        assert result['success'] is False
        assert 'PENDING' in result['message']
        assert get_reservation_by_id(2)['status'] == 'PENDING'

    def test_confirm_confirmed_fails(self, app, demo_data):
        from blueprints.admin.services import booking_service
        from models.reservation import get_reservation_by_id

        result = booking_service.confirm_reservation(1)
        assert result['success'] is False
        assert get_reservation_by_id(1)['status'] == 'CONFIRMED'

    def test_cancel_blank_reason_uses_default(self, app, demo_data):
        from blueprints.admin.services import booking_service
        from models.reservation import get_reservation_by_id

        result = booking_service.cancel_reservation(2, '  ')
        assert result['success'] is True
        assert get_reservation_by_id(2)['cancellation_reason'] == 'Cancelled by admin'

    def test_missing_reservation(self, app):
        from blueprints.admin.services import booking_service

        assert booking_service.confirm_reservation(9999)['not_found'] is True
        assert booking_service.cancel_reservation(9999)['not_found'] is True

    def test_record_payment(self, app, demo_data):
        from blueprints.admin.services import booking_service
        from models.reservation import get_reservation_by_id

        result = booking_service.record_payment(3, {'amount': '5400', 'method': 'CASH',
                                                    'status': 'SUCCEEDED'})
        assert result['success'] is True
        assert get_reservation_by_id(3)['payment_status'] == 'PAID'

    def test_record_payment_bad_amount(self, app, demo_data):
        from blueprints.admin.services import booking_service

        assert booking_service.record_payment(3, {'amount': '-1'})['success'] is False

    @pytest.mark.parametrize('amount', ['nan', 'Infinity', '1e400'])
    def test_record_payment_non_finite_amount(self, app, demo_data, amount):
        from blueprints.admin.services import booking_service
        from models.reservation import get_reservation_by_id
        from utils.messages import MESSAGES

        result = booking_service.record_payment(3, {'amount': amount, 'status': 'PAID'})
        assert result['success'] is False
        assert result['message'] == MESSAGES['invalid_amount']
        assert get_reservation_by_id(3)['payment_status'] == 'PARTIAL'

    def test_refund(self, app, demo_data):
        from blueprints.admin.services import booking_service

        result = booking_service.refund_payment(1, 'Duplicate charge')
        assert result['success'] is True
        assert result['value'] == 'REFUNDED'
        again = booking_service.refund_payment(1)
        assert again['success'] is False
        assert 'not_found' not in again

    def test_actions_are_audited(self, app, demo_data):
        from blueprints.admin.services import booking_service
        from models.audit_log import get_audit_logs

        booking_service.confirm_reservation(4)
        logs = get_audit_logs(entity_type='reservation', entity_id=4)
        assert len(logs) == 1
        assert logs[0]['action'] == 'STATUS'
        assert logs[0]['changes'] == {'before': {'status': 'PROVISIONAL'},
                                      'after': {'status': 'CONFIRMED'}}

    def test_payments_workbook(self, app, demo_data):
        from blueprints.admin.services.booking_service import build_payments_workbook, EXPORT_HEADERS

        wb = load_workbook(build_payments_workbook())
        ws = wb.active
        assert ws.title == 'Payments'
        assert [cell.value for cell in ws[1]] == EXPORT_HEADERS
        assert ws.max_row == 3

    def test_payments_workbook_filtered(self, app, demo_data):
        from blueprints.admin.services.booking_service import build_payments_workbook

        ws = load_workbook(build_payments_workbook(method='GCASH')).active
        assert ws.max_row == 2
        assert ws.cell(row=2, column=5).value == 'Gcash'
