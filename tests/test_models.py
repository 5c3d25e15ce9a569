"""
Model layer tests.
Property guards, restaurant cuisine queries, hero slide visibility,
reservation state transitions and payment status bookkeeping.
"""

import pytest
from datetime import datetime, timedelta

from utils.datetime_helpers import get_today


@pytest.fixture
def booking(app, unit_id):
    """A pending two-night reservation at the test property."""
    from models.room_type import create_room_type
    from models.guest import create_guest
    from models.reservation import create_reservation

    room_type_id = create_room_type(business_unit_id=unit_id, name='garden', display_name='Garden Room',
                                    type='STANDARD', base_rate=4000, max_occupancy=2)
    guest_id = create_guest(first_name='Ana', last_name='Reyes', email='ana.reyes@example.com')
    today = get_today()
    reservation_id, confirmation_number = create_reservation(
        business_unit_id=unit_id,
        guest_id=guest_id,
        check_in_date=today + timedelta(days=5),
        check_out_date=today + timedelta(days=7),
        rooms=[{'room_type_id': room_type_id}]
    )
    return {
        'reservation_id': reservation_id,
        'confirmation_number': confirmation_number,
        'room_type_id': room_type_id,
        'guest_id': guest_id,
    }


class TestBusinessUnit:
    """Property queries and delete guard."""

    def test_format_location_hides_home_country(self):
        from models.business_unit import format_location

        unit = {'city': 'Makati', 'state': 'Metro Manila', 'country': 'Philippines'}
        assert format_location(unit) == 'Makati, Metro Manila'

    def test_format_location_keeps_foreign_country(self):
        from models.business_unit import format_location

        unit = {'city': 'Bali', 'state': '', 'country': 'Indonesia'}
        assert format_location(unit) == 'Bali, Indonesia'

    def test_format_header_location(self):
        from models.business_unit import format_header_location

        unit = {'address': '6750 Ayala Avenue', 'city': 'Makati', 'state': None}
        assert format_header_location(unit) == '6750 Ayala Avenue, Makati'

    def test_get_by_slug_published_only(self, app):
        from models.business_unit import create_business_unit, get_business_unit_by_slug

        create_business_unit(name='Draft Inn', display_name='Draft Inn', slug='draft-inn',
                             city='Bohol', is_published=0)
        assert get_business_unit_by_slug('draft-inn') is None
        assert get_business_unit_by_slug('draft-inn', published_only=False)['name'] == 'Draft Inn'

    def test_toggle_featured_returns_new_value(self, app, unit_id):
        from models.business_unit import toggle_business_unit_featured, get_business_unit_by_id

        assert toggle_business_unit_featured(unit_id) == 1
        assert get_business_unit_by_id(unit_id)['is_featured'] == 1
        assert toggle_business_unit_featured(unit_id) == 0

    def test_toggle_missing_returns_none(self, app):
        from models.business_unit import toggle_business_unit_active

        assert toggle_business_unit_active(9999) is None

    def test_delete_blocked_by_restaurant(self, app, unit_id):
        from models.business_unit import delete_business_unit
        from models.restaurant import create_restaurant

        create_restaurant(business_unit_id=unit_id, name='Lobby Cafe', slug='lobby-cafe', type='CAFE')
        with pytest.raises(ValueError):
            delete_business_unit(unit_id)

    def test_delete_cascades_content(self, app, unit_id):
        from models.business_unit import delete_business_unit, get_business_unit_by_id
        from models.event import create_event, get_all_events
        from models.special_offer import create_special_offer, get_all_special_offers

        today = get_today()
        create_event(business_unit_id=unit_id, title='Opening', slug='opening', type='CELEBRATION',
                     start_date=today, end_date=today)
        create_special_offer(business_unit_id=unit_id, title='Launch', slug='launch',
                             type='SEASONAL', offer_price=1000, valid_from=today, valid_to=today)

        assert delete_business_unit(unit_id) is True
        assert get_business_unit_by_id(unit_id) is None
        assert get_all_events() == []
        offers = get_all_special_offers()
        assert len(offers) == 1
        assert offers[0]['business_unit_id'] is None


class TestRestaurant:
    """Cuisine lists and view counter."""

    def test_cuisine_filter_is_case_insensitive(self, app, demo_data):
        from models.restaurant import get_restaurants_by_cuisine

        names = {r['name'] for r in get_restaurants_by_cuisine('filipino')}
        assert names == {'Sunset Grill', 'Ayala Kitchen'}

    def test_cuisines_are_distinct_and_sorted(self, app, demo_data):
        from models.restaurant import get_cuisines

        assert get_cuisines() == ['Cocktails', 'Filipino', 'International', 'Seafood']

    def test_json_columns_decoded(self, app, demo_data):
        from models.restaurant import get_restaurant_by_slug

        restaurant = get_restaurant_by_slug('sunset-grill')
        assert restaurant['features'] == ['Beachfront', 'Live music']
        assert restaurant['operating_hours'] == {'daily': '11:00-22:00'}

    def test_increment_views(self, app, demo_data):
        from models.restaurant import get_restaurant_by_slug, increment_restaurant_views

        restaurant = get_restaurant_by_slug('coral-bar')
        increment_restaurant_views(restaurant['id'])
        increment_restaurant_views(restaurant['id'])
        assert get_restaurant_by_slug('coral-bar')['view_count'] == restaurant['view_count'] + 2


class TestHeroSlide:
    """Active window and page targeting."""

    def test_target_pages(self, app):
        from models.hero_slide import create_hero_slide, get_active_hero_slides

        create_hero_slide(title='Everywhere', target_pages=[])
        create_hero_slide(title='Offers only', target_pages=['offers'])

        assert [s['title'] for s in get_active_hero_slides('home')] == ['Everywhere']
        assert {s['title'] for s in get_active_hero_slides('offers')} == {'Everywhere', 'Offers only'}

    def test_show_window(self, app):
        from models.hero_slide import create_hero_slide, get_active_hero_slides

        now = datetime(2026, 6, 15, 12, 0)
        create_hero_slide(title='Past', show_until='2026-06-01 00:00:00')
        create_hero_slide(title='Future', show_from='2026-07-01 00:00:00')
        create_hero_slide(title='Current', show_from='2026-06-01 00:00:00',
                          show_until='2026-06-30 23:59:59')

        assert [s['title'] for s in get_active_hero_slides('home', now=now)] == ['Current']

    def test_inactive_slide_hidden(self, app):
        from models.hero_slide import create_hero_slide, get_active_hero_slides

        create_hero_slide(title='Hidden', is_active=0)
        assert get_active_hero_slides('home') == []

    def test_counters(self, app):
        from models.hero_slide import (create_hero_slide, increment_hero_views,
                                       increment_hero_clicks, get_hero_slide_by_id)

        slide_id = create_hero_slide(title='Counted')
        assert increment_hero_views(slide_id) is True
        assert increment_hero_clicks(slide_id) is True
        slide = get_hero_slide_by_id(slide_id)
        assert slide['view_count'] == 1
        assert slide['click_count'] == 1

    def test_counter_missing_slide(self, app):
        from models.hero_slide import increment_hero_clicks

        assert increment_hero_clicks(9999) is False


class TestSpecialOffer:
    """Current offers and the status toggle."""

    def test_current_offers_respect_dates(self, app, unit_id):
        from models.special_offer import create_special_offer, get_current_offers

        today = get_today()
        create_special_offer(title='Now', slug='now', type='SEASONAL', offer_price=100,
                             status='ACTIVE', is_published=1,
                             valid_from=today, valid_to=today + timedelta(days=1))
        create_special_offer(title='Later', slug='later', type='SEASONAL', offer_price=100,
                             status='ACTIVE', is_published=1,
                             valid_from=today + timedelta(days=10), valid_to=today + timedelta(days=20))

        assert [o['title'] for o in get_current_offers(today)] == ['Now']

    def test_status_toggle(self, app):
        from models.special_offer import create_special_offer, toggle_special_offer_status

        today = get_today()
        offer_id = create_special_offer(title='Flip', slug='flip', type='SEASONAL', offer_price=100,
                                        status='EXPIRED', valid_from=today, valid_to=today)

        assert toggle_special_offer_status(offer_id) == 'ACTIVE'
        assert toggle_special_offer_status(offer_id) == 'INACTIVE'
        assert toggle_special_offer_status(9999) is None


class TestReservation:
    """Creation and confirm/cancel transitions."""

    def test_create_computes_totals(self, app, booking):
        from models.reservation import get_reservation_by_id

        reservation = get_reservation_by_id(booking['reservation_id'])
        assert reservation['status'] == 'PENDING'
        assert reservation['nights'] == 2
        assert reservation['total_amount'] == 8000
        assert reservation['payment_status'] == 'PENDING'
        assert reservation['confirmation_number'] == booking['confirmation_number']
        assert len(reservation['rooms']) == 1
        assert reservation['rooms'][0]['total_amount'] == 8000

    def test_create_requires_a_night(self, app, booking, unit_id):
        from models.reservation import create_reservation

        today = get_today()
        with pytest.raises(ValueError):
            create_reservation(business_unit_id=unit_id, guest_id=booking['guest_id'],
                               check_in_date=today, check_out_date=today,
                               rooms=[{'room_type_id': booking['room_type_id']}])

    def test_create_requires_rooms(self, app, booking, unit_id):
        from models.reservation import create_reservation

        today = get_today()
        with pytest.raises(ValueError):
            create_reservation(business_unit_id=unit_id, guest_id=booking['guest_id'],
                               check_in_date=today, check_out_date=today + timedelta(days=1),
                               rooms=[])

    def _hold(self, booking, unit_id, status='PROVISIONAL'):
        from models.reservation import create_reservation

        today = get_today()
        reservation_id, _ = create_reservation(
            business_unit_id=unit_id, guest_id=booking['guest_id'],
            check_in_date=today + timedelta(days=30), check_out_date=today + timedelta(days=31),
            rooms=[{'room_type_id': booking['room_type_id']}], status=status
        )
        return reservation_id

    def test_confirm_then_cancel(self, app, booking, unit_id):
        from models.reservation import confirm_reservation, cancel_reservation, get_reservation_by_id

        reservation_id = self._hold(booking, unit_id)
        assert confirm_reservation(reservation_id) == 'PROVISIONAL'
        reservation = get_reservation_by_id(reservation_id)
        assert reservation['status'] == 'CONFIRMED'
        assert reservation['confirmed_at'] is not None

        assert cancel_reservation(reservation_id, 'Guest request') == 'CONFIRMED'
        reservation = get_reservation_by_id(reservation_id)
        assert reservation['status'] == 'CANCELLED'
        assert reservation['cancellation_reason'] == 'Guest request'

    def test_confirm_twice_rejected(self, app, booking, unit_id):
        from models.reservation import confirm_reservation

        reservation_id = self._hold(booking, unit_id)
        confirm_reservation(reservation_id)
        with pytest.raises(ValueError):
            confirm_reservation(reservation_id)

    @pytest.mark.parametrize('status', ['PENDING', 'INQUIRY'])
    def test_only_provisional_can_be_confirmed(self, app, booking, unit_id, status):
        from models.reservation import confirm_reservation, get_reservation_by_id

        reservation_id = self._hold(booking, unit_id, status=status)
        with pytest.raises(ValueError):
            confirm_reservation(reservation_id)
        reservation = get_reservation_by_id(reservation_id)
        assert reservation['status'] == status
        assert reservation['confirmed_at'] is None

    def test_cancel_default_reason(self, app, booking):
        from models.reservation import cancel_reservation, get_reservation_by_id
        from utils.messages import MESSAGES

        cancel_reservation(booking['reservation_id'])
        reservation = get_reservation_by_id(booking['reservation_id'])
        assert reservation['cancellation_reason'] == MESSAGES['cancelled_by_admin']

        with pytest.raises(ValueError):
            cancel_reservation(booking['reservation_id'])

    def test_transition_missing_reservation(self, app):
        from models.reservation import confirm_reservation, cancel_reservation

        with pytest.raises(LookupError):
            confirm_reservation(9999)
        with pytest.raises(LookupError):
            cancel_reservation(9999)

    def test_counts(self, app, demo_data):
        from models.reservation import get_reservation_counts

        counts = get_reservation_counts(get_today())
        assert counts == {'pending': 1, 'check_ins_today': 1, 'check_outs_today': 1}


class TestPayment:
    """Payment status recalculation and refunds."""

    def test_partial_then_paid(self, app, booking):
        from models.payment import create_payment
        from models.reservation import get_reservation_by_id

        create_payment(booking['reservation_id'], amount=3000, method='CASH', status='SUCCEEDED')
        assert get_reservation_by_id(booking['reservation_id'])['payment_status'] == 'PARTIAL'

        create_payment(booking['reservation_id'], amount=5000, method='GCASH', status='PAID')
        assert get_reservation_by_id(booking['reservation_id'])['payment_status'] == 'PAID'

    def test_pending_payment_does_not_count(self, app, booking):
        from models.payment import create_payment
        from models.reservation import get_reservation_by_id

        create_payment(booking['reservation_id'], amount=8000, method='CASH')
        assert get_reservation_by_id(booking['reservation_id'])['payment_status'] == 'PENDING'

    def test_refund_marks_reservation_refunded(self, app, booking):
        from models.payment import create_payment, refund_payment, get_payment_by_id
        from models.reservation import get_reservation_by_id

        payment_id = create_payment(booking['reservation_id'], amount=8000,
                                    method='CREDIT_CARD', status='SUCCEEDED')
        refund_payment(payment_id, 'Overbooked')

        payment = get_payment_by_id(payment_id)
        assert payment['status'] == 'REFUNDED'
        assert payment['refund_amount'] == 8000
        assert payment['refund_reason'] == 'Overbooked'
        assert get_reservation_by_id(booking['reservation_id'])['payment_status'] == 'REFUNDED'

    def test_refund_requires_settled_payment(self, app, booking):
        from models.payment import create_payment, refund_payment

        payment_id = create_payment(booking['reservation_id'], amount=1000, method='CASH')
        with pytest.raises(ValueError):
            refund_payment(payment_id)
        with pytest.raises(LookupError):
            refund_payment(9999)

    def test_paid_payment_cannot_be_refunded(self, app, booking):
        from models.payment import create_payment, refund_payment, get_payment_by_id

        payment_id = create_payment(booking['reservation_id'], amount=8000, method='CASH', status='PAID')
        with pytest.raises(ValueError):
            refund_payment(payment_id)
        assert get_payment_by_id(payment_id)['status'] == 'PAID'

    @pytest.mark.parametrize('amount', [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_amount_rejected(self, app, booking, amount):
        from models.payment import create_payment, get_all_payments

        with pytest.raises(ValueError):
            create_payment(booking['reservation_id'], amount=amount, method='CASH', status='SUCCEEDED')
        assert get_all_payments() == []

    def test_invalid_amount(self, app, booking):
        from models.payment import create_payment

        with pytest.raises(ValueError):
            create_payment(booking['reservation_id'], amount=0)

    def test_status_update_stamps_processed_at(self, app, booking):
        from models.payment import create_payment, update_payment_status, get_payment_by_id

        payment_id = create_payment(booking['reservation_id'], amount=1000, method='CASH')
        assert update_payment_status(payment_id, 'SUCCEEDED') == 'PENDING'
        assert get_payment_by_id(payment_id)['processed_at'] is not None

        with pytest.raises(ValueError):
            update_payment_status(payment_id, 'LOST')


class TestDeleteGuards:
    """Rows referenced by reservations cannot be deleted."""

    def test_guest_with_reservation(self, app, booking):
        from models.guest import delete_guest

        with pytest.raises(ValueError):
            delete_guest(booking['guest_id'])

    def test_room_type_with_reservation(self, app, booking):
        from models.room_type import delete_room_type

        with pytest.raises(ValueError):
            delete_room_type(booking['room_type_id'])

    def test_room_type_with_rooms(self, app, unit_id):
        from models.room_type import create_room_type, delete_room_type
        from models.room import create_room

        room_type_id = create_room_type(business_unit_id=unit_id, name='suite', display_name='Suite',
                                        type='SUITE', base_rate=9000)
        create_room(business_unit_id=unit_id, room_type_id=room_type_id, room_number='301')
        with pytest.raises(ValueError):
            delete_room_type(room_type_id)

    def test_room_status_validated(self, app, unit_id):
        from models.room_type import create_room_type
        from models.room import create_room, update_room_status, get_room_by_id

        room_type_id = create_room_type(business_unit_id=unit_id, name='twin', display_name='Twin',
                                        type='STANDARD', base_rate=3000)
        room_id = create_room(business_unit_id=unit_id, room_type_id=room_type_id, room_number='201')

        assert update_room_status(room_id, 'CLEANING') is True
        assert get_room_by_id(room_id)['status'] == 'CLEANING'
        with pytest.raises(ValueError):
            update_room_status(room_id, 'BROKEN')


class TestDashboard:
    """Dashboard summary."""

    def test_summary(self, app, demo_data):
        from models.dashboard import get_dashboard_summary

        summary = get_dashboard_summary(get_today(), recent_limit=2)
        assert summary['counts']['properties'] == 2
        assert summary['counts']['rooms'] == 10
        assert summary['counts']['reservations'] == 4
        assert summary['payment_totals']['collected'] == 10000
        assert summary['rooms_by_status'] == {'AVAILABLE': 10}
        assert len(summary['recent_reservations']) == 2
