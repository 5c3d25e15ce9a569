"""
Demo content for local development.
Two properties with restaurants, rooms, guests, reservations, payments
and a set of CMS rows so the public site has something to render.
"""

import logging
from datetime import timedelta

from utils.datetime_helpers import get_today

logger = logging.getLogger(__name__)


PROPERTIES = [
    {
        'name': 'Boracay Shores Resort', 'display_name': 'Boracay Shores',
        'slug': 'boracay-shores', 'property_type': 'RESORT',
        'short_description': 'Beachfront resort on White Beach',
        'address': 'Station 1, White Beach', 'city': 'Malay', 'state': 'Aklan',
        'country': 'Philippines', 'latitude': 11.9674, 'longitude': 121.9248,
        'phone': '+63 36 288 1234', 'email': 'stay@boracayshores.ph',
        'is_published': 1, 'is_featured': 1, 'sort_order': 1,
        'primary_color': '#1A3A5C', 'secondary_color': '#F2C14E',
    },
    {
        'name': 'Makati City Hotel', 'display_name': 'Makati City Hotel',
        'slug': 'makati-city-hotel', 'property_type': 'HOTEL',
        'short_description': 'Business hotel in the Ayala district',
        'address': '6750 Ayala Avenue', 'city': 'Makati', 'state': 'Metro Manila',
        'country': 'Philippines', 'latitude': 14.5547, 'longitude': 121.0244,
        'phone': '+63 2 8888 1234', 'email': 'reservations@makaticityhotel.ph',
        'is_published': 1, 'sort_order': 2,
    },
]

RESTAURANTS = {
    'boracay-shores': [
        {'name': 'Sunset Grill', 'slug': 'sunset-grill', 'type': 'CASUAL_DINING',
         'cuisine': ['Filipino', 'Seafood'], 'features': ['Beachfront', 'Live music'],
         'operating_hours': {'daily': '11:00-22:00'}, 'price_range': '$$',
         'average_meal': 1200, 'is_published': 1, 'is_featured': 1},
        {'name': 'Coral Bar', 'slug': 'coral-bar', 'type': 'BAR',
         'cuisine': ['Cocktails'], 'features': ['Sunset view'],
         'operating_hours': {'daily': '16:00-01:00'}, 'price_range': '$$',
         'average_meal': 600, 'is_published': 1},
    ],
    'makati-city-hotel': [
        {'name': 'Ayala Kitchen', 'slug': 'ayala-kitchen', 'type': 'BUFFET',
         'cuisine': ['International', 'Filipino'], 'features': ['Breakfast buffet'],
         'operating_hours': {'daily': '06:00-22:00'}, 'price_range': '$$$',
         'average_meal': 2200, 'is_published': 1, 'is_featured': 1},
    ],
}

ROOM_TYPES = {
    'boracay-shores': [
        {'name': 'deluxe-ocean', 'display_name': 'Deluxe Ocean View', 'type': 'DELUXE',
         'base_rate': 8500, 'max_occupancy': 3, 'bed_configuration': '1 King',
         'has_balcony': 1, 'has_ocean_view': 1, 'rooms': ['101', '102', '103']},
        {'name': 'beach-villa', 'display_name': 'Beach Villa', 'type': 'VILLA',
         'base_rate': 18000, 'max_occupancy': 4, 'bed_configuration': '2 Queen',
         'has_living_area': 1, 'has_kitchenette': 1, 'rooms': ['V1', 'V2']},
    ],
    'makati-city-hotel': [
        {'name': 'standard', 'display_name': 'Standard Room', 'type': 'STANDARD',
         'base_rate': 5200, 'max_occupancy': 2, 'bed_configuration': '1 Queen',
         'rooms': ['1201', '1202', '1203', '1204']},
        {'name': 'executive-suite', 'display_name': 'Executive Suite', 'type': 'SUITE',
         'base_rate': 12500, 'max_occupancy': 2, 'bed_configuration': '1 King',
         'has_living_area': 1, 'rooms': ['2101']},
    ],
}

GUESTS = [
    {'first_name': 'Maria', 'last_name': 'Santos', 'email': 'maria.santos@example.com',
     'phone': '+63 917 555 0101', 'nationality': 'Filipino', 'country': 'Philippines',
     'vip_status': 1, 'preferences': ['High floor', 'Late checkout']},
    {'first_name': 'James', 'last_name': 'Walker', 'email': 'james.walker@example.com',
     'phone': '+44 20 7946 0958', 'nationality': 'British', 'country': 'United Kingdom'},
    {'first_name': 'Yuki', 'last_name': 'Tanaka', 'email': 'yuki.tanaka@example.com',
     'nationality': 'Japanese', 'country': 'Japan', 'preferences': ['Non-smoking']},
]

TESTIMONIALS = [
    {'guest_name': 'Maria S.', 'guest_country': 'Philippines', 'rating': 5,
     'content': 'The villa was spotless and the sunset dinner unforgettable.',
     'source': 'Google', 'is_featured': 1},
    {'guest_name': 'James W.', 'guest_country': 'United Kingdom', 'rating': 4,
     'content': 'Great location for meetings, friendly front desk.',
     'source': 'TripAdvisor', 'is_featured': 1},
]

FAQS = [
    {'category': 'Reservations', 'question': 'What time is check-in?',
     'answer': 'Check-in starts at 2:00 PM and check-out is until 12:00 NN.'},
    {'category': 'Reservations', 'question': 'Can I cancel my booking?',
     'answer': 'Free cancellation up to 48 hours before arrival.'},
    {'category': 'Payments', 'question': 'Which payment methods do you accept?',
     'answer': 'Credit and debit cards, bank transfer, GCash and Maya.'},
]


def seed_demo_data():
    """
    Insert demo rows through the model layer.

    Expects a freshly initialized database inside an app context.

    Returns:
        dict of inserted row counts per entity
    """
    from models.business_unit import create_business_unit
    from models.restaurant import create_restaurant
    from models.room_type import create_room_type
    from models.room import create_room
    from models.guest import create_guest
    from models.reservation import create_reservation, confirm_reservation
    from models.payment import create_payment
    from models.event import create_event
    from models.special_offer import create_special_offer
    from models.hero_slide import create_hero_slide
    from models.testimonial import create_testimonial
    from models.faq import create_faq
    from utils.form_helpers import calculate_savings

    today = get_today()
    counts = dict.fromkeys(['properties', 'restaurants', 'room_types', 'rooms', 'guests',
                            'reservations', 'payments', 'events', 'special_offers',
                            'hero_slides', 'testimonials', 'faqs'], 0)

    unit_ids = {}
    room_type_ids = {}
    for unit in PROPERTIES:
        unit_ids[unit['slug']] = create_business_unit(**unit)
        counts['properties'] += 1

    for slug, restaurants in RESTAURANTS.items():
        for restaurant in restaurants:
            create_restaurant(business_unit_id=unit_ids[slug], **restaurant)
            counts['restaurants'] += 1

    for slug, room_types in ROOM_TYPES.items():
        for room_type in room_types:
            data = dict(room_type)
            room_numbers = data.pop('rooms')
            type_id = create_room_type(business_unit_id=unit_ids[slug], **data)
            room_type_ids[data['name']] = type_id
            counts['room_types'] += 1
            for number in room_numbers:
                create_room(business_unit_id=unit_ids[slug], room_type_id=type_id,
                            room_number=number, floor=int(number[0]) if number[0].isdigit() else None)
                counts['rooms'] += 1

    guest_ids = [create_guest(**guest) for guest in GUESTS]
    counts['guests'] = len(guest_ids)

    # Confirmed stays are held as PROVISIONAL first, then confirmed
    bookings = [
        (unit_ids['boracay-shores'], guest_ids[0], today, today + timedelta(days=3),
         'deluxe-ocean', 'PROVISIONAL', True, 'CREDIT_CARD'),
        (unit_ids['boracay-shores'], guest_ids[1], today + timedelta(days=10),
         today + timedelta(days=14), 'beach-villa', 'PENDING', False, None),
        (unit_ids['makati-city-hotel'], guest_ids[2], today - timedelta(days=2), today,
         'standard', 'PROVISIONAL', True, 'GCASH'),
        (unit_ids['makati-city-hotel'], guest_ids[1], today + timedelta(days=20),
         today + timedelta(days=22), 'standard', 'PROVISIONAL', False, None),
    ]
    for unit_id, guest_id, check_in, check_out, type_name, status, confirm, method in bookings:
        reservation_id, _ = create_reservation(
            business_unit_id=unit_id,
            guest_id=guest_id,
            check_in_date=check_in,
            check_out_date=check_out,
            rooms=[{'room_type_id': room_type_ids[type_name]}],
            adults=2,
            status=status
        )
        counts['reservations'] += 1
        if confirm:
            confirm_reservation(reservation_id)
        if method:
            create_payment(reservation_id, amount=5000, method=method, status='SUCCEEDED')
            counts['payments'] += 1

    create_event(
        business_unit_id=unit_ids['boracay-shores'], title='Full Moon Beach Party',
        slug='full-moon-beach-party', type='ENTERTAINMENT', status='CONFIRMED',
        start_date=today + timedelta(days=7), end_date=today + timedelta(days=7),
        start_time='20:00', end_time='02:00', venue='White Beach', is_free=1,
        is_published=1, is_featured=1
    )
    create_event(
        business_unit_id=unit_ids['makati-city-hotel'], title='Wine Pairing Dinner',
        slug='wine-pairing-dinner', type='CELEBRATION', status='PLANNING',
        start_date=today + timedelta(days=21), end_date=today + timedelta(days=21),
        venue='Ayala Kitchen', is_free=0, ticket_price=3500, is_published=1
    )
    counts['events'] = 2

    savings_amount, savings_percent = calculate_savings(12000, 9000)
    create_special_offer(
        business_unit_id=unit_ids['boracay-shores'], title='Summer Escape',
        slug='summer-escape', type='SEASONAL', status='ACTIVE',
        offer_price=9000, original_price=12000, savings_amount=savings_amount,
        savings_percent=savings_percent, valid_from=today,
        valid_to=today + timedelta(days=60), is_published=1, is_featured=1
    )
    create_special_offer(
        title='Stay Longer, Save More', slug='stay-longer-save-more', type='PACKAGE_DEAL',
        status='ACTIVE', offer_price=15000, valid_from=today - timedelta(days=5),
        valid_to=today + timedelta(days=90), is_published=1
    )
    counts['special_offers'] = 2

    create_hero_slide(
        title='Wake up to the sea', subtitle='Boracay Shores Resort',
        primary_button_text='Explore', primary_button_url='/properties/boracay-shores',
        target_pages=['home'], is_featured=1, sort_order=1
    )
    create_hero_slide(
        title='Business, made easy', subtitle='Makati City Hotel',
        primary_button_text='View offers', primary_button_url='/offers',
        target_pages=[], sort_order=2
    )
    counts['hero_slides'] = 2

    for testimonial in TESTIMONIALS:
        create_testimonial(**testimonial)
    counts['testimonials'] = len(TESTIMONIALS)

    for order, faq in enumerate(FAQS, start=1):
        create_faq(sort_order=order, **faq)
    counts['faqs'] = len(FAQS)

    logger.info(f"Demo data seeded: {counts}")
    return counts
