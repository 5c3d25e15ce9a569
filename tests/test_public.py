"""
Public site and JSON API tests.
"""

import pytest


class TestPublicPages:
    """Marketing pages render from published content only."""

    @pytest.mark.parametrize('url', [
        '/',
        '/properties',
        '/restaurants',
        '/events',
        '/offers',
        '/locations',
        '/faqs',
    ])
    def test_pages_render(self, client, demo_data, url):
        response = client.get(url)
        assert response.status_code == 200

    def test_pages_render_without_content(self, client):
        for url in ('/', '/properties', '/restaurants', '/events', '/offers', '/locations', '/faqs'):
            assert client.get(url).status_code == 200

    def test_home_shows_slides_and_counts_views(self, client, demo_data):
        from models.hero_slide import get_hero_slide_by_id

        response = client.get('/')
        assert b'Wake up to the sea' in response.data
        assert b'Boracay Shores' in response.data
        assert get_hero_slide_by_id(1)['view_count'] == 1

    def test_property_detail(self, client, demo_data):
        response = client.get('/properties/boracay-shores')
        assert response.status_code == 200
        assert b'Sunset Grill' in response.data
        assert b'Full Moon Beach Party' in response.data

    def test_unpublished_property_is_404(self, client):
        from models.business_unit import create_business_unit

        create_business_unit(name='Hidden', display_name='Hidden', slug='hidden', city='Iloilo')
        assert client.get('/properties/hidden').status_code == 404
        assert client.get('/properties/no-such-place').status_code == 404

    def test_restaurant_detail_counts_views(self, client, demo_data):
        from models.restaurant import get_restaurant_by_slug

        response = client.get('/restaurants/sunset-grill')
        assert response.status_code == 200
        assert b'Beachfront' in response.data
        assert get_restaurant_by_slug('sunset-grill')['view_count'] == 1

    def test_restaurants_by_cuisine(self, client, demo_data):
        response = client.get('/restaurants/cuisine/Seafood')
        assert b'Sunset Grill' in response.data
        assert b'Ayala Kitchen' not in response.data

    def test_offers_show_savings(self, client, demo_data):
        response = client.get('/offers')
        assert b'Summer Escape' in response.data
        assert b'Save 25%' in response.data

    def test_locations_embed_maps(self, client, demo_data):
        response = client.get('/locations')
        assert response.data.count(b'<iframe') == 2

    def test_faq_category_filter(self, client, demo_data):
        response = client.get('/faqs?category=Payments')
        assert b'Which payment methods do you accept?' in response.data
        assert b'What time is check-in?' not in response.data

    def test_unknown_page(self, client):
        response = client.get('/no-such-page')
        assert response.status_code == 404


class TestApi:
    """JSON endpoints."""

    def test_health(self, client):
        data = client.get('/api/health').get_json()
        assert data['status'] == 'ok'
        assert data['version'] == '1.0.0'

    def test_properties(self, client, demo_data):
        data = client.get('/api/properties').get_json()
        assert data['success'] is True
        assert [p['slug'] for p in data['properties']] == ['boracay-shores', 'makati-city-hotel']

    def test_restaurants_by_property(self, client, demo_data):
        data = client.get('/api/restaurants?property_id=2').get_json()
        assert [r['name'] for r in data['restaurants']] == ['Ayala Kitchen']

    def test_restaurants_by_cuisine(self, client, demo_data):
        data = client.get('/api/restaurants?cuisine=cocktails').get_json()
        assert [r['name'] for r in data['restaurants']] == ['Coral Bar']

    def test_hero_click(self, client, demo_data):
        from models.hero_slide import get_hero_slide_by_id

        response = client.post('/api/hero/2/click')
        assert response.status_code == 200
        assert get_hero_slide_by_id(2)['click_count'] == 1

    def test_hero_view(self, client, demo_data):
        from models.hero_slide import get_hero_slide_by_id

        client.post('/api/hero/2/view')
        assert get_hero_slide_by_id(2)['view_count'] == 1

    def test_hero_missing_slide(self, client):
        response = client.post('/api/hero/9999/click')
        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_reservation_counts_requires_login(self, client):
        response = client.get('/api/reservations/counts')
        assert response.status_code in (302, 401)

    def test_reservation_counts(self, authenticated_client, demo_data):
        data = authenticated_client.get('/api/reservations/counts').get_json()
        assert data['data'] == {'pending': 1, 'check_ins_today': 1, 'check_outs_today': 1}
