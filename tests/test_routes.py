"""
Admin route tests.
Authentication, list/form pages and the JSON action endpoints used by
the list page scripts.
"""

import pytest
from datetime import timedelta

from utils.datetime_helpers import get_today


JSON_HEADERS = {'Accept': 'application/json'}


class TestAuthentication:
    """Login, logout and protected pages."""

    def test_login_page(self, client):
        response = client.get('/login')
        assert response.status_code == 200
        assert b'password' in response.data

    @pytest.mark.parametrize('url', [
        '/admin/',
        '/admin/audit',
        '/admin/cms/events',
        '/admin/cms/hero',
        '/admin/operations/reservations',
        '/admin/operations/payments/export',
    ])
    def test_protected_routes_redirect(self, client, url):
        response = client.get(url, follow_redirects=False)
        assert response.status_code == 302
        assert '/login' in response.headers['Location']

    def test_invalid_credentials(self, client):
        response = client.post('/login', data={'username': 'admin', 'password': 'wrong'},
                               follow_redirects=True)
        assert b'Invalid username or password' in response.data

    def test_login_lands_on_dashboard(self, client):
        response = client.post('/login', data={'username': 'admin', 'password': 'admin123'},
                               follow_redirects=True)
        assert response.status_code == 200
        assert b'Dashboard' in response.data

    def test_logout(self, authenticated_client):
        response = authenticated_client.get('/logout', follow_redirects=True)
        assert b'You have been signed out' in response.data


class TestAdminPages:
    """Every list page renders for an administrator."""

    @pytest.mark.parametrize('url', [
        '/admin/',
        '/admin/audit',
        '/admin/cms/hero',
        '/admin/cms/events',
        '/admin/cms/special-offers',
        '/admin/cms/testimonials',
        '/admin/cms/faqs',
        '/admin/operations/properties',
        '/admin/operations/restaurants',
        '/admin/operations/room-types',
        '/admin/operations/rooms',
        '/admin/operations/guests',
        '/admin/operations/reservations',
        '/admin/operations/payments',
    ])
    def test_list_pages(self, authenticated_client, demo_data, url):
        response = authenticated_client.get(url)
        assert response.status_code == 200

    @pytest.mark.parametrize('url', [
        '/admin/cms/hero/create',
        '/admin/cms/events/create',
        '/admin/cms/special-offers/create',
        '/admin/cms/testimonials/create',
        '/admin/cms/faqs/create',
        '/admin/operations/properties/create',
        '/admin/operations/restaurants/create',
        '/admin/operations/room-types/create',
        '/admin/operations/rooms/create',
        '/admin/operations/guests/create',
    ])
    def test_create_forms(self, authenticated_client, demo_data, url):
        response = authenticated_client.get(url)
        assert response.status_code == 200
        assert b'<form' in response.data

    def test_detail_pages(self, authenticated_client, demo_data):
        assert authenticated_client.get('/admin/operations/reservations/1').status_code == 200
        assert authenticated_client.get('/admin/operations/payments/1').status_code == 200
        assert authenticated_client.get('/admin/operations/guests/1').status_code == 200

    def test_detail_pages_offer_valid_transitions(self, authenticated_client, demo_data):
        pending = authenticated_client.get('/admin/operations/reservations/2')
        assert b'/reservations/2/confirm' not in pending.data
        assert b'/reservations/2/cancel' in pending.data

        provisional = authenticated_client.get('/admin/operations/reservations/4')
        assert b'/reservations/4/confirm' in provisional.data

        succeeded = authenticated_client.get('/admin/operations/payments/1')
        assert b'/payments/1/refund' in succeeded.data

    def test_missing_reservation_redirects(self, authenticated_client):
        response = authenticated_client.get('/admin/operations/reservations/9999')
        assert response.status_code == 302

    def test_reservation_search(self, authenticated_client, demo_data):
        response = authenticated_client.get('/admin/operations/reservations?search=Tanaka')
        assert b'Tanaka' in response.data
        assert b'Walker' not in response.data


class TestFormPosts:
    """Create/edit flows through the WTForms pages."""

    def test_create_faq(self, authenticated_client):
        from models.faq import get_all_faqs

        response = authenticated_client.post('/admin/cms/faqs/create', data={
            'question': 'Is parking free?',
            'answer': 'Yes, for hotel guests.',
            'category': 'General',
            'is_active': 'y',
        }, follow_redirects=True)

        assert response.status_code == 200
        assert b'FAQ created successfully' in response.data
        assert [faq['question'] for faq in get_all_faqs()] == ['Is parking free?']

    def test_create_faq_missing_answer(self, authenticated_client):
        from models.faq import get_all_faqs

        response = authenticated_client.post('/admin/cms/faqs/create', data={
            'question': 'Is parking free?',
            'category': 'General',
        })

        assert response.status_code == 200
        assert b'Answer is required' in response.data
        assert get_all_faqs() == []

    def test_edit_missing_event_redirects(self, authenticated_client):
        response = authenticated_client.get('/admin/cms/events/9999/edit')
        assert response.status_code == 302

    def test_form_post_action_flashes(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/reservations/4/confirm',
                                             follow_redirects=True)
        assert b'Reservation confirmed successfully' in response.data


class TestJsonActions:
    """Toggle, delete and state actions called with fetch()."""

    def test_toggle_returns_new_value(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/properties/2/toggle-featured',
                                             json={}, headers=JSON_HEADERS)
        data = response.get_json()
        assert response.status_code == 200
        assert data['success'] is True
        assert data['field'] == 'is_featured'
        assert data['value'] == 1

    def test_toggle_missing_row(self, authenticated_client):
        response = authenticated_client.post('/admin/cms/events/9999/toggle-featured',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_offer_status_toggle(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/cms/special-offers/1/toggle-active',
                                             json={}, headers=JSON_HEADERS)
        assert response.get_json()['value'] == 'INACTIVE'

    def test_delete(self, authenticated_client, demo_data):
        from models.testimonial import get_all_testimonials

        response = authenticated_client.post('/admin/cms/testimonials/1/delete',
                                             json={}, headers=JSON_HEADERS)
        assert response.get_json()['success'] is True
        assert len(get_all_testimonials()) == 1

    def test_delete_guarded(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/guests/1/delete',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 400
        assert 'reservations' in response.get_json()['message']

    def test_confirm_and_cancel(self, authenticated_client, demo_data):
        from models.reservation import get_reservation_by_id

        response = authenticated_client.post('/admin/operations/reservations/4/confirm',
                                             json={}, headers=JSON_HEADERS)
        assert response.get_json()['value'] == 'CONFIRMED'

        response = authenticated_client.post('/admin/operations/reservations/4/cancel',
                                             json={'reason': 'Flight cancelled'}, headers=JSON_HEADERS)
        assert response.get_json()['value'] == 'CANCELLED'
        assert get_reservation_by_id(4)['cancellation_reason'] == 'Flight cancelled'

    def test_confirm_invalid_transition(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/reservations/1/confirm',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 400
        assert 'CONFIRMED' in response.get_json()['message']

    def test_pending_reservation_cannot_be_confirmed(self, authenticated_client, demo_data):
        from models.reservation import get_reservation_by_id

        response = authenticated_client.post('/admin/operations/reservations/2/confirm',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 400
        assert get_reservation_by_id(2)['status'] == 'PENDING'

    def test_room_status(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/rooms/1/status',
                                             json={'status': 'CLEANING'}, headers=JSON_HEADERS)
        assert response.get_json()['value'] == 'CLEANING'

    def test_refund_flow(self, authenticated_client, demo_data):
        response = authenticated_client.post('/admin/operations/payments/1/refund',
                                             json={'reason': 'Guest complaint'}, headers=JSON_HEADERS)
        assert response.status_code == 200

        response = authenticated_client.post('/admin/operations/payments/1/refund',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 400

    def test_add_payment(self, authenticated_client, demo_data):
        from models.reservation import get_reservation_by_id

        response = authenticated_client.post('/admin/operations/reservations/2/payments',
                                             json={'amount': '1000', 'method': 'CASH',
                                                   'status': 'SUCCEEDED'},
                                             headers=JSON_HEADERS)
        assert response.get_json()['success'] is True
        assert get_reservation_by_id(2)['payment_status'] == 'PARTIAL'

    def test_unexpected_error_is_500(self, authenticated_client, demo_data, monkeypatch):
        from blueprints.admin.services import cms_service

        def boom(event_id):
            raise RuntimeError('disk full')

        monkeypatch.setattr(cms_service, 'toggle_event_featured', boom)
        response = authenticated_client.post('/admin/cms/events/1/toggle-featured',
                                             json={}, headers=JSON_HEADERS)
        assert response.status_code == 500
        assert response.get_json()['message'] == 'An error occurred while updating the event status'


class TestExportAndAudit:
    """Excel export and the audit trail page."""

    def test_payments_export(self, authenticated_client, demo_data):
        response = authenticated_client.get('/admin/operations/payments/export?status=SUCCEEDED')
        assert response.status_code == 200
        assert response.mimetype == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        assert 'payments_' in response.headers['Content-Disposition']
        assert response.data[:2] == b'PK'

    def test_audit_page_lists_actions(self, authenticated_client, demo_data):
        authenticated_client.post('/admin/operations/reservations/4/confirm',
                                  json={}, headers=JSON_HEADERS)
        response = authenticated_client.get('/admin/audit?entity_type=reservation')
        assert response.status_code == 200
        assert b'Reservation #4' in response.data
        assert b'CONFIRMED' in response.data


class TestPermissions:
    """Read-only users can look but not change."""

    @pytest.fixture
    def readonly_client(self, app, client):
        from models.user import create_user
        from models.role import get_role_by_name

        create_user(username='viewer', email='viewer@example.com', password='viewer123',
                    role_id=get_role_by_name('readonly')['id'])
        client.post('/login', data={'username': 'viewer', 'password': 'viewer123'})
        return client

    def test_can_view_list(self, readonly_client, demo_data):
        assert readonly_client.get('/admin/cms/events').status_code == 200

    def test_cannot_toggle(self, readonly_client, demo_data):
        response = readonly_client.post('/admin/cms/events/1/toggle-featured',
                                        json={}, headers=JSON_HEADERS)
        assert response.status_code == 403
        data = response.get_json()
        assert data['success'] is False
        assert data['message'] == 'You do not have permission to perform this action'

    def test_form_post_without_permission_renders_page(self, readonly_client, demo_data):
        response = readonly_client.post('/admin/cms/events/1/toggle-featured',
                                        headers={'Accept': 'text/html'})
        assert response.status_code == 403
        assert response.mimetype == 'text/html'

    def test_cannot_export(self, readonly_client, demo_data):
        assert readonly_client.get('/admin/operations/payments/export').status_code == 403

    def test_no_audit_access(self, readonly_client):
        assert readonly_client.get('/admin/audit').status_code == 403
