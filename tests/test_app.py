"""
Test application factory and configuration.
"""

import pytest
from app import create_app
from config import ProductionConfig


class TestAppFactory:
    """Test Flask application factory."""

    def test_create_app_development(self):
        """Test app creation with development config."""
        app = create_app('development')
        assert app is not None
        assert app.config['DEBUG'] is True
        assert app.config['TESTING'] is False

    def test_create_app_test(self):
        """Test app creation with test config."""
        app = create_app('test')
        assert app.config['TESTING'] is True
        assert app.config['WTF_CSRF_ENABLED'] is False

    def test_app_has_blueprints(self):
        """Test that all blueprints are registered."""
        app = create_app('test')
        blueprint_names = list(app.blueprints.keys())

        assert 'auth' in blueprint_names
        assert 'admin' in blueprint_names
        assert 'public' in blueprint_names
        assert 'api' in blueprint_names

    def test_nested_admin_endpoints(self):
        """CMS and operations screens live under the admin blueprint."""
        app = create_app('test')
        endpoints = {rule.endpoint for rule in app.url_map.iter_rules()}

        assert 'admin.dashboard' in endpoints
        assert 'admin.cms.events' in endpoints
        assert 'admin.cms.special_offers_toggle_status' in endpoints
        assert 'admin.operations.reservations_confirm' in endpoints
        assert 'admin.operations.payments_export' in endpoints

    def test_app_has_extensions(self):
        """Test that extensions are initialized."""
        app = create_app('test')
        assert hasattr(app, 'login_manager')
        assert 'csrf' in app.extensions

    def test_cli_commands_registered(self):
        app = create_app('test')
        commands = app.cli.list_commands(None)
        assert 'init-db' in commands
        assert 'seed-demo' in commands
        assert 'create-user' in commands


class TestTemplateFilters:
    """Test the custom Jinja filters."""

    def test_currency(self, app):
        render = app.jinja_env.from_string
        assert render('{{ 1234.5|currency }}').render() == 'PHP 1,234.50'
        assert render("{{ 99|currency('USD') }}").render() == 'USD 99.00'
        assert render('{{ none|currency }}').render() == ''

    def test_status_label(self, app):
        render = app.jinja_env.from_string
        assert render("{{ 'CHECKED_IN'|status_label }}").render() == 'Checked In'

    def test_format_date(self, app):
        render = app.jinja_env.from_string
        assert render("{{ '2026-03-01'|format_date }}").render() == 'Mar 01, 2026'
        assert render("{{ ''|format_date }}").render() == ''


class TestAppConfiguration:
    """Test application configuration."""

    def test_locale_defaults(self, app):
        assert app.config['TIMEZONE'] == 'Asia/Manila'
        assert app.config['DEFAULT_CURRENCY'] == 'PHP'
        assert app.config['DEFAULT_COUNTRY'] == 'Philippines'
        assert app.config['CAROUSEL_INTERVAL_MS'] == 4000
        assert app.config['RECENT_RESERVATIONS_LIMIT'] == 10

    def test_production_requires_secret_key(self, monkeypatch):
        monkeypatch.delenv('SECRET_KEY', raising=False)
        with pytest.raises(ValueError, match='SECRET_KEY'):
            ProductionConfig.validate()

    def test_production_requires_long_secret_key(self, monkeypatch):
        monkeypatch.setenv('SECRET_KEY', 'short')
        with pytest.raises(ValueError, match='32 characters'):
            ProductionConfig.validate()

    def test_production_requires_database_path(self, monkeypatch):
        monkeypatch.setenv('SECRET_KEY', 'x' * 40)
        monkeypatch.delenv('DATABASE_PATH', raising=False)
        with pytest.raises(ValueError, match='DATABASE_PATH'):
            ProductionConfig.validate()

    def test_production_valid(self, monkeypatch):
        monkeypatch.setenv('SECRET_KEY', 'x' * 40)
        monkeypatch.setenv('DATABASE_PATH', '/tmp/hotel.db')
        ProductionConfig.validate()


class TestErrorHandlers:

    def test_404_page(self, client):
        response = client.get('/no-such-page')
        assert response.status_code == 404
        assert b'does not exist' in response.data
