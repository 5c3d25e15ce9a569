"""
Hotel Group Admin - property management and marketing site
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, render_template, g
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import login_manager, csrf

# Import database functions
from database import close_db, init_db


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_class = config[config_name]
    if config_name == 'production':
        config_class.validate()

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_class)

    # Initialize extensions
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Register context processors
    register_context_processors(app)

    # Register teardown handlers
    register_teardown_handlers(app)

    # Configure logging
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    # Initialize Flask-Login
    login_manager.init_app(app)
    # Initialize CSRF Protection
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    # Import blueprints
    from blueprints.auth.routes import auth_bp
    from blueprints.admin import admin_bp
    from blueprints.public.routes import public_bp
    from blueprints.api.routes import api_bp

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(public_bp)
    app.register_blueprint(api_bp, url_prefix='/api')


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        return render_template('errors/500.html'), 500

    @app.errorhandler(403)
    def forbidden_error(error):
        """Handle 403 errors."""
        return render_template('errors/403.html'), 403


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize database with schema and seed data."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db()
        click.echo('Database initialized successfully!')

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Load demo properties, bookings and CMS content."""
        from database.demo import seed_demo_data

        with app.app_context():
            counts = seed_demo_data()
        for entity, count in counts.items():
            click.echo(f'  {entity}: {count}')
        click.echo('Demo data loaded.')

    @app.cli.command('create-user')
    @click.argument('username')
    @click.argument('email')
    @click.password_option()
    def create_user_command(username, email, password):
        """Create a new admin user."""
        from models.user import create_user
        from models.role import get_role_by_name

        with app.app_context():
            # Get admin role
            admin_role = get_role_by_name('admin')

            try:
                user_id = create_user(
                    username=username,
                    email=email,
                    password=password,
                    role_id=admin_role['id']
                )
                click.echo(f'User created successfully! ID: {user_id}')
            except Exception as e:
                click.echo(f'Error creating user: {str(e)}', err=True)


def register_context_processors(app):
    """Register template context processors."""

    @app.context_processor
    def utility_processor():
        """Inject utility functions into templates."""
        from flask_login import current_user
        from utils.permissions import get_menu_items, has_permission
        from utils.datetime_helpers import get_today

        def can(permission_code):
            return has_permission(current_user, permission_code)

        context = {
            'get_menu_items': get_menu_items,
            'can': can,
            'current_year': get_today().year,
            'app_name': app.config.get('APP_NAME', 'Hotel Group Admin'),
            'app_version': app.config.get('APP_VERSION', '1.0.0'),
            'badge_counts': {}
        }

        if current_user.is_authenticated:
            from models.reservation import get_reservation_counts
            try:
                context['badge_counts'] = get_reservation_counts(get_today())
            except Exception as e:
                app.logger.error(f"Error loading sidebar counts: {e}", exc_info=True)

        return context

    # Add custom template filters
    @app.template_filter('format_date')
    def format_date_filter(value, format='%b %d, %Y'):
        """Format date for display."""
        from utils.helpers import format_date
        return format_date(value, format)

    @app.template_filter('format_datetime')
    def format_datetime_filter(value, format='%b %d, %Y %H:%M'):
        """Format timestamp for display."""
        from utils.helpers import format_datetime
        return format_datetime(value, format)

    @app.template_filter('currency')
    def currency_filter(amount, currency=None):
        """1234.5 -> PHP 1,234.50"""
        from utils.helpers import format_currency
        return format_currency(amount, currency or app.config['DEFAULT_CURRENCY'])

    @app.template_filter('status_label')
    def status_label_filter(status):
        from utils.helpers import status_label
        return status_label(status)


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/hotel_admin.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Hotel Group Admin startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(host='0.0.0.0', debug=True)
