from flask import Flask, render_template
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
from flask_migrate import Migrate
import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Initialize Flask extensions
db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.login_message_category = 'info'
login_manager.login_message = 'Please sign in to continue.'
csrf = CSRFProtect()
migrate = Migrate()

def create_app(test_config=None):
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'default_secret_key_for_development')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URI', 'sqlite:///donorlink.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['WTF_CSRF_ENABLED'] = True
    app.config['DONOR_SEARCH_PER_PAGE'] = int(os.getenv('DONOR_SEARCH_PER_PAGE', 20))
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')

    if test_config is not None:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)
    migrate.init_app(app, db)

    # Register blueprints
    from donorlink.routes.auth import auth
    from donorlink.routes.donor import donor
    from donorlink.routes.admin import admin
    from donorlink.routes.main import main

    app.register_blueprint(auth, url_prefix='/auth')
    app.register_blueprint(donor, url_prefix='/donor')
    app.register_blueprint(admin, url_prefix='/admin')
    app.register_blueprint(main)

    from donorlink.utils.auth_context import init_auth_context
    from donorlink.utils.dates import format_long_date
    init_auth_context(app)
    app.add_template_filter(format_long_date, 'long_date')

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html', title='Page Not Found'), 404

    from donorlink.cli import register_commands
    register_commands(app)

    # Create database tables
    with app.app_context():
        from donorlink import models  # noqa: F401
        db.create_all()

    return app
