"""
Fire Risk Dashboard - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask
from firerisk.extensions import db
from firerisk.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    # the generator and the data route must resolve the same directory
    app.config['DATA_DIR'] = os.path.abspath(app.config['DATA_DIR'])
    
    # Initialize extensions
    db.init_app(app)
    
    # Register blueprints
    from firerisk.dashboard import dashboard_bp
    app.register_blueprint(dashboard_bp)
    
    # Create database tables
    with app.app_context():
        from firerisk import models  # noqa: F401
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and \
                not app.config['SQLALCHEMY_DATABASE_URI'].endswith(':memory:'):
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()
    
    return app
