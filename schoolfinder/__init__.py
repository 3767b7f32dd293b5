"""
School Finder Web Application Package
Register schools by address and find the ones nearest to a location
"""

__version__ = "1.0.0"

import atexit

from flask import Flask

from .config import Config


def create_app(config=Config, repository=None, geocoder=None):
    """
    Application factory function

    The repository and geocoder are built from config unless passed in.
    """
    from .db import close_pool, create_pool
    from .geocoding import MapboxGeocoder
    from .models import SchoolRepository
    from .routes import register_error_handlers, schools_bp

    app = Flask(__name__)

    if repository is None:
        pool = create_pool(config.db_config(), config.DB_POOL_MAX)
        atexit.register(close_pool, pool)
        repository = SchoolRepository(pool)
    if geocoder is None:
        geocoder = MapboxGeocoder(config.MAP_TOKEN, timeout=config.MAPBOX_TIMEOUT)

    app.extensions['school_repository'] = repository
    app.extensions['geocoder'] = geocoder

    app.register_blueprint(schools_bp)
    register_error_handlers(app)
    return app
