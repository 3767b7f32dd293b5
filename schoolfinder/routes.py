"""
Web pages and JSON endpoints for listing, registering and searching schools
"""
import logging

from flask import (Blueprint, current_app, jsonify, redirect, render_template,
                   request, url_for)

from .errors import SchoolFinderError
from .services import register_school, search_schools

logger = logging.getLogger(__name__)

schools_bp = Blueprint('schools', __name__)


def get_repository():
    return current_app.extensions['school_repository']


def get_geocoder():
    return current_app.extensions['geocoder']


# ============================================
# Web Pages
# ============================================

@schools_bp.route('/')
def index():
    """Show all schools"""
    schools = get_repository().list_all()
    return render_template('index.html', schools=schools)


@schools_bp.route('/addSchool', methods=['GET'])
def add_school_form():
    """Add school form"""
    return render_template('new.html')


@schools_bp.route('/addSchool', methods=['POST'])
def add_school():
    """Register a school from the submitted form"""
    school = register_school(request.form, get_geocoder(), get_repository())
    logger.info(f'Registered school {school.name!r} at {school.address!r}')
    return redirect(url_for('schools.index'))


@schools_bp.route('/school/search')
def search_page():
    """Schools nearest to ?location="""
    results = search_schools(request.args.get('location'),
                             get_geocoder(), get_repository())
    return render_template('search_results.html',
                           schools=results.schools, location=results.location)


# ============================================
# API Endpoints
# ============================================

@schools_bp.route('/api/schools', methods=['GET'])
def api_list_schools():
    schools = get_repository().list_all()
    return jsonify({
        'count': len(schools),
        'schools': [school.to_dict() for school in schools],
    })


@schools_bp.route('/api/school/search', methods=['GET'])
def api_search_schools():
    """
    Rank schools by distance from a location
    Example: /api/school/search?location=Cupertino, CA
    """
    results = search_schools(request.args.get('location'),
                             get_geocoder(), get_repository())
    return jsonify(results.to_dict())


@schools_bp.route('/health', methods=['GET'])
def health():
    """Liveness check that also touches the database"""
    return jsonify({'status': 'ok', 'schools': get_repository().count()})


# ============================================
# Error Handlers
# ============================================

def _wants_json():
    return request.path.startswith('/api/')


def _error_response(status, message):
    if _wants_json():
        return jsonify({'error': message}), status
    return render_template('error.html', status=status, message=message), status


def handle_school_finder_error(error):
    if error.is_user_error:
        logger.info(f'Rejected request to {request.path}: {error.message}')
        return _error_response(400, error.message)

    logger.error(f'{error.kind.value} on {request.path}: {error.message}',
                 exc_info=error)
    return _error_response(500, 'Something went wrong. Please try again later.')


def not_found(error):
    return _error_response(404, 'Page Not Found')


def internal_error(error):
    logger.exception(f'Unhandled error on {request.path}')
    return _error_response(500, 'Something went wrong. Please try again later.')


def register_error_handlers(app):
    app.register_error_handler(SchoolFinderError, handle_school_finder_error)
    app.register_error_handler(404, not_found)
    app.register_error_handler(500, internal_error)
