"""
Search and registration flows.

Both flows only reclassify a geocoding miss into InvalidRequest; every other
error goes up to the caller unchanged.
"""
import logging
import uuid

from .distance import haversine
from .errors import GeocodeNotFound, InvalidRequest
from .models import School, SearchResult, SearchResults

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'street', 'city', 'state', 'country')
ADDRESS_FIELDS = ('street', 'city', 'state', 'country')


def search_schools(location, geocoder, repository):
    """
    Rank every school by distance from a free-text location.

    Args:
        location: Place or address typed by the user
        geocoder: Object with forward_geocode(address) -> (lat, lon)
        repository: Object with list_all() -> [School]

    Returns:
        SearchResults sorted nearest first
    """
    query = (location or '').strip()
    if not query:
        raise InvalidRequest('Location is required.')

    try:
        lat, lon = geocoder.forward_geocode(query)
    except GeocodeNotFound as e:
        raise InvalidRequest('No geocoding results found for this location.') from e

    schools = repository.list_all()

    enriched = [
        SearchResult(school=school,
                     distance=haversine(lat, lon, school.latitude, school.longitude))
        for school in schools
    ]
    # sorted() is stable, so equal distances keep repository order
    enriched = sorted(enriched, key=lambda result: result.distance)

    logger.info(f'Search for {query!r} resolved to ({lat}, {lon}), '
                f'{len(enriched)} schools ranked')
    return SearchResults(location=location, schools=enriched)


def compose_address(fields):
    """Join street, city, state and country into one display address"""
    return ', '.join(fields[key].strip() for key in ADDRESS_FIELDS)


def register_school(fields, geocoder, repository):
    """
    Geocode and store a new school.

    Args:
        fields: Mapping with name, street, city, state and country
        geocoder: Object with forward_geocode(address) -> (lat, lon)
        repository: Object with insert(school)

    Returns:
        The persisted School
    """
    missing = [key for key in REQUIRED_FIELDS if not (fields.get(key) or '').strip()]
    if missing:
        raise InvalidRequest(f"All fields are required. Missing: {', '.join(missing)}")

    full_address = compose_address(fields)
    school_id = str(uuid.uuid4())

    try:
        latitude, longitude = geocoder.forward_geocode(full_address)
    except GeocodeNotFound as e:
        raise InvalidRequest('Invalid address: unable to geocode.') from e

    school = School(
        id=school_id,
        name=fields['name'].strip(),
        address=full_address,
        latitude=latitude,
        longitude=longitude,
    )
    repository.insert(school)
    return school
