"""Tests for the search and registration flows."""

import uuid

import pytest

from conftest import FakeGeocoder, InMemoryRepository
from schoolfinder.errors import (GeocodeNotFound, GeocodeServiceError,
                                 InvalidRequest, StorageError)
from schoolfinder.models import School
from schoolfinder.services import compose_address, register_school, search_schools

VALID_FIELDS = {
    'name': 'Test School',
    'street': '1 Infinite Loop',
    'city': 'Cupertino',
    'state': 'CA',
    'country': 'USA',
}


# ============================================
# Search
# ============================================

def test_search_sorts_nearest_first(repository, sample_schools):
    geocoder = FakeGeocoder(results={'Cupertino': (37.33, -122.03)})

    results = search_schools('Cupertino', geocoder, repository)

    assert results.location == 'Cupertino'
    assert [r.school.id for r in results.schools] == ['s-cup', 's-sf', 's-ny']
    assert len(results.schools) == len(sample_schools)
    distances = [r.distance for r in results.schools]
    assert distances == sorted(distances)


def test_search_ties_keep_repository_order():
    schools = [School(str(i), f'School {i}', 'addr', 10.0, 10.0) for i in range(5)]
    geocoder = FakeGeocoder(default=(0.0, 0.0))

    results = search_schools('Origin', geocoder, InMemoryRepository(schools))

    assert [r.school.id for r in results.schools] == ['0', '1', '2', '3', '4']


def test_search_with_no_schools_returns_empty_list():
    results = search_schools('Cupertino', FakeGeocoder(default=(1.0, 1.0)), InMemoryRepository())

    assert results.schools == []


@pytest.mark.parametrize('location', [None, '', '   '])
def test_search_requires_location_before_geocoding(location, repository):
    geocoder = FakeGeocoder(default=(1.0, 1.0))

    with pytest.raises(InvalidRequest, match='Location is required'):
        search_schools(location, geocoder, repository)
    assert geocoder.calls == []


def test_search_unknown_location_is_invalid_request(repository):
    with pytest.raises(InvalidRequest, match='No geocoding results'):
        search_schools('Atlantis', FakeGeocoder(), repository)


def test_search_geocode_service_error_propagates(repository):
    geocoder = FakeGeocoder(error=GeocodeServiceError('quota exceeded'))

    with pytest.raises(GeocodeServiceError):
        search_schools('Cupertino', geocoder, repository)


def test_search_storage_error_propagates(geocoder):
    repository = InMemoryRepository(error=StorageError('connection lost'))

    with pytest.raises(StorageError):
        search_schools('Cupertino', geocoder, repository)


# ============================================
# Registration
# ============================================

def test_compose_address_order():
    assert compose_address(VALID_FIELDS) == '1 Infinite Loop, Cupertino, CA, USA'


def test_register_school_persists_geocoded_record():
    geocoder = FakeGeocoder(default=(37.33, -122.03))
    repository = InMemoryRepository()

    school = register_school(VALID_FIELDS, geocoder, repository)

    assert repository.inserted == [school]
    assert school.name == 'Test School'
    assert school.address == '1 Infinite Loop, Cupertino, CA, USA'
    assert (school.latitude, school.longitude) == (37.33, -122.03)
    assert geocoder.calls == ['1 Infinite Loop, Cupertino, CA, USA']
    assert str(uuid.UUID(school.id)) == school.id


def test_register_school_generates_unique_ids():
    geocoder = FakeGeocoder(default=(37.33, -122.03))
    repository = InMemoryRepository()

    first = register_school(VALID_FIELDS, geocoder, repository)
    second = register_school(VALID_FIELDS, geocoder, repository)

    assert first.id != second.id


@pytest.mark.parametrize('missing', ['name', 'street', 'city', 'state', 'country'])
def test_register_school_requires_every_field(missing):
    fields = dict(VALID_FIELDS, **{missing: '  '})
    geocoder = FakeGeocoder(default=(37.33, -122.03))
    repository = InMemoryRepository()

    with pytest.raises(InvalidRequest, match=missing):
        register_school(fields, geocoder, repository)
    assert geocoder.calls == []
    assert repository.inserted == []


def test_register_school_unresolvable_address_inserts_nothing():
    repository = InMemoryRepository()

    with pytest.raises(InvalidRequest, match='unable to geocode'):
        register_school(VALID_FIELDS, FakeGeocoder(), repository)
    assert repository.inserted == []


def test_register_school_geocode_service_error_inserts_nothing():
    repository = InMemoryRepository()
    geocoder = FakeGeocoder(error=GeocodeServiceError('network down'))

    with pytest.raises(GeocodeServiceError):
        register_school(VALID_FIELDS, geocoder, repository)
    assert repository.inserted == []


def test_register_school_storage_error_propagates():
    repository = InMemoryRepository(error=StorageError('duplicate key'))

    with pytest.raises(StorageError):
        register_school(VALID_FIELDS, FakeGeocoder(default=(1.0, 2.0)), repository)


def test_geocode_not_found_is_a_user_error():
    assert GeocodeNotFound('x').is_user_error
    assert InvalidRequest('x').is_user_error
    assert not GeocodeServiceError('x').is_user_error
    assert not StorageError('x').is_user_error


def test_search_returns_location_as_typed(repository):
    geocoder = FakeGeocoder(results={'Cupertino': (37.33, -122.03)})

    results = search_schools('  Cupertino ', geocoder, repository)

    assert geocoder.calls == ['Cupertino']
    assert results.location == '  Cupertino '
