"""Pytest configuration and fixtures for testing."""

import pytest

from schoolfinder import create_app
from schoolfinder.errors import GeocodeNotFound
from schoolfinder.models import School


class FakeGeocoder:
    """Returns fixed coordinates per address and records every call."""

    def __init__(self, results=None, default=None, error=None):
        self.results = results or {}
        self.default = default
        self.error = error
        self.calls = []

    def forward_geocode(self, address):
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        if address in self.results:
            return self.results[address]
        if self.default is not None:
            return self.default
        raise GeocodeNotFound(f'No geocoding results for {address!r}')


class InMemoryRepository:
    """School repository backed by a list."""

    def __init__(self, schools=None, error=None):
        self.schools = list(schools or [])
        self.error = error
        self.inserted = []

    def list_all(self):
        if self.error is not None:
            raise self.error
        return list(self.schools)

    def insert(self, school):
        if self.error is not None:
            raise self.error
        self.inserted.append(school)
        self.schools.append(school)

    def count(self):
        return len(self.schools)


@pytest.fixture
def sample_schools():
    return [
        School(id='s-sf', name='Mission High', address='3750 18th St, San Francisco, CA, USA',
               latitude=37.7614, longitude=-122.4286),
        School(id='s-cup', name='Cupertino High', address='10100 Finch Ave, Cupertino, CA, USA',
               latitude=37.3195, longitude=-122.0094),
        School(id='s-ny', name='Stuyvesant High', address='345 Chambers St, New York, NY, USA',
               latitude=40.7178, longitude=-74.0139),
    ]


@pytest.fixture
def geocoder():
    return FakeGeocoder(default=(37.33, -122.03))


@pytest.fixture
def repository(sample_schools):
    return InMemoryRepository(sample_schools)


@pytest.fixture
def app(repository, geocoder):
    app = create_app(repository=repository, geocoder=geocoder)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
