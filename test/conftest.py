"""
Shared pytest configuration and fixtures for the provider tests.
"""

import pytest

from buildkit_provider.capabilities import Resource, DataSource, Function, CapabilityRegistry
from buildkit_provider.provider import BuildkitProvider


class ImageResource(Resource):
    type_name = "buildkit_image"

    def create(self, plan):
        return dict(plan, host=self.provider_data.buildkit_host)

    def read(self, state):
        return state

    def update(self, state, plan):
        return dict(state, **plan)

    def delete(self, state):
        return None


class ImageDataSource(DataSource):
    type_name = "buildkit_image_info"

    def read(self, arguments):
        return {"registries": list(self.provider_data.registry_addresses())}


class HostFunction(Function):
    type_name = "buildkit_host"

    def run(self, *arguments):
        return self.provider_data.buildkit_host


@pytest.fixture(scope="session")
def base_test_data():
    """
    Provides common raw configuration reused across test modules.
    """
    return {
        'buildkit_host': 'tcp://buildkitd:1234',
        'address': 'registry.example.com',
        'username': 'ci-bot',
        'password': 's3cr3t-value'
    }


@pytest.fixture
def auth_entry(base_test_data):
    """A complete registry_auth block."""
    return {
        'address': base_test_data['address'],
        'username': base_test_data['username'],
        'password': base_test_data['password']
    }


@pytest.fixture
def raw_config(base_test_data, auth_entry):
    """A complete raw provider configuration."""
    return {
        'buildkit_host': base_test_data['buildkit_host'],
        'registry_auth': [auth_entry]
    }


@pytest.fixture
def populated_registry():
    """Registry with one capability per category."""
    return CapabilityRegistry(
        resources=[ImageResource],
        data_sources=[ImageDataSource],
        functions=[HostFunction]
    )


@pytest.fixture
def provider():
    """Provider with the shipped (empty) registry."""
    return BuildkitProvider(version="1.2.3")


@pytest.fixture
def populated_provider(populated_registry):
    """Provider advertising the test capabilities."""
    return BuildkitProvider(version="1.2.3", registry=populated_registry)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


def pytest_collection_modifyitems(items):
    # Pytest marks for categorizing tests
    for item in items:
        item.add_marker(pytest.mark.unit)
