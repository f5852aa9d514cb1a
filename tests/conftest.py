import pytest
from fastapi.testclient import TestClient

from chem_inventory.api.v1.endpoints.chemicals import get_link_opener
from chem_inventory.core.rate_limit import limiter
from chem_inventory.db.store import get_store
from chem_inventory.main import app
from chem_inventory.services.inventory_store import InventoryStore
from tests.helpers import RecordingLinkOpener


@pytest.fixture(name="store")
def store_fixture():
    """Create a store seeded with the sample chemicals."""
    return InventoryStore.with_samples()


@pytest.fixture(name="link_opener")
def link_opener_fixture():
    return RecordingLinkOpener()


@pytest.fixture(name="client")
def client_fixture(store: InventoryStore, link_opener: RecordingLinkOpener):
    """Create a test client wired to the test store and link opener."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_link_opener] = lambda: link_opener
    limiter.enabled = False # Disable rate limiting for tests
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
    limiter.enabled = True
