import pytest
from protean.integrations.pytest import DomainFixture
from storefront.cart.store import CartStore
from storefront.checkout.form import CheckoutForm
from storefront.checkout.orchestrator import CheckoutOrchestrator
from storefront.remote.fake_adapter import FakeDatabase
from storefront.remote.service import RemoteService
from storefront.storage.memory_adapter import MemoryStore


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def memory_store():
    return MemoryStore()


@pytest.fixture()
def fake_database():
    return FakeDatabase()


@pytest.fixture()
def remote(fake_database):
    return RemoteService(fake_database)


@pytest.fixture()
def cart_store(memory_store):
    return CartStore(memory_store)


@pytest.fixture()
def checkout_form():
    return CheckoutForm()


@pytest.fixture()
def orchestrator(cart_store, checkout_form, remote):
    return CheckoutOrchestrator(cart_store, checkout_form, remote)
