import pytest

from repositories.customer_repo import CustomerRepository
from tests.fakes import FakeDatabase


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def repo(fake_db):
    return CustomerRepository(fake_db)
