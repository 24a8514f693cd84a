"""
Shared fixtures: in-memory repositories, services and an API client
whose service dependencies point at those repositories.
"""
import os
from decimal import Decimal

os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from salesapp.api.v1.dependencies import get_order_service, get_person_service, get_product_service
from salesapp.application.services.order_service import OrderService
from salesapp.application.services.person_service import PersonService
from salesapp.application.services.product_service import ProductService
from salesapp.infrastructure.memory import (
    InMemoryOrderRepository,
    InMemoryPersonRepository,
    InMemoryProductRepository,
)
from salesapp.main import create_application

VALID_CPF = "11144477735"
OTHER_CPF = "98765432100"
THIRD_CPF = "12345678909"


@pytest.fixture
def person_repository():
    return InMemoryPersonRepository()


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def person_service(person_repository):
    return PersonService(person_repository)


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def order_service(order_repository, person_repository, product_repository):
    return OrderService(order_repository, person_repository, product_repository)


@pytest.fixture
def customer(person_service):
    return person_service.register_person(name="Ana Maria", cpf=VALID_CPF, address="Rua A, 123")


@pytest.fixture
def shirt(product_service):
    return product_service.register_product(name="Camiseta", code="CAM-001", value=Decimal("59.90"))


@pytest.fixture
def mug(product_service):
    return product_service.register_product(name="Caneca", code="CNC-010", value=Decimal("29.50"))


@pytest.fixture
def client(person_service, product_service, order_service):
    app = create_application()
    app.dependency_overrides[get_person_service] = lambda: person_service
    app.dependency_overrides[get_product_service] = lambda: product_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    return TestClient(app)
