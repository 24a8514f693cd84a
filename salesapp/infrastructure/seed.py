"""
Seed Data
=========

Sample people and products inserted on startup (SEED_ON_STARTUP=true)
when the respective collections are empty.
"""
import logging
from decimal import Decimal

from salesapp.domain.models.person import Person
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.person_repository import PersonRepository
from salesapp.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SEED_PEOPLE = [
    {"name": "Ana Maria", "cpf": "11144477735", "address": "Rua A, 123"},
    {"name": "Carlos Silva", "cpf": "98765432100", "address": "Av. B, 456"},
]

SEED_PRODUCTS = [
    {"name": "Camiseta", "code": "CAM-001", "value": Decimal("59.90")},
    {"name": "Caneca", "code": "CNC-010", "value": Decimal("29.50")},
]


def seed_database(people: PersonRepository, products: ProductRepository) -> None:
    """Insert the sample data into empty repositories."""
    if people.count() == 0:
        for data in SEED_PEOPLE:
            people.create(Person(**data))
        logger.info("Seeded %d people", len(SEED_PEOPLE))

    if products.count() == 0:
        for data in SEED_PRODUCTS:
            products.create(Product(**data))
        logger.info("Seeded %d products", len(SEED_PRODUCTS))
