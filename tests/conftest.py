"""Shared fixtures: small in-memory datasets for the product table."""
import pytest

from src.models import Category, FilterState, Product, User
from src.services import join_products


@pytest.fixture
def users():
    return [
        User(id=1, name="Roma", gender="male"),
        User(id=2, name="Anna", gender="female"),
        User(id=3, name="Max", gender="male"),
    ]


@pytest.fixture
def categories():
    return [
        Category(id=1, name="Grocery", icon="🍞", owner_id=2),
        Category(id=2, name="Drinks", icon="🍺", owner_id=1),
        Category(id=3, name="Electronics", icon="💻", owner_id=1),
        Category(id=4, name="Clothes", icon="👚", owner_id=3),
    ]


@pytest.fixture
def products():
    return [
        Product(id=1, name="Milk", category_id=2),
        Product(id=2, name="Bread", category_id=1),
        Product(id=3, name="Eggs", category_id=1),
        Product(id=4, name="Jacket", category_id=4),
        Product(id=5, name="Sugar", category_id=1),
        Product(id=6, name="Beer", category_id=2),
        Product(id=7, name="Laptop", category_id=3),
        Product(id=8, name="Phone", category_id=3),
    ]


@pytest.fixture
def views(products, categories, users):
    return join_products(products, categories, users)


@pytest.fixture
def state():
    return FilterState()


@pytest.fixture
def example_data():
    """The single-user Electronics example: Max owns Phone and Table."""
    users = [User(id=1, name="Max", gender="male")]
    categories = [Category(id=1, name="Electronics", icon="💻", owner_id=1)]
    products = [
        Product(id=1, name="Phone", category_id=1),
        Product(id=2, name="Table", category_id=1),
    ]
    return users, categories, products
