"""Test configuration and fixtures for the storefront application."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from storefront import create_app
from storefront.extensions import db
from storefront.models import Category, Enquiry, Product, User
from storefront.repositories.store import TableStore
from storefront.utils.crypto import hash_password


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,  # Disable CSRF for testing
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SESSION_COOKIE_SECURE': False,
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'CACHE_TYPE': 'NullCache',
        'WHATSAPP_PHONE_NUMBER': '919876543210',
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        # Cleanup
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def products(app: Flask) -> TableStore:
    return TableStore(db.session, Product)


@pytest.fixture
def categories(app: Flask) -> TableStore:
    return TableStore(db.session, Category)


@pytest.fixture
def enquiries(app: Flask) -> TableStore:
    return TableStore(db.session, Enquiry)


@pytest.fixture
def test_admin_user(app: Flask) -> User:
    """Create a test admin user."""
    admin_user = User(
        email='admin@example.com',
        password_hash=hash_password('adminpassword', rounds=4),
        is_admin=True,
        created_at=datetime.now(timezone.utc)
    )
    db.session.add(admin_user)
    db.session.commit()
    db.session.refresh(admin_user)
    return admin_user


@pytest.fixture
def test_staff_user(app: Flask) -> User:
    """A logged-in account without admin rights."""
    user = User(
        email='staff@example.com',
        password_hash=hash_password('staffpassword', rounds=4),
        is_admin=False,
    )
    db.session.add(user)
    db.session.commit()
    db.session.refresh(user)
    return user


@pytest.fixture
def test_category(app: Flask) -> Category:
    """Create a test category."""
    category = Category(
        name='Pottery',
        slug='pottery',
        description='Hand-thrown clay pieces',
        created_at=datetime.now(timezone.utc)
    )
    db.session.add(category)
    db.session.commit()
    db.session.refresh(category)
    return category


@pytest.fixture
def test_product(app: Flask, test_category: Category) -> Product:
    """Create a test product in the test category."""
    product = Product(
        name='Rose Vase',
        slug='rose-vase',
        description='A terracotta vase painted with roses.',
        price=25.0,
        offer_price=20.0,
        images=['https://cdn.example.com/rose-1.jpg', 'https://cdn.example.com/rose-2.jpg'],
        category_id=test_category.id,
        created_at=datetime.now(timezone.utc)
    )
    db.session.add(product)
    db.session.commit()
    db.session.refresh(product)
    return product


@pytest.fixture
def test_enquiry(app: Flask, test_product: Product) -> Enquiry:
    enquiry = Enquiry(
        product_id=test_product.id,
        status='pending',
        customer_name='Meera',
        customer_phone='9000000000',
    )
    db.session.add(enquiry)
    db.session.commit()
    db.session.refresh(enquiry)
    return enquiry


@pytest.fixture
def admin_client(client: FlaskClient, test_admin_user: User) -> FlaskClient:
    """Create a client with an authenticated admin session."""
    with client.session_transaction() as sess:
        sess['_user_id'] = str(test_admin_user.id)
        sess['_fresh'] = True
    return client


@pytest.fixture
def staff_client(client: FlaskClient, test_staff_user: User) -> FlaskClient:
    with client.session_transaction() as sess:
        sess['_user_id'] = str(test_staff_user.id)
        sess['_fresh'] = True
    return client


@pytest.fixture
def valid_product_body(test_category: Category) -> dict:
    return {
        'name': 'Jute Basket',
        'description': 'Woven by hand from natural jute.',
        'price': 9.99,
        'images': ['https://cdn.example.com/basket.jpg'],
        'category_id': test_category.hex_id,
    }
