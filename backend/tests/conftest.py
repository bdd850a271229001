"""
Pytest fixtures and configuration for Store Admin tests

Provides an in-memory SQLite database, the FastAPI app wired to it, an
httpx-backed ResourceApiClient talking to that app, and fakes for the
dashboard's router.
"""
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from store_admin import models
from store_admin.connectors.resource_api import ResourceApiClient
from store_admin.core.database import Base, get_db
from store_admin.domain.context import DashboardContext
from store_admin.main import create_app


@pytest.fixture
def engine():
    """
    Fresh in-memory database per test

    StaticPool keeps one connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def app(session_factory):
    """FastAPI app whose get_db dependency uses the test database"""
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest_asyncio.fixture
async def api_client(app):
    """ResourceApiClient sending real HTTP requests to the test app"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield ResourceApiClient(base_url="http://testserver", client=http)


@pytest.fixture
def store_id():
    return "store-1"


@pytest.fixture
def context(store_id):
    return DashboardContext(store_id=store_id)


class RecordingRouter:
    """Router fake that records navigation"""

    def __init__(self):
        self.refreshes = 0
        self.pushes = []

    def refresh(self):
        self.refreshes += 1

    def push(self, href):
        self.pushes.append(href)


@pytest.fixture
def router():
    return RecordingRouter()


class Seeder:
    """Inserts rows straight through the ORM"""

    def __init__(self, session, store_id):
        self.session = session
        self.store_id = store_id

    def _save(self, row):
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def billboard(self, label="Summer Sale", image_url="https://cdn.example.com/summer.png", store_id=None):
        return self._save(models.Billboard(store_id=store_id or self.store_id, label=label, image_url=image_url))

    def category(self, billboard, name="Vitamins"):
        return self._save(models.Category(store_id=billboard.store_id, billboard_id=billboard.id, name=name))

    def size(self, name="Small", value="S"):
        return self._save(models.Size(store_id=self.store_id, name=name, value=value))

    def color(self, name="Red", value="#FF0000"):
        return self._save(models.Color(store_id=self.store_id, name=name, value=value))

    def product(self, category, size, color, name="Vitamin C 500mg", price="15000", images=()):
        product = models.Product(
            store_id=self.store_id,
            category_id=category.id,
            size_id=size.id,
            color_id=color.id,
            name=name,
            price=Decimal(price),
            images=[models.Image(url=url) for url in images],
        )
        return self._save(product)

    def order(self, products, phone="0812345678", address="Jl. Merdeka 1", is_paid=True):
        order = models.Order(
            store_id=self.store_id,
            phone=phone,
            address=address,
            is_paid=is_paid,
            items=[models.OrderItem(product_id=product.id) for product in products],
        )
        return self._save(order)


@pytest.fixture
def seed(db_session, store_id):
    return Seeder(db_session, store_id)


@pytest.fixture
def created_at():
    return datetime(2025, 10, 3, 9, 30, tzinfo=timezone.utc)
