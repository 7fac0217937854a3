import os

# Use in-memory SQLite for tests by default, unless TEST_DATABASE_URL is set
TEST_DB_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_URL", TEST_DB_URL)

from datetime import datetime
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from delivery_dispatch.database import Base, get_db
from delivery_dispatch.main import app
from delivery_dispatch.models import City, Customer, Driver, Restaurant, Delivery
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.services.distance import get_distance_sampler
from tests.fixtures.test_data import CITIES, DRIVERS, CUSTOMERS, RESTAURANTS, FixedDistanceSampler


@pytest.fixture
async def test_engine():
    """Per-test database engine."""
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False} if "sqlite" in TEST_DB_URL else {},
        poolclass=StaticPool if "sqlite" in TEST_DB_URL else None,
    )
    
    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        
    yield engine
    
    # Drop tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Function-scoped fresh DB session."""
    session_maker = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def repository(db_session) -> DispatchRepository:
    return DispatchRepository(db_session)


@pytest.fixture
def sampler() -> FixedDistanceSampler:
    return FixedDistanceSampler(7.5)


@pytest.fixture
async def client(db_session, sampler) -> AsyncGenerator[AsyncClient, None]:
    """Test client with overrides for get_db and the distance sampler."""
    async def override_get_db():
        yield db_session
        
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_distance_sampler] = lambda: sampler
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
        
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_data(db_session) -> dict:
    """Five cities with their drivers, customers and restaurants, keyed by name."""
    cities = {name: City(name=name) for name in CITIES}
    db_session.add_all(cities.values())
    await db_session.flush()
    
    # Flush one by one so identities follow registration order
    drivers = {}
    for name, city in DRIVERS:
        drivers[name] = Driver(name=name, city=cities[city])
        db_session.add(drivers[name])
        await db_session.flush()
    
    customers = {
        name: Customer(name=name, city=cities[city], address=address)
        for name, city, address in CUSTOMERS
    }
    restaurants = {
        name: Restaurant(name=name, city=cities[city], description=description)
        for name, city, description in RESTAURANTS
    }
    db_session.add_all(customers.values())
    db_session.add_all(restaurants.values())
    await db_session.commit()
    
    return {
        "cities": cities,
        "drivers": drivers,
        "customers": customers,
        "restaurants": restaurants,
    }


@pytest.fixture
def add_delivery(db_session):
    """Factory writing delivery history directly, bypassing assignment."""
    async def _add(
        driver: Driver,
        restaurant: Restaurant,
        customer: Customer,
        delivery_time: datetime,
        distance: float = 0.0,
    ) -> Delivery:
        delivery = Delivery(
            driver=driver,
            restaurant=restaurant,
            customer=customer,
            delivery_time=delivery_time,
            distance=distance,
        )
        db_session.add(delivery)
        await db_session.commit()
        return delivery
    
    return _add
