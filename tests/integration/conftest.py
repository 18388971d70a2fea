import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.depends import get_session
from src.domain.company import Company
from src.domain.customer import Customer
from src.domain.product import Product


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create an in-memory SQLite engine shared by every session of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def seed_data(db_session):
    """
    Company 1 (18% GST), customer "Asha Enterprises" and three products:
    Steel bracket 100.00, Hinge set 50.00, Door handle 75.00
    """
    company = Company(name="Sharma Traders", gst_rate=Decimal("18.00"))
    db_session.add(company)
    await db_session.commit()

    customer = Customer(company_id=company.id, name="Asha Enterprises")
    products = [
        Product(company_id=company.id, name="Steel bracket", price=Decimal("100.00")),
        Product(company_id=company.id, name="Hinge set", price=Decimal("50.00")),
        Product(company_id=company.id, name="Door handle", price=Decimal("75.00")),
    ]
    db_session.add(customer)
    db_session.add_all(products)
    await db_session.commit()

    return {
        "company": company,
        "customer": customer,
        "products": products,
    }


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
