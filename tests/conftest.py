"""
Shared fixtures: an in-memory SQLite database, a FastAPI test client
bound to it, and a handful of reference rows sales can point at.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Brand, Category, Customer, Employee, Product

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def store(db):
    """Seed one brand, one category, two products, a customer and an employee."""
    brand = Brand(name="Levi's", country="USA")
    category = Category(name="Jeans")
    db.add_all([brand, category])
    db.flush()

    jeans = Product(
        name="501 Original",
        size="42",
        color="Blue",
        price=Decimal("29.99"),
        category_id=category.id,
        brand_id=brand.id,
    )
    jacket = Product(
        name="Trucker Jacket",
        size="M",
        color="Black",
        price=Decimal("89.90"),
        category_id=category.id,
        brand_id=brand.id,
    )
    customer = Customer(
        name="Ana Souza",
        cpf="123.456.789-09",
        phone="11999990000",
        email="ana@example.com",
    )
    employee = Employee(
        name="Carlos Lima",
        role="Sales Associate",
        email="carlos@store.example.com",
        hire_date=date(2023, 3, 1),
    )
    db.add_all([jeans, jacket, customer, employee])
    db.commit()

    return {
        "brand_id": brand.id,
        "category_id": category.id,
        "jeans_id": jeans.id,
        "jacket_id": jacket.id,
        "customer_id": customer.id,
        "employee_id": employee.id,
    }


@pytest.fixture
def past_date():
    return datetime.now(timezone.utc) - timedelta(hours=1)
