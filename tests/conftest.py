import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from leave_tracker.database import Base, get_db
from leave_tracker.main import app
from leave_tracker.models import Branch, Employee, EmployeeSchedule
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FULL_TIME_WEEK = {"mon": 8, "tue": 8, "wed": 8, "thu": 8, "fri": 8, "sat": 0, "sun": 0}

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    # Use sessionmaker with the active connection
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

def _insert_employee(db_session, branch, first_name="Alice", last_name="Smith", weekly_hours=None, allowed=224.0):
    """Insert an active employee with one schedule row per ISO weekday."""
    weekly_hours = weekly_hours or FULL_TIME_WEEK
    keys = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
    employee = Employee(
        branch_id=branch.id,
        first_name=first_name,
        last_name=last_name,
        allowed_holiday_hours=allowed,
        is_active=True,
        schedule=[EmployeeSchedule(weekday=i, hours=weekly_hours.get(k, 0)) for i, k in enumerate(keys, start=1)],
    )
    db_session.add(employee)
    db_session.commit()
    return employee

@pytest.fixture(scope="function")
def branch(db_session):
    """Create a default branch for tests."""
    branch = Branch(name="Careplus Chemist")
    db_session.add(branch)
    db_session.commit()
    return branch

@pytest.fixture(scope="function")
def employee(db_session, branch):
    """Full-time employee: 8h Monday to Friday, 224h allowance."""
    return _insert_employee(db_session, branch)

@pytest.fixture(scope="function")
def employee_factory(db_session):
    """Build extra employees: employee_factory(branch, first_name=..., weekly_hours=...)."""
    def _factory(branch, **kwargs):
        return _insert_employee(db_session, branch, **kwargs)
    return _factory

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
