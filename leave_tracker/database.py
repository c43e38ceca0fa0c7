from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from leave_tracker.core.config import settings

DATABASE_URL = settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    # One file shared by the API workers and the seed script
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    Session per request. Services commit their own unit of work; the session
    is always closed here.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create the branch, employee, holiday and leave tables if missing."""
    from leave_tracker.models import branch, employee, public_holiday, leave_record  # noqa: F401
    Base.metadata.create_all(bind=engine)
