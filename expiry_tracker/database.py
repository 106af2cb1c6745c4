from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from expiry_tracker.config import settings
from expiry_tracker.utils.logger import logger

def make_engine(database_url: str, **kwargs):
    """Build an engine; SQLite needs foreign keys switched on per connection"""
    if database_url.startswith("sqlite"):
        engine = create_engine(database_url, connect_args={"check_same_thread": False}, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(database_url, pool_pre_ping=True, **kwargs)
    return engine

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db(bind=None):
    """Create all tables registered on Base"""
    # Models must be imported so they register with Base.metadata
    from expiry_tracker import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)

def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()
