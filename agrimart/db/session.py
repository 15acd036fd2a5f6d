import logging
from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session
from agrimart.core.config import settings
from agrimart.core.errors import TransientStoreError

logger = logging.getLogger(__name__)

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)

@contextmanager
def store_operation(session: Session, description: str):
    """Roll back and re-raise driver failures as TransientStoreError."""
    try:
        yield
    except (SQLAlchemyError, OverflowError) as e:
        # sqlite3 raises OverflowError for integers beyond 64 bits
        session.rollback()
        logger.warning("Store operation failed (%s): %s", description, e)
        raise TransientStoreError(f"{description} failed: {e}") from e
